#-*-coding:utf-8-*-
"""
@package smartproperty.tests.doc
@brief documentation examples for smartproperty

@copyright 2012 Sebastian Thiel
"""
__all__ = []
