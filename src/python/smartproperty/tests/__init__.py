#-*-coding:utf-8-*-
"""
@package smartproperty.tests
@brief tests for smartproperty

@copyright 2012 Sebastian Thiel
"""
__all__ = []
