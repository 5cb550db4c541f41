#!/usr/bin/env python
from setuptools import setup, find_packages

pkg_root = 'src/python'

setup(name='smartproperty',
      version='0.1.0',
      description='Declarative properties with defaults, conversion, validation and required-ness',
      author='Sebastian Thiel',
      author_email='byronimo@gmail.com',
      url='https://github.com/Byron/bcore',
      packages=find_packages(pkg_root),
      package_dir={'' : pkg_root},
      python_requires='>=3.8',
      extras_require={'test' : ['pytest']}
     )
