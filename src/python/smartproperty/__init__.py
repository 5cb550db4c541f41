#-*-coding:utf-8-*-
"""
@package smartproperty
@brief A declarative framework for attributes with defaults, conversion, validation and required-ness

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__version__ = '0.1.0'

from .exceptions import *
from .conversions import *
from .base import *
from .registry import *
from .types import *
