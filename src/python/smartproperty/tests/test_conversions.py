#-*-coding:utf-8-*-
"""
@package smartproperty.tests.test_conversions
@brief tests for smartproperty.conversions

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
from collections import OrderedDict

from smartproperty.tests.base import TestCase
from smartproperty import (ConversionRegistry,
                           conversions,
                           SmartProperties,
                           Property,
                           NoSuchConversionError,
                           UnsupportedConversionError)


registry = ConversionRegistry()


@registry.register('title', str)
def title(value):
    return value.title()


@registry.register('keys', dict)
def keys(value):
    return sorted(value)


class TitleProperty(Property):
    """A property using its own conversions"""
    __slots__ = ()

    conversions = registry

# end class TitleProperty


class Book(SmartProperties):
    name = TitleProperty(converts='title')

# end class Book


class TestConversions(TestCase):
    __slots__ = ()

    def test_registry(self):
        assert registry.names() == ['keys', 'title']
        assert registry.has_conversion('title')
        assert not registry.has_conversion('lower')
        assert registry.convert('title', 'hello world') == 'Hello World'

        # implementations are found along the mro
        assert registry.convert('keys', OrderedDict(b=1, a=2)) == ['a', 'b']
        self.assertRaises(UnsupportedConversionError, registry.convert, 'keys', ['a'])
        self.assertRaises(TypeError, registry.convert, 'keys', ['a'])
        self.assertRaises(NoSuchConversionError, registry.convert, 'lower', 'A')
        self.assertRaises(LookupError, registry.implementation, 'lower', str)

        # registration for object applies to everything
        fallback = ConversionRegistry()
        fallback.register('name')(lambda v: type(v).__name__)
        assert fallback.convert('name', 1) == 'int'
        assert fallback.convert('name', None) == 'NoneType'

    def test_defaults(self):
        assert conversions.convert('int', '5') == 5
        assert conversions.convert('int', 5.5) == 5
        assert conversions.convert('float', '1.5') == 1.5
        assert conversions.convert('str', 5) == '5'
        assert conversions.convert('bool', []) is False
        assert conversions.convert('strip', ' a ') == 'a'
        assert conversions.convert('upper', 'a') == 'A'
        assert conversions.convert('tuple', [1]) == (1,)
        assert conversions.convert('set', (1, 1)) == {1}
        assert conversions.convert('list', frozenset([1])) == [1]
        self.assertRaises(UnsupportedConversionError, conversions.convert, 'float', None)
        self.assertRaises(UnsupportedConversionError, conversions.convert, 'list', 'abc')

    def test_property_registry(self):
        assert Book(name='the hobbit').name == 'The Hobbit'
        self.assertRaises(UnsupportedConversionError, Book, name=5)
        self.assertRaises(NoSuchConversionError, TitleProperty, converts='lower')

# end class TestConversions
