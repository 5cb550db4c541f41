#-*-coding:utf-8-*-
"""
@package smartproperty.conversions
@brief A registry of named conversions, usable through the `converts` option of a Property

A conversion is looked up by name when the Property is declared, and by the type of the value
when it is converted. Implementations are registered per type, and are found along the
value type's method resolution order, which allows registering a fallback for `object`.

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['ConversionRegistry', 'conversions']

import logging

from collections import OrderedDict

from .exceptions import (NoSuchConversionError,
                         UnsupportedConversionError)

log = logging.getLogger('smartproperty.conversions')


class ConversionRegistry(object):
    """Maps conversion names to per-type implementations

    Example usage:
    @code
    registry = ConversionRegistry()

    @registry.register('title', str)
    def title(value):
        return value.title()

    registry.convert('title', 'hello world') == 'Hello World'
    @endcode
    """
    __slots__ = (
                    '_conversions'  # name => OrderedDict(type => callable)
                )

    def __init__(self):
        self._conversions = dict()

    # -------------------------
    ## @name Interface
    # @{

    def register(self, name, *types):
        """@return a decorator registering the decorated callable as conversion called name for all
        the given types
        @param name name of the conversion, as used with Property(converts=name)
        @param types any amount of types the conversion can handle. If unset, object is assumed,
        making the conversion applicable to all values
        @note a previous registration for the same name and type is replaced"""
        types = types or (object,)

        def decorator(fun):
            implementations = self._conversions.setdefault(name, OrderedDict())
            for typ in types:
                implementations[typ] = fun
            # end for each type
            log.debug("Registered conversion '%s' for %s", name, ', '.join(t.__name__ for t in types))
            return fun
        # end decorator
        return decorator

    def has_conversion(self, name):
        """@return True if a conversion with the given name was registered"""
        return name in self._conversions

    def names(self):
        """@return sorted list of all registered conversion names"""
        return sorted(self._conversions)

    def implementation(self, name, value_type):
        """@return the callable converting values of value_type using the conversion called name
        @throw NoSuchConversionError if there is no conversion with that name
        @throw UnsupportedConversionError if no implementation supports value_type"""
        try:
            implementations = self._conversions[name]
        except KeyError:
            raise NoSuchConversionError("No conversion named '%s' was registered" % name)
        # end handle unknown name

        for typ in value_type.__mro__:
            if typ in implementations:
                return implementations[typ]
        # end for each type in mro
        raise UnsupportedConversionError(value_type, name)

    def convert(self, name, value):
        """@return value converted by the conversion called name
        @throw NoSuchConversionError
        @throw UnsupportedConversionError"""
        return self.implementation(name, type(value))(value)

    ## -- End Interface -- @}

# end class ConversionRegistry


# ==============================================================================
## @name Default Registry
# ------------------------------------------------------------------------------
# The registry used by all Property instances unless configured otherwise
## @{

conversions = ConversionRegistry()

conversions.register('str')(str)
conversions.register('bool')(bool)
conversions.register('int', int, float, str, bytes, bool)(int)
conversions.register('float', int, float, str)(float)
conversions.register('lower', str)(str.lower)
conversions.register('upper', str)(str.upper)
conversions.register('strip', str)(str.strip)
conversions.register('list', list, tuple, set, frozenset)(list)
conversions.register('tuple', list, tuple, set, frozenset)(tuple)
conversions.register('set', list, tuple, set, frozenset)(set)

## -- End Default Registry -- @}
