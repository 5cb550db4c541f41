#-*-coding:utf-8-*-
"""
@package smartproperty.base
@brief The Property definition, which is also the descriptor implementing its accessors

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['Property', 'contextual']

import re

from collections.abc import Container

from .conversions import conversions
from .exceptions import (MissingRequiredPropertyError,
                         InvalidPropertyValueError,
                         NoSuchConversionError,
                         NotDeletableError)

## Attribute on each instance at which the property values are stored
VALUE_STORE_ATTRIBUTE = '_property_values'

## Type of compiled regular expressions
pattern_type = type(re.compile(''))


# ==============================================================================
## @name Utilities
# ------------------------------------------------------------------------------
## @{

class contextual(object):
    """Marks a converter or validator callable as one that wants to see the instance whose property
    is being set.

    The wrapped callable is invoked as fun(instance, value), and may use properties of the instance
    that were set before, which during construction are all properties declared earlier.
    @code
    class Range(SmartProperties):
        low = Property(default=0)
        high = Property(accepts=contextual(lambda self, value: value >= self.low))
    @endcode
    """
    __slots__ = ('fun')

    def __init__(self, fun):
        assert callable(fun), "%r must be callable" % fun
        self.fun = fun

    def __call__(self, instance, value):
        return self.fun(instance, value)

    def __repr__(self):
        return "contextual(%r)" % self.fun

# end class contextual


def value_store(instance):
    """@return the dict holding all property values of the given instance, created on demand"""
    try:
        return getattr(instance, VALUE_STORE_ATTRIBUTE)
    except AttributeError:
        store = dict()
        setattr(instance, VALUE_STORE_ATTRIBUTE, store)
        return store
    # end handle missing store

## -- End Utilities -- @}


# ==============================================================================
## @name Descriptors
# ------------------------------------------------------------------------------
## @{

class Property(object):
    """A declared attribute with an optional default, converter, validator, and a required flag.

    Instances are descriptors, and are meant to be placed into the body of a SmartProperties
    subclass, which sets their name and registers them. Every write, including the ones done during
    construction, runs through set(), which performs the required-check, conversion, validation and
    finally stores the value, in that order.

    @note if a Property is accessed through the class, it returns itself
    """
    __slots__ = (
                    '_name',          # The name of the property, also the name it is stored in the clsdict
                    '_default',       # value to use if none was provided during construction
                    '_converter',     # None, callable, contextual or name of a conversion
                    '_validator',     # None, callable, contextual, type(s), pattern, container or value
                    '_required',      # if True, None is not accepted as value
                    '_description',   # A descriptive text about the Property
                )

    # -------------------------
    ## @name Configuration
    # @{

    ## The ConversionRegistry to resolve named converters with
    conversions = conversions

    ## -- End Configuration -- @}

    def __init__(self, default=None, converts=None, accepts=None, required=False, name=None,
                 description=""):
        """Intialize this instance
        @param default value to use if no value is provided during construction
        @param converts a callable taking the value and returning the converted one, a contextual callable,
        or the name of a conversion in our conversions registry
        @param accepts a callable returning a truthy value for valid values, a contextual callable,
        a type or tuple of types, a compiled regular expression, a container of valid values,
        or a value to compare with
        @param required if True, None will not be accepted as value
        @param name the name which equals the attribute that carries us in our owner class' dict
        If None, it will be set by the PropertyMeta class.
        @param description A human-readable description about the purpose of the property
        @throw NoSuchConversionError if converts names an unknown conversion"""
        if isinstance(converts, str) and not self.conversions.has_conversion(converts):
            raise NoSuchConversionError("No conversion named '%s' was registered" % converts)
        # end verify conversion names early
        self._name = name
        self._default = default
        self._converter = converts
        self._validator = accepts
        self._required = bool(required)
        self._description = description

    def __repr__(self):
        return "%s(%r, default=%r, required=%s)" % (type(self).__name__, self._name, self._default,
                                                     self._required)

    # -------------------------
    ## @name Descriptor Interface
    # @{

    def __get__(self, instance, cls):
        """@return our value on instance, or None if it wasn't set yet
        @note if we are accessed through the class, we always return ourselves"""
        if instance is None:
            return self
        # end handle class access
        return self.get(instance)

    def __set__(self, instance, value):
        self.set(value, instance)

    def __delete__(self, instance):
        raise NotDeletableError("Can't delete the property %s, set it to None instead" % self._name)

    ## -- End Descriptor Interface -- @}

    # -------------------------
    ## @name Interface
    # @{

    def convert(self, value, instance):
        """@return value as transformed by our converter, or value if there is no converter
        @param value a value which is not None
        @param instance the instance whose property is about to be set
        @throw UnsupportedConversionError if a named conversion can't handle the type of value
        @throw InvalidPropertyValueError if a named conversion rejects the value with a ValueError,
        like 'int' does for 'five'. Exceptions of callable converters are passed on unchanged"""
        converter = self._converter
        if converter is None:
            return value
        if isinstance(converter, contextual):
            return converter(instance, value)
        if isinstance(converter, str):
            try:
                return self.conversions.convert(converter, value)
            except ValueError as err:
                raise InvalidPropertyValueError(type(instance).__name__, self._name, value) from err
            # end handle values the conversion can't deal with
        return converter(value)

    def is_valid(self, value, instance):
        """@return True if our validator accepts the given value
        @note None is always valid, required-ness is checked separately"""
        validator = self._validator
        if value is None or validator is None:
            return True
        # end handle no validation
        if isinstance(validator, contextual):
            return bool(validator(instance, value))
        if isinstance(validator, type) or (isinstance(validator, tuple) and validator
                                           and all(isinstance(v, type) for v in validator)):
            return isinstance(value, validator)
        if isinstance(validator, pattern_type):
            return isinstance(value, type(validator.pattern)) and validator.search(value) is not None
        if callable(validator):
            return bool(validator(value))
        if isinstance(validator, (str, bytes)):
            return validator == value
        if isinstance(validator, Container):
            try:
                return value in validator
            except TypeError:
                # unhashable values can't be in sets or dicts
                return False
            # end handle unhashable
        return validator == value

    def prepare(self, value, instance):
        """@return value after it was checked for required-ness, converted and validated
        @param value the value to prepare, may be None
        @param instance the instance whose property is about to be set
        @throw MissingRequiredPropertyError
        @throw UnsupportedConversionError
        @throw InvalidPropertyValueError"""
        if self._required and value is None:
            raise MissingRequiredPropertyError(type(instance).__name__, self._name)
        # end handle required

        if value is not None:
            value = self.convert(value, instance)
        # end convert

        if not self.is_valid(value, instance):
            raise InvalidPropertyValueError(type(instance).__name__, self._name, value)
        # end handle validation
        return value

    def set(self, value, instance):
        """Prepare value and store it on the given instance
        @note the previous value is kept if preparation fails"""
        value_store(instance)[self._name] = self.prepare(value, instance)

    def get(self, instance):
        """@return our value on the given instance, or None if it was never set"""
        return value_store(instance).get(self._name)

    ## -- End Interface -- @}

    # -------------------------
    ## @name Accessors
    # @{

    def name(self):
        assert self._name is not None, "Property needs its name to be set"
        return self._name

    def default(self):
        return self._default

    def converter(self):
        return self._converter

    def validator(self):
        return self._validator

    def description(self):
        return self._description

    def is_required(self):
        return self._required

    def set_required(self, required):
        """Change our required flag
        @return this instance"""
        self._required = bool(required)
        return self

    ## -- End Accessors -- @}

# end class Property

## -- End Descriptors -- @}
