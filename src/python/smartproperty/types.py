#-*-coding:utf-8-*-
"""
@package smartproperty.types
@brief The SmartProperties base type, which resolves declared properties and initializes instances from them

Derive from SmartProperties and declare properties in the class body:
@snippet smartproperty/tests/doc/test_examples.py LanguageSettings

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['PropertyMeta', 'SmartProperties']

import logging

from .base import (Property,
                   VALUE_STORE_ATTRIBUTE)
from .registry import PropertyRegistry
from .utility import smart_deepcopy
from .exceptions import NoSuchPropertyError

log = logging.getLogger('smartproperty.types')


# ==============================================================================
## @name MetaClasses
# ------------------------------------------------------------------------------
## @{

class PropertyMeta(type):
    """A metaclass to set the names of all Property descriptors and to resolve the registry of the new type,
    which includes the properties of all its bases"""
    __slots__ = ()

    ## The type we use to store the properties of each type
    RegistryType = PropertyRegistry

    @classmethod
    def _resolve_descriptor_names(cls, clsdict):
        """assure all descriptors have their name set
        @return list of all Property instances in clsdict, in order of declaration"""
        out = list()
        for name, value in clsdict.items():
            if not isinstance(value, Property):
                continue
            # end ignore non-properties

            value._name = name
            out.append(value)
        # end for each name, value pair
        return out

    def __new__(metacls, name, bases, clsdict):
        declarations = metacls._resolve_descriptor_names(clsdict)
        new_type = super(PropertyMeta, metacls).__new__(metacls, name, bases, clsdict)
        setattr(new_type, metacls.RegistryType.CLASS_REGISTRY_ATTRIBUTE,
                metacls.RegistryType.resolve(new_type, declarations))
        return new_type

# end class PropertyMeta

## -- End MetaClasses -- @}


# ==============================================================================
## @name Types
# ------------------------------------------------------------------------------
## @{

class SmartProperties(object, metaclass=PropertyMeta):
    """A base for types with declared properties.

    Each Property in the class body becomes an attribute that converts and validates every value
    assigned to it. Instances are initialized from a mapping of property names to values, using
    the default of each property that wasn't mentioned.
    """
    __slots__ = (VALUE_STORE_ATTRIBUTE, '__weakref__')

    # -------------------------
    ## @name Configuration
    # @{

    ## The type define_property() instantiates
    PropertyType = Property

    ## What to do with values in the construction mapping that don't belong to a property
    ## One of 'ignore', 'warn' or 'raise'
    unknown_attributes = 'ignore'

    ## -- End Configuration -- @}

    def __init__(self, attrs=None, /, **kwargs):
        """Initialize all our properties
        @param attrs a mapping of property names to values, or None. It will not be changed
        @param kwargs property names and values, taking precedence over the ones in attrs
        @throw MissingRequiredPropertyError, UnsupportedConversionError, InvalidPropertyValueError
        Construction stops at the first property which fails, leaving all following ones unset
        @throw NoSuchPropertyError if attrs contains names we don't know about, and unknown_attributes is 'raise'
        """
        attrs = dict(attrs or dict())
        attrs.update(kwargs)

        for prop in self._registry():
            name = prop.name()
            value = attrs.pop(name) if name in attrs else smart_deepcopy(prop.default())
            setattr(self, name, value)
        # end for each property

        if attrs:
            self._handle_unknown_attributes(attrs)
        # end handle leftovers

    def __repr__(self):
        values = ', '.join('%s=%r' % (name, self.read_property(name)) for name in self._registry().names())
        return "%s(%s)" % (type(self).__name__, values)

    # -------------------------
    ## @name Protected Methods
    # @{

    @classmethod
    def _registry(cls):
        return PropertyRegistry.of(cls)

    def _handle_unknown_attributes(self, attrs):
        """Called with all attributes that were not consumed during construction"""
        names = ', '.join(sorted(str(name) for name in attrs))
        mode = self.unknown_attributes
        if mode == 'raise':
            raise NoSuchPropertyError("%s does not have properties called %s" % (type(self).__name__, names))
        elif mode == 'warn':
            log.warning("%s ignored unknown attributes: %s", type(self).__name__, names)
        else:
            assert mode == 'ignore', "invalid unknown_attributes mode: %r" % mode
        # end handle mode

    ## -- End Protected Methods -- @}

    # -------------------------
    ## @name Interface
    # @{

    @classmethod
    def properties(cls):
        """@return OrderedDict(name => Property) of all our properties, including the inherited ones.
        Changing it will not affect this type"""
        return cls._registry().copy()

    @classmethod
    def define_property(cls, name, **options):
        """Declare a new property on this type after it was created.

        This is equivalent to declaring a Property in the class body, and replaces an existing property
        of the same name.
        @param name the name of the property, and of the attribute providing access to it
        @param options all arguments supported by Property, i.e. default, converts, accepts, required
        @return the new Property, whose required flag may still be changed
        @note types derived from this one before the call will not see the new property"""
        prop = cls.PropertyType(name=name, **options)
        setattr(cls, name, prop)
        cls._registry().declare(prop)
        log.debug("Defined property %s on %s", name, cls.__name__)
        return prop

    def read_property(self, name):
        """@return the value of the property called name, bypassing any accessor override on our type
        @throw NoSuchPropertyError"""
        return self._registry().property(name).get(self)

    def write_property(self, name, value):
        """Set the value of the property called name, bypassing any accessor override on our type.
        The value is converted and validated as usual
        @throw NoSuchPropertyError"""
        self._registry().property(name).set(value, self)

    ## -- End Interface -- @}

# end class SmartProperties

## -- End Types -- @}
