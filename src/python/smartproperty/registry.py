#-*-coding:utf-8-*-
"""
@package smartproperty.registry
@brief The per-type storage of Property definitions, including inherited ones

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['PropertyRegistry']

import logging

from collections import OrderedDict

from .base import Property
from .exceptions import NoSuchPropertyError

log = logging.getLogger('smartproperty.registry')


class PropertyRegistry(object):
    """An ordered mapping of property names to Property instances, resolved for one type.

    The resolved set of a type contains all properties of its participating ancestors, with the
    type's own declarations applied on top. A declaration replaces a previous one of the same name,
    keeping its position, or is appended otherwise.

    @note the registry is built when the type is created, reading it is cheap
    """
    __slots__ = (
                    '_owner',       # the type we resolve the properties for
                    '_properties'   # OrderedDict(name => Property)
                )

    # -------------------------
    ## @name Configuration
    # @{

    ## Attribute at which a type stores its registry
    CLASS_REGISTRY_ATTRIBUTE = '_property_registry'

    ## -- End Configuration -- @}

    def __init__(self, owner, properties=None):
        """Initialize this instance
        @param owner the type owning this registry
        @param properties an optional iterable of Property instances to start with"""
        self._owner = owner
        self._properties = OrderedDict()
        for prop in properties or ():
            self.declare(prop)
        # end for each initial property

    def __len__(self):
        return len(self._properties)

    def __iter__(self):
        """@return iterator over all Property instances in resolution order"""
        return iter(list(self._properties.values()))

    def __contains__(self, name):
        return name in self._properties

    def __repr__(self):
        return "%s(%s, [%s])" % (type(self).__name__, self._owner.__name__, ', '.join(self._properties))

    # -------------------------
    ## @name Interface
    # @{

    @classmethod
    def of(cls, owner):
        """@return the registry stored on owner itself, or None if owner doesn't have its own"""
        return owner.__dict__.get(cls.CLASS_REGISTRY_ATTRIBUTE)

    @classmethod
    def resolve(cls, owner, declarations=()):
        """@return a new registry for owner, holding all properties of its ancestors, and the given
        declarations on top of it
        @param owner a type whose method resolution order is already set
        @param declarations iterable of Property instances declared by owner itself, in order
        @note the ancestors are visited from the most distant to the closest one, and only contribute
        the properties they declare themselves. This way the registry picks the same definition as the
        attribute lookup, even if the inheritance graph is a diamond"""
        registry = cls(owner)
        for base in reversed(owner.__mro__[1:]):
            if cls.of(base) is None:
                continue
            # end skip types not using properties
            for value in list(base.__dict__.values()):
                if isinstance(value, Property):
                    registry.declare(value)
                # end ignore non-properties
            # end for each own property of base
        # end for each base

        for prop in declarations:
            registry.declare(prop)
        # end for each own property
        log.debug("Resolved %r", registry)
        return registry

    def declare(self, prop):
        """Add the given Property, replacing one with the same name if present
        @return prop"""
        assert isinstance(prop, Property), "Can only declare Property instances, got %r" % prop
        self._properties[prop.name()] = prop
        return prop

    def property(self, name):
        """@return the Property with the given name
        @throw NoSuchPropertyError"""
        try:
            return self._properties[name]
        except KeyError:
            raise NoSuchPropertyError("%s does not have a property called %s" % (self._owner.__name__, name))
        # end handle unknown name

    def names(self):
        """@return list of all property names in resolution order"""
        return list(self._properties)

    def copy(self):
        """@return an OrderedDict(name => Property) which can be changed without affecting us"""
        return OrderedDict(self._properties)

    def owner(self):
        return self._owner

    ## -- End Interface -- @}

# end class PropertyRegistry
