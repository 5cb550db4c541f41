#-*-coding:utf-8-*-
"""
@package smartproperty.exceptions
@brief Contains all exceptions used by the smartproperty package

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['Error', 'PropertyError', 'MissingRequiredPropertyError', 'UnsupportedConversionError',
           'InvalidPropertyValueError', 'NoSuchPropertyError', 'NoSuchConversionError',
           'NotDeletableError']


class Error(Exception):
    """Most foundational framework exception"""
    __slots__ = ()

# end class Error


class PropertyError(Error):
    """The base error for all property framework related errors"""
    __slots__ = ()

# end class PropertyError


class MissingRequiredPropertyError(PropertyError, ValueError):
    """Thrown if a required property was set to None"""
    __slots__ = (
                    'owner',    ## name of the type owning the property
                    'name'      ## name of the property
                )

    def __init__(self, owner, name):
        super(MissingRequiredPropertyError, self).__init__("%s requires the property %s to be set"
                                                           % (owner, name))
        self.owner = owner
        self.name = name

# end class MissingRequiredPropertyError


class UnsupportedConversionError(PropertyError, TypeError):
    """Thrown if a named conversion has no implementation for the type of the value to convert"""
    __slots__ = (
                    'value_type',   ## type of the value that couldn't be converted
                    'conversion'    ## name of the conversion
                )

    def __init__(self, value_type, conversion):
        super(UnsupportedConversionError, self).__init__("%s does not support the conversion '%s'"
                                                         % (value_type.__name__, conversion))
        self.value_type = value_type
        self.conversion = conversion

# end class UnsupportedConversionError


class InvalidPropertyValueError(PropertyError, ValueError):
    """Thrown if the validator of a property rejected a value"""
    __slots__ = (
                    'owner',    ## name of the type owning the property
                    'name',     ## name of the property
                    'value'     ## the rejected, possibly converted value
                )

    def __init__(self, owner, name, value):
        super(InvalidPropertyValueError, self).__init__("%s does not accept %r as value for the property %s"
                                                        % (owner, value, name))
        self.owner = owner
        self.name = name
        self.value = value

# end class InvalidPropertyValueError


class NoSuchPropertyError(PropertyError, AttributeError):
    """Thrown if a property was requested by a name that wasn't declared"""
    __slots__ = ()

# end class NoSuchPropertyError


class NoSuchConversionError(PropertyError, LookupError):
    """Thrown if a conversion was requested by a name that wasn't registered"""
    __slots__ = ()

# end class NoSuchConversionError


class NotDeletableError(PropertyError, AttributeError):
    """Thrown if a property value was about to be deleted"""
    __slots__ = ()

# end class NotDeletableError
