#-*-coding:utf-8-*-
"""
@package smartproperty.utility
@brief Routines to deal with default values

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
__all__ = ['is_mutable', 'smart_deepcopy']

from copy import deepcopy


# ==============================================================================
## @name Routines
# ------------------------------------------------------------------------------
## @{

def is_mutable(value):
    """Recursively check if the given value is mutable.

    A value is considered mutable if at least one contained value is mutable
    @param value a possibly nested value of built-in types
    @return true if value is mutable"""
    if isinstance(value, (str, bytes, int, float, type(None))):
        return False
    #end check immutable
    if isinstance(value, (list, dict, set, bytearray)):
        return True
    #end check mutable

    if isinstance(value, (tuple, frozenset)):
        for item in value:
            if is_mutable(item):
                return True
            #end abort recursion if item is mutable
        #end for each item to check in tuple
    #end handle tuple value

    return False

def smart_deepcopy(value):
    """Create a deep copy of value only if this is necessary as its value has mutable parts.
    @return a deep copy of value if value was mutable
    @note used for property defaults, which would otherwise be shared among all instances"""
    if is_mutable(value):
        return deepcopy(value)
    return value

## -- End Routines -- @}
