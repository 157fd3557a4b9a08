"""
Helper utility functions
"""

from ..exceptions import IptcReaderError


def throw_error(message, details=None):
    """Raise an IptcReaderError with the given message"""
    raise IptcReaderError(message, details)


def undefined_if_empty(obj):
    """Return None if object is empty, otherwise return the object"""
    if obj is None:
        return None
    if isinstance(obj, dict) and len(obj) == 0:
        return None
    return obj


def pluralize_value(existing_val, new_val):
    """
    Combine a newly read value with whatever is already stored under its key

    Some IPTC tags repeat (e.g. Keywords). The first occurrence is stored as
    a plain string, the second turns it into a list, later ones append.

    Args:
        existing_val: Existing value (None, str, or list)
        new_val: New value to add

    Returns:
        str or list: Single value or list of values
    """
    if existing_val is None:
        return new_val
    if isinstance(existing_val, list):
        existing_val.append(new_val)
        return existing_val
    return [existing_val, new_val]


def accumulate(mapping, key, value):
    """Fold ``value`` into ``mapping[key]`` and return the mapping"""
    mapping[key] = pluralize_value(mapping.get(key), value)
    return mapping
