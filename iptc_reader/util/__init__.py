"""
Utility modules for iptc_reader
"""

from .buffer_view import BufferView
from .helpers import accumulate, pluralize_value, throw_error, undefined_if_empty

__all__ = [
    "BufferView",
    "accumulate",
    "pluralize_value",
    "throw_error",
    "undefined_if_empty",
]
