"""
Segment parser registry
"""

from .util.helpers import throw_error


class PluginRegistry:
    """Registry of segment parsers, keyed by segment type"""

    def __init__(self):
        self._plugins = {}

    def get(self, key):
        """Get a plugin class, or None if it is not registered"""
        return self._plugins.get(key)

    def __setitem__(self, key, value):
        """Support dict-like assignment: registry[key] = value"""
        self._plugins[key] = value

    def __getitem__(self, key):
        if key not in self._plugins:
            throw_not_loaded("segment parser", key)
        return self._plugins[key]

    def __contains__(self, key):
        return key in self._plugins

    def __iter__(self):
        """Iterate over (key, plugin) pairs"""
        return iter(self._plugins.items())


segment_parsers = PluginRegistry()


def throw_not_loaded(type_name, key):
    """Throw error for missing plugin"""
    throw_error(f"{type_name} '{key}' is not loaded")


def get_segment_type(buffer, offset, length=None):
    """Return the type of the first registered parser that accepts the segment"""
    for seg_type, Parser in segment_parsers:
        if Parser.can_handle(buffer, offset, length):
            return seg_type
    return None
