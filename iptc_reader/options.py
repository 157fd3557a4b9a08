"""
Options handling
"""

from collections.abc import Mapping

from .exceptions import InvalidOptionsError
from .tags import TagNameResolver

# Default options
DEFAULTS = {
    # Translate numeric tag ids into dictionary names
    "translateKeys": True,
    # Replacement tag dictionary (int -> name), None = built-in IPTC keys
    "dictionary": None,
}


class Options:
    """Options for one reader or parser instance"""

    def __init__(self, user_options=None):
        for key, value in DEFAULTS.items():
            setattr(self, key, value)

        if user_options is None or user_options is True:
            pass
        elif isinstance(user_options, Options):
            self._apply(vars(user_options))
        elif isinstance(user_options, dict):
            unknown = set(user_options) - set(DEFAULTS)
            if unknown:
                raise InvalidOptionsError(details=f"unknown keys: {sorted(unknown)}")
            self._apply(user_options)
        else:
            raise InvalidOptionsError(details=repr(user_options))

        if not isinstance(self.translateKeys, bool):
            raise InvalidOptionsError(
                details=f"translateKeys must be a bool, got {self.translateKeys!r}"
            )
        if self.dictionary is not None and not isinstance(self.dictionary, Mapping):
            raise InvalidOptionsError(
                details=f"dictionary must be a mapping, got {type(self.dictionary).__name__}"
            )

    def _apply(self, values):
        for key in DEFAULTS:
            if key in values:
                setattr(self, key, values[key])

    def __getitem__(self, key):
        """Allow subscript access: options['translateKeys']"""
        return getattr(self, key)

    def create_resolver(self):
        """Build the tag name resolver for these options"""
        return TagNameResolver(self.dictionary)
