"""
Tag constants and key resolution
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from .dicts import IPTC_KEYS

# Output keys are dictionary names, or the raw tag id when the tag is unknown
IptcKey = Union[str, int]
# A tag seen once keeps its string, repeated tags become a list
IptcValue = Union[str, List[str]]

# Photoshop Image Resources
HEADER_8 = 0x38  # '8' - first byte of 8BIM
HEADER_8BIM = 0x3842494D  # '8BIM' - Photoshop chunk signature
HEADER_IPTC = 0x0404  # IPTC-NAA resource id
LEGACY_NAME_LENGTH = 4  # pre-Photoshop 6 resources reserve 4 bytes for the name

# JPEG APP13
MARKER = 0xED
PHOTOSHOP = "Photoshop"

# IPTC tagged data set: 0x1C 0x02 [tag] [size_hi] [size_lo] [data...]
TAG_MARKER = 0x1C
APPLICATION_RECORD = 0x02
RECORD_HEADER_SIZE = 5


class TagNameResolver:
    """Translate numeric IPTC tag ids through a read-only dictionary"""

    def __init__(self, dictionary: Optional[Mapping[int, str]] = None):
        if dictionary is None:
            self.dictionary = IPTC_KEYS
        else:
            self.dictionary = MappingProxyType(dict(dictionary))

    def resolve(self, tag: int) -> IptcKey:
        # Unknown tags keep their numeric id as the key
        return self.dictionary.get(tag) or tag

    def __contains__(self, tag):
        return tag in self.dictionary
