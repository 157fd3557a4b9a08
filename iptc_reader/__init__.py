"""
iptc_reader - IPTC-NAA metadata from Photoshop image resources

Reads caption, keyword, byline and other press metadata out of JPEG APP13
segments and TIFF tag 34377 values.
"""

from .core import IptcReader, parse, read_app13, read_photoshop_resources
from .exceptions import (
    InvalidOptionsError,
    IptcReaderError,
    OutOfRangeError,
    TruncatedRecordError,
)
from .options import Options
from .segment_parsers import Iptc
from .tags import TagNameResolver
from .version import __version__

__all__ = [
    "IptcReader",
    "Iptc",
    "Options",
    "TagNameResolver",
    "parse",
    "read_app13",
    "read_photoshop_resources",
    "IptcReaderError",
    "InvalidOptionsError",
    "OutOfRangeError",
    "TruncatedRecordError",
    "__version__",
]
