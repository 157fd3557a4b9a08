"""
Segment parsers for embedded metadata blocks
"""

from .iptc import Iptc

__all__ = ["Iptc"]
