"""
Tag dictionaries for translating IPTC dataset numbers to readable names
"""

from .iptc_keys import IPTC_KEYS

__all__ = ["IPTC_KEYS"]
