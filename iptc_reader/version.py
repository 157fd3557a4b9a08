"""Version information for iptc_reader."""

__version__ = "0.1.0"
