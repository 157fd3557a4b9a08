"""
IptcReader class and module-level entry points

The reader is handed bytes that a container parser has already located:
either a whole JPEG APP13 segment inside a file buffer, or the raw value of
TIFF tag 34377 (a bare Photoshop image resources block).
"""

from typing import Dict, Optional

from aws_lambda_powertools import Logger

from .options import Options
from .plugins import get_segment_type, segment_parsers
from .segment_parsers import Iptc
from .tags import IptcKey, IptcValue
from .util.buffer_view import BufferView
from .util.helpers import undefined_if_empty

logger = Logger(service="iptc_reader")


class IptcReader:
    """
    Reads IPTC metadata out of Photoshop image resources
    """

    def __init__(self, options=None):
        """
        Initialize IptcReader

        Args:
            options: Options instance, dict, True, or None
        """
        self.options = options if isinstance(options, Options) else Options(options)
        self.errors = []

    def read_segment(self, container, offset):
        """
        Read IPTC data from a JPEG APP13 segment

        Args:
            container: File bytes or BufferView
            offset: Offset of the segment's 0xFF marker byte

        Returns:
            dict: Parsed IPTC data, or None when the segment is not a
            Photoshop segment or holds no IPTC records
        """
        file = container if isinstance(container, BufferView) else BufferView(container)

        seg_type = get_segment_type(file, offset)
        if seg_type is None:
            logger.debug("Segment is not a Photoshop APP13 segment", extra={"offset": offset})
            return None

        Parser = segment_parsers[seg_type]
        position = Parser.find_position(file, offset)
        if position is None:
            logger.debug("No IPTC resource in segment", extra={"offset": offset})
            return None

        chunk = file.subarray(position["start"], position["size"])
        return self._parse_chunk(Parser, chunk)

    def read_resources(self, block):
        """
        Read IPTC data from a bare Photoshop image resources block

        This is the layout stored in TIFF tag 34377, with no APP13 header.

        Args:
            block: Resource block bytes or BufferView

        Returns:
            dict: Parsed IPTC data, or None when there is none
        """
        block = block if isinstance(block, BufferView) else BufferView(block)

        header_length = Iptc.header_length(block, 0, block.byte_length)
        if header_length is None or header_length > block.byte_length:
            logger.debug("No IPTC resource in image resources block")
            return None

        return self._parse_chunk(Iptc, block.subarray(header_length))

    def _parse_chunk(self, Parser, chunk):
        parser = Parser(chunk, self.options)
        output = parser.parse()
        self.errors.extend(parser.errors)
        return undefined_if_empty(output)


def parse(data, options=None) -> Dict[IptcKey, IptcValue]:
    """
    Parse an IPTC record stream directly

    Args:
        data: Bytes or BufferView positioned at the start of the IPTC payload
        options: Options dict, True, or None

    Returns:
        dict: Parsed IPTC data (empty if no records were found)

    Examples:
        >>> parse(b"\\x1c\\x02\\x78\\x00\\x05Hello")
        {'Caption': 'Hello'}
    """
    return Iptc(data, options).parse()


def read_app13(container, offset, options=None) -> Optional[Dict[IptcKey, IptcValue]]:
    """Read IPTC data from the APP13 segment at ``offset`` in ``container``"""
    return IptcReader(options).read_segment(container, offset)


def read_photoshop_resources(block, options=None) -> Optional[Dict[IptcKey, IptcValue]]:
    """Read IPTC data from a TIFF tag 34377 value"""
    return IptcReader(options).read_resources(block)
