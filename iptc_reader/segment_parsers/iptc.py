"""
IPTC segment parser - IPTC metadata (copyright, captions, keywords)

IPTC (International Press Telecommunications Council) metadata contains
editorial information like captions, copyright, keywords, credits, etc.

IPTC is embedded in Photoshop APP13 segments (marker 0xED), or in TIFF tag
34377. Both use Photoshop's "Image Resources" format with 8BIM chunks.
IPTC data is in the 8BIM chunk with ID 0x0404.

Reference: http://fileformats.archiveteam.org/wiki/Photoshop_Image_Resources
Reference: https://www.adobe.com/devnet-apps/photoshop/fileformatashtml/

Known limitation: the record scanner moves one byte at a time and never
jumps over a value it has read. A 0x1C 0x02 pair inside a value is
therefore read as the start of another record. This keeps the scanner
working on streams with garbage or misaligned leading bytes.
"""

from aws_lambda_powertools import Logger

from ..exceptions import TruncatedRecordError
from ..parser import AppSegmentParserBase
from ..plugins import segment_parsers
from ..tags import (
    APPLICATION_RECORD,
    HEADER_8,
    HEADER_8BIM,
    HEADER_IPTC,
    LEGACY_NAME_LENGTH,
    MARKER,
    PHOTOSHOP,
    RECORD_HEADER_SIZE,
    TAG_MARKER,
)
from ..util.helpers import accumulate

logger = Logger(service="iptc_reader", child=True)


class Iptc(AppSegmentParserBase):
    """Parser for IPTC metadata in Photoshop image resources"""

    type = "iptc"

    @staticmethod
    def can_handle(buffer, offset, length=None):
        """
        Check if this is a Photoshop APP13 segment

        Only the APP13 marker and the 'Photoshop' signature are checked.
        Whether the segment actually carries IPTC is decided by
        header_length().

        Args:
            buffer: BufferView of file data
            offset: Offset of segment (at the 0xFF marker byte)
            length: Length of segment, unused

        Returns:
            bool: True if this is a Photoshop APP13 segment
        """
        if offset < 0 or offset + 4 + len(PHOTOSHOP) > buffer.byte_length:
            return False
        return (
            buffer.get_uint8(offset + 1) == MARKER
            and buffer.get_string(offset + 4, len(PHOTOSHOP)) == PHOTOSHOP
        )

    @staticmethod
    def header_length(chunk, offset, length):
        """
        Calculate header length to skip before IPTC data

        The header includes everything up to and including the 8BIM chunk
        header of the IPTC resource. The resource name is a Pascal string
        padded to an even number of bytes.

        Args:
            chunk: BufferView of file data
            offset: Offset of segment
            length: Length of segment

        Returns:
            int or None: Header length to skip, None when there is no IPTC
        """
        i = Iptc.contains_iptc_8bim(chunk, offset, length)
        if i is None:
            return None

        name_offset = offset + i + 7
        if name_offset >= chunk.byte_length:
            logger.debug(
                "IPTC resource header is truncated", extra={"offset": offset + i}
            )
            return None

        # Get length of name header (padded to even bytes)
        name_header_length = chunk.get_uint8(name_offset)
        if name_header_length % 2 != 0:
            name_header_length += 1

        # Pre-Photoshop 6 resources have no name header, 4 bytes are reserved instead
        if name_header_length == 0:
            name_header_length = LEGACY_NAME_LENGTH

        return i + 8 + name_header_length

    @staticmethod
    def contains_iptc_8bim(chunk, offset, length):
        """
        Search for IPTC 8BIM chunk in Photoshop data

        Args:
            chunk: BufferView of file data
            offset: Offset to start search
            length: Length to search within

        Returns:
            int or None: Offset of IPTC chunk relative to start, or None
        """
        for i in range(length):
            if Iptc.is_iptc_segment_head(chunk, offset + i):
                return i
        return None

    @staticmethod
    def is_iptc_segment_head(chunk, offset):
        """
        Check if offset points to IPTC 8BIM chunk header

        This is called on each byte while traversing, so the first byte is
        checked before reading more data.
        """
        if offset + 6 > chunk.byte_length:
            return False

        if chunk.get_uint8(offset) != HEADER_8:
            return False

        return (
            chunk.get_uint32(offset) == HEADER_8BIM
            and chunk.get_uint16(offset + 4) == HEADER_IPTC
        )

    def scan(self):
        """
        Yield (tag, value) for every tagged data set in the chunk

        Format: 0x1C 0x02 [tag_id] [size_hi] [size_lo] [data...]

        Records that run past the end of the chunk are reported through
        handle_error() and skipped.
        """
        chunk = self.chunk
        length = chunk.byte_length

        for offset in range(length - 1):
            # Read bytes separately to avoid unnecessary reads when iterating
            if chunk.get_uint8(offset) != TAG_MARKER:
                continue
            if chunk.get_uint8(offset + 1) != APPLICATION_RECORD:
                continue

            record = self.read_record(offset)
            if isinstance(record, TruncatedRecordError):
                self.handle_error(record)
            else:
                yield record

    def read_record(self, offset):
        """
        Read one tagged data set starting at its marker

        Returns:
            tuple: (tag id, decoded value), or a TruncatedRecordError when
            the header or value does not fit in the chunk
        """
        chunk = self.chunk
        available = chunk.byte_length - offset
        if available < RECORD_HEADER_SIZE:
            return TruncatedRecordError(offset, available=available)

        tag = chunk.get_uint8(offset + 2)
        size = chunk.get_uint16(offset + 3)
        if size > available - RECORD_HEADER_SIZE:
            return TruncatedRecordError(offset, tag, size, available - RECORD_HEADER_SIZE)

        return tag, chunk.get_string(offset + RECORD_HEADER_SIZE, size)

    def parse(self):
        """
        Parse IPTC metadata tags

        Keys are resolved before values are stored, so tags that share a
        name are folded together in scan order.

        Returns:
            dict: Parsed IPTC data, in the order tags were found
        """
        for tag, val in self.scan():
            # Store value (may be repeated, so pluralize)
            accumulate(self.raw, self.translate_key(tag), val)

        logger.debug(
            "Parsed IPTC records",
            extra={"tags": len(self.raw), "errors": len(self.errors)},
        )
        return self.output


# Register IPTC segment parser
segment_parsers["iptc"] = Iptc
