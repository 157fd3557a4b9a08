"""
Segment parser base class
"""

from aws_lambda_powertools import Logger

from .options import Options
from .util.buffer_view import BufferView

logger = Logger(service="iptc_reader", child=True)


class AppSegmentParserBase:
    """
    Base class for APP segment parsers
    """

    header_length = 4
    type = None

    @classmethod
    def can_handle(cls, buffer, offset, length=None):
        """Check if this parser can handle the segment"""
        return False

    @classmethod
    def find_position(cls, buffer, offset):
        """
        Find position and size of segment payload

        Returns:
            dict with offset, length, headerLength, start, size, end, or None
            when the parser finds no payload in the segment
        """
        # Length at offset+2 counts itself but not the 0xFF 0xEn marker
        length = buffer.get_uint16(offset + 2) + 2

        if callable(cls.header_length):
            header_length = cls.header_length(buffer, offset, length)
        else:
            header_length = cls.header_length

        if header_length is None:
            return None

        size = length - header_length
        if size < 0:
            logger.debug(
                "Segment header runs past the segment end",
                extra={"offset": offset, "length": length, "header_length": header_length},
            )
            return None

        start = offset + header_length
        return {
            "offset": offset,
            "length": length,
            "headerLength": header_length,
            "start": start,
            "size": size,
            "end": start + size,
        }

    def normalize_input(self, input_data):
        """Normalize input to BufferView"""
        if isinstance(input_data, BufferView):
            return input_data
        return BufferView(input_data)

    def __init__(self, chunk, options=None):
        """
        Initialize segment parser

        Args:
            chunk: BufferView (or bytes) of segment payload
            options: Options instance, dict, or None
        """
        self.chunk = self.normalize_input(chunk)
        self.options = options if isinstance(options, Options) else Options(options)
        self.resolver = self.options.create_resolver()
        self.errors = []
        self.raw = {}

    def translate_key(self, tag):
        """Resolve a raw tag id to its output key"""
        if self.options.translateKeys:
            return self.resolver.resolve(tag)
        return tag

    @property
    def output(self):
        """Get parser output"""
        return dict(self.raw)

    def handle_error(self, error):
        """Record a recoverable parsing error"""
        logger.warning(str(error), extra={"segment": self.type})
        self.errors.append(error)
