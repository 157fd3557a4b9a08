"""Custom exceptions for iptc_reader."""


class IptcReaderError(Exception):
    """Base exception for iptc_reader errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class OutOfRangeError(IptcReaderError, IndexError):
    """Raised when a read falls outside the bounds of a BufferView."""

    def __init__(self, offset: int, size: int, length: int):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(
            "Read out of bounds",
            f"offset {offset} with size {size} (length: {length})",
        )


class TruncatedRecordError(IptcReaderError):
    """
    A tagged data set whose header or value runs past the end of the buffer.

    The scanner records these and keeps going; they are never raised out of
    a parse.
    """

    def __init__(self, offset: int, tag: int = None, size: int = None, available: int = 0):
        self.offset = offset
        self.tag = tag
        self.size = size
        self.available = available
        if size is None:
            details = f"record header at offset {offset} needs 5 bytes, {available} left"
        else:
            details = (
                f"tag {tag} at offset {offset} declares {size} bytes, {available} left"
            )
        super().__init__("Truncated IPTC record", details)


class InvalidOptionsError(IptcReaderError):
    """Exception raised for unsupported option values."""

    def __init__(self, message: str = "Invalid options argument", details: str = None):
        super().__init__(message, details)
