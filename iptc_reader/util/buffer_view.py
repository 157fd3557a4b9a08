"""
BufferView - bounds-checked reads over an in-memory byte buffer

Every read is checked against the extent of the view. Reads that would
leave it raise OutOfRangeError instead of wrapping or returning short data.
"""

import struct

from ..exceptions import OutOfRangeError


class BufferView:
    """
    A view into a buffer that allows reading unsigned integers and strings
    with big-endian or little-endian byte order
    """

    def __init__(self, data, offset=0, length=None, big_endian=True):
        """
        Initialize BufferView

        Args:
            data: bytes, bytearray, memoryview, or BufferView
            offset: starting offset in the data
            length: length of the view (None = rest of data)
            big_endian: True for big-endian, False for little-endian
        """
        if isinstance(data, BufferView):
            # Share the parent's memory, offsets are relative to the parent view
            self._data = data._data
            base = data._offset
            available = data._length - offset
        elif isinstance(data, (bytes, bytearray)):
            self._data = memoryview(data)
            base = 0
            available = len(self._data) - offset
        elif isinstance(data, memoryview):
            self._data = data
            base = 0
            available = len(self._data) - offset
        else:
            raise TypeError("Data must be bytes, bytearray, memoryview, or BufferView")

        if offset < 0 or available < 0:
            raise OutOfRangeError(offset, 0, available + offset)

        if length is None:
            length = available
        elif length < 0 or length > available:
            raise OutOfRangeError(offset, length, available + offset)

        self._offset = base + offset
        self._length = length
        self._big_endian = big_endian
        self._endian = ">" if big_endian else "<"

    @property
    def byte_length(self):
        """Total length of the view"""
        return self._length

    @property
    def byte_offset(self):
        """Starting offset in the underlying buffer"""
        return self._offset

    @property
    def big_endian(self):
        return self._big_endian

    def _check_bounds(self, offset, size):
        if offset < 0 or size < 0 or offset + size > self._length:
            raise OutOfRangeError(offset, size, self._length)

    def _unpack(self, fmt, offset, size):
        self._check_bounds(offset, size)
        start = self._offset + offset
        return struct.unpack(self._endian + fmt, self._data[start : start + size])[0]

    def get_uint8(self, offset):
        """Read unsigned 8-bit integer"""
        self._check_bounds(offset, 1)
        return self._data[self._offset + offset]

    def get_uint16(self, offset):
        """Read unsigned 16-bit integer"""
        return self._unpack("H", offset, 2)

    def get_uint32(self, offset):
        """Read unsigned 32-bit integer"""
        return self._unpack("I", offset, 4)

    def get_bytes(self, offset, length):
        """Read bytes from the view"""
        self._check_bounds(offset, length)
        start = self._offset + offset
        return bytes(self._data[start : start + length])

    def get_string(self, offset, length, encoding="utf-8"):
        """
        Read a fixed-length string

        The text ends at the first NUL byte, if any. Bytes that do not decode
        become U+FFFD rather than failing the read.
        """
        data = self.get_bytes(offset, length)
        null_pos = data.find(b"\x00")
        if null_pos >= 0:
            data = data[:null_pos]
        return data.decode(encoding, errors="replace")

    def subarray(self, offset, length=None):
        """
        Create a new view of a subarray

        Args:
            offset: Starting offset relative to this view
            length: Length of subarray (None = rest of data)

        Returns:
            BufferView: New view sharing the same memory
        """
        return BufferView(self, offset, length, self._big_endian)

    def __len__(self):
        return self._length

    def __getitem__(self, key):
        """Allow array-like access"""
        if isinstance(key, slice):
            start, stop, _ = key.indices(self._length)
            return self.get_bytes(start, max(stop - start, 0))
        return self.get_uint8(key)
