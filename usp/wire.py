"""Protobuf wire primitives shared by the Msg and Record codecs."""

import struct

# decoder._DecodeVarint, encoder._VarintBytes and encoder._VarintSize are
# internal to protobuf; tests/test_wire.py checks their output byte for byte.
from google.protobuf.internal import decoder, encoder, wire_format
from google.protobuf.message import DecodeError as ProtobufDecodeError

from .constants import U32_MAX, U64_MAX
from .errors import DecodeError, EncodeError

# ----------------------------------------------------------------------------
# Wire types
# ----------------------------------------------------------------------------

WIRETYPE_VARINT = wire_format.WIRETYPE_VARINT
WIRETYPE_FIXED64 = wire_format.WIRETYPE_FIXED64
WIRETYPE_LENGTH_DELIMITED = wire_format.WIRETYPE_LENGTH_DELIMITED
WIRETYPE_START_GROUP = wire_format.WIRETYPE_START_GROUP
WIRETYPE_END_GROUP = wire_format.WIRETYPE_END_GROUP
WIRETYPE_FIXED32 = wire_format.WIRETYPE_FIXED32

_FIXED32 = struct.Struct("<I")


def make_key(number: int, wire_type: int) -> int:
    """Return the tag value (field number and wire type) prefixing a field."""
    return wire_format.PackTag(number, wire_type)


def varint_size(value: int) -> int:
    """Number of bytes needed to encode ``value`` as an unsigned varint."""
    if value < 0:
        return 10
    return encoder._VarintSize(value)


def tag_size(number: int) -> int:
    """Number of bytes taken by the tag of field ``number``."""
    return wire_format.TagByteSize(number)


def length_delimited_size(length: int) -> int:
    """Size of a length-delimited payload including its length prefix."""
    return varint_size(length) + length


# ----------------------------------------------------------------------------
# Writer
# ----------------------------------------------------------------------------


class Writer:
    """Append-only output buffer for protobuf wire data."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def write_key(self, key: int) -> None:
        self._buf += encoder._VarintBytes(key)

    def write_varint(self, value: int) -> None:
        """Write an unsigned varint, sign-extending negative int32 values."""
        if value < 0:
            value += 1 << 64
        if value > U64_MAX:
            raise EncodeError(f"Varint value out of range: {value}")
        self._buf += encoder._VarintBytes(value)

    def write_fixed32(self, value: int) -> None:
        if not 0 <= value <= U32_MAX:
            raise EncodeError(f"fixed32 value out of range: {value}")
        self._buf += _FIXED32.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write a length-prefixed byte string."""
        self.write_varint(len(data))
        self._buf += data

    def write_raw(self, data: bytes) -> None:
        self._buf += data


# ----------------------------------------------------------------------------
# Reader
# ----------------------------------------------------------------------------


class Reader:
    """Cursor over a buffer of protobuf wire data.

    Sub-messages are read through new readers over slices of the same
    memoryview, so nested decoding never copies the input.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._view)

    def read_varint(self) -> int:
        """Read an unsigned varint of at most 64 bits.

        Raises:
            DecodeError: If the varint is truncated or longer than 10 bytes
        """
        try:
            value, pos = decoder._DecodeVarint(self._view, self._pos)
        except IndexError as exc:
            raise DecodeError("Truncated varint") from exc
        except ProtobufDecodeError as exc:
            raise DecodeError(str(exc)) from exc
        self._pos = pos
        return value

    def read_key(self) -> int:
        """Read a field tag and reject field number zero."""
        key = self.read_varint()
        if key >> 3 == 0:
            raise DecodeError("Invalid field number 0")
        return key

    def read_fixed32(self) -> int:
        if self.remaining < 4:
            raise DecodeError("Truncated fixed32 field")
        (value,) = _FIXED32.unpack_from(self._view, self._pos)
        self._pos += 4
        return value

    def read_length_delimited(self) -> memoryview:
        """Read a length prefix and return a view of the bytes it covers."""
        length = self.read_varint()
        if length > self.remaining:
            raise DecodeError(f"Length-delimited field of {length} bytes exceeds buffer ({self.remaining} left)")
        start = self._pos
        self._pos += length
        return self._view[start : self._pos]

    def read_bytes(self) -> bytes:
        return bytes(self.read_length_delimited())

    def read_string(self) -> str:
        try:
            return bytes(self.read_length_delimited()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Invalid UTF-8 in string field: {exc}") from exc

    def skip(self, key: int) -> None:
        """Skip the value of an unrecognized field.

        Raises:
            DecodeError: If the value is truncated or uses a group or
                reserved wire type
        """
        wire_type = key & 0x7
        if wire_type == WIRETYPE_VARINT:
            self.read_varint()
        elif wire_type == WIRETYPE_FIXED64:
            self._advance(8)
        elif wire_type == WIRETYPE_LENGTH_DELIMITED:
            self.read_length_delimited()
        elif wire_type == WIRETYPE_FIXED32:
            self._advance(4)
        elif wire_type in (WIRETYPE_START_GROUP, WIRETYPE_END_GROUP):
            raise DecodeError(f"Group wire type is not supported (field {key >> 3})")
        else:
            raise DecodeError(f"Invalid wire type {wire_type} (field {key >> 3})")

    def _advance(self, count: int) -> None:
        if self.remaining < count:
            raise DecodeError("Truncated fixed-width field")
        self._pos += count
