"""Little-endian binary primitives, length-prefixed strings and save errors."""

from __future__ import annotations

import logging
import struct

LOOT_LOGGER = logging.getLogger("sas2parser.loot")
MONSTER_LOGGER = logging.getLogger("sas2parser.monster")

_MAX_LOSSY_STRING = 65_536
_U32_MASK = 0xFFFFFFFF

_U8 = struct.Struct("<B")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


class SaveError(Exception):
    """Base error for every parsing and serialisation failure."""


class InvalidVersionError(SaveError):
    """A save file carries a version that cannot be handled."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Invalid save version: {version}")
        self.version = version


class HashMismatchError(SaveError):
    """The stored checksum does not match the payload."""

    def __init__(self, message: str = "Hash mismatch") -> None:
        super().__init__(message)


class InvalidDataError(SaveError):
    """The data is structurally wrong or implausible."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid data: {detail}")
        self.detail = detail


def set_loot_logging_enabled(enabled: bool) -> None:
    """Switch diagnostic output of the loot catalog parser on or off."""
    LOOT_LOGGER.disabled = not enabled


def set_monster_logging_enabled(enabled: bool) -> None:
    """Switch diagnostic output of the monster catalog parser on or off."""
    MONSTER_LOGGER.disabled = not enabled


def xor_data(data: bytes, xor_value: int) -> bytes:
    """Return ``data`` with every byte XORed with the low byte of ``xor_value``."""
    key = xor_value & 0xFF
    table = bytes(i ^ key for i in range(256))
    return bytes(data).translate(table)


class BinaryReader:
    """Sequential little-endian reader over an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def position(self) -> int:
        """Current offset from the start of the buffer."""
        return self._pos

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise SaveError(
                f"IO error: unexpected end of data "
                f"(wanted {count} bytes at offset {self._pos})"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _unpack(self, layout: struct.Struct):
        (value,) = layout.unpack(self._take(layout.size))
        return value

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_bool(self) -> bool:
        return self.read_u8() != 0

    def read_i32(self) -> int:
        return self._unpack(_I32)

    def read_i64(self) -> int:
        return self._unpack(_I64)

    def read_f32(self) -> float:
        return self._unpack(_F32)

    def read_f64(self) -> float:
        return self._unpack(_F64)

    def _read_varint(self, overflow: SaveError) -> int:
        value = 0
        shift = 0
        while True:
            byte = self.read_u8()
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return value & _U32_MASK
            shift += 7
            if shift > 28:
                raise overflow

    def read_7bit_encoded_int(self) -> int:
        """Read an unsigned 7-bit encoded integer (at most five bytes)."""
        return self._read_varint(SaveError("IO error: Invalid 7-bit encoded int"))

    def read_string(self) -> str:
        """Read a length-prefixed string that must be valid UTF-8."""
        length = self.read_7bit_encoded_int()
        raw = self._take(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SaveError(f"IO error: {exc}") from exc

    def read_string_lossy(self) -> str:
        """Read a length-prefixed string, replacing invalid UTF-8 sequences."""
        length = self._read_varint(InvalidDataError("7-bit length overflow"))
        if length > _MAX_LOSSY_STRING:
            raise InvalidDataError(f"String length {length} too large")
        return self._take(length).decode("utf-8", errors="replace")


class BinaryWriter:
    """Little-endian writer that accumulates bytes in memory."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_bytes(self, data: bytes) -> None:
        self._buffer += data

    def write_u8(self, value: int) -> None:
        self._buffer += _U8.pack(value)

    def write_bool(self, value: bool) -> None:
        self.write_u8(1 if value else 0)

    def write_i32(self, value: int) -> None:
        self._buffer += _I32.pack(value)

    def write_i64(self, value: int) -> None:
        self._buffer += _I64.pack(value)

    def write_f32(self, value: float) -> None:
        self._buffer += _F32.pack(value)

    def write_f64(self, value: float) -> None:
        self._buffer += _F64.pack(value)

    def write_7bit_encoded_int(self, value: int) -> None:
        """Write an unsigned 32-bit value in 7-bit groups, low group first."""
        if not 0 <= value <= _U32_MASK:
            raise ValueError(f"value {value} does not fit in an unsigned 32-bit int")
        while value >= 0x80:
            self._buffer.append((value & 0x7F) | 0x80)
            value >>= 7
        self._buffer.append(value)

    def write_string(self, text: str) -> None:
        """Write ``text`` as UTF-8 with a 7-bit encoded byte-length prefix."""
        encoded = text.encode("utf-8")
        self.write_7bit_encoded_int(len(encoded))
        self.write_bytes(encoded)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)