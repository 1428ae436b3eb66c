"""Length-prefixed string serialisation for binary streams."""

from __future__ import annotations

import struct
from typing import BinaryIO

_LENGTH = struct.Struct("<I")
_WIDE_CHAR_SIZE = 2


def _write_length(stream: BinaryIO, length: int) -> None:
    if length > 0xFFFFFFFF:
        raise ValueError("string is too long to serialise")
    stream.write(_LENGTH.pack(length))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_length(stream: BinaryIO) -> int:
    return _LENGTH.unpack(_read_exact(stream, _LENGTH.size))[0]


def write_string(stream: BinaryIO, text: str) -> None:
    """Write a 32-bit little-endian byte count followed by UTF-8 bytes."""
    data = text.encode("utf-8")
    _write_length(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`, cut at the first NUL."""
    data = _read_exact(stream, _read_length(stream))
    return data.split(b"\0", 1)[0].decode("utf-8")


def write_wide_string(stream: BinaryIO, text: str) -> None:
    """Write a 32-bit little-endian code-unit count followed by UTF-16LE."""
    data = text.encode("utf-16-le")
    _write_length(stream, len(data) // _WIDE_CHAR_SIZE)
    stream.write(data)


def read_wide_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_wide_string`, cut at the first NUL."""
    data = _read_exact(stream, _read_length(stream) * _WIDE_CHAR_SIZE)
    return data.decode("utf-16-le").split("\0", 1)[0]