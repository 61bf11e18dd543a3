"""Var-int and var-string framing over byte buffers.

Var-ints use the compact size layout: values below ``0xfd`` take one byte,
larger values are written as a marker byte (``0xfd``, ``0xfe`` or ``0xff``)
followed by a little-endian u16, u32 or u64. Var-strings are a var-int byte
count followed by that many bytes of UTF-8.
"""

from __future__ import annotations

import struct

from jobwire.core.exceptions import EncodingOverflowError, MalformedPayloadError

MAX_U16 = 0xFFFF
MAX_U32 = 0xFFFFFFFF
MAX_U64 = 0xFFFFFFFFFFFFFFFF

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


def varint_size(value: int) -> int:
    """Number of bytes :meth:`BufferWriter.write_varint` uses for ``value``."""

    if value < 0 or value > MAX_U64:
        raise EncodingOverflowError(f"Value {value} cannot be written as a var-int", size=value, limit=MAX_U64)
    if value < 0xFD:
        return 1
    if value <= MAX_U16:
        return 3
    if value <= MAX_U32:
        return 5
    return 9


def var_string_size(text: str) -> int:
    length = len(text.encode("utf-8"))
    return varint_size(length) + length


class BufferWriter:
    """Append-only writer rendering to ``bytes``."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_varint(self, value: int) -> None:
        size = varint_size(value)
        if size == 1:
            self._buffer.append(value)
        elif size == 3:
            self._buffer.append(0xFD)
            self._buffer += _U16.pack(value)
        elif size == 5:
            self._buffer.append(0xFE)
            self._buffer += _U32.pack(value)
        else:
            self._buffer.append(0xFF)
            self._buffer += _U64.pack(value)

    def write_var_bytes(self, data: bytes) -> None:
        self.write_varint(len(data))
        self._buffer += data

    def write_var_string(self, text: str) -> None:
        self.write_var_bytes(text.encode("utf-8"))

    def render(self) -> bytes:
        return bytes(self._buffer)


class BufferReader:
    """Sequential reader over an immutable byte buffer.

    Every ``read_*`` method either consumes its whole value or leaves the
    offset untouched and raises :class:`MalformedPayloadError`.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.offset = 0

    def left(self) -> int:
        return len(self._data) - self.offset

    def _take(self, size: int) -> bytes:
        if size > self.left():
            raise MalformedPayloadError(
                f"Buffer exhausted: needed {size} bytes, {self.left()} left",
                offset=self.offset,
            )
        chunk = self._data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def read_varint(self) -> int:
        start = self.offset
        try:
            prefix = self._take(1)[0]
            if prefix < 0xFD:
                return prefix
            if prefix == 0xFD:
                value, floor = _U16.unpack(self._take(2))[0], 0xFD
            elif prefix == 0xFE:
                value, floor = _U32.unpack(self._take(4))[0], MAX_U16 + 1
            else:
                value, floor = _U64.unpack(self._take(8))[0], MAX_U32 + 1
            if value < floor:
                raise MalformedPayloadError(f"Non-canonical var-int {value}", offset=start)
            return value
        except MalformedPayloadError:
            self.offset = start
            raise

    def read_var_bytes(self, limit: int | None = None) -> bytes:
        start = self.offset
        try:
            size = self.read_varint()
            if limit is not None and size > limit:
                raise MalformedPayloadError(f"Var-string length {size} exceeds limit {limit}", offset=start)
            return self._take(size)
        except MalformedPayloadError:
            self.offset = start
            raise

    def read_var_string(self, limit: int | None = None) -> str:
        start = self.offset
        data = self.read_var_bytes(limit)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            self.offset = start
            raise MalformedPayloadError(f"Invalid UTF-8 in var-string: {exc.reason}", offset=start) from exc


__all__ = [
    "MAX_U16",
    "MAX_U32",
    "MAX_U64",
    "BufferReader",
    "BufferWriter",
    "var_string_size",
    "varint_size",
]
