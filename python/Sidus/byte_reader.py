#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Endian aware extraction of fixed width fields from catalog bytes

The read_* functions are stateless and expect the caller to keep
offsets inside the buffer. RecordCursor walks a single record and
refuses to read past the record stride.
"""

import struct
from typing import Dict, Tuple

from Sidus.errors import RecordOverrun

# (little_endian, code) -> Struct
_STRUCTS: Dict[Tuple[bool, str], struct.Struct] = {
    (little, code): struct.Struct(("<" if little else ">") + code)
    for little in (True, False)
    for code in ("h", "i", "f", "d")
}


def _unpack(code: str, data: bytes, offset: int, little_endian: bool):
    return _STRUCTS[(little_endian, code)].unpack_from(data, offset)[0]


def read_int16(data: bytes, offset: int, little_endian: bool) -> int:
    return _unpack("h", data, offset, little_endian)


def read_int32(data: bytes, offset: int, little_endian: bool) -> int:
    return _unpack("i", data, offset, little_endian)


def read_float32(data: bytes, offset: int, little_endian: bool) -> float:
    """
    IEEE-754 single read as its raw bit pattern, returned widened
    to a python float (exact, no rounding involved)
    """
    return _unpack("f", data, offset, little_endian)


def read_float64(data: bytes, offset: int, little_endian: bool) -> float:
    return _unpack("d", data, offset, little_endian)


class RecordCursor:
    """
    Sequential reader over one fixed size record.

    Usage:
        cursor = RecordCursor(data, 28, header.bytes_per_record, True)
        ra = cursor.float64()
        cursor.skip(2)
    """

    def __init__(self, data: bytes, start: int, length: int, little_endian: bool):
        self.data = data
        self.start = start
        self.length = length
        self.little_endian = little_endian
        self.consumed = 0

    def _advance(self, width: int) -> int:
        end = self.consumed + width
        if end > self.length or self.start + end > len(self.data):
            raise RecordOverrun(self.start, self.length, end)
        offset = self.start + self.consumed
        self.consumed = end
        return offset

    def int16(self) -> int:
        return read_int16(self.data, self._advance(2), self.little_endian)

    def int32(self) -> int:
        return read_int32(self.data, self._advance(4), self.little_endian)

    def float32(self) -> float:
        return read_float32(self.data, self._advance(4), self.little_endian)

    def float64(self) -> float:
        return read_float64(self.data, self._advance(8), self.little_endian)

    def raw(self, width: int) -> bytes:
        offset = self._advance(width)
        return bytes(self.data[offset : offset + width])

    def skip(self, width: int) -> None:
        self._advance(width)

    @property
    def remaining(self) -> int:
        return self.length - self.consumed
