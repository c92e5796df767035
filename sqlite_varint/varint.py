#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""SQLite varint encoding and decoding functions.

A varint (variable integer) is a variable-length quantity that uses
fewer bytes for small integers.
SQLite uses it in its database file format for record header sizes,
serial types, rowids, and payload sizes.

source:
https://www.sqlite.org/fileformat2.html#varint

Unlike LEB128, an SQLite varint is big-endian and its ninth byte is special:

Format:
[1xxxxxxx]...[0xxxxxxx]         1 to 8 bytes
[1xxxxxxx] x 8 [xxxxxxxx]       9 bytes

* the lower seven bits of each of the first eight bytes are payload,
  most significant group first
* the high bit of each of the first eight bytes is set
  if more bytes follow
* the ninth byte, if present, contributes all of its eight bits
  as the least significant byte of the value

Eight 7-bit groups plus a full last byte make exactly 64 bits,
so any signed 64-bit integer (interpreted as its two's complement
unsigned bit pattern) can be represented.
An integer takes the full nine bytes if and only if
its unsigned bit pattern is greater than 0x00FF FFFF FFFF FFFF,
i.e. all negative integers take nine bytes.

A decoder never needs more than nine bytes:
anything following them is left untouched.
"""

from dataclasses import InitVar, dataclass
from typing import Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from sqlite_varint.alias import BinaryData, Octets, ReadResult
from sqlite_varint.exceptions import InsufficientDataError, VarintValueError
from sqlite_varint.utils import (
    assert_int64,
    bytes_from_octets,
    bytesio_from_binarydata,
    int64_from_uint64,
    uint64_from_int64,
)

MAX_VARINT_SIZE = 9
# above this unsigned pattern the 9-byte form is mandatory
NINE_BYTE_THRESHOLD = 0x00FFFFFFFFFFFFFF

_CONTINUATION_BIT = 0x80
_PAYLOAD_MASK = 0x7F


def _varint_head(data: Octets) -> bytes:
    "Return (at most) the first MAX_VARINT_SIZE bytes of data."

    if isinstance(data, (bytes, bytearray, memoryview)):
        data = data[:MAX_VARINT_SIZE]
    return bytes_from_octets(data)[:MAX_VARINT_SIZE]


def _byte_length(head: bytes) -> int:
    # the first byte with the high bit clear is the last one,
    # but the ninth byte is always the last one
    for i, byte in enumerate(head[: MAX_VARINT_SIZE - 1]):
        if byte < _CONTINUATION_BIT:
            return i + 1
    if len(head) < MAX_VARINT_SIZE:
        err_msg = f"not enough binary data: {len(head)} bytes"
        err_msg += " without a varint terminal byte"
        raise InsufficientDataError(err_msg)
    return MAX_VARINT_SIZE


def read_varint_byte_length(data: Octets) -> int:
    """Return how many bytes the leading varint of data takes.

    The value itself is not computed.
    Only the first nine bytes are inspected.
    """

    return _byte_length(_varint_head(data))


def read_varint(data: Octets) -> ReadResult:
    """Return the leading varint of data and the number of bytes it takes.

    The value is a signed 64-bit integer:
    only 9-byte varints can be negative.
    Bytes following the varint are ignored.
    """

    head = _varint_head(data)
    length = _byte_length(head)

    u = 0
    for byte in head[: min(length, MAX_VARINT_SIZE - 1)]:
        u = (u << 7) | (byte & _PAYLOAD_MASK)
    if length == MAX_VARINT_SIZE:
        u = (u << 8) | head[MAX_VARINT_SIZE - 1]

    return int64_from_uint64(u), length


def read_varint_at(data: Octets, offset: int) -> ReadResult:
    "Return the varint starting at offset in data and its byte length."

    if isinstance(data, str):
        data = bytes_from_octets(data)
    if offset < 0:
        raise VarintValueError(f"negative offset: {offset}")
    if offset > len(data):
        err_msg = f"offset out of range: {offset}"
        err_msg += f" (data is {len(data)} bytes)"
        raise VarintValueError(err_msg)

    return read_varint(memoryview(data)[offset : offset + MAX_VARINT_SIZE])


def varint_length(value: int) -> int:
    "Return the size in bytes of the varint encoding of a signed int64."

    u = uint64_from_int64(value)
    if u > NINE_BYTE_THRESHOLD:
        return MAX_VARINT_SIZE
    # ceil(bit_length / 7), zero included
    return max(1, (u.bit_length() + 6) // 7)


def serialize_to_varint(value: int) -> bytes:
    "Return the varint bytes encoding of a signed 64-bit integer."

    u = uint64_from_int64(value)
    nine_bytes = u > NINE_BYTE_THRESHOLD

    # filled from the end: start is the index of the first used byte
    buffer = bytearray(MAX_VARINT_SIZE)
    start = MAX_VARINT_SIZE

    if nine_bytes:
        # the last byte is a full 8-bit payload, without continuation bit
        start -= 1
        buffer[start] = u & 0xFF
        u >>= 8

    for _ in range(MAX_VARINT_SIZE - 1):
        start -= 1
        buffer[start] = u & _PAYLOAD_MASK
        u >>= 7
        if start < MAX_VARINT_SIZE - 1:
            buffer[start] |= _CONTINUATION_BIT
        # the 9-byte form always needs all eight 7-bit groups
        if u == 0 and not nine_bytes:
            break

    return bytes(buffer[start:])


def parse(stream: BinaryData) -> int:
    """Return the varint read from a stream.

    The stream is advanced by the varint size only;
    if there is not enough binary data it is left where it was.
    """

    stream = bytesio_from_binarydata(stream)

    start = stream.tell()
    head = stream.read(MAX_VARINT_SIZE)
    try:
        value, length = read_varint(head)
    except InsufficientDataError:
        stream.seek(start)
        raise
    stream.seek(start + length)
    return value


def serialize(i: int) -> bytes:
    "Return the varint bytes encoding of a signed 64-bit integer."

    return serialize_to_varint(i)


_Varint = TypeVar("_Varint", bound="Varint")


@dataclass(frozen=True)
class Varint(DataClassJsonMixin):
    # signed 64 bits
    value: int = 0
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        assert_int64(self.value)

    @property
    def size(self) -> int:
        return varint_length(self.value)

    def serialize(self, check_validity: bool = True) -> bytes:
        if check_validity:
            self.assert_valid()

        return serialize_to_varint(self.value)

    @classmethod
    def parse(
        cls: Type[_Varint], data: BinaryData, check_validity: bool = True
    ) -> _Varint:
        "Return a Varint by parsing binary data."

        return cls(parse(data), check_validity)
