#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Assorted conversion utilities.

Binary input normalization and signed/unsigned 64-bit reinterpretation.
"""

from io import BytesIO

from sqlite_varint.alias import BinaryData, Octets
from sqlite_varint.exceptions import VarintTypeError, VarintValueError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def bytes_from_octets(octets: Octets) -> bytes:
    """Return bytes from a hex-string or a bytes-like object.

    Leading/trailing spaces of hex-strings are stripped by bytes.fromhex.
    """

    if isinstance(octets, str):  # hex string
        return bytes.fromhex(octets)

    if isinstance(octets, (bytes, bytearray, memoryview)):
        return bytes(octets)

    raise VarintTypeError(f"not a bytes-like object: {type(octets).__name__}")


def bytesio_from_binarydata(stream: BinaryData) -> BytesIO:
    """Return a BytesIO stream object from BinaryIO or Octets.

    If the input is not Octets (i.e. str or bytes-like),
    then it goes untouched.
    """

    if isinstance(stream, BytesIO):
        return stream

    return BytesIO(bytes_from_octets(stream))


def hex_string(i: int) -> str:
    """Return a hex-string from a non-negative integer.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    if i < 0:
        raise VarintValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def _int_repr(i: int) -> str:
    # small values are more readable in decimal
    if -0xFFFFFFFF <= i <= 0xFFFFFFFF:
        return f"{i}"
    return f"'-{hex_string(-i)}'" if i < 0 else f"'{hex_string(i)}'"


def assert_int64(i: int) -> None:
    "Fail if i is not an int in the signed 64-bit range."

    # bool is an int subclass, but never a meaningful varint value
    if not isinstance(i, int) or isinstance(i, bool):
        raise VarintTypeError(f"not an integer: {type(i).__name__}")
    if not INT64_MIN <= i <= INT64_MAX:
        raise VarintValueError(f"integer out of int64 range: {_int_repr(i)}")


def uint64_from_int64(i: int) -> int:
    "Return the unsigned 64-bit pattern of a signed 64-bit integer."

    assert_int64(i)
    return i & UINT64_MAX


def int64_from_uint64(u: int) -> int:
    "Return the signed 64-bit integer of an unsigned 64-bit pattern."

    if not 0 <= u <= UINT64_MAX:
        raise VarintValueError(f"integer out of uint64 range: {_int_repr(u)}")
    # two's complement: the highest bit carries the sign
    return u - (1 << 64) if u & (1 << 63) else u
