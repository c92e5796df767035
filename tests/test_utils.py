#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `sqlite_varint.utils` module."

# Standard library imports
import secrets
from io import BytesIO

# Third party imports
import pytest

# Library imports
from sqlite_varint.exceptions import VarintTypeError, VarintValueError
from sqlite_varint.utils import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    assert_int64,
    bytes_from_octets,
    bytesio_from_binarydata,
    hex_string,
    int64_from_uint64,
    uint64_from_int64,
)


def test_bytes_from_octets() -> None:
    bytes_ = b"\x81\x7f"
    assert bytes_from_octets(bytes_) == bytes_
    assert bytes_from_octets(" 81 7F ") == bytes_
    assert bytes_from_octets(bytearray(bytes_)) == bytes_
    assert bytes_from_octets(memoryview(bytes_)) == bytes_
    assert isinstance(bytes_from_octets(bytearray(bytes_)), bytes)

    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        bytes_from_octets("817")

    with pytest.raises(VarintTypeError, match="not a bytes-like object: int"):
        bytes_from_octets(1)  # type: ignore


def test_bytesio_from_binarydata() -> None:
    stream = BytesIO(b"\x01\x02")
    assert bytesio_from_binarydata(stream) is stream

    for data in (b"\x01\x02", "0102", bytearray(b"\x01\x02")):
        assert bytesio_from_binarydata(data).read() == b"\x01\x02"


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(0xFF) == "FF"
    assert hex_string(0xF) == "0F"

    with pytest.raises(VarintValueError, match="negative integer: "):
        hex_string(-1)


def test_int64_conversions() -> None:
    assert uint64_from_int64(0) == 0
    assert uint64_from_int64(-1) == UINT64_MAX
    assert uint64_from_int64(INT64_MIN) == 1 << 63
    assert uint64_from_int64(INT64_MAX) == INT64_MAX

    assert int64_from_uint64(0) == 0
    assert int64_from_uint64(UINT64_MAX) == -1
    assert int64_from_uint64(1 << 63) == INT64_MIN
    assert int64_from_uint64(INT64_MAX) == INT64_MAX

    for _ in range(100):
        u = secrets.randbits(64)
        assert uint64_from_int64(int64_from_uint64(u)) == u

    err_msg = "integer out of uint64 range: "
    for bad_u in (-1, UINT64_MAX + 1):
        with pytest.raises(VarintValueError, match=err_msg):
            int64_from_uint64(bad_u)


def test_assert_int64() -> None:
    for int_ in (INT64_MIN, -1, 0, 1, INT64_MAX):
        assert_int64(int_)

    err_msg = "integer out of int64 range: "
    with pytest.raises(VarintValueError, match=err_msg + "'80000000 00000000'"):
        assert_int64(INT64_MAX + 1)
    with pytest.raises(VarintValueError, match=err_msg + "'-80000000 00000001'"):
        assert_int64(INT64_MIN - 1)

    for not_an_int in (False, None, 1.5):
        with pytest.raises(VarintTypeError, match="not an integer: "):
            assert_int64(not_an_int)  # type: ignore
