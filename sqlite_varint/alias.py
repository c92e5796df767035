#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from io import BytesIO
from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "81 7f"
# "817f"
# "ffffffff ffffffff ff"
#
# use sqlite_varint.utils.bytes_from_octets to convert Octets to bytes
#
# bytearray and memoryview are accepted too: a varint is often sliced
# out of a larger page buffer
Octets = Union[bytes, bytearray, memoryview, str]

# binary data, usually to be consumed as byte stream,
# but possibly provided as Octets too
BinaryData = Union[BytesIO, Octets]

# a (value, number of bytes consumed) pair, as returned by the decoder
ReadResult = Tuple[int, int]
