#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by sqlite_varint from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the sqlite_varint versions are derived.
"""


class VarintValueError(ValueError):
    pass


class VarintTypeError(TypeError):
    pass


class VarintRuntimeError(RuntimeError):
    pass


class InsufficientDataError(VarintRuntimeError):
    "The input ended before the varint terminal byte."
