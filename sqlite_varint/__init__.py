#!/usr/bin/env python3

# Copyright (C) 2022 The sqlite_varint developers
#
# This file is part of sqlite_varint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of sqlite_varint including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"__init__ module for the sqlite_varint package."

name = "sqlite_varint"
__version__ = "2022.6.1"
__author__ = "The sqlite_varint developers"
__author_email__ = "devs@sqlite-varint.org"
__copyright__ = "Copyright (C) 2022 The sqlite_varint developers"
__license__ = "MIT License"
