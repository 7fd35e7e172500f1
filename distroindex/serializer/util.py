# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import orjson

from distroindex.errors import SerializerError


def json_serialize(obj) -> str:
    try:
        # pylint: disable=no-member
        serialized = orjson.dumps(obj,
                                  option=orjson.OPT_APPEND_NEWLINE | orjson.OPT_INDENT_2 |
                                  orjson.OPT_SORT_KEYS).decode("utf-8")
    except Exception as err:
        raise SerializerError(f"failed to serialize JSON: {err}") from err
    return serialized
