# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""\
Utilities for the raw dictionaries of a decoded distribution index.\
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from distroindex.errors import ParserError


class DictUtils:

    @staticmethod
    def without_none(data: Mapping) -> dict:
        return {key: value for key, value in data.items() if value is not None}

    @staticmethod
    def to_list(data: Mapping, key: str, optional: bool = False) -> list[Any]:
        """Fetches a list valued entry.

        Raises:
            ParserError: If the entry is not a list,
                or is missing and not `optional`.
        """
        if not isinstance(data, Mapping):
            raise ParserError(f"expected a mapping holding '{key}', got {type(data).__name__}")
        value = data.get(key)
        if value is None:
            if optional:
                return []
            raise ParserError(f"missing list '{key}'")
        if not isinstance(value, list):
            raise ParserError(f"'{key}' must be a list, got {type(value).__name__}")
        return value
