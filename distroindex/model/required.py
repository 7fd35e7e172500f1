# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from distroindex.log import get_child_logger

log = get_child_logger("required")


@dataclass(slots=True, frozen=True)
class Required:
    """Requirement status of a module."""
    value: bool = True
    "whether the module is mandatory"
    default: bool = True
    "if the module is optional, whether it is enabled by default"

    @property
    def is_required(self) -> bool:
        return self.value

    @property
    def is_default(self) -> bool:
        return self.default

    @classmethod
    def from_dict(cls, data: Mapping | None) -> Required:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            log.warning("Improper required status %r, treating the module as required", data)
            return cls()
        value = data.get("value")
        default = data.get("def")
        return cls(
            value=True if value is None else value,
            default=True if default is None else default,
        )

    def as_dict(self) -> dict:
        return {
            "value": self.value,
            "def": self.default,
        }
