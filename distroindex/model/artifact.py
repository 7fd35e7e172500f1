# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from distroindex.dict_utils import DictUtils
from distroindex.log import get_child_logger

log = get_child_logger("artifact")


@dataclass(slots=True, frozen=True)
class Artifact:
    """Download information of a single module.

    Every field is optional; e.g. the hash is absent for artifacts
    which are not validated and updated, the URL for files
    supplied locally.
    """
    hash: str | None = None
    "MD5 hash of the file"
    size: int | None = None
    "download size in bytes"
    url: str | None = None
    path: str | None = None
    "destination path, relative to the launcher directory"

    @classmethod
    def from_dict(cls, data: Mapping | None) -> Artifact:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            log.warning("Improper artifact %r, treating it as empty", data)
            return cls()
        return cls(
            hash=data.get("MD5"),
            size=data.get("size"),
            url=data.get("url"),
            path=data.get("path"),
        )

    def with_path(self, path: str) -> Artifact:
        return replace(self, path=path)

    def as_dict(self) -> dict:
        return DictUtils.without_none({
            "MD5": self.hash,
            "size": self.size,
            "url": self.url,
            "path": self.path,
        })
