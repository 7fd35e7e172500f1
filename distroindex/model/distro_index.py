# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from distroindex.dict_utils import DictUtils
from distroindex.errors import ParserError
from distroindex.model.server import Server
from distroindex.recursive_type import RecDict


@dataclass(slots=True, frozen=True)
class DistroIndex:
    """The distribution index, root of the parsed document."""
    version: str | None = None
    "opaque version of the document"
    rss: str | None = None
    "URL of the news feed"
    servers: tuple[Server, ...] = ()

    @classmethod
    def from_dict(cls, data: RecDict) -> DistroIndex:
        if not isinstance(data, Mapping):
            raise ParserError(f"distribution index must be a mapping, got {type(data).__name__}")
        return cls(
            version=data.get("version"),
            rss=data.get("rss"),
            servers=tuple(Server.from_dict(server) for server in DictUtils.to_list(data, "servers")),
        )

    def get_server(self, server_id: str) -> Server | None:
        for server in self.servers:
            if server.id == server_id:
                return server
        return None

    def get_main_server(self) -> Server | None:
        """The server flagged as main server,
        falling back to the first one if none is flagged."""
        for server in self.servers:
            if server.main_server:
                return server
        return self.servers[0] if self.servers else None

    def as_dict(self) -> dict:
        serialized = DictUtils.without_none({
            "version": self.version,
            "rss": self.rss,
        })
        serialized["servers"] = [server.as_dict() for server in self.servers]
        return serialized
