# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Generator, Mapping
from dataclasses import dataclass

from distroindex.dict_utils import DictUtils
from distroindex.errors import ParserError
from distroindex.model.module import Module
from distroindex.recursive_type import RecDict


@dataclass(slots=True, frozen=True)
class Server:  # pylint: disable=too-many-instance-attributes
    """A server profile, and the modules needed to play on it.

    Optional flags are kept as found in the document;
    `None` means "not set" and is to be treated as false.
    """
    id: str | None
    name: str | None
    address: str | None
    "host[:port] to connect to"
    minecraft_version: str | None
    description: str | None = None
    icon: str | None = None
    "URL of the server icon"
    version: str | None = None
    "version of this server configuration"
    main_server: bool | None = None
    """Whether this is the main server,
    which is selected when there is no valid previous selection."""
    autoconnect: bool | None = None
    modules: tuple[Module, ...] = ()

    @classmethod
    def from_dict(cls, data: RecDict) -> Server:
        if not isinstance(data, Mapping):
            raise ParserError(f"server must be a mapping, got {type(data).__name__}")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            address=data.get("address"),
            minecraft_version=data.get("minecraftVersion"),
            description=data.get("description"),
            icon=data.get("icon"),
            version=data.get("version"),
            main_server=data.get("mainServer"),
            autoconnect=data.get("autoconnect"),
            modules=tuple(Module.from_dict(module) for module in DictUtils.to_list(data, "modules")),
        )

    def walk_modules(self) -> Generator[Module]:
        for module in self.modules:
            yield from module.walk()

    def as_dict(self) -> dict:
        serialized = DictUtils.without_none({
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "version": self.version,
            "address": self.address,
            "minecraftVersion": self.minecraft_version,
            "mainServer": self.main_server,
            "autoconnect": self.autoconnect,
        })
        serialized["modules"] = [module.as_dict() for module in self.modules]
        return serialized
