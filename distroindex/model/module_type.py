# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from enum import StrEnum


class ModuleType(StrEnum):
    """The kind of an installable module.
    It decides the default file extension of the artifact
    and the launcher directory the artifact is placed under."""
    LIBRARY = "Library"
    FORGE_HOSTED = "ForgeHosted"
    LITE_LOADER = "LiteLoader"
    FORGE_MOD = "ForgeMod"
    LITE_MOD = "LiteMod"
    FILE = "File"

    def default_extension(self) -> str:
        match self:
            case self.LIBRARY | self.FORGE_HOSTED | self.LITE_LOADER | self.FORGE_MOD | self.FILE:
                return "jar"
            case self.LITE_MOD:
                return "litemod"
            case _:
                raise NotImplementedError(f"Missing `default_extension()` impl for enum variant {self}")

    def root_dir(self) -> str:
        match self:
            case self.LIBRARY | self.FORGE_HOSTED | self.LITE_LOADER:
                return "libraries"
            case self.FORGE_MOD | self.LITE_MOD:
                return "modstore"
            case self.FILE:
                return ""
            case _:
                raise NotImplementedError(f"Missing `root_dir()` impl for enum variant {self}")

    @classmethod
    def parse(cls, value) -> ModuleType | None:
        """Returns the member with the given value,
        or `None` for anything unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


UNKNOWN_TYPE_EXTENSION = "jar"
UNKNOWN_TYPE_ROOT_DIR = ""


def default_extension(module_type: ModuleType | None) -> str:
    if module_type is None:
        return UNKNOWN_TYPE_EXTENSION
    return module_type.default_extension()


def root_dir(module_type: ModuleType | None) -> str:
    if module_type is None:
        return UNKNOWN_TYPE_ROOT_DIR
    return module_type.root_dir()
