# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Generator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from distroindex.dict_utils import DictUtils
from distroindex.errors import ParserError
from distroindex.log import get_child_logger
from distroindex.model.artifact import Artifact
from distroindex.model.identifier import MavenIdentifier
from distroindex.model.module_type import ModuleType, root_dir
from distroindex.model.required import Required
from distroindex.recursive_type import RecDict

log = get_child_logger("module")


@dataclass(slots=True, frozen=True)
class Module:  # pylint: disable=too-many-instance-attributes
    """A single installable unit of a server:
    a library, a mod loader, a mod or an arbitrary file."""
    identifier: str | None
    "the full, unparsed identifier, `group:artifactId:version[@extension]`"
    raw_type: str | None
    "the type as found in the document, see also :attr:`type`"
    coordinates: MavenIdentifier
    name: str | None = None
    required: Required = field(default_factory=Required)
    artifact: Artifact = field(default_factory=Artifact)
    sub_modules: tuple[Module, ...] = ()

    @property
    def type(self) -> ModuleType | None:
        """The type of the module, `None` if it is not a known one."""
        return ModuleType.parse(self.raw_type)

    @property
    def group(self) -> str:
        return self.coordinates.group

    @property
    def artifact_id(self) -> str:
        return self.coordinates.artifact_id

    @property
    def version(self) -> str:
        return self.coordinates.version

    @property
    def extension(self) -> str:
        return self.coordinates.extension

    @property
    def identifier_problems(self) -> tuple[str, ...]:
        return self.coordinates.problems

    @property
    def has_sub_modules(self) -> bool:
        return len(self.sub_modules) > 0

    @classmethod
    def from_dict(cls, data: RecDict) -> Module:
        if not isinstance(data, Mapping):
            raise ParserError(f"module must be a mapping, got {type(data).__name__}")

        identifier = data.get("id")
        raw_type = data.get("type")
        module_type = ModuleType.parse(raw_type)
        if module_type is None:
            log.warning("Unknown type '%s' of module '%s', treating it as a plain file", raw_type, identifier)

        coordinates = MavenIdentifier.parse(identifier, module_type)

        artifact = Artifact.from_dict(data.get("artifact"))
        if artifact.path is None:
            artifact = artifact.with_path(coordinates.artifact_path(root_dir(module_type)))

        sub_modules = tuple(cls.from_dict(sub) for sub in DictUtils.to_list(data, "subModules", optional=True))

        return cls(
            identifier=identifier,
            raw_type=raw_type,
            coordinates=coordinates,
            name=data.get("name"),
            required=Required.from_dict(data.get("required")),
            artifact=artifact,
            sub_modules=sub_modules,
        )

    def resolve_path(self, base_dir: Path) -> Path:
        """Where the artifact goes, given the launchers (common) directory."""
        return base_dir / self.artifact.path

    def walk(self) -> Generator[Module]:
        """Yields this module and then all its sub-modules, depth-first."""
        yield self
        for sub_module in self.sub_modules:
            yield from sub_module.walk()

    def as_dict(self) -> dict:
        serialized = DictUtils.without_none({
            "id": self.identifier,
            "name": self.name,
            "type": self.raw_type,
        })
        serialized["required"] = self.required.as_dict()
        serialized["artifact"] = self.artifact.as_dict()
        serialized["subModules"] = [sub_module.as_dict() for sub_module in self.sub_modules]
        return serialized
