# SPDX-License-Identifier: GPL-3.0-or-later
"""\
Lenient parsing of maven-style module identifiers
of the form `group:artifactId:version[@extension]`.\
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from distroindex.log import get_child_logger
from distroindex.model.module_type import ModuleType, default_extension

log = get_child_logger("identifier")

PLACEHOLDER = "???"
EXTENSION_SEPARATOR = "@"
COORDINATE_SEPARATOR = ":"
_SEGMENT_NAMES = ("group", "artifact ID", "version")


@dataclass(slots=True, frozen=True)
class MavenIdentifier:
    """The coordinates parsed out of a module identifier.

    Parsing never fails; segments that could not be determined
    hold `PLACEHOLDER` (or the default extension of the module type),
    and a description of each anomaly is kept in `problems`.
    """

    group: str = PLACEHOLDER
    artifact_id: str = PLACEHOLDER
    version: str = PLACEHOLDER
    extension: str = "jar"
    problems: tuple[str, ...] = field(default=(), compare=False)

    @property
    def is_valid(self) -> bool:
        return not self.problems

    @classmethod
    def parse(cls, identifier, module_type: ModuleType | None) -> MavenIdentifier:
        fallback_ext = default_extension(module_type)
        if not isinstance(identifier, str):
            problem = f"identifier is not a string: {identifier!r}"
            log.warning("Improper ID for module: %s", problem)
            return cls(extension=fallback_ext, problems=(problem,))

        problems: list[str] = []
        coordinate, _, extension = identifier.partition(EXTENSION_SEPARATOR)
        # anything after a second '@' is ignored
        extension = extension.split(EXTENSION_SEPARATOR)[0] or fallback_ext

        segments = coordinate.split(COORDINATE_SEPARATOR)
        parsed: list[str] = []
        for idx, segment_name in enumerate(_SEGMENT_NAMES):
            segment = segments[idx] if idx < len(segments) else ""
            if not segment:
                problems.append(f"missing {segment_name} in '{identifier}'")
                segment = PLACEHOLDER
            parsed.append(segment)

        for problem in problems:
            log.warning("Improper ID for module: %s", problem)

        group, artifact_id, version = parsed
        return cls(group=group,
                   artifact_id=artifact_id,
                   version=version,
                   extension=extension,
                   problems=tuple(problems))

    @property
    def file_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.{self.extension}"

    def artifact_path(self, root: str = "") -> str:
        """The relative destination path of the artifact:
        `<root>/<group dots as dirs>/<id>/<version>/<id>-<version>.<ext>`,
        always with forward slashes."""
        path = PurePosixPath(root, *self.group.split("."), self.artifact_id, self.version, self.file_name)
        return str(path)
