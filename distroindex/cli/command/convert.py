# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from pathlib import Path

from cleo.helpers import argument, option

from distroindex.cli.command import REPORTED_ERRORS, DistroCommand
from distroindex.serializer.factory import SerializerFactory


class ConvertCommand(DistroCommand):

    name = "convert"
    description = "Write the parsed distribution index to a file. Supported formats: JSON, YAML"
    arguments = [
        argument("to", description="Destination file, its suffix selects the format"),
    ]
    options = [
        *DistroCommand.options,
        option("force", "f", description="Force overwrite of an existing file", flag=True),
    ]

    def handle(self) -> int:
        convert_to = Path(self.argument("to"))
        force = self.option("force")

        try:
            if convert_to.exists():
                if not convert_to.is_file():
                    raise IsADirectoryError(f"'{convert_to}' exists and is not a file")
                if not force:
                    raise FileExistsError(f"'{convert_to}' already exists, use 'force' to overwrite")

            distro = self._load_distro(self._load_config())
            serialized = SerializerFactory().serialize(convert_to.suffix, distro)
            convert_to.write_text(serialized, encoding="utf-8")
        except REPORTED_ERRORS as err:
            return self._report_error(err)

        return 0
