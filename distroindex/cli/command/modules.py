# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from pathlib import Path

from cleo.helpers import argument, option

from distroindex.cli.command import REPORTED_ERRORS, DistroCommand
from distroindex.model.module import Module


class ModulesCommand(DistroCommand):

    name = "modules"
    description = "Show the module tree of a server, with the destination path of each artifact."
    arguments = [
        argument("server", description="ID of the server, defaults to the main server", optional=True),
    ]
    options = [
        *DistroCommand.options,
        option("resolve", "r", description="Resolve paths against the launcher common directory", flag=True),
    ]

    def handle(self) -> int:
        try:
            config = self._load_config()
            distro = self._load_distro(config)
        except REPORTED_ERRORS as err:
            return self._report_error(err)

        server_id = self.argument("server")
        server = distro.get_server(server_id) if server_id else distro.get_main_server()
        if server is None:
            self.line_error(f"<error>No such server: '{server_id or ''}'</error>")
            return 1

        base_dir = config.launcher.common_dir if self.option("resolve") else None
        self.line(f"<info>{server.id}</info>: {server.name}")
        for module in server.modules:
            self._print_module(module, 1, base_dir)
        return 0

    def _print_module(self, module: Module, depth: int, base_dir: Path | None):
        path = module.resolve_path(base_dir) if base_dir is not None else module.artifact.path
        if module.required.is_required:
            flags = ""
        elif module.required.is_default:
            flags = " [optional, enabled]"
        else:
            flags = " [optional, disabled]"
        self.line(f"{'  ' * depth}{module.raw_type} {module.identifier} -> {path}{flags}")
        for sub_module in module.sub_modules:
            self._print_module(sub_module, depth + 1, base_dir)
