# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from distroindex.cli.command import REPORTED_ERRORS, DistroCommand


class ServersCommand(DistroCommand):

    name = "servers"
    description = "List the servers of the distribution index. The main server is marked with '*'."

    def handle(self) -> int:
        try:
            distro = self._load_distro(self._load_config())
        except REPORTED_ERRORS as err:
            return self._report_error(err)

        for server in distro.servers:
            marker = "*" if server.main_server else " "
            self.line(f"{marker} <info>{server.id}</info>: {server.name}"
                      f" (Minecraft {server.minecraft_version}, {server.address})")
        return 0
