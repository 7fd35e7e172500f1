# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from distroindex.cli.command import DistroCommand
from distroindex.config import effective_config_info
from distroindex.errors import ConfigError


class ConfigCommand(DistroCommand):

    name = "config"
    description = "Validate the configuration and print the effective values. Non-zero return codes indicate an error."

    def handle(self) -> int:
        try:
            config = self._load_config()
        except ConfigError as err:
            return self._report_error(err)

        for line in effective_config_info(config):
            self.line(line)
        return 0
