# SPDX-FileCopyrightText: 2021 - 2022 Andre Lehmann <aisberg@posteo.de>
# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import re
from collections.abc import Mapping

from cleo.commands.command import Command
from cleo.helpers import option
from cleo.io.inputs.option import Option
from cleo.io.io import IO

from distroindex.config import (BASE_SCHEMA, CliConfigLoader, Config, DistroConfigLoader, YamlFileConfigLoader,
                                iterate_schema, set_key_path)
from distroindex.errors import DistroError
from distroindex.log import configure_logger
from distroindex.model.distro_index import DistroIndex
from distroindex.serializer.factory import load_distro_index

# failures of loading or writing an index that are reported, not raised
REPORTED_ERRORS = (DistroError, OSError, ValueError)


def _normalize_option_name(name: str) -> str:
    pattern = re.compile(r"[^a-z0-9]")
    return re.sub(pattern, "-", name)


def options_from_schema(schema: Mapping) -> list[Option]:
    options = []
    for _, rule in iterate_schema(schema):
        meta = rule.get("meta", {})
        long_name = meta.get("long_name")
        if not long_name:
            continue
        options.append(
            option(
                _normalize_option_name(long_name),
                meta.get("short_name"),
                description=meta.get("description", ""),
                flag=rule.get("type") == "boolean",
            ))
    return options


def log_level(io: IO) -> str:
    if io.is_debug():
        return "debug"
    if io.is_very_verbose():
        return "info"
    if io.is_verbose():
        return "warning"
    return "error"


class DistroCommand(Command):

    options = [
        option("config", "c", description="Path to configuration file.", flag=False),
        *options_from_schema(BASE_SCHEMA),
    ]

    def execute(self, io: IO) -> int:
        configure_logger(log_level(io))
        return super().execute(io)

    def _get_options_from_schema(self, schema: Mapping) -> dict:
        options: dict = {}
        for key, rule in iterate_schema(schema):
            long_name = rule.get("meta", {}).get("long_name")
            if not long_name:
                continue
            value = self.option(_normalize_option_name(long_name))
            # unset flags must not override the config file
            if value is False and rule.get("type") == "boolean":
                value = None
            if value is not None:
                set_key_path(options, key, value)
        return options

    def _load_config(self) -> Config:
        cli_options = self._get_options_from_schema(BASE_SCHEMA)

        # normalize and validate config
        cli_config_loader = CliConfigLoader(BASE_SCHEMA, cli_options)
        yaml_config_loader = YamlFileConfigLoader(BASE_SCHEMA, self.option("config"))
        # the order specifies the priority of the options (CLI before file)
        return DistroConfigLoader(BASE_SCHEMA, cli_config_loader, yaml_config_loader).load()

    def _load_distro(self, config: Config) -> DistroIndex:
        """Loads the configured distribution index.

        Raises:
            DistroError: If the index is invalid, or in strict mode,
                if any module has an improper identifier.
        """
        distro = load_distro_index(config.distribution.path)
        if config.launcher.strict:
            problems = [
                problem for server in distro.servers for module in server.walk_modules()
                for problem in module.identifier_problems
            ]
            if problems:
                raise DistroError("Improper module identifiers:\n    " + "\n    ".join(problems))
        return distro

    def _report_error(self, err: Exception) -> int:
        self.line_error(f"<error>{err}</error>")
        for reason in getattr(err, "reasons", []):
            self.line_error(f"    {reason}")
        return 1
