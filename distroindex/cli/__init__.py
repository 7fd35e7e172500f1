#!/usr/bin/env python
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from cleo.application import Application as BaseApplication

from distroindex import __version__
from distroindex.cli.command.config import ConfigCommand
from distroindex.cli.command.convert import ConvertCommand
from distroindex.cli.command.modules import ModulesCommand
from distroindex.cli.command.servers import ServersCommand


class Application(BaseApplication):

    def __init__(self):
        super().__init__(name="distro", version=__version__)

        # add commands
        self.add(ServersCommand())
        self.add(ModulesCommand())
        self.add(ConvertCommand())
        self.add(ConfigCommand())


def main() -> int:
    application = Application()
    return application.run()


if __name__ == '__main__':
    main()
