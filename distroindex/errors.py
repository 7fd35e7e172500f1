# SPDX-FileCopyrightText: 2022 Andre Lehmann <aisberg@posteo.de>
# SPDX-FileCopyrightText: 2023 - 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations


class DistroError(Exception):
    pass


class ConfigError(DistroError):

    def __init__(self, msg: str, reasons: list[str]) -> None:
        super().__init__(msg)
        self.reasons = reasons


class ParserError(DistroError):
    pass


class DeserializerError(DistroError):
    pass


class SerializerError(DistroError):
    pass


class NotOverriddenError(DistroError, NotImplementedError):
    pass
