# SPDX-FileCopyrightText: 2022 Andre Lehmann <aisberg@posteo.de>
# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import yaml

from distroindex.errors import DeserializerError
from distroindex.model.distro_index import DistroIndex
from distroindex.recursive_type import RecDict
from distroindex.serializer import Deserializer


class YAMLDeserializer(Deserializer):

    @classmethod
    def extensions(cls) -> list[str]:
        return ["yml", "yaml"]

    def deserialize(self, serialized: str | bytes) -> DistroIndex:
        try:
            deserialized: RecDict = yaml.safe_load(serialized)
        except Exception as err:
            raise DeserializerError(f"failed to deserialize YAML: {err}") from err
        return self._to_distro_index(deserialized)
