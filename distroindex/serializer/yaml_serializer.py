# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import yaml

from distroindex.errors import SerializerError
from distroindex.model.distro_index import DistroIndex
from distroindex.serializer import Serializer


class YAMLSerializer(Serializer):

    def __init__(self, indent=2, sort_keys=False):
        self._indent = indent
        self._sort_keys = sort_keys

    @classmethod
    def extensions(cls) -> list[str]:
        return ["yml", "yaml"]

    def serialize(self, distro: DistroIndex) -> str:
        try:
            serialized = yaml.safe_dump(distro.as_dict(), indent=self._indent, sort_keys=self._sort_keys)
        except Exception as err:
            raise SerializerError(f"failed to serialize YAML: {err}") from err
        return serialized
