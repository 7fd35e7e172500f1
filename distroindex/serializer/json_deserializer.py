# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import json

from distroindex.errors import DeserializerError
from distroindex.model.distro_index import DistroIndex
from distroindex.serializer import Deserializer


class JSONDeserializer(Deserializer):

    @classmethod
    def extensions(cls) -> list[str]:
        return ["json"]

    def deserialize(self, serialized: str | bytes) -> DistroIndex:
        try:
            deserialized = json.loads(serialized)
        except ValueError as err:
            raise DeserializerError(f"failed to deserialize JSON: {err}") from err
        return self._to_distro_index(deserialized)
