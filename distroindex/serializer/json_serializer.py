# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from distroindex.model.distro_index import DistroIndex
from distroindex.serializer import Serializer
from distroindex.serializer.util import json_serialize


class JSONSerializer(Serializer):

    @classmethod
    def extensions(cls) -> list[str]:
        return ["json"]

    def serialize(self, distro: DistroIndex) -> str:
        return json_serialize(distro.as_dict())
