# SPDX-FileCopyrightText: 2022 Andre Lehmann <aisberg@posteo.de>
# SPDX-FileCopyrightText: 2023 - 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from pathlib import Path

from distroindex.log import get_child_logger
from distroindex.model.distro_index import DistroIndex

from . import Deserializer, Serializer
from .json_deserializer import JSONDeserializer
from .json_serializer import JSONSerializer
from .yaml_deserializer import YAMLDeserializer
from .yaml_serializer import YAMLSerializer

log = get_child_logger("serializer")


def _normalize_suffix(suffix: str) -> str:
    return suffix.lower().removeprefix(".")


class SerializerFactory():

    def __init__(self) -> None:
        self._serializers: dict[str, Serializer] = {}
        self._init_serializers()

    def serialize(self, suffix: str, distro: DistroIndex) -> str:
        serializer = self._serializers.get(_normalize_suffix(suffix))
        if not serializer:
            raise ValueError(f"Unknown serializer type: '{suffix}'")
        return serializer.serialize(distro)

    def _init_serializers(self):

        tmp_serializers = [
            JSONSerializer(),
            YAMLSerializer(),
        ]
        for serializer in tmp_serializers:
            for ext in serializer.extensions():
                self._serializers[ext] = serializer


class DeserializerFactory():

    def __init__(self) -> None:
        self._deserializers: dict[str, Deserializer] = {}
        self._init_deserializer()

    def deserialize(self, suffix: str, serialized: str | bytes) -> DistroIndex:
        deserializer = self._deserializers.get(_normalize_suffix(suffix))
        if not deserializer:
            raise ValueError(f"Unknown deserializer type: '{suffix}'")
        return deserializer.deserialize(serialized)

    def _init_deserializer(self):

        tmp_deserializers = [
            JSONDeserializer(),
            YAMLDeserializer(),
        ]
        for deserializer in tmp_deserializers:
            for ext in deserializer.extensions():
                self._deserializers[ext] = deserializer


def load_distro_index(path: str | Path) -> DistroIndex:
    """Reads and parses a distribution index file,
    choosing the format by the file suffix."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"'{path}' doesn't exist")
    if not path.is_file():
        raise OSError(f"'{path}' is not a file")
    log.debug("Loading distribution index from '%s'", path)
    distro = DeserializerFactory().deserialize(path.suffix, path.read_text(encoding="utf-8"))
    log.info("Loaded distribution index version %s with %d server(s)", distro.version, len(distro.servers))
    return distro
