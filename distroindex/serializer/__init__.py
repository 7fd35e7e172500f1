# SPDX-FileCopyrightText: 2021 - 2022 Andre Lehmann <aisberg@posteo.de>
# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Mapping

from distroindex.errors import DeserializerError, ParserError
from distroindex.model.distro_index import DistroIndex


class Serializer:
    """Interface for serializing a distribution index."""

    @classmethod
    def extensions(cls) -> list[str]:
        """Returns a list of supported file extensions in all lower-case,
        without a leading dot."""
        raise NotImplementedError()

    def serialize(self, distro: DistroIndex) -> str:
        raise NotImplementedError()


class Deserializer:
    """Interface for deserializing a distribution index."""

    @classmethod
    def extensions(cls) -> list[str]:
        """Returns a list of supported file extensions in all lower-case,
        without a leading dot."""
        raise NotImplementedError()

    def deserialize(self, serialized: str | bytes) -> DistroIndex:
        raise NotImplementedError()

    @staticmethod
    def _to_distro_index(deserialized) -> DistroIndex:
        if not isinstance(deserialized, Mapping):
            raise DeserializerError("invalid format")
        try:
            return DistroIndex.from_dict(deserialized)
        except ParserError as err:
            raise DeserializerError(f"invalid distribution index: {err}") from err
