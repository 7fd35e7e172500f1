# SPDX-License-Identifier: GPL-3.0-or-later
"""Launcher configuration: where the distribution index lives
and where module artifacts are placed.

Options can come from a YAML file and from the command line.
Each source is checked on its own against the (cerberus) schema,
then the sources are merged, command line first, and the defaults applied.
"""

from __future__ import annotations

from collections.abc import Generator, Mapping
from pathlib import Path
from typing import Any

import yaml
from cerberus import TypeDefinition, Validator
from str_to_bool import str_to_bool

from .errors import ConfigError, NotOverriddenError

# see: https://docs.python-cerberus.org/en/stable/index.html
BASE_SCHEMA = {
    "distribution": {
        "type": "dict",
        "default_setter": lambda _: {},
        "schema": {
            "path": {
                "type": "path",
                "coerce": "path",
                "default": Path("distribution.json"),
                "meta": {
                    "long_name": "distribution",
                    "description": "Distribution index file to load (JSON or YAML)"
                },
            },
        },
    },
    "launcher": {
        "type": "dict",
        "default_setter": lambda _: {},
        "schema": {
            "common_dir": {
                "type": "path",
                "coerce": "path",
                "default": Path("."),
                "meta": {
                    "long_name": "common-dir",
                    "description": "Launcher directory, module artifact paths are relative to"
                },
            },
            "strict": {
                "type": "boolean",
                "coerce": "boolean",
                "default": False,
                "meta": {
                    "long_name": "strict",
                    "description": "Fail instead of warn on improper module identifiers"
                },
            },
        },
    },
}

# represents a missing option
missing = type("MissingType", (), {"__repr__": lambda x: "missing"})()


def iterate_schema(schema: Mapping, _key_path: list[str] | None = None) -> Generator[tuple[list[str], Mapping]]:
    """Yields `(key_path, rules)` for every option (leaf) of a schema."""
    key_path = _key_path or []
    for key, rules in schema.items():
        if rules["type"] == "dict" and "schema" in rules:
            yield from iterate_schema(rules["schema"], key_path + [key])
        else:
            yield (key_path + [key], rules)


def set_key_path(mapping: dict, key_path: list[str], value) -> None:
    for key in key_path[:-1]:
        mapping = mapping.setdefault(key, {})
    mapping[key_path[-1]] = value


def _without_defaults(schema: Mapping) -> dict:
    stripped = {}
    for key, rules in schema.items():
        rules = {name: rule for name, rule in rules.items() if name not in ("default", "default_setter")}
        if "schema" in rules:
            rules["schema"] = _without_defaults(rules["schema"])
        stripped[key] = rules
    return stripped


def _error_reasons(errors: Mapping, parents: tuple[str, ...] = ()) -> Generator[str]:
    # cerberus reports nested errors as [{field: [...]}]
    for field, messages in errors.items():
        path = parents + (str(field),)
        for message in messages:
            if isinstance(message, Mapping):
                yield from _error_reasons(message, path)
            else:
                yield f"invalid option '{'.'.join(path)}': {message}"


def validate(config: Mapping, schema: Mapping, partial=False) -> tuple[dict | None, list[str]]:
    """Normalize and validate a config against a schema.

    Args:
        config (Mapping): Config to normalize and validate.
        schema (Mapping): Schema used for validation.
        partial (bool): If True, the config is a single source,
            which gets no defaults applied.

    Returns:
        tuple(dict | None, list[str]): The normalized config, or `None`
            and the reasons why the validation failed.
    """
    if partial:
        schema = _without_defaults(schema)
    validator = ConfigValidator(schema, purge_unknown=True)
    if not validator.validate(dict(config), update=partial):
        return None, list(_error_reasons(validator.errors))
    return validator.document, []


def effective_config_info(config: Config) -> Generator[str]:
    for key_path, _ in iterate_schema(BASE_SCHEMA):
        yield f"{'.'.join(key_path)}={config.lookup(key_path)}"


class Config(Mapping):
    """A loaded configuration, read-only.

    Sections are reachable as attributes, e.g. `config.launcher.common_dir`.
    """

    def __init__(self, mapping: Mapping | None = None) -> None:
        self._mapping = {
            key: Config(value) if isinstance(value, Mapping) else value for key, value in (mapping or {}).items()
        }

    def __getitem__(self, key):
        return self._mapping[key]

    def __getattr__(self, key):
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._mapping[key]
        except KeyError:
            raise AttributeError(key)  # pylint: disable=raise-missing-from

    def __iter__(self):
        return iter(self._mapping)

    def __len__(self):
        return len(self._mapping)

    def __repr__(self):
        return f"{type(self).__name__}({repr(self._mapping)})"

    def lookup(self, key_path: list[str], default=missing):
        value = self
        for key in key_path:
            if not isinstance(value, Mapping) or key not in value:
                return default
            value = value[key]
        return value

    def as_dict(self) -> dict:
        return {key: value.as_dict() if isinstance(value, Config) else value for key, value in self.items()}


class ConfigValidator(Validator):
    types_mapping = Validator.types_mapping.copy()
    types_mapping["path"] = TypeDefinition("path", (Path,), ())

    # non-strings are left untouched, so type validation reports them

    def _normalize_coerce_boolean(self, value: Any):
        if not isinstance(value, str):
            return value
        return bool(str_to_bool(value.strip()))

    def _normalize_coerce_path(self, value: Any):
        if not isinstance(value, str):
            return value
        return Path(value.strip())


class ConfigLoader:
    """Loads the configuration from one source."""

    def load(self) -> Config:
        """
        Raises:
            ConfigError: If the source can not be read or holds invalid options.
        """
        raise NotOverriddenError()


class CliConfigLoader(ConfigLoader):
    """Options given on the command line, as a nested mapping."""

    def __init__(self, schema: Mapping, options: Mapping | None) -> None:
        self._schema = schema
        self._options = options or {}

    def load(self) -> Config:
        validated, reasons = validate(self._options, self._schema, partial=True)
        if reasons:
            raise ConfigError(f"Invalid command line option: {reasons[0]}", reasons)
        return Config(validated)


class YamlFileConfigLoader(ConfigLoader):
    """Options from a YAML file; no file means no options."""

    def __init__(self, schema: Mapping, path: str | Path | None) -> None:
        self._schema = schema
        self._path = Path(path) if path is not None else None

    def load(self) -> Config:
        if self._path is None:
            return Config()
        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as err:
            raise ConfigError(f"Failed to load YAML config: {err}", reasons=[str(err)]) from err
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Failed to load YAML config '{self._path}': not a mapping",
                              reasons=["config file has to contain a mapping"])

        validated, reasons = validate(raw, self._schema, partial=True)
        if reasons:
            raise ConfigError(f"Invalid options in config file '{self._path}'", reasons)
        return Config(validated)


class DistroConfigLoader(ConfigLoader):
    """Merges the given loaders, the first one taking precedence,
    and fills in the defaults."""

    def __init__(self, schema: Mapping, *loaders: ConfigLoader) -> None:
        self._schema = schema
        self._loaders = loaders

    def load(self) -> Config:
        configs = [loader.load() for loader in self._loaders]

        merged: dict = {}
        for key_path, _ in iterate_schema(self._schema):
            for config in configs:
                value = config.lookup(key_path)
                if value is not missing and value is not None:
                    set_key_path(merged, key_path, value)
                    break

        validated, reasons = validate(merged, self._schema)
        if reasons:
            raise ConfigError("Invalid configuration", reasons)
        return Config(validated)
