# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Settings for pycors: packaged defaults, one YAML/TOML file, env overrides.

Values are read by dotted key (``pycors.cors.max_age``).  An environment
variable named after the key (``PYCORS_CORS_MAX_AGE``) always wins.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import tomllib
import types
import typing
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

from pycors.kernel.exceptions import InvalidConfigurationException

T = TypeVar("T")

_CONFIG_PROPERTIES_ATTR = "__pycors_config_prefix__"

_ENV_PREFIX = "PYCORS_"

_MISSING = object()

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})
_NULL = frozenset({"", "none", "null"})


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to the settings under *prefix*."""

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """``pycors.cors.max_age`` -> ``PYCORS_CORS_MAX_AGE``."""
    return _ENV_PREFIX + key.removeprefix("pycors.").upper().replace(".", "_").replace("-", "_")


class Config:
    """Nested settings with dotted-key access.

    Priority (highest wins): environment variables, the loaded file,
    packaged ``pycors-defaults.yaml``, then dataclass defaults.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path | None = None, load_defaults: bool = True) -> Config:
        """Load *path* (``.yaml``/``.yml``/``.toml``) on top of the packaged defaults.

        A missing file is not an error; the defaults and env vars still apply.
        """
        data = cls._load_defaults() if load_defaults else {}
        if path is not None and Path(path).is_file():
            data = _merge(data, cls._load_file(Path(path)))
        return cls(data)

    @staticmethod
    def _load_file(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_defaults() -> dict[str, Any]:
        resource = importlib.resources.files("pycors.resources").joinpath("pycors-defaults.yaml")
        return yaml.safe_load(resource.read_text()) or {}

    def get(self, key: str, default: Any = None) -> Any:
        env_val = os.environ.get(env_key(key))
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or current.get(part) is None:
                return default
            current = current[part]
        return current

    def bind(self, config_cls: type[T]) -> T:
        """Build a @config_properties dataclass, coercing each value to its field type."""
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            key = f"{prefix}.{field.name}"
            value = self.get(key, _MISSING)
            if value is not _MISSING:
                kwargs[field.name] = _coerce(key, value, hints.get(field.name))
        return config_cls(**kwargs)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce(key: str, value: Any, expected_type: Any) -> Any:
    """Turn a raw setting (usually an env var string) into *expected_type*."""
    origin = typing.get_origin(expected_type)
    if origin in (typing.Union, types.UnionType):
        if isinstance(value, str) and value.strip().lower() in _NULL:
            return None
        args = [a for a in typing.get_args(expected_type) if a is not type(None)]
        return _coerce(key, value, args[0]) if len(args) == 1 else value

    if not isinstance(value, str):
        return value

    text = value.strip()
    if expected_type is bool:
        if text.lower() in _TRUE:
            return True
        if text.lower() in _FALSE:
            return False
        raise _bad_value(key, value, "a boolean")
    if expected_type in (int, float):
        try:
            return expected_type(text)
        except ValueError as exc:
            raise _bad_value(key, value, f"a {expected_type.__name__}") from exc
    if origin in (list, tuple) or expected_type in (list, tuple):
        return [item.strip() for item in text.split(",") if item.strip()]
    return value


def _bad_value(key: str, value: str, expected: str) -> InvalidConfigurationException:
    return InvalidConfigurationException(
        f"Setting '{key}' must be {expected}, got {value!r}",
        code="CONFIG_BAD_VALUE",
        context={"key": key, "value": value},
    )
