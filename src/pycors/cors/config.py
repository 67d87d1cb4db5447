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
"""CORS configuration: the immutable policy input and its bindable properties."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from http import HTTPMethod, HTTPStatus

from pycors.core.config import Config, config_properties
from pycors.cors.headers import HeaderName
from pycors.cors.methods import DEFAULT_METHODS, method_name
from pycors.kernel.exceptions import InvalidConfigurationException


def _as_tuple(value: Sequence | None) -> tuple | None:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _status(value: object) -> HTTPStatus | int:
    """Registered codes become ``HTTPStatus``; any other code in 100-599 stays an int."""
    try:
        code = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationException(
            f"Preflight success status must be an integer, got {value!r}",
            code="CORS_CONFIG_STATUS",
            context={"status": value},
        ) from exc
    if isinstance(value, bool) or not 100 <= code <= 599:
        raise InvalidConfigurationException(
            f"Preflight success status must be between 100 and 599, got {value!r}",
            code="CORS_CONFIG_STATUS",
            context={"status": value},
        )
    return HTTPStatus(code) if code in HTTPStatus._value2member_map_ else code


@dataclass(frozen=True)
class CorsConfig:
    """Immutable CORS configuration, shared read-only by every request.

    Attributes:
        allowed_origins: Origins reflected in ``Access-Control-Allow-Origin``.
            ``None`` allows every origin with ``*``.
        allowed_methods: Methods advertised on preflight, in order.  Never empty.
        preflight_continue: Pass preflight requests on to downstream handlers
            instead of answering them directly.
        preflight_success_status: Status used to answer preflight requests.
            Any code from 100 to 599; registered ones are stored as ``HTTPStatus``.
        allowed_headers: Value of ``Access-Control-Allow-Headers``.  ``None``
            reflects the request's ``Access-Control-Request-Headers``.
        exposed_headers: Value of ``Access-Control-Expose-Headers``.  ``None``
            omits the header.
        max_age: Preflight cache duration in seconds; omitted unless > 0.
        allow_credentials: Literal ``Access-Control-Allow-Credentials`` value.
            ``None`` omits the header; ``False`` still emits ``"false"``.
    """

    allowed_origins: tuple[str, ...] | None = None
    allowed_methods: tuple[HTTPMethod | str, ...] = DEFAULT_METHODS
    preflight_continue: bool = False
    preflight_success_status: HTTPStatus | int = HTTPStatus.NO_CONTENT
    allowed_headers: tuple[HeaderName | str, ...] | None = None
    exposed_headers: tuple[HeaderName | str, ...] | None = None
    max_age: float | None = None
    allow_credentials: bool | None = None

    def __post_init__(self) -> None:
        methods = _as_tuple(self.allowed_methods) or ()
        if not methods:
            raise InvalidConfigurationException(
                "allowed_methods must name at least one method",
                code="CORS_CONFIG_EMPTY_METHODS",
            )
        status = _status(self.preflight_success_status)

        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "allowed_origins", _as_tuple(self.allowed_origins))
        object.__setattr__(self, "allowed_methods", methods)
        object.__setattr__(self, "preflight_success_status", status)
        object.__setattr__(self, "allowed_headers", _as_tuple(self.allowed_headers))
        object.__setattr__(self, "exposed_headers", _as_tuple(self.exposed_headers))

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(method_name(m) for m in self.allowed_methods)

    @classmethod
    def from_config(cls, config: Config) -> CorsConfig:
        """Build a CorsConfig from the ``pycors.cors`` section of *config*."""
        return config.bind(CorsProperties).to_cors_config()


DEFAULT_CORS_CONFIG = CorsConfig()


@config_properties(prefix="pycors.cors")
@dataclass
class CorsProperties:
    """Bindable form of :class:`CorsConfig` (pycors.cors.*)."""

    allowed_origins: list[str] | None = None
    allowed_methods: list[str] = field(default_factory=lambda: [method_name(m) for m in DEFAULT_METHODS])
    preflight_continue: bool = False
    preflight_success_status: int = 204
    allowed_headers: list[str] | None = None
    exposed_headers: list[str] | None = None
    max_age: float | None = None
    allow_credentials: bool | None = None

    def to_cors_config(self) -> CorsConfig:
        return CorsConfig(
            allowed_origins=_as_tuple(self.allowed_origins),
            allowed_methods=_as_tuple(self.allowed_methods) or (),
            preflight_continue=self.preflight_continue,
            preflight_success_status=self.preflight_success_status,  # type: ignore[arg-type]
            allowed_headers=_as_tuple(self.allowed_headers),
            exposed_headers=_as_tuple(self.exposed_headers),
            max_age=self.max_age,
            allow_credentials=self.allow_credentials,
        )
