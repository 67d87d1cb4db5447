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
"""CorsPolicy — computes CORS response headers for a single request.

Framework-agnostic: the policy reads a :class:`RequestDescriptor` and
returns a :class:`Decision`.  Host adapters apply the headers and either
finish the exchange with ``Decision.terminate`` or continue downstream.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

import structlog

from pycors.cors.config import DEFAULT_CORS_CONFIG, CorsConfig
from pycors.cors.headers import HeaderName, join_names
from pycors.cors.methods import is_preflight

logger = structlog.get_logger("pycors.cors")

# Sentinel emitted when an allow-list is configured but the origin is not on it.
DENIED_ORIGIN = "false"


@dataclass(frozen=True)
class RequestDescriptor:
    """The request inputs the policy looks at."""

    method: str
    origin: str | None = None
    requested_headers: str | None = None

    @classmethod
    def from_headers(cls, method: str, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> RequestDescriptor:
        """Build a descriptor from a header mapping, matching names case-insensitively."""
        items = headers.items() if isinstance(headers, Mapping) else headers
        origin_key = HeaderName.ORIGIN.lower()
        requested_key = HeaderName.ACCESS_CONTROL_REQUEST_HEADERS.lower()

        origin: str | None = None
        requested: str | None = None
        for name, value in items:
            lowered = name.lower()
            if lowered == origin_key and origin is None:
                origin = value
            elif lowered == requested_key and requested is None:
                requested = value
        return cls(method=method, origin=origin, requested_headers=requested)


@dataclass(frozen=True)
class Decision:
    """Headers to set, in order, and an optional status to finish with.

    When ``terminate`` is set the host must answer with that status and
    skip downstream processing.
    """

    headers: tuple[tuple[str, str], ...] = ()
    terminate: HTTPStatus | int | None = None

    @property
    def should_terminate(self) -> bool:
        return self.terminate is not None

    def get(self, name: str, default: Any = None) -> Any:
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    def as_dict(self) -> dict[str, str]:
        return dict(self.headers)


def _format_max_age(max_age: float) -> str:
    if float(max_age).is_integer():
        return str(int(max_age))
    return str(max_age)


class CorsPolicy:
    """Stateless CORS decision engine bound to one immutable config.

    Safe to share across concurrent requests: ``evaluate()`` reads only its
    arguments and the frozen configuration.
    """

    def __init__(self, config: CorsConfig | None = None) -> None:
        self._config = config or DEFAULT_CORS_CONFIG

    @property
    def config(self) -> CorsConfig:
        return self._config

    def evaluate(self, request: RequestDescriptor) -> Decision:
        cfg = self._config
        headers: list[tuple[str, str]] = []

        headers.append((HeaderName.ACCESS_CONTROL_ALLOW_ORIGIN.value, self._resolve_origin(request)))

        if cfg.allow_credentials is not None:
            headers.append(
                (HeaderName.ACCESS_CONTROL_ALLOW_CREDENTIALS.value, "true" if cfg.allow_credentials else "false")
            )

        if not is_preflight(request.method):
            self._add_exposed_headers(headers)
            return Decision(headers=tuple(headers))

        headers.append((HeaderName.ACCESS_CONTROL_ALLOW_METHODS.value, ", ".join(cfg.method_names)))

        if cfg.allowed_headers is not None:
            headers.append((HeaderName.ACCESS_CONTROL_ALLOW_HEADERS.value, join_names(cfg.allowed_headers)))
        elif request.requested_headers is not None:
            headers.append((HeaderName.ACCESS_CONTROL_ALLOW_HEADERS.value, request.requested_headers))

        if cfg.max_age is not None and cfg.max_age > 0:
            headers.append((HeaderName.ACCESS_CONTROL_MAX_AGE.value, _format_max_age(cfg.max_age)))

        self._add_exposed_headers(headers)

        terminate = None if cfg.preflight_continue else cfg.preflight_success_status
        logger.debug(
            "cors_preflight",
            origin=request.origin,
            terminate=int(terminate) if terminate is not None else None,
        )
        return Decision(headers=tuple(headers), terminate=terminate)

    def _resolve_origin(self, request: RequestDescriptor) -> str:
        allowed = self._config.allowed_origins
        if allowed is None:
            return "*"
        if request.origin is not None and request.origin in allowed:
            return request.origin
        if request.origin is not None:
            logger.debug("cors_origin_rejected", origin=request.origin, method=request.method)
        return DENIED_ORIGIN

    def _add_exposed_headers(self, headers: list[tuple[str, str]]) -> None:
        exposed = self._config.exposed_headers
        if exposed is not None:
            headers.append((HeaderName.ACCESS_CONTROL_EXPOSE_HEADERS.value, join_names(exposed)))


def evaluate(config: CorsConfig, request: RequestDescriptor) -> Decision:
    """Compute the CORS decision for *request* under *config*."""
    return CorsPolicy(config).evaluate(request)
