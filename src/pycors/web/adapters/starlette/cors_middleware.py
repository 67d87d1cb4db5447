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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from pycors.bootstrap import configure
from pycors.core.config import Config
from pycors.cors.config import CorsConfig
from pycors.cors.policy import CorsPolicy, RequestDescriptor
from pycors.web.adapters.starlette.cors_filter import apply_headers


class CorsMiddleware:
    """Evaluates a :class:`CorsPolicy` for every HTTP request.

    Preflights that the policy terminates are answered here without calling
    the wrapped app.  Other responses get the CORS headers added at
    ``http.response.start``.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses pass through unbuffered.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: CorsConfig | None = None,
        policy: CorsPolicy | None = None,
        settings: Config | None = None,
    ) -> None:
        self.app = app
        if policy is None:
            policy = configure(settings) if settings is not None else CorsPolicy(config)
        self._policy = policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = RequestDescriptor.from_headers(scope["method"], Headers(scope=scope))
        decision = self._policy.evaluate(request)

        if decision.terminate is not None:
            response = Response(status_code=int(decision.terminate))
            apply_headers(response.headers, decision)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                apply_headers(MutableHeaders(scope=message), decision)
            await send(message)

        await self.app(scope, receive, send_with_cors)
