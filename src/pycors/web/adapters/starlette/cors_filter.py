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
"""CORS filter — applies a CorsPolicy decision inside a host filter chain."""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatch
from typing import cast

import structlog
from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import Response

from pycors.bootstrap import configure
from pycors.core.config import Config
from pycors.cors.config import CorsConfig
from pycors.cors.policy import CorsPolicy, Decision, RequestDescriptor
from pycors.web.ports.filter import CallNext

logger = structlog.get_logger("pycors.web")


def describe_request(request: Request) -> RequestDescriptor:
    return RequestDescriptor.from_headers(request.method, request.headers)


def apply_headers(headers: MutableHeaders, decision: Decision) -> None:
    """Add the decision's headers, keeping any value downstream already set."""
    for name, value in decision.headers:
        headers.setdefault(name, value)


class CorsFilter:
    """:class:`WebFilter` that answers preflights and decorates responses.

    Attributes:
        url_patterns: Glob patterns the filter applies to.  Empty means all paths.
        exclude_patterns: Glob patterns skipped even when ``url_patterns`` match.
    """

    def __init__(
        self,
        policy: CorsPolicy | CorsConfig | None = None,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        settings: Config | None = None,
    ) -> None:
        if isinstance(policy, CorsPolicy):
            self._policy = policy
        elif settings is not None:
            self._policy = configure(settings)
        else:
            self._policy = CorsPolicy(policy)
        self.url_patterns = list(url_patterns)
        self.exclude_patterns = list(exclude_patterns)

    def should_not_filter(self, request: Request) -> bool:
        path: str = request.url.path

        if self.url_patterns and not any(fnmatch(path, p) for p in self.url_patterns):
            return True

        return bool(self.exclude_patterns and any(fnmatch(path, p) for p in self.exclude_patterns))

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        decision = self._policy.evaluate(describe_request(request))

        if decision.terminate is not None:
            logger.debug(
                "cors_preflight_answered",
                path=request.url.path,
                status_code=int(decision.terminate),
            )
            response = Response(status_code=int(decision.terminate))
            apply_headers(response.headers, decision)
            return response

        response = cast(Response, await call_next(request))
        apply_headers(response.headers, decision)
        return response
