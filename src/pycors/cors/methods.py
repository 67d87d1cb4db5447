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
"""HTTP method identifiers: stdlib ``HTTPMethod`` plus custom strings."""

from __future__ import annotations

from http import HTTPMethod

DEFAULT_METHODS: tuple[HTTPMethod, ...] = (
    HTTPMethod.GET,
    HTTPMethod.POST,
    HTTPMethod.PUT,
    HTTPMethod.DELETE,
    HTTPMethod.HEAD,
    HTTPMethod.PATCH,
)


def method_name(method: HTTPMethod | str) -> str:
    """Return the wire name of *method*.

    Standard methods are upper-cased (``"patch"`` -> ``"PATCH"``);
    extension methods are returned verbatim since they are case-sensitive.
    """
    if isinstance(method, HTTPMethod):
        return method.value
    upper = method.upper()
    if upper in HTTPMethod.__members__:
        return upper
    return method


def is_preflight(method: HTTPMethod | str) -> bool:
    return method_name(method) == HTTPMethod.OPTIONS.value
