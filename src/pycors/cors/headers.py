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
"""Header-name identifiers with their canonical wire-format spelling.

Known headers are members of :class:`HeaderName`.  Any other header is
represented by a plain string and passed through unchanged.
"""

from __future__ import annotations

from enum import StrEnum


class HeaderName(StrEnum):
    """Well-known HTTP header names."""

    # CORS response headers
    ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
    ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
    ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
    ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
    ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"
    ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"

    # CORS request headers
    ORIGIN = "Origin"
    ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
    ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"

    # Common request headers
    ACCEPT = "Accept"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    CACHE_CONTROL = "Cache-Control"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    IF_MATCH = "If-Match"
    IF_NONE_MATCH = "If-None-Match"
    IF_MODIFIED_SINCE = "If-Modified-Since"
    PRAGMA = "Pragma"
    RANGE = "Range"
    USER_AGENT = "User-Agent"
    X_REQUESTED_WITH = "X-Requested-With"

    # Common response headers
    CONTENT_DISPOSITION = "Content-Disposition"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_RANGE = "Content-Range"
    ETAG = "ETag"
    EXPIRES = "Expires"
    LAST_MODIFIED = "Last-Modified"
    LINK = "Link"
    LOCATION = "Location"
    RETRY_AFTER = "Retry-After"
    SET_COOKIE = "Set-Cookie"
    VARY = "Vary"
    WWW_AUTHENTICATE = "WWW-Authenticate"


_BY_LOWER_NAME: dict[str, HeaderName] = {member.value.lower(): member for member in HeaderName}


def standard_name(name: HeaderName | str) -> str:
    """Return the canonical wire spelling of *name*.

    Strings that match a known header case-insensitively are canonicalized
    (``"content-type"`` -> ``"Content-Type"``); anything else is returned
    as given.
    """
    if isinstance(name, HeaderName):
        return name.value
    known = _BY_LOWER_NAME.get(name.lower())
    return known.value if known is not None else name


def join_names(names: tuple[HeaderName | str, ...]) -> str:
    return ", ".join(standard_name(n) for n in names)
