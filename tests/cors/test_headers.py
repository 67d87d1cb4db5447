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
"""Tests for header-name and method identifiers."""

from __future__ import annotations

from http import HTTPMethod

import pytest

from pycors.cors.headers import HeaderName, join_names, standard_name
from pycors.cors.methods import DEFAULT_METHODS, is_preflight, method_name


class TestStandardName:
    def test_enum_member(self):
        assert standard_name(HeaderName.ACCESS_CONTROL_MAX_AGE) == "Access-Control-Max-Age"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("content-type", "Content-Type"),
            ("AUTHORIZATION", "Authorization"),
            ("etag", "ETag"),
            ("www-authenticate", "WWW-Authenticate"),
        ],
    )
    def test_known_string_is_canonicalized(self, raw, expected):
        assert standard_name(raw) == expected

    def test_custom_name_passes_through(self):
        assert standard_name("x-Request-ID") == "x-Request-ID"

    def test_join_names(self):
        assert join_names((HeaderName.CONTENT_TYPE, "x-custom", "cookie")) == "Content-Type, x-custom, Cookie"

    def test_header_name_is_str(self):
        assert HeaderName.ORIGIN == "Origin"


class TestMethodName:
    def test_default_methods(self):
        assert [method_name(m) for m in DEFAULT_METHODS] == ["GET", "POST", "PUT", "DELETE", "HEAD", "PATCH"]

    def test_standard_string_is_upper_cased(self):
        assert method_name("patch") == "PATCH"

    def test_extension_method_verbatim(self):
        assert method_name("propfind") == "propfind"

    @pytest.mark.parametrize("method", [HTTPMethod.OPTIONS, "OPTIONS", "options"])
    def test_is_preflight(self, method):
        assert is_preflight(method) is True

    def test_get_is_not_preflight(self):
        assert is_preflight("GET") is False
