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
"""Tests for CorsConfig, its defaults, validation and property binding."""

from __future__ import annotations

import dataclasses
from http import HTTPMethod, HTTPStatus

import pytest

from pycors.core.config import Config
from pycors.cors.config import DEFAULT_CORS_CONFIG, CorsConfig, CorsProperties
from pycors.kernel.exceptions import InvalidConfigurationException, PyCorsException


class TestCorsConfigDefaults:
    def test_cors_config_defaults(self):
        cfg = CorsConfig()

        assert cfg.allowed_origins is None
        assert cfg.allowed_methods == (
            HTTPMethod.GET,
            HTTPMethod.POST,
            HTTPMethod.PUT,
            HTTPMethod.DELETE,
            HTTPMethod.HEAD,
            HTTPMethod.PATCH,
        )
        assert cfg.preflight_continue is False
        assert cfg.preflight_success_status is HTTPStatus.NO_CONTENT
        assert cfg.allowed_headers is None
        assert cfg.exposed_headers is None
        assert cfg.max_age is None
        assert cfg.allow_credentials is None

    def test_default_constant_matches_fresh_instance(self):
        assert DEFAULT_CORS_CONFIG == CorsConfig()


class TestCorsConfigNormalization:
    def test_lists_become_tuples(self):
        cfg = CorsConfig(
            allowed_origins=["https://a.com"],
            allowed_methods=["GET"],
            allowed_headers=["X-A"],
            exposed_headers=["X-B"],
        )
        assert cfg.allowed_origins == ("https://a.com",)
        assert cfg.allowed_methods == ("GET",)
        assert cfg.allowed_headers == ("X-A",)
        assert cfg.exposed_headers == ("X-B",)

    def test_single_string_origin_is_one_entry(self):
        cfg = CorsConfig(allowed_origins="https://a.com")  # type: ignore[arg-type]
        assert cfg.allowed_origins == ("https://a.com",)

    def test_int_status_becomes_http_status(self):
        cfg = CorsConfig(preflight_success_status=200)  # type: ignore[arg-type]
        assert cfg.preflight_success_status is HTTPStatus.OK

    def test_method_names(self):
        cfg = CorsConfig(allowed_methods=[HTTPMethod.GET, "patch", "PURGE"])
        assert cfg.method_names == ("GET", "PATCH", "PURGE")


class TestCorsConfigValidation:
    def test_empty_methods_rejected(self):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            CorsConfig(allowed_methods=[])
        assert exc_info.value.code == "CORS_CONFIG_EMPTY_METHODS"

    @pytest.mark.parametrize("status", [99, 600, 799, "abc", None, True])
    def test_out_of_range_status_rejected(self, status):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            CorsConfig(preflight_success_status=status)  # type: ignore[arg-type]
        assert exc_info.value.code == "CORS_CONFIG_STATUS"

    @pytest.mark.parametrize("status", [100, 299, 599])
    def test_unregistered_status_in_range_kept_as_int(self, status):
        cfg = CorsConfig(preflight_success_status=status)
        assert cfg.preflight_success_status == status
        if status != 100:
            assert not isinstance(cfg.preflight_success_status, HTTPStatus)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            CorsConfig(allowed_methods=())
        assert issubclass(InvalidConfigurationException, PyCorsException)


class TestCorsConfigFrozen:
    def test_cors_config_frozen(self):
        cfg = CorsConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.allow_credentials = True  # type: ignore[misc]

        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.max_age = 9999  # type: ignore[misc]


class TestCorsProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(CorsProperties)
        assert props.allowed_origins is None
        assert props.allowed_methods == ["GET", "POST", "PUT", "DELETE", "HEAD", "PATCH"]
        assert props.preflight_success_status == 204
        assert props.to_cors_config() == CorsConfig(allowed_methods=list(props.allowed_methods))

    def test_bind_custom_values(self):
        config = Config(
            {
                "pycors": {
                    "cors": {
                        "allowed_origins": ["https://a.com", "https://b.com"],
                        "allowed_methods": ["GET", "POST"],
                        "preflight_continue": True,
                        "preflight_success_status": 200,
                        "allowed_headers": ["Content-Type"],
                        "exposed_headers": ["X-Total-Count"],
                        "max_age": 600,
                        "allow_credentials": False,
                    }
                }
            }
        )
        cfg = CorsConfig.from_config(config)

        assert cfg.allowed_origins == ("https://a.com", "https://b.com")
        assert cfg.method_names == ("GET", "POST")
        assert cfg.preflight_continue is True
        assert cfg.preflight_success_status is HTTPStatus.OK
        assert cfg.allowed_headers == ("Content-Type",)
        assert cfg.exposed_headers == ("X-Total-Count",)
        assert cfg.max_age == 600
        assert cfg.allow_credentials is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PYCORS_CORS_ALLOWED_ORIGINS", "https://a.com, https://b.com")
        monkeypatch.setenv("PYCORS_CORS_MAX_AGE", "86400")
        monkeypatch.setenv("PYCORS_CORS_ALLOW_CREDENTIALS", "true")
        monkeypatch.setenv("PYCORS_CORS_PREFLIGHT_CONTINUE", "yes")

        cfg = CorsConfig.from_config(Config({"pycors": {"cors": {"max_age": 10}}}))

        assert cfg.allowed_origins == ("https://a.com", "https://b.com")
        assert cfg.max_age == 86400.0
        assert cfg.allow_credentials is True
        assert cfg.preflight_continue is True

    def test_env_none_clears_optional(self, monkeypatch):
        monkeypatch.setenv("PYCORS_CORS_ALLOWED_ORIGINS", "none")
        cfg = CorsConfig.from_config(Config({"pycors": {"cors": {"allowed_origins": ["https://a.com"]}}}))
        assert cfg.allowed_origins is None

    def test_empty_methods_from_config_rejected(self):
        config = Config({"pycors": {"cors": {"allowed_methods": []}}})
        with pytest.raises(InvalidConfigurationException):
            CorsConfig.from_config(config)

    def test_bad_env_value_names_the_setting(self, monkeypatch):
        monkeypatch.setenv("PYCORS_CORS_MAX_AGE", "ten minutes")
        with pytest.raises(InvalidConfigurationException) as exc_info:
            CorsConfig.from_config(Config({}))
        assert exc_info.value.context["key"] == "pycors.cors.max_age"

    def test_unregistered_status_from_config(self):
        cfg = CorsConfig.from_config(Config({"pycors": {"cors": {"preflight_success_status": 299}}}))
        assert cfg.preflight_success_status == 299
