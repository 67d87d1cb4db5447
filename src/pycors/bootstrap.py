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
"""Build a ready-to-use CorsPolicy from settings."""

from __future__ import annotations

from pathlib import Path

import structlog

from pycors.core.config import Config
from pycors.cors.config import CorsConfig
from pycors.cors.policy import CorsPolicy
from pycors.logging.setup import configure_logging

logger = structlog.get_logger("pycors.cors")


def configure(settings: Config) -> CorsPolicy:
    """Apply ``pycors.logging`` and build the policy from ``pycors.cors``."""
    configure_logging(settings)
    config = CorsConfig.from_config(settings)
    logger.info(
        "cors_policy_configured",
        allowed_origins=list(config.allowed_origins) if config.allowed_origins is not None else "*",
        methods=list(config.method_names),
        preflight_continue=config.preflight_continue,
    )
    return CorsPolicy(config)


def load(path: str | Path | None = None) -> CorsPolicy:
    """Read *path* over the packaged defaults and env vars, then :func:`configure`."""
    return configure(Config.from_file(path))
