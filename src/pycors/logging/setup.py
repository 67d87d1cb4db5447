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
"""Log output for pycors, configured from the ``pycors.logging`` settings.

The policy logs to ``pycors.cors`` and the Starlette adapters to
``pycors.web``; both are tuned through ``levels``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

import structlog

from pycors.core.config import Config, config_properties
from pycors.kernel.exceptions import InvalidConfigurationException

FORMATS = ("console", "json")


@config_properties(prefix="pycors.logging")
@dataclass
class LoggingProperties:
    format: str = "console"
    level: str = "INFO"
    levels: dict[str, str] = field(default_factory=lambda: {"pycors.cors": "INFO", "pycors.web": "INFO"})


def _level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(str(name).upper())
    if level is None:
        raise InvalidConfigurationException(
            f"Unknown log level: {name!r}",
            code="LOGGING_LEVEL",
            context={"level": name},
        )
    return level


def configure_logging(settings: Config) -> LoggingProperties:
    """Route structlog through stdlib logging with the configured renderer and levels."""
    props = settings.bind(LoggingProperties)
    fmt = props.format.lower()
    if fmt not in FORMATS:
        raise InvalidConfigurationException(
            f"pycors.logging.format must be one of {FORMATS}, got {props.format!r}",
            code="LOGGING_FORMAT",
            context={"format": props.format},
        )
    root_level = _level(props.level)
    module_levels = {name: _level(level) for name, level in props.levels.items()}

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level, force=True)
    for name, level in module_levels.items():
        logging.getLogger(name).setLevel(level)
    return props
