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
"""StructlogAdapter — LoggingPort backed by structlog over stdlib logging."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from fluentcriteria.config.properties.criteria import CriteriaLoggingProperties
from fluentcriteria.config.properties.logging import LoggingProperties
from fluentcriteria.core.config import Config

CRITERIA_LOGGER = "fluentcriteria.criteria"


def _level_no(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _processors(output_format: str) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor
    if output_format.lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


class StructlogAdapter:
    """Default logging adapter.

    Applies ``fluentcriteria.logging`` (root level, per-logger levels, output
    format). The ``fluentcriteria.criteria`` logger is additionally set to the
    level criteria decorators log at (``fluentcriteria.criteria.logging.level``)
    so a stricter root level does not hide execution events. An explicit
    per-logger level for ``fluentcriteria.criteria`` takes precedence.
    """

    def __init__(self) -> None:
        self._logging = LoggingProperties()
        self._criteria = CriteriaLoggingProperties()
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    @property
    def output_format(self) -> str:
        return self._logging.format.lower()

    @property
    def criteria_properties(self) -> CriteriaLoggingProperties:
        return self._criteria

    def levels(self) -> dict[str, str]:
        """Effective logger levels by logger name, ``root`` included."""
        levels = {name: str(level).upper() for name, level in self._logging.level.items()}
        levels.setdefault("root", "INFO")
        if self._criteria.enabled:
            levels.setdefault(CRITERIA_LOGGER, self._criteria.level)
        return levels

    def configure(self, config: Config) -> None:
        self._logging = config.bind(LoggingProperties)
        self._criteria = config.bind(CriteriaLoggingProperties)
        levels = self.levels()

        structlog.configure(
            processors=_processors(self.output_format),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=_level_no(levels.pop("root")),
            force=True,
        )
        for name, level in levels.items():
            self.set_level(name, level)
        self._configured = True

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def criteria_logger(self) -> Any:
        return self.get_logger(CRITERIA_LOGGER)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(_level_no(level))
