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
"""Criteria decorator that logs every query execution."""

from __future__ import annotations

import time
from typing import Any

import structlog

from fluentcriteria.config.properties.criteria import CriteriaLoggingProperties
from fluentcriteria.core.config import Config
from fluentcriteria.criteria.decorator import AbstractCriteriaDecorator
from fluentcriteria.criteria.ports import Criteria
from fluentcriteria.logging.port import LoggingPort
from fluentcriteria.logging.structlog_adapter import StructlogAdapter

_default_port: StructlogAdapter | None = None


def _default_logging_port(config: Config) -> StructlogAdapter:
    """Process-wide adapter, configured from the first config it sees."""
    global _default_port
    if _default_port is None:
        _default_port = StructlogAdapter()
        _default_port.configure(config)
    return _default_port


class LoggingCriteriaDecorator(AbstractCriteriaDecorator["LoggingCriteriaDecorator"]):
    """Logs ``criteria_executing`` / ``criteria_executed`` around each execution.

    Executions taking at least ``slow_threshold_ms`` are logged as
    ``criteria_slow`` at WARNING instead of ``criteria_executed``.

    Usage:
        rows = (
            LoggingCriteriaDecorator(session_criteria)
            .add(restriction)
            .set_max_results(10)
            .list()
        )
    """

    def __init__(
        self,
        criteria: Criteria,
        properties: CriteriaLoggingProperties | None = None,
        logger: Any = None,
    ) -> None:
        super().__init__(criteria)
        self._properties = properties if properties is not None else CriteriaLoggingProperties()
        self._logger = logger if logger is not None else structlog.get_logger(__name__)
        self._started_at: float | None = None
        self._entity: str | None = None

    @classmethod
    def from_config(
        cls,
        criteria: Criteria,
        config: Config,
        logging_port: LoggingPort | None = None,
    ) -> LoggingCriteriaDecorator:
        """Build a decorator configured from ``fluentcriteria.criteria.logging``.

        Without a *logging_port* the shared StructlogAdapter is used; it
        configures structlog once, on the first call.
        """
        if logging_port is None:
            logging_port = _default_logging_port(config)
        return cls(criteria, config.bind(CriteriaLoggingProperties), logging_port.criteria_logger())

    @property
    def properties(self) -> CriteriaLoggingProperties:
        return self._properties

    def decorate(self, criteria: Criteria) -> LoggingCriteriaDecorator:
        self.inner = criteria
        return self

    def before_executed(self) -> None:
        if not self._properties.enabled:
            return
        self._entity = self.get_root_entity_name()
        self._log(self._properties.level, "criteria_executing", entity=self._entity, alias=self.get_alias())
        self._started_at = time.perf_counter()

    def after_executed(self) -> None:
        if self._started_at is None:
            return
        duration_ms = round((time.perf_counter() - self._started_at) * 1000, 2)
        self._started_at = None

        threshold = self._properties.slow_threshold_ms
        if threshold and duration_ms >= threshold:
            self._logger.warning(
                "criteria_slow",
                entity=self._entity,
                duration_ms=duration_ms,
                threshold_ms=threshold,
            )
        else:
            self._log(self._properties.level, "criteria_executed", entity=self._entity, duration_ms=duration_ms)

    def _log(self, level: str, event: str, **kwargs: Any) -> None:
        getattr(self._logger, level.lower())(event, **kwargs)
