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
"""Criteria decorator configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fluentcriteria.core.config import config_properties

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@config_properties(prefix="fluentcriteria.criteria.logging")
class CriteriaLoggingProperties(BaseModel):
    """Settings for LoggingCriteriaDecorator (fluentcriteria.criteria.logging.*).

    A ``slow_threshold_ms`` of 0 disables slow-execution warnings.
    """

    enabled: bool = True
    level: str = "DEBUG"
    slow_threshold_ms: float = Field(default=0.0, ge=0)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LEVELS)}")
        return upper


@config_properties(prefix="fluentcriteria.criteria.metrics")
class CriteriaMetricsProperties(BaseModel):
    """Settings for TimedCriteriaDecorator (fluentcriteria.criteria.metrics.*)."""

    histogram_name: str = "criteria_execution_seconds"
    counter_name: str = "criteria_executions_total"
    buckets: tuple[float, ...] = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
