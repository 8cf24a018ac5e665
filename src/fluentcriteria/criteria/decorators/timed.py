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
"""Criteria decorator that records execution durations as Prometheus metrics."""

from __future__ import annotations

import time

from fluentcriteria.config.properties.criteria import CriteriaMetricsProperties
from fluentcriteria.criteria.decorator import AbstractCriteriaDecorator
from fluentcriteria.criteria.ports import Criteria
from fluentcriteria.observability.metrics import MetricsRegistry


class TimedCriteriaDecorator(AbstractCriteriaDecorator["TimedCriteriaDecorator"]):
    """Observes each execution into a histogram and counter labelled by root entity.

    Failed executions are observed as well.
    """

    def __init__(
        self,
        criteria: Criteria,
        registry: MetricsRegistry,
        properties: CriteriaMetricsProperties | None = None,
    ) -> None:
        super().__init__(criteria)
        props = properties if properties is not None else CriteriaMetricsProperties()
        self._histogram = registry.histogram(
            props.histogram_name,
            "Criteria execution time in seconds",
            labels=["entity"],
            buckets=props.buckets,
        )
        self._counter = registry.counter(
            props.counter_name,
            "Number of criteria executions",
            labels=["entity"],
        )
        self._started_at: float | None = None
        self._entity = ""

    def decorate(self, criteria: Criteria) -> TimedCriteriaDecorator:
        self.inner = criteria
        return self

    def before_executed(self) -> None:
        self._entity = self.get_root_entity_name()
        self._started_at = time.perf_counter()

    def after_executed(self) -> None:
        if self._started_at is None:
            return
        elapsed = time.perf_counter() - self._started_at
        self._started_at = None
        self._histogram.labels(entity=self._entity).observe(elapsed)
        self._counter.labels(entity=self._entity).inc()
