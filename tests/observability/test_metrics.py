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
"""Tests for MetricsRegistry."""

from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from fluentcriteria.observability.metrics import MetricsRegistry


@pytest.fixture
def registry() -> MetricsRegistry:
    return MetricsRegistry(CollectorRegistry())


class TestMetricsRegistry:
    def test_counter_is_created_once(self, registry):
        first = registry.counter("criteria_test_total", "test counter")
        assert registry.counter("criteria_test_total", "test counter") is first

    def test_counter_increments(self, registry):
        registry.counter("criteria_calls_total", "calls", labels=["entity"]).labels(entity="Order").inc(3)
        value = registry.collector_registry.get_sample_value("criteria_calls_total", {"entity": "Order"})
        assert value == 3.0

    def test_histogram_custom_buckets(self, registry):
        histogram = registry.histogram("criteria_latency_seconds", "latency", buckets=(0.5, 1.0))
        histogram.observe(0.7)
        collector = registry.collector_registry
        assert collector.get_sample_value("criteria_latency_seconds_bucket", {"le": "0.5"}) == 0.0
        assert collector.get_sample_value("criteria_latency_seconds_bucket", {"le": "1.0"}) == 1.0

    def test_separate_collectors_do_not_collide(self):
        a = MetricsRegistry(CollectorRegistry())
        b = MetricsRegistry(CollectorRegistry())
        a.counter("criteria_dup_total", "dup")
        b.counter("criteria_dup_total", "dup")

    def test_only_metric_kinds_used_by_decorators(self, registry):
        assert callable(registry.counter)
        assert callable(registry.histogram)
        assert not hasattr(registry, "gauge")
