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
"""Tests for Config — file loading, env overrides, placeholders and binding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from fluentcriteria.config.properties.criteria import CriteriaLoggingProperties, CriteriaMetricsProperties
from fluentcriteria.config.properties.logging import LoggingProperties
from fluentcriteria.core.config import Config, config_properties


@config_properties(prefix="myapp.pool")
@dataclass
class PoolProperties:
    size: int = 5
    timeout: float = 1.5
    eager: bool = False
    name: str = "default"


@config_properties(prefix="myapp.server")
class ServerProperties(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class Undecorated(BaseModel):
    value: str = "nope"


class TestGet:
    def test_dot_notation(self):
        config = Config({"a": {"b": {"c": 3}}})
        assert config.get("a.b.c") == 3

    def test_missing_returns_default(self):
        config = Config({"a": {"b": 1}})
        assert config.get("a.x", "fallback") == "fallback"
        assert config.get("a.b.c") is None

    def test_falsy_values_are_returned(self):
        config = Config({"a": {"enabled": False, "count": 0}})
        assert config.get("a.enabled", True) is False
        assert config.get("a.count", 9) == 0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FLUENTCRITERIA_CRITERIA_LOGGING_LEVEL", "ERROR")
        config = Config({"fluentcriteria": {"criteria": {"logging": {"level": "DEBUG"}}}})
        assert config.get("fluentcriteria.criteria.logging.level") == "ERROR"

    def test_env_key(self):
        assert Config.env_key("fluentcriteria.criteria.slow-threshold") == "FLUENTCRITERIA_CRITERIA_SLOW_THRESHOLD"
        assert Config.env_key("myapp.pool.size") == "FLUENTCRITERIA_MYAPP_POOL_SIZE"


class TestPlaceholders:
    def test_resolves_config_reference(self):
        config = Config({"base": "orders", "region": "${base}-cache"})
        assert config.get("region") == "orders-cache"

    def test_resolves_env(self, monkeypatch):
        monkeypatch.setenv("CACHE_REGION", "eu")
        assert Config({"region": "${CACHE_REGION}"}).get("region") == "eu"

    def test_inline_default(self):
        assert Config({"region": "${MISSING_REGION_VAR:local}"}).get("region") == "local"

    def test_empty_inline_default(self):
        assert Config({"region": "x${MISSING_REGION_VAR:}"}).get("region") == "x"

    def test_unresolvable_raises(self):
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            Config({"region": "${MISSING_REGION_VAR}"}).get("region")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestFromFile:
    def test_yaml_with_profile_overlay(self, tmp_path: Path):
        (tmp_path / "app.yaml").write_text("fluentcriteria:\n  logging:\n    format: console\n    level:\n      root: INFO\n")
        (tmp_path / "app-prod.yaml").write_text("fluentcriteria:\n  logging:\n    format: json\n")

        config = Config.from_file(tmp_path / "app.yaml", active_profiles=["prod", "absent"])

        assert config.get("fluentcriteria.logging.format") == "json"
        assert config.get("fluentcriteria.logging.level.root") == "INFO"
        assert len(config.loaded_sources) == 2

    def test_toml(self, tmp_path: Path):
        (tmp_path / "app.toml").write_text('[fluentcriteria.criteria.logging]\nslow_threshold_ms = 75\n')
        config = Config.from_file(tmp_path / "app.toml")
        assert config.bind(CriteriaLoggingProperties).slow_threshold_ms == 75

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "nope.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []


class TestBind:
    def test_dataclass_defaults(self):
        assert Config({}).bind(PoolProperties) == PoolProperties()

    def test_dataclass_coerces_strings(self, monkeypatch):
        monkeypatch.setenv("FLUENTCRITERIA_MYAPP_POOL_SIZE", "12")
        monkeypatch.setenv("FLUENTCRITERIA_MYAPP_POOL_TIMEOUT", "2.5")
        monkeypatch.setenv("FLUENTCRITERIA_MYAPP_POOL_EAGER", "yes")
        props = Config({"myapp": {"pool": {"name": "main"}}}).bind(PoolProperties)
        assert props == PoolProperties(size=12, timeout=2.5, eager=True, name="main")

    def test_dataclass_mapping_merges_default_and_file_entries(self):
        props = Config({"fluentcriteria": {"logging": {"level": {"fluentcriteria.criteria": "WARNING"}}}}).bind(
            LoggingProperties
        )
        assert props.level == {"root": "INFO", "fluentcriteria.criteria": "WARNING"}

    def test_dataclass_mapping_entry_env_override(self, monkeypatch):
        monkeypatch.setenv("FLUENTCRITERIA_LOGGING_LEVEL_ROOT", "ERROR")
        assert Config({}).bind(LoggingProperties).level == {"root": "ERROR"}

    def test_dataclass_mapping_ignores_scalar_env(self, monkeypatch):
        monkeypatch.setenv("FLUENTCRITERIA_LOGGING_LEVEL", "DEBUG")
        assert Config({}).bind(LoggingProperties).level == {"root": "INFO"}

    def test_pydantic_model(self):
        props = Config({"myapp": {"server": {"port": 9000}}}).bind(ServerProperties)
        assert props.port == 9000
        assert props.host == "0.0.0.0"

    def test_pydantic_env_override(self, monkeypatch):
        monkeypatch.setenv("FLUENTCRITERIA_MYAPP_SERVER_PORT", "7000")
        assert Config({}).bind(ServerProperties).port == 7000

    def test_pydantic_validation_failure(self):
        with pytest.raises(ValueError, match="Configuration validation failed for 'ServerProperties'"):
            Config({"myapp": {"server": {"port": 0}}}).bind(ServerProperties)

    def test_undecorated_raises(self):
        with pytest.raises(ValueError, match="not decorated with @config_properties"):
            Config({}).bind(Undecorated)


class TestCriteriaProperties:
    def test_logging_defaults(self):
        props = Config({}).bind(CriteriaLoggingProperties)
        assert props.enabled is True
        assert props.level == "DEBUG"
        assert props.slow_threshold_ms == 0

    def test_logging_level_normalised(self):
        props = Config({"fluentcriteria": {"criteria": {"logging": {"level": "info"}}}}).bind(
            CriteriaLoggingProperties
        )
        assert props.level == "INFO"

    def test_logging_rejects_unknown_level(self):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            Config({"fluentcriteria": {"criteria": {"logging": {"level": "loud"}}}}).bind(CriteriaLoggingProperties)

    def test_logging_rejects_negative_threshold(self):
        with pytest.raises(ValueError):
            Config({"fluentcriteria": {"criteria": {"logging": {"slow_threshold_ms": -1}}}}).bind(
                CriteriaLoggingProperties
            )

    def test_metrics_buckets(self):
        props = Config({"fluentcriteria": {"criteria": {"metrics": {"buckets": [0.1, 1]}}}}).bind(
            CriteriaMetricsProperties
        )
        assert props.buckets == (0.1, 1.0)
        assert props.counter_name == "criteria_executions_total"

    def test_logging_properties(self):
        props = Config({"fluentcriteria": {"logging": {"format": "json"}}}).bind(LoggingProperties)
        assert props.format == "json"
        assert props.level == {"root": "INFO"}
