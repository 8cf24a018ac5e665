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
"""Tests for the fluentcriteria exception hierarchy."""

from fluentcriteria.kernel.exceptions import (
    ContractViolationException,
    FluentCriteriaException,
    InvalidArgumentException,
    InvalidStateException,
)


class TestFluentCriteriaException:
    def test_basic_creation(self):
        exc = FluentCriteriaException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = FluentCriteriaException("bad chain", code="CHAIN_001", context={"entity": "Order"})
        assert exc.code == "CHAIN_001"
        assert exc.context["entity"] == "Order"

    def test_context_not_shared_between_instances(self):
        exc = FluentCriteriaException("a")
        exc.context["key"] = "value"
        assert FluentCriteriaException("b").context == {}


class TestContractViolations:
    def test_invalid_argument(self):
        exc = InvalidArgumentException("criteria is None")
        assert exc.code == "INVALID_ARGUMENT"
        assert isinstance(exc, ContractViolationException)

    def test_invalid_state_carries_context(self):
        exc = InvalidStateException("foreign criteria", context={"type": "Foo"})
        assert exc.code == "INVALID_STATE"
        assert exc.context == {"type": "Foo"}

    def test_hierarchy(self):
        assert issubclass(ContractViolationException, FluentCriteriaException)
        assert issubclass(InvalidArgumentException, ContractViolationException)
        assert issubclass(InvalidStateException, ContractViolationException)
        assert not issubclass(InvalidStateException, InvalidArgumentException)
