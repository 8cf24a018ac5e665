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
"""Exception hierarchy for fluentcriteria.

All library exceptions inherit from FluentCriteriaException so callers can
catch library errors in one place. Errors raised by a wrapped query builder
are never translated and do not appear here.

Categories:
- ContractViolationException: misuse of the decoration contract (programmer error)
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class FluentCriteriaException(Exception):
    """Base exception for all fluentcriteria errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_STATE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Contract Violations
# =============================================================================


class ContractViolationException(FluentCriteriaException):
    """A precondition of the decoration contract was violated.

    These signal programmer errors, not recoverable conditions.
    """


class InvalidArgumentException(ContractViolationException):
    """A required argument was missing or unusable."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_ARGUMENT", context=context)


class InvalidStateException(ContractViolationException):
    """An object is not in a state the requested operation can work with."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_STATE", context=context)
