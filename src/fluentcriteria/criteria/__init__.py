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
"""fluentcriteria Criteria — chainable decorators over a Criteria query builder.

Framework-agnostic port and value types are exported together with the
abstract decorator. Ready-made decorators live in
``fluentcriteria.criteria.decorators``.
"""

from fluentcriteria.criteria.decorator import AbstractCriteriaDecorator
from fluentcriteria.criteria.ports import Criteria, RootCriteria, Subcriteria, criteria_kind_of
from fluentcriteria.criteria.types import (
    CacheMode,
    CriteriaKind,
    FetchMode,
    FlushMode,
    JoinType,
    LockMode,
    ScrollMode,
)

__all__ = [
    "AbstractCriteriaDecorator",
    "CacheMode",
    "Criteria",
    "CriteriaKind",
    "FetchMode",
    "FlushMode",
    "JoinType",
    "LockMode",
    "RootCriteria",
    "ScrollMode",
    "Subcriteria",
    "criteria_kind_of",
]
