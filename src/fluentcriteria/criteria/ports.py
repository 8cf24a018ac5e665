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
"""Query-builder port: the capability a criteria decorator wraps.

Builders are supplied by an ORM integration and treated as opaque. The
only structural knowledge the decorator needs is the ``criteria_kind``
tag each builder reports, plus ``get_entity_or_class_name()`` on roots
and ``get_parent()`` on sub-scopes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from fluentcriteria.criteria.types import (
    CacheMode,
    CriteriaKind,
    FetchMode,
    FlushMode,
    JoinType,
    LockMode,
    ScrollMode,
)


@runtime_checkable
class Criteria(Protocol):
    """Fluent query builder.

    Mutating methods return a builder for chaining: either the same
    instance or, for ``create_criteria``, a new sub-scope builder.
    """

    @property
    def criteria_kind(self) -> CriteriaKind: ...

    # -- mutating ---------------------------------------------------------

    def add(self, criterion: Any) -> Criteria: ...

    def add_order(self, order: Any) -> Criteria: ...

    def create_alias(
        self,
        association_path: str,
        alias: str,
        join_type: JoinType | int = JoinType.INNER_JOIN,
        with_clause: Any | None = None,
    ) -> Criteria: ...

    def create_criteria(
        self,
        association_path: str,
        alias: str | None = None,
        join_type: JoinType | int = JoinType.INNER_JOIN,
        with_clause: Any | None = None,
    ) -> Criteria: ...

    def set_cache_mode(self, cache_mode: CacheMode) -> Criteria: ...

    def set_cache_region(self, cache_region: str) -> Criteria: ...

    def set_cacheable(self, cacheable: bool) -> Criteria: ...

    def set_comment(self, comment: str) -> Criteria: ...

    def set_fetch_mode(self, association_path: str, mode: FetchMode) -> Criteria: ...

    def set_fetch_size(self, fetch_size: int) -> Criteria: ...

    def set_first_result(self, first_result: int) -> Criteria: ...

    def set_max_results(self, max_results: int) -> Criteria: ...

    def set_flush_mode(self, flush_mode: FlushMode) -> Criteria: ...

    def set_lock_mode(self, lock_mode: LockMode, alias: str | None = None) -> Criteria: ...

    def set_projection(self, projection: Any) -> Criteria: ...

    def set_read_only(self, read_only: bool) -> Criteria: ...

    def set_result_transformer(self, result_transformer: Any) -> Criteria: ...

    def set_timeout(self, timeout: int) -> Criteria: ...

    # -- executing --------------------------------------------------------

    def list(self) -> Sequence[Any]: ...

    def unique_result(self) -> Any | None: ...

    def scroll(self, scroll_mode: ScrollMode | None = None) -> Any: ...

    # -- read accessors ---------------------------------------------------

    def get_alias(self) -> str: ...

    def is_read_only(self) -> bool: ...

    def is_read_only_initialized(self) -> bool: ...


@runtime_checkable
class RootCriteria(Criteria, Protocol):
    """Top-level builder of a chain; reports ``CriteriaKind.ROOT``."""

    def get_entity_or_class_name(self) -> str: ...


@runtime_checkable
class Subcriteria(Criteria, Protocol):
    """Builder nested under a parent; reports ``CriteriaKind.SUBCRITERIA``."""

    def get_parent(self) -> Criteria: ...


def criteria_kind_of(criteria: object) -> CriteriaKind | None:
    """Return the kind *criteria* reports, or ``None`` for a foreign object."""
    kind = getattr(criteria, "criteria_kind", None)
    return kind if isinstance(kind, CriteriaKind) else None
