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
"""Abstract decorator for a Criteria query builder that keeps method chaining.

A builder cannot simply be wrapped without losing the fluent interface:
each chained call returns the bare builder, not the wrapper. Every
mutating method here delegates to the wrapped builder and re-wraps the
result through :meth:`AbstractCriteriaDecorator.decorate`, which concrete
decorators implement to return themselves. Binding the type parameter to
the concrete class makes chained calls keep that type::

    class AuditedCriteria(AbstractCriteriaDecorator["AuditedCriteria"]):
        def decorate(self, criteria: Criteria) -> AuditedCriteria:
            self.inner = criteria
            return self

Executing methods (``list``, ``unique_result``, ``scroll``) are bracketed
by the :meth:`before_executed` / :meth:`after_executed` hooks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, cast

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
from fluentcriteria.kernel.exceptions import InvalidArgumentException, InvalidStateException

D = TypeVar("D", bound="AbstractCriteriaDecorator[Any]")


def _supplied(**kwargs: Any) -> dict[str, Any]:
    """Keyword arguments the caller actually passed; the builder defaults the rest."""
    return {name: value for name, value in kwargs.items() if value is not None}


class AbstractCriteriaDecorator(ABC, Generic[D]):
    """Criteria decorator whose chained calls return the concrete decorator ``D``.

    Not safe for concurrent use; neither are the builders it wraps.

    Args:
        criteria: The builder being decorated.

    Raises:
        InvalidArgumentException: If *criteria* is ``None``.
    """

    def __init__(self, criteria: Criteria) -> None:
        if criteria is None:
            raise InvalidArgumentException(
                f"{type(self).__name__} requires a criteria to decorate, got None"
            )
        self.inner: Criteria = criteria

    @property
    def criteria_kind(self) -> CriteriaKind:
        return CriteriaKind.DECORATOR

    # =========================================================================
    # Re-wrapping
    # =========================================================================

    @abstractmethod
    def decorate(self, criteria: Criteria) -> D:
        """Decorate *criteria* with this decorator; used for method chaining.

        Implementations must store the builder and return ``self``::

            def decorate(self, criteria: Criteria) -> MyDecorator:
                self.inner = criteria
                return self
        """

    # =========================================================================
    # Hooks
    # =========================================================================

    def before_executed(self) -> None:
        """Called before delegating to a result-producing builder method."""

    def after_executed(self) -> None:
        """Called after a result-producing builder method, even when it raised."""

    # =========================================================================
    # Root resolution
    # =========================================================================

    def get_root_entity_name(self) -> str:
        """Entity or class name of the root this criteria chain is built on."""
        return self.get_root_criteria().get_entity_or_class_name()

    def get_root_criteria(self) -> RootCriteria:
        """Walk through nested decorators and sub-scope parents to the chain root.

        Raises:
            InvalidStateException: If the chain reaches an object that is not a
                root builder, a sub-scope builder or a criteria decorator.
        """
        current: object = self.inner
        while True:
            kind = criteria_kind_of(current)
            if kind is CriteriaKind.ROOT:
                return cast(RootCriteria, current)
            if kind is CriteriaKind.DECORATOR:
                current = cast(AbstractCriteriaDecorator[Any], current).get_root_criteria()
            elif kind is CriteriaKind.SUBCRITERIA:
                current = cast(Subcriteria, current).get_parent()
            else:
                raise InvalidStateException(
                    "Decorated criteria must be a root criteria, a subcriteria "
                    "or a criteria decorator",
                    context={"type": type(current).__name__},
                )

    def is_root_criteria(self) -> bool:
        """Whether the decorated builder itself is the root of the chain."""
        return criteria_kind_of(self.inner) is CriteriaKind.ROOT

    # =========================================================================
    # Delegated mutating methods
    # =========================================================================

    def add(self, criterion: Any) -> D:
        return self.decorate(self.inner.add(criterion))

    def add_order(self, order: Any) -> D:
        return self.decorate(self.inner.add_order(order))

    def create_alias(
        self,
        association_path: str,
        alias: str,
        join_type: JoinType | int | None = None,
        with_clause: Any | None = None,
    ) -> D:
        given = _supplied(join_type=join_type, with_clause=with_clause)
        return self.decorate(self.inner.create_alias(association_path, alias, **given))

    def create_criteria(
        self,
        association_path: str,
        alias: str | None = None,
        join_type: JoinType | int | None = None,
        with_clause: Any | None = None,
    ) -> D:
        given = _supplied(alias=alias, join_type=join_type, with_clause=with_clause)
        return self.decorate(self.inner.create_criteria(association_path, **given))

    def set_cache_mode(self, cache_mode: CacheMode) -> D:
        return self.decorate(self.inner.set_cache_mode(cache_mode))

    def set_cache_region(self, cache_region: str) -> D:
        return self.decorate(self.inner.set_cache_region(cache_region))

    def set_cacheable(self, cacheable: bool) -> D:
        return self.decorate(self.inner.set_cacheable(cacheable))

    def set_comment(self, comment: str) -> D:
        return self.decorate(self.inner.set_comment(comment))

    def set_fetch_mode(self, association_path: str, mode: FetchMode) -> D:
        return self.decorate(self.inner.set_fetch_mode(association_path, mode))

    def set_fetch_size(self, fetch_size: int) -> D:
        return self.decorate(self.inner.set_fetch_size(fetch_size))

    def set_first_result(self, first_result: int) -> D:
        return self.decorate(self.inner.set_first_result(first_result))

    def set_max_results(self, max_results: int) -> D:
        return self.decorate(self.inner.set_max_results(max_results))

    def set_flush_mode(self, flush_mode: FlushMode) -> D:
        return self.decorate(self.inner.set_flush_mode(flush_mode))

    def set_lock_mode(self, lock_mode: LockMode, alias: str | None = None) -> D:
        if alias is None:
            return self.decorate(self.inner.set_lock_mode(lock_mode))
        return self.decorate(self.inner.set_lock_mode(lock_mode, alias))

    def set_projection(self, projection: Any) -> D:
        return self.decorate(self.inner.set_projection(projection))

    def set_read_only(self, read_only: bool) -> D:
        return self.decorate(self.inner.set_read_only(read_only))

    def set_result_transformer(self, result_transformer: Any) -> D:
        return self.decorate(self.inner.set_result_transformer(result_transformer))

    def set_timeout(self, timeout: int) -> D:
        return self.decorate(self.inner.set_timeout(timeout))

    # =========================================================================
    # Delegated executing methods
    # =========================================================================

    def list(self) -> Sequence[Any]:
        self.before_executed()
        try:
            return self.inner.list()
        finally:
            self.after_executed()

    def unique_result(self) -> Any | None:
        self.before_executed()
        try:
            return self.inner.unique_result()
        finally:
            self.after_executed()

    def scroll(self, scroll_mode: ScrollMode | None = None) -> Any:
        self.before_executed()
        try:
            if scroll_mode is None:
                return self.inner.scroll()
            return self.inner.scroll(scroll_mode)
        finally:
            self.after_executed()

    # =========================================================================
    # Read-through accessors
    # =========================================================================

    def get_alias(self) -> str:
        return self.inner.get_alias()

    def is_read_only(self) -> bool:
        return self.inner.is_read_only()

    def is_read_only_initialized(self) -> bool:
        return self.inner.is_read_only_initialized()
