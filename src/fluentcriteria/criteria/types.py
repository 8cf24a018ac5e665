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
"""Value types handed through to a wrapped query builder.

The decorator never interprets these; they exist so call sites and
builders agree on a vocabulary.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class CriteriaKind(Enum):
    """Structural role a builder plays in a criteria chain."""

    ROOT = "root"
    SUBCRITERIA = "subcriteria"
    DECORATOR = "decorator"


class JoinType(IntEnum):
    """Association join kinds, numbered by their legacy integer codes."""

    NONE = -666
    INNER_JOIN = 0
    LEFT_OUTER_JOIN = 1
    RIGHT_OUTER_JOIN = 2
    FULL_JOIN = 4

    @classmethod
    def from_code(cls, code: int) -> JoinType:
        """Map a legacy integer join code to its member.

        Raises:
            ValueError: If *code* is not a known join code.
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown join type code: {code}") from None


class CacheMode(Enum):
    NORMAL = "normal"
    IGNORE = "ignore"
    GET = "get"
    PUT = "put"
    REFRESH = "refresh"


class FetchMode(Enum):
    DEFAULT = "default"
    JOIN = "join"
    SELECT = "select"


class FlushMode(Enum):
    MANUAL = "manual"
    COMMIT = "commit"
    AUTO = "auto"
    ALWAYS = "always"


class LockMode(Enum):
    NONE = "none"
    READ = "read"
    OPTIMISTIC = "optimistic"
    OPTIMISTIC_FORCE_INCREMENT = "optimistic_force_increment"
    PESSIMISTIC_READ = "pessimistic_read"
    PESSIMISTIC_WRITE = "pessimistic_write"
    PESSIMISTIC_FORCE_INCREMENT = "pessimistic_force_increment"
    UPGRADE_NOWAIT = "upgrade_nowait"
    UPGRADE_SKIPLOCKED = "upgrade_skiplocked"


class ScrollMode(Enum):
    FORWARD_ONLY = "forward_only"
    SCROLL_SENSITIVE = "scroll_sensitive"
    SCROLL_INSENSITIVE = "scroll_insensitive"
