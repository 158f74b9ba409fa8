# Copyright 2025 Roger Cibrian
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

"""Public API return types for versioncmp.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from versioncmp import explain

        result = explain("1.0.0-beta", "1.0.0-rc")
        print(result.winner)     # "1.0.0-rc"
        print(result.decision)   # "stability"
        ```

Note:
    Only public API return types belong in this module. Domain types
    (like Version) stay co-located with their parsing logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Decision = Literal["identical", "nightly", "values", "stability", "meta", "equal"]


@dataclass(frozen=True)
class CompareResult:
    """Result from comparing two version strings.

    Attributes:
        winner: The input judged greater, or "" when no decision was made.
        decision: Which step settled the comparison:
            "identical" (byte-identical inputs), "nightly" (both nightly and
            nightly comparison disabled), "values" (a numeric component
            differed), "stability", "meta" (forced by differing meta), or
            "equal" (nothing differed under the given rules).
        group_index: Index of the value-group that decided, only set when
            decision is "values".
    """

    winner: str
    decision: Decision
    group_index: int | None = None

    @property
    def decided(self) -> bool:
        """True if one of the inputs was judged greater."""
        return self.decision in ("values", "stability", "meta")
