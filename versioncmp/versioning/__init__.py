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

"""Version parsing and comparison for versioncmp.

The pipeline is one-directional and free of shared mutable state:

    raw string -> splitter -> parser -> Version -> compare

Modules:

splitter : module
    Partition a raw string into delimiter-separated token groups.
parser : module
    Turn token groups into a Version (values, stability, nightly, meta).
comparator : module
    Layered comparison of two version strings.

Public API:

compare : function
    Return the greater of two version strings, or "" for no decision.
explain : function
    Same as compare, but reports which step decided.
CompareRules : dataclass
    Toggles for nightly and meta comparison.
parse : function
    Parse a raw string into a Version.
split : function
    Split a raw string into token groups.
Version : dataclass
    Parsed representation of a version string.

Example:
    >>> from versioncmp.versioning import compare
    >>> compare("2", "1")
    '2'
    >>> compare("1.0.0-pre-2", "1.0.0-pre-3")
    '1.0.0-pre-3'
"""

from .comparator import CompareRules, VersionCompareRules, compare, explain
from .parser import (
    STABILITY_KEYWORDS,
    STABILITY_RANK,
    Stability,
    Version,
    parse,
    stability_rank,
)
from .splitter import DELIMITERS, split

__all__ = [
    "CompareRules",
    "VersionCompareRules",
    "compare",
    "explain",
    "Stability",
    "STABILITY_KEYWORDS",
    "STABILITY_RANK",
    "Version",
    "parse",
    "stability_rank",
    "DELIMITERS",
    "split",
]
