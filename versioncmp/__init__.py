"""
versioncmp - compare free-form version strings

A small library for update checkers that have to compare version strings
scraped from heterogeneous sources (package registries, git tags,
changelogs) without a single canonical versioning scheme.

versioncmp handles:
  - Semantic versions and plain numeric versions of any length
  - Dates, including dd.mm.yyyy which is read as yyyy.mm.dd
  - Stability markers (dev, alpha, beta, rc, pre) with or without separators
  - Nightly builds, which are not ordered unless asked to
  - Build hashes and other opaque suffixes

When two versions cannot be ordered with confidence, the result is "no
decision" (an empty string) rather than a guess or an exception.

Quick Start
-----------
    >>> from versioncmp import compare
    >>> compare("1.3_2023-07-21_0e150ed6c4", "1.3.1_2023-11-16_91b66b0783")
    '1.3.1_2023-11-16_91b66b0783'
    >>> compare("1.0.0-nightly-12412", "2.0.0-nightly-187623")
    ''

Package Structure
-----------------
versioning : package
    Splitter, parser and comparator.
policy : package
    Update decisions built on top of compare.
config : package
    Loading compare rules from YAML.
results : module
    Public return types.
logging : module
    Logger protocol (silent by default).
exceptions : module
    Exception hierarchy.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Compare free-form version strings"

from versioncmp.config import load_compare_rules, rules_from_mapping
from versioncmp.policy import UpdatePolicy, is_newer, latest_version, should_update
from versioncmp.results import CompareResult
from versioncmp.versioning import (
    CompareRules,
    Version,
    VersionCompareRules,
    compare,
    explain,
    parse,
    split,
    stability_rank,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "compare",
    "explain",
    "CompareRules",
    "VersionCompareRules",
    "CompareResult",
    "Version",
    "parse",
    "split",
    "stability_rank",
    "is_newer",
    "latest_version",
    "should_update",
    "UpdatePolicy",
    "load_compare_rules",
    "rules_from_mapping",
]
