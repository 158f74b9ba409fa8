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

"""Decide which of two free-form version strings is newer.

The comparison runs in layers and stops at the first one that decides:

1. Byte-identical inputs: no decision.
2. Both nightly (unless CompareRules.compare_nightly): no decision.
3. Value-groups, pairwise from the most significant group. The first
   differing component wins. Groups that look like ``dd.mm.yyyy`` on both
   sides (year in 1960..2030, month <= 12, day <= 31) are reversed first.
4. Stability rank: dev < alpha < beta < rc < pre < stable.
5. Meta, only with CompareRules.compare_meta: any difference favours the
   second argument, which is assumed to be the newer candidate.
6. Otherwise: no decision.

Only the groups both sides have are compared, and extra trailing components
within a group never decide on their own. So ``1.0`` vs ``1.0.0`` is no
decision, while ``1`` beats ``1-rc2`` on stability.

Example:
    >>> compare("1.0.0-rc1", "1.0.0-rc2")
    '1.0.0-rc2'
    >>> compare("01-02-2024", "02-01-2024")
    '01-02-2024'
    >>> compare("1", "1-bmsrtbq23ui")
    ''
"""

from __future__ import annotations

from dataclasses import dataclass

from versioncmp.logging import Logger, get_global_logger
from versioncmp.results import CompareResult
from versioncmp.versioning.parser import parse

_DATE_MIN_YEAR = 1960
_DATE_MAX_YEAR = 2030


@dataclass(frozen=True)
class CompareRules:
    """Rules that relax or force comparisons.

    Attributes:
        compare_nightly: If False, two nightly builds are never ordered.
        compare_meta: If True, versions that only differ in meta are
            ordered in favour of the second argument.

    """

    compare_nightly: bool = False
    compare_meta: bool = False


VersionCompareRules = CompareRules


def _is_reversed_date(group_a: tuple[int, ...], group_b: tuple[int, ...]) -> bool:
    """True if both groups look like day, month, year."""
    if len(group_a) != 3 or len(group_b) != 3:
        return False
    for day, month, year in (group_a, group_b):
        if year < _DATE_MIN_YEAR or year > _DATE_MAX_YEAR:
            return False
        if month > 12:
            return False
        # Invalid dates such as 31.02. pass as well.
        if day > 31:
            return False
    return True


def explain(
    version_a: str,
    version_b: str,
    rules: CompareRules | None = None,
    *,
    logger: Logger | None = None,
) -> CompareResult:
    """Compare two version strings and report which step decided.

    Args:
        version_a: Version assumed to be the older one.
        version_b: Version assumed to be the newer one.
        rules: Comparison rules; defaults to CompareRules().
        logger: Optional logger; defaults to the global logger.

    Returns:
        CompareResult whose winner is one of the two inputs, or "" for no
        decision.

    Raises:
        TypeError: If either argument is not a string.

    """
    for value in (version_a, version_b):
        if not isinstance(value, str):
            raise TypeError(f"version must be a str, got {type(value).__name__}")
    if rules is None:
        rules = CompareRules()
    if logger is None:
        logger = get_global_logger()

    if version_a == version_b:
        logger.debug("COMPARE", f"{version_a!r} is identical, no decision")
        return CompareResult(winner="", decision="identical")

    parsed_a = parse(version_a, logger=logger)
    parsed_b = parse(version_b, logger=logger)

    if not rules.compare_nightly and parsed_a.nightly and parsed_b.nightly:
        logger.debug("COMPARE", "both versions are nightly builds, no decision")
        return CompareResult(winner="", decision="nightly")

    # Left never has more value-groups than right.
    left, right = parsed_a, parsed_b
    left_raw, right_raw = version_a, version_b
    if len(left.values) > len(right.values):
        left, right = right, left
        left_raw, right_raw = right_raw, left_raw

    for index, (group_left, group_right) in enumerate(zip(left.values, right.values)):
        # Shorter group first. The swap only holds for this group.
        if len(group_left) > len(group_right):
            group_left, group_right = group_right, group_left
            win_left, win_right = right_raw, left_raw
        else:
            win_left, win_right = left_raw, right_raw

        if _is_reversed_date(group_left, group_right):
            logger.debug("COMPARE", f"group {index}: reading dd.mm.yyyy as yyyy.mm.dd")
            group_left, group_right = group_left[::-1], group_right[::-1]

        for value_left, value_right in zip(group_left, group_right):
            if value_left == value_right:
                continue
            winner = win_left if value_left > value_right else win_right
            logger.debug(
                "COMPARE",
                f"decided by group {index}: {group_left} vs {group_right} "
                f"-> {winner!r}",
            )
            return CompareResult(winner=winner, decision="values", group_index=index)

    if left.rank != right.rank:
        winner = left_raw if left.rank > right.rank else right_raw
        logger.debug(
            "COMPARE",
            f"decided by stability: {left.stability} vs {right.stability} "
            f"-> {winner!r}",
        )
        return CompareResult(winner=winner, decision="stability")

    if rules.compare_meta and parsed_a.meta != parsed_b.meta:
        logger.debug(
            "COMPARE",
            f"meta differs ({list(parsed_a.meta)} vs {list(parsed_b.meta)}), "
            f"forcing {version_b!r}",
        )
        return CompareResult(winner=version_b, decision="meta")

    logger.debug("COMPARE", f"{version_a!r} and {version_b!r} are equal, no decision")
    return CompareResult(winner="", decision="equal")


def compare(
    version_a: str,
    version_b: str,
    rules: CompareRules | None = None,
    *,
    logger: Logger | None = None,
) -> str:
    """Return the greater of two version strings, or "" for no decision.

    Args:
        version_a: Version assumed to be the older one. Only matters when
            meta comparison is forced, where differences favour version_b.
        version_b: Version assumed to be the newer one.
        rules: Comparison rules; defaults to CompareRules().
        logger: Optional logger; defaults to the global logger.

    Returns:
        version_a, version_b or "".

    Example:
        Check whether a scraped tag is an update:
            ```python
            from versioncmp import compare

            latest = compare("123.0.6312.59", "123.0.6312.87")
            # "123.0.6312.87"
            ```

    """
    return explain(version_a, version_b, rules, logger=logger).winner
