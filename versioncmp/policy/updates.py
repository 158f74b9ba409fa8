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

"""Update decision helpers built on top of version comparison.

Answers the questions an update checker actually asks: is the version a
registry or tag list reports newer than the one installed, and which of a
batch of scraped versions is the latest.

Example:
    Check if a discovered version should be picked up:

        from versioncmp.policy.updates import UpdatePolicy, should_update

        decision = should_update(
            remote_version="124.0.6367.91",
            current_version="124.0.6367.70",
            policy=UpdatePolicy(strategy="newer_only"),
        )

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from versioncmp.logging import Logger, get_global_logger
from versioncmp.versioning import CompareRules, explain

Strategy = Literal["newer_only", "any_change"]


@dataclass(frozen=True)
class UpdatePolicy:
    """Configuration for update decisions.

    Attributes:
        strategy: "newer_only" updates only on a confirmed newer version.
            "any_change" also updates when the version string changed but
            the two versions cannot be ordered (e.g. a rebuilt commit hash).
        rules: Comparison rules passed through to compare().

    """

    strategy: Strategy = "newer_only"
    rules: CompareRules = field(default_factory=CompareRules)


def is_newer(
    remote: str,
    current: str | None,
    rules: CompareRules | None = None,
    *,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' is newer than 'current'.

    Returns True iff there is no current version, or compare() picks remote
    over a different current version.
    """
    if logger is None:
        logger = get_global_logger()

    if current is None:
        logger.verbose("POLICY", f"No current version, treating {remote!r} as newer")
        return True

    result = explain(current, remote, rules, logger=logger)
    newer = result.decided and result.winner == remote
    logger.verbose(
        "POLICY",
        f"Remote {remote!r} is {'newer than' if newer else 'not newer than'} "
        f"current {current!r}",
    )
    return newer


def latest_version(
    candidates: Iterable[str],
    rules: CompareRules | None = None,
    *,
    logger: Logger | None = None,
) -> str | None:
    """Pick the latest of several version strings.

    Candidates are folded left to right; the running best is only replaced
    when compare() picks the candidate, so among versions that cannot be
    ordered the earliest one is kept.

    Args:
        candidates: Version strings, e.g. all tags of a repository.
        rules: Comparison rules; defaults to CompareRules().
        logger: Optional logger; defaults to the global logger.

    Returns:
        The latest version, or None if there were no candidates.

    """
    best: str | None = None
    for candidate in candidates:
        if best is None:
            best = candidate
            continue
        result = explain(best, candidate, rules, logger=logger)
        if result.decided and result.winner == candidate:
            best = candidate
    return best


def should_update(
    *,
    remote_version: str,
    current_version: str | None,
    policy: UpdatePolicy,
    logger: Logger | None = None,
) -> bool:
    """Decide whether a newly discovered version should replace the current one.

    Args:
        remote_version: Version found during discovery.
        current_version: Version currently installed or staged (None if none).
        policy: UpdatePolicy controlling the decision.
        logger: Optional logger; defaults to the global logger.

    Returns:
        True if the remote version should be picked up, False otherwise.

    """
    if is_newer(remote_version, current_version, policy.rules, logger=logger):
        return True

    if policy.strategy == "newer_only":
        return False

    if policy.strategy == "any_change":
        # Unordered but different, e.g. "nightly-abc" vs "nightly-def".
        # An explicit downgrade is still refused.
        result = explain(current_version, remote_version, policy.rules, logger=logger)
        return result.decision not in ("identical", "values", "stability")

    # Safe default: do not update on unknown strategy
    return False
