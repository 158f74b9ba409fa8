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

"""Build a structured Version out of a raw version string.

Every token produced by the splitter lands in exactly one bucket:

1. Tokens containing "nightly" only set the nightly flag.
2. A stability keyword at the start or end of a token sets the stability
   and is stripped; the rest of the token continues to steps 3 and 4.
3. Tokens that are plain unsigned 32-bit decimal integers become values.
4. Anything else is kept as opaque meta.

Stability keywords (case-insensitive):

    dev, devel, develop               -> dev
    pre, prerel, prerelease           -> pre
    alpha                             -> alpha
    beta                              -> beta
    rc, candidate, releasecandidate   -> rc

Canonical ordering, lowest first: dev < alpha < beta < rc < pre < stable.
"pre" ranking above "rc" is intentional.

Example:
    >>> parse("1.0.0-rc2")
    Version(stability='rc', nightly=False, meta=(), values=((1, 0, 0), (2,)))
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from versioncmp.logging import Logger, get_global_logger
from versioncmp.versioning.splitter import split

Stability = Literal["dev", "alpha", "beta", "rc", "pre", "stable"]

STABILITY_KEYWORDS: Mapping[str, Stability] = MappingProxyType(
    {
        "dev": "dev",
        "devel": "dev",
        "develop": "dev",
        "pre": "pre",
        "prerel": "pre",
        "prerelease": "pre",
        "alpha": "alpha",
        "beta": "beta",
        "rc": "rc",
        "candidate": "rc",
        "releasecandidate": "rc",
    }
)

STABILITY_RANK: Mapping[Stability, int] = MappingProxyType(
    {
        "dev": 0,
        "alpha": 1,
        "beta": 2,
        "rc": 3,
        "pre": 4,
        "stable": 5,
    }
)

# Longest first, so "prerelease" is stripped whole instead of leaving "release".
_KEYWORD_ORDER: tuple[str, ...] = tuple(
    sorted(STABILITY_KEYWORDS, key=len, reverse=True)
)

_MAX_VALUE = 2**32 - 1


@dataclass(frozen=True)
class Version:
    """Parsed representation of one version string.

    Attributes:
        stability: Last stability keyword seen, "stable" if none.
        nightly: True if any token contained "nightly".
        meta: Opaque tokens in first-seen order, duplicates kept. Stored
            lower-cased and with any stability keyword stripped.
        values: One tuple of integers per group that held at least one
            numeric token, in input order (most significant first).

    """

    stability: Stability = "stable"
    nightly: bool = False
    meta: tuple[str, ...] = ()
    values: tuple[tuple[int, ...], ...] = ()

    @property
    def rank(self) -> int:
        """Canonical rank of this version's stability."""
        return STABILITY_RANK[self.stability]


def stability_rank(stability: Stability) -> int:
    """Return the canonical rank of a stability value (dev=0 ... stable=5).

    Raises:
        KeyError: If ``stability`` is not one of the canonical values.

    """
    return STABILITY_RANK[stability]


def _strip_stability(token: str) -> tuple[Stability | None, str]:
    """Strip a stability keyword from either end of a lower-cased token."""
    for keyword in _KEYWORD_ORDER:
        trimmed = token.removeprefix(keyword).removesuffix(keyword)
        if trimmed != token:
            return STABILITY_KEYWORDS[keyword], trimmed
    return None, token


def _parse_value(token: str) -> int | None:
    """Parse an unsigned 32-bit decimal integer, or return None.

    Signs, underscores, whitespace and non-ASCII digits are rejected, as is
    anything that doesn't fit in 32 bits. Leading zeros are allowed.
    """
    if not token or not token.isascii() or not token.isdigit():
        return None
    # int() refuses very long digit strings; 2**32 - 1 has 10 digits
    digits = token.lstrip("0") or "0"
    if len(digits) > len(str(_MAX_VALUE)):
        return None
    value = int(digits)
    if value > _MAX_VALUE:
        return None
    return value


def parse(raw: str, *, logger: Logger | None = None) -> Version:
    """Parse a raw version string. Never fails for string input.

    Args:
        raw: Version-like string.
        logger: Optional logger; defaults to the global logger.

    Returns:
        The structured Version.

    """
    if logger is None:
        logger = get_global_logger()

    stability: Stability = "stable"
    nightly = False
    meta: list[str] = []
    values: list[tuple[int, ...]] = []

    for group in split(raw):
        group_values: list[int] = []
        for token in group:
            token = token.lower()

            if "nightly" in token:
                nightly = True
                continue

            matched, token = _strip_stability(token)
            if matched is not None:
                stability = matched

            value = _parse_value(token)
            if value is None:
                meta.append(token)
            else:
                group_values.append(value)

        if group_values:
            values.append(tuple(group_values))

    version = Version(
        stability=stability,
        nightly=nightly,
        meta=tuple(meta),
        values=tuple(values),
    )
    logger.debug(
        "PARSE",
        f"{raw!r} -> values={version.values} stability={version.stability} "
        f"nightly={version.nightly} meta={list(version.meta)}",
    )
    return version
