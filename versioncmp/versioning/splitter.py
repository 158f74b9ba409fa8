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

"""Split raw version strings into delimiter-separated token groups.

Projects often glue several numbering schemes together, e.g. a semver core,
a build date and a commit hash (``1.3.1_2023-11-16_91b66b0783``). They tend
to use a different separator for each part, so a change of separator is
taken as the start of a new group:

    >>> split("1.3.1_2023-11-16_91b66b0783")
    [['1', '3', '1'], ['2023'], ['11', '16'], ['91b66b0783']]

Strings without any separator (commit hashes, build ids) come back as a
single group holding a single token.
"""

from __future__ import annotations

DELIMITERS = frozenset(".-_/\\;:")


def split(raw: str) -> list[list[str]]:
    """Partition a raw version string into ordered groups of tokens.

    Args:
        raw: Version-like string. Any content is accepted.

    Returns:
        Groups in input order, each a list of tokens in input order. Tokens
        may be empty strings when two separators are adjacent.

    Note:
        The token preceding a changed separator still belongs to the old
        group; the new group starts after it. No group is opened by the very
        first separator, nor by a separator that is the last character.

    """
    groups: list[list[str]] = []
    start = 0
    last_delimiter = ""

    for index, char in enumerate(raw):
        if char not in DELIMITERS:
            continue

        token = raw[start:index]
        start = index + 1

        if not groups:
            groups.append([])
        current = groups[-1]

        # "pre-release" classifies as "pre"; the "release" token adds nothing.
        if current and current[-1] == "pre" and token == "release":
            continue
        current.append(token)

        if last_delimiter and char != last_delimiter and index != len(raw) - 1:
            groups.append([])
        last_delimiter = char

    # No separator at all, e.g. a commit hash
    if start == 0:
        return [[raw]]

    tail = raw[start:]
    if tail:
        groups[-1].append(tail)

    return groups
