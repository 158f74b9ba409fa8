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

"""Exception hierarchy for versioncmp.

Comparing versions never raises for string input: ambiguity is expressed as
"no decision" (an empty result), not as an error. Exceptions only come from
the layers around the comparator, such as loading compare rules from YAML.

- ConfigError: Rule configuration errors (YAML parse, unknown keys, wrong types)

All exceptions inherit from VersionCmpError, allowing users to catch every
library error with a single except clause if needed.

Example:
    Catching configuration errors:
        ```python
        from pathlib import Path
        from versioncmp.config import load_compare_rules
        from versioncmp.exceptions import ConfigError

        try:
            rules = load_compare_rules(Path("rules.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "VersionCmpError",
    "ConfigError",
]


class VersionCmpError(Exception):
    """Base exception for all versioncmp errors."""

    pass


class ConfigError(VersionCmpError):
    """Raised for compare-rule configuration errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, empty documents)
    - A top-level document or rules section that is not a mapping
    - Unknown rule names
    - Rule values that are not booleans

    Example:
        Catching configuration errors:
            ```python
            from versioncmp.config import rules_from_mapping
            from versioncmp.exceptions import ConfigError

            try:
                rules = rules_from_mapping({"compare_meta": "yes"})
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
