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

"""Load compare rules from YAML.

Tools that embed versioncmp usually keep their settings in a YAML file.
Rules may live under a ``compare_rules`` key or at the top level:

    compare_rules:
      compare_nightly: false
      compare_meta: true

Both snake_case and camelCase keys are accepted (``compare_meta`` and
``compareMeta``). Unknown keys and non-boolean values are rejected, so a
typo doesn't silently fall back to the default.

Error Handling:

- FileNotFoundError: Rules file doesn't exist
- ConfigError: YAML parse errors, empty files, non-mapping documents,
  unknown keys or non-boolean values
- All errors are chained with "from err" for better debugging

Example:
    >>> from pathlib import Path
    >>> from versioncmp.config import load_compare_rules
    >>> rules = load_compare_rules(
    ...     Path("rules.yaml"), overrides={"compare_meta": False}
    ... )
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from versioncmp.exceptions import ConfigError
from versioncmp.logging import Logger, get_global_logger
from versioncmp.versioning import CompareRules

RULES_SECTION = "compare_rules"

_RULE_KEYS: dict[str, str] = {
    "compare_nightly": "compare_nightly",
    "compareNightly": "compare_nightly",
    "compare_meta": "compare_meta",
    "compareMeta": "compare_meta",
}


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      FileNotFoundError      - when file does not exist
      ConfigError            - for invalid YAML or an empty document
    """
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


def rules_from_mapping(data: Mapping[str, Any]) -> CompareRules:
    """Build CompareRules from a mapping of rule names to booleans.

    Args:
        data: Rule settings, e.g. ``{"compare_meta": True}``. Missing keys
            keep their defaults.

    Returns:
        The CompareRules described by the mapping.

    Raises:
        ConfigError: If data is not a mapping, holds an unknown key, names
            the same rule twice under different spellings, or a value is not
            a boolean.

    """
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"compare rules must be a mapping, got {type(data).__name__}"
        )

    values: dict[str, bool] = {}
    for key, value in data.items():
        field_name = _RULE_KEYS.get(key)
        if field_name is None:
            known = ", ".join(sorted(_RULE_KEYS))
            raise ConfigError(
                f"unknown compare rule {key!r} (expected one of: {known})"
            )
        if field_name in values:
            raise ConfigError(f"compare rule {field_name!r} given more than once")
        # YAML "yes"/"no" already load as bools; strings and ints don't count
        if not isinstance(value, bool):
            raise ConfigError(
                f"compare rule {key!r} must be true or false, got {value!r}"
            )
        values[field_name] = value

    return CompareRules(**values)


def load_compare_rules(
    path: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    logger: Logger | None = None,
) -> CompareRules:
    """
    Load compare rules from a YAML file.

    Steps
      1) Read the YAML document (must be a mapping).
      2) Take the 'compare_rules' section, or the whole document if absent.
      3) Apply 'overrides' on top (last wins).
      4) Validate and build CompareRules.

    Returns
      The CompareRules described by the file.

    Raises
      FileNotFoundError if the file is missing,
      ConfigError for YAML errors or invalid rule settings.
    """
    if logger is None:
        logger = get_global_logger()

    path = Path(path)
    logger.verbose("CONFIG", f"Loading compare rules: {path}")

    document = _load_yaml_file(path)
    if not isinstance(document, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")

    if RULES_SECTION in document:
        section = document[RULES_SECTION]
        if section is None:
            section = {}
        elif not isinstance(section, dict):
            raise ConfigError(f"'{RULES_SECTION}' must be a mapping: {path}")
        logger.verbose("CONFIG", f"Using '{RULES_SECTION}' section")
    else:
        section = document

    merged: dict[str, Any] = dict(section)
    if overrides:
        logger.verbose("CONFIG", f"Applying overrides: {', '.join(overrides)}")
        # An override replaces the file setting under either spelling
        overridden = {_RULE_KEYS[key] for key in overrides if key in _RULE_KEYS}
        merged = {
            key: value
            for key, value in merged.items()
            if _RULE_KEYS.get(key) not in overridden
        }
        merged.update(overrides)

    try:
        rules = rules_from_mapping(merged)
    except ConfigError as err:
        raise ConfigError(f"{path}: {err}") from err

    logger.verbose(
        "CONFIG",
        f"compare_nightly={rules.compare_nightly} compare_meta={rules.compare_meta}",
    )
    return rules
