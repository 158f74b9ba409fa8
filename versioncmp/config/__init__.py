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

"""Configuration loading for versioncmp.

Compare rules can be built from a plain mapping or read from a YAML file.
The comparator itself never reads configuration; callers load rules once
and pass them in.

Public API:

- load_compare_rules: Load CompareRules from a YAML file
- rules_from_mapping: Build CompareRules from a mapping

Example:
    Basic usage:

        from pathlib import Path
        from versioncmp import compare
        from versioncmp.config import load_compare_rules

        rules = load_compare_rules(Path("versioncmp.yaml"))
        print(compare("1.0-abc", "1.0-def", rules))

"""

from .loader import load_compare_rules, rules_from_mapping

__all__ = ["load_compare_rules", "rules_from_mapping"]
