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

"""Update policies for versioncmp.

Modules:

updates : module
    Decide whether a discovered version should replace the current one.

Public API:

UpdatePolicy : class
    Configuration for update decisions.
should_update : function
    Determine if a new version should be picked up based on policy.
is_newer : function
    Check if a remote version is newer than the current version.
latest_version : function
    Pick the latest of several version strings.

Example:
    from versioncmp.policy import latest_version

    latest = latest_version(["1.0.0", "1.2.0-rc1", "1.1.9"])
    print(latest)  # "1.2.0-rc1"

"""

from .updates import UpdatePolicy, is_newer, latest_version, should_update

__all__ = ["UpdatePolicy", "is_newer", "latest_version", "should_update"]
