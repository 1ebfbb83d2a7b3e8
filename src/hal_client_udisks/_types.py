# Copyright 2024 Red Hat, Inc.
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
"""
Legacy property types.
"""

# isort: STDLIB
from enum import IntEnum


class PropertyType(IntEnum):
    """
    Possible types for properties on legacy device objects.

    The values are those of the legacy C enumeration, which reused D-Bus
    type codes.
    """

    INVALID = 0
    INT32 = ord("i")
    UINT64 = ord("t")
    DOUBLE = ord("d")
    BOOLEAN = ord("b")
    STRING = ord("s")
    STRLIST = (ord("s") << 8) + ord("l")
