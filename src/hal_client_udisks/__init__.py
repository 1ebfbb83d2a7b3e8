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
Top-level classes and methods.
"""

from ._connection import Bus, DirectoryClient

from ._context import Context
from ._context import ctx_free
from ._context import ctx_init
from ._context import ctx_new
from ._context import ctx_set_dbus_connection
from ._context import ctx_shutdown

from ._devices import DeviceResolver
from ._devices import manager_find_device_string_match

from ._errors import DecodeError
from ._errors import HalClientError
from ._errors import HalError
from ._errors import InvalidArgumentError
from ._errors import MachineIdError
from ._errors import NotInitializedError
from ._errors import PropertyAbsentError
from ._errors import RemoteUnreachableError

from ._properties import PropertyResolver
from ._properties import device_get_property_double
from ._properties import device_get_property_int
from ._properties import device_get_property_string
from ._properties import device_get_property_type
from ._properties import device_get_property_uint64

from ._strings import StringArray
from ._strings import free_string
from ._strings import free_string_array

from ._types import PropertyType

from ._version import __version__
