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
Printing the legacy view of a machine's storage.
"""

# isort: STDLIB
import sys

from ._constants import (
    COMPUTER_UDI,
    DRIVE_TYPE_DISK,
    KEY_DRIVE_TYPE,
    KEY_HARDWARE_SERIAL,
    KEY_STORAGE_BUS,
    KEY_STORAGE_SERIAL,
    KEY_STORAGE_SIZE,
)
from ._devices import manager_find_device_string_match
from ._errors import HalError
from ._properties import (
    device_get_property_string,
    device_get_property_type,
    device_get_property_uint64,
)
from ._strings import free_string, free_string_array
from ._types import PropertyType

DRIVE_KEYS = (KEY_STORAGE_BUS, KEY_STORAGE_SERIAL, KEY_STORAGE_SIZE)


def print_property(ctx, udi, key, out=None, err=None):
    """
    Print one property of a device, dispatching on its type.

    :param Context ctx: an initialized context
    :param str udi: the device
    :param str key: the property
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    error = HalError()
    property_type = device_get_property_type(ctx, udi, key, error=error)
    if property_type is PropertyType.STRING:
        value = device_get_property_string(ctx, udi, key, error=error)
        print(f"\t{key}: {value}", file=out)
        free_string(value)
    elif property_type is PropertyType.UINT64:
        value = device_get_property_uint64(ctx, udi, key, error=error)
        print(f"\t{key}: {value}", file=out)
    else:
        print(f"Unexpected type {int(property_type)} for {key}", file=err)

    if error.is_set():
        print(f"{error.name}: {error.message}", file=err)


def print_inventory(ctx, out=None, err=None):
    """
    Print the machine serial, every disk drive with its properties, and
    every processor.

    :param Context ctx: an initialized context
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    print("sysinfo:", file=out)
    print_property(ctx, COMPUTER_UDI, KEY_HARDWARE_SERIAL, out, err)

    (drives, _) = manager_find_device_string_match(
        ctx, KEY_DRIVE_TYPE, DRIVE_TYPE_DISK
    )
    for udi in drives:
        print(f"hdd: {udi}", file=out)
        for key in DRIVE_KEYS:
            print_property(ctx, udi, key, out, err)
    free_string_array(drives)

    (processors, _) = manager_find_device_string_match(
        ctx, "info.category", "processor"
    )
    for udi in processors:
        print(f"processor: {udi}", file=out)
    free_string_array(processors)
