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
Legacy device properties, resolved against the storage directory.
"""

# isort: STDLIB
import logging
from collections import namedtuple
from enum import Enum

from ._constants import (
    ATA_BUS,
    ATA_PROBE_PROPERTY,
    COMPUTER_UDI,
    DOUBLE_NOT_AVAILABLE,
    INT32_NOT_AVAILABLE,
    KEY_HARDWARE_SERIAL,
    KEY_STORAGE_BUS,
    KEY_STORAGE_SERIAL,
    KEY_STORAGE_SIZE,
    UINT64_NOT_AVAILABLE,
)
from ._context import require_initialized
from ._decode import decode_expected
from ._errors import DecodeError, PropertyAbsentError, check_param, legacy_call
from ._machine_id import local_machine_id
from ._types import PropertyType

_log = logging.getLogger(__name__)


class DeviceFamily(Enum):
    """
    The kinds of device a UDI may name.
    """

    COMPUTER = "computer"
    DRIVE = "drive"
    UNKNOWN = "unknown"


PropertyDescriptor = namedtuple(
    "PropertyDescriptor", ["key", "type", "remote_property"]
)

# The complete set of legacy properties that are understood. A
# remote_property of None means that the value is computed locally.
PROPERTY_TABLE = {
    (DeviceFamily.COMPUTER, KEY_HARDWARE_SERIAL): PropertyDescriptor(
        KEY_HARDWARE_SERIAL, PropertyType.STRING, None
    ),
    (DeviceFamily.DRIVE, KEY_STORAGE_BUS): PropertyDescriptor(
        KEY_STORAGE_BUS, PropertyType.STRING, "ConnectionBus"
    ),
    (DeviceFamily.DRIVE, KEY_STORAGE_SERIAL): PropertyDescriptor(
        KEY_STORAGE_SERIAL, PropertyType.STRING, "Serial"
    ),
    (DeviceFamily.DRIVE, KEY_STORAGE_SIZE): PropertyDescriptor(
        KEY_STORAGE_SIZE, PropertyType.UINT64, "Size"
    ),
}

# Values returned when a property exists but has no usable remote value.
_EMPTY_VALUES = {PropertyType.STRING: "", PropertyType.UINT64: 0}


def device_family(udi, top_object):
    """
    Classify a UDI.

    :param str udi: the UDI
    :param str top_object: the object path below which drives live
    :rtype: DeviceFamily
    """
    if udi == COMPUTER_UDI:
        return DeviceFamily.COMPUTER
    if udi.startswith(f"{top_object.rstrip('/')}/"):
        return DeviceFamily.DRIVE
    return DeviceFamily.UNKNOWN


class PropertyResolver:
    """
    Answers type and value queries for one directory.
    """

    def __init__(self, directory, *, machine_id=None):
        """
        Initializer.

        :param directory: the directory client
        :param machine_id: returns the local machine id, local_machine_id
            if None
        :type machine_id: callable or NoneType
        """
        self._directory = directory
        self._machine_id = local_machine_id if machine_id is None else machine_id

    def lookup(self, udi, key):
        """
        Find the table entry for a property of a device.

        :param str udi: the UDI
        :param str key: the legacy property key
        :returns: the descriptor, or None if the property is unknown
        :rtype: PropertyDescriptor or NoneType
        """
        family = device_family(udi, self._directory.top_object)
        return PROPERTY_TABLE.get((family, key))

    def property_type(self, udi, key):
        """
        The type of a property; never contacts the directory.

        :rtype: PropertyType
        """
        descriptor = self.lookup(udi, key)
        return PropertyType.INVALID if descriptor is None else descriptor.type

    def _read(self, udi, descriptor):
        """
        Read a drive property, giving the type's empty value if the drive
        lacks it or has it with the wrong type.

        :raises RemoteUnreachableError: if the read could not be completed
        """
        try:
            value = self._directory.get_property(
                udi, self._directory.drive_interface, descriptor.remote_property
            )
            return decode_expected(value, descriptor.type)
        except (PropertyAbsentError, DecodeError) as err:
            _log.debug("%s of %s not available: %s", descriptor.key, udi, err)
            return _EMPTY_VALUES[descriptor.type]

    def _exposes_ata(self, udi):
        try:
            self._directory.get_property(
                udi, self._directory.ata_interface, ATA_PROBE_PROPERTY
            )
        except PropertyAbsentError:
            return False
        return True

    def get_string(self, udi, key):
        """
        The value of a string property.

        :returns: the value, or None if the property is not a known string
        :rtype: str or NoneType
        :raises RemoteUnreachableError: if a read could not be completed
        :raises MachineIdError: if the machine id is unavailable
        """
        descriptor = self.lookup(udi, key)
        if descriptor is None or descriptor.type is not PropertyType.STRING:
            return None

        if descriptor.key == KEY_HARDWARE_SERIAL:
            return self._machine_id()

        value = self._read(udi, descriptor)
        if descriptor.key == KEY_STORAGE_BUS and value == "" and self._exposes_ata(udi):
            _log.debug("%s reports no bus but is an ATA drive", udi)
            return ATA_BUS
        return value

    def get_uint64(self, udi, key):
        """
        The value of an unsigned 64 bit property.

        :returns: the value, or UINT64_NOT_AVAILABLE for an unknown property
        :rtype: int
        :raises RemoteUnreachableError: if the read could not be completed
        """
        descriptor = self.lookup(udi, key)
        if descriptor is None or descriptor.type is not PropertyType.UINT64:
            return UINT64_NOT_AVAILABLE
        return self._read(udi, descriptor)


def _resolver(ctx, udi, key):
    directory = require_initialized(ctx)
    check_param(udi, "udi")
    check_param(key, "key")
    return PropertyResolver(directory)


@legacy_call(PropertyType.INVALID)
def device_get_property_type(ctx, udi, key):
    """
    Query a property type of a device.

    :param Context ctx: the context
    :param str udi: the UDI of the device
    :param str key: name of the property
    :returns: the type, PropertyType.INVALID if the property does not exist
    :rtype: PropertyType
    """
    return _resolver(ctx, udi, key).property_type(udi, key)


@legacy_call(None)
def device_get_property_string(ctx, udi, key):
    """
    Get the value of a property of type string.

    :param Context ctx: the context
    :param str udi: the UDI of the device
    :param str key: name of the property
    :returns: the value, None if the property does not exist or on error
    :rtype: str or NoneType
    """
    return _resolver(ctx, udi, key).get_string(udi, key)


@legacy_call(UINT64_NOT_AVAILABLE)
def device_get_property_uint64(ctx, udi, key):
    """
    Get the value of a property of type unsigned 64 bit integer.

    :param Context ctx: the context
    :param str udi: the UDI of the device
    :param str key: name of the property
    :returns: the value, UINT64_NOT_AVAILABLE if the property does not
        exist or on error
    :rtype: int
    """
    return _resolver(ctx, udi, key).get_uint64(udi, key)


def device_get_property_int(ctx, udi, key, error=None):
    # pylint: disable=unused-argument
    """
    Get the value of a property of type signed 32 bit integer.

    No such properties are provided.

    :returns: INT32_NOT_AVAILABLE
    :rtype: int
    """
    return INT32_NOT_AVAILABLE


def device_get_property_double(ctx, udi, key, error=None):
    # pylint: disable=unused-argument
    """
    Get the value of a property of type double.

    No such properties are provided.

    :returns: DOUBLE_NOT_AVAILABLE
    :rtype: float
    """
    return DOUBLE_NOT_AVAILABLE
