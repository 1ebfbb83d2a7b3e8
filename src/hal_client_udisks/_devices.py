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
Finding devices by legacy property predicates.
"""

# isort: STDLIB
import logging

from ._constants import (
    DRIVE_PROBE_PROPERTY,
    DRIVE_TYPE_DISK,
    KEY_DRIVE_TYPE,
    MASK_WIDTH,
)
from ._context import require_initialized
from ._errors import PropertyAbsentError, check_param, legacy_call
from ._strings import StringArray

_log = logging.getLogger(__name__)


def collect_growable(candidates, predicate):
    """
    Select the candidates satisfying predicate, in order.

    :param candidates: object paths
    :type candidates: list of str
    :param predicate: called once for every candidate
    :rtype: list of str
    """
    return [candidate for candidate in candidates if predicate(candidate)]


def collect_bounded(candidates, predicate, capacity=MASK_WIDTH):
    """
    Select the candidates satisfying predicate, in order, recording the
    indices of the selected candidates in a bit mask.

    The number of results is the population count of the mask, so the
    result is built at its final size.

    :param candidates: object paths
    :type candidates: list of str
    :param predicate: called once for every candidate
    :param int capacity: the width of the mask
    :rtype: list of str
    :raises AssertionError: if there are more candidates than mask bits
    """
    if len(candidates) > capacity:
        raise AssertionError(
            f"{len(candidates)} objects exceed the enumeration bound of {capacity}"
        )

    mask = 0
    for (index, candidate) in enumerate(candidates):
        if predicate(candidate):
            mask |= 1 << index

    selected = [None] * bin(mask).count("1")
    position = 0
    for (index, candidate) in enumerate(candidates):
        if (mask >> index) & 1:
            selected[position] = candidate
            position += 1
    return selected


class DeviceResolver:
    """
    Finds devices in one directory.
    """

    def __init__(self, directory, *, bounded=False):
        """
        Initializer.

        :param directory: the directory client
        :param bool bounded: use the bounded bit mask strategy
        """
        self._directory = directory
        self._collect = collect_bounded if bounded else collect_growable

    def is_drive(self, object_path):
        """
        Whether an object is a drive. Costs exactly one property read.

        :param str object_path: the object
        :rtype: bool
        :raises RemoteUnreachableError: if the read could not be completed
        """
        try:
            self._directory.get_property(
                object_path, self._directory.drive_interface, DRIVE_PROBE_PROPERTY
            )
        except PropertyAbsentError:
            return False
        return True

    def find_drives(self):
        """
        Every drive in the directory, in the order the directory lists them.

        :rtype: StringArray
        :raises RemoteUnreachableError: if the directory could not be read
        """
        candidates = self._directory.enumerate_objects()
        drives = self._collect(candidates, self.is_drive)
        _log.debug("%d of %d objects are drives", len(drives), len(candidates))
        return StringArray(drives)

    def find(self, key, value):
        """
        Every device whose property key has value.

        Only drives of type disk can be searched for; any other predicate
        matches nothing.

        :param str key: the legacy property key
        :param str value: the value to match
        :rtype: StringArray
        :raises RemoteUnreachableError: if the directory could not be read
        """
        if key == KEY_DRIVE_TYPE and value == DRIVE_TYPE_DISK:
            return self.find_drives()
        _log.debug("no devices can match %s == %s", key, value)
        return StringArray()


def _no_devices():
    return (StringArray(), 0)


@legacy_call(_no_devices)
def manager_find_device_string_match(ctx, key, value):
    """
    Find the devices where a single string property matches a given value.

    :param Context ctx: the context
    :param str key: name of the property
    :param str value: the value to match
    :returns: UDIs of the devices, and their number; release the array
        with free_string_array()
    :rtype: tuple of StringArray * int
    """
    directory = require_initialized(ctx)
    check_param(key, "key")
    check_param(value, "value")

    devices = DeviceResolver(directory).find(key, value)
    return (devices, len(devices))
