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
Test the legacy API against the system's UDisks.
"""

# isort: STDLIB
import unittest

# isort: LOCAL
from hal_client_udisks import (
    Bus,
    DirectoryClient,
    HalError,
    PropertyType,
    ctx_free,
    ctx_init,
    ctx_new,
    ctx_set_dbus_connection,
    ctx_shutdown,
    device_get_property_string,
    device_get_property_type,
    device_get_property_uint64,
    free_string_array,
    manager_find_device_string_match,
)
from hal_client_udisks._constants import UINT64_NOT_AVAILABLE

from ._misc import LIVE, LIVE_REASON, checked_property


@unittest.skipUnless(LIVE, LIVE_REASON)
class DirectoryTestCase(unittest.TestCase):
    """
    Test the directory client directly.
    """

    def setUp(self):
        self._directory = DirectoryClient(Bus.get_bus())

    def testDrives(self):
        """
        Every drive reports its properties with the expected signatures.
        """
        for object_path in self._directory.enumerate_objects():
            if not object_path.startswith(f"{self._directory.top_object}/drives/"):
                continue
            for (prop, sig) in (("ConnectionBus", "s"), ("Serial", "s"), ("Size", "t")):
                checked_property(
                    self._directory.get_property(
                        object_path, self._directory.drive_interface, prop
                    ),
                    sig,
                )


@unittest.skipUnless(LIVE, LIVE_REASON)
class LegacyTestCase(unittest.TestCase):
    """
    Test the legacy calls.
    """

    def setUp(self):
        self._ctx = ctx_new()
        self.assertTrue(ctx_set_dbus_connection(self._ctx, Bus.get_bus()))
        self.assertTrue(ctx_init(self._ctx))

    def tearDown(self):
        ctx_shutdown(self._ctx)
        ctx_free(self._ctx)

    def testFindDisks(self):
        """
        Every disk found has the drive properties.
        """
        error = HalError()
        (devices, count) = manager_find_device_string_match(
            self._ctx, "storage.drive_type", "disk", error=error
        )
        self.assertFalse(error.is_set())
        self.assertEqual(len(list(devices)), count)
        for udi in devices:
            self.assertIs(
                device_get_property_type(self._ctx, udi, "storage.size"),
                PropertyType.UINT64,
            )
            self.assertIsNotNone(
                device_get_property_string(self._ctx, udi, "storage.serial")
            )
            self.assertNotEqual(
                device_get_property_uint64(self._ctx, udi, "storage.size"),
                UINT64_NOT_AVAILABLE,
            )
        free_string_array(devices)

    def testMachineSerial(self):
        """
        The machine serial is the local machine id.
        """
        serial = device_get_property_string(
            self._ctx,
            "/org/freedesktop/Hal/devices/computer",
            "system.hardware.serial",
        )
        self.assertEqual(len(serial), 32)
