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
Classes to implement dbus interface.
"""

# isort: STDLIB
import xml.etree.ElementTree as ET

# isort: THIRDPARTY
from dbus_python_client_gen import make_class

from ._constants import DRIVE_ATA_INTERFACE, DRIVE_INTERFACE, OBJECT_MANAGER_INTERFACE
from ._data import SPECS

TIME_OUT = 120  # In seconds

ObjectManager = make_class(
    "ObjectManager", ET.fromstring(SPECS[OBJECT_MANAGER_INTERFACE]), TIME_OUT
)
Drive = make_class("Drive", ET.fromstring(SPECS[DRIVE_INTERFACE]), TIME_OUT)
DriveAta = make_class("DriveAta", ET.fromstring(SPECS[DRIVE_ATA_INTERFACE]), TIME_OUT)

# Generated classes by the interface name they were generated from.
INTERFACES = {DRIVE_INTERFACE: Drive, DRIVE_ATA_INTERFACE: DriveAta}
