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
General constants.
"""

SERVICE = "org.freedesktop.UDisks2"
TOP_OBJECT = "/org/freedesktop/UDisks2"

OBJECT_MANAGER_INTERFACE = "org.freedesktop.DBus.ObjectManager"
DRIVE_INTERFACE = f"{SERVICE}.Drive"
DRIVE_ATA_INTERFACE = f"{DRIVE_INTERFACE}.Ata"

# Every Drive object carries an Id, so reading it tells whether an object
# exposes the Drive interface at all.
DRIVE_PROBE_PROPERTY = "Id"
ATA_PROBE_PROPERTY = "SmartSupported"

COMPUTER_UDI = "/org/freedesktop/Hal/devices/computer"

MACHINE_ID_FILES = ("/var/lib/dbus/machine-id", "/etc/machine-id")

KEY_HARDWARE_SERIAL = "system.hardware.serial"
KEY_STORAGE_BUS = "storage.bus"
KEY_STORAGE_SERIAL = "storage.serial"
KEY_STORAGE_SIZE = "storage.size"
KEY_DRIVE_TYPE = "storage.drive_type"

DRIVE_TYPE_DISK = "disk"
ATA_BUS = "ata"

# Width of the index mask used by the bounded enumeration strategy.
MASK_WIDTH = 64

UINT64_NOT_AVAILABLE = 0xFFFFFFFFFFFFFFFF
INT32_NOT_AVAILABLE = -1
DOUBLE_NOT_AVAILABLE = -1.0
