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
Access to the remote storage directory.
"""

# isort: STDLIB
import logging

# isort: THIRDPARTY
import dbus
from dbus_python_client_gen import DPClientInvocationError

from ._constants import DRIVE_ATA_INTERFACE, DRIVE_INTERFACE, SERVICE, TOP_OBJECT
from ._errors import InvalidArgumentError, PropertyAbsentError, RemoteUnreachableError
from ._implementation import INTERFACES, ObjectManager

_log = logging.getLogger(__name__)

# D-Bus errors which mean that the object simply does not have the
# interface or property asked for. Anything else is a communication failure.
_ABSENT_ERRORS = frozenset(
    (
        "org.freedesktop.DBus.Error.InvalidArgs",
        "org.freedesktop.DBus.Error.UnknownInterface",
        "org.freedesktop.DBus.Error.UnknownMethod",
        "org.freedesktop.DBus.Error.UnknownObject",
        "org.freedesktop.DBus.Error.UnknownProperty",
    )
)


class Bus:
    """
    Our bus.
    """

    # pylint: disable=too-few-public-methods

    _BUS = None

    @staticmethod
    def get_bus():
        """
        Get our bus.
        """
        if Bus._BUS is None:
            Bus._BUS = dbus.SystemBus()

        return Bus._BUS


def _dbus_name(err):
    """
    The D-Bus error name behind a client invocation error, if any.

    :param DPClientInvocationError err: the error
    :rtype: str or NoneType
    """
    cause = err.__cause__
    if isinstance(cause, dbus.exceptions.DBusException):
        return cause.get_dbus_name()
    return None


class DirectoryClient:
    """
    The storage directory on one bus connection.

    The bus connection belongs to the caller; this object only holds a
    reference to it. Every method is one blocking round trip.
    """

    def __init__(
        self,
        bus,
        *,
        service=SERVICE,
        top_object=TOP_OBJECT,
        drive_interface=DRIVE_INTERFACE,
        ata_interface=DRIVE_ATA_INTERFACE,
    ):
        """
        Initializer.

        :param bus: the caller's bus connection
        :type bus: dbus.bus.BusConnection
        :param str service: well-known name of the directory service
        :param str top_object: object path of the directory's object manager
        :param str drive_interface: interface every drive object exposes
        :param str ata_interface: interface only ATA drives expose
        :raises InvalidArgumentError: if an interface is not one we know
        :raises RemoteUnreachableError: if the service can not be activated
        """
        for interface_name in (drive_interface, ata_interface):
            if interface_name not in INTERFACES:
                raise InvalidArgumentError(
                    f"no introspection data for interface {interface_name}"
                )

        self._bus = bus
        self.service = service
        self.top_object = top_object
        self.drive_interface = drive_interface
        self.ata_interface = ata_interface

        try:
            self._top = bus.get_object(service, top_object, introspect=False)
        except dbus.exceptions.DBusException as err:
            raise RemoteUnreachableError(
                f"could not reach {service}: {err.get_dbus_message()}"
            ) from err

    def get_object(self, object_path):
        """
        Get a proxy for an object of the directory service.

        The proxy is addressed to the unique name resolved for the top
        object, so no name owner lookup is made.

        :param str object_path: an object path with a valid format
        :returns: the proxy object corresponding to the object path
        :rtype: ProxyObject
        :raises InvalidArgumentError: if object_path is not an object path
        :raises RemoteUnreachableError: if the service can not be reached
        """
        try:
            return self._bus.get_object(
                self._top.bus_name, object_path, introspect=False
            )
        except ValueError as err:
            raise InvalidArgumentError(
                f"{object_path!r} is not a valid object path"
            ) from err
        except dbus.exceptions.DBusException as err:
            raise RemoteUnreachableError(
                f"could not reach {self.service}: {err.get_dbus_message()}"
            ) from err

    def enumerate_objects(self):
        """
        List every object the directory currently exposes.

        :returns: object paths, in the order the service reported them
        :rtype: list of str
        :raises RemoteUnreachableError: if the directory can not be read
        """
        try:
            managed_objects = ObjectManager.Methods.GetManagedObjects(self._top, {})
        except DPClientInvocationError as err:
            raise RemoteUnreachableError(
                f"could not enumerate objects of {self.service}: {_dbus_name(err)}"
            ) from err

        object_paths = [str(object_path) for object_path in managed_objects]
        _log.debug("%s exposes %d objects", self.service, len(object_paths))
        return object_paths

    def get_property(self, object_path, interface_name, property_name):
        """
        Read one property of one object.

        :param str object_path: the object
        :param str interface_name: the interface the property belongs to
        :param str property_name: the property
        :returns: the value as found in the reply
        :raises PropertyAbsentError: if the object lacks the property
        :raises RemoteUnreachableError: if the read could not be completed
        """
        try:
            getter = getattr(INTERFACES[interface_name].Properties, property_name)
        except (KeyError, AttributeError) as err:
            raise PropertyAbsentError(
                f"no property {property_name} on interface {interface_name}"
            ) from err

        proxy = self.get_object(object_path)
        try:
            return getter.Get(proxy)
        except DPClientInvocationError as err:
            dbus_name = _dbus_name(err)
            if dbus_name in _ABSENT_ERRORS:
                raise PropertyAbsentError(
                    f"{object_path} has no property {interface_name}.{property_name}"
                ) from err
            raise RemoteUnreachableError(
                f"could not read {interface_name}.{property_name} of "
                f"{object_path}: {dbus_name}"
            ) from err
