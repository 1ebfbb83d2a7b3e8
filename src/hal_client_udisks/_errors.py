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
Error classes, and the translation of errors into legacy sentinel values.
"""

# isort: STDLIB
import functools
import logging

_log = logging.getLogger(__name__)


class HalClientError(Exception):
    """
    Top-level error.
    """

    dbus_name = "org.freedesktop.Hal.Error"


class InvalidArgumentError(HalClientError):
    """
    A required argument was missing or malformed.
    """

    dbus_name = "org.freedesktop.Hal.InvalidArgument"


class NotInitializedError(HalClientError):
    """
    The context has not been initialized, or has been shut down.
    """

    dbus_name = "org.freedesktop.Hal.NotInitialized"


class RemoteUnreachableError(HalClientError):
    """
    The directory service could not be reached, or did not answer.
    """

    dbus_name = "org.freedesktop.Hal.RemoteUnreachable"


class PropertyAbsentError(HalClientError):
    """
    The remote object does not expose the requested interface or property.
    """

    dbus_name = "org.freedesktop.Hal.NoSuchProperty"


class DecodeError(HalClientError):
    """
    A reply value could not be decoded into a property type.
    """

    dbus_name = "org.freedesktop.Hal.TypeMismatch"


class MachineIdError(HalClientError):
    """
    No usable local machine id could be read.
    """

    dbus_name = "org.freedesktop.Hal.NoMachineId"


class HalError:
    """
    Out-parameter describing why a legacy call returned a sentinel.

    Pass an instance as the ``error`` keyword of any legacy function; it is
    filled in when the call fails and left alone when it succeeds.
    """

    def __init__(self):
        self.name = None
        self.message = None

    def __repr__(self):
        return f"HalError(name={self.name!r}, message={self.message!r})"

    def is_set(self):
        """
        Whether an error has been recorded.

        :rtype: bool
        """
        return self.name is not None

    def clear(self):
        """
        Forget any recorded error.
        """
        self.name = None
        self.message = None

    def set_from_exception(self, exc):
        """
        Record ``exc``.

        :param HalClientError exc: the error to record
        """
        self.name = exc.dbus_name
        self.message = str(exc)


def check_param(value, name):
    """
    Check that a required parameter was supplied.

    :param value: the parameter value
    :param str name: the parameter name, for the diagnostic
    :raises InvalidArgumentError: if value is None or empty
    """
    if value is None or value == "":
        raise InvalidArgumentError(f"invalid parameter. {name} is None or empty.")


def legacy_call(sentinel):
    """
    Make a function follow the legacy calling convention.

    The decorated function takes an extra ``error`` keyword argument. Any
    HalClientError it raises is logged, recorded in ``error`` if one was
    given, and replaced by ``sentinel``. If ``sentinel`` is callable it is
    called to build a fresh value for each failure.

    :param sentinel: the failure value, or a factory for it
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, error=None, **kwargs):
            try:
                return func(*args, **kwargs)
            except (InvalidArgumentError, NotInitializedError) as err:
                _log.warning("%s: %s", func.__name__, err)
                failure = err
            except HalClientError as err:
                _log.error("%s: %s", func.__name__, err)
                failure = err

            if error is not None:
                error.set_from_exception(failure)
            return sentinel() if callable(sentinel) else sentinel

        return wrapper

    return decorator
