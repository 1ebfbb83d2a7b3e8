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
Decoding of property values found in replies.
"""

# isort: THIRDPARTY
from into_dbus_python import IntoDPError, signature

from ._errors import DecodeError
from ._types import PropertyType

_DECODERS = {
    "b": (PropertyType.BOOLEAN, bool),
    "d": (PropertyType.DOUBLE, float),
    "i": (PropertyType.INT32, int),
    "s": (PropertyType.STRING, str),
    "t": (PropertyType.UINT64, int),
    "as": (PropertyType.STRLIST, lambda value: [str(x) for x in value]),
}


def decode_variant(value):
    """
    Decode a property value into a property type and a plain python value.

    The returned value shares no storage with the reply it came from.

    :param value: a dbus-python value, possibly variant wrapped
    :returns: the property type and the copied value
    :rtype: tuple of PropertyType * object
    :raises DecodeError: if the value has no legacy property type
    """
    if not hasattr(value, "variant_level"):
        raise DecodeError(f"{value!r} is not a D-Bus value")

    try:
        sig = signature(value, unpack=True)
    except IntoDPError as err:
        raise DecodeError(f"no signature for {value!r}") from err

    try:
        (property_type, convert) = _DECODERS[sig]
    except KeyError as err:
        raise DecodeError(f"unexpected variant type: {sig}") from err

    return (property_type, convert(value))


def decode_expected(value, expected):
    """
    Decode a property value that is supposed to have a certain type.

    :param value: a dbus-python value, possibly variant wrapped
    :param PropertyType expected: the type the caller wants
    :returns: the copied value
    :raises DecodeError: if the value is not of the expected type
    """
    (property_type, decoded) = decode_variant(value)
    if property_type is not expected:
        raise DecodeError(
            f"expected a value of type {expected.name}, got {property_type.name}"
        )
    return decoded
