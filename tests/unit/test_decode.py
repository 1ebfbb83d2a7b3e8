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
Test decoding reply values.
"""

# isort: STDLIB
import unittest

# isort: THIRDPARTY
import dbus
from hypothesis import given, settings, strategies

# isort: LOCAL
from hal_client_udisks import DecodeError, PropertyType
from hal_client_udisks._decode import decode_expected, decode_variant


class DecodeVariantTestCase(unittest.TestCase):
    """
    Test decoding values of every supported type.
    """

    def _check(self, value, property_type, expected, klass):
        (decoded_type, decoded) = decode_variant(value)
        self.assertIs(decoded_type, property_type)
        self.assertEqual(decoded, expected)
        self.assertIs(type(decoded), klass)

    def testString(self):
        """
        Strings decode to plain str.
        """
        self._check(dbus.String("usb", variant_level=1), PropertyType.STRING, "usb", str)

    def testUInt64(self):
        """
        Unsigned 64 bit integers decode to plain int.
        """
        self._check(
            dbus.UInt64(2**64 - 1, variant_level=1),
            PropertyType.UINT64,
            2**64 - 1,
            int,
        )

    def testBoolean(self):
        """
        Booleans are not mistaken for integers.
        """
        self._check(dbus.Boolean(True, variant_level=1), PropertyType.BOOLEAN, True, bool)

    def testInt32(self):
        """
        Signed 32 bit integers decode to plain int.
        """
        self._check(dbus.Int32(-3, variant_level=1), PropertyType.INT32, -3, int)

    def testDouble(self):
        """
        Doubles decode to plain float.
        """
        self._check(dbus.Double(1.5, variant_level=1), PropertyType.DOUBLE, 1.5, float)

    def testStringList(self):
        """
        String arrays decode to lists of plain str.
        """
        value = dbus.Array(
            [dbus.String("ata"), dbus.String("usb")], signature="s", variant_level=1
        )
        (decoded_type, decoded) = decode_variant(value)
        self.assertIs(decoded_type, PropertyType.STRLIST)
        self.assertEqual(decoded, ["ata", "usb"])
        self.assertTrue(all(type(x) is str for x in decoded))

    def testNotWrapped(self):
        """
        Values that are not variant wrapped decode the same.
        """
        self._check(dbus.String("sdio"), PropertyType.STRING, "sdio", str)

    @given(
        strategies.text(
            strategies.characters(exclude_categories=("Cs",), exclude_characters="\x00")
        )
    )
    @settings(max_examples=50)
    def testCopied(self, text):
        """
        The decoded string is equal to, but independent of, the reply value.
        """
        value = dbus.String(text, variant_level=1)
        (_, decoded) = decode_variant(value)
        self.assertEqual(decoded, text)
        self.assertIs(type(decoded), str)


class DecodeErrorTestCase(unittest.TestCase):
    """
    Test values that can not be decoded.
    """

    def testUnsupportedType(self):
        """
        A byte has no legacy property type.
        """
        with self.assertRaises(DecodeError):
            decode_variant(dbus.Byte(7, variant_level=1))

    def testNotDBus(self):
        """
        A plain python value is not a reply value.
        """
        with self.assertRaises(DecodeError):
            decode_variant("usb")

    def testExpected(self):
        """
        A value of another type than expected is an error.
        """
        self.assertEqual(
            decode_expected(dbus.UInt64(4, variant_level=1), PropertyType.UINT64), 4
        )
        with self.assertRaises(DecodeError):
            decode_expected(dbus.String("4", variant_level=1), PropertyType.UINT64)
        with self.assertRaises(DecodeError):
            decode_expected(dbus.UInt32(4, variant_level=1), PropertyType.UINT64)
