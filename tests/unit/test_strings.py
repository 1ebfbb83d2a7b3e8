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
Test string arrays.
"""

# isort: STDLIB
import unittest

# isort: THIRDPARTY
import dbus
from hypothesis import given, settings, strategies

# isort: LOCAL
from hal_client_udisks import StringArray, free_string, free_string_array


class StringArrayTestCase(unittest.TestCase):
    """
    Test the shape of string arrays.
    """

    @given(strategies.lists(strategies.text(), max_size=20))
    @settings(max_examples=50)
    def testEndMarker(self, strings):
        """
        The strings are followed by the end marker, and iteration stops
        there.
        """
        array = StringArray(strings)
        self.assertEqual(len(array), len(strings))
        self.assertEqual(array.count, len(strings))
        self.assertIsNone(array[len(strings)])
        self.assertEqual(list(array), strings)

    def testEmpty(self):
        """
        An empty array holds only the end marker.
        """
        array = StringArray()
        self.assertEqual(len(array), 0)
        self.assertIsNone(array[0])
        self.assertEqual(list(array), [])

    def testCopies(self):
        """
        Reply strings are copied into plain strings.
        """
        source = [dbus.ObjectPath("/d/0"), dbus.ObjectPath("/d/3")]
        array = StringArray(source)
        self.assertEqual(list(array), ["/d/0", "/d/3"])
        self.assertTrue(all(type(x) is str for x in array))
        source.clear()
        self.assertEqual(len(array), 2)


class ReleaseTestCase(unittest.TestCase):
    """
    Test releasing string arrays and strings.
    """

    def testRelease(self):
        """
        Releasing drops every string.
        """
        array = StringArray(["/d/0", "/d/3"])
        self.assertFalse(array.released)
        free_string_array(array)
        self.assertTrue(array.released)
        self.assertEqual(len(array), 0)
        self.assertEqual(list(array), [])

    def testReleaseTwice(self):
        """
        Releasing twice is harmless.
        """
        array = StringArray(["/d/0"])
        free_string_array(array)
        free_string_array(array)
        self.assertTrue(array.released)

    def testReleaseNone(self):
        """
        Releasing nothing does nothing.
        """
        free_string_array(None)
        free_string(None)
        free_string("/d/0")
