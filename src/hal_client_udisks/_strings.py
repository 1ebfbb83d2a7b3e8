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
String arrays handed over to callers.
"""


class StringArray:
    """
    An ordered set of strings owned by the caller.

    The strings are held in a list followed by a single None end marker, so
    a caller may walk it either by count or until the marker. Every element
    is an independent str, never a view into a reply.
    """

    def __init__(self, strings=()):
        """
        Initializer.

        :param strings: the strings to copy in
        :type strings: iterable of str
        """
        self._strings = [str(s) for s in strings]
        self._count = len(self._strings)
        self._strings.append(None)

    def __repr__(self):
        return f"StringArray({list(self)!r})"

    def __len__(self):
        return self._count

    def __getitem__(self, index):
        return self._strings[index]

    def __iter__(self):
        for value in self._strings:
            if value is None:
                return
            yield value

    @property
    def count(self):
        """
        The number of strings, not counting the end marker.
        """
        return self._count

    @property
    def released(self):
        """
        Whether the array has been released.
        """
        return self._strings == []

    def release(self):
        """
        Drop every string and the backing list. Releasing twice is harmless.
        """
        for index in range(len(self._strings)):
            self._strings[index] = None
        self._strings.clear()
        self._count = 0


def free_string_array(str_array):
    """
    Release a string array. If passed None, does nothing.

    :param str_array: the array to release
    :type str_array: StringArray or NoneType
    """
    if str_array is not None:
        str_array.release()


def free_string(string):  # pylint: disable=unused-argument
    """
    Release a string returned by a getter. If passed None, does nothing.

    Strings are immutable copies, so there is nothing left to undo; the
    function exists so legacy callers keep their release calls.

    :param string: the string to release
    :type string: str or NoneType
    """
