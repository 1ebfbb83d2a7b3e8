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
The local machine id.
"""

# isort: STDLIB
import logging
import re

from ._constants import MACHINE_ID_FILES
from ._errors import MachineIdError

_log = logging.getLogger(__name__)

_MACHINE_ID_RE = re.compile("[0-9a-f]{32}", re.IGNORECASE)


def local_machine_id(paths=None):
    """
    Read the machine id the way the D-Bus library does.

    The first file that holds a well-formed id wins; hex digits may be of
    either case. Nothing is sent over the bus.

    :param paths: files to try, in order, MACHINE_ID_FILES if None
    :type paths: sequence of str or NoneType
    :returns: the 32 hex digit machine id, in lower case
    :rtype: str
    :raises MachineIdError: if no file holds a well-formed id
    """
    paths = MACHINE_ID_FILES if paths is None else paths
    for path in paths:
        try:
            with open(path, encoding="ascii") as machine_id_file:
                machine_id = machine_id_file.read().strip()
        except (OSError, UnicodeDecodeError) as err:
            _log.debug("could not read machine id from %s: %s", path, err)
            continue

        if _MACHINE_ID_RE.fullmatch(machine_id):
            return machine_id.lower()

        _log.debug("ignoring malformed machine id in %s", path)

    raise MachineIdError(f"no machine id found in {', '.join(paths)}")
