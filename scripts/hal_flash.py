#!/usr/bin/python3
#
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
Print the machine serial and the disk drives, as seen through the legacy API.
"""

# isort: STDLIB
import argparse
import logging
import sys

# isort: THIRDPARTY
import dbus

# isort: LOCAL
from hal_client_udisks import (
    HalError,
    ctx_free,
    ctx_init,
    ctx_new,
    ctx_set_dbus_connection,
    ctx_shutdown,
)
from hal_client_udisks._report import print_inventory


def get_parser():
    """
    Generate an appropriate parser.

    :returns: an argument parser
    :rtype: `ArgumentParser`
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--session", action="store_true", help="use the session bus, not the system bus"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="log debugging information"
    )
    return parser


def main():
    args = get_parser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        conn = dbus.SessionBus() if args.session else dbus.SystemBus()
    except dbus.exceptions.DBusException as err:
        print(f"error connecting: {err.get_dbus_message()}", file=sys.stderr)
        return 1

    ctx = ctx_new()
    if ctx is None:
        return 2

    if not ctx_set_dbus_connection(ctx, conn):
        return 3

    error = HalError()
    if not ctx_init(ctx, error=error):
        print(f"{error.name}: {error.message}", file=sys.stderr)
        return 4

    print_inventory(ctx)

    ctx_shutdown(ctx)
    ctx_free(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
