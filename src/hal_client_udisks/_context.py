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
The context for a connection to the storage directory.
"""

# isort: STDLIB
import logging

from ._connection import DirectoryClient
from ._errors import (
    InvalidArgumentError,
    NotInitializedError,
    check_param,
    legacy_call,
)

_log = logging.getLogger(__name__)


class Context:
    """
    Connection state shared by all queries.

    A context holds at most one directory client, and is usable only once
    a directory client is attached and initialization has succeeded.
    """

    def __init__(self):
        self.directory = None
        self.initialized = False

    def __repr__(self):
        return (
            f"Context(directory={self.directory!r}, "
            f"initialized={self.initialized!r})"
        )

    @property
    def attached(self):
        """
        Whether a directory client is attached.
        """
        return self.directory is not None


def require_initialized(ctx):
    """
    Check that ctx may be used for a query.

    :param Context ctx: the context
    :returns: the context's directory client
    :raises InvalidArgumentError: if ctx is None
    :raises NotInitializedError: if ctx is not initialized
    """
    check_param(ctx, "ctx")
    if not ctx.initialized or ctx.directory is None:
        raise NotInitializedError("context is not initialized")
    return ctx.directory


def ctx_new():
    """
    Create a new context.

    :returns: an unattached, uninitialized context
    :rtype: Context
    """
    return Context()


@legacy_call(False)
def ctx_set_dbus_connection(ctx, conn, *, directory_factory=DirectoryClient):
    """
    Set the bus connection to use to talk to the storage directory.

    A context that was initialized must be initialized again against the
    new connection.

    :param Context ctx: context to set connection for
    :param conn: the bus connection, owned by the caller
    :type conn: dbus.bus.BusConnection
    :param directory_factory: builds the directory client from conn
    :returns: True if the connection was set, otherwise False
    :rtype: bool
    """
    check_param(ctx, "ctx")
    check_param(conn, "conn")

    ctx.directory = directory_factory(conn)
    ctx.initialized = False
    return True


@legacy_call(False)
def ctx_init(ctx):
    """
    Initialize the connection to the storage directory.

    The directory is enumerated once to make sure that it is there.

    :param Context ctx: context, with a connection set
    :returns: True if initialization succeeds, otherwise False
    :rtype: bool
    """
    check_param(ctx, "ctx")
    if ctx.directory is None:
        raise InvalidArgumentError("no connection set on context")

    ctx.directory.enumerate_objects()
    ctx.initialized = True
    _log.debug("context initialized for %s", ctx.directory.service)
    return True


@legacy_call(False)
def ctx_shutdown(ctx):
    """
    Shut down a connection to the storage directory.

    The connection stays set, so the context may be initialized again.

    :param Context ctx: the context
    :returns: True
    :rtype: bool
    """
    check_param(ctx, "ctx")
    ctx.initialized = False
    return True


def ctx_free(ctx):
    """
    Free a context.

    The bus connection is not closed; it belongs to the caller.

    :param ctx: the context, may be None
    :type ctx: Context or NoneType
    :returns: True
    :rtype: bool
    """
    if ctx is not None:
        ctx.initialized = False
        ctx.directory = None
    return True
