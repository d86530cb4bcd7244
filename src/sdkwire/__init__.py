""" Python client library for remote service operations. Request models are
    marshalled onto the wire through declarative field bindings, and every
    operation can be invoked synchronously or dispatched asynchronously
    through a cancellable handle.
"""

# Utility components.

from . import json
from . import errors
from . import log

# Submodules used by multiple other components.

from . import config
from . import protocol
from . import dispatch

# Primary public-facing interfaces.

from .errors import (
    ConfigurationError,
    DispatcherShutdownError,
    MarshallingError,
    ServiceError,
    UnknownVariantError,
)
from .protocol import UNSET, Enumerated, Field, Model, register
from .dispatch import Dispatcher, Handle, Handler, handler
from .client import Client, Operation, Transport

from . import services

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
