"""Exceptions raised by sdkwire.

Everything raised on purpose by this package derives from :class:`Error`.
Faults raised by a dispatched operation are never wrapped; they are stored
on the :class:`sdkwire.dispatch.Handle` exactly as raised.
"""

from __future__ import annotations

from typing import Optional


class Error(Exception):
    """Base class for all sdkwire errors."""


class ConfigurationError(Error, ValueError):
    """A binding, enumerated type, or client setting is invalid.

    Raised when the offending declaration is made, typically while a model
    or enumerated class is being defined; never recoverable at call time.
    """


class MarshallingError(Error):
    """A request model could not be written to its sink.

    The original exception, if any, is available as ``__cause__``; *field*
    names the model attribute being written when the failure occurred.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        Error.__init__(self, message)
        self.field = field


class UnknownVariantError(Error, ValueError):
    """A wire string does not name any variant of an enumerated type."""

    def __init__(self, enumerated, value):
        self.enumerated = enumerated
        self.value = value

        if value is None or value == '':
            text = '%s: value cannot be None or empty' % (enumerated.__name__,)
        else:
            text = '%s: no variant for %r' % (enumerated.__name__, value)

        Error.__init__(self, text)


class ServiceError(Error):
    """The remote service answered a request with an error response."""

    def __init__(self, status: int, type: Optional[str], text: Optional[str]):
        self.status = status
        self.type = type
        self.text = text

        Error.__init__(self, '%s (HTTP %d): %s' % (type, status, text))


class DispatcherShutdownError(Error, RuntimeError):
    """Work was submitted to a dispatcher that is no longer accepting it."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
