""" Service clients. Each module declares the request and response models
    for one service, the :class:`sdkwire.client.Operation` table, and a thin
    :class:`sdkwire.client.Client` subclass with a synchronous and an
    asynchronous method per operation.
"""

from . import emr
from . import logs
from . import mobile
from . import workflow

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
