"""Generic service client.

Every generated operation is a thin call into :class:`Client`: build the
request model, marshal it into a :class:`sdkwire.protocol.request.Request`,
hand that to the caller-supplied :class:`Transport`, and unmarshal the
response. The asynchronous variant wraps the same sequence in a single
callable and submits it to a :class:`sdkwire.dispatch.Dispatcher`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from . import config
from .log import configure_logging
from .dispatch import Dispatcher, Handle, Handler
from .errors import ServiceError
from .protocol import marshal
from .protocol.binding import Model
from .protocol.request import Request, Response

logger = structlog.get_logger(__name__)


class Transport(ABC):
    """Minimal contract for whatever actually delivers a request.

    Connection handling, signing, and retries all live behind this method;
    a transport is expected to be safe to call from several threads at once.
    """

    @abstractmethod
    def invoke(self, request: Request, timeout: Optional[float] = None) -> Response:
        """Deliver *request* and return the service's :class:`Response`."""

    def close(self) -> None:
        """Release any resources held by the transport."""


class Operation:
    """Static description of one remote operation.

    Attributes:
        name: Operation name, e.g. ``ListDomains``.
        input: The request :class:`Model` subclass.
        output: The response :class:`Model` subclass, or None if the
            operation returns nothing.
        method: HTTP method.
        uri: URI template, with ``{name}`` placeholders for PATH bindings.
        target: Value of the ``X-Amz-Target`` header, for JSON-RPC style
            services that route on it rather than on the URI.
    """

    def __init__(self, name: str, input: type, output: Optional[type] = None,
                 method: str = 'POST', uri: str = '/', target: Optional[str] = None):
        self.name = name
        self.input = input
        self.output = output
        self.method = method
        self.uri = uri
        self.target = target

    def __repr__(self) -> str:
        return 'Operation(%r)' % (self.name,)


class Client:
    """Marshal, invoke, and unmarshal operations against one service.

    If no *dispatcher* is supplied the client creates its own, sized by the
    configuration, and shuts it down in :meth:`shutdown`; a dispatcher
    passed in by the caller remains the caller's to shut down.

    A configuration that asks for verbose or JSON logging has it applied
    through :func:`sdkwire.log.configure_logging` when the client is
    created; the defaults leave logging to the application.
    """

    service: Optional[str] = None

    def __init__(self, transport: Transport, dispatcher: Optional[Dispatcher] = None,
                 configuration: Optional[config.Configuration] = None):

        if configuration is None:
            configuration = config.Configuration()

        if configuration.verbose or configuration.log_json:
            configure_logging(verbose=configuration.verbose, log_json=configuration.log_json)

        self.transport = transport
        self.configuration = configuration

        if dispatcher is None:
            name = self.service or 'sdkwire'
            dispatcher = Dispatcher(configuration.max_workers, name=name)
            self._owns_dispatcher = True
        else:
            self._owns_dispatcher = False

        self.dispatcher = dispatcher

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()

    def marshall(self, operation: Operation, model: Model) -> Request:
        """Build the wire :class:`Request` for *operation* from *model*."""
        if model is not None and not isinstance(model, operation.input):
            raise TypeError(
                f"{operation.name}: expected {operation.input.__name__}, got {type(model).__name__}"
            )

        request = Request(operation.method, operation.uri, operation.name, self.configuration.endpoint)
        request.headers['User-Agent'] = self.configuration.user_agent

        if operation.target is not None:
            request.headers['X-Amz-Target'] = operation.target

        marshal.marshall(model, request)
        return request

    def invoke(self, operation: Operation, model: Model) -> Any:
        """Run *operation* synchronously and return its unmarshalled result.

        Raises :class:`sdkwire.errors.MarshallingError` if *model* cannot be
        written, :class:`sdkwire.errors.ServiceError` for an error response,
        and anything the transport raises, unmodified.
        """
        request = self.marshall(operation, model)
        log = logger.bind(operation=operation.name, request=request.id)

        log.debug('invoking operation', method=request.method, uri=request.uri)
        response = self.transport.invoke(request, timeout=self.configuration.timeout)

        if not response.ok:
            type, text = response.error()
            log.debug('operation failed', status=response.status, type=type)
            raise ServiceError(response.status, type, text)

        log.debug('operation complete', status=response.status)

        if operation.output is None:
            return None

        return marshal.unmarshall(operation.output, response.payload())

    def invoke_async(self, operation: Operation, model: Model,
                     callback: Optional[Handler] = None) -> Handle:
        """Submit :meth:`invoke` to the dispatcher; return its handle.

        Marshalling happens on the worker thread along with everything else,
        so a bad *model* is reported through the handle, not raised here.
        """

        def call():
            return self.invoke(operation, model)

        return self.dispatcher.submit(call, callback)

    def shutdown(self) -> None:
        """Close the transport, and shut down the dispatcher if this client
        created it. Unstarted asynchronous operations are cancelled."""
        if self._owns_dispatcher:
            self.dispatcher.shutdown()
        self.transport.close()
