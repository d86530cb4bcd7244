""" Asynchronous invocation. A :class:`Dispatcher` owns a pool of worker
    threads; :func:`Dispatcher.submit` schedules any zero-argument callable
    on that pool and immediately returns a :class:`Handle` representing the
    eventual outcome.

    Every handle reaches exactly one terminal state:

    SUCCEEDED
        The operation returned; :func:`Handle.result` returns its value.

    FAILED
        The operation raised; :func:`Handle.result` re-raises that exception
        unmodified.

    CANCELLED
        The operation never ran, either because :func:`Handle.cancel` was
        called before a worker picked it up, or because the dispatcher was
        shut down first. :func:`Handle.result` raises
        :class:`concurrent.futures.CancelledError`.

    Cancellation never interrupts an operation that is already running.
"""

from __future__ import annotations

import concurrent.futures
import itertools
import threading
from typing import Any, Callable, Optional

import structlog

from .errors import DispatcherShutdownError

logger = structlog.get_logger(__name__)

PENDING = 'PENDING'
SUCCEEDED = 'SUCCEEDED'
FAILED = 'FAILED'
CANCELLED = 'CANCELLED'

terminal_states = frozenset((SUCCEEDED, FAILED, CANCELLED))

CancelledError = concurrent.futures.CancelledError
TimeoutError = concurrent.futures.TimeoutError

_handle_ids = itertools.count(1)


class Handler:
    """ Completion callback for a dispatched operation. Subclass and
        override either or both methods; exactly one of them is called, once,
        after the handle has reached its terminal state. A cancelled
        operation is reported to :func:`on_error` with a
        :class:`concurrent.futures.CancelledError`.
    """

    def on_success(self, result):
        pass

    def on_error(self, error):
        pass


# end of class Handler



class _FunctionHandler(Handler):

    def __init__(self, success, error):
        self.success = success
        self.error = error

    def on_success(self, result):
        if self.success is not None:
            self.success(result)

    def on_error(self, error):
        if self.error is not None:
            self.error(error)


def handler(success: Optional[Callable[[Any], None]] = None,
            error: Optional[Callable[[BaseException], None]] = None) -> Handler:
    """ Build a :class:`Handler` from plain functions. Either function may
        be omitted, in which case that outcome is ignored.
    """

    return _FunctionHandler(success, error)



class Handle:
    """ The eventual outcome of one dispatched operation. A :class:`Handle`
        is created by :func:`Dispatcher.submit` and is never reused; it can
        be polled, waited on, cancelled, or given completion listeners at any
        time, before or after the operation finishes.

        :ivar id: A number unique to this handle within the process.
    """

    def __init__(self, future: concurrent.futures.Future, callback: Optional[Handler] = None):

        self.id = next(_handle_ids)
        self._future = future
        self._callback = callback

        if callback is not None:
            future.add_done_callback(self._notify)


    def __repr__(self):
        return '<Handle %d %s>' % (self.id, self.state)


    @property
    def state(self) -> str:
        """ One of PENDING, SUCCEEDED, FAILED, or CANCELLED.
        """

        future = self._future

        if not future.done():
            return PENDING

        if future.cancelled():
            return CANCELLED

        if future.exception() is None:
            return SUCCEEDED

        return FAILED


    def poll(self) -> bool:
        """ Return True if the operation has reached a terminal state,
            otherwise return False.
        """

        return self._future.done()

    done = poll


    def running(self) -> bool:
        return self._future.running()


    def wait(self, timeout: Optional[float] = None) -> bool:
        """ Block until the operation reaches a terminal state. Returns True
            if it has, or False if the *timeout* expired first. If the
            *timeout* argument is None it will block indefinitely.
        """

        done, _not_done = concurrent.futures.wait((self._future,), timeout)
        return len(done) == 1


    def result(self, timeout: Optional[float] = None) -> Any:
        """ Block until the operation completes and return its result. If
            the operation raised an exception, that same exception is raised
            here. Raises :class:`concurrent.futures.CancelledError` for a
            cancelled operation, and :class:`concurrent.futures.TimeoutError`
            if the *timeout* expires first.
        """

        return self._future.result(timeout)


    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]:
        """ Block until the operation completes and return the exception it
            raised, or None if it succeeded.
        """

        return self._future.exception(timeout)


    def cancel(self) -> bool:
        """ Prevent the operation from running, if it has not started yet.
            Returns True if the handle is now CANCELLED; returns False if the
            operation is already running or finished, in which case the
            operation carries on to its natural conclusion.
        """

        return self._future.cancel()


    def add_listener(self, listener: Callable[['Handle'], None]) -> None:
        """ Call *listener* with this handle once it reaches a terminal state.
            If it already has, the *listener* is called immediately, in the
            calling thread.
        """

        def _listener(future, listener=listener):
            try:
                listener(self)
            except Exception:
                logger.exception('completion listener raised', handle=self.id)

        self._future.add_done_callback(_listener)


    def _notify(self, future):
        """ Deliver the terminal outcome to the completion callback. This is
            registered exactly once per handle, and a future only ever
            invokes its done callbacks once.
        """

        callback = self._callback

        try:
            if future.cancelled():
                callback.on_error(CancelledError())
                return

            error = future.exception()

            if error is None:
                callback.on_success(future.result())
            else:
                callback.on_error(error)

        except Exception:
            logger.exception('completion callback raised', handle=self.id)


# end of class Handle



class Dispatcher:
    """ Run operations on a pool of worker threads. The caller owns the
        dispatcher and is responsible for shutting it down; it is also usable
        as a context manager, which drains on a clean exit and shuts down
        immediately if the block raised.

        There is no ordering guarantee between submitted operations, even
        from the same caller; an operation that depends on another should
        wait on that operation's handle before it is submitted.
    """

    def __init__(self, max_workers: Optional[int] = None, name: str = 'sdkwire'):

        self.name = name
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._lock = threading.Lock()
        self._outstanding = set()
        self._shutdown = False


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):

        if exc_type is None:
            self.drain()
        else:
            self.shutdown()


    @property
    def accepting(self) -> bool:
        return not self._shutdown


    def outstanding(self) -> int:
        """ Return the number of handles that have not yet reached a terminal
            state.
        """

        with self._lock:
            return len(self._outstanding)


    def submit(self, operation: Callable[[], Any], callback: Optional[Handler] = None) -> Handle:
        """ Schedule *operation*, a callable taking no arguments, and return
            its :class:`Handle` without waiting for it to run. If a
            *callback* is provided it is notified exactly once, after the
            handle reaches its terminal state.
        """

        if not callable(operation):
            raise TypeError('operation must be callable, not ' + type(operation).__name__)

        if callback is not None:
            try:
                callback.on_success
                callback.on_error
            except AttributeError:
                raise TypeError('callback must provide on_success() and on_error(); see dispatch.handler()') from None

        with self._lock:
            if self._shutdown:
                raise DispatcherShutdownError(self.name + ': dispatcher is shut down')

            try:
                future = self._executor.submit(operation)
            except RuntimeError as e:
                raise DispatcherShutdownError(self.name + ': ' + str(e)) from e

        # The completion callback may run immediately, in this thread, if the
        # operation is already finished; it must not run while holding the lock.

        handle = Handle(future, callback)

        with self._lock:
            if not future.done():
                self._outstanding.add(handle)

        future.add_done_callback(lambda future: self._retire(handle))
        logger.debug('operation submitted', dispatcher=self.name, handle=handle.id)

        return handle


    def _retire(self, handle):

        with self._lock:
            self._outstanding.discard(handle)

        logger.debug('operation complete', dispatcher=self.name, handle=handle.id, state=handle.state)


    def shutdown(self, wait: bool = False) -> None:
        """ Stop accepting new operations, and cancel every operation that has
            not started running. Operations already running are not
            interrupted; if *wait* is True this call blocks until they finish.
            Handles that already reached a terminal state are unaffected.
            Calling :func:`shutdown` more than once is harmless.
        """

        with self._lock:
            already = self._shutdown
            self._shutdown = True

        self._abandon(warn=not already, wait=wait)


    def _abandon(self, warn, wait=False):
        """ Cancel everything that has not started running, logging how many
            operations that was if *warn* is True.
        """

        with self._lock:
            unstarted = sum(1 for handle in self._outstanding if not handle.running() and not handle.done())

        if warn and unstarted:
            logger.warning('abandoning unstarted operations', dispatcher=self.name, count=unstarted)

        self._executor.shutdown(wait=wait, cancel_futures=True)


    def drain(self, timeout: Optional[float] = None) -> bool:
        """ Stop accepting new operations, wait up to *timeout* seconds for
            every outstanding operation to finish, then shut down. Returns
            True if everything finished; anything still unstarted when the
            *timeout* expires is cancelled, as with :func:`shutdown`.
        """

        with self._lock:
            self._shutdown = True
            futures = [handle._future for handle in self._outstanding]

        done, not_done = concurrent.futures.wait(futures, timeout)
        self._abandon(warn=True)

        return len(not_done) == 0


# end of class Dispatcher


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
