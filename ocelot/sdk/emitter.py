"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

SDK event emitter.

Named-event publish/subscribe used by the SDK to surface diagnostics and
state changes to application code. Handlers registered for an event run in
registration order.

Error diagnostics are never delivered from inside the call that produced
them. They go through an outbound queue (:meth:`EventEmitter.report_error_later`)
and are delivered by :meth:`EventEmitter.flush`, which the SDK calls once
its current unit of work is done. When an asyncio event loop is running in
the current thread the flush is scheduled on the loop's next iteration.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ocelot.logging_config import get_logger

logger = get_logger(__name__)

ERROR_EVENT = "error"

Handler = Callable[..., Any]


@dataclass
class _Subscription:
    handler: Handler
    context: Any = None

    def call(self, args: tuple) -> None:
        if self.context is not None:
            self.handler(self.context, *args)
        else:
            self.handler(*args)


class EventEmitter:
    """
    Publish/subscribe hub with a deferred queue for error diagnostics.

    ``logger`` is an SDK logger (see :mod:`ocelot.sdk.loggers`); it receives
    error messages that nobody is listening for.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger
        self._events: Dict[str, List[_Subscription]] = {}
        self._pending: List[Exception] = []
        self._flush_scheduled = False

    # -- Subscription --------------------------------------------------------

    def on(self, event: str, handler: Handler, context: Any = None) -> None:
        """Register ``handler`` for ``event``.

        When ``context`` is given it is passed as the handler's first argument.
        """
        self._events.setdefault(event, []).append(_Subscription(handler, context))
        logger.debug("Registered event handler", sdk_event=event)

    def off(self, event: str, handler: Handler, context: Any = None) -> None:
        """Remove every registration of ``handler`` (with ``context``) for ``event``."""
        subscriptions = self._events.get(event)
        if not subscriptions:
            return
        remaining = [
            s for s in subscriptions
            if not (s.handler == handler and s.context is context)
        ]
        if remaining:
            self._events[event] = remaining
        else:
            del self._events[event]

    def emit(self, event: str, *args: Any) -> None:
        """Call every handler of ``event`` synchronously with ``args``."""
        # Copy so handlers may subscribe/unsubscribe while we iterate.
        for subscription in list(self._events.get(event, ())):
            subscription.call(args)

    def get_events(self) -> List[str]:
        return list(self._events)

    def get_listener_count(self, event: str) -> int:
        return len(self._events.get(event, ()))

    # -- Error reporting -----------------------------------------------------

    def maybe_report_error(self, error: Optional[Exception]) -> None:
        """Emit ``error`` on the error channel, or log it if nobody listens."""
        if error is None:
            return
        if self._events.get(ERROR_EVENT):
            self.emit(ERROR_EVENT, error)
        elif self._logger is not None:
            self._logger.error(getattr(error, "message", str(error)))
        else:
            logger.error("Unhandled SDK error", error=str(error))

    def report_error_later(self, error: Exception) -> None:
        """Queue ``error`` for delivery on the next :meth:`flush`."""
        self._pending.append(error)
        self._schedule_flush()

    @property
    def pending(self) -> List[Exception]:
        """Errors queued but not yet delivered."""
        return list(self._pending)

    def flush(self) -> int:
        """Deliver queued errors in the order they were reported.

        Returns:
            Number of errors delivered.
        """
        self._flush_scheduled = False
        delivered = 0
        while self._pending:
            error = self._pending.pop(0)
            self.maybe_report_error(error)
            delivered += 1
        return delivered

    def _schedule_flush(self) -> None:
        if self._flush_scheduled:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop in this thread: the owner flushes explicitly.
            return
        self._flush_scheduled = True
        loop.call_soon(self.flush)
