"""Replay-latest observable cell used to propagate page data.

An :class:`ObservableValue` always has a current value.  Subscribing
delivers that value immediately and then every later :meth:`publish`, so a
consumer that attaches while a fetch is still in flight receives the result
without resubscribing.

# ─── HOW PAGE STREAMS FLOW ───────────────────────────────────────────
#
#   PaginationController ──publish()──→ ObservableValue ──observer()──→ UI
#                                          ↑
#                          subscribe(): replay current value first
#
#   - publish() may run on any thread; a re-entrant lock serializes
#     publishes on one instance so observers never see interleaved values.
#   - A subscriber whose code is bound to one thread (a UI loop) passes a
#     ``dispatcher`` such as ``loop.call_soon_threadsafe``; delivery is
#     then scheduled through it instead of running on the publisher.
#   - Subscription handles are context managers: leaving the ``with``
#     block unsubscribes.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from photopager.utils.logging import get_logger

T = TypeVar("T")

Observer = Callable[[T], object]
Dispatcher = Callable[[Callable[[], object]], object]

_logger: structlog.BoundLogger = get_logger(__name__)


class Subscription(Generic[T]):
    """Handle returned by :meth:`ObservableValue.subscribe`."""

    def __init__(
        self,
        owner: ObservableValue[T],
        observer: Observer[T],
        dispatcher: Dispatcher | None,
    ) -> None:
        self._owner = owner
        self._observer = observer
        self._dispatcher = dispatcher
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop delivery.  Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._owner._remove(self)

    def _deliver(self, value: T) -> None:
        if not self._active:
            return
        if self._dispatcher is None:
            self._invoke(value)
        else:
            self._dispatcher(lambda: self._invoke(value))

    def _invoke(self, value: T) -> None:
        # Re-checked here: a dispatched call may run after unsubscribe().
        if not self._active:
            return
        try:
            self._observer(value)
        except Exception as exc:
            _logger.warning(
                "observer_callback_error",
                error=str(exc),
                observer=getattr(self._observer, "__name__", repr(self._observer)),
            )

    def __enter__(self) -> Subscription[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class ObservableValue(Generic[T]):
    """A hot, replay-latest value cell.

    Parameters
    ----------
    initial:
        The value held (and replayed to subscribers) until the first
        :meth:`publish`.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscriptions: list[Subscription[T]] = []
        self._lock = threading.RLock()

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self, observer: Observer[T], dispatcher: Dispatcher | None = None) -> Subscription[T]:
        """Attach *observer* and immediately deliver the current value.

        Parameters
        ----------
        observer:
            Called with each value.  Exceptions it raises are logged and
            do not affect other observers.
        dispatcher:
            Optional callable that receives a zero-argument callable and
            runs it on the subscriber's own context.

        Returns
        -------
        Subscription
            Handle whose :meth:`~Subscription.unsubscribe` ends delivery.
        """
        subscription = Subscription(self, observer, dispatcher)
        with self._lock:
            self._subscriptions.append(subscription)
            subscription._deliver(self._value)
        return subscription

    def publish(self, value: T) -> None:
        """Store *value* and deliver it to every subscriber in subscription order."""
        with self._lock:
            self._value = value
            for subscription in list(self._subscriptions):
                subscription._deliver(value)

    def _remove(self, subscription: Subscription[T]) -> None:
        with self._lock:
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                pass

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r}, subscribers={self.subscriber_count})"
