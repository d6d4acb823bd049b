"""Change notification for consumers that re-render after data mutations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Protocol

from .logging_config import get_logger

logger = get_logger(__name__)


class ChangeListener(Protocol):
    """Callback invoked, without payload, after stored data changed."""

    def __call__(self) -> None:  # pragma: no cover - interface
        ...


class ChangeNotifier:
    """Registry of change listeners.

    Repositories call :meth:`notify` after each committed mutation; consumers
    re-fetch and re-run filtering or statistics when called back.
    """

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []
        self._depth = 0
        self._pending = False

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener and return a function that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        if self._depth:
            self._pending = True
            return
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                # The mutation already committed; keep delivering to the rest.
                logger.exception("Change listener failed", extra={"listener": repr(listener)})

    def __len__(self) -> int:
        return len(self._listeners)

    @contextmanager
    def deferred(self) -> Iterator[None]:
        """Hold back notifications until the outermost block exits.

        Any number of :meth:`notify` calls inside the block collapse into one
        delivery at exit, also when the block raises after a committed write.
        """

        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            if not self._depth and self._pending:
                self._pending = False
                self.notify()
