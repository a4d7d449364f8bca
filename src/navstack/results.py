"""Push results — pushing a screen as a call that returns a value.

``Navigator.push()`` hands back a ``PushResult``. It completes with the
value passed to ``pop()`` for that screen, or with ``Dismissed`` when the
screen left the stack without being popped explicitly (an ancestor was
replaced, or the user went back past several screens at once)::

    result = navigator.push("/funnel/name")
    ...
    value = await result
    if value is Dismissed:
        ...

Free of timers and locks: resolution is driven by the navigator's event
handling on the same thread that created the result.
"""

import asyncio
import logging
from collections.abc import Callable, Generator, Iterable, Iterator
from concurrent.futures import Future
from typing import Any, Final, final

logger = logging.getLogger("navstack.results")


@final
class _DismissedType:
    """Type of the ``Dismissed`` sentinel. Only one instance exists."""

    __slots__ = ()
    _instance: "_DismissedType | None" = None

    def __new__(cls) -> "_DismissedType":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Dismissed"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Dismissed"


Dismissed: Final = _DismissedType()


class PushResult:
    """Pending outcome of one ``push()``.

    Completes exactly once. Usable from plain code (``done()``,
    ``result()``, ``add_done_callback()``) and awaitable from asyncio code.
    """

    __slots__ = ("_future", "pathname")

    def __init__(self, pathname: str) -> None:
        self.pathname = pathname
        self._future: Future[Any] = Future()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> Any:
        """The resolved value. Blocks up to *timeout* seconds when pending."""
        return self._future.result(timeout)

    @property
    def dismissed(self) -> bool:
        """True when the screen was torn down without an explicit pop."""
        return self._future.done() and self._future.result() is Dismissed

    def add_done_callback(self, fn: Callable[["PushResult"], object]) -> None:
        """Call *fn* with this result once it completes (immediately if done)."""
        self._future.add_done_callback(lambda _future: fn(self))

    def set_result(self, value: Any) -> bool:
        """Complete with *value*. Returns False if already completed."""
        if self._future.done():
            return False
        self._future.set_result(value)
        return True

    def __await__(self) -> Generator[Any, None, Any]:
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            return f"<PushResult {self.pathname} pending>"
        return f"<PushResult {self.pathname} {self._future.result()!r}>"


class ResultChannel:
    """Ownership table of pending push results, keyed by path.

    At most one result is pending per path. Registering a path that is
    already pending replaces the earlier slot; the replaced result is no
    longer reachable through the channel.
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: dict[str, PushResult] = {}

    def register(self, pathname: str) -> PushResult:
        if pathname in self._pending:
            logger.debug("push result for %s replaced by a newer push", pathname)
        result = PushResult(pathname)
        self._pending[pathname] = result
        return result

    def resolve(self, pathname: str, value: Any = None) -> bool:
        """Complete and unregister the result for *pathname*.

        Returns whether a pending result existed.
        """
        result = self._pending.pop(pathname, None)
        if result is None:
            return False
        return result.set_result(value)

    def dismiss(self, pathnames: Iterable[str]) -> list[str]:
        """Resolve each pending path with ``Dismissed``; return those resolved."""
        dismissed = [path for path in pathnames if self.resolve(path, Dismissed)]
        if dismissed:
            logger.debug("dismissed pending results: %s", ", ".join(dismissed))
        return dismissed

    def __contains__(self, pathname: object) -> bool:
        return pathname in self._pending

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._pending))

    def __len__(self) -> int:
        return len(self._pending)
