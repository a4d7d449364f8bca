"""Navigator — owns the activity stack on top of a history port.

Data flows one way::

    history event -> reduce_state (pure) -> new state
                  -> diff of present trees -> dismiss pending results
                  -> commit -> notify subscribers

The navigator is the only writer of its state and its result registry.
A ``NavigationError`` raised while reducing propagates to whoever caused
the event, and the previous state stays in place.

Usage::

    navigator = Navigator(MemoryHistory("/"), routes)
    result = navigator.push("/funnel/name")
    navigator.pop("Alice")
    result.result()  # "Alice"
"""

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from navstack._internal.types import Unsubscribe
from navstack.config import NavigatorConfig
from navstack.debug import format_state
from navstack.errors import NoMatchingActivity
from navstack.history.events import ExitFinished, NavigationEvent
from navstack.history.location import LocationLike, parse_location
from navstack.history.protocol import History
from navstack.results import PushResult, ResultChannel
from navstack.routing.route import RouteConfig
from navstack.stack.activity import FlatActivity
from navstack.stack.diff import diff_activities
from navstack.stack.reducer import reduce_state
from navstack.stack.state import NavigatorState, initial_state, present_tree

logger = logging.getLogger("navstack.navigator")

StateListener: TypeAlias = Callable[[NavigatorState], None]


class Navigator:
    """Activity stack driven by a ``History`` port.

    Subscribes to the port on construction. ``push``/``pop``/``replace``
    and friends only talk to the port; state changes happen when the
    port reports the resulting event back.
    """

    __slots__ = ("_config", "_history", "_listeners", "_results", "_routes", "_state", "_unsubscribe")

    def __init__(
        self,
        history: History,
        routes: Sequence[RouteConfig],
        *,
        config: NavigatorConfig | None = None,
    ) -> None:
        self._history = history
        self._routes = tuple(routes)
        self._config = config or NavigatorConfig()
        self._results = ResultChannel()
        self._listeners: list[StateListener] = []
        self._state = initial_state(self._routes, history.get_current_location())
        self._unsubscribe: Unsubscribe | None = history.subscribe(self._dispatch)

    # -- State --

    @property
    def state(self) -> NavigatorState:
        return self._state

    def get_snapshot(self) -> NavigatorState:
        """Current state, for external stores polling the navigator."""
        return self._state

    @property
    def routes(self) -> tuple[RouteConfig, ...]:
        return self._routes

    @property
    def config(self) -> NavigatorConfig:
        return self._config

    @property
    def pending_results(self) -> tuple[str, ...]:
        """Paths with a push result still waiting for pop or dismissal."""
        return tuple(self._results)

    # -- Navigation --

    def push(self, to: LocationLike) -> PushResult:
        """Push *to* and return its pending result.

        The result completes with the value given to ``pop()`` for that
        screen, or with ``Dismissed`` if the screen leaves the stack any
        other way.
        """
        pathname = parse_location(to, self._history.get_current_location()).pathname
        self._history.push(to)
        return self._results.register(pathname)

    def pop(self, value: object = None) -> None:
        """Resolve the top screen's push result with *value*, then go back."""
        self._results.resolve(self._state.top.pathname, value)
        self._history.pop()

    def pop_from(self, path: str, value: object = None) -> None:
        """Resolve *path*'s push result and go back past the screen owning it.

        Everything stacked above that screen is popped with it. Raises
        ``NoMatchingActivity`` when no present activity contains *path*.
        """
        present = self._state.present
        position = next((i for i, flat in enumerate(present) if flat.contains_path(path)), None)
        if position is None:
            msg = f"pop_from: no present activity contains {path!r}"
            raise NoMatchingActivity(msg)
        self._results.resolve(path, value)
        if position == 0:
            logger.warning("pop_from: %s belongs to the root activity; nothing to pop", path)
            return
        self._history.go(-(len(present) - position))

    def pop_until(self, predicate: Callable[[FlatActivity], bool]) -> None:
        """Go back until the first present activity matching *predicate* is the top.

        Raises ``NoMatchingActivity`` when no present activity matches.
        """
        present = self._state.present
        position = next((i for i, flat in enumerate(present) if predicate(flat)), None)
        if position is None:
            msg = "pop_until: no present activity matches the predicate"
            raise NoMatchingActivity(msg)
        steps = len(present) - 1 - position
        if steps:
            self._history.go(-steps)

    def replace(self, to: LocationLike) -> None:
        self._history.replace(to)

    def exit_finished(self) -> None:
        """Report that popped screens finished their exit transition."""
        self._dispatch(ExitFinished())

    # -- Subscription --

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        """Call *listener* with the new state after every transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Detach from the history port. Idempotent."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "Navigator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- Event handling --

    def _dispatch(self, event: NavigationEvent) -> None:
        if self._config.log_events:
            logger.debug("navigation event: %r", event)

        previous = self._state
        state = reduce_state(
            previous,
            event,
            self._routes,
            two_phase=self._config.two_phase_removal,
        )
        if state is previous:
            return

        # Fallback screens all share the "*" tree path; departed pathnames are dismissed as well
        diff = diff_activities(present_tree(previous), present_tree(state))
        departed = {flat.pathname for flat in previous.present} - {flat.pathname for flat in state.present}
        self._results.dismiss(sorted(departed.union(diff.removed)))

        self._state = state
        if self._config.log_events and logger.isEnabledFor(logging.DEBUG):
            logger.debug("navigator state:\n%s", format_state(state))

        for listener in tuple(self._listeners):
            listener(state)
