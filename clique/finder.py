# clique/finder.py
import enum
from typing import FrozenSet, Iterator, List, Optional, Tuple, Union

from clique.errors import InvalidGraphError
from clique.pivot import PivotSearch
from clique.timeunit import TimeUnit, deadline_after, resolve_timeout
from graph.view import GraphView


class SearchState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    EXHAUSTIVE = "exhaustive"
    TIME_LIMITED = "time_limited"


class MaximalCliqueFinder:
    """
    Lazily enumerates all maximal cliques of a simple undirected graph.

    The search runs at most once per instance, on the first access to the results.
    `strategy` is any object with `search(view, deadline, sink) -> bool`
    (True when the deadline stopped it early); defaults to PivotSearch.

    Usage:
        finder = MaximalCliqueFinder(G, timeout=2, unit="seconds")
        for Q in finder: ...
        largest = list(finder.maximum_iterator())
        finder.is_time_limit_reached()
    """

    def __init__(
        self,
        G,
        timeout: Union[int, float] = 0,
        unit: Union[str, TimeUnit] = TimeUnit.SECONDS,
        strategy=None,
    ):
        self.view = GraphView(G)
        self.nanos: Optional[int] = resolve_timeout(timeout, unit)
        self.strategy = strategy if strategy is not None else PivotSearch()
        self.state = SearchState.NOT_STARTED
        self._cliques: Optional[Tuple[FrozenSet, ...]] = None
        self._max_size = 0
        self._time_limit_reached = False

    def run(self) -> "MaximalCliqueFinder":
        """Run the search unless a previous call already did."""
        if self._cliques is not None:
            return self
        if not self.view.is_simple():
            raise InvalidGraphError("Graph must be simple")

        found: List[FrozenSet] = []

        def record(Q: FrozenSet) -> None:
            found.append(Q)
            if len(Q) > self._max_size:
                self._max_size = len(Q)

        self.state = SearchState.RUNNING
        deadline = deadline_after(self.nanos)
        try:
            timed_out = self.strategy.search(self.view, deadline, record)
        except Exception:
            self.state = SearchState.NOT_STARTED
            self._max_size = 0
            raise

        self._cliques = tuple(found)
        self._time_limit_reached = bool(timed_out)
        self.state = SearchState.TIME_LIMITED if timed_out else SearchState.EXHAUSTIVE
        return self

    @property
    def cliques(self) -> Tuple[FrozenSet, ...]:
        self.run()
        return self._cliques

    @property
    def max_size(self) -> int:
        self.run()
        return self._max_size

    def iterator(self) -> Iterator[FrozenSet]:
        self.run()
        return iter(self._cliques)

    __iter__ = iterator

    def maximum_iterator(self) -> Iterator[FrozenSet]:
        """Only the cliques whose size equals the largest size found."""
        self.run()
        size = self._max_size
        return (Q for Q in self._cliques if len(Q) == size)

    def is_time_limit_reached(self) -> bool:
        return self._time_limit_reached


def find_maximal_cliques(G, timeout=0, unit=TimeUnit.SECONDS) -> List[FrozenSet]:
    return list(MaximalCliqueFinder(G, timeout=timeout, unit=unit))
