"""Bidirectional dependency index over string keys.

A pair ``(s, t)`` means ``t`` depends on ``s``: ``s`` must be evaluated before
``t``. The index is a set of such pairs, kept as two mirrored maps so that
both directions can be looked up without scanning.

For example, with pairs ``{("a", "b"), ("a", "c"), ("b", "d"), ("d", "d")}``::

    dependents_of("a") == ["b", "c"]
    dependents_of("d") == ["d"]
    dependees_of("d") == ["b", "d"]
    dependees_of("a") == []
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DependencyPair:
    source: str
    target: str


def _link(graph: dict[str, dict[str, None]], key: str, value: str) -> None:
    graph.setdefault(key, {})[value] = None


def _unlink(graph: dict[str, dict[str, None]], key: str, value: str) -> None:
    related = graph[key]
    del related[value]
    if not related:
        del graph[key]


class DependencyIndex:
    """Set of dependency pairs with dependents/dependees lookup in both directions.

    Inner dicts act as insertion-ordered sets, so query results come back in
    the order pairs were added. Queries return new lists.

    Not thread-safe: callers sharing an index across threads must serialize
    access themselves.
    """

    __slots__ = ("_dependents", "_dependees", "_size")

    def __init__(self) -> None:
        self._dependents: dict[str, dict[str, None]] = {}
        self._dependees: dict[str, dict[str, None]] = {}
        self._size = 0

    @property
    def size(self) -> int:
        """Number of pairs in the index."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, s: str) -> int:
        return self.dependee_count(s)

    def __contains__(self, pair: object) -> bool:
        if isinstance(pair, DependencyPair):
            return self.has_dependency(pair.source, pair.target)
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        s, t = pair
        if not isinstance(s, str) or not isinstance(t, str):
            return False
        return self.has_dependency(s, t)

    def __iter__(self) -> Iterator[DependencyPair]:
        return self.pairs()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def dependee_count(self, s: str) -> int:
        """Size of dependees(s)."""
        return len(self._dependees.get(s, ()))

    def has_dependents(self, s: str) -> bool:
        return s in self._dependents

    def has_dependees(self, s: str) -> bool:
        return s in self._dependees

    def has_dependency(self, s: str, t: str) -> bool:
        return t in self._dependents.get(s, ())

    def dependents_of(self, s: str) -> list[str]:
        """Keys that depend on s."""
        return list(self._dependents.get(s, ()))

    def dependees_of(self, s: str) -> list[str]:
        """Keys that s depends on."""
        return list(self._dependees.get(s, ()))

    def pairs(self) -> Iterator[DependencyPair]:
        snapshot = [
            DependencyPair(source, target)
            for source, targets in self._dependents.items()
            for target in targets
        ]
        return iter(snapshot)

    def keys(self) -> list[str]:
        """Every key on either side of a pair, in first-seen order."""
        seen: dict[str, None] = {}
        for source, targets in self._dependents.items():
            seen[source] = None
            for target in targets:
                seen[target] = None
        return list(seen)

    def add_dependency(self, s: str, t: str) -> None:
        """Add the pair (s, t): t depends on s. No-op when already present."""
        if self.has_dependency(s, t):
            return
        _link(self._dependents, s, t)
        _link(self._dependees, t, s)
        self._size += 1

    def remove_dependency(self, s: str, t: str) -> None:
        """Remove the pair (s, t) if it exists."""
        if not self.has_dependency(s, t):
            return
        _unlink(self._dependents, s, t)
        _unlink(self._dependees, t, s)
        self._size -= 1

    def replace_dependents(self, s: str, new_dependents: Iterable[str]) -> None:
        """Remove every pair (s, r), then add (s, t) for each t in new_dependents."""
        for r in self.dependents_of(s):
            self.remove_dependency(s, r)
        for t in new_dependents:
            self.add_dependency(s, t)

    def replace_dependees(self, s: str, new_dependees: Iterable[str]) -> None:
        """Remove every pair (r, s), then add (t, s) for each t in new_dependees."""
        for r in self.dependees_of(s):
            self.remove_dependency(r, s)
        for t in new_dependees:
            self.add_dependency(t, s)
