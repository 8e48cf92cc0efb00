"""
Transition relation: a keyed lookup table (state, symbol) -> next_state.

Rules are stored by key rather than as an object graph, so cycles and
self-loops need no special handling. Tables are treated as values: the
transformations below return new tables and never mutate in place.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional, Union

from pydfa.core.types import Transition

TransitionLike = Union[Transition, tuple]


def _as_transition(rule: TransitionLike) -> Transition:
    if isinstance(rule, Transition):
        return rule
    if len(rule) != 3:
        raise ValueError(f"transition must be a (state, symbol, next_state) triple, got {rule!r}")
    return Transition(*rule)


class TransitionTable:
    """
    The set of (state, symbol) -> next_state rules of a deterministic automaton.

    Construction validates determinism: two rules sharing (state, symbol)
    with different next states raise ValueError. Identical triples are
    collapsed into one rule. Iteration follows first-insertion order.
    """

    def __init__(self, rules: Iterable[TransitionLike] = ()) -> None:
        self._next: dict[tuple[str, str], str] = {}
        for rule in rules:
            transition = _as_transition(rule)
            existing = self._next.get(transition.key)
            if existing is None:
                self._next[transition.key] = transition.next_state
            elif existing != transition.next_state:
                raise ValueError(
                    f"non-deterministic rules for ({transition.state!r}, {transition.symbol!r}): "
                    f"{existing!r} and {transition.next_state!r}"
                )

    def lookup(self, state: str, symbol: str) -> Optional[Transition]:
        next_state = self._next.get((state, symbol))
        if next_state is None:
            return None
        return Transition(state, symbol, next_state)

    def next_state(self, state: str, symbol: str) -> Optional[str]:
        return self._next.get((state, symbol))

    def successors(self, state: str) -> list[Transition]:
        return [t for t in self if t.state == state]

    def all_symbols(self) -> set[str]:
        return {symbol for _, symbol in self._next}

    def all_states(self) -> set[str]:
        states = {state for state, _ in self._next}
        states.update(self._next.values())
        return states

    def restrict(self, states: Iterable[str]) -> TransitionTable:
        """Keep only rules whose source and destination both lie in `states`."""
        keep = set(states)
        return TransitionTable(t for t in self if t.state in keep and t.next_state in keep)

    def rename(self, mapping: Mapping[str, str]) -> TransitionTable:
        """
        Rename states through `mapping` (identity for unmapped states).

        The result is deduplicated and sorted by the (state, symbol, next_state)
        ordering, so equal inputs always give identical tables.
        """
        renamed = {
            Transition(
                mapping.get(t.state, t.state),
                t.symbol,
                mapping.get(t.next_state, t.next_state),
            )
            for t in self
        }
        return TransitionTable(sorted(renamed))

    def ordered(self) -> list[Transition]:
        return sorted(self)

    def __iter__(self) -> Iterator[Transition]:
        for (state, symbol), next_state in self._next.items():
            yield Transition(state, symbol, next_state)

    def __len__(self) -> int:
        return len(self._next)

    def __contains__(self, rule: object) -> bool:
        if not isinstance(rule, Transition):
            return False
        return self._next.get(rule.key) == rule.next_state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._next == other._next

    def __repr__(self) -> str:
        return f"TransitionTable({self.ordered()!r})"
