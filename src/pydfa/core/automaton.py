from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from pydfa.core.transitions import TransitionTable
from pydfa.core.types import MinimizeSpec
from pydfa.ops import reachability, refinement, simulation


@dataclass
class Automaton:
    """
    Deterministic finite automaton: start state, accept states and a transition relation.

    `name` is descriptive only. `transitions` accepts any iterable of
    Transition objects or (state, symbol, next_state) triples and is stored
    as a TransitionTable. `check` and `test` only read; `minimize` and `prune`
    swap in a new table.
    """

    start_state: str
    accept_states: frozenset[str] = field(default_factory=frozenset)
    transitions: TransitionTable = field(default_factory=TransitionTable)
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.start_state, str):
            raise TypeError("start_state must be a str")
        if isinstance(self.accept_states, str):
            raise TypeError("accept_states must be a collection of state names, not a str")
        self.accept_states = frozenset(self.accept_states)
        if not isinstance(self.transitions, TransitionTable):
            self.transitions = TransitionTable(self.transitions)

    def check(self, symbols: Iterable[str]) -> tuple[bool, list[str]]:
        return simulation.check(self, symbols)

    def test(self, symbols: Iterable[str]) -> bool:
        return simulation.test(self, symbols)

    def all_symbols(self) -> set[str]:
        return self.transitions.all_symbols()

    def all_states(self) -> set[str]:
        return self.transitions.all_states()

    def prune(self) -> set[str]:
        return reachability.prune_unreachable(self)

    def minimize(self, spec: Optional[MinimizeSpec] = None) -> dict[str, str]:
        return refinement.minimize(self, spec)

    def copy(self) -> Automaton:
        return Automaton(
            start_state=self.start_state,
            accept_states=self.accept_states,
            transitions=TransitionTable(self.transitions),
            name=self.name,
        )
