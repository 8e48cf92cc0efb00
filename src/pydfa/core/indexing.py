from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix

from pydfa.core.transitions import TransitionTable

MISSING = -1


@dataclass(frozen=True)
class TransitionIndex:
    """
    Dense integer view of a TransitionTable.

    States and symbols are sorted, so every array built from the same table is
    identical. `successors[i, j]` is the index of the state reached from
    `states[i]` on `symbols[j]`, or MISSING when no rule exists.
    """

    states: tuple[str, ...]
    symbols: tuple[str, ...]
    state_ids: dict[str, int]
    successors: np.ndarray

    @property
    def n_states(self) -> int:
        return len(self.states)

    @property
    def n_symbols(self) -> int:
        return len(self.symbols)

    def ids(self, states: Iterable[str]) -> np.ndarray:
        """Indices of the given states, skipping any the table does not know."""
        found = [self.state_ids[s] for s in states if s in self.state_ids]
        return np.asarray(sorted(found), dtype=np.int64)

    def adjacency(self) -> csr_matrix:
        """Boolean state-to-state adjacency, one entry per distinct edge."""
        rows, cols = np.nonzero(self.successors != MISSING)
        dst = self.successors[rows, cols]
        data = np.ones(rows.size, dtype=np.int8)
        coo = coo_matrix((data, (rows, dst)), shape=(self.n_states, self.n_states), dtype=np.int8)
        adjacency = csr_matrix(coo)
        adjacency.sum_duplicates()
        adjacency.data[:] = 1
        return adjacency


def build_index(table: TransitionTable) -> TransitionIndex:
    states = tuple(sorted(table.all_states()))
    symbols = tuple(sorted(table.all_symbols()))
    state_ids = {state: i for i, state in enumerate(states)}
    symbol_ids = {symbol: j for j, symbol in enumerate(symbols)}

    successors = np.full((len(states), len(symbols)), MISSING, dtype=np.int64)
    for transition in table:
        successors[state_ids[transition.state], symbol_ids[transition.symbol]] = state_ids[transition.next_state]
    successors.flags.writeable = False

    return TransitionIndex(
        states=states,
        symbols=symbols,
        state_ids=state_ids,
        successors=successors,
    )
