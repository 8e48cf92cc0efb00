"""
Reachability pruning: restrict an automaton to the states reachable from its start state.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from pydfa.core.indexing import build_index
from pydfa.core.transitions import TransitionTable

if TYPE_CHECKING:
    from pydfa.core.automaton import Automaton

logger = logging.getLogger(__name__)


def reachable_states(start_state: str, table: TransitionTable) -> set[str]:
    """
    States reachable from `start_state` by zero or more transitions (breadth-first).

    A state is marked visited when it is queued, so each state is queued once.
    """
    index = build_index(table)
    if start_state not in index.state_ids:
        return {start_state}

    adjacency = index.adjacency()
    visited = np.zeros(index.n_states, dtype=bool)
    start = index.state_ids[start_state]
    visited[start] = True
    to_visit = deque((start,))
    while to_visit:
        current = to_visit.popleft()
        for neighbor in adjacency.indices[adjacency.indptr[current]:adjacency.indptr[current + 1]]:
            if not visited[neighbor]:
                visited[neighbor] = True
                to_visit.append(neighbor)

    return {index.states[i] for i in np.flatnonzero(visited)}


def prune_unreachable(automaton: Automaton) -> set[str]:
    """
    Drop every transition touching a state unreachable from the start state.

    The pruned table is swapped in as a whole. Returns the removed states.
    """
    before = automaton.transitions.all_states()
    reachable = reachable_states(automaton.start_state, automaton.transitions)
    pruned = automaton.transitions.restrict(reachable)
    removed = before - reachable
    if removed:
        logger.debug(
            "pruned %d unreachable states (%d -> %d transitions) from %r",
            len(removed),
            len(automaton.transitions),
            len(pruned),
            automaton.name,
        )
    automaton.transitions = pruned
    return removed
