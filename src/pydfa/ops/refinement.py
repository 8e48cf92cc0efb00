"""
Partition refinement (Myhill-Nerode minimization).

Partitions are numpy arrays of block labels, one entry per state of a
TransitionIndex. "No rule for this symbol" is a successor outcome of its own:
it agrees with itself and differs from every real block.

- refine_pairwise: round-based pairwise comparison, pairs merged transitively
  with scipy connected components
- refine_hopcroft: Hopcroft's worklist algorithm over the index completed by
  a phantom sink state
Both return the same coarsest partition.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from pydfa.core.indexing import MISSING, TransitionIndex, build_index
from pydfa.core.transitions import TransitionTable
from pydfa.core.types import MinimizeSpec
from pydfa.ops.reachability import prune_unreachable

if TYPE_CHECKING:
    from pydfa.core.automaton import Automaton

logger = logging.getLogger(__name__)


def _relabel(labels: np.ndarray) -> np.ndarray:
    # Number blocks by first appearance so equal partitions have equal arrays.
    _, first, inverse = np.unique(labels, return_index=True, return_inverse=True)
    order = np.argsort(np.argsort(first))
    return order[inverse.reshape(-1)].astype(np.int64)


def n_blocks(blocks: np.ndarray) -> int:
    return int(np.unique(blocks).size)


def initial_partition(index: TransitionIndex, accept_states: Iterable[str]) -> np.ndarray:
    """Accepting states in one block, every other known state in another."""
    accepting = np.zeros(index.n_states, dtype=bool)
    accepting[index.ids(accept_states)] = True
    return _relabel(np.where(accepting, 0, 1))


def successor_blocks(index: TransitionIndex, blocks: np.ndarray) -> np.ndarray:
    """Block reached from each state on each symbol, MISSING where there is no rule."""
    successors = index.successors
    if successors.size == 0:
        return successors.copy()
    return np.where(successors == MISSING, MISSING, blocks[successors])


def are_indistinguishable(
    index: TransitionIndex,
    blocks: np.ndarray,
    state_1: str,
    state_2: str,
) -> bool:
    """
    Whether no single symbol separates two states under the current partition.

    States in different blocks are already distinguished. Otherwise every
    symbol must lead both states into the same block, or leave both without
    a rule.
    """
    i = index.state_ids[state_1]
    j = index.state_ids[state_2]
    if i == j:
        return True
    if blocks[i] != blocks[j]:
        return False
    rows = successor_blocks(index, blocks)
    return bool(np.array_equal(rows[i], rows[j]))


def _refine_round(index: TransitionIndex, blocks: np.ndarray) -> np.ndarray:
    rows = successor_blocks(index, blocks)
    src: list[int] = []
    dst: list[int] = []
    for block in np.unique(blocks):
        members = np.flatnonzero(blocks == block)
        for a, i in enumerate(members):
            src.append(i)
            dst.append(i)
            for j in members[a + 1:]:
                if np.array_equal(rows[i], rows[j]):
                    src.append(i)
                    dst.append(j)

    n = index.n_states
    data = np.ones(len(src), dtype=np.int8)
    graph = coo_matrix((data, (src, dst)), shape=(n, n)).tocsr()
    _, labels = connected_components(graph, directed=False)
    return _relabel(labels)


def refine_pairwise(index: TransitionIndex, accept_states: Iterable[str]) -> np.ndarray:
    """Split blocks round by round until the block count stops growing."""
    blocks = initial_partition(index, accept_states)
    if index.n_states == 0:
        return blocks

    round_num = 0
    while True:
        round_num += 1
        refined = _refine_round(index, blocks)
        logger.debug("refinement round %d: %d -> %d blocks", round_num, n_blocks(blocks), n_blocks(refined))
        if n_blocks(refined) <= n_blocks(blocks):
            return blocks
        blocks = refined


def refine_hopcroft(index: TransitionIndex, accept_states: Iterable[str]) -> np.ndarray:
    """
    Coarsest partition via Hopcroft's algorithm.

    Missing rules are sent to a phantom sink that starts in a block of its own,
    so it never merges with a real state.
    """
    n = index.n_states
    if n == 0:
        return initial_partition(index, accept_states)

    sink = n
    successors = np.where(index.successors == MISSING, sink, index.successors)
    successors = np.vstack([successors, np.full((1, index.n_symbols), sink, dtype=np.int64)])

    initial = initial_partition(index, accept_states)
    partition: list[set[int]] = [set(np.flatnonzero(initial == b).tolist()) for b in np.unique(initial)]
    partition.append({sink})
    worklist: list[set[int]] = [set(block) for block in partition]

    while worklist:
        splitter = np.asarray(sorted(worklist.pop()), dtype=np.int64)
        for symbol_id in range(index.n_symbols):
            preimage = set(np.flatnonzero(np.isin(successors[:, symbol_id], splitter)).tolist())
            if not preimage:
                continue
            new_partition: list[set[int]] = []
            for block in partition:
                inside = block & preimage
                outside = block - preimage
                if not inside or not outside:
                    new_partition.append(block)
                    continue
                new_partition.append(inside)
                new_partition.append(outside)
                if block in worklist:
                    worklist.remove(block)
                    worklist.append(inside)
                    worklist.append(outside)
                elif len(inside) <= len(outside):
                    worklist.append(inside)
                else:
                    worklist.append(outside)
            partition = new_partition

    labels = np.empty(n + 1, dtype=np.int64)
    for label, block in enumerate(partition):
        labels[sorted(block)] = label
    return _relabel(labels[:n])


def refine_partition(
    index: TransitionIndex,
    accept_states: Iterable[str],
    method: str = "pairwise",
) -> np.ndarray:
    accept_states = list(accept_states)
    if method == "pairwise":
        return refine_pairwise(index, accept_states)
    if method == "hopcroft":
        return refine_hopcroft(index, accept_states)
    raise ValueError(f"unknown refinement method: {method}")


def partition_sets(index: TransitionIndex, blocks: np.ndarray) -> list[frozenset[str]]:
    """Blocks as sets of state names, ordered by their smallest member."""
    groups: dict[int, set[str]] = {}
    for state, label in zip(index.states, blocks.tolist()):
        groups.setdefault(label, set()).add(state)
    return sorted((frozenset(g) for g in groups.values()), key=min)


def canonical_names(index: TransitionIndex, blocks: np.ndarray) -> dict[str, str]:
    """
    Map every member of a multi-member block to the block's smallest member.

    Singleton blocks keep their names and are left out of the mapping.
    """
    names: dict[str, str] = {}
    for block in partition_sets(index, blocks):
        if len(block) <= 1:
            continue
        representative = min(block)
        for state in block:
            names[state] = representative
    return names


def rewrite_transitions(table: TransitionTable, names: dict[str, str]) -> TransitionTable:
    """Rename through `names`, dropping the duplicate rules merging creates, in sorted order."""
    return table.rename(names)


def minimize(automaton: Automaton, spec: Optional[MinimizeSpec] = None) -> dict[str, str]:
    """
    Collapse each equivalence class of states into its smallest member, in place.

    The start state and accept states are renamed along with the transitions.
    Returns the old-name -> new-name mapping of merged states.
    """
    spec = MinimizeSpec() if spec is None else spec

    if spec.prune_unreachable:
        prune_unreachable(automaton)

    index = build_index(automaton.transitions)
    blocks = refine_partition(index, automaton.accept_states, method=spec.method)
    names = canonical_names(index, blocks)

    automaton.transitions = rewrite_transitions(automaton.transitions, names)
    automaton.start_state = names.get(automaton.start_state, automaton.start_state)
    automaton.accept_states = frozenset(names.get(s, s) for s in automaton.accept_states)

    logger.debug(
        "minimized %r with %s: %d -> %d states, %d merged",
        automaton.name,
        spec.method,
        index.n_states,
        n_blocks(blocks),
        sum(1 for old, new in names.items() if old != new),
    )

    if not spec.include_representatives:
        return {old: new for old, new in names.items() if old != new}
    return names
