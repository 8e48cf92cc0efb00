from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Sequence, Union

import numpy as np
from numpy.random import Generator, SeedSequence

from pydfa.core.automaton import Automaton
from pydfa.core.types import Transition

Seed = Union[int, SeedSequence, Generator, None]


def automaton_rng(seed: Seed = None) -> Generator:
    """
    Generator that drives random automaton construction.

    An existing Generator is used as is, so a caller can draw several
    automata from one stream. Ints and SeedSequences give a fresh PCG64
    stream; None draws OS entropy.
    """
    if isinstance(seed, Generator):
        return seed
    if isinstance(seed, bool) or not (
        seed is None or isinstance(seed, (int, np.integer, SeedSequence))
    ):
        raise TypeError(f"seed must be int, SeedSequence, Generator, or None, got {type(seed)}")
    if isinstance(seed, np.integer):
        seed = int(seed)
    return np.random.Generator(np.random.PCG64(seed))


def _validate_prob(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1]")


def random_automaton(
    n_states: int,
    alphabet: Iterable[str],
    seed: Seed = None,
    p_transition: float = 1.0,
    p_accept: float = 0.3,
) -> Automaton:
    """
    Random deterministic automaton over states q0..q{n_states-1}, starting in q0.

    Each (state, symbol) pair gets a rule with probability `p_transition`, to a
    uniformly chosen state. Each state accepts with probability `p_accept`.
    """
    if n_states <= 0:
        raise ValueError("n_states must be > 0")
    symbols = sorted(set(alphabet))
    if not symbols:
        raise ValueError("alphabet must not be empty")
    _validate_prob("p_transition", p_transition)
    _validate_prob("p_accept", p_accept)

    rng = automaton_rng(seed)
    states = [f"q{i}" for i in range(n_states)]
    has_rule = rng.random((n_states, len(symbols))) < p_transition
    targets = rng.integers(0, n_states, size=(n_states, len(symbols)))
    accepting = rng.random(n_states) < p_accept

    transitions = [
        Transition(states[i], symbol, states[int(targets[i, j])])
        for i in range(n_states)
        for j, symbol in enumerate(symbols)
        if has_rule[i, j]
    ]
    return Automaton(
        name=f"random automaton ({n_states} states, {len(symbols)} symbols)",
        start_state=states[0],
        accept_states=frozenset(s for s, acc in zip(states, accepting) if acc),
        transitions=transitions,
    )


def relabel_states(automaton: Automaton, mapping: Mapping[str, str]) -> Automaton:
    """Isomorphic copy with states renamed through `mapping` (identity where unmapped)."""
    known = automaton.all_states() | {automaton.start_state} | set(automaton.accept_states)
    if len({mapping.get(s, s) for s in known}) != len(known):
        raise ValueError("mapping must not merge states")
    return Automaton(
        name=automaton.name,
        start_state=mapping.get(automaton.start_state, automaton.start_state),
        accept_states=frozenset(mapping.get(s, s) for s in automaton.accept_states),
        transitions=automaton.transitions.rename(mapping),
    )


def permute_state_names(automaton: Automaton, seed: Seed = None) -> tuple[Automaton, dict[str, str]]:
    """Shuffle the existing state names among the states. Returns the copy and the mapping used."""
    states = sorted(automaton.all_states() | {automaton.start_state} | set(automaton.accept_states))
    shuffled = [states[i] for i in automaton_rng(seed).permutation(len(states))]
    mapping = dict(zip(states, shuffled))
    return relabel_states(automaton, mapping), mapping


def random_automata(
    sizes: Sequence[int],
    alphabet: Iterable[str],
    seed: Union[int, SeedSequence],
    p_transition: float = 1.0,
    p_accept: float = 0.3,
) -> Iterator[Automaton]:
    """
    One random automaton per entry of `sizes`, each drawn from its own child stream of `seed`.

    Changing one size leaves the other automata of the sweep unchanged.
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer, SeedSequence)):
        raise TypeError(f"seed must be int or SeedSequence, got {type(seed)}")
    parent = seed if isinstance(seed, SeedSequence) else SeedSequence(int(seed))
    alphabet = sorted(set(alphabet))
    for n_states, child in zip(sizes, parent.spawn(len(sizes))):
        yield random_automaton(n_states, alphabet, child, p_transition=p_transition, p_accept=p_accept)
