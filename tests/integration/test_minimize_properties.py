"""
Property checks for simulation, pruning and minimization over seeded random automata.
"""

from __future__ import annotations

import pytest

from pydfa.core.types import MinimizeSpec
from pydfa.measures.equivalence import enumerate_words, languages_equal
from pydfa.tasks.random_dfa import automaton_rng, permute_state_names, random_automata, random_automaton

SEEDS = [0, 1, 2, 3, 4, 5, 6, 7]


def _automata(seed: int):
    yield from random_automata([3, 5, 7], "ab", seed, p_transition=1.0, p_accept=0.4)
    yield from random_automata([4, 6, 8], "ab", seed + 500, p_transition=0.7, p_accept=0.4)


@pytest.mark.parametrize("seed", SEEDS)
def test_check_and_test_agree(seed: int) -> None:
    for dfa in _automata(seed):
        for word in enumerate_words("abc", 4):
            assert dfa.check(word)[0] == dfa.test(word)


@pytest.mark.parametrize("seed", SEEDS)
def test_pruning_is_idempotent(seed: int) -> None:
    for dfa in _automata(seed):
        dfa.prune()
        once = dfa.copy()
        dfa.prune()
        assert dfa.transitions == once.transitions


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("method", ["pairwise", "hopcroft"])
def test_minimize_preserves_language(seed: int, method: str) -> None:
    for dfa in _automata(seed):
        original = dfa.copy()
        dfa.minimize(MinimizeSpec(method=method))

        assert languages_equal(original, dfa)
        for word in enumerate_words("ab", 5):
            assert dfa.test(word) == original.test(word)


@pytest.mark.parametrize("seed", SEEDS)
def test_minimize_never_grows_and_is_a_fixed_point(seed: int) -> None:
    for dfa in _automata(seed):
        pruned = dfa.copy()
        pruned.prune()

        dfa.minimize()
        assert len(dfa.all_states()) <= len(pruned.all_states())

        minimized = dfa.copy()
        assert dfa.minimize() == {}
        assert dfa.transitions == minimized.transitions


@pytest.mark.parametrize("seed", SEEDS)
def test_methods_agree(seed: int) -> None:
    for dfa in _automata(seed):
        other = dfa.copy()
        names_pairwise = dfa.minimize(MinimizeSpec(method="pairwise"))
        names_hopcroft = other.minimize(MinimizeSpec(method="hopcroft"))

        assert names_pairwise == names_hopcroft
        assert dfa.transitions == other.transitions
        assert dfa.start_state == other.start_state


@pytest.mark.parametrize("seed", SEEDS)
def test_canonical_names_are_reproducible(seed: int) -> None:
    for dfa in _automata(seed):
        first = dfa.copy()
        second = dfa.copy()
        assert first.minimize() == second.minimize()
        assert first.transitions == second.transitions


@pytest.mark.parametrize("seed", SEEDS)
def test_isomorphic_copies_minimize_to_same_size(seed: int) -> None:
    rng = automaton_rng(seed + 1000)
    for dfa in _automata(seed):
        permuted, mapping = permute_state_names(dfa, rng)
        names = permuted.minimize()
        dfa.minimize()

        assert len(permuted.all_states()) == len(dfa.all_states())
        assert languages_equal(dfa, permuted)
        for old, new in names.items():
            members = {s for s, rep in names.items() if rep == new}
            assert new == min(members)
            assert old in members


@pytest.mark.slow
@pytest.mark.parametrize("seed", range(20))
def test_larger_automata_minimize_consistently(seed: int) -> None:
    dfa = random_automaton(40, "abc", seed, p_transition=0.9, p_accept=0.3)
    original = dfa.copy()
    other = dfa.copy()

    dfa.minimize()
    other.minimize(MinimizeSpec(method="hopcroft"))

    assert dfa.transitions == other.transitions
    assert languages_equal(original, dfa)
