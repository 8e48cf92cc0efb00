"""
Pytest configuration and fixtures for pydfa tests.

Provides deterministic RNG and the reference automata used across the suite.
"""

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Generator seeded with 12345 for drawing random automata.

    Shared by a test so several automata come from one stream.
    """
    from pydfa.tasks.random_dfa import automaton_rng
    return automaton_rng(12345)


@pytest.fixture
def trailing_ones_dfa():
    """Three-rule automaton accepting 0*1+."""
    from pydfa.tasks.catalog import make_trailing_ones_dfa
    return make_trailing_ones_dfa()


@pytest.fixture
def ab_dfa():
    """
    Nine-state a/b automaton with one unreachable state.

    Prunes to eight states and minimizes to five.
    """
    from pydfa.tasks.catalog import make_ab_dfa
    return make_ab_dfa()
