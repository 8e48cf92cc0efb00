from __future__ import annotations

from pydfa.core.automaton import Automaton


def make_trailing_ones_dfa() -> Automaton:
    """Accepts words over {0, 1} whose 1s all come at the end, with at least one 1."""
    return Automaton(
        name="all '1' characters at the end, at least one '1'",
        start_state="q0",
        accept_states=frozenset({"q1"}),
        transitions=[
            ("q0", "0", "q0"),
            ("q0", "1", "q1"),
            ("q1", "1", "q1"),
        ],
    )


def make_ab_dfa() -> Automaton:
    """Nine states over {a, b}, one of them unreachable; minimizes to five."""
    return Automaton(
        name="reducible a/b automaton",
        start_state="q1",
        accept_states=frozenset({"q8"}),
        transitions=[
            ("q1", "a", "q2"),
            ("q1", "b", "q3"),
            ("q2", "a", "q6"),
            ("q2", "b", "q4"),
            ("q3", "a", "q5"),
            ("q3", "b", "q6"),
            ("q4", "a", "q2"),
            ("q4", "b", "q6"),
            ("q5", "a", "q6"),
            ("q5", "b", "q3"),
            ("q6", "a", "q8"),
            ("q6", "b", "q7"),
            ("q7", "a", "q8"),
            ("q7", "b", "q7"),
            ("q8", "a", "q8"),
            ("q8", "b", "q8"),
            ("inaccessible state", "a", "q8"),
        ],
    )


def make_div3_dfa() -> Automaton:
    """Accepts binary numerals divisible by three."""
    return Automaton(
        name="binary multiples of three",
        start_state="q0",
        accept_states=frozenset({"q0"}),
        transitions=[
            ("q0", "0", "q0"),
            ("q0", "1", "q1"),
            ("q1", "0", "q2"),
            ("q1", "1", "q0"),
            ("q2", "0", "q1"),
            ("q2", "1", "q2"),
        ],
    )


def make_dead_state_dfa() -> Automaton:
    """
    Accepts exactly "ab"; every other word falls into the non-accepting `dead` state.

    `dead` loops on every symbol, so it is complete but never accepts.
    """
    return Automaton(
        name="exactly 'ab' with explicit dead state",
        start_state="s",
        accept_states=frozenset({"t"}),
        transitions=[
            ("s", "a", "m"),
            ("s", "b", "dead"),
            ("m", "a", "dead"),
            ("m", "b", "t"),
            ("t", "a", "dead"),
            ("t", "b", "dead"),
            ("dead", "a", "dead"),
            ("dead", "b", "dead"),
        ],
    )
