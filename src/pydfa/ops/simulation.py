from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from pydfa.core.automaton import Automaton


def check(automaton: Automaton, symbols: Iterable[str]) -> tuple[bool, list[str]]:
    """
    Run `automaton` over `symbols` and report the verdict with the visited states.

    The trace starts with the start state and gains one state per consumed
    symbol. A symbol without a rule from the current state rejects at once; that
    symbol adds nothing to the trace.
    """
    transitions = automaton.transitions
    trace = [automaton.start_state]
    for symbol in symbols:
        next_state = transitions.next_state(trace[-1], symbol)
        if next_state is None:
            return False, trace
        trace.append(next_state)
    return trace[-1] in automaton.accept_states, trace


def test(automaton: Automaton, symbols: Iterable[str]) -> bool:
    """Verdict of `check` without recording the trace."""
    transitions = automaton.transitions
    state = automaton.start_state
    for symbol in symbols:
        state = transitions.next_state(state, symbol)
        if state is None:
            return False
    return state in automaton.accept_states


test.__test__ = False
