"""
Language comparison between automata.

Used to confirm that minimization preserves the accepted language:
- enumerate_words / accepted_words: exhaustive comparison up to a length
- find_distinguishing_word / languages_equal: exact comparison by
  breadth-first search over the product of two automata
"""

from __future__ import annotations

from collections import deque
from itertools import product
from typing import Iterable, Iterator, Optional

from pydfa.core.automaton import Automaton

# Product-state marker for "no rule was found"; the run has rejected for good.
_REJECTED = None


def enumerate_words(alphabet: Iterable[str], max_length: int) -> Iterator[str]:
    """All words over `alphabet` up to `max_length`, shortest first, then lexicographic."""
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    symbols = sorted(set(alphabet))
    for length in range(max_length + 1):
        for letters in product(symbols, repeat=length):
            yield "".join(letters)


def accepted_words(automaton: Automaton, alphabet: Iterable[str], max_length: int) -> list[str]:
    return [word for word in enumerate_words(alphabet, max_length) if automaton.test(word)]


def _step(automaton: Automaton, state: Optional[str], symbol: str) -> Optional[str]:
    if state is _REJECTED:
        return _REJECTED
    return automaton.transitions.next_state(state, symbol)


def _accepts(automaton: Automaton, state: Optional[str]) -> bool:
    return state is not _REJECTED and state in automaton.accept_states


def find_distinguishing_word(a: Automaton, b: Automaton) -> Optional[str]:
    """
    A shortest word accepted by exactly one of `a` and `b`, or None if they agree on every word.

    Ties between words of equal length go to the lexicographically smallest.
    """
    alphabet = sorted(a.all_symbols() | b.all_symbols())
    start = (a.start_state, b.start_state)
    seen = {start}
    to_visit = deque([(start, "")])
    while to_visit:
        (state_a, state_b), word = to_visit.popleft()
        if _accepts(a, state_a) != _accepts(b, state_b):
            return word
        for symbol in alphabet:
            pair = (_step(a, state_a, symbol), _step(b, state_b, symbol))
            if pair in seen:
                continue
            seen.add(pair)
            to_visit.append((pair, word + symbol))
    return None


def languages_equal(a: Automaton, b: Automaton) -> bool:
    return find_distinguishing_word(a, b) is None
