"""pydfa: deterministic finite automata with simulation, pruning and minimization."""

from pydfa.core.automaton import Automaton
from pydfa.core.transitions import TransitionTable
from pydfa.core.types import MinimizeSpec, Transition

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "MinimizeSpec",
    "Transition",
    "TransitionTable",
    "__version__",
]
