"""
Core types for pydfa: Transition, MinimizeSpec.

Pure data containers with validation. No behavior logic.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Transition:
    """
    One rule of a transition relation: reading `symbol` in `state` moves to `next_state`.

    Ordered lexicographically by (state, symbol, next_state).
    """

    state: str
    symbol: str
    next_state: str

    def __post_init__(self):
        """Validate Transition constraints."""
        if not isinstance(self.state, str):
            raise TypeError(f"state must be a str, got {type(self.state).__name__}")
        if not isinstance(self.next_state, str):
            raise TypeError(f"next_state must be a str, got {type(self.next_state).__name__}")
        if not isinstance(self.symbol, str):
            raise TypeError(f"symbol must be a str, got {type(self.symbol).__name__}")
        if len(self.symbol) != 1:
            raise ValueError(f"symbol must be a single character, got {self.symbol!r}")

    @property
    def key(self) -> tuple:
        return (self.state, self.symbol)


@dataclass
class MinimizeSpec:
    """Specification for a minimization run."""

    method: str = "pairwise"
    prune_unreachable: bool = True
    include_representatives: bool = True

    def __post_init__(self):
        """Validate MinimizeSpec constraints."""
        valid_methods = {"pairwise", "hopcroft"}
        if self.method not in valid_methods:
            raise ValueError(f"method must be in {valid_methods}")
