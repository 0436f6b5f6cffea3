"""Transition systems.

A transition system is a tuple (I, L, →) where:
- I: initial states (their order sets exploration priority only)
- L: labeling function, state -> set of atomic propositions
- →: transition function, state -> sequence of (action, state)

Both functions are stored as plain callables and must be pure: calling
them twice on the same state must give equal results. The reachability
search relies on this for correctness and termination.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .propositions import Label

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")
P = TypeVar("P", bound=Hashable)


@dataclass(frozen=True)
class TransitionSystem(Generic[S, A, P]):
    """A discrete-state, discrete-transition system.

    Attributes:
        initial_states: States exploration starts from.
        label: Pure function giving the atomic propositions true in a state.
        transitions: Pure function giving the outgoing ``(action, state)``
            pairs of a state. An empty sequence marks a terminal state.
    """

    initial_states: tuple[S, ...]
    label: Callable[[S], Label]
    transitions: Callable[[S], Sequence[tuple[A, S]]]

    def __post_init__(self) -> None:
        # Accept any iterable; store a tuple so the system stays immutable
        object.__setattr__(self, "initial_states", tuple(self.initial_states))

    def successors(self, state: S) -> Sequence[tuple[A, S]]:
        """Outgoing ``(action, state)`` pairs of ``state``."""
        return self.transitions(state)

    def label_of(self, state: S) -> Label:
        """Atomic propositions true in ``state``."""
        return self.label(state)

    @classmethod
    def from_table(
        cls,
        initial_states: Iterable[S],
        labels: Mapping[S, Iterable[P]],
        edges: Mapping[S, Sequence[tuple[A, S]]],
    ) -> TransitionSystem[S, A, P]:
        """Build a finite system from explicit tables.

        Args:
            initial_states: The initial states.
            labels: Map of state to the propositions true in it. States
                missing from the map have the empty label.
            edges: Map of state to its outgoing ``(action, target)``
                pairs. States missing from the map are terminal.

        Returns:
            A TransitionSystem backed by frozen copies of the tables.

        Example:
            >>> ts = TransitionSystem.from_table(
            ...     ["idle"],
            ...     {"idle": {"ready"}, "busy": {"working"}},
            ...     {"idle": [("start", "busy")], "busy": [("stop", "idle")]},
            ... )
        """
        label_table = {state: frozenset(props) for state, props in labels.items()}
        edge_table = {state: tuple(succs) for state, succs in edges.items()}
        empty: frozenset[P] = frozenset()

        def label(state: S) -> frozenset[P]:
            return label_table.get(state, empty)

        def transitions(state: S) -> tuple[tuple[A, S], ...]:
            return edge_table.get(state, ())

        return cls(tuple(initial_states), label, transitions)


__all__ = [
    "TransitionSystem",
]
