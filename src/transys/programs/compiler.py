"""Compile program graphs into transition systems.

The compiled system has:
- States: pairs (location, program state)
- Initial states: every initial location paired with the initial state
- Transitions: (ℓ, η) --α--> (ℓ', Effect(α)(η)) for each (g, α, ℓ')
  declared at ℓ with g(η) true; simultaneously enabled guards all
  produce transitions
- Labels: two kinds of atomic proposition, kept in one sum type
    AtLocation(ℓ)  holds iff the current location equals ℓ
    Holds(c)       holds iff condition c is true of the program state

Labels are lazy: a compiled label answers membership queries instead of
listing its elements, since every possible condition is a potential
member. Only the propositions a checked formula references are ever
evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from transys.core.propositions import Atomic
from transys.core.system import TransitionSystem

from .graph import ProgramGraph
from .state import ProgramState

L = TypeVar("L", bound=Hashable)
A = TypeVar("A", bound=Hashable)

logger = logging.getLogger(__name__)


# =============================================================================
# Compiled atomic propositions
# =============================================================================


@dataclass(frozen=True)
class AtLocation(Generic[L]):
    """Atomic proposition: the current location is ``location``."""

    location: L

    def __repr__(self) -> str:
        return f"@{self.location}"


@dataclass(frozen=True, eq=False)
class Holds:
    """Atomic proposition: ``condition`` holds of the program state.

    Conditions are callables, so two Holds are equal only when they wrap
    the same callable object.
    """

    condition: Callable[[ProgramState], bool]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Holds):
            return NotImplemented
        return self.condition is other.condition

    def __hash__(self) -> int:
        return hash(("Holds", id(self.condition)))

    def __repr__(self) -> str:
        name = getattr(self.condition, "__name__", None)
        if name and name != "<lambda>":
            return name
        return repr(self.condition)


ProgramProposition = Union[AtLocation[L], Holds]
"""Atomic propositions of a compiled program graph."""

CompiledState = tuple[L, ProgramState]
"""State of a compiled program graph: (location, program state)."""


@dataclass(frozen=True)
class ProgramLabel(Generic[L]):
    """Lazy label-set of a compiled state.

    Supports ``in`` for AtLocation and Holds propositions only; anything
    else is a type error rather than a silent non-member.
    """

    location: L
    state: ProgramState

    def __contains__(self, prop: object) -> bool:
        if isinstance(prop, AtLocation):
            return bool(prop.location == self.location)
        if isinstance(prop, Holds):
            return bool(prop.condition(self.state))
        raise TypeError(
            f"Compiled labels contain AtLocation or Holds propositions, "
            f"not {type(prop).__name__}"
        )


def at(location: Hashable) -> Atomic:
    """Proposition: the current location is ``location``."""
    return Atomic(AtLocation(location))


def holds(condition: Callable[[ProgramState], bool]) -> Atomic:
    """Proposition: ``condition`` holds of the current program state."""
    return Atomic(Holds(condition))


# =============================================================================
# Compiler
# =============================================================================


def compile_program_graph(
    graph: ProgramGraph[L, A],
) -> TransitionSystem[CompiledState[L], A, ProgramProposition[L]]:
    """Lower a program graph into a transition system.

    Args:
        graph: The program graph to compile.

    Returns:
        A TransitionSystem over (location, program state) pairs.

    Example:
        >>> ts = compile_program_graph(soda_machine())
        >>> check_invariant(implies(at(Location.START), holds(stock_is_full)), ts)
    """
    initial_states = tuple(
        (location, graph.initial_state) for location in graph.initial_locations
    )

    def label(compiled: CompiledState[L]) -> ProgramLabel[L]:
        location, state = compiled
        return ProgramLabel(location, state)

    def transitions(compiled: CompiledState[L]) -> list[tuple[A, CompiledState[L]]]:
        location, state = compiled
        return [
            (t.action, (t.target, graph.effect(t.action)(state)))
            for t in graph.enabled(location, state)
        ]

    logger.debug(f"Compiled program graph with {len(initial_states)} initial states")
    return TransitionSystem(initial_states, label, transitions)


__all__ = [
    "AtLocation",
    "Holds",
    "ProgramProposition",
    "CompiledState",
    "ProgramLabel",
    "at",
    "holds",
    "compile_program_graph",
]
