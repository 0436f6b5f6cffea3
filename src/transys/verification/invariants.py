"""Invariant checking over reachable states.

An invariant is a proposition that should hold in the label of every
state reachable from the initial states. The checker walks the
depth-first search and reports the FIRST violating state in DFS order
together with the path the search used to reach it.

The reported path is a witness, not a shortest one: its length depends
on exploration order. Switching to breadth-first search would change
which counterexample is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from transys.core.paths import Path
from transys.core.propositions import Label, Proposition, atoms
from transys.core.system import TransitionSystem

from .search import reachable

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counterexample(Generic[S, A]):
    """A reachable state violating an invariant, with its witness path.

    Unpacks as a ``(state, path)`` pair.

    Attributes:
        state: The violating state.
        path: A path from some initial state to ``state``.
    """

    state: S
    path: Path[S, A]

    def __iter__(self) -> Iterator[Any]:
        yield self.state
        yield self.path


def _describe_atoms(proposition: Callable[[Label], bool]) -> str:
    """Log suffix naming the atoms a formula mentions; empty for plain callables."""
    if not isinstance(proposition, Proposition):
        return ""
    try:
        names = sorted(repr(a) for a in atoms(proposition))
    except TypeError:
        # User-defined node types have no atom structure to report
        return ""
    return f"; atoms: {', '.join(names)}" if names else ""


def check_invariant(
    proposition: Callable[[Label], bool],
    system: TransitionSystem[S, A, Any],
) -> Counterexample[S, A] | None:
    """Check that ``proposition`` holds in every reachable state.

    Args:
        proposition: Predicate over label-sets (usually a Proposition).
        system: The transition system to explore.

    Returns:
        The first counterexample in DFS order, or None if the invariant
        holds everywhere (including when nothing is reachable).

    Example:
        >>> ts = traffic_light()
        >>> check_invariant(neg(atom(Color.YELLOW)), ts).state
        <Color.YELLOW: 'yellow'>
    """
    checked = 0
    for state, path in reachable(system):
        checked += 1
        if not proposition(system.label(state)):
            logger.info(
                f"Invariant {proposition!r} violated in state {state!r} "
                f"after {path.length} steps ({checked} states checked)"
                f"{_describe_atoms(proposition)}"
            )
            return Counterexample(state, path)

    logger.debug(f"Invariant {proposition!r} holds in all {checked} reachable states")
    return None


def holds_invariantly(
    proposition: Callable[[Label], bool],
    system: TransitionSystem[S, A, Any],
) -> bool:
    """Return True if ``proposition`` holds in every reachable state."""
    return check_invariant(proposition, system) is None


def check_invariants(
    propositions: Mapping[str, Callable[[Label], bool]],
    system: TransitionSystem[S, A, Any],
) -> dict[str, Counterexample[S, A] | None]:
    """Check several named invariants against the same system.

    Each invariant gets its own search, so every result is the first
    violation in DFS order for that invariant alone.

    Args:
        propositions: Map of invariant name to proposition.
        system: The transition system to explore.

    Returns:
        Map of invariant name to its counterexample (None if it holds).
    """
    results = {name: check_invariant(prop, system) for name, prop in propositions.items()}
    violated = [name for name, cex in results.items() if cex is not None]
    if violated:
        logger.info(f"{len(violated)}/{len(results)} invariants violated: {violated}")
    return results


__all__ = [
    "Counterexample",
    "check_invariant",
    "holds_invariantly",
    "check_invariants",
]
