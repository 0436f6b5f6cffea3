"""Explicit-state depth-first reachability search.

The search maintains a visited set and an explicit stack of pending
``(state, path)`` records, seeded with a single-state path per initial
state. Each popped record whose state is new is emitted, marked visited
and expanded; records for already visited states are discarded, so
every reachable state is expanded exactly once.

Ordering: successors are pushed so that the first-listed transition is
popped next, and the first-listed initial state is explored first. This
fixes which path is reported for each state and, in turn, which
counterexample the invariant checker returns.

Termination is guaranteed iff the reachable state set is finite.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import TypeVar

from transys.core.paths import Path
from transys.core.system import TransitionSystem

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")

logger = logging.getLogger(__name__)


def depth_first_search(
    initial_states: Iterable[S],
    transitions: Callable[[S], Sequence[tuple[A, S]]],
) -> Iterator[tuple[S, Path[S, A]]]:
    """Lazily enumerate reachable states with a witness path for each.

    Each call starts a fresh traversal; the visited set and stack are
    local to the returned generator.

    Args:
        initial_states: States to start from, in priority order.
        transitions: Pure successor function.

    Yields:
        ``(state, path)`` pairs in DFS order, where ``path`` leads from
        some initial state to ``state``.
    """
    visited: set[S] = set()
    # Top of stack is the end of the list
    stack: list[tuple[S, Path[S, A]]] = [
        (state, Path.single(state)) for state in reversed(list(initial_states))
    ]

    while stack:
        state, path = stack.pop()
        if state in visited:
            continue
        visited.add(state)
        yield state, path

        for action, target in reversed(list(transitions(state))):
            stack.append((target, path.extend(action, target)))

    logger.debug(f"Search exhausted after expanding {len(visited)} states")


def reachable(system: TransitionSystem[S, A, object]) -> Iterator[tuple[S, Path[S, A]]]:
    """Run a fresh depth-first search over ``system``.

    Args:
        system: The transition system to explore.

    Returns:
        Generator of ``(state, path)`` pairs, see ``depth_first_search``.
    """
    return depth_first_search(system.initial_states, system.transitions)


def reachable_states(system: TransitionSystem[S, A, object]) -> set[S]:
    """Return the set of states reachable from the initial states."""
    return {state for state, _ in reachable(system)}


__all__ = [
    "depth_first_search",
    "reachable",
    "reachable_states",
]
