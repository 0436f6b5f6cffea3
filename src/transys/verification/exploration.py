"""Random runs for interactive exploration and debugging.

A random run starts in an initial state and repeatedly follows one
outgoing transition chosen uniformly at random. The random generator is
always passed in explicitly, so runs are reproducible from a seed:

    >>> rng = random.Random(42)
    >>> path = random_path(traffic_light(), rng, max_steps=5)

Runs carry no correctness obligations beyond following declared
transitions.
"""

from __future__ import annotations

import random
from collections.abc import Hashable, Iterator
from itertools import islice
from typing import Any, TypeVar

from transys.core.paths import Path, Step
from transys.core.system import TransitionSystem

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")


def random_run(
    system: TransitionSystem[S, A, Any],
    rng: random.Random,
) -> Iterator[Step[A | None, S]]:
    """Generate a possibly unbounded random run.

    Args:
        system: The transition system to walk.
        rng: Random generator used for every choice.

    Yields:
        ``Step(None, initial)`` first, then one Step per transition taken.
        The run stops only when it reaches a terminal state.

    Raises:
        ValueError: If the system has no initial states.
    """
    if not system.initial_states:
        raise ValueError("Cannot start a run: system has no initial states")

    state = rng.choice(system.initial_states)
    yield Step(None, state)

    while True:
        successors = list(system.transitions(state))
        if not successors:
            return
        action, state = rng.choice(successors)
        yield Step(action, state)


def random_path(
    system: TransitionSystem[S, A, Any],
    rng: random.Random,
    max_steps: int = 100,
) -> Path[S, A]:
    """Materialize a random run of at most ``max_steps`` transitions.

    Args:
        system: The transition system to walk.
        rng: Random generator used for every choice.
        max_steps: Maximum number of transitions to take.

    Returns:
        The run as a Path starting at an initial state.

    Raises:
        ValueError: If ``max_steps`` is negative or the system has no
            initial states.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")

    run = random_run(system, rng)
    head = next(run).state
    return Path.from_steps(head, ((step.action, step.state) for step in islice(run, max_steps)))


__all__ = [
    "random_run",
    "random_path",
]
