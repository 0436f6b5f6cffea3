"""Bounded materialization of the reachable state graph.

The core search assumes the reachable state space is finite. Callers
that cannot guarantee this, or that want the explicit graph for further
analysis, can build a ReachabilityGraph with an upper bound on the
number of states. When the bound is hit the graph is marked truncated
instead of exploring forever.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from transys.core.system import TransitionSystem

from .search import reachable

S = TypeVar("S", bound=Hashable)
A = TypeVar("A")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[S, A]):
    """A transition in the reachable graph: source ─action→ target."""

    source: S
    action: A
    target: S

    def __repr__(self) -> str:
        return f"{self.source!r} --{self.action}--> {self.target!r}"


@dataclass
class ReachabilityGraph(Generic[S, A]):
    """Explicit graph of the explored part of a transition system.

    Attributes:
        initial_states: The system's initial states
        states: Explored states in DFS discovery order
        edges: Transitions leaving explored states
        truncated: Whether exploration stopped at the state bound
    """

    initial_states: tuple[S, ...] = ()
    states: list[S] = field(default_factory=list)
    edges: list[Edge[S, A]] = field(default_factory=list)
    truncated: bool = False

    def successors(self, state: S) -> Iterator[tuple[A, S]]:
        """Yield (action, target) pairs for edges leaving ``state``."""
        for edge in self.edges:
            if edge.source == state:
                yield edge.action, edge.target

    def predecessors(self, state: S) -> Iterator[tuple[A, S]]:
        """Yield (action, source) pairs for edges entering ``state``."""
        for edge in self.edges:
            if edge.target == state:
                yield edge.action, edge.source

    @property
    def num_states(self) -> int:
        return len(self.states)

    @property
    def num_transitions(self) -> int:
        return len(self.edges)

    def terminal_states(self) -> list[S]:
        """Explored states with no outgoing transitions."""
        sources = {edge.source for edge in self.edges}
        return [state for state in self.states if state not in sources]


class ReachabilityGraphBuilder:
    """Builds a ReachabilityGraph from a transition system.

    Exploration follows the depth-first search order, so ``states``
    lists states in the same order the invariant checker visits them.
    """

    def __init__(self, max_states: int = 10000):
        """Initialize the builder.

        Args:
            max_states: Maximum number of states to explore

        Raises:
            ValueError: If max_states is not positive.
        """
        if max_states <= 0:
            raise ValueError(f"max_states must be positive, got {max_states}")
        self.max_states = max_states

    def build(self, system: TransitionSystem[S, A, Any]) -> ReachabilityGraph[S, A]:
        """Explore ``system`` and return its reachable graph.

        Args:
            system: The transition system to explore

        Returns:
            The explored graph, with ``truncated`` set if the bound was hit
        """
        graph: ReachabilityGraph[S, A] = ReachabilityGraph(initial_states=system.initial_states)

        for state, _ in reachable(system):
            if graph.num_states >= self.max_states:
                graph.truncated = True
                logger.warning(
                    f"Reachability graph truncated at {self.max_states} states"
                )
                break
            graph.states.append(state)
            for action, target in system.transitions(state):
                graph.edges.append(Edge(state, action, target))

        return graph


def build_reachability_graph(
    system: TransitionSystem[S, A, Any],
    max_states: int = 10000,
) -> ReachabilityGraph[S, A]:
    """Convenience wrapper around ReachabilityGraphBuilder."""
    return ReachabilityGraphBuilder(max_states=max_states).build(system)


__all__ = [
    "Edge",
    "ReachabilityGraph",
    "ReachabilityGraphBuilder",
    "build_reachability_graph",
]
