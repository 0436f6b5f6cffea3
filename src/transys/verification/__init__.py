"""Verification tools for transition systems.

This module provides:
- Depth-first reachability search with witness paths
- Invariant checking with first-in-DFS-order counterexamples
- Bounded materialization of the reachable graph
- Random runs driven by an explicit random generator
"""

from __future__ import annotations

from transys.verification.exploration import random_path, random_run
from transys.verification.graph import (
    Edge,
    ReachabilityGraph,
    ReachabilityGraphBuilder,
    build_reachability_graph,
)
from transys.verification.invariants import (
    Counterexample,
    check_invariant,
    check_invariants,
    holds_invariantly,
)
from transys.verification.search import (
    depth_first_search,
    reachable,
    reachable_states,
)

__all__ = [
    # --- Search ---
    "depth_first_search",
    "reachable",
    "reachable_states",
    # --- Invariants ---
    "Counterexample",
    "check_invariant",
    "holds_invariantly",
    "check_invariants",
    # --- Reachability graph ---
    "Edge",
    "ReachabilityGraph",
    "ReachabilityGraphBuilder",
    "build_reachability_graph",
    # --- Random runs ---
    "random_run",
    "random_path",
]
