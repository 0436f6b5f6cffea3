"""Core data model for transition-system verification.

This module provides:
- Predicate and proposition algebra over values and label-sets
- Paths (witness traces) through a transition system
- The TransitionSystem abstraction
"""

from __future__ import annotations

from .paths import Path, Step
from .propositions import (
    And,
    Atomic,
    Falsity,
    Implies,
    Label,
    Not,
    Or,
    Predicate,
    Proposition,
    Truth,
    always_false,
    always_true,
    atom,
    atoms,
    conj,
    disj,
    implies,
    neg,
)
from .system import TransitionSystem

__all__ = [
    # Propositions
    "Label",
    "Predicate",
    "Proposition",
    "Truth",
    "Falsity",
    "Atomic",
    "Not",
    "And",
    "Or",
    "Implies",
    "atoms",
    "always_true",
    "always_false",
    "atom",
    "conj",
    "disj",
    "neg",
    "implies",
    # Paths
    "Step",
    "Path",
    # Systems
    "TransitionSystem",
]
