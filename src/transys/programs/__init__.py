"""Program graphs and their compilation into transition systems.

This module provides:
- ProgramState: immutable variable assignments
- ProgramGraph: locations with guarded, effectful transitions
- compile_program_graph: lowering to a TransitionSystem whose labels
  answer location and state-condition propositions
"""

from __future__ import annotations

from .compiler import (
    AtLocation,
    CompiledState,
    Holds,
    ProgramLabel,
    ProgramProposition,
    at,
    compile_program_graph,
    holds,
)
from .graph import (
    Effect,
    Guard,
    GuardedTransition,
    ProgramGraph,
    UndefinedEffectError,
    always,
    assign,
    identity,
)
from .state import MissingVariableError, ProgramState

__all__ = [
    # State
    "ProgramState",
    "MissingVariableError",
    # Graph
    "Guard",
    "Effect",
    "GuardedTransition",
    "ProgramGraph",
    "UndefinedEffectError",
    "always",
    "assign",
    "identity",
    # Compiler
    "AtLocation",
    "Holds",
    "ProgramProposition",
    "CompiledState",
    "ProgramLabel",
    "at",
    "holds",
    "compile_program_graph",
]
