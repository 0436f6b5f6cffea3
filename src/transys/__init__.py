"""
transys -- explicit-state invariant checking for transition systems
and program graphs.

Transition Systems | Program Graphs | DFS Reachability | Invariant Checking

No runtime dependencies. Pure Python.
"""

from transys._version import __version__
from transys.core import (
    Path,
    Predicate,
    Proposition,
    Step,
    TransitionSystem,
    always_false,
    always_true,
    atom,
    conj,
    disj,
    implies,
    neg,
)
from transys.programs import (
    MissingVariableError,
    ProgramGraph,
    ProgramState,
    at,
    compile_program_graph,
    holds,
)
from transys.verification import (
    Counterexample,
    check_invariant,
    depth_first_search,
    reachable,
    reachable_states,
)

# NOTE: Full subpackage APIs are accessible via direct imports:
#   from transys.core import And, Or, Not, Implies, Atomic, ...
#   from transys.programs import assign, GuardedTransition, ...
#   from transys.verification import build_reachability_graph, random_run, ...
#   from transys.models import traffic_light, soda_machine
#   from transys.serialization import counterexample_to_json, ...

__all__ = [
    "__version__",
    # Propositions
    "Predicate",
    "Proposition",
    "always_true",
    "always_false",
    "atom",
    "conj",
    "disj",
    "neg",
    "implies",
    # Transition systems
    "Step",
    "Path",
    "TransitionSystem",
    # Search & checking
    "depth_first_search",
    "reachable",
    "reachable_states",
    "Counterexample",
    "check_invariant",
    # Program graphs
    "ProgramState",
    "MissingVariableError",
    "ProgramGraph",
    "compile_program_graph",
    "at",
    "holds",
]
