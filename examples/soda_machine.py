"""Soda Machine -- checking an imperative program via its program graph.

Demonstrates compiling a program graph into a transition system and
stating invariants over locations and program-state conditions.
"""

from transys import at, check_invariant, compile_program_graph, holds, implies
from transys.models import Location, soda_machine, total_is
from transys.verification import build_reachability_graph

# =============================================================
# Compile the program graph
# =============================================================
print("=== Soda Machine (2 sodas, 2 beers) ===")

ts = compile_program_graph(soda_machine(max_sodas=2, max_beers=2))
graph = build_reachability_graph(ts)
print(f"States: {graph.num_states}")
print(f"Transitions: {graph.num_transitions}")

# =============================================================
# Naive invariant: coins + sodas + beers == 4 everywhere
# =============================================================
print("\n=== Items always total 4 ===")
cex = check_invariant(holds(total_is(4)), ts)
print(f"  Holds: {cex is None}")
if cex is not None:
    location, state = cex.state
    print(f"  Violated at {location.value} with {dict(state)}")
    for step in cex.path.steps:
        print(f"    --{step.action}--> {step.state[0].value} {dict(step.state[1])}")

# =============================================================
# Refined invariant: only claimed while waiting in START
# =============================================================
print("\n=== In START, items total 4 ===")
cex = check_invariant(implies(at(Location.START), holds(total_is(4))), ts)
print(f"  Holds: {cex is None}")

print("\nDone.")
