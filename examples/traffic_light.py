"""Traffic Light -- invariant checking over a plain transition system.

Demonstrates building a proposition from the algebra, checking it over
every reachable state, and reading the witness path of a violation.
"""

from transys import atom, check_invariant, conj, neg, reachable
from transys.models import Color, traffic_light

# =============================================================
# Explore the state space
# =============================================================
print("=== Traffic Light ===")

ts = traffic_light()
for state, path in reachable(ts):
    print(f"  {state.value:<7} reached via: {path}")

# =============================================================
# Invariants
# =============================================================
print("\n=== Never red and green at once ===")
# ¬(red ∧ green) -- every label holds exactly one color
cex = check_invariant(neg(conj(atom(Color.RED), atom(Color.GREEN))), ts)
print(f"  Holds: {cex is None}")

print("\n=== Never yellow ===")
# ¬yellow -- fails, the light turns yellow after two switches
cex = check_invariant(neg(atom(Color.YELLOW)), ts)
print(f"  Holds: {cex is None}")
if cex is not None:
    print(f"  Violating state: {cex.state.value}")
    print(f"  Witness: {' -> '.join(c.value for c in cex.path.states())}")

print("\nDone.")
