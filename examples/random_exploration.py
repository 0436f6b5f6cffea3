"""Random Exploration -- reproducible random runs for debugging.

The random generator is passed explicitly, so the same seed always
produces the same run.
"""

import random
from itertools import islice

from transys import compile_program_graph
from transys.models import soda_machine
from transys.verification import random_path, random_run

ts = compile_program_graph(soda_machine())

print("=== Random run (seed 7, 8 steps) ===")
for step in islice(random_run(ts, random.Random(7)), 9):
    location, state = step.state
    action = step.action or "start"
    print(f"  {action:<9} -> {location.value:<7} {dict(state)}")

print("\n=== Same seed, same path ===")
a = random_path(ts, random.Random(7), max_steps=8)
b = random_path(ts, random.Random(7), max_steps=8)
print(f"  Identical: {a == b}")

print("\nDone.")
