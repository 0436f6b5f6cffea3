"""Program graphs: guarded, effectful transition models.

A program graph is a tuple (Loc₀, η₀, →, Effect) where:
- Loc₀: initial locations
- η₀: initial program state (variable assignment)
- →: for each location, guarded transitions (guard, action, target)
- Effect: for each action, a pure function on program states

A transition (g, α, ℓ') declared at ℓ is enabled in program state η iff
g(η) holds; taking it moves to ℓ' with program state Effect(α)(η).
Guards and effects always see the pre-transition state.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .state import ProgramState

L = TypeVar("L", bound=Hashable)
A = TypeVar("A", bound=Hashable)

Guard = Callable[[ProgramState], bool]
Effect = Callable[[ProgramState], ProgramState]


class UndefinedEffectError(KeyError):
    """An action was taken that has no effect defined.

    Attributes:
        action: The action without an effect
    """

    def __init__(self, action: Hashable):
        self.action = action
        super().__init__(action)

    def __str__(self) -> str:
        return f"No effect defined for action {self.action!r}"


@dataclass(frozen=True)
class GuardedTransition(Generic[A, L]):
    """A transition enabled when ``guard`` holds: ─[guard] action→ target.

    Guards are compared by identity, like any other callable.
    """

    guard: Guard
    action: A
    target: L

    def __repr__(self) -> str:
        return f"-[{_guard_name(self.guard)}] {self.action}--> {self.target!r}"


def _guard_name(guard: Guard) -> str:
    name = getattr(guard, "__name__", None)
    return name if name and name != "<lambda>" else repr(guard)


@dataclass(frozen=True)
class ProgramGraph(Generic[L, A]):
    """A guarded, effectful transition model over an explicit program state.

    Attributes:
        initial_locations: Locations a run may start in.
        initial_state: Program state every run starts with.
        transitions: Map from a location to its guarded transitions.
        effect: Map from an action to its state transformer. Must be
            defined for every action appearing in any transition.
    """

    initial_locations: tuple[L, ...]
    initial_state: ProgramState
    transitions: Callable[[L], Sequence[GuardedTransition[A, L]]]
    effect: Callable[[A], Effect]

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_locations", tuple(self.initial_locations))

    def enabled(self, location: L, state: ProgramState) -> list[GuardedTransition[A, L]]:
        """Transitions at ``location`` whose guard holds in ``state``."""
        return [t for t in self.transitions(location) if t.guard(state)]

    @classmethod
    def from_table(
        cls,
        initial_locations: Iterable[L],
        initial_state: ProgramState,
        table: Mapping[L, Sequence[tuple[Guard, A, L]]],
        effects: Mapping[A, Effect],
    ) -> ProgramGraph[L, A]:
        """Build a program graph from explicit tables.

        Args:
            initial_locations: The initial locations.
            initial_state: The initial program state.
            table: Map of location to ``(guard, action, target)`` triples.
                Locations missing from the table have no transitions.
            effects: Map of action to effect.

        Returns:
            A ProgramGraph backed by frozen copies of the tables.
        """
        transition_table = {
            location: tuple(GuardedTransition(g, a, t) for g, a, t in triples)
            for location, triples in table.items()
        }
        effect_table = dict(effects)

        def transitions(location: L) -> tuple[GuardedTransition[A, L], ...]:
            return transition_table.get(location, ())

        def effect(action: A) -> Effect:
            try:
                return effect_table[action]
            except KeyError:
                raise UndefinedEffectError(action) from None

        return cls(tuple(initial_locations), initial_state, transitions, effect)


# =============================================================================
# Effect helpers
# =============================================================================


def identity(state: ProgramState) -> ProgramState:
    """Effect that leaves the program state unchanged."""
    return state


def assign(**updates: Any) -> Effect:
    """Create an effect assigning new values to variables.

    Each update is either a plain value or a function of the
    pre-transition state. All functions see the same pre-state, so
    assignments happen simultaneously.

    Example:
        >>> insert_coin = assign(coins=lambda s: s["coins"] + 1)
        >>> refill = assign(coins=0, sodas=2, beers=2)
    """

    def effect(state: ProgramState) -> ProgramState:
        values = {
            variable: value(state) if callable(value) else value
            for variable, value in updates.items()
        }
        return state.update(values)

    effect.__name__ = "assign(" + ", ".join(updates) + ")"
    return effect


def always(state: ProgramState) -> bool:
    """Guard that is always enabled."""
    return True


__all__ = [
    "Guard",
    "Effect",
    "UndefinedEffectError",
    "GuardedTransition",
    "ProgramGraph",
    "identity",
    "assign",
    "always",
]
