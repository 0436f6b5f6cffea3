"""Paths through a transition system.

A path is a head state followed by an ordered sequence of steps. Each
step pairs an action with the state that action leads INTO:

    s₀ --a₁--> s₁ --a₂--> s₂    ≡    Path(s₀, (Step(a₁, s₁), Step(a₂, s₂)))

A path with no steps is just its head state.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .system import TransitionSystem

S = TypeVar("S")
A = TypeVar("A")


@dataclass(frozen=True)
class Step(Generic[A, S]):
    """One step of a path: ``action`` leads into ``state``."""

    action: A
    state: S

    def __repr__(self) -> str:
        return f"--{self.action}--> {self.state!r}"


class Path(Generic[S, A]):
    """A finite sequence of states connected by actions.

    Paths are persistent: ``extend`` links the new step to the existing
    path instead of copying it, so growing a path by one step is O(1)
    and paths sharing a prefix share its storage. The ``steps`` tuple is
    built on first access and cached.

    Attributes:
        head: The first state of the path.
        steps: The (action, state) steps following the head, in order.
    """

    __slots__ = ("_head", "_parent", "_step", "_length", "_steps")

    def __init__(self, head: S, steps: Iterable[Step[A, S]] = ()):
        self._head = head
        self._parent: Path[S, A] | None = None
        self._step: Step[A, S] | None = None
        self._steps: tuple[Step[A, S], ...] | None = tuple(steps)
        self._length = len(self._steps)

    @classmethod
    def single(cls, state: S) -> Path[S, A]:
        """Create the length-0 path consisting of ``state`` only."""
        return cls(state)

    @classmethod
    def from_steps(cls, head: S, steps: Iterable[tuple[A, S]]) -> Path[S, A]:
        """Create a path from a head and ``(action, state)`` pairs."""
        return cls(head, tuple(Step(action, state) for action, state in steps))

    @property
    def head(self) -> S:
        return self._head

    @property
    def steps(self) -> tuple[Step[A, S], ...]:
        if self._steps is None:
            # Walk back to the nearest ancestor with materialized steps
            tail: list[Step[A, S]] = []
            node: Path[S, A] = self
            while node._steps is None:
                assert node._step is not None and node._parent is not None
                tail.append(node._step)
                node = node._parent
            tail.reverse()
            self._steps = node._steps + tuple(tail)
        return self._steps

    @property
    def last(self) -> S:
        """The final state of the path."""
        if self._step is not None:
            return self._step.state
        return self.steps[-1].state if self._length else self._head

    @property
    def length(self) -> int:
        """Number of steps; 0 for a single-state path."""
        return self._length

    def states(self) -> list[S]:
        """All states along the path, head first."""
        return [self._head, *(step.state for step in self.steps)]

    def actions(self) -> list[A]:
        """All actions along the path, in order."""
        return [step.action for step in self.steps]

    def extend(self, action: A, state: S) -> Path[S, A]:
        """Return a new path with one more step appended.

        The new path shares this path's steps rather than copying them.
        """
        path: Path[S, A] = Path.__new__(Path)
        path._head = self._head
        path._parent = self
        path._step = Step(action, state)
        path._steps = None
        path._length = self._length + 1
        return path

    def concat(self, other: Path[S, A]) -> Path[S, A]:
        """Join two paths where ``other`` starts at this path's last state.

        Raises:
            ValueError: If ``other.head`` differs from ``self.last``.
        """
        if other.head != self.last:
            raise ValueError(
                f"Cannot concatenate: path ends at {self.last!r} "
                f"but next path starts at {other.head!r}"
            )
        return Path(self.head, self.steps + other.steps)

    def reversed(self) -> Path[S, A]:
        """Return the path walked backwards.

        The last state becomes the head. Every action keeps its position
        between the same two states, so in the reversed path it leads
        into the state it originally left.
        """
        states = self.states()
        actions = self.actions()
        steps = tuple(
            Step(actions[i], states[i]) for i in range(len(actions) - 1, -1, -1)
        )
        return Path(self.last, steps)

    def is_valid_in(self, system: TransitionSystem[S, A, object]) -> bool:
        """Check that this path is a witness in ``system``.

        The head must be an initial state and every step must be a
        transition the system declares from the preceding state.
        """
        if self.head not in system.initial_states:
            return False
        current = self.head
        for step in self.steps:
            if (step.action, step.state) not in system.successors(current):
                return False
            current = step.state
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self._length == other._length
            and self._head == other._head
            and self.steps == other.steps
        )

    def __hash__(self) -> int:
        return hash((self._head, self.steps))

    def __iter__(self) -> Iterator[S]:
        return iter(self.states())

    def __repr__(self) -> str:
        parts = [repr(self.head)]
        for step in self.steps:
            parts.append(f"--{step.action}--> {step.state!r}")
        return " ".join(parts)


__all__ = [
    "Step",
    "Path",
]
