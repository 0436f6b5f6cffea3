"""Tests for random runs."""

from __future__ import annotations

import random
from itertools import islice

import pytest

from transys.core.paths import Step
from transys.core.system import TransitionSystem
from transys.verification.exploration import random_path, random_run


class TestRandomRun:
    """Tests for the unbounded random run generator."""

    def test_starts_with_initial_state(self, cyclic_system) -> None:
        first = next(random_run(cyclic_system, random.Random(0)))
        assert first == Step(None, 0)

    def test_stops_at_terminal(self, linear_system) -> None:
        steps = list(random_run(linear_system, random.Random(0)))
        assert steps == [Step(None, 0), Step("a", 1), Step("b", 2)]

    def test_unbounded_on_cycle(self, cyclic_system) -> None:
        steps = list(islice(random_run(cyclic_system, random.Random(1)), 50))
        assert len(steps) == 50

    def test_follows_declared_transitions(self, cyclic_system) -> None:
        steps = list(islice(random_run(cyclic_system, random.Random(7)), 30))
        for prev, step in zip(steps, steps[1:]):
            assert (step.action, step.state) in cyclic_system.transitions(prev.state)

    def test_no_initial_states(self) -> None:
        ts = TransitionSystem.from_table([], {}, {})
        with pytest.raises(ValueError, match="no initial states"):
            next(random_run(ts, random.Random(0)))


class TestRandomPath:
    """Tests for bounded random paths."""

    def test_reproducible_with_seed(self, cyclic_system) -> None:
        a = random_path(cyclic_system, random.Random(42), max_steps=20)
        b = random_path(cyclic_system, random.Random(42), max_steps=20)
        assert a == b

    def test_bounded_length(self, cyclic_system) -> None:
        path = random_path(cyclic_system, random.Random(3), max_steps=10)
        assert path.length == 10
        assert path.is_valid_in(cyclic_system)

    def test_zero_steps(self, cyclic_system) -> None:
        path = random_path(cyclic_system, random.Random(3), max_steps=0)
        assert path.length == 0
        assert path.head == 0

    def test_shorter_when_terminal(self, linear_system) -> None:
        path = random_path(linear_system, random.Random(0), max_steps=100)
        assert path.states() == [0, 1, 2]

    def test_negative_max_steps(self, linear_system) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            random_path(linear_system, random.Random(0), max_steps=-1)

    def test_choices_vary(self) -> None:
        """Both branches are eventually taken."""
        ts = TransitionSystem.from_table(
            ["s"], {}, {"s": [("left", "s"), ("right", "s")]}
        )
        path = random_path(ts, random.Random(5), max_steps=200)
        assert set(path.actions()) == {"left", "right"}
