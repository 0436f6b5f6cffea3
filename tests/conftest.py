"""Shared transition-system fixtures."""

from __future__ import annotations

import pytest

from transys.core.system import TransitionSystem


def make_linear() -> TransitionSystem[int, str, str]:
    """Linear system: 0 --a--> 1 --b--> 2 (2 is terminal).

    Labels: {0: {init}, 1: {processing}, 2: {done}}
    """
    return TransitionSystem.from_table(
        [0],
        {0: {"init"}, 1: {"processing"}, 2: {"done"}},
        {0: [("a", 1)], 1: [("b", 2)]},
    )


def make_diamond() -> TransitionSystem[int, str, str]:
    """Diamond system:
         0 --a--> 1
         0 --b--> 2
         1 --c--> 3
         2 --d--> 3

    Labels: {0: {start}, 1: {left}, 2: {right}, 3: {end}}
    """
    return TransitionSystem.from_table(
        [0],
        {0: {"start"}, 1: {"left"}, 2: {"right"}, 3: {"end"}},
        {0: [("a", 1), ("b", 2)], 1: [("c", 3)], 2: [("d", 3)]},
    )


def make_cyclic() -> TransitionSystem[int, str, str]:
    """Cyclic system: 0 --a--> 1 --b--> 0, 1 --c--> 2, 2 --d--> 2.

    Labels: {0: {ready}, 1: {working}, 2: {done}}
    """
    return TransitionSystem.from_table(
        [0],
        {0: {"ready"}, 1: {"working"}, 2: {"done"}},
        {0: [("a", 1)], 1: [("b", 0), ("c", 2)], 2: [("d", 2)]},
    )


def make_counter(limit: int) -> TransitionSystem[int, str, str]:
    """Unbounded-looking counter that is finite from 0: n --inc--> n+1 up to limit.

    Labels: {even} or {odd}, plus {limit} at the top.
    """

    def label(n: int) -> frozenset[str]:
        props = {"even" if n % 2 == 0 else "odd"}
        if n == limit:
            props.add("limit")
        return frozenset(props)

    def transitions(n: int) -> list[tuple[str, int]]:
        return [("inc", n + 1)] if n < limit else [("reset", 0)]

    return TransitionSystem([0], label, transitions)


@pytest.fixture
def linear_system():
    return make_linear()


@pytest.fixture
def diamond_system():
    return make_diamond()


@pytest.fixture
def cyclic_system():
    return make_cyclic()


@pytest.fixture
def counter_system():
    return make_counter(5)
