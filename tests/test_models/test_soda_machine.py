"""Tests for the soda machine example."""

from __future__ import annotations

import pytest

from transys.core.paths import Path
from transys.core.propositions import implies
from transys.models.soda_machine import (
    BEER,
    COIN,
    REFILL,
    RET_COIN,
    SODA,
    Location,
    soda_machine,
    sold_out,
    total_is,
    total_items,
)
from transys.programs.compiler import at, compile_program_graph, holds
from transys.programs.state import ProgramState
from transys.verification.invariants import check_invariant
from transys.verification.search import reachable_states


@pytest.fixture
def machine():
    return compile_program_graph(soda_machine(2, 2))


def _state(coins: int, sodas: int, beers: int) -> ProgramState:
    return ProgramState.of(coins=coins, sodas=sodas, beers=beers)


class TestSodaMachine:
    """Tests for the program graph structure."""

    def test_initial(self, machine) -> None:
        assert machine.initial_states == ((Location.START, _state(0, 2, 2)),)

    def test_start_transitions(self, machine) -> None:
        assert machine.transitions((Location.START, _state(0, 2, 2))) == [
            (COIN, (Location.SELECT, _state(1, 2, 2))),
            (REFILL, (Location.START, _state(0, 2, 2))),
        ]

    def test_select_transitions(self, machine) -> None:
        assert machine.transitions((Location.SELECT, _state(1, 2, 0))) == [
            (SODA, (Location.START, _state(1, 1, 0))),
        ]
        assert machine.transitions((Location.SELECT, _state(3, 1, 1))) == [
            (SODA, (Location.START, _state(3, 0, 1))),
            (BEER, (Location.START, _state(3, 1, 0))),
        ]

    def test_coin_returned_when_sold_out(self, machine) -> None:
        assert machine.transitions((Location.SELECT, _state(5, 0, 0))) == [
            (RET_COIN, (Location.START, _state(4, 0, 0))),
        ]

    def test_refill_collects_coins(self, machine) -> None:
        succs = dict(machine.transitions((Location.START, _state(4, 0, 0))))
        assert succs[REFILL] == (Location.START, _state(0, 2, 2))

    def test_helpers(self) -> None:
        assert total_items(_state(1, 2, 3)) == 6
        assert sold_out(_state(3, 0, 0))
        assert not sold_out(_state(3, 0, 1))
        assert total_is(6)(_state(1, 2, 3))

    def test_finite_state_space(self, machine) -> None:
        states = reachable_states(machine)
        assert all(total_items(s) <= 5 for _, s in states)
        assert (Location.SELECT, _state(5, 0, 0)) in states

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            soda_machine(-1, 2)


class TestSodaMachineInvariants:
    """Invariants over the compiled soda machine."""

    def test_total_always_four_is_violated(self, machine) -> None:
        cex = check_invariant(holds(total_is(4)), machine)
        assert cex is not None
        assert cex.state == (Location.SELECT, _state(1, 2, 2))
        assert total_items(cex.state[1]) == 5
        assert cex.path == Path.from_steps(
            (Location.START, _state(0, 2, 2)),
            [(COIN, (Location.SELECT, _state(1, 2, 2)))],
        )

    def test_total_four_in_start(self, machine) -> None:
        assert check_invariant(implies(at(Location.START), holds(total_is(4))), machine) is None

    def test_total_five_in_select(self, machine) -> None:
        assert check_invariant(implies(at(Location.SELECT), holds(total_is(5))), machine) is None

    @pytest.mark.parametrize("sodas,beers", [(0, 0), (1, 3), (3, 1)])
    def test_other_capacities(self, sodas: int, beers: int) -> None:
        ts = compile_program_graph(soda_machine(sodas, beers))
        prop = implies(at(Location.START), holds(total_is(sodas + beers)))
        assert check_invariant(prop, ts) is None
