"""Soda machine: a program graph selling sodas and beers.

Locations: START (waiting for a coin) and SELECT (coin inserted).
Variables: coins (held by the machine), sodas, beers.

    START  --coin   [true]             coins += 1                  --> SELECT
    START  --refill [true]             coins, sodas, beers = 0, S, B --> START
    SELECT --soda   [sodas > 0]        sodas -= 1                  --> START
    SELECT --beer   [beers > 0]        beers -= 1                  --> START
    SELECT --ret_coin [sodas == beers == 0]  coins -= 1            --> START

Every coin kept by the machine replaces one sold drink, so whenever the
machine is back in START, coins + sodas + beers equals S + B. In SELECT
the freshly inserted coin is not yet matched by a sale.
"""

from __future__ import annotations

from enum import Enum

from transys.core.propositions import Predicate
from transys.programs.graph import ProgramGraph, always, assign
from transys.programs.state import ProgramState


class Location(str, Enum):
    """Control locations of the soda machine."""

    START = "start"
    SELECT = "select"


COIN = "coin"
REFILL = "refill"
SODA = "soda"
BEER = "beer"
RET_COIN = "ret_coin"


def total_items(state: ProgramState) -> int:
    """Coins held plus drinks in stock."""
    return state["coins"] + state["sodas"] + state["beers"]


def has_soda(state: ProgramState) -> bool:
    return state["sodas"] > 0


def has_beer(state: ProgramState) -> bool:
    return state["beers"] > 0


def sold_out(state: ProgramState) -> bool:
    return state["sodas"] == 0 and state["beers"] == 0


def total_is(n: int) -> Predicate[ProgramState]:
    """Predicate: coins + sodas + beers == n."""
    return Predicate(lambda state: total_items(state) == n, f"total=={n}")


def soda_machine(max_sodas: int = 2, max_beers: int = 2) -> ProgramGraph[Location, str]:
    """Build the soda machine program graph.

    Args:
        max_sodas: Soda capacity, also the initial stock.
        max_beers: Beer capacity, also the initial stock.

    Returns:
        ProgramGraph starting in START with no coins and full stock.

    Raises:
        ValueError: If a capacity is negative.
    """
    if max_sodas < 0 or max_beers < 0:
        raise ValueError(f"Capacities must be non-negative, got {max_sodas}/{max_beers}")

    table = {
        Location.START: [
            (always, COIN, Location.SELECT),
            (always, REFILL, Location.START),
        ],
        Location.SELECT: [
            (has_soda, SODA, Location.START),
            (has_beer, BEER, Location.START),
            (sold_out, RET_COIN, Location.START),
        ],
    }
    effects = {
        COIN: assign(coins=lambda s: s["coins"] + 1),
        REFILL: assign(coins=0, sodas=max_sodas, beers=max_beers),
        SODA: assign(sodas=lambda s: s["sodas"] - 1),
        BEER: assign(beers=lambda s: s["beers"] - 1),
        RET_COIN: assign(coins=lambda s: s["coins"] - 1),
    }
    initial = ProgramState.of(coins=0, sodas=max_sodas, beers=max_beers)

    return ProgramGraph.from_table([Location.START], initial, table, effects)


__all__ = [
    "Location",
    "COIN",
    "REFILL",
    "SODA",
    "BEER",
    "RET_COIN",
    "total_items",
    "has_soda",
    "has_beer",
    "sold_out",
    "total_is",
    "soda_machine",
]
