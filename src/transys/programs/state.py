"""Program states: immutable variable assignments.

A program state maps each variable a program graph declares to its
current value. States are hashable so they can be part of transition
system states explored by the reachability search.

Reading or assigning a variable the state does not declare raises
MissingVariableError. There are no silent defaults: a defaulted lookup
would quietly corrupt invariant-checking results.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any


class MissingVariableError(KeyError):
    """A variable was used that the program state does not declare.

    Attributes:
        variable: The undeclared variable
        declared: The variables the state does declare
    """

    def __init__(self, variable: Hashable, declared: frozenset[Hashable]):
        self.variable = variable
        self.declared = declared
        super().__init__(variable)

    def __str__(self) -> str:
        names = ", ".join(sorted(repr(v) for v in self.declared))
        return f"Variable {self.variable!r} is not declared (declared: {names})"


class ProgramState(Mapping[Hashable, Any]):
    """Immutable, hashable mapping from variables to values.

    Example:
        >>> state = ProgramState.of(coins=0, sodas=2)
        >>> state.set("coins", 1)["coins"]
        1
        >>> state["beers"]
        Traceback (most recent call last):
        ...
        MissingVariableError: ...
    """

    __slots__ = ("_values", "_hash")

    def __init__(self, values: Mapping[Hashable, Any] | None = None):
        self._values: dict[Hashable, Any] = dict(values or {})
        self._hash: int | None = None

    @classmethod
    def of(cls, **values: Any) -> ProgramState:
        """Create a state from keyword arguments."""
        return cls(values)

    @property
    def variables(self) -> frozenset[Hashable]:
        """The declared variables."""
        return frozenset(self._values)

    def __getitem__(self, variable: Hashable) -> Any:
        try:
            return self._values[variable]
        except KeyError:
            raise MissingVariableError(variable, self.variables) from None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def set(self, variable: Hashable, value: Any) -> ProgramState:
        """Return a copy with ``variable`` bound to ``value``.

        Raises:
            MissingVariableError: If ``variable`` is not declared.
        """
        return self.update({variable: value})

    def update(self, values: Mapping[Hashable, Any]) -> ProgramState:
        """Return a copy with several variables rebound.

        Raises:
            MissingVariableError: If any variable is not declared.
        """
        for variable in values:
            if variable not in self._values:
                raise MissingVariableError(variable, self.variables)
        merged = dict(self._values)
        merged.update(values)
        return ProgramState(merged)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProgramState):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._values.items()))
        return self._hash

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"ProgramState({inner})"


__all__ = [
    "MissingVariableError",
    "ProgramState",
]
