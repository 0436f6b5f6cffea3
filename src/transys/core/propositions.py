"""Predicate and proposition algebra.

This module provides:
- Predicate: boolean-valued functions over plain values (program states,
  numbers, ...) with and/or/not/implication combinators
- Proposition AST (Truth, Falsity, Atomic, Not, And, Or, Implies)
  evaluated over the label-set of a state
- Builder functions (atom, conj, disj, neg, implies, ...)

A label is any container of atomic propositions. Explicit systems use a
frozenset; compiled program graphs use a lazy container whose membership
test evaluates the proposition on demand. Propositions only ever ask
``prop in label``, so both work uniformly.

Semantics:
- Atomic(p) holds in L iff p ∈ L
- Not, And, Or: standard boolean connectives
- Implies(φ, ψ) holds iff ¬φ ∨ ψ (vacuously true when φ is false)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Container, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Label = Container[Any]
"""The set of atomic propositions true in a state."""


# =============================================================================
# Value Predicates
# =============================================================================


@dataclass(frozen=True, eq=False)
class Predicate(Generic[T]):
    """A boolean-valued function over values of type ``T``.

    Predicates compose without inspecting the wrapped callables.
    Equality is identity-based, since callables cannot be compared
    structurally.

    Example:
        >>> positive = Predicate(lambda x: x > 0)
        >>> even = Predicate(lambda x: x % 2 == 0)
        >>> (positive & ~even)(3)
        True
    """

    fn: Callable[[T], bool]
    name: str = ""

    def __call__(self, value: T) -> bool:
        return bool(self.fn(value))

    def __and__(self, other: Callable[[T], bool]) -> Predicate[T]:
        return Predicate(lambda v: self(v) and bool(other(v)), f"({self} ∧ {_name(other)})")

    def __or__(self, other: Callable[[T], bool]) -> Predicate[T]:
        return Predicate(lambda v: self(v) or bool(other(v)), f"({self} ∨ {_name(other)})")

    def __invert__(self) -> Predicate[T]:
        return Predicate(lambda v: not self(v), f"¬{self}")

    def implies(self, other: Callable[[T], bool]) -> Predicate[T]:
        """Implication: vacuously true wherever this predicate is false."""
        return Predicate(lambda v: (not self(v)) or bool(other(v)), f"({self} → {_name(other)})")

    @classmethod
    def true(cls) -> Predicate[Any]:
        return cls(lambda _: True, "⊤")

    @classmethod
    def false(cls) -> Predicate[Any]:
        return cls(lambda _: False, "⊥")

    def __repr__(self) -> str:
        return self.name or "<predicate>"


def _name(fn: Callable[..., bool]) -> str:
    if isinstance(fn, Predicate):
        return repr(fn)
    return getattr(fn, "__name__", "<predicate>")


# =============================================================================
# Proposition AST
# =============================================================================


class Proposition(ABC):
    """Abstract base class for propositions over label-sets."""

    @abstractmethod
    def evaluate(self, label: Label) -> bool:
        """Decide whether this proposition holds for ``label``."""

    def __call__(self, label: Label) -> bool:
        return self.evaluate(label)

    def __and__(self, other: Proposition) -> Proposition:
        return And(self, other)

    def __or__(self, other: Proposition) -> Proposition:
        return Or(self, other)

    def __invert__(self) -> Proposition:
        return Not(self)


@dataclass(frozen=True)
class Truth(Proposition):
    """The constant proposition ⊤."""

    def evaluate(self, label: Label) -> bool:
        return True

    def __repr__(self) -> str:
        return "⊤"


@dataclass(frozen=True)
class Falsity(Proposition):
    """The constant proposition ⊥."""

    def evaluate(self, label: Label) -> bool:
        return False

    def __repr__(self) -> str:
        return "⊥"


@dataclass(frozen=True)
class Atomic(Proposition):
    """Atomic proposition: holds in labels containing ``prop``.

    Attributes:
        prop: The atomic proposition value.
    """

    prop: Hashable

    def evaluate(self, label: Label) -> bool:
        return self.prop in label

    def __repr__(self) -> str:
        return str(self.prop)


@dataclass(frozen=True)
class Not(Proposition):
    """Negation: ¬φ."""

    formula: Proposition

    def evaluate(self, label: Label) -> bool:
        return not self.formula.evaluate(label)

    def __repr__(self) -> str:
        return f"¬({self.formula})"


@dataclass(frozen=True)
class And(Proposition):
    """Conjunction: φ ∧ ψ."""

    left: Proposition
    right: Proposition

    def evaluate(self, label: Label) -> bool:
        return self.left.evaluate(label) and self.right.evaluate(label)

    def __repr__(self) -> str:
        return f"({self.left} ∧ {self.right})"


@dataclass(frozen=True)
class Or(Proposition):
    """Disjunction: φ ∨ ψ."""

    left: Proposition
    right: Proposition

    def evaluate(self, label: Label) -> bool:
        return self.left.evaluate(label) or self.right.evaluate(label)

    def __repr__(self) -> str:
        return f"({self.left} ∨ {self.right})"


@dataclass(frozen=True)
class Implies(Proposition):
    """Implication: φ → ψ (equivalent to ¬φ ∨ ψ).

    Attributes:
        left: Antecedent.
        right: Consequent.
    """

    left: Proposition
    right: Proposition

    def evaluate(self, label: Label) -> bool:
        return (not self.left.evaluate(label)) or self.right.evaluate(label)

    def __repr__(self) -> str:
        return f"({self.left} → {self.right})"


def atoms(proposition: Proposition) -> frozenset[Hashable]:
    """Collect the atomic propositions referenced by a formula.

    Args:
        proposition: The formula to inspect.

    Returns:
        Frozenset of the ``prop`` values of every Atomic node.

    Raises:
        TypeError: If the formula contains an unknown node type.
    """
    if isinstance(proposition, Atomic):
        return frozenset({proposition.prop})
    if isinstance(proposition, (Truth, Falsity)):
        return frozenset()
    if isinstance(proposition, Not):
        return atoms(proposition.formula)
    if isinstance(proposition, (And, Or, Implies)):
        return atoms(proposition.left) | atoms(proposition.right)
    raise TypeError(f"Unknown proposition type: {type(proposition).__name__}")


# =============================================================================
# Builders
# =============================================================================


def always_true() -> Truth:
    """Create the constant true proposition."""
    return Truth()


def always_false() -> Falsity:
    """Create the constant false proposition."""
    return Falsity()


def atom(prop: Hashable) -> Atomic:
    """Create atomic proposition: prop ∈ L."""
    return Atomic(prop)


def conj(left: Proposition, right: Proposition) -> And:
    """Create conjunction: left ∧ right."""
    return And(left, right)


def disj(left: Proposition, right: Proposition) -> Or:
    """Create disjunction: left ∨ right."""
    return Or(left, right)


def neg(formula: Proposition) -> Not:
    """Create negation: ¬formula."""
    return Not(formula)


def implies(left: Proposition, right: Proposition) -> Implies:
    """Create implication: left → right."""
    return Implies(left, right)


__all__ = [
    "Label",
    # Value predicates
    "Predicate",
    # Proposition AST
    "Proposition",
    "Truth",
    "Falsity",
    "Atomic",
    "Not",
    "And",
    "Or",
    "Implies",
    "atoms",
    # Builders
    "always_true",
    "always_false",
    "atom",
    "conj",
    "disj",
    "neg",
    "implies",
]
