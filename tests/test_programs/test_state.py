"""Tests for program states."""

from __future__ import annotations

import pytest

from transys.programs.state import MissingVariableError, ProgramState


class TestProgramState:
    """Tests for the immutable variable mapping."""

    def test_lookup(self) -> None:
        state = ProgramState.of(x=1, y=2)
        assert state["x"] == 1
        assert len(state) == 2
        assert set(state) == {"x", "y"}
        assert state.variables == frozenset({"x", "y"})

    def test_missing_variable(self) -> None:
        state = ProgramState.of(x=1)
        with pytest.raises(MissingVariableError) as exc_info:
            state["z"]
        assert exc_info.value.variable == "z"
        assert exc_info.value.declared == frozenset({"x"})
        assert "'z' is not declared" in str(exc_info.value)

    def test_missing_variable_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            ProgramState.of(x=1)["z"]

    def test_explicit_default_allowed(self) -> None:
        """Mapping.get only defaults when the caller asks for it."""
        state = ProgramState.of(x=1)
        assert state.get("z", 0) == 0
        assert "z" not in state
        assert "x" in state

    def test_set_returns_new_state(self) -> None:
        state = ProgramState.of(x=1)
        changed = state.set("x", 5)
        assert state["x"] == 1
        assert changed["x"] == 5

    def test_set_undeclared(self) -> None:
        with pytest.raises(MissingVariableError):
            ProgramState.of(x=1).set("y", 2)

    def test_update_all_or_nothing(self) -> None:
        state = ProgramState.of(x=1, y=2)
        with pytest.raises(MissingVariableError):
            state.update({"x": 9, "w": 0})
        assert state["x"] == 1
        assert state.update({"x": 9, "y": 8}) == ProgramState.of(x=9, y=8)

    def test_equality_and_hash(self) -> None:
        a = ProgramState({"x": 1, "y": 2})
        b = ProgramState.of(y=2, x=1)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a != ProgramState.of(x=1, y=3)

    def test_not_equal_to_dict(self) -> None:
        assert ProgramState.of(x=1) != {"x": 1}

    def test_input_mapping_copied(self) -> None:
        values = {"x": 1}
        state = ProgramState(values)
        values["x"] = 2
        assert state["x"] == 1

    def test_repr(self) -> None:
        assert repr(ProgramState.of(coins=0, sodas=2)) == "ProgramState(coins=0, sodas=2)"
