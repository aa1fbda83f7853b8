"""Tests for vclass.domain — roster model, cards and errors."""

from __future__ import annotations

import pytest

from vclass.domain import Card, EmptyNameError, PersistenceError, Roster, VClassError, normalize_name


class TestNormalizeName:

    def test_strips_surrounding_whitespace(self) -> None:
        assert normalize_name("  Algebra I\t\r\n") == "Algebra I"

    def test_keeps_inner_whitespace(self) -> None:
        assert normalize_name("Algebra  I") == "Algebra  I"

    def test_blank_becomes_empty(self) -> None:
        assert normalize_name(" \t ") == ""


class TestRoster:

    def test_add_then_duplicate(self) -> None:
        roster = Roster()
        assert roster.add_class("Algebra I") is True
        assert roster.add_class("Algebra I") is False
        assert roster.classes == ["Algebra I"]

    def test_duplicate_check_uses_trimmed_name(self) -> None:
        roster = Roster()
        assert roster.add_student("Ada") is True
        assert roster.add_student("  Ada ") is False
        assert roster.students == ["Ada"]

    def test_case_sensitive(self) -> None:
        roster = Roster()
        assert roster.add_class("math") is True
        assert roster.add_class("Math") is True
        assert roster.classes == ["math", "Math"]

    def test_lists_are_independent(self) -> None:
        roster = Roster()
        assert roster.add_class("Ada") is True
        assert roster.add_student("Ada") is True

    def test_empty_name_rejected(self) -> None:
        roster = Roster()
        with pytest.raises(EmptyNameError):
            roster.add_class("   ")
        assert roster.classes == []

    def test_empty_name_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Roster().add_student("")


class TestCard:

    def test_body_limit(self) -> None:
        with pytest.raises(ValueError, match="3"):
            Card("x", ("a", "b", "c", "d"))

    def test_defaults_to_empty_body(self) -> None:
        assert Card("x").body == ()


def test_persistence_error_message() -> None:
    err = PersistenceError("classes.txt", OSError("disk full"))
    assert isinstance(err, VClassError)
    assert "classes.txt" in str(err)
    assert "disk full" in str(err)
