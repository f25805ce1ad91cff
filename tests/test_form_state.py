"""Tests for the state behind the graphical form."""

import pytest

from dicecollection.gui.state import FormState, parse_positive_integer


@pytest.fixture
def form():
    return FormState(rolls=300, max_dice=6, max_sides=9)


class TestFieldParsing:
    """Digits-only field values."""

    @pytest.mark.parametrize("text,expected", [
        ("3", 3), (" 12 ", 12), ("0", None), ("", None), ("-2", None), ("2.5", None), ("abc", None),
    ])
    def test_parse(self, text, expected):
        assert parse_positive_integer(text) == expected


class TestDiceCount:
    """The number-of-dice field."""

    def test_valid_count_opens_sides_fields(self, form):
        form.set_dice_count("3")
        assert form.error == ""
        assert form.sides == [0, 0, 0]
        assert not form.buttons_enabled

    def test_not_a_number(self, form):
        form.set_dice_count("two")
        assert form.error == "Please enter a positive integer"
        assert form.sides == []

    def test_too_many_dice(self, form):
        form.set_dice_count("7")
        assert form.error == "Please enter a positive integer smaller than 7"
        assert form.sides == []

    def test_changing_count_drops_collection(self, form):
        form.set_dice_count("1")
        form.set_sides(0, "6")
        assert form.buttons_enabled
        form.set_dice_count("2")
        assert not form.buttons_enabled
        assert form.info_text == ""


class TestSides:
    """The per-die sides fields."""

    def test_all_fields_valid_builds_collection(self, form):
        form.set_dice_count("2")
        form.set_sides(0, "6")
        assert not form.buttons_enabled
        form.set_sides(1, "4")
        assert form.buttons_enabled
        assert form.dice_collection.face_counts == [6, 4]
        assert form.info_text.startswith("Die 1 has 6 sides")

    @pytest.mark.parametrize("text,message", [
        ("x", "Please enter a positive integer as\nthe sides of die number 2"),
        ("1", "Die number 2 needs at least 2 sides"),
        ("10", "Die number 2 should only have\nless than 10 sides"),
    ])
    def test_invalid_sides(self, form, text, message):
        form.set_dice_count("2")
        form.set_sides(0, "6")
        form.set_sides(1, "4")
        form.set_sides(1, text)
        assert form.error == message
        assert form.sides == [6, 0]
        assert not form.buttons_enabled


class TestRolling:
    """Buttons and the automatic re-roll."""

    def _configure(self, form, *sides):
        form.set_dice_count(str(len(sides)))
        for i, s in enumerate(sides):
            form.set_sides(i, str(s))

    def test_roll_once_clears_chart(self, form):
        self._configure(form, 6, 6)
        form.roll_bulk()
        assert form.tracker is not None
        form.roll_once()
        assert form.tracker is None

    def test_bulk_roll(self, form):
        self._configure(form, 6, 4)
        assert not form.has_rolled_once
        form.roll_bulk()
        assert form.has_rolled_once
        assert len(form.tracker) == 10
        assert form.tracker.sum() == 300

    def test_no_automatic_roll_before_first_bulk_roll(self, form):
        self._configure(form, 6, 4)
        form.set_sides(1, "3")
        assert form.tracker is None

    def test_reconfiguring_after_bulk_roll_reruns_it(self, form):
        self._configure(form, 6, 4)
        form.roll_bulk()
        form.set_sides(1, "3")
        assert form.dice_collection.face_counts == [6, 3]
        assert len(form.tracker) == 9
        assert form.tracker.sum() == 300

    def test_invalid_edit_does_not_rerun(self, form):
        self._configure(form, 6, 4)
        form.roll_bulk()
        previous = form.tracker
        form.set_sides(1, "1")
        assert form.tracker is previous
        assert not form.buttons_enabled
