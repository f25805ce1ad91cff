"""Tests for the dice collection: sums, report and histogram sampling."""

import numpy as np
import pytest

from dicecollection.core import DiceCollection, InvalidConfiguration
from dicecollection.simulation import exact_distribution, total_variation


class TestConstruction:
    """Building a collection from face counts."""

    def test_order_is_preserved(self, mixed_dice):
        assert [die.sides for die in mixed_dice.dice] == [4, 6, 8]
        assert mixed_dice.face_counts == [4, 6, 8]
        assert len(mixed_dice) == 3

    def test_accepts_any_iterable(self):
        dice_collection = DiceCollection(s for s in (3, 5))
        assert dice_collection.face_counts == [3, 5]

    def test_empty_collection_rejected(self):
        with pytest.raises(InvalidConfiguration):
            DiceCollection([])

    @pytest.mark.parametrize("face_counts", [None, 6])
    def test_non_iterable_rejected(self, face_counts):
        with pytest.raises(InvalidConfiguration):
            DiceCollection(face_counts)

    @pytest.mark.parametrize("face_counts", [[1], [0], [6, 1], [6, 6, 0], [-2]])
    def test_too_few_sides_rejected(self, face_counts):
        with pytest.raises(InvalidConfiguration):
            DiceCollection(face_counts)

    def test_rejected_collection_creates_no_dice(self, monkeypatch):
        """Validation runs before the first die is built."""
        from dicecollection.core import collection

        created = []
        original = collection.Die

        def recording_die(sides):
            created.append(sides)
            return original(sides)

        monkeypatch.setattr(collection, "Die", recording_die)
        with pytest.raises(InvalidConfiguration):
            DiceCollection([6, 6, 1])
        assert created == []

    def test_dice_cannot_be_replaced(self, two_coins):
        with pytest.raises(AttributeError):
            two_coins.dice = ()
        assert isinstance(two_coins.dice, tuple)


class TestSums:
    """Minimum, maximum and current sums."""

    @pytest.mark.parametrize("face_counts", [[2], [6], [2, 2], [4, 6, 8], [20, 12, 10, 2]])
    def test_bounds(self, face_counts):
        dice_collection = DiceCollection(face_counts)
        assert dice_collection.minimum_sum() == len(face_counts)
        assert dice_collection.maximum_sum() == sum(face_counts)

    def test_single_coin_bounds(self):
        dice_collection = DiceCollection([2])
        assert dice_collection.minimum_sum() == 1
        assert dice_collection.maximum_sum() == 2

    def test_current_sum_within_bounds(self, mixed_dice):
        for _ in range(300):
            mixed_dice.roll_all()
            assert mixed_dice.minimum_sum() <= mixed_dice.sum_up_sides() <= mixed_dice.maximum_sum()

    def test_current_sum_matches_faces(self, mixed_dice):
        mixed_dice.roll_all()
        assert mixed_dice.sum_up_sides() == sum(die.up_side for die in mixed_dice.dice)

    def test_roll_all_rolls_each_die_once(self, mixed_dice, monkeypatch):
        rolled = []
        for die in mixed_dice.dice:
            monkeypatch.setattr(die, "roll", lambda die=die: rolled.append(die))
        mixed_dice.roll_all()
        assert rolled == list(mixed_dice.dice)


class TestDescribe:
    """The multi-line report."""

    def test_report_lines(self, mixed_dice):
        lines = mixed_dice.describe().split("\n")
        faces = [die.up_side for die in mixed_dice.dice]

        assert lines[0] == f"Die 1 has 4 sides - Current up side: {faces[0]}"
        assert lines[1] == f"Die 2 has 6 sides - Current up side: {faces[1]}"
        assert lines[2] == f"Die 3 has 8 sides - Current up side: {faces[2]}"
        assert lines[3] == ""
        assert lines[4] == "Min sum of roll: 3"
        assert lines[5] == "Max sum of roll: 18"
        assert lines[6] == f"Sum of current roll: {sum(faces)}"

    def test_report_has_no_side_effects(self, mixed_dice):
        before = [die.up_side for die in mixed_dice.dice]
        assert mixed_dice.describe() == mixed_dice.describe()
        assert [die.up_side for die in mixed_dice.dice] == before
        assert str(mixed_dice) == mixed_dice.describe()


class TestHistogram:
    """Repeated-trial sampling into a frequency table."""

    def test_shape_and_total(self, mixed_dice):
        tracker = mixed_dice.histogram(2000)
        assert len(tracker) == mixed_dice.maximum_sum()
        assert tracker.sum() == 2000
        assert (tracker >= 0).all()

    def test_slots_below_minimum_stay_empty(self, mixed_dice):
        """Slot i counts a total of i + 1, so nothing lands below the minimum sum."""
        tracker = mixed_dice.histogram(3000)
        assert tracker[:mixed_dice.minimum_sum() - 1].sum() == 0
        assert tracker[mixed_dice.minimum_sum() - 1:].sum() == 3000

    def test_single_trial_on_a_coin(self):
        dice_collection = DiceCollection([2])
        tracker = dice_collection.histogram(1)
        assert len(tracker) == 2
        assert sorted(tracker.tolist()) == [0, 1]
        assert tracker[dice_collection.sum_up_sides() - 1] == 1

    def test_dice_show_last_trial(self, mixed_dice, monkeypatch):
        totals = []
        original = mixed_dice.sum_up_sides

        def recording_sum():
            total = original()
            totals.append(total)
            return total

        monkeypatch.setattr(mixed_dice, "sum_up_sides", recording_sum)
        mixed_dice.histogram(50)
        assert original() == totals[-1]

    def test_repeated_calls_have_same_shape(self):
        first = DiceCollection([3, 5]).histogram(500)
        second = DiceCollection([3, 5]).histogram(500)
        assert first.shape == second.shape
        assert first.sum() == second.sum() == 500

    def test_each_call_gets_a_fresh_table(self, two_coins):
        first = two_coins.histogram(100)
        second = two_coins.histogram(100)
        assert first is not second
        assert first.sum() == second.sum() == 100

    def test_single_six_sided_die_is_uniform(self):
        dice_collection = DiceCollection([6])
        assert dice_collection.minimum_sum() == 1
        assert dice_collection.maximum_sum() == 6

        tracker = dice_collection.histogram(10000)
        assert len(tracker) == 6
        assert tracker.sum() == 10000
        for count in tracker:
            assert abs(count - 10000 / 6) < 200

    def test_two_coins_follow_convolution(self, two_coins):
        """Sums 2..4 of two coins come up 1:2:1, and a total of 1 never happens."""
        assert two_coins.minimum_sum() == 2
        assert two_coins.maximum_sum() == 4

        tracker = two_coins.histogram(4000)
        expected = exact_distribution([2, 2]) * 4000
        assert len(tracker) == 4
        assert tracker[0] == 0
        np.testing.assert_allclose(tracker, expected, atol=200)
        assert tracker[2] > tracker[1]
        assert tracker[2] > tracker[3]

    def test_mixed_dice_close_to_exact_distribution(self, mixed_dice):
        tracker = mixed_dice.histogram(20000)
        assert total_variation(tracker, exact_distribution([4, 6, 8])) < 0.03

    @pytest.mark.parametrize("trials", [0, -1])
    def test_too_few_trials_rejected(self, mixed_dice, trials):
        before = [die.up_side for die in mixed_dice.dice]
        with pytest.raises(InvalidConfiguration):
            mixed_dice.histogram(trials)
        assert [die.up_side for die in mixed_dice.dice] == before

    @pytest.mark.parametrize("trials", [10.0, "10", None])
    def test_non_integer_trials_rejected(self, two_coins, trials):
        with pytest.raises(InvalidConfiguration):
            two_coins.histogram(trials)
