"""
Unit tests for habitual.service.streak.
"""
from habitual.service.streak import (
    StreakSummary,
    apply_streaks,
    calculate_streaks,
    current_streak,
    is_streak_day,
    longest_streak,
)


class TestIsStreakDay:
    """Test the completion predicate under both count types."""

    def test_missing_day_never_counts(self, make_activity):
        """An absent record is not a streak day, whatever the policy."""
        done = make_activity("boolean", {}, policy="count-if-done")
        not_done = make_activity("boolean", {}, policy="count-if-not-done")

        assert not is_streak_day(done, "2024-01-03")
        assert not is_streak_day(not_done, "2024-01-03")

    def test_boolean_count_if_done(self, make_activity):
        activity = make_activity(
            "boolean", {"2024-01-01": True, "2024-01-02": False}
        )

        assert is_streak_day(activity, "2024-01-01")
        assert not is_streak_day(activity, "2024-01-02")

    def test_boolean_count_if_not_done(self, make_activity):
        activity = make_activity(
            "boolean",
            {"2024-01-01": True, "2024-01-02": False},
            policy="count-if-not-done",
        )

        assert not is_streak_day(activity, "2024-01-01")
        assert is_streak_day(activity, "2024-01-02")

    def test_quantity_count_if_done(self, make_activity):
        activity = make_activity("quantity", {"2024-01-01": 3, "2024-01-02": 0})

        assert is_streak_day(activity, "2024-01-01")
        assert not is_streak_day(activity, "2024-01-02")

    def test_quantity_count_if_not_done(self, make_activity):
        activity = make_activity(
            "quantity",
            {"2024-01-01": 3, "2024-01-02": 0},
            policy="count-if-not-done",
        )

        assert not is_streak_day(activity, "2024-01-01")
        assert is_streak_day(activity, "2024-01-02")

    def test_goal_does_not_gate_streak_day(self, make_activity):
        """A value below the goal still counts under count-if-done."""
        activity = make_activity("quantity", {"2024-01-03": 1}, goal=5)

        assert is_streak_day(activity, "2024-01-03")

    def test_values_logged_under_the_other_kind(self, make_activity):
        """Stored values are read as the activity's current kind."""
        boolean = make_activity("boolean", {"2024-01-01": 4, "2024-01-02": 0})
        quantity = make_activity(
            "quantity", {"2024-01-01": True, "2024-01-02": False}
        )

        assert is_streak_day(boolean, "2024-01-01")
        assert not is_streak_day(boolean, "2024-01-02")
        assert is_streak_day(quantity, "2024-01-01")
        assert not is_streak_day(quantity, "2024-01-02")


class TestLongestStreak:
    """Test the map-order longest streak scan."""

    def test_empty_history(self, make_activity):
        assert longest_streak(make_activity("boolean", {})) == 0

    def test_failing_entry_resets_run(self, make_activity):
        activity = make_activity(
            "boolean",
            {
                "2024-01-01": True,
                "2024-01-02": True,
                "2024-01-03": False,
                "2024-01-04": True,
            },
        )

        assert longest_streak(activity) == 2

    def test_map_gaps_do_not_break_run(self, make_activity):
        """Missing calendar days between entries are skipped, not failed."""
        activity = make_activity(
            "boolean", {"2024-01-01": True, "2024-01-03": True, "2024-01-10": True}
        )

        assert longest_streak(activity) == 3

    def test_entries_are_scanned_in_date_order(self, make_activity):
        activity = make_activity(
            "quantity",
            {"2024-01-05": 1, "2024-01-01": 2, "2024-01-03": 0, "2024-01-04": 4},
        )

        assert longest_streak(activity) == 2

    def test_run_ending_at_last_entry(self, make_activity):
        activity = make_activity(
            "boolean",
            {"2024-01-01": False, "2024-01-02": True, "2024-01-03": True},
        )

        assert longest_streak(activity) == 2


class TestCurrentStreak:
    """Test the calendar walk back from today (2024-01-03)."""

    def test_empty_history(self, make_activity, clock):
        assert current_streak(make_activity("boolean", {}), clock) == 0

    def test_today_missing_means_no_streak(self, make_activity, clock):
        activity = make_activity("boolean", {"2024-01-01": True, "2024-01-02": True})

        assert current_streak(activity, clock) == 0

    def test_today_failing_means_no_streak(self, make_activity, clock):
        activity = make_activity(
            "boolean",
            {"2024-01-01": True, "2024-01-02": True, "2024-01-03": False},
        )

        assert current_streak(activity, clock) == 0

    def test_every_day_counts_through_today(self, make_activity, clock):
        """Streak spans from the first counting day through today."""
        activity = make_activity(
            "quantity",
            {
                "2023-12-29": 2,
                "2023-12-30": 1,
                "2023-12-31": 7,
                "2024-01-01": 3,
                "2024-01-02": 1,
                "2024-01-03": 4,
            },
        )

        assert current_streak(activity, clock) == 6

    def test_missing_calendar_day_breaks_streak(self, make_activity, clock):
        activity = make_activity(
            "boolean",
            {"2023-12-30": True, "2024-01-01": True, "2024-01-03": True},
        )

        assert current_streak(activity, clock) == 1

    def test_count_if_not_done_inverts_predicate(self, make_activity, clock):
        """Four untouched days count under count-if-not-done only."""
        values = {
            "2023-12-31": False,
            "2024-01-01": False,
            "2024-01-02": False,
            "2024-01-03": False,
        }
        avoided = make_activity("boolean", values, policy="count-if-not-done")
        done = make_activity("boolean", values, policy="count-if-done")

        assert current_streak(avoided, clock) == 4
        assert current_streak(done, clock) == 0

    def test_goal_not_met_still_counts(self, make_activity, clock):
        activity = make_activity("quantity", {"2024-01-03": 1}, goal=5)

        assert current_streak(activity, clock) == 1


class TestCalculateStreaks:
    """Test the combined computation and the cache fields."""

    def test_gap_tolerance_differs_between_streaks(self, make_activity, clock):
        """A missing day breaks the current streak but not the longest one."""
        activity = make_activity("boolean", {"2024-01-01": True, "2024-01-03": True})

        assert calculate_streaks(activity, clock) == StreakSummary(current=1, longest=2)

    def test_empty_history_is_zero(self, make_activity, clock):
        assert calculate_streaks(make_activity("quantity", {}), clock) == (0, 0)

    def test_apply_streaks_updates_cache(self, make_activity, clock):
        activity = make_activity("boolean", {"2024-01-02": True, "2024-01-03": True})

        assert apply_streaks(activity, clock) is True
        assert activity["currentStreak"] == 2
        assert activity["longestStreak"] == 2

    def test_apply_streaks_reports_no_change(self, make_activity, clock):
        activity = make_activity("boolean", {"2024-01-03": True})
        apply_streaks(activity, clock)

        assert apply_streaks(activity, clock) is False
