# File: tests/unit/test_overlap_layout.py
"""
Unit tests for the overlap layout engine.
"""

import itertools
import random

import pytest
from class_scheduler.core.overlap_layout import layout, layout_with_warnings
from conftest import make_event


def by_id(placed):
    return {p.id: p for p in placed}


def assert_no_shared_column_overlap(placed):
    for a, b in itertools.combinations(placed, 2):
        if a.column_count == b.column_count and a.column_index == b.column_index and a.overlaps_with(b):
            # Same lane is only legal across different clusters, which never overlap
            pytest.fail(f"{a.id} and {b.id} overlap in column {a.column_index}")


# ==================== Scenarios ====================

class TestScenarios:
    """Fixed layouts that must not change."""

    def test_three_way_transitive_cluster(self, overlapping_events):
        placed = by_id(layout(overlapping_events))

        assert placed["a"].column_index == 0
        assert placed["b"].column_index == 1
        assert placed["c"].column_index == 2
        assert {p.column_count for p in placed.values()} == {3}

    def test_adjacent_events_share_column(self):
        events = [make_event("08:00", "09:00", "first"), make_event("09:00", "10:00", "second")]

        placed = by_id(layout(events))

        assert placed["first"].column_index == 0
        assert placed["second"].column_index == 0
        assert placed["first"].column_count == 1
        assert placed["second"].column_count == 1

    def test_column_reused_inside_cluster(self):
        """A lane that frees up is reused before a new one is opened."""
        events = [
            make_event("08:00", "12:00", "long"),
            make_event("08:30", "09:30", "early"),
            make_event("10:00", "11:00", "late"),
        ]

        placed = by_id(layout(events))

        assert placed["early"].column_index == 1
        assert placed["late"].column_index == 1
        assert placed["long"].column_count == 2

    def test_chain_without_pairwise_overlap_is_one_cluster(self):
        events = [
            make_event("08:00", "09:00", "x"),
            make_event("08:30", "10:00", "y"),
            make_event("09:30", "11:00", "z"),
        ]

        placed = by_id(layout(events))

        # x and z never touch but are linked through y
        assert placed["x"].column_index == 0
        assert placed["y"].column_index == 1
        assert placed["z"].column_index == 0
        assert {p.column_count for p in placed.values()} == {2}

    def test_separate_clusters_have_own_column_count(self):
        events = [
            make_event("08:00", "10:00", "m1"),
            make_event("09:00", "10:00", "m2"),
            make_event("14:00", "15:00", "afternoon"),
        ]

        placed = by_id(layout(events))

        assert placed["m1"].column_count == 2
        assert placed["m2"].column_count == 2
        assert placed["afternoon"].column_count == 1
        assert placed["afternoon"].column_index == 0


# ==================== Ordering ====================

class TestOrdering:
    """Sort order and tie-breaks."""

    def test_output_sorted_by_start(self):
        events = [make_event("11:00", "12:00", "late"), make_event("07:00", "08:00", "early")]

        assert [p.id for p in layout(events)] == ["early", "late"]

    def test_longer_event_first_on_same_start(self):
        events = [make_event("09:00", "09:30", "short"), make_event("09:00", "11:00", "long")]

        placed = layout(events)

        assert [p.id for p in placed] == ["long", "short"]
        assert by_id(placed)["long"].column_index == 0

    def test_identical_events_keep_input_order(self):
        events = [make_event("10:00", "11:00", "first"), make_event("10:00", "11:00", "second")]

        placed = by_id(layout(events))

        assert placed["first"].column_index == 0
        assert placed["second"].column_index == 1

    def test_input_order_is_not_mutated(self, overlapping_events):
        shuffled = list(reversed(overlapping_events))
        snapshot = list(shuffled)

        layout(shuffled)

        assert shuffled == snapshot


# ==================== Geometry ====================

class TestGeometry:
    """Derived minutes and percentages."""

    def test_minutes_are_derived(self):
        placed = layout([make_event("09:15", "11:00")])[0]

        assert placed.start_minutes == 555
        assert placed.end_minutes == 660
        assert placed.duration_minutes == 105

    def test_single_event_full_width(self):
        placed = layout([make_event("08:00", "09:00")])[0]

        assert placed.column_count == 1
        assert placed.left_percent == 0
        assert placed.width_percent == 100

    def test_percentages_in_three_columns(self, overlapping_events):
        placed = by_id(layout(overlapping_events))

        assert placed["b"].left_percent == pytest.approx(100 / 3)
        assert placed["c"].left_percent == pytest.approx(200 / 3)
        assert placed["a"].width_percent == pytest.approx(100 / 3)

    def test_source_event_passed_through(self):
        event = make_event("08:00", "09:00", color="#14b8a6")

        placed = layout([event])[0]

        assert placed.event is event
        assert placed.event.color == "#14b8a6"


# ==================== Edge Cases ====================

class TestEdgeCases:
    """Empty, degenerate and malformed input."""

    def test_empty_day(self):
        assert layout([]) == []

    def test_zero_duration_event_still_placed(self):
        events = [make_event("10:00", "12:00", "class"), make_event("11:00", "11:00", "marker")]

        placed = by_id(layout(events))

        assert placed["marker"].duration_minutes == 0
        assert placed["marker"].column_index == 1

    def test_negative_duration_event_still_placed(self):
        placed = layout([make_event("10:00", "09:00", "reversed")])

        assert len(placed) == 1
        assert placed[0].duration_minutes == -60
        assert placed[0].end_minutes == 540

    def test_malformed_event_excluded_with_warning(self):
        events = [make_event("08:00", "09:00", "ok"), make_event("8h", "09:00", "bad")]

        placed, warnings = layout_with_warnings(events)

        assert [p.id for p in placed] == ["ok"]
        assert len(warnings) == 1
        assert warnings[0].event_id == "bad"
        assert "excluded from layout" in str(warnings[0])

    def test_layout_does_not_raise_on_malformed_event(self):
        assert layout([make_event("99:00", "10:00")]) == []


# ==================== Properties ====================

def random_day(seed, size):
    rng = random.Random(seed)
    events = []
    for i in range(size):
        start = rng.randrange(6 * 60, 20 * 60, 15)
        length = rng.choice([15, 30, 45, 60, 90, 120, 180])
        end = min(start + length, 23 * 60 + 59)
        events.append(make_event(
            f"{start // 60:02d}:{start % 60:02d}",
            f"{end // 60:02d}:{end % 60:02d}",
            f"e{i}",
        ))
    return events


@pytest.mark.parametrize("seed", range(25))
class TestLayoutProperties:
    """Invariants over random days."""

    def test_full_coverage(self, seed):
        events = random_day(seed, seed + 1)

        placed = layout(events)

        assert sorted(p.id for p in placed) == sorted(e.id for e in events)

    def test_no_overlap_in_same_column(self, seed):
        assert_no_shared_column_overlap(layout(random_day(seed, 30)))

    def test_column_count_covers_concurrency(self, seed):
        placed = layout(random_day(seed, 30))

        for p in placed:
            assert 0 <= p.column_index < p.column_count
            concurrent = [q for q in placed if q.start_minutes <= p.start_minutes < q.end_minutes]
            assert p.column_count >= len(concurrent)

    def test_overlapping_events_share_column_count(self, seed):
        placed = layout(random_day(seed, 30))

        for a, b in itertools.combinations(placed, 2):
            if a.overlaps_with(b):
                assert a.column_count == b.column_count

    def test_deterministic(self, seed):
        events = random_day(seed, 20)

        first = [(p.id, p.column_index, p.column_count) for p in layout(events)]
        second = [(p.id, p.column_index, p.column_count) for p in layout(events)]

        assert first == second
