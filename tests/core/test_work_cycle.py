"""
tests/core/test_work_cycle.py

Covers:
  - Year window, leap years and date iteration
  - Weekly and parts cycle construction and validation
  - Position lookups and explained positions
  - Offset to index conversion
  - Cycle anchor for every contract start / cycle mode combination
"""

from datetime import date

import pytest

from calendario_laboral.core.models import (
    CalendarConfigurationError,
    CycleAnchor,
    CycleDayType,
    CycleMode,
    CyclePart,
    CyclePosition,
    InvalidCycleError,
    InvalidOffsetError,
    StartedThisYear,
    WorkCycle,
    WorkedBefore,
    Year,
    cycle_offset,
)


# ── Year ──────────────────────────────────────────────────────────────────────

class TestYear:

    def test_leap_year_has_366_days(self, year_2024):
        assert year_2024.is_leap
        assert year_2024.days_in_year == 366
        assert len(list(year_2024.dates())) == 366

    def test_common_year_has_365_days(self, year_2025):
        assert not year_2025.is_leap
        assert len(list(year_2025.dates())) == 365

    def test_dates_are_ascending_and_bounded(self, year_2024):
        dates = list(year_2024.dates())
        assert dates[0] == date(2024, 1, 1)
        assert dates[-1] == date(2024, 12, 31)
        assert dates == sorted(dates)

    def test_window_accepts_edges(self):
        assert Year(2022, reference_year=2024).value == 2022
        assert Year(2029, reference_year=2024).value == 2029

    @pytest.mark.parametrize("value", [2021, 2030])
    def test_window_rejects_outside(self, value):
        with pytest.raises(CalendarConfigurationError):
            Year(value, reference_year=2024)

    @pytest.mark.parametrize("value", ["2024", 2024.0, True])
    def test_rejects_non_integer(self, value):
        with pytest.raises(CalendarConfigurationError):
            Year(value, reference_year=2024)

    def test_contains(self, year_2024):
        assert year_2024.contains(date(2024, 6, 1))
        assert not year_2024.contains(date(2025, 1, 1))

    def test_equality_ignores_reference_year(self):
        assert Year(2024, reference_year=2024) == Year(2024, reference_year=2025)


# ── Weekly cycle ──────────────────────────────────────────────────────────────

class TestWeeklyCycle:

    def test_basic_properties(self, weekday_cycle):
        assert weekday_cycle.mode == CycleMode.WEEKLY
        assert weekday_cycle.length == 7
        assert weekday_cycle.work_days_per_cycle == 5
        assert weekday_cycle.total_parts == 1

    def test_position_is_weekday(self, weekday_cycle):
        assert weekday_cycle.is_work_day(0)
        assert weekday_cycle.is_work_day(4)
        assert not weekday_cycle.is_work_day(5)
        assert not weekday_cycle.is_work_day(6)
        # módulo 7
        assert weekday_cycle.is_work_day(7)

    def test_no_explained_position(self, weekday_cycle):
        assert weekday_cycle.describe_position(3) is None

    def test_mask_must_have_seven_days(self):
        with pytest.raises(InvalidCycleError):
            WorkCycle.weekly([True] * 6)

    def test_mask_needs_a_work_day(self):
        with pytest.raises(InvalidCycleError):
            WorkCycle.weekly([False] * 7)

    def test_index_of_not_supported(self, weekday_cycle):
        with pytest.raises(InvalidOffsetError):
            weekday_cycle.index_of(cycle_offset(1, 1, "WORK"))

    def test_description_lists_days(self, weekday_cycle):
        assert weekday_cycle.description == "Trabajas: Lunes, Martes, Miércoles, Jueves, Viernes"

    def test_to_dict(self, weekday_cycle):
        assert weekday_cycle.to_dict() == {
            "mode": "WEEKLY",
            "weeklyMask": [True, True, True, True, True, False, False],
        }


# ── Parts cycle ───────────────────────────────────────────────────────────────

class TestPartsCycle:

    @pytest.fixture
    def multi_part(self):
        return WorkCycle.from_parts([(6, 3), (6, 3), (6, 2)])

    def test_length_is_sum_of_parts(self, multi_part):
        assert multi_part.length == 26
        assert multi_part.total_parts == 3
        assert multi_part.work_days_per_cycle == 18

    def test_accepts_dicts_and_parts(self):
        cycle = WorkCycle.from_parts([{"workDays": 4, "restDays": 2}, CyclePart(5, 2)])
        assert cycle.parts == (CyclePart(4, 2), CyclePart(5, 2))

    def test_sequence_follows_parts(self, four_two_cycle):
        pattern = [four_two_cycle.is_work_day(i) for i in range(12)]
        assert pattern == [True] * 4 + [False] * 2 + [True] * 4 + [False] * 2

    def test_explained_position(self, multi_part):
        assert multi_part.describe_position(0) == CyclePosition(1, 1, CycleDayType.WORK)
        assert multi_part.describe_position(8) == CyclePosition(1, 9, CycleDayType.REST)
        assert multi_part.describe_position(9) == CyclePosition(2, 1, CycleDayType.WORK)
        assert multi_part.describe_position(25) == CyclePosition(3, 8, CycleDayType.REST)
        assert multi_part.describe_position(26) == CyclePosition(1, 1, CycleDayType.WORK)

    @pytest.mark.parametrize("parts", [[], [(0, 2)], [(4, 0)], [(4, -1)]])
    def test_rejects_invalid_parts(self, parts):
        with pytest.raises(InvalidCycleError):
            WorkCycle.from_parts(parts)

    def test_rejects_non_integer_days(self):
        with pytest.raises(InvalidCycleError):
            WorkCycle.from_parts([(4.5, 2)])

    def test_get_part(self, multi_part):
        assert multi_part.get_part(2) == CyclePart(6, 3)
        assert multi_part.get_part(0) is None
        assert multi_part.get_part(4) is None

    def test_display_text(self, multi_part):
        assert multi_part.display_text == "Por partes: 6-3, 6-3, 6-2"


# ── Offsets ───────────────────────────────────────────────────────────────────

class TestOffsets:

    def test_index_of_first_day(self, four_two_cycle):
        assert four_two_cycle.index_of(cycle_offset(1, 1, "WORK")) == 0

    def test_index_of_rest_day(self, four_two_cycle):
        assert four_two_cycle.index_of(cycle_offset(1, 5, "REST")) == 4

    def test_index_of_second_part(self):
        cycle = WorkCycle.from_parts([(6, 3), (6, 2)])
        assert cycle.index_of(cycle_offset(2, 7, "REST")) == 15

    def test_day_type_must_match(self, four_two_cycle):
        with pytest.raises(InvalidOffsetError):
            four_two_cycle.index_of(cycle_offset(1, 5, "WORK"))

    def test_day_out_of_part(self, four_two_cycle):
        with pytest.raises(InvalidOffsetError):
            four_two_cycle.index_of(cycle_offset(1, 7, "REST"))

    def test_missing_part(self, four_two_cycle):
        with pytest.raises(InvalidOffsetError):
            four_two_cycle.index_of(cycle_offset(2, 1, "WORK"))

    def test_spanish_day_type_aliases(self):
        assert cycle_offset(1, 1, "Trabajo").day_type == CycleDayType.WORK
        assert cycle_offset(1, 5, "descanso").day_type == CycleDayType.REST

    def test_unknown_day_type(self):
        with pytest.raises(InvalidOffsetError):
            cycle_offset(1, 1, "LIBRE")

    @pytest.mark.parametrize("day_type", [1, None, ["WORK"]])
    def test_non_text_day_type(self, day_type):
        with pytest.raises(InvalidOffsetError):
            cycle_offset(1, 1, day_type)
        with pytest.raises(InvalidOffsetError):
            CycleDayType.from_string(day_type)


# ── Anchor ────────────────────────────────────────────────────────────────────

class TestCycleAnchor:

    def test_weekly_anchor_uses_weekday(self, weekday_cycle, year_2025):
        anchor = CycleAnchor.for_configuration(weekday_cycle, WorkedBefore(), year_2025)
        # 1 de enero de 2025 es miércoles
        assert anchor.reference_date == date(2025, 1, 1)
        assert anchor.position == 2
        assert anchor.position_of(date(2025, 1, 6)) == 0

    def test_weekly_anchor_ignores_contract_start(self, weekday_cycle, year_2024):
        anchor = CycleAnchor.for_configuration(
            weekday_cycle, StartedThisYear(date(2024, 3, 6)), year_2024
        )
        assert anchor.position_of(date(2024, 3, 6)) == date(2024, 3, 6).weekday()

    def test_parts_worked_before_uses_offset(self, four_two_cycle, year_2024):
        anchor = CycleAnchor.for_configuration(
            four_two_cycle, WorkedBefore(cycle_offset(1, 3, "WORK")), year_2024
        )
        assert anchor.position == 2
        assert anchor.position_of(date(2024, 1, 3)) == 4

    def test_parts_worked_before_requires_offset(self, four_two_cycle, year_2024):
        with pytest.raises(InvalidOffsetError):
            CycleAnchor.for_configuration(four_two_cycle, WorkedBefore(), year_2024)

    def test_parts_started_this_year_pins_first_day(self, four_two_cycle, year_2024):
        start = date(2024, 3, 10)
        anchor = CycleAnchor.for_configuration(four_two_cycle, StartedThisYear(start), year_2024)
        assert anchor.position_of(start) == 0
        assert anchor.position_of(date(2024, 3, 14)) == 4
        # fechas anteriores al ancla también tienen posición
        assert anchor.position_of(date(2024, 3, 9)) == 5
