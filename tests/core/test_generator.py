"""
tests/core/test_generator.py

Covers:
  - Completeness: one day per date, 365/366, ascending
  - Weekly and parts cycles (Mon-Fri, 4x2) and cycle periodicity
  - Contract start boundary (NoContratado) in both cycle modes
  - Rule priority: vacation > worked holiday > guardia > holiday > cycle
  - Holiday policy (work or respect holidays)
  - Extra shifts add hours without changing the state
  - Cycle metadata attached in parts mode
  - Determinism
"""

from datetime import date, timedelta

import pytest

from calendario_laboral.core.models import (
    DayState,
    ExtraShift,
    Guardia,
    Holiday,
    HolidayPolicy,
    StartedThisYear,
    VacationPeriod,
    WorkCycle,
    WorkingHoursConfig,
    build_configuration,
)
from calendario_laboral.core.rules import NotHiredRule, VacationRule
from calendario_laboral.core.services import DayStateResolver


# ── Helpers ───────────────────────────────────────────────────────────────────

def by_date(days):
    return {day.date: day for day in days}


def states_between(days, start, end):
    index = by_date(days)
    result = []
    current = start
    while current <= end:
        result.append(index[current].state)
        current += timedelta(days=1)
    return result


# ── Completeness ──────────────────────────────────────────────────────────────

class TestCompleteness:

    def test_leap_year(self, generator, weekday_config):
        days = generator.generate_for(weekday_config)
        assert len(days) == 366
        assert days[0].date == date(2024, 1, 1)
        assert days[-1].date == date(2024, 12, 31)

    def test_common_year(self, generator, year_2025, weekday_cycle):
        config = build_configuration(year_2025, weekday_cycle)
        assert len(generator.generate(year_2025, config)) == 365

    def test_dates_are_consecutive(self, generator, four_two_config):
        days = generator.generate_for(four_two_config)
        for previous, current in zip(days, days[1:]):
            assert current.date - previous.date == timedelta(days=1)

    def test_weekday_matches_date(self, generator, weekday_config):
        for day in generator.generate_for(weekday_config):
            assert day.weekday == day.date.weekday()

    def test_deterministic(self, generator, four_two_config):
        assert generator.generate_for(four_two_config) == generator.generate_for(four_two_config)


# ── Weekly cycle ──────────────────────────────────────────────────────────────

class TestWeeklyCycle:

    def test_monday_to_friday_2024(self, generator, weekday_config):
        days = generator.generate_for(weekday_config)
        work = [d for d in days if d.state == DayState.TRABAJO]
        rest = [d for d in days if d.state == DayState.DESCANSO]
        # 52 semanas completas más el lunes 30 y el martes 31 de diciembre
        assert len(work) == 262
        assert len(work) + len(rest) == 366
        assert all(d.weekday < 5 for d in work)

    def test_work_days_use_weekday_hours(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle, working_hours=WorkingHoursConfig(weekday=7.5)
        )
        day = by_date(generator.generate_for(config))[date(2024, 1, 2)]
        assert day.state == DayState.TRABAJO
        assert day.hours_worked == 7.5

    def test_rest_days_have_no_hours(self, generator, weekday_config):
        day = by_date(generator.generate_for(weekday_config))[date(2024, 1, 6)]
        assert day.state == DayState.DESCANSO
        assert day.hours_worked == 0.0

    def test_weekend_hours_apply_to_weekend_work(self, generator, year_2024):
        every_day = WorkCycle.weekly([True] * 7)
        config = build_configuration(
            year_2024, every_day, working_hours=WorkingHoursConfig(saturday=6, sunday=4)
        )
        index = by_date(generator.generate_for(config))
        assert index[date(2024, 1, 6)].hours_worked == 6.0
        assert index[date(2024, 1, 7)].hours_worked == 4.0

    def test_no_cycle_metadata(self, generator, weekday_config):
        assert all(d.cycle_metadata is None for d in generator.generate_for(weekday_config))


# ── Parts cycle ───────────────────────────────────────────────────────────────

class TestPartsCycle:

    def test_four_two_from_first_work_day(self, generator, four_two_config):
        days = generator.generate_for(four_two_config)
        assert states_between(days, date(2024, 1, 1), date(2024, 1, 7)) == [
            DayState.TRABAJO, DayState.TRABAJO, DayState.TRABAJO, DayState.TRABAJO,
            DayState.DESCANSO, DayState.DESCANSO, DayState.TRABAJO,
        ]

    def test_periodicity(self, generator, four_two_config):
        days = generator.generate_for(four_two_config)
        for day, later in zip(days, days[6:]):
            assert day.state == later.state

    def test_metadata_on_every_day(self, generator, four_two_config):
        days = generator.generate_for(four_two_config)
        assert all(d.cycle_metadata is not None for d in days)
        jan_7 = by_date(days)[date(2024, 1, 7)].cycle_metadata
        assert (jan_7.part_number, jan_7.day_within_part) == (1, 1)

    def test_metadata_matches_state(self, generator, four_two_config):
        for day in generator.generate_for(four_two_config):
            assert day.cycle_metadata.is_work_day == (day.state == DayState.TRABAJO)


# ── Contract start ────────────────────────────────────────────────────────────

class TestContractStart:

    def test_days_before_contract_not_hired(self, generator, july_hire_config):
        index = by_date(generator.generate_for(july_hire_config))
        assert index[date(2024, 6, 30)].state == DayState.NO_CONTRATADO
        assert index[date(2024, 6, 30)].hours_worked == 0.0
        # 1 de julio de 2024 es lunes
        assert index[date(2024, 7, 1)].state == DayState.TRABAJO

    def test_not_hired_count(self, generator, july_hire_config):
        days = generator.generate_for(july_hire_config)
        not_hired = [d for d in days if d.state == DayState.NO_CONTRATADO]
        assert len(not_hired) == 182

    def test_not_hired_beats_overrides(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle,
            contract_start=StartedThisYear(date(2024, 7, 1)),
            holidays=[Holiday(date(2024, 1, 1))],
            vacations=[VacationPeriod(date(2024, 6, 24), date(2024, 7, 5))],
        )
        index = by_date(generator.generate_for(config))
        assert index[date(2024, 1, 1)].state == DayState.NO_CONTRATADO
        assert index[date(2024, 6, 28)].state == DayState.NO_CONTRATADO
        assert index[date(2024, 7, 2)].state == DayState.VACACIONES

    def test_parts_cycle_starts_on_contract_date(self, generator, year_2024, four_two_cycle):
        config = build_configuration(
            year_2024, four_two_cycle, contract_start=StartedThisYear(date(2024, 3, 10))
        )
        days = generator.generate_for(config)
        assert states_between(days, date(2024, 3, 8), date(2024, 3, 16)) == [
            DayState.NO_CONTRATADO, DayState.NO_CONTRATADO,
            DayState.TRABAJO, DayState.TRABAJO, DayState.TRABAJO, DayState.TRABAJO,
            DayState.DESCANSO, DayState.DESCANSO, DayState.TRABAJO,
        ]


# ── Holidays ──────────────────────────────────────────────────────────────────

class TestHolidays:

    @pytest.fixture
    def config(self, year_2024, weekday_cycle):
        return build_configuration(
            year_2024, weekday_cycle,
            working_hours=WorkingHoursConfig(holiday=10),
            holidays=[Holiday(date(2024, 1, 1), "Año Nuevo"), Holiday(date(2024, 1, 6), "Reyes")],
        )

    def test_holiday_on_work_day_is_worked(self, generator, config):
        day = by_date(generator.generate_for(config))[date(2024, 1, 1)]
        assert day.state == DayState.FESTIVO_TRABAJADO
        assert day.hours_worked == 10.0
        assert day.description == "Año Nuevo"

    def test_holiday_on_rest_day(self, generator, config):
        day = by_date(generator.generate_for(config))[date(2024, 1, 6)]
        assert day.state == DayState.FESTIVO
        assert day.hours_worked == 0.0

    def test_respect_policy(self, generator, config):
        respected = config.with_changes(holiday_policy=HolidayPolicy.RESPETAR)
        day = by_date(generator.generate_for(respected))[date(2024, 1, 1)]
        assert day.state == DayState.FESTIVO
        assert day.hours_worked == 0.0


# ── Vacations ─────────────────────────────────────────────────────────────────

class TestVacations:

    def test_vacation_beats_holiday(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle,
            holidays=[Holiday(date(2024, 7, 4))],
            vacations=[VacationPeriod(date(2024, 7, 1), date(2024, 7, 15))],
        )
        days = generator.generate_for(config)
        day = by_date(days)[date(2024, 7, 4)]
        assert day.state == DayState.VACACIONES
        assert day.hours_worked == 0.0
        assert states_between(days, date(2024, 7, 1), date(2024, 7, 15)) == [DayState.VACACIONES] * 15

    def test_overlapping_periods_resolve_once(self, generator, year_2024, weekday_cycle):
        config = build_configuration(year_2024, weekday_cycle, vacations=[
            VacationPeriod(date(2024, 8, 1), date(2024, 8, 10)),
            VacationPeriod(date(2024, 8, 5), date(2024, 8, 15)),
        ])
        days = generator.generate_for(config)
        assert sum(1 for d in days if d.state == DayState.VACACIONES) == 15

    def test_vacation_beats_guardia(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle,
            vacations=[VacationPeriod(date(2024, 7, 1), date(2024, 7, 15))],
            guardias=[Guardia(date(2024, 7, 6), 12)],
        )
        assert by_date(generator.generate_for(config))[date(2024, 7, 6)].state == DayState.VACACIONES


# ── Guardias ──────────────────────────────────────────────────────────────────

class TestGuardias:

    def test_guardia_on_rest_day(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle, guardias=[Guardia(date(2024, 7, 6), 12, "Urgencias")]
        )
        day = by_date(generator.generate_for(config))[date(2024, 7, 6)]
        assert day.state == DayState.GUARDIA
        assert day.hours_worked == 12.0
        assert day.description == "Urgencias"

    def test_guardia_on_rest_holiday(self, generator, year_2024, weekday_cycle):
        # 17 de agosto de 2024 es sábado
        config = build_configuration(
            year_2024, weekday_cycle,
            holidays=[Holiday(date(2024, 8, 17))],
            guardias=[Guardia(date(2024, 8, 17), 8)],
        )
        day = by_date(generator.generate_for(config))[date(2024, 8, 17)]
        assert day.state == DayState.GUARDIA
        assert day.hours_worked == 8.0

    def test_guardia_on_respected_holiday(self, generator, year_2024, weekday_cycle):
        config = build_configuration(
            year_2024, weekday_cycle,
            holidays=[Holiday(date(2024, 8, 15))],
            guardias=[Guardia(date(2024, 8, 15), 10)],
            holiday_policy=HolidayPolicy.RESPETAR,
        )
        day = by_date(generator.generate_for(config))[date(2024, 8, 15)]
        assert day.state == DayState.GUARDIA
        assert day.hours_worked == 10.0

    def test_guardia_on_parts_rest_day(self, generator, four_two_config):
        config = four_two_config.with_changes(guardias=(Guardia(date(2024, 1, 5), 6),))
        day = by_date(generator.generate_for(config))[date(2024, 1, 5)]
        assert day.state == DayState.GUARDIA
        assert day.cycle_metadata.day_within_part == 5


# ── Extra shifts ──────────────────────────────────────────────────────────────

class TestExtraShifts:

    @pytest.fixture
    def config(self, year_2024, weekday_cycle):
        return build_configuration(
            year_2024, weekday_cycle,
            vacations=[VacationPeriod(date(2024, 8, 1), date(2024, 8, 5))],
            extra_shifts=[
                ExtraShift(date(2024, 7, 6), 3, "Inventario"),
                ExtraShift(date(2024, 7, 8), 2),
                ExtraShift(date(2024, 8, 2), 1.5),
            ],
        )

    def test_extra_on_rest_day_keeps_state(self, generator, config):
        day = by_date(generator.generate_for(config))[date(2024, 7, 6)]
        assert day.state == DayState.DESCANSO
        assert day.hours_worked == 3.0
        assert day.extra_hours == 3.0
        assert day.base_hours == 0.0
        assert day.description == "Inventario"
        assert day.is_worked

    def test_extra_on_work_day_adds_hours(self, generator, config):
        day = by_date(generator.generate_for(config))[date(2024, 7, 8)]
        assert day.state == DayState.TRABAJO
        assert day.hours_worked == 10.0

    def test_extra_on_vacation(self, generator, config):
        day = by_date(generator.generate_for(config))[date(2024, 8, 2)]
        assert day.state == DayState.VACACIONES
        assert day.hours_worked == 1.5

    def test_states_match_config_without_extras(self, generator, config):
        with_extras = generator.generate_for(config)
        without = generator.generate_for(config.with_changes(extra_shifts=()))
        assert [d.state for d in with_extras] == [d.state for d in without]


# ── Resolver ──────────────────────────────────────────────────────────────────

class TestResolver:

    def test_resolve_single_day(self, weekday_config):
        day = DayStateResolver().resolve(date(2024, 2, 29), weekday_config)
        assert day.state == DayState.TRABAJO
        assert day.weekday == 3

    def test_custom_rules_without_fallback(self, weekday_config):
        resolver = DayStateResolver([NotHiredRule(), VacationRule()])
        with pytest.raises(LookupError):
            resolver.resolve(date(2024, 2, 29), weekday_config)
