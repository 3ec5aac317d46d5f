"""
tests/core/test_statistics.py

Covers:
  - Percentage helper and balance status thresholds
  - Hours balance: sign, message, compliance, zero contract hours
  - Day counts and state percentages over effective days
  - Weekly distribution and tie-breaking
  - Monthly breakdown and internal consistency
  - Empty input
"""

from datetime import date

import pytest

from calendario_laboral.core.models import (
    BalanceStatus,
    BalanceType,
    DayState,
    ExtraShift,
    Guardia,
    HoursBalance,
    WeeklyDistribution,
    build_configuration,
    percentage,
)
from calendario_laboral.core.services import StatisticsAggregator


# ── Pure helpers ──────────────────────────────────────────────────────────────

class TestPercentage:

    def test_rounds_to_two_decimals(self):
        assert percentage(1, 3) == 33.33
        assert percentage(262, 366) == 71.58

    def test_zero_total(self):
        assert percentage(5, 0) == 0.0


class TestBalanceStatus:

    @pytest.mark.parametrize("compliance, expected", [
        (120.0, BalanceStatus.EXCELENTE),
        (105.0, BalanceStatus.EXCELENTE),
        (104.99, BalanceStatus.OK),
        (100.0, BalanceStatus.OK),
        (99.99, BalanceStatus.ADVERTENCIA),
        (95.0, BalanceStatus.ADVERTENCIA),
        (94.99, BalanceStatus.DEFICIT),
        (0.0, BalanceStatus.DEFICIT),
    ])
    def test_thresholds(self, compliance, expected):
        assert BalanceStatus.from_compliance(compliance) == expected

    def test_custom_thresholds(self):
        thresholds = {"excelente": 120.0, "ok": 110.0, "advertencia": 100.0}
        assert BalanceStatus.from_compliance(118.96, thresholds) == BalanceStatus.OK
        assert BalanceStatus.from_compliance(105.0, thresholds) == BalanceStatus.ADVERTENCIA
        assert BalanceStatus.from_compliance(99.0, thresholds) == BalanceStatus.DEFICIT


class TestHoursBalance:

    def test_company_owes_hours(self):
        balance = HoursBalance.calculate(2096, 1762)
        assert balance.balance == 334.0
        assert balance.balance_type == BalanceType.EMPRESA_DEBE
        assert balance.message == "La empresa te debe 334.00 horas"
        assert balance.compliance_percentage == 118.96
        assert balance.status == BalanceStatus.EXCELENTE
        assert balance.equivalent_days == 41.75

    def test_employee_owes_hours(self):
        balance = HoursBalance.calculate(1700, 1762)
        assert balance.balance == -62.0
        assert balance.absolute_balance == 62.0
        assert balance.balance_type == BalanceType.EMPLEADO_DEBE
        assert balance.message == "Debes 62.00 horas"
        assert balance.status == BalanceStatus.ADVERTENCIA
        assert balance.equivalent_days == 7.75

    def test_balanced(self):
        balance = HoursBalance.calculate(1762, 1762)
        assert balance.balance_type == BalanceType.EQUILIBRADO
        assert balance.message == "Horas equilibradas"
        assert balance.compliance_percentage == 100.0
        assert balance.status == BalanceStatus.OK

    def test_zero_contract_hours(self):
        balance = HoursBalance.calculate(100, 0)
        assert balance.compliance_percentage == 0.0
        assert balance.status == BalanceStatus.OK
        assert balance.balance_type == BalanceType.EMPRESA_DEBE

    def test_custom_hours_per_day(self):
        assert HoursBalance.calculate(1800, 1762, hours_per_day=7.6).equivalent_days == 5.0


class TestWeeklyDistribution:

    def test_ties_resolve_to_first_weekday(self):
        weekly = WeeklyDistribution.from_counts((3, 5, 5, 1, 1, 0, 0), (0,) * 7)
        assert weekly.most_worked == 1
        assert weekly.least_worked == 5
        assert weekly.most_worked_name == "martes"

    def test_nothing_worked(self):
        weekly = WeeklyDistribution.from_counts((0,) * 7, (0,) * 7)
        assert weekly.most_worked is None
        assert weekly.least_worked is None
        assert all(w.percentage == 0.0 for w in weekly.weekdays)


# ── Aggregation ───────────────────────────────────────────────────────────────

class TestAggregation:

    @pytest.fixture
    def statistics(self, generator, aggregator, weekday_config):
        return aggregator.aggregate(generator.generate_for(weekday_config), weekday_config)

    def test_counts(self, statistics):
        assert statistics.total_days == 366
        assert statistics.effective_days == 366
        assert statistics.count(DayState.TRABAJO) == 262
        assert statistics.count(DayState.DESCANSO) == 104
        assert statistics.count(DayState.VACACIONES) == 0
        assert statistics.day_counts.total == 366

    def test_state_percentages(self, statistics):
        assert statistics.percentage_of(DayState.TRABAJO) == 71.58
        assert statistics.percentage_of(DayState.DESCANSO) == 28.42
        assert statistics.percentage_of(DayState.FESTIVO) == 0.0

    def test_weekly_distribution(self, statistics):
        weekly = statistics.weekly
        assert weekly.total_worked_days == 262
        # 2024 tiene 53 lunes y 53 martes
        assert weekly.for_weekday(0).worked_days == 53
        assert weekly.for_weekday(1).worked_days == 53
        assert weekly.for_weekday(2).worked_days == 52
        assert weekly.for_weekday(5).worked_days == 0
        assert weekly.most_worked == 0
        assert weekly.least_worked == 5
        assert sum(w.worked_days for w in weekly.weekdays) == 262

    def test_monthly(self, statistics):
        january = statistics.month(1)
        assert january.name == "Enero"
        assert january.worked_days == 23
        assert january.worked_hours == 184.0
        assert len(statistics.monthly) == 12

    def test_balance(self, statistics):
        balance = statistics.hours_balance
        assert balance.hours_worked == 2096.0
        assert balance.contract_hours == 1762.0
        assert balance.status == BalanceStatus.EXCELENTE

    def test_custom_balance_thresholds(self, generator, weekday_config):
        aggregator = StatisticsAggregator(
            balance_thresholds={"excelente": 120.0, "ok": 100.0, "advertencia": 95.0}
        )
        statistics = aggregator.aggregate(generator.generate_for(weekday_config), weekday_config)
        assert statistics.hours_balance.compliance_percentage == 118.96
        assert statistics.hours_balance.status == BalanceStatus.OK

    def test_derived_totals(self, statistics):
        assert statistics.working_days == 262
        assert statistics.non_working_days == 104
        assert statistics.worked_days_total == 262
        assert statistics.work_percentage == 71.58

    def test_to_dict_keys(self, statistics):
        data = statistics.to_dict()
        assert data["dias_por_estado"]["Trabajo"] == 262
        assert data["saldo_horas"]["estado"] == "excelente"
        assert data["distribucion_semanal"]["mas_trabajado"] == "lunes"


class TestEffectiveDays:

    def test_not_hired_excluded_from_percentages(self, generator, aggregator, july_hire_config):
        statistics = aggregator.aggregate(generator.generate_for(july_hire_config), july_hire_config)
        assert statistics.not_hired_days == 182
        assert statistics.effective_days == 184
        assert statistics.percentage_of(DayState.NO_CONTRATADO) == 0.0
        effective_total = sum(
            statistics.percentage_of(state) for state in DayState
        )
        assert effective_total == pytest.approx(100.0, abs=0.05)

    def test_not_hired_months_have_no_hours(self, generator, aggregator, july_hire_config):
        statistics = aggregator.aggregate(generator.generate_for(july_hire_config), july_hire_config)
        assert all(statistics.month(m).worked_hours == 0.0 for m in range(1, 7))


class TestWorkedPredicate:

    @pytest.fixture
    def config(self, year_2024, weekday_cycle):
        return build_configuration(
            year_2024, weekday_cycle,
            guardias=[Guardia(date(2024, 7, 6), 12)],
            extra_shifts=[ExtraShift(date(2024, 7, 7), 4), ExtraShift(date(2024, 7, 8), 2)],
        )

    def test_guardia_and_extra_shift_count_as_worked(self, generator, aggregator, config):
        statistics = aggregator.aggregate(generator.generate_for(config), config)
        july = statistics.month(7)
        # 23 laborables + guardia del sábado + turno extra del domingo
        assert july.worked_days == 25
        assert july.extra_hours == 6.0
        assert july.worked_hours == 23 * 8 + 12 + 6
        assert statistics.weekly.for_weekday(6).worked_days == 1
        assert statistics.weekly.for_weekday(6).extra_shift_days == 1
        assert statistics.weekly.for_weekday(0).extra_shift_days == 1


class TestConsistency:

    def test_hours_add_up(self, generator, aggregator, four_two_config):
        days = generator.generate_for(four_two_config)
        statistics = aggregator.aggregate(days, four_two_config)
        monthly_total = sum(m.worked_hours for m in statistics.monthly)
        assert monthly_total == pytest.approx(statistics.hours_balance.hours_worked)
        assert statistics.hours_balance.hours_worked == pytest.approx(
            sum(d.hours_worked for d in days)
        )

    def test_counts_add_up(self, generator, aggregator, four_two_config):
        statistics = aggregator.aggregate(generator.generate_for(four_two_config))
        assert sum(statistics.day_counts.counts.values()) == statistics.total_days

    def test_without_config_contract_hours_are_zero(self, generator, aggregator, four_two_config):
        statistics = aggregator.aggregate(generator.generate_for(four_two_config))
        assert statistics.hours_balance.contract_hours == 0.0
        assert statistics.hours_balance.status == BalanceStatus.OK

    def test_monthly_hours(self, generator, aggregator, weekday_config):
        hours = aggregator.monthly_hours(generator.generate_for(weekday_config))
        assert len(hours) == 12
        assert hours[0] == 184.0


class TestEmptyInput:

    def test_empty_days(self):
        statistics = StatisticsAggregator().aggregate([])
        assert statistics.total_days == 0
        assert statistics.effective_days == 0
        assert all(pct == 0.0 for pct in statistics.state_percentages.values())
        assert statistics.weekly.most_worked is None
        assert statistics.hours_balance.message == "Horas equilibradas"
