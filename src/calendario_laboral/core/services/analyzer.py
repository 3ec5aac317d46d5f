"""
Servicio de estadísticas del calendario - Dominio puro.

Este módulo agrega un calendario generado en recuentos por estado,
distribución semanal, desglose mensual y saldo de horas.
"""

from typing import Dict, List, Optional, Sequence

from ..models import (
    CalendarConfiguration, CalendarDay, DayCounts, DayState, DayStatistics, HoursBalance,
    MonthSummary, WeeklyDistribution, percentage
)
from ..models.constants import DAYS_PER_WEEK, DEFAULT_HOURS_PER_DAY


class StatisticsAggregator:
    """
    Agregador de estadísticas.

    Recorre los días una sola vez. No tiene caminos de error: cualquier
    división por cero se resuelve como 0.0.
    """

    def __init__(self, hours_per_day: float = DEFAULT_HOURS_PER_DAY,
                 balance_thresholds: Optional[Dict[str, float]] = None):
        """
        Args:
            hours_per_day: Horas de una jornada para expresar el saldo en días
            balance_thresholds: Umbrales del estado del saldo. Si es None, los estándar.
        """
        self.hours_per_day = hours_per_day
        self.balance_thresholds = balance_thresholds

    def aggregate(self, days: Sequence[CalendarDay],
                  config: Optional[CalendarConfiguration] = None) -> DayStatistics:
        """
        Calcula las estadísticas de un calendario.

        Args:
            days: Días generados
            config: Configuración; aporta las horas de convenio (0 si falta)

        Returns:
            DayStatistics: Estadísticas completas
        """
        counts: Dict[DayState, int] = {state: 0 for state in DayState}
        weekday_worked = [0] * DAYS_PER_WEEK
        weekday_extra = [0] * DAYS_PER_WEEK
        month_hours = [0.0] * 12
        month_extra = [0.0] * 12
        month_worked = [0] * 12
        total_hours = 0.0

        for day in days:
            counts[day.state] += 1
            total_hours += day.hours_worked
            month_index = day.month - 1
            month_hours[month_index] += day.hours_worked
            month_extra[month_index] += day.extra_hours

            if day.is_worked:
                weekday_worked[day.weekday] += 1
                month_worked[month_index] += 1
            if day.has_extra_shift:
                weekday_extra[day.weekday] += 1

        total_days = len(days)
        effective_days = total_days - counts[DayState.NO_CONTRATADO]

        state_percentages = {
            state: (0.0 if state == DayState.NO_CONTRATADO
                    else percentage(counts[state], effective_days))
            for state in DayState
        }

        monthly = tuple(
            MonthSummary(
                month=index + 1,
                worked_hours=round(month_hours[index], 2),
                worked_days=month_worked[index],
                extra_hours=round(month_extra[index], 2),
            )
            for index in range(12)
        )

        contract_hours = config.annual_contract_hours.hours if config is not None else 0.0

        return DayStatistics(
            total_days=total_days,
            effective_days=effective_days,
            day_counts=DayCounts(counts),
            state_percentages=state_percentages,
            weekly=WeeklyDistribution.from_counts(tuple(weekday_worked), tuple(weekday_extra)),
            monthly=monthly,
            hours_balance=HoursBalance.calculate(
                total_hours, contract_hours, self.hours_per_day, self.balance_thresholds
            ),
        )

    def monthly_hours(self, days: Sequence[CalendarDay]) -> List[float]:
        """Horas trabajadas por mes (enero primero)."""
        return [month.worked_hours for month in self.aggregate(days).monthly]
