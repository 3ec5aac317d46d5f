"""
Gestión de festivos, vacaciones, guardias y turnos extra - Dominio puro.

Cada operación recibe una configuración y devuelve otra nueva con la lista
correspondiente ordenada por fecha. Las validaciones de año, duplicados y
colocación de guardias las aplica la propia configuración al construirse.
"""

from datetime import date
from typing import Optional, Sequence, TypeVar

from ..models import (
    CalendarConfiguration, CalendarConfigurationError, DuplicateDateError, ExtraShift, Guardia,
    Holiday, VacationLimitExceededError, VacationPeriod
)
from ..models.constants import MAX_VACATION_DAYS
from .vacation_planner import total_vacation_days

T = TypeVar("T", Holiday, Guardia, ExtraShift)


def find_by_date(items: Sequence[T], day: date) -> Optional[T]:
    """Busca el elemento registrado para una fecha."""
    for item in items:
        if item.date == day:
            return item
    return None


def _sorted_by_date(items) -> tuple:
    return tuple(sorted(items, key=lambda item: item.date))


def _add_dated(items: Sequence[T], item: T, label: str) -> tuple:
    if find_by_date(items, item.date) is not None:
        raise DuplicateDateError(
            f"Ya existe un {label} para la fecha {item.date.isoformat()}"
        )
    return _sorted_by_date(list(items) + [item])


def _remove_dated(items: Sequence[T], day: date, label: str) -> tuple:
    if find_by_date(items, day) is None:
        raise CalendarConfigurationError(f"No existe ningún {label} el {day.isoformat()}")
    return tuple(item for item in items if item.date != day)


def _update_dated(items: Sequence[T], day: date, item: T, label: str) -> tuple:
    remaining = _remove_dated(items, day, label)
    return _add_dated(remaining, item, label)


# ── festivos ─────────────────────────────────────────────────────────────

def add_holiday(config: CalendarConfiguration, holiday: Holiday) -> CalendarConfiguration:
    return config.with_changes(holidays=_add_dated(config.holidays, holiday, "festivo"))


def remove_holiday(config: CalendarConfiguration, day: date) -> CalendarConfiguration:
    return config.with_changes(holidays=_remove_dated(config.holidays, day, "festivo"))


def update_holiday(config: CalendarConfiguration, day: date,
                   holiday: Holiday) -> CalendarConfiguration:
    return config.with_changes(holidays=_update_dated(config.holidays, day, holiday, "festivo"))


# ── guardias ─────────────────────────────────────────────────────────────

def add_guardia(config: CalendarConfiguration, guardia: Guardia) -> CalendarConfiguration:
    """Añade una guardia; falla si la fecha es un día de trabajo del ciclo."""
    return config.with_changes(guardias=_add_dated(config.guardias, guardia, "guardia"))


def remove_guardia(config: CalendarConfiguration, day: date) -> CalendarConfiguration:
    return config.with_changes(guardias=_remove_dated(config.guardias, day, "guardia"))


def update_guardia(config: CalendarConfiguration, day: date,
                   guardia: Guardia) -> CalendarConfiguration:
    return config.with_changes(guardias=_update_dated(config.guardias, day, guardia, "guardia"))


# ── turnos extra ─────────────────────────────────────────────────────────

def add_extra_shift(config: CalendarConfiguration, shift: ExtraShift) -> CalendarConfiguration:
    return config.with_changes(
        extra_shifts=_add_dated(config.extra_shifts, shift, "turno extra")
    )


def remove_extra_shift(config: CalendarConfiguration, day: date) -> CalendarConfiguration:
    return config.with_changes(
        extra_shifts=_remove_dated(config.extra_shifts, day, "turno extra")
    )


def update_extra_shift(config: CalendarConfiguration, day: date,
                       shift: ExtraShift) -> CalendarConfiguration:
    return config.with_changes(
        extra_shifts=_update_dated(config.extra_shifts, day, shift, "turno extra")
    )


# ── vacaciones ───────────────────────────────────────────────────────────

def _check_vacation_limit(periods: Sequence[VacationPeriod], max_days: int):
    total = total_vacation_days(periods)
    if total > max_days:
        raise VacationLimitExceededError(
            f"El total de vacaciones ({total} días) supera el máximo de {max_days} días"
        )


def _sorted_periods(periods) -> tuple:
    return tuple(sorted(periods, key=lambda p: (p.start_date, p.end_date)))


def add_vacation(config: CalendarConfiguration, period: VacationPeriod,
                 max_days: int = MAX_VACATION_DAYS) -> CalendarConfiguration:
    """
    Añade un periodo de vacaciones.

    Los solapes se toleran; el límite anual cuenta cada día una sola vez.

    Args:
        config: Configuración actual
        period: Periodo a añadir
        max_days: Días de vacaciones permitidos al año

    Raises:
        VacationLimitExceededError: si se superan los días anuales permitidos
    """
    periods = _sorted_periods(list(config.vacations) + [period])
    _check_vacation_limit(periods, max_days)
    return config.with_changes(vacations=periods)


def remove_vacation(config: CalendarConfiguration, index: int) -> CalendarConfiguration:
    if not 0 <= index < len(config.vacations):
        raise CalendarConfigurationError(f"No existe el periodo de vacaciones {index}")
    periods = config.vacations[:index] + config.vacations[index + 1:]
    return config.with_changes(vacations=periods)


def update_vacation(config: CalendarConfiguration, index: int, period: VacationPeriod,
                    max_days: int = MAX_VACATION_DAYS) -> CalendarConfiguration:
    if not 0 <= index < len(config.vacations):
        raise CalendarConfigurationError(f"No existe el periodo de vacaciones {index}")
    periods = list(config.vacations)
    periods[index] = period
    periods = _sorted_periods(periods)
    _check_vacation_limit(periods, max_days)
    return config.with_changes(vacations=periods)
