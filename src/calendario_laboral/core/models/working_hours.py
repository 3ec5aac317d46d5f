"""
Parámetros de horas: jornada por tipo de día, horas anuales de convenio
y política de festivos.

Estos valores solo intervienen en el cálculo de horas, nunca en la
resolución del estado de un día (salvo la política de festivos).
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import List, Optional

from .exceptions import InvalidHoursError
from .constants import (
    ANNUAL_CONTRACT_HOURS, DEFAULT_WORKING_HOURS, HOURS_LIMITS, DOMAIN_WARNING_MESSAGES
)


def normalize_hours(value, field_name: str, allow_zero: bool = True) -> float:
    """
    Valida y redondea un valor de horas a 2 decimales.

    Args:
        value: Horas a validar
        field_name: Nombre del campo para el mensaje de error
        allow_zero: Si False, el valor debe ser estrictamente positivo

    Raises:
        InvalidHoursError: si no es numérico o está fuera de [0, 24]
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidHoursError(f"Las horas de {field_name} deben ser un número")
    if value != value:  # NaN
        raise InvalidHoursError(f"Las horas de {field_name} deben ser un número")
    if value < HOURS_LIMITS["min"]:
        raise InvalidHoursError(f"Las horas de {field_name} no pueden ser negativas")
    if not allow_zero and value == 0:
        raise InvalidHoursError(f"Las horas de {field_name} deben ser mayores que 0")
    if value > HOURS_LIMITS["max"]:
        raise InvalidHoursError(
            f"Las horas de {field_name} no pueden superar {HOURS_LIMITS['max']:g}"
        )
    return round(float(value), HOURS_LIMITS["decimal_places"])


class DayType(Enum):
    """Clase de día a efectos de horas."""
    WEEKDAY = "laborable"
    SATURDAY = "sabado"
    SUNDAY = "domingo"
    HOLIDAY = "festivo"

    @classmethod
    def for_date(cls, day: date) -> 'DayType':
        """Clase de día según el día de la semana (no considera festivos)."""
        weekday = day.weekday()
        if weekday == 5:
            return cls.SATURDAY
        if weekday == 6:
            return cls.SUNDAY
        return cls.WEEKDAY


class HolidayPolicy(Enum):
    """Cómo se tratan los festivos que caen en un día de trabajo del ciclo."""
    TRABAJAR = "trabajar_festivos"
    RESPETAR = "respetar_festivos"

    @classmethod
    def from_string(cls, policy_str: str) -> 'HolidayPolicy':
        """Convierte string a HolidayPolicy."""
        for policy in cls:
            if policy.value == policy_str or policy.name == policy_str:
                return policy
        raise ValueError(f"Política de festivos inválida: {policy_str}")

    @property
    def works_holidays(self) -> bool:
        return self == HolidayPolicy.TRABAJAR

    @property
    def description(self) -> str:
        if self.works_holidays:
            return "Trabajas los festivos que caen en día de trabajo"
        return "Los festivos no se trabajan"


@dataclass(frozen=True)
class WorkingHoursConfig:
    """Horas de jornada por tipo de día (inmutable, normalizadas a 2 decimales)."""
    weekday: float = DEFAULT_WORKING_HOURS["weekday"]
    saturday: float = DEFAULT_WORKING_HOURS["saturday"]
    sunday: float = DEFAULT_WORKING_HOURS["sunday"]
    holiday: float = DEFAULT_WORKING_HOURS["holiday"]

    def __post_init__(self):
        """Validación post-inicialización."""
        for field_name, label in (("weekday", "entre semana"), ("saturday", "sábado"),
                                  ("sunday", "domingo"), ("holiday", "festivo")):
            object.__setattr__(self, field_name, normalize_hours(getattr(self, field_name), label))

    def hours_for(self, day: date) -> float:
        """Horas de jornada para una fecha según su día de la semana."""
        return self.hours_for_type(DayType.for_date(day))

    def hours_for_type(self, day_type: DayType) -> float:
        return {
            DayType.WEEKDAY: self.weekday,
            DayType.SATURDAY: self.saturday,
            DayType.SUNDAY: self.sunday,
            DayType.HOLIDAY: self.holiday,
        }[day_type]

    def updated(self, **changes) -> 'WorkingHoursConfig':
        """Devuelve una copia con los cambios indicados, validada de nuevo."""
        return replace(self, **changes)

    def zero_hour_types(self) -> List[DayType]:
        """Tipos de día configurados con 0 horas."""
        return [day_type for day_type in DayType if self.hours_for_type(day_type) == 0]

    def to_dict(self) -> dict:
        return {
            "weekday": self.weekday,
            "saturday": self.saturday,
            "sunday": self.sunday,
            "holiday": self.holiday,
        }


@dataclass(frozen=True)
class AnnualContractHours:
    """Horas anuales fijadas por convenio."""
    hours: float = ANNUAL_CONTRACT_HOURS["default"]

    def __post_init__(self):
        """Validación post-inicialización."""
        if isinstance(self.hours, bool) or not isinstance(self.hours, (int, float)):
            raise InvalidHoursError("Las horas anuales deben ser un número")
        if self.hours < ANNUAL_CONTRACT_HOURS["min"]:
            raise InvalidHoursError("Las horas anuales deben ser mayores que 0")
        if self.hours > ANNUAL_CONTRACT_HOURS["max"]:
            raise InvalidHoursError(
                f"Las horas anuales no pueden superar {ANNUAL_CONTRACT_HOURS['max']}"
            )
        object.__setattr__(self, "hours", round(float(self.hours), 2))

    @classmethod
    def from_weekly_hours(cls, weekly_hours: float) -> 'AnnualContractHours':
        """Calcula las horas anuales a partir de las semanales (x 52 semanas)."""
        if isinstance(weekly_hours, bool) or not isinstance(weekly_hours, (int, float)):
            raise InvalidHoursError("Las horas semanales deben ser un número")
        if weekly_hours <= 0 or weekly_hours > ANNUAL_CONTRACT_HOURS["max_weekly_hours"]:
            raise InvalidHoursError(
                f"Las horas semanales deben estar entre 0 y "
                f"{ANNUAL_CONTRACT_HOURS['max_weekly_hours']}"
            )
        return cls(round(weekly_hours * ANNUAL_CONTRACT_HOURS["weeks_per_year"]))

    def to_weekly_hours(self) -> float:
        return round(self.hours / ANNUAL_CONTRACT_HOURS["weeks_per_year"], 2)

    @property
    def warning(self) -> Optional[str]:
        """Aviso no bloqueante si las horas salen del rango habitual."""
        if self.hours < ANNUAL_CONTRACT_HOURS["warning_low"]:
            return DOMAIN_WARNING_MESSAGES["annual_hours_low"]
        if self.hours > ANNUAL_CONTRACT_HOURS["warning_high"]:
            return DOMAIN_WARNING_MESSAGES["annual_hours_high"]
        return None

    def __float__(self) -> float:
        return self.hours

    def __str__(self) -> str:
        return f"{self.hours:g} horas/año"
