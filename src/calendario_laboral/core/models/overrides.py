"""
Hechos fechados que se superponen al ciclo base: festivos, vacaciones,
guardias y turnos extra.

Cada elemento se valida por sí mismo al construirse. Las reglas que
dependen del resto de la configuración (año objetivo, fechas duplicadas,
guardias sobre días de trabajo) se comprueban en CalendarConfiguration.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from .exceptions import CalendarConfigurationError, InvalidDateRangeError
from .working_hours import normalize_hours
from .constants import TEXT_LIMITS


def _require_date(value, field_name: str):
    # datetime es subclase de date; se exige una fecha pura
    if not isinstance(value, date) or isinstance(value, datetime):
        raise InvalidDateRangeError(f"{field_name} debe ser una fecha")


def _clean_text(value: Optional[str], limit: int, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise CalendarConfigurationError(f"{field_name} debe ser un texto")
    text = value.strip()
    if len(text) > limit:
        raise CalendarConfigurationError(
            f"{field_name} no puede superar {limit} caracteres"
        )
    return text or None


@dataclass(frozen=True)
class Holiday:
    """Festivo (inmutable). El nombre es opcional."""
    date: date
    name: Optional[str] = None

    def __post_init__(self):
        """Validación post-inicialización."""
        _require_date(self.date, "La fecha del festivo")
        object.__setattr__(
            self, "name", _clean_text(self.name, TEXT_LIMITS["holiday_name"], "El nombre del festivo")
        )

    @property
    def display_name(self) -> str:
        return self.name or "Festivo"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.display_name}"


@dataclass(frozen=True)
class VacationPeriod:
    """Periodo de vacaciones con ambos extremos incluidos."""
    start_date: date
    end_date: date
    description: Optional[str] = None

    def __post_init__(self):
        """Validación post-inicialización."""
        _require_date(self.start_date, "La fecha de inicio de vacaciones")
        _require_date(self.end_date, "La fecha de fin de vacaciones")
        if self.end_date < self.start_date:
            raise InvalidDateRangeError(
                "La fecha de fin debe ser igual o posterior a la fecha de inicio"
            )
        object.__setattr__(
            self, "description",
            _clean_text(self.description, TEXT_LIMITS["vacation_description"],
                        "La descripción de las vacaciones")
        )

    @property
    def days(self) -> int:
        """Número de días naturales del periodo."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps(self, other: 'VacationPeriod') -> bool:
        return self.start_date <= other.end_date and other.start_date <= self.end_date

    def is_adjacent(self, other: 'VacationPeriod') -> bool:
        """True si un periodo empieza justo al día siguiente de acabar el otro."""
        one_day = timedelta(days=1)
        return (self.end_date + one_day == other.start_date
                or other.end_date + one_day == self.start_date)

    def dates(self) -> Iterator[date]:
        for offset in range(self.days):
            yield self.start_date + timedelta(days=offset)

    def __str__(self) -> str:
        text = f"{self.start_date.isoformat()} - {self.end_date.isoformat()} ({self.days} días)"
        if self.description:
            text += f" {self.description}"
        return text


@dataclass(frozen=True)
class Guardia:
    """
    Guardia: turno trabajado en un día que de otro modo sería de descanso.

    Las horas deben estar en [0, 24]. Que la fecha no sea un día de
    trabajo del ciclo se comprueba al construir la configuración.
    """
    date: date
    hours: float
    description: str = ""

    def __post_init__(self):
        """Validación post-inicialización."""
        _require_date(self.date, "La fecha de la guardia")
        object.__setattr__(self, "hours", normalize_hours(self.hours, "la guardia"))
        object.__setattr__(
            self, "description",
            _clean_text(self.description, TEXT_LIMITS["guardia_description"],
                        "La descripción de la guardia") or ""
        )

    def __str__(self) -> str:
        return f"Guardia {self.date.isoformat()} ({self.hours:g} h)"


@dataclass(frozen=True)
class ExtraShift:
    """Turno extra: horas adicionales sobre cualquier día, sin cambiar su estado."""
    date: date
    hours: float
    description: str = ""

    def __post_init__(self):
        """Validación post-inicialización."""
        _require_date(self.date, "La fecha del turno extra")
        object.__setattr__(
            self, "hours", normalize_hours(self.hours, "el turno extra", allow_zero=False)
        )
        object.__setattr__(
            self, "description",
            _clean_text(self.description, TEXT_LIMITS["extra_shift_description"],
                        "La descripción del turno extra") or ""
        )

    def __str__(self) -> str:
        return f"Turno extra {self.date.isoformat()} (+{self.hours:g} h)"
