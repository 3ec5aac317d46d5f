"""
Día del calendario resuelto y su estado.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional

from .work_cycle import CyclePosition
from .constants import MONTH_NAMES, WEEKDAY_NAMES


class DayState(Enum):
    """Estados posibles de un día del calendario (conjunto cerrado)."""
    TRABAJO = "Trabajo"
    DESCANSO = "Descanso"
    VACACIONES = "Vacaciones"
    GUARDIA = "Guardia"
    FESTIVO = "Festivo"
    FESTIVO_TRABAJADO = "FestivoTrabajado"
    NO_CONTRATADO = "NoContratado"

    @classmethod
    def from_string(cls, state_str: str) -> 'DayState':
        """Convierte string a DayState."""
        for state in cls:
            if state.value == state_str:
                return state
        raise ValueError(f"Estado de día inválido: {state_str}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Retorna todos los valores como strings."""
        return [state.value for state in cls]

    @property
    def is_worked(self) -> bool:
        """Estados que implican haber trabajado ese día."""
        return self in (DayState.TRABAJO, DayState.FESTIVO_TRABAJADO, DayState.GUARDIA)


@dataclass(frozen=True)
class CalendarDay:
    """
    Un día del año con su estado y horas trabajadas (inmutable).

    Se recalcula entero en cada generación; nunca se modifica.
    """
    date: date
    weekday: int
    state: DayState
    hours_worked: float = 0.0
    extra_hours: float = 0.0
    cycle_metadata: Optional[CyclePosition] = None
    description: Optional[str] = None

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def iso_week(self) -> int:
        return self.date.isocalendar()[1]

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.date.month - 1]

    @property
    def has_extra_shift(self) -> bool:
        return self.extra_hours > 0

    @property
    def is_worked(self) -> bool:
        """Trabajo, festivo trabajado, guardia o cualquier día con turno extra."""
        return self.state.is_worked or self.has_extra_shift

    @property
    def base_hours(self) -> float:
        """Horas del estado, sin el turno extra."""
        return round(self.hours_worked - self.extra_hours, 2)

    def to_dict(self) -> dict:
        metadata = self.cycle_metadata
        return {
            "fecha": self.date.isoformat(),
            "dia_semana": self.weekday_name,
            "mes": self.month,
            "semana": self.iso_week,
            "estado": self.state.value,
            "horas": self.hours_worked,
            "horas_extra": self.extra_hours,
            "parte": metadata.part_number if metadata else None,
            "dia_parte": metadata.day_within_part if metadata else None,
            "tipo_dia_ciclo": metadata.day_type.value if metadata else None,
            "descripcion": self.description,
        }

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.state.value} ({self.hours_worked:g} h)"
