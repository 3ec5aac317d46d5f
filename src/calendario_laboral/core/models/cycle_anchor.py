"""
Inicio de contrato y anclaje del ciclo al calendario.

El ancla asocia una fecha de referencia con una posición del ciclo; la
posición de cualquier otra fecha se obtiene por diferencia de días:

    posicion(fecha) = (posicion_ancla + dias_entre(ancla, fecha)) mod L
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .exceptions import InvalidOffsetError
from .work_cycle import CycleDayType, CyclePosition, WorkCycle
from .year import Year


# Desfase explícito dentro de un ciclo por partes: misma forma que la
# posición explicada que se adjunta a cada día.
CycleOffset = CyclePosition


def cycle_offset(part_number: int, day_within_part: int,
                 day_type: Union[CycleDayType, str]) -> CycleOffset:
    """Crea un desfase aceptando el tipo de día como string."""
    if not isinstance(day_type, CycleDayType):
        day_type = CycleDayType.from_string(day_type)
    if not isinstance(part_number, int) or not isinstance(day_within_part, int):
        raise InvalidOffsetError("El número de parte y el día deben ser enteros")
    return CycleOffset(part_number, day_within_part, day_type)


@dataclass(frozen=True)
class StartedThisYear:
    """El contrato empieza dentro del año objetivo; los días previos son NoContratado."""
    start_date: date

    def __post_init__(self):
        """Validación post-inicialización."""
        if not isinstance(self.start_date, date):
            raise InvalidOffsetError("La fecha de inicio de contrato debe ser una fecha")

    def is_before_contract(self, day: date) -> bool:
        return day < self.start_date

    def __str__(self) -> str:
        return f"Contrato iniciado el {self.start_date.isoformat()}"


@dataclass(frozen=True)
class WorkedBefore:
    """
    El trabajador ya trabajaba antes del año objetivo.

    En modo por partes hace falta el desfase del 1 de enero; en modo
    semanal el desfase se ignora porque lo determina el día de la semana.
    """
    cycle_offset: Optional[CycleOffset] = None

    def is_before_contract(self, day: date) -> bool:
        return False

    def __str__(self) -> str:
        if self.cycle_offset is None:
            return "Trabajaba antes de este año"
        return f"Trabajaba antes de este año ({self.cycle_offset})"


ContractStart = Union[StartedThisYear, WorkedBefore]


@dataclass(frozen=True)
class CycleAnchor:
    """Fecha de referencia y su posición en el ciclo."""
    reference_date: date
    position: int
    cycle_length: int

    @classmethod
    def for_configuration(cls, cycle: WorkCycle, contract_start: ContractStart,
                          year: Year) -> 'CycleAnchor':
        """
        Calcula el ancla para un ciclo, un inicio de contrato y un año.

        - Semanal: 1 de enero con su día de la semana como posición.
        - Por partes, trabajaba antes: 1 de enero con el desfase indicado.
        - Por partes, empieza este año: la fecha de inicio es la posición 0
          (día 1 de trabajo de la parte 1).

        Raises:
            InvalidOffsetError: si falta el desfase o no es coherente con el ciclo
        """
        if cycle.is_weekly:
            return cls(year.first_day, year.first_day.weekday(), cycle.length)

        if isinstance(contract_start, StartedThisYear):
            return cls(contract_start.start_date, 0, cycle.length)

        if contract_start.cycle_offset is None:
            raise InvalidOffsetError(
                "Con un ciclo por partes hay que indicar en qué punto del ciclo "
                "estabas el 1 de enero"
            )
        return cls(year.first_day, cycle.index_of(contract_start.cycle_offset), cycle.length)

    def position_of(self, day: date) -> int:
        """Posición del ciclo para una fecha (admite fechas anteriores al ancla)."""
        return (self.position + (day - self.reference_date).days) % self.cycle_length
