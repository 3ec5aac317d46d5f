"""
Modelo de dominio para el ciclo de trabajo/descanso.

Un ciclo se repite indefinidamente y no tiene inicio propio: la alineación
con el calendario la aporta el ancla (ver cycle_anchor.py). Hay dos modos:

- Semanal: máscara de 7 días empezando en lunes.
- Por partes: lista ordenada de bloques trabajo/descanso, p. ej. 6-3, 6-3, 6-2.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from .exceptions import InvalidCycleError, InvalidOffsetError
from .constants import DAYS_PER_WEEK, WEEKDAY_DISPLAY_NAMES


class CycleMode(Enum):
    """Modos de ciclo disponibles."""
    WEEKLY = "WEEKLY"
    PARTS = "PARTS"


class CycleDayType(Enum):
    """Tipo de día dentro de una parte del ciclo."""
    WORK = "WORK"
    REST = "REST"

    @classmethod
    def from_string(cls, value: str) -> 'CycleDayType':
        """Convierte string a CycleDayType (acepta también 'Trabajo'/'Descanso')."""
        if not isinstance(value, str):
            raise InvalidOffsetError(f"Tipo de día inválido: {value!r}")
        aliases = {"TRABAJO": cls.WORK, "DESCANSO": cls.REST}
        normalized = value.strip().upper()
        if normalized in aliases:
            return aliases[normalized]
        for day_type in cls:
            if day_type.value == normalized:
                return day_type
        raise InvalidOffsetError(f"Tipo de día inválido: {value}")


@dataclass(frozen=True)
class CyclePart:
    """Un bloque de días de trabajo seguido de días de descanso."""
    work_days: int
    rest_days: int

    @property
    def length(self) -> int:
        return self.work_days + self.rest_days

    def day_type_at(self, day_within_part: int) -> CycleDayType:
        """Tipo de día para una posición 1-based dentro de la parte."""
        return CycleDayType.WORK if day_within_part <= self.work_days else CycleDayType.REST


@dataclass(frozen=True)
class CyclePosition:
    """
    Posición explicada dentro de un ciclo por partes.

    Se adjunta a cada día del calendario para explicar el resultado;
    no se usa para ningún cálculo posterior.
    """
    part_number: int
    day_within_part: int
    day_type: CycleDayType

    @property
    def is_work_day(self) -> bool:
        return self.day_type == CycleDayType.WORK

    def to_dict(self) -> dict:
        return {
            "partNumber": self.part_number,
            "dayWithinPart": self.day_within_part,
            "dayType": self.day_type.value,
        }

    def __str__(self) -> str:
        day_type_text = "trabajo" if self.is_work_day else "descanso"
        return f"Parte {self.part_number}, día {self.day_within_part} ({day_type_text})"


@dataclass(frozen=True)
class WorkCycle:
    """
    Ciclo de trabajo/descanso (inmutable).

    Usar los constructores `weekly` y `from_parts`; ambos validan
    y lanzan InvalidCycleError si el ciclo está mal formado.
    """
    mode: CycleMode
    weekly_mask: Optional[Tuple[bool, ...]] = None
    parts: Optional[Tuple[CyclePart, ...]] = None

    def __post_init__(self):
        """Validación post-inicialización."""
        if self.mode == CycleMode.WEEKLY:
            self._validate_weekly()
        else:
            self._validate_parts()

        # Secuencia aplanada precalculada: posición -> (parte, día, tipo)
        object.__setattr__(self, "_sequence", self._build_sequence())

    @classmethod
    def weekly(cls, mask: Sequence[bool]) -> 'WorkCycle':
        """
        Crea un ciclo semanal.

        Args:
            mask: 7 booleanos de lunes a domingo (True = trabajo)
        """
        return cls(mode=CycleMode.WEEKLY, weekly_mask=tuple(bool(day) for day in mask))

    @classmethod
    def from_parts(cls, parts: Iterable) -> 'WorkCycle':
        """
        Crea un ciclo por partes.

        Args:
            parts: CyclePart, pares (trabajo, descanso) o dicts con
                   workDays/restDays
        """
        return cls(mode=CycleMode.PARTS, parts=tuple(_coerce_part(part) for part in parts))

    def _validate_weekly(self):
        if self.weekly_mask is None or len(self.weekly_mask) != DAYS_PER_WEEK:
            raise InvalidCycleError("La máscara semanal debe tener 7 días (Lunes a Domingo)")
        if not any(self.weekly_mask):
            raise InvalidCycleError("La máscara semanal debe tener al menos un día trabajado")

    def _validate_parts(self):
        if not self.parts:
            raise InvalidCycleError("Debe haber al menos una parte en el ciclo")
        for index, part in enumerate(self.parts, start=1):
            if part.work_days <= 0:
                raise InvalidCycleError(
                    f"Los días de trabajo en la parte {index} deben ser mayor que 0"
                )
            if part.rest_days <= 0:
                raise InvalidCycleError(
                    f"Los días de descanso en la parte {index} deben ser mayor que 0"
                )

    def _build_sequence(self) -> Tuple[CyclePosition, ...]:
        if self.mode == CycleMode.WEEKLY:
            return ()
        sequence = []
        for part_number, part in enumerate(self.parts, start=1):
            for day in range(1, part.length + 1):
                sequence.append(CyclePosition(part_number, day, part.day_type_at(day)))
        return tuple(sequence)

    # ── propiedades ──────────────────────────────────────────────────────

    @property
    def is_weekly(self) -> bool:
        return self.mode == CycleMode.WEEKLY

    @property
    def is_parts(self) -> bool:
        return self.mode == CycleMode.PARTS

    @property
    def length(self) -> int:
        """Longitud del ciclo en días (7 en modo semanal)."""
        if self.is_weekly:
            return DAYS_PER_WEEK
        return len(self._sequence)

    @property
    def total_parts(self) -> int:
        """Número de partes (un ciclo semanal cuenta como una parte)."""
        return 1 if self.is_weekly else len(self.parts)

    @property
    def work_days_per_cycle(self) -> int:
        if self.is_weekly:
            return sum(1 for day in self.weekly_mask if day)
        return sum(part.work_days for part in self.parts)

    def get_part(self, part_number: int) -> Optional[CyclePart]:
        """Obtiene una parte por número 1-based, o None si no existe."""
        if self.is_weekly or part_number < 1 or part_number > len(self.parts):
            return None
        return self.parts[part_number - 1]

    # ── posiciones ───────────────────────────────────────────────────────

    def is_work_day(self, position: int) -> bool:
        """
        Indica si una posición del ciclo es de trabajo.

        Args:
            position: Índice relativo al ciclo (no una fecha); se reduce
                      módulo la longitud del ciclo

        Returns:
            bool: True si la posición corresponde a un día de trabajo
        """
        if self.is_weekly:
            return self.weekly_mask[position % DAYS_PER_WEEK]
        return self._sequence[position % len(self._sequence)].is_work_day

    def describe_position(self, position: int) -> Optional[CyclePosition]:
        """Parte, día dentro de la parte y tipo para una posición (solo modo partes)."""
        if self.is_weekly:
            return None
        return self._sequence[position % len(self._sequence)]

    def index_of(self, offset: CyclePosition) -> int:
        """
        Convierte una posición explicada (parte, día, tipo) en índice del ciclo.

        Raises:
            InvalidOffsetError: si la parte no existe, el día está fuera de
                la parte o el tipo de día no coincide con el día indicado
        """
        if self.is_weekly:
            raise InvalidOffsetError("Los ciclos semanales no admiten posición explícita")

        part = self.get_part(offset.part_number)
        if part is None:
            raise InvalidOffsetError(
                f"La parte {offset.part_number} no existe (el ciclo tiene {len(self.parts)})"
            )
        if not 1 <= offset.day_within_part <= part.length:
            raise InvalidOffsetError(
                f"El día {offset.day_within_part} está fuera de la parte "
                f"{offset.part_number} (1 - {part.length})"
            )
        if part.day_type_at(offset.day_within_part) != offset.day_type:
            expected = part.day_type_at(offset.day_within_part)
            raise InvalidOffsetError(
                f"El día {offset.day_within_part} de la parte {offset.part_number} "
                f"es de tipo {expected.value}, no {offset.day_type.value}"
            )

        preceding = sum(p.length for p in self.parts[:offset.part_number - 1])
        return preceding + offset.day_within_part - 1

    # ── representación ───────────────────────────────────────────────────

    @property
    def display_text(self) -> str:
        if self.is_weekly:
            return f"Semanal: {self.work_days_per_cycle} días de trabajo"
        parts_text = ", ".join(f"{p.work_days}-{p.rest_days}" for p in self.parts)
        return f"Por partes: {parts_text}"

    @property
    def description(self) -> str:
        if self.is_weekly:
            days = [name for name, works in zip(WEEKDAY_DISPLAY_NAMES, self.weekly_mask) if works]
            return "Trabajas: " + ", ".join(days)
        if len(self.parts) == 1:
            part = self.parts[0]
            return (f"{part.work_days} días de trabajo, {part.rest_days} días de descanso "
                    f"(repetido indefinidamente)")
        return f"{len(self.parts)} partes que se repiten"

    def to_dict(self) -> dict:
        if self.is_weekly:
            return {"mode": self.mode.value, "weeklyMask": list(self.weekly_mask)}
        return {
            "mode": self.mode.value,
            "parts": [{"workDays": p.work_days, "restDays": p.rest_days} for p in self.parts],
        }

    def __str__(self) -> str:
        return self.display_text


def _coerce_part(part) -> CyclePart:
    if isinstance(part, CyclePart):
        return part
    if isinstance(part, dict):
        work = part.get("workDays", part.get("work_days"))
        rest = part.get("restDays", part.get("rest_days"))
    else:
        try:
            work, rest = part
        except (TypeError, ValueError):
            raise InvalidCycleError(f"Parte de ciclo inválida: {part!r}")
    if not isinstance(work, int) or not isinstance(rest, int):
        raise InvalidCycleError("Los días de trabajo y descanso deben ser enteros")
    return CyclePart(work, rest)
