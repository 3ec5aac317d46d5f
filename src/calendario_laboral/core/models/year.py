"""
Modelo de dominio para el año objetivo del calendario.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional

from .exceptions import CalendarConfigurationError
from .constants import YEAR_WINDOW


@dataclass(frozen=True, order=True)
class Year:
    """
    Año para el que se genera el calendario (inmutable).

    Solo se aceptan años dentro de la ventana [actual - 2, actual + 5].
    El año de referencia puede inyectarse para no depender del reloj.
    """
    value: int
    reference_year: Optional[int] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Validación post-inicialización."""
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise CalendarConfigurationError("El año debe ser un número entero")
        if self.value < 1000 or self.value > 9999:
            raise CalendarConfigurationError("El año debe tener 4 dígitos")

        current = self.reference_year if self.reference_year is not None else date.today().year
        min_year = current - YEAR_WINDOW["years_before"]
        max_year = current + YEAR_WINDOW["years_after"]
        if not min_year <= self.value <= max_year:
            raise CalendarConfigurationError(
                f"El año debe estar en el rango válido ({min_year} - {max_year})"
            )

    @classmethod
    def current(cls) -> 'Year':
        """Crea el año actual."""
        return cls(date.today().year)

    @property
    def is_leap(self) -> bool:
        """Indica si el año es bisiesto."""
        return calendar.isleap(self.value)

    @property
    def days_in_year(self) -> int:
        """Número de días del año (365 o 366)."""
        return 366 if self.is_leap else 365

    @property
    def first_day(self) -> date:
        return date(self.value, 1, 1)

    @property
    def last_day(self) -> date:
        return date(self.value, 12, 31)

    def contains(self, day: date) -> bool:
        """Verifica si una fecha pertenece a este año."""
        return day.year == self.value

    def dates(self) -> Iterator[date]:
        """Itera todas las fechas del año en orden ascendente."""
        for ordinal in range(self.first_day.toordinal(), self.last_day.toordinal() + 1):
            yield date.fromordinal(ordinal)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
