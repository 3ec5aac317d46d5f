"""
Generación del calendario anual - Dominio puro.
"""

from typing import List, Optional

from ..models import CalendarConfiguration, CalendarDay, Year
from .resolver import DayStateResolver


class CalendarGenerator:
    """
    Generador del calendario anual.

    Produce exactamente un CalendarDay por fecha del año (365 o 366), en
    orden ascendente. El resultado depende solo del año y la configuración.
    """

    def __init__(self, resolver: Optional[DayStateResolver] = None):
        self.resolver = resolver or DayStateResolver()

    def generate(self, year: Year, config: CalendarConfiguration) -> List[CalendarDay]:
        """
        Genera todos los días del año.

        Args:
            year: Año a generar
            config: Configuración validada del calendario

        Returns:
            List[CalendarDay]: Días del año en orden ascendente
        """
        return [self.resolver.resolve(day, config) for day in year.dates()]

    def generate_for(self, config: CalendarConfiguration) -> List[CalendarDay]:
        """Genera el calendario del año de la propia configuración."""
        return self.generate(config.year, config)
