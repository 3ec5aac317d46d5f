"""
Calendario laboral: generación de calendarios anuales a partir de ciclos
de trabajo/descanso, festivos, vacaciones, guardias y turnos extra.
"""

from .core import (
    Year,
    WorkCycle,
    CalendarConfiguration,
    CalendarGenerator,
    StatisticsAggregator,
    DayState
)

__version__ = "1.0.0"

__all__ = [
    'Year',
    'WorkCycle',
    'CalendarConfiguration',
    'CalendarGenerator',
    'StatisticsAggregator',
    'DayState',
    '__version__',
]
