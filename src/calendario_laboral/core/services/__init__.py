"""
Core Services - Servicios de dominio del calendario laboral.

Este paquete contiene los servicios que orquestan la lógica de dominio:
resolución de días, generación del calendario, estadísticas y gestión
de vacaciones y overrides.
"""

# Resolución y generación
from .resolver import DayStateResolver
from .generator import CalendarGenerator

# Estadísticas
from .analyzer import StatisticsAggregator

# Vacaciones
from .vacation_planner import (
    VacationOverlap,
    vacation_dates,
    total_vacation_days,
    detect_overlaps,
    has_overlaps,
    merge_overlapping
)

# Gestión de overrides
from .override_manager import (
    find_by_date,
    add_holiday,
    remove_holiday,
    update_holiday,
    add_guardia,
    remove_guardia,
    update_guardia,
    add_extra_shift,
    remove_extra_shift,
    update_extra_shift,
    add_vacation,
    remove_vacation,
    update_vacation
)

# Revisión de configuración
from .configuration_review import ConfigurationReviewer

__all__ = [
    # Generación
    'DayStateResolver',
    'CalendarGenerator',

    # Estadísticas
    'StatisticsAggregator',

    # Vacaciones
    'VacationOverlap',
    'vacation_dates',
    'total_vacation_days',
    'detect_overlaps',
    'has_overlaps',
    'merge_overlapping',

    # Overrides
    'find_by_date',
    'add_holiday',
    'remove_holiday',
    'update_holiday',
    'add_guardia',
    'remove_guardia',
    'update_guardia',
    'add_extra_shift',
    'remove_extra_shift',
    'update_extra_shift',
    'add_vacation',
    'remove_vacation',
    'update_vacation',

    # Revisión
    'ConfigurationReviewer',
]
