"""
Core Domain - Dominio puro del calendario laboral.

Este paquete contiene toda la lógica de dominio pura del sistema,
incluyendo modelos, reglas de estado y servicios de dominio.
"""

# Models - Entidades y objetos de valor
from .models import (
    Year,
    WorkCycle,
    CyclePosition,
    StartedThisYear,
    WorkedBefore,
    Holiday,
    VacationPeriod,
    Guardia,
    ExtraShift,
    WorkingHoursConfig,
    AnnualContractHours,
    HolidayPolicy,
    DayState,
    CalendarDay,
    CalendarConfiguration,
    DayStatistics,
    CalendarConfigurationError
)

# Rules - Reglas de estado y validadores
from .rules import (
    StateRule,
    DEFAULT_STATE_RULES,
    ValidationReport,
    default_calendar_validator
)

# Services - Servicios de dominio
from .services import (
    DayStateResolver,
    CalendarGenerator,
    StatisticsAggregator,
    ConfigurationReviewer,
    merge_overlapping
)

__all__ = [
    # Models
    'Year',
    'WorkCycle',
    'CyclePosition',
    'StartedThisYear',
    'WorkedBefore',
    'Holiday',
    'VacationPeriod',
    'Guardia',
    'ExtraShift',
    'WorkingHoursConfig',
    'AnnualContractHours',
    'HolidayPolicy',
    'DayState',
    'CalendarDay',
    'CalendarConfiguration',
    'DayStatistics',
    'CalendarConfigurationError',

    # Rules
    'StateRule',
    'DEFAULT_STATE_RULES',
    'ValidationReport',
    'default_calendar_validator',

    # Services
    'DayStateResolver',
    'CalendarGenerator',
    'StatisticsAggregator',
    'ConfigurationReviewer',
    'merge_overlapping',
]
