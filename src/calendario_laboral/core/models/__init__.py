"""
Core Models - Modelos de dominio puro para el calendario laboral.

Este paquete contiene todas las entidades y objetos de valor del dominio,
sin dependencias externas ni lógica de infraestructura.
"""

from .exceptions import (
    CalendarConfigurationError,
    InvalidCycleError,
    InvalidOffsetError,
    InvalidDateRangeError,
    InvalidGuardiaPlacementError,
    DuplicateDateError,
    InvalidHoursError,
    VacationLimitExceededError
)
from .year import Year
from .work_cycle import CycleMode, CycleDayType, CyclePart, CyclePosition, WorkCycle
from .cycle_anchor import (
    CycleOffset,
    cycle_offset,
    StartedThisYear,
    WorkedBefore,
    ContractStart,
    CycleAnchor
)
from .overrides import Holiday, VacationPeriod, Guardia, ExtraShift
from .working_hours import (
    DayType,
    HolidayPolicy,
    WorkingHoursConfig,
    AnnualContractHours,
    normalize_hours
)
from .calendar_day import DayState, CalendarDay
from .configuration import CalendarConfiguration, build_configuration
from .statistics import (
    BalanceStatus,
    BalanceType,
    DayCounts,
    WeekdayStats,
    WeeklyDistribution,
    MonthSummary,
    HoursBalance,
    DayStatistics,
    percentage
)

__all__ = [
    # Errores
    'CalendarConfigurationError',
    'InvalidCycleError',
    'InvalidOffsetError',
    'InvalidDateRangeError',
    'InvalidGuardiaPlacementError',
    'DuplicateDateError',
    'InvalidHoursError',
    'VacationLimitExceededError',

    # Año y ciclo
    'Year',
    'CycleMode',
    'CycleDayType',
    'CyclePart',
    'CyclePosition',
    'WorkCycle',
    'CycleOffset',
    'cycle_offset',
    'StartedThisYear',
    'WorkedBefore',
    'ContractStart',
    'CycleAnchor',

    # Overrides
    'Holiday',
    'VacationPeriod',
    'Guardia',
    'ExtraShift',

    # Horas
    'DayType',
    'HolidayPolicy',
    'WorkingHoursConfig',
    'AnnualContractHours',
    'normalize_hours',

    # Calendario
    'DayState',
    'CalendarDay',
    'CalendarConfiguration',
    'build_configuration',

    # Estadísticas
    'BalanceStatus',
    'BalanceType',
    'DayCounts',
    'WeekdayStats',
    'WeeklyDistribution',
    'MonthSummary',
    'HoursBalance',
    'DayStatistics',
    'percentage',
]
