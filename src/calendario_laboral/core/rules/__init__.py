"""
Core Rules - Reglas de dominio del calendario laboral.

Este paquete contiene las reglas de prioridad que deciden el estado de
cada día y los validadores del calendario generado.
"""

# Interfaces
from .interfaces import (
    RuleOutcome,
    StateRule,
    CalendarValidator,
    ValidationReport
)

# Reglas de estado
from .state_rules import (
    NotHiredRule,
    VacationRule,
    WorkedHolidayRule,
    GuardiaRule,
    HolidayRule,
    CycleRule,
    DEFAULT_STATE_RULES
)

# Validadores
from .validators import (
    DayCountValidator,
    HoursCoherenceValidator,
    ContractBoundaryValidator,
    OverrideCoverageValidator,
    CompositeCalendarValidator,
    default_calendar_validator
)

__all__ = [
    # Interfaces
    'RuleOutcome',
    'StateRule',
    'CalendarValidator',
    'ValidationReport',

    # Reglas de estado
    'NotHiredRule',
    'VacationRule',
    'WorkedHolidayRule',
    'GuardiaRule',
    'HolidayRule',
    'CycleRule',
    'DEFAULT_STATE_RULES',

    # Validadores
    'DayCountValidator',
    'HoursCoherenceValidator',
    'ContractBoundaryValidator',
    'OverrideCoverageValidator',
    'CompositeCalendarValidator',
    'default_calendar_validator',
]
