"""
Application Use Cases - Casos de uso del calendario laboral.
"""

from .generate_calendar import (
    GenerateCalendarUseCase,
    CalendarGenerationRequest,
    CalendarGenerationResult
)
from .manage_overrides import (
    ManageOverridesUseCase,
    OverrideRequest,
    OverrideResult,
    OverrideKind,
    OverrideAction
)
from .export_calendar import (
    ExportCalendarUseCase,
    ExportRequest,
    ExportResult,
    ExportFormat
)

__all__ = [
    'GenerateCalendarUseCase',
    'CalendarGenerationRequest',
    'CalendarGenerationResult',
    'ManageOverridesUseCase',
    'OverrideRequest',
    'OverrideResult',
    'OverrideKind',
    'OverrideAction',
    'ExportCalendarUseCase',
    'ExportRequest',
    'ExportResult',
    'ExportFormat',
]
