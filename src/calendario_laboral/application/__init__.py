"""
Application Use Cases - Casos de uso de la capa de aplicación.

Este paquete contiene todos los casos de uso que orquestan
la lógica de negocio del calendario laboral.
"""

from .use_cases.generate_calendar import (
    GenerateCalendarUseCase,
    CalendarGenerationRequest,
    CalendarGenerationResult
)

from .use_cases.manage_overrides import (
    ManageOverridesUseCase,
    OverrideRequest,
    OverrideResult,
    OverrideKind,
    OverrideAction
)

from .use_cases.export_calendar import (
    ExportCalendarUseCase,
    ExportRequest,
    ExportResult,
    ExportFormat
)

__all__ = [
    # Generate Calendar
    'GenerateCalendarUseCase',
    'CalendarGenerationRequest',
    'CalendarGenerationResult',

    # Manage Overrides
    'ManageOverridesUseCase',
    'OverrideRequest',
    'OverrideResult',
    'OverrideKind',
    'OverrideAction',

    # Export Calendar
    'ExportCalendarUseCase',
    'ExportRequest',
    'ExportResult',
    'ExportFormat',
]
