"""
Infrastructure Config - Configuración del sistema.

Este paquete contiene toda la configuración del sistema,
incluyendo constantes, configuraciones y utilidades.
"""

from .constants import (
    YEAR_WINDOW,
    HOURS_LIMITS,
    DEFAULT_WORKING_HOURS,
    ANNUAL_CONTRACT_HOURS,
    MAX_VACATION_DAYS,
    BALANCE_THRESHOLDS,
    STORAGE_CONFIG,
    SUPPORTED_EXPORT_FORMATS,
    LOGGING_CONFIG
)

from .settings import (
    Settings,
    settings,
    get_hours_per_day,
    get_storage_path,
    get_log_level,
    is_debug_mode
)

__all__ = [
    # Constants
    'YEAR_WINDOW',
    'HOURS_LIMITS',
    'DEFAULT_WORKING_HOURS',
    'ANNUAL_CONTRACT_HOURS',
    'MAX_VACATION_DAYS',
    'BALANCE_THRESHOLDS',
    'STORAGE_CONFIG',
    'SUPPORTED_EXPORT_FORMATS',
    'LOGGING_CONFIG',

    # Settings
    'Settings',
    'settings',
    'get_hours_per_day',
    'get_storage_path',
    'get_log_level',
    'is_debug_mode',
]
