"""
Constantes del calendario laboral.

Reexporta las constantes del dominio y añade las propias de la
infraestructura, organizadas por categorías para facilitar el mantenimiento.
"""

from typing import Dict

from ...core.models.constants import (
    YEAR_WINDOW,
    DAYS_PER_WEEK,
    HOURS_LIMITS,
    DEFAULT_WORKING_HOURS,
    ANNUAL_CONTRACT_HOURS,
    DEFAULT_HOURS_PER_DAY,
    MAX_VACATION_DAYS,
    TEXT_LIMITS,
    BALANCE_THRESHOLDS,
    PERCENTAGE_DECIMALS,
    WEEKDAY_NAMES,
    WEEKDAY_DISPLAY_NAMES,
    MONTH_NAMES,
    DOMAIN_WARNING_MESSAGES
)

# =====================================================================
# Persistencia y exportación
# =====================================================================

STORAGE_CONFIG = {
    "version": "1.0",
    "default_filename": "calendario-laboral-config.json"
}

SUPPORTED_EXPORT_FORMATS = ["csv", "json"]

FILE_EXTENSIONS: Dict[str, str] = {
    "csv": ".csv",
    "json": ".json"
}

# =====================================================================
# Logging
# =====================================================================

LOGGING_CONFIG = {
    "logger_name": "calendario_laboral",
    "level": "INFO",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}

# =====================================================================
# Mensajes del sistema
# =====================================================================

SUCCESS_MESSAGES = {
    "calendar_generated": "Calendario generado exitosamente",
    "configuration_saved": "Configuración guardada exitosamente",
    "calendar_exported": "Calendario exportado exitosamente"
}

WARNING_MESSAGES = {
    **DOMAIN_WARNING_MESSAGES,
    "storage_version": "La versión de la configuración guardada no coincide"
}

DEBUG_CONFIG = {
    "enable_debug": False
}
