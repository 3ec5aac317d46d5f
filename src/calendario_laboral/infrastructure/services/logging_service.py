"""
Servicio de logging basado en el módulo estándar logging.
"""

import logging
from typing import Any, Dict, Optional

from ...application.ports import LoggingService
from ..config.constants import LOGGING_CONFIG


def configure_logger(name: Optional[str] = None, level: Optional[str] = None,
                     stream=None) -> logging.Logger:
    """
    Configura un logger con el formato del sistema.

    Solo añade un handler la primera vez, así llamarla varias veces no
    duplica los mensajes.
    """
    logger = logging.getLogger(name or LOGGING_CONFIG["logger_name"])
    logger.setLevel((level or LOGGING_CONFIG["level"]).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(
            LOGGING_CONFIG["log_format"], LOGGING_CONFIG["date_format"]
        ))
        logger.addHandler(handler)

    return logger


class StandardLoggingService(LoggingService):
    """Implementación de LoggingService sobre un logger con nombre."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Args:
            logger: Logger a usar. Si es None, se configura el del sistema.
        """
        self.logger = logger or configure_logger()

    @staticmethod
    def _format(message: str, context: Optional[Dict[str, Any]]) -> str:
        if not context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} ({details})"

    def log_generation_started(self, year: int) -> None:
        self.logger.info("Generando calendario de %s", year)

    def log_generation_completed(self, year: int, total_days: int,
                                 warnings_count: int) -> None:
        self.logger.info(
            "Calendario de %s generado: %d días, %d avisos", year, total_days, warnings_count
        )

    def log_export_performed(self, export_format: str, file_path: str) -> None:
        self.logger.info("Calendario exportado a %s: %s", export_format, file_path)

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.info(self._format(message, context))

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.warning(self._format(message, context))

    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        self.logger.error(
            self._format(f"Error en {operation}: {error}", context), exc_info=error
        )
