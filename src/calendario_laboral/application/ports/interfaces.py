"""
Interfaces y contratos para la capa de aplicación.

Este módulo define todas las interfaces que la capa de aplicación
necesita para interactuar con la infraestructura.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ...core.models import CalendarConfiguration, CalendarDay, DayStatistics


# =====================================================================
# Repository Interfaces
# =====================================================================

class ConfigurationRepository(ABC):
    """Interfaz para el repositorio de configuraciones de calendario."""

    @abstractmethod
    def save(self, config: CalendarConfiguration) -> bool:
        """
        Guarda una configuración.

        Args:
            config: Configuración a guardar

        Returns:
            bool: True si se guardó exitosamente
        """
        pass

    @abstractmethod
    def load(self) -> Optional[CalendarConfiguration]:
        """
        Carga la configuración guardada.

        Returns:
            CalendarConfiguration o None si no hay ninguna guardada
        """
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Verifica si hay una configuración guardada."""
        pass

    @abstractmethod
    def delete(self) -> bool:
        """
        Elimina la configuración guardada.

        Returns:
            bool: True si se eliminó algo
        """
        pass

    @abstractmethod
    def get_metadata(self) -> Optional[Dict[str, Any]]:
        """
        Obtiene versión y fecha de guardado sin reconstruir la configuración.

        Returns:
            Dict con metadatos o None si no existe
        """
        pass


# =====================================================================
# Export Interfaces
# =====================================================================

class CalendarExporter(ABC):
    """Interfaz base para adaptadores de exportación."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Formato que produce el adaptador (csv, json...)."""
        pass

    @abstractmethod
    def export_calendar(self, days: Sequence[CalendarDay], statistics: DayStatistics,
                        output_path: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
        """
        Exporta un calendario y sus estadísticas.

        Args:
            days: Días generados
            statistics: Estadísticas del calendario
            output_path: Ruta de salida
            options: Opciones específicas del formato

        Returns:
            List[str]: Rutas de los ficheros escritos
        """
        pass

    @abstractmethod
    def validate_options(self, options: Dict[str, Any]) -> List[str]:
        """
        Valida las opciones proporcionadas.

        Args:
            options: Opciones a validar

        Returns:
            List[str]: Lista de errores de validación
        """
        pass


# =====================================================================
# Logging Interfaces
# =====================================================================

class LoggingService(ABC):
    """Interfaz para el servicio de logging."""

    @abstractmethod
    def log_generation_started(self, year: int) -> None:
        """Registra el inicio de generación de un calendario."""
        pass

    @abstractmethod
    def log_generation_completed(self, year: int, total_days: int,
                                 warnings_count: int) -> None:
        """Registra la finalización de generación de un calendario."""
        pass

    @abstractmethod
    def log_export_performed(self, export_format: str, file_path: str) -> None:
        """Registra una exportación realizada."""
        pass

    @abstractmethod
    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra información general."""
        pass

    @abstractmethod
    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Registra una advertencia."""
        pass

    @abstractmethod
    def log_error(self, operation: str, error: Exception,
                  context: Optional[Dict[str, Any]] = None) -> None:
        """Registra un error."""
        pass
