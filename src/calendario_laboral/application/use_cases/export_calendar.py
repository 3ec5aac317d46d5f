"""
Caso de uso: Exportar el calendario a diferentes formatos.

Este módulo implementa la exportación del calendario generado y sus
estadísticas a CSV o JSON mediante adaptadores de infraestructura.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...core.models import CalendarDay, DayStatistics
from ...infrastructure.config.constants import FILE_EXTENSIONS, SUCCESS_MESSAGES
from ..ports import CalendarExporter, LoggingService


class ExportFormat(Enum):
    """Formatos de exportación disponibles."""
    CSV = "csv"
    JSON = "json"

    @classmethod
    def from_string(cls, format_str: str) -> 'ExportFormat':
        """Convierte string a ExportFormat."""
        for export_format in cls:
            if export_format.value == format_str.lower():
                return export_format
        raise ValueError(f"Formato de exportación inválido: {format_str}")


@dataclass
class ExportRequest:
    """Solicitud de exportación de calendario."""
    days: Sequence[CalendarDay]
    statistics: DayStatistics
    format: ExportFormat
    output_path: str
    options: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> List[str]:
        """Valida la solicitud de exportación."""
        errors = []

        if not self.days:
            errors.append("No hay días que exportar")

        if not self.output_path.strip():
            errors.append("La ruta de salida es requerida")
        else:
            expected_extension = FILE_EXTENSIONS[self.format.value]
            if not self.output_path.endswith(expected_extension):
                errors.append(
                    f"La ruta debe terminar en {expected_extension} "
                    f"para formato {self.format.value}"
                )

            output_dir = Path(self.output_path).parent
            if not output_dir.exists():
                errors.append(f"El directorio de salida no existe: {output_dir}")

        return errors


@dataclass
class ExportResult:
    """Resultado de la exportación."""
    success: bool
    format: ExportFormat
    files: List[str]
    file_size_bytes: int
    export_time: float
    message: str
    errors: List[str]

    @property
    def output_path(self) -> Optional[str]:
        return self.files[0] if self.files else None

    @classmethod
    def success_result(cls, format: ExportFormat, files: List[str],
                       export_time: float) -> 'ExportResult':
        """Crea un resultado exitoso."""
        return cls(
            success=True,
            format=format,
            files=files,
            file_size_bytes=sum(Path(f).stat().st_size for f in files),
            export_time=export_time,
            message=SUCCESS_MESSAGES["calendar_exported"],
            errors=[]
        )

    @classmethod
    def failure_result(cls, format: ExportFormat, message: str,
                       errors: List[str] = None) -> 'ExportResult':
        """Crea un resultado de fallo."""
        return cls(
            success=False,
            format=format,
            files=[],
            file_size_bytes=0,
            export_time=0.0,
            message=message,
            errors=errors or []
        )


class ExportCalendarUseCase:
    """
    Caso de uso para exportar calendarios.

    Elige el adaptador según el formato solicitado.
    """

    def __init__(self, exporters: Sequence[CalendarExporter],
                 logging_service: Optional[LoggingService] = None):
        """
        Inicializa el caso de uso.

        Args:
            exporters: Adaptadores de exportación disponibles
            logging_service: Servicio de logging (opcional)
        """
        self.exporters: Dict[str, CalendarExporter] = {e.format_name: e for e in exporters}
        self.logging_service = logging_service

    @property
    def supported_formats(self) -> List[str]:
        return sorted(self.exporters)

    def execute(self, request: ExportRequest) -> ExportResult:
        """
        Ejecuta la exportación.

        Args:
            request: Solicitud de exportación

        Returns:
            ExportResult: Resultado de la exportación
        """
        start_time = datetime.now()

        try:
            validation_errors = request.validate()
            exporter = self.exporters.get(request.format.value)
            if exporter is None:
                validation_errors.append(
                    f"No hay adaptador para el formato {request.format.value}"
                )
            else:
                validation_errors.extend(exporter.validate_options(request.options))

            if validation_errors:
                return ExportResult.failure_result(
                    request.format,
                    "Solicitud inválida: " + "; ".join(validation_errors),
                    errors=validation_errors
                )

            files = exporter.export_calendar(
                request.days, request.statistics, request.output_path, request.options
            )

            if self.logging_service:
                self.logging_service.log_export_performed(request.format.value, request.output_path)

            export_time = (datetime.now() - start_time).total_seconds()
            return ExportResult.success_result(request.format, files, export_time)

        except Exception as e:
            if self.logging_service:
                self.logging_service.log_error("calendar_export", e, {
                    "format": request.format.value,
                    "output_path": request.output_path
                })

            return ExportResult.failure_result(
                request.format, f"Error durante la exportación: {str(e)}"
            )
