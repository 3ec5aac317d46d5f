"""
Caso de uso: Generar el calendario anual.

Este módulo coordina la generación del calendario, el cálculo de
estadísticas y las validaciones posteriores a partir de una
configuración recibida o guardada.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ...core.models import CalendarConfiguration, CalendarDay, DayStatistics
from ...core.rules import CalendarValidator, default_calendar_validator
from ...core.services import CalendarGenerator, ConfigurationReviewer, StatisticsAggregator
from ...infrastructure.config.constants import SUCCESS_MESSAGES
from ..ports import ConfigurationRepository, LoggingService


@dataclass
class CalendarGenerationRequest:
    """
    Solicitud de generación de calendario.

    Si no se indica configuración se usa la guardada en el repositorio.
    """
    configuration: Optional[CalendarConfiguration] = None
    validate_calendar: bool = True
    review_configuration: bool = True

    def validate(self, has_repository: bool = False) -> List[str]:
        """Valida la solicitud de generación."""
        errors = []

        if self.configuration is None and not has_repository:
            errors.append("No se ha indicado ninguna configuración ni repositorio del que cargarla")
        elif self.configuration is not None and not isinstance(
                self.configuration, CalendarConfiguration):
            errors.append("La configuración indicada no es válida")

        return errors


@dataclass
class CalendarGenerationResult:
    """Resultado de la generación del calendario."""
    success: bool
    configuration: Optional[CalendarConfiguration]
    days: List[CalendarDay]
    statistics: Optional[DayStatistics]
    generation_time: float
    errors: List[str]
    warnings: List[str]
    message: str
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Salida {days, statistics} lista para serializar."""
        return {
            "days": [day.to_dict() for day in self.days],
            "statistics": self.statistics.to_dict() if self.statistics else None,
        }

    @classmethod
    def success_result(cls, configuration: CalendarConfiguration, days: List[CalendarDay],
                       statistics: DayStatistics, generation_time: float,
                       warnings: List[str]) -> 'CalendarGenerationResult':
        """Crea un resultado exitoso."""
        return cls(
            success=True,
            configuration=configuration,
            days=days,
            statistics=statistics,
            generation_time=generation_time,
            errors=[],
            warnings=warnings,
            message=SUCCESS_MESSAGES["calendar_generated"],
            stats={
                "year": configuration.year.value,
                "total_days": statistics.total_days,
                "effective_days": statistics.effective_days,
                "hours_worked": statistics.hours_balance.hours_worked,
                "balance_status": statistics.hours_balance.status.value,
            },
        )

    @classmethod
    def failure_result(cls, message: str,
                       errors: List[str] = None) -> 'CalendarGenerationResult':
        """Crea un resultado de fallo."""
        return cls(
            success=False,
            configuration=None,
            days=[],
            statistics=None,
            generation_time=0.0,
            errors=errors or [],
            warnings=[],
            message=message
        )


class GenerateCalendarUseCase:
    """
    Caso de uso para generar calendarios anuales.

    Une generador, agregador de estadísticas, validador del calendario
    y revisión de la configuración. Nunca lanza excepciones: los fallos
    se devuelven como resultado de fallo.
    """

    def __init__(self,
                 configuration_repository: Optional[ConfigurationRepository] = None,
                 logging_service: Optional[LoggingService] = None,
                 generator: Optional[CalendarGenerator] = None,
                 aggregator: Optional[StatisticsAggregator] = None,
                 validator: Optional[CalendarValidator] = None,
                 reviewer: Optional[ConfigurationReviewer] = None):
        """
        Inicializa el caso de uso.

        Args:
            configuration_repository: Repositorio de configuraciones (opcional)
            logging_service: Servicio de logging (opcional)
            generator: Generador de calendario (opcional)
            aggregator: Agregador de estadísticas (opcional)
            validator: Validador del calendario generado (opcional)
            reviewer: Revisor de la configuración (opcional)
        """
        self.configuration_repository = configuration_repository
        self.logging_service = logging_service
        self.generator = generator or CalendarGenerator()
        self.aggregator = aggregator or StatisticsAggregator()
        self.validator = validator or default_calendar_validator
        self.reviewer = reviewer or ConfigurationReviewer()

    def execute(self, request: CalendarGenerationRequest) -> CalendarGenerationResult:
        """
        Ejecuta la generación del calendario.

        Args:
            request: Solicitud de generación

        Returns:
            CalendarGenerationResult: Resultado de la generación
        """
        start_time = datetime.now()

        try:
            # 1. Validar solicitud
            validation_errors = request.validate(self.configuration_repository is not None)
            if validation_errors:
                return CalendarGenerationResult.failure_result(
                    "Solicitud inválida: " + "; ".join(validation_errors),
                    errors=validation_errors
                )

            # 2. Obtener configuración
            config = request.configuration
            if config is None:
                config = self.configuration_repository.load()
                if config is None:
                    return CalendarGenerationResult.failure_result(
                        "No hay ninguna configuración guardada"
                    )

            if self.logging_service:
                self.logging_service.log_generation_started(config.year.value)

            # 3. Generar días y estadísticas
            days = self.generator.generate(config.year, config)
            statistics = self.aggregator.aggregate(days, config)

            # 4. Validar calendario y revisar configuración
            warnings: List[str] = []
            if request.validate_calendar:
                report = self.validator.validate(days, config)
                if not report.is_valid:
                    if self.logging_service:
                        self.logging_service.log_warning(
                            "El calendario generado no supera la validación",
                            {"errors": len(report.errors)}
                        )
                    return CalendarGenerationResult.failure_result(
                        "El calendario generado no es coherente con la configuración",
                        errors=report.errors
                    )
                warnings.extend(report.warnings)

            if request.review_configuration:
                warnings.extend(self.reviewer.review(config).warnings)

            if self.logging_service:
                for warning in warnings:
                    self.logging_service.log_warning(warning)

            # 5. Crear resultado final
            generation_time = (datetime.now() - start_time).total_seconds()
            result = CalendarGenerationResult.success_result(
                config, days, statistics, generation_time, warnings
            )

            if self.logging_service:
                self.logging_service.log_generation_completed(
                    config.year.value, len(days), len(warnings)
                )

            return result

        except Exception as e:
            if self.logging_service:
                self.logging_service.log_error("calendar_generation", e)

            return CalendarGenerationResult.failure_result(
                f"Error inesperado durante la generación: {str(e)}"
            )
