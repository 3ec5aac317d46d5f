"""
Caso de uso: Gestionar festivos, vacaciones, guardias y turnos extra.

Aplica una operación de alta, baja o modificación sobre la configuración
y, opcionalmente, guarda el resultado en el repositorio.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from ...core.models import (
    CalendarConfiguration, CalendarConfigurationError, ExtraShift, Guardia, Holiday,
    VacationPeriod
)
from ...core.models.constants import MAX_VACATION_DAYS
from ...core.services import override_manager
from ..ports import ConfigurationRepository, LoggingService

OverrideItem = Union[Holiday, VacationPeriod, Guardia, ExtraShift]


class OverrideKind(Enum):
    """Tipos de elemento gestionables."""
    HOLIDAY = "festivo"
    VACATION = "vacaciones"
    GUARDIA = "guardia"
    EXTRA_SHIFT = "turno_extra"


class OverrideAction(Enum):
    """Operaciones disponibles."""
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


_ITEM_TYPES = {
    OverrideKind.HOLIDAY: Holiday,
    OverrideKind.VACATION: VacationPeriod,
    OverrideKind.GUARDIA: Guardia,
    OverrideKind.EXTRA_SHIFT: ExtraShift,
}


@dataclass
class OverrideRequest:
    """
    Solicitud de gestión de un elemento.

    Las vacaciones se identifican por índice; el resto por fecha.
    """
    configuration: CalendarConfiguration
    kind: OverrideKind
    action: OverrideAction
    item: Optional[OverrideItem] = None
    target_date: Optional[date] = None
    index: Optional[int] = None
    save: bool = False

    def validate(self) -> List[str]:
        """Valida la solicitud."""
        errors = []

        if self.action in (OverrideAction.ADD, OverrideAction.UPDATE):
            if self.item is None:
                errors.append("Hay que indicar el elemento a guardar")
            elif not isinstance(self.item, _ITEM_TYPES[self.kind]):
                errors.append(f"El elemento no es del tipo {self.kind.value}")

        if self.action in (OverrideAction.REMOVE, OverrideAction.UPDATE):
            if self.kind == OverrideKind.VACATION and self.index is None:
                errors.append("Hay que indicar el índice del periodo de vacaciones")
            if self.kind != OverrideKind.VACATION and self.target_date is None:
                errors.append("Hay que indicar la fecha del elemento")

        return errors


@dataclass
class OverrideResult:
    """Resultado de la operación."""
    success: bool
    configuration: Optional[CalendarConfiguration]
    message: str
    errors: List[str]

    @classmethod
    def success_result(cls, configuration: CalendarConfiguration,
                       message: str) -> 'OverrideResult':
        """Crea un resultado exitoso."""
        return cls(success=True, configuration=configuration, message=message, errors=[])

    @classmethod
    def failure_result(cls, message: str, errors: List[str] = None) -> 'OverrideResult':
        """Crea un resultado de fallo."""
        return cls(success=False, configuration=None, message=message, errors=errors or [])


class ManageOverridesUseCase:
    """Caso de uso para dar de alta, baja o modificar overrides."""

    _OPERATIONS = {
        (OverrideKind.HOLIDAY, OverrideAction.ADD): override_manager.add_holiday,
        (OverrideKind.HOLIDAY, OverrideAction.REMOVE): override_manager.remove_holiday,
        (OverrideKind.HOLIDAY, OverrideAction.UPDATE): override_manager.update_holiday,
        (OverrideKind.GUARDIA, OverrideAction.ADD): override_manager.add_guardia,
        (OverrideKind.GUARDIA, OverrideAction.REMOVE): override_manager.remove_guardia,
        (OverrideKind.GUARDIA, OverrideAction.UPDATE): override_manager.update_guardia,
        (OverrideKind.EXTRA_SHIFT, OverrideAction.ADD): override_manager.add_extra_shift,
        (OverrideKind.EXTRA_SHIFT, OverrideAction.REMOVE): override_manager.remove_extra_shift,
        (OverrideKind.EXTRA_SHIFT, OverrideAction.UPDATE): override_manager.update_extra_shift,
        (OverrideKind.VACATION, OverrideAction.ADD): override_manager.add_vacation,
        (OverrideKind.VACATION, OverrideAction.REMOVE): override_manager.remove_vacation,
        (OverrideKind.VACATION, OverrideAction.UPDATE): override_manager.update_vacation,
    }

    def __init__(self,
                 configuration_repository: Optional[ConfigurationRepository] = None,
                 logging_service: Optional[LoggingService] = None,
                 max_vacation_days: int = MAX_VACATION_DAYS):
        """
        Inicializa el caso de uso.

        Args:
            configuration_repository: Repositorio donde guardar (opcional)
            logging_service: Servicio de logging (opcional)
            max_vacation_days: Días de vacaciones permitidos al año
        """
        self.configuration_repository = configuration_repository
        self.logging_service = logging_service
        self.max_vacation_days = max_vacation_days

    def execute(self, request: OverrideRequest) -> OverrideResult:
        """
        Ejecuta la operación.

        Args:
            request: Solicitud de gestión

        Returns:
            OverrideResult: Nueva configuración o mensaje de error
        """
        validation_errors = request.validate()
        if request.save and self.configuration_repository is None:
            validation_errors.append("No hay repositorio en el que guardar")
        if validation_errors:
            return OverrideResult.failure_result(
                "Solicitud inválida: " + "; ".join(validation_errors),
                errors=validation_errors
            )

        operation = self._OPERATIONS[(request.kind, request.action)]
        key = request.index if request.kind == OverrideKind.VACATION else request.target_date

        try:
            # Solo las vacaciones tienen límite anual
            limit = {}
            if request.kind == OverrideKind.VACATION:
                limit["max_days"] = self.max_vacation_days
            if request.action == OverrideAction.ADD:
                config = operation(request.configuration, request.item, **limit)
            elif request.action == OverrideAction.REMOVE:
                config = operation(request.configuration, key)
            else:
                config = operation(request.configuration, key, request.item, **limit)
        except CalendarConfigurationError as e:
            if self.logging_service:
                self.logging_service.log_warning(str(e), {
                    "kind": request.kind.value, "action": request.action.value
                })
            return OverrideResult.failure_result(str(e), errors=[str(e)])

        if request.save and not self.configuration_repository.save(config):
            return OverrideResult.failure_result("Error al guardar la configuración")

        if self.logging_service:
            self.logging_service.log_info(
                f"Operación {request.action.value} sobre {request.kind.value} aplicada"
            )

        return OverrideResult.success_result(
            config, f"Operación {request.action.value} sobre {request.kind.value} aplicada"
        )
