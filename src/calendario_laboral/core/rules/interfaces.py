"""
Interfaces y contratos para las reglas de dominio.

Este módulo define las interfaces abstractas que deben implementar
las reglas de estado de un día y los validadores de calendario.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ..models import CalendarConfiguration, CalendarDay, DayState


@dataclass(frozen=True)
class RuleOutcome:
    """Estado y horas que una regla asigna a un día."""
    state: DayState
    hours: float = 0.0
    description: Optional[str] = None


class StateRule(ABC):
    """
    Interfaz base para reglas de estado.

    El resolvedor evalúa las reglas en orden de prioridad y aplica la
    primera que devuelve un resultado.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre identificativo de la regla."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Descripción de lo que evalúa la regla."""
        pass

    @abstractmethod
    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        """
        Evalúa la regla para una fecha.

        Args:
            day: Fecha a resolver
            config: Configuración del calendario

        Returns:
            Optional[RuleOutcome]: Estado y horas si la regla aplica, None si no
        """
        pass


class CalendarValidator(ABC):
    """
    Interfaz base para validadores de calendario generado.

    Los validadores analizan el calendario completo y reportan
    errores y avisos sin lanzar excepciones.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre identificativo del validador."""
        pass

    @abstractmethod
    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> 'ValidationReport':
        """
        Valida un calendario completo.

        Args:
            days: Días generados
            config: Configuración usada para generarlos

        Returns:
            ValidationReport: Errores y avisos encontrados
        """
        pass


@dataclass
class ValidationReport:
    """Resultado de una validación: errores bloqueantes y avisos."""
    errors: List[str]
    warnings: List[str]

    @classmethod
    def empty(cls) -> 'ValidationReport':
        return cls(errors=[], warnings=[])

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def merge(self, other: 'ValidationReport', prefix: Optional[str] = None) -> None:
        """Añade los mensajes de otro informe, opcionalmente con prefijo."""
        tag = f"[{prefix}] " if prefix else ""
        self.errors.extend(f"{tag}{message}" for message in other.errors)
        self.warnings.extend(f"{tag}{message}" for message in other.warnings)
