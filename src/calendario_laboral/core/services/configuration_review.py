"""
Revisión de la configuración - Dominio puro.

Detecta situaciones válidas pero sospechosas y las devuelve como avisos;
nunca lanza excepciones.
"""

from typing import List

from ..models import CalendarConfiguration, DayType
from ..rules import ValidationReport
from ..models.constants import MAX_VACATION_DAYS, DOMAIN_WARNING_MESSAGES
from .vacation_planner import has_overlaps, total_vacation_days


class ConfigurationReviewer:
    """Revisor de configuración que produce avisos no bloqueantes."""

    def __init__(self, max_vacation_days: int = MAX_VACATION_DAYS):
        """
        Args:
            max_vacation_days: Días de vacaciones permitidos al año
        """
        self.max_vacation_days = max_vacation_days

    @property
    def name(self) -> str:
        return "configuration_review"

    def review(self, config: CalendarConfiguration) -> ValidationReport:
        """
        Revisa una configuración ya validada.

        Args:
            config: Configuración a revisar

        Returns:
            ValidationReport: Sin errores; solo avisos
        """
        warnings: List[str] = []

        hours_warning = config.annual_contract_hours.warning
        if hours_warning:
            warnings.append(f"{hours_warning}: {config.annual_contract_hours}")

        if has_overlaps(config.vacations):
            warnings.append(DOMAIN_WARNING_MESSAGES["vacation_overlap"])

        vacation_days = total_vacation_days(config.vacations)
        if vacation_days > self.max_vacation_days:
            warnings.append(
                f"{DOMAIN_WARNING_MESSAGES['vacation_limit']} "
                f"({vacation_days} de {self.max_vacation_days})"
            )

        for day_type in config.working_hours.zero_hour_types():
            if day_type == DayType.HOLIDAY and not config.holiday_policy.works_holidays:
                continue
            warnings.append(f"Las horas para el tipo de día '{day_type.value}' son 0")

        return ValidationReport(errors=[], warnings=warnings)
