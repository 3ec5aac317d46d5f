"""
Validadores de calendario generado.

Este módulo contiene validadores que comprueban la coherencia de un
calendario ya generado con su configuración y reportan errores y avisos.
"""

from datetime import timedelta
from typing import Dict, List, Sequence

from ..models import CalendarConfiguration, CalendarDay, DayState
from .interfaces import CalendarValidator, ValidationReport

# Estados que nunca suman horas propias (las de un turno extra aparte)
ZERO_HOUR_STATES = (
    DayState.NO_CONTRATADO, DayState.VACACIONES, DayState.DESCANSO, DayState.FESTIVO
)


class DayCountValidator(CalendarValidator):
    """
    Validador de completitud.

    Verifica que haya un día por cada fecha del año, en orden y sin huecos.
    """

    @property
    def name(self) -> str:
        return "day_count"

    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> ValidationReport:
        report = ValidationReport.empty()
        expected = config.year.days_in_year

        if len(days) != expected:
            report.errors.append(
                f"El calendario tiene {len(days)} días cuando deberían ser {expected}"
            )
        if not days:
            return report

        if days[0].date != config.year.first_day:
            report.errors.append(
                f"El calendario empieza el {days[0].date.isoformat()} y no el 1 de enero"
            )

        for previous, current in zip(days, days[1:]):
            if current.date != previous.date + timedelta(days=1):
                report.errors.append(
                    f"Fechas no consecutivas: {previous.date.isoformat()} -> "
                    f"{current.date.isoformat()}"
                )

        return report


class HoursCoherenceValidator(CalendarValidator):
    """
    Validador de horas por estado.

    Los estados sin horas propias solo pueden sumar las de un turno extra;
    un día de trabajo con 0 horas se reporta como aviso.
    """

    @property
    def name(self) -> str:
        return "hours_coherence"

    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> ValidationReport:
        report = ValidationReport.empty()

        for day in days:
            date_str = day.date.isoformat()
            if day.hours_worked < 0:
                report.errors.append(f"Horas negativas en {date_str}")
                continue
            if day.state in ZERO_HOUR_STATES and day.base_hours != 0:
                report.errors.append(
                    f"El día {date_str} ({day.state.value}) tiene {day.base_hours:g} horas "
                    f"propias cuando deberían ser 0"
                )
            if day.state == DayState.TRABAJO and day.hours_worked == 0:
                report.warnings.append(f"Día de trabajo sin horas asignadas: {date_str}")

        return report


class ContractBoundaryValidator(CalendarValidator):
    """Verifica que NoContratado coincide exactamente con los días previos al contrato."""

    @property
    def name(self) -> str:
        return "contract_boundary"

    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> ValidationReport:
        report = ValidationReport.empty()

        for day in days:
            before = config.is_before_contract(day.date)
            not_hired = day.state == DayState.NO_CONTRATADO
            if before and not not_hired:
                report.errors.append(
                    f"El día {day.date.isoformat()} es anterior al contrato y no está "
                    f"marcado como NoContratado"
                )
            elif not_hired and not before:
                report.errors.append(
                    f"El día {day.date.isoformat()} está marcado como NoContratado "
                    f"dentro del contrato"
                )

        return report


class OverrideCoverageValidator(CalendarValidator):
    """
    Verifica que vacaciones y festivos se reflejan en el calendario.

    Las fechas anteriores al contrato quedan fuera de la comprobación.
    """

    @property
    def name(self) -> str:
        return "override_coverage"

    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> ValidationReport:
        report = ValidationReport.empty()
        by_date: Dict = {day.date: day for day in days}

        for period in config.vacations:
            for vacation_date in period.dates():
                day = by_date.get(vacation_date)
                if day is None or config.is_before_contract(vacation_date):
                    continue
                if day.state != DayState.VACACIONES:
                    report.errors.append(
                        f"El día {vacation_date.isoformat()} está en vacaciones y aparece "
                        f"como {day.state.value}"
                    )

        holiday_states = (DayState.FESTIVO, DayState.FESTIVO_TRABAJADO, DayState.GUARDIA)
        for holiday in config.holidays:
            day = by_date.get(holiday.date)
            if day is None or config.is_before_contract(holiday.date):
                continue
            if config.vacation_on(holiday.date) is not None:
                continue
            if day.state not in holiday_states:
                report.errors.append(
                    f"El festivo {holiday.date.isoformat()} aparece como {day.state.value}"
                )

        return report


class CompositeCalendarValidator(CalendarValidator):
    """
    Validador compuesto que combina múltiples validadores.

    Ejecuta todos los validadores y consolida sus informes, prefijando
    cada mensaje con el nombre del validador que lo generó.
    """

    def __init__(self, validators: List[CalendarValidator] = None):
        """
        Inicializa el validador compuesto.

        Args:
            validators: Lista de validadores a incluir. Si es None, usa los estándar.
        """
        if validators is None:
            validators = [
                DayCountValidator(),
                HoursCoherenceValidator(),
                ContractBoundaryValidator(),
                OverrideCoverageValidator(),
            ]
        self.validators: Dict[str, CalendarValidator] = {v.name: v for v in validators}

    @property
    def name(self) -> str:
        return "composite_validator"

    def validate(self, days: Sequence[CalendarDay],
                 config: CalendarConfiguration) -> ValidationReport:
        report = ValidationReport.empty()
        for validator_name, validator in self.validators.items():
            report.merge(validator.validate(days, config), prefix=validator_name)
        return report


# Instancia global del validador por defecto
default_calendar_validator = CompositeCalendarValidator()
