"""
Reglas concretas de estado de un día.

Se evalúan en el orden de DEFAULT_STATE_RULES y gana la primera que aplica.
La regla del ciclo aplica siempre, por lo que cualquier fecha se resuelve.
"""

from datetime import date
from typing import Optional

from ..models import CalendarConfiguration, DayState
from .interfaces import RuleOutcome, StateRule


class NotHiredRule(StateRule):
    """Días anteriores al inicio de contrato."""

    @property
    def name(self) -> str:
        return "not_hired"

    @property
    def description(self) -> str:
        return "Marca como NoContratado los días anteriores al inicio de contrato"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        if config.is_before_contract(day):
            return RuleOutcome(DayState.NO_CONTRATADO)
        return None


class VacationRule(StateRule):
    """
    Días dentro de un periodo de vacaciones.

    Las vacaciones tienen prioridad sobre festivos y guardias y no suman horas.
    """

    @property
    def name(self) -> str:
        return "vacation"

    @property
    def description(self) -> str:
        return "Marca como Vacaciones los días incluidos en algún periodo"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        period = config.vacation_on(day)
        if period is None:
            return None
        return RuleOutcome(DayState.VACACIONES, description=period.description)


class WorkedHolidayRule(StateRule):
    """Festivo que cae en día de trabajo del ciclo con la política de trabajar festivos."""

    @property
    def name(self) -> str:
        return "worked_holiday"

    @property
    def description(self) -> str:
        return "Marca como FestivoTrabajado los festivos en día de trabajo"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        holiday = config.holiday_on(day)
        if holiday is None or not config.holiday_policy.works_holidays:
            return None
        if not config.is_cycle_work_day(day):
            return None
        return RuleOutcome(
            DayState.FESTIVO_TRABAJADO, config.working_hours.holiday, holiday.display_name
        )


class GuardiaRule(StateRule):
    """
    Guardia sobre un día de descanso o un festivo no trabajado.

    Va antes que la regla de festivo para que una guardia pueda caer
    en un festivo no trabajado.
    """

    @property
    def name(self) -> str:
        return "guardia"

    @property
    def description(self) -> str:
        return "Marca como Guardia los días de descanso con guardia registrada"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        guardia = config.guardia_on(day)
        if guardia is None or config.is_base_work_day(day):
            return None
        return RuleOutcome(DayState.GUARDIA, guardia.hours, guardia.description or None)


class HolidayRule(StateRule):
    """Festivo no trabajado."""

    @property
    def name(self) -> str:
        return "holiday"

    @property
    def description(self) -> str:
        return "Marca como Festivo los festivos que no se trabajan"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        holiday = config.holiday_on(day)
        if holiday is None:
            return None
        return RuleOutcome(DayState.FESTIVO, description=holiday.display_name)


class CycleRule(StateRule):
    """Estado base según el ciclo: Trabajo con las horas del tipo de día, o Descanso."""

    @property
    def name(self) -> str:
        return "cycle"

    @property
    def description(self) -> str:
        return "Aplica el ciclo de trabajo/descanso"

    def evaluate(self, day: date, config: CalendarConfiguration) -> Optional[RuleOutcome]:
        if config.is_cycle_work_day(day):
            return RuleOutcome(DayState.TRABAJO, config.working_hours.hours_for(day))
        return RuleOutcome(DayState.DESCANSO)


# Orden de prioridad: la primera regla que aplica decide el estado
DEFAULT_STATE_RULES = [
    NotHiredRule(),
    VacationRule(),
    WorkedHolidayRule(),
    GuardiaRule(),
    HolidayRule(),
    CycleRule(),
]
