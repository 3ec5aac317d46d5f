"""
Resolución del estado de un día - Dominio puro.

Combina ciclo, ancla y overrides de una configuración en un CalendarDay.
"""

from datetime import date
from typing import List, Optional

from ..models import CalendarConfiguration, CalendarDay
from ..rules import DEFAULT_STATE_RULES, RuleOutcome, StateRule


class DayStateResolver:
    """
    Resolvedor del estado de un día.

    Aplica las reglas de estado por orden de prioridad (la primera que
    aplica decide) y después suma las horas del turno extra, que nunca
    cambia el estado. No lanza excepciones: la configuración ya llega
    validada.
    """

    def __init__(self, rules: Optional[List[StateRule]] = None):
        """
        Inicializa el resolvedor.

        Args:
            rules: Reglas en orden de prioridad. Si es None, usa las estándar.
        """
        self.rules = list(rules) if rules is not None else list(DEFAULT_STATE_RULES)

    def resolve(self, day: date, config: CalendarConfiguration) -> CalendarDay:
        """
        Resuelve una fecha.

        Args:
            day: Fecha a resolver
            config: Configuración validada

        Returns:
            CalendarDay: Día con estado, horas y metadatos del ciclo
        """
        outcome = self._first_match(day, config)

        hours = outcome.hours
        extra_hours = 0.0
        description = outcome.description

        extra_shift = config.extra_shift_on(day)
        if extra_shift is not None:
            extra_hours = extra_shift.hours
            hours += extra_hours
            if extra_shift.description and not description:
                description = extra_shift.description

        return CalendarDay(
            date=day,
            weekday=day.weekday(),
            state=outcome.state,
            hours_worked=round(hours, 2),
            extra_hours=extra_hours,
            cycle_metadata=config.cycle_metadata(day),
            description=description,
        )

    def _first_match(self, day: date, config: CalendarConfiguration) -> RuleOutcome:
        for rule in self.rules:
            outcome = rule.evaluate(day, config)
            if outcome is not None:
                return outcome
        # Solo ocurre con una lista de reglas sin la regla del ciclo
        raise LookupError(f"Ninguna regla resuelve el día {day.isoformat()}")
