"""
Registro de configuración completo que consume el motor de calendario.

Se construye una vez, se valida entero en la construcción y se pasa por
valor al generador. Cualquier cambio implica construir una configuración
nueva y regenerar el calendario.
"""

from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, Optional, Tuple

from .cycle_anchor import ContractStart, CycleAnchor, StartedThisYear, WorkedBefore
from .exceptions import (
    DuplicateDateError, InvalidDateRangeError, InvalidGuardiaPlacementError, InvalidOffsetError
)
from .overrides import ExtraShift, Guardia, Holiday, VacationPeriod
from .work_cycle import CyclePosition, WorkCycle
from .working_hours import AnnualContractHours, HolidayPolicy, WorkingHoursConfig
from .year import Year


@dataclass(frozen=True)
class CalendarConfiguration:
    """
    Configuración inmutable de un calendario anual.

    Validaciones en construcción:
    - el inicio de contrato y todas las fechas pertenecen al año objetivo
    - no hay festivos, guardias ni turnos extra repetidos en la misma fecha
    - el desfase del ciclo por partes es coherente
    - ninguna guardia cae en un día que el ciclo marca como trabajado
    """
    year: Year
    work_cycle: WorkCycle
    contract_start: ContractStart = field(default_factory=WorkedBefore)
    working_hours: WorkingHoursConfig = field(default_factory=WorkingHoursConfig)
    annual_contract_hours: AnnualContractHours = field(default_factory=AnnualContractHours)
    holidays: Tuple[Holiday, ...] = ()
    vacations: Tuple[VacationPeriod, ...] = ()
    guardias: Tuple[Guardia, ...] = ()
    extra_shifts: Tuple[ExtraShift, ...] = ()
    holiday_policy: HolidayPolicy = HolidayPolicy.TRABAJAR

    def __post_init__(self):
        """Validación post-inicialización."""
        for name in ("holidays", "vacations", "guardias", "extra_shifts"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if not isinstance(self.contract_start, (StartedThisYear, WorkedBefore)):
            raise InvalidOffsetError("Inicio de contrato inválido")
        self._validate_contract_start()
        self._validate_dates_in_year()
        self._validate_unique_dates()

        object.__setattr__(
            self, "_anchor",
            CycleAnchor.for_configuration(self.work_cycle, self.contract_start, self.year)
        )
        object.__setattr__(self, "_holidays_by_date", {h.date: h for h in self.holidays})
        object.__setattr__(self, "_guardias_by_date", {g.date: g for g in self.guardias})
        object.__setattr__(self, "_extra_shifts_by_date", {e.date: e for e in self.extra_shifts})

        self._validate_guardia_placement()

    # ── validación ───────────────────────────────────────────────────────

    def _validate_contract_start(self):
        if isinstance(self.contract_start, StartedThisYear):
            if not self.year.contains(self.contract_start.start_date):
                raise InvalidDateRangeError(
                    f"La fecha de inicio de contrato debe estar dentro del año {self.year}"
                )

    def _validate_dates_in_year(self):
        checks = [(h.date, "festivo") for h in self.holidays]
        checks += [(g.date, "guardia") for g in self.guardias]
        checks += [(e.date, "turno extra") for e in self.extra_shifts]
        for period in self.vacations:
            checks.append((period.start_date, "vacaciones"))
            checks.append((period.end_date, "vacaciones"))

        for day, label in checks:
            if not self.year.contains(day):
                raise InvalidDateRangeError(
                    f"La fecha {day.isoformat()} ({label}) no pertenece al año {self.year}"
                )

    def _validate_unique_dates(self):
        for items, label in ((self.holidays, "festivo"), (self.guardias, "guardia"),
                             (self.extra_shifts, "turno extra")):
            repeated = [day for day, count in Counter(item.date for item in items).items()
                        if count > 1]
            if repeated:
                raise DuplicateDateError(
                    f"Ya existe un {label} para la fecha {min(repeated).isoformat()}"
                )

    def _validate_guardia_placement(self):
        # Se comprueba contra el estado base aunque la fecha caiga en
        # vacaciones o antes del contrato
        for guardia in self.guardias:
            if self.is_base_work_day(guardia.date):
                raise InvalidGuardiaPlacementError(
                    f"No se puede registrar una guardia el {guardia.date.isoformat()}: "
                    f"según el ciclo es un día de trabajo"
                )

    # ── consultas ────────────────────────────────────────────────────────

    @property
    def anchor(self) -> CycleAnchor:
        return self._anchor

    def cycle_position(self, day: date) -> int:
        return self._anchor.position_of(day)

    def is_cycle_work_day(self, day: date) -> bool:
        """Lo que dice el ciclo para la fecha, sin considerar ningún override."""
        return self.work_cycle.is_work_day(self.cycle_position(day))

    def cycle_metadata(self, day: date) -> Optional[CyclePosition]:
        return self.work_cycle.describe_position(self.cycle_position(day))

    def is_base_work_day(self, day: date) -> bool:
        """
        Estado base trabajado: día de trabajo del ciclo que no es un festivo
        respetado por la política de festivos.
        """
        if not self.is_cycle_work_day(day):
            return False
        return self.holiday_on(day) is None or self.holiday_policy.works_holidays

    def is_before_contract(self, day: date) -> bool:
        return self.contract_start.is_before_contract(day)

    def holiday_on(self, day: date) -> Optional[Holiday]:
        return self._holidays_by_date.get(day)

    def guardia_on(self, day: date) -> Optional[Guardia]:
        return self._guardias_by_date.get(day)

    def extra_shift_on(self, day: date) -> Optional[ExtraShift]:
        return self._extra_shifts_by_date.get(day)

    def vacation_on(self, day: date) -> Optional[VacationPeriod]:
        for period in self.vacations:
            if period.contains(day):
                return period
        return None

    @property
    def contract_start_date(self) -> Optional[date]:
        if isinstance(self.contract_start, StartedThisYear):
            return self.contract_start.start_date
        return None

    def with_changes(self, **changes) -> 'CalendarConfiguration':
        """Nueva configuración con los cambios indicados, validada de nuevo."""
        return replace(self, **changes)


def build_configuration(year: Year, work_cycle: WorkCycle,
                        contract_start: Optional[ContractStart] = None,
                        holidays: Iterable[Holiday] = (),
                        vacations: Iterable[VacationPeriod] = (),
                        guardias: Iterable[Guardia] = (),
                        extra_shifts: Iterable[ExtraShift] = (),
                        **kwargs) -> CalendarConfiguration:
    """Atajo para construir una configuración con los overrides ordenados por fecha."""
    return CalendarConfiguration(
        year=year,
        work_cycle=work_cycle,
        contract_start=contract_start if contract_start is not None else WorkedBefore(),
        holidays=tuple(sorted(holidays, key=lambda h: h.date)),
        vacations=tuple(sorted(vacations, key=lambda v: (v.start_date, v.end_date))),
        guardias=tuple(sorted(guardias, key=lambda g: g.date)),
        extra_shifts=tuple(sorted(extra_shifts, key=lambda e: e.date)),
        **kwargs
    )
