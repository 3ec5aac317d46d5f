"""
Estadísticas derivadas de un calendario anual.

Todas las estructuras son inmutables y se calculan con StatisticsAggregator;
aquí solo viven los tipos y los cálculos puros de porcentajes y saldo.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .calendar_day import DayState
from .constants import (
    BALANCE_THRESHOLDS, DEFAULT_HOURS_PER_DAY, MONTH_NAMES, PERCENTAGE_DECIMALS,
    WEEKDAY_NAMES
)


def percentage(part: float, total: float) -> float:
    """Porcentaje redondeado a 2 decimales; 0.0 si el total es 0."""
    if total == 0:
        return 0.0
    return round(part / total * 100, PERCENTAGE_DECIMALS)


class BalanceStatus(Enum):
    """Estado del cumplimiento de horas de convenio."""
    EXCELENTE = "excelente"
    OK = "ok"
    ADVERTENCIA = "advertencia"
    DEFICIT = "deficit"

    @classmethod
    def from_compliance(cls, compliance: float,
                        thresholds: Optional[Dict[str, float]] = None) -> 'BalanceStatus':
        """
        Estado según los umbrales del porcentaje de cumplimiento.

        Args:
            compliance: Porcentaje de cumplimiento
            thresholds: Umbrales excelente/ok/advertencia. Si es None, los estándar.
        """
        thresholds = thresholds or BALANCE_THRESHOLDS
        if compliance >= thresholds["excelente"]:
            return cls.EXCELENTE
        if compliance >= thresholds["ok"]:
            return cls.OK
        if compliance >= thresholds["advertencia"]:
            return cls.ADVERTENCIA
        return cls.DEFICIT


class BalanceType(Enum):
    """Quién debe horas a quién."""
    EMPRESA_DEBE = "empresa_debe"
    EMPLEADO_DEBE = "empleado_debe"
    EQUILIBRADO = "equilibrado"


@dataclass(frozen=True)
class DayCounts:
    """Número de días por estado."""
    counts: Dict[DayState, int]

    def get(self, state: DayState) -> int:
        return self.counts.get(state, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> Dict[str, int]:
        return {state.value: self.get(state) for state in DayState}


@dataclass(frozen=True)
class WeekdayStats:
    """Días trabajados en un día de la semana concreto."""
    weekday: int
    worked_days: int
    percentage: float
    extra_shift_days: int = 0

    @property
    def name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]


@dataclass(frozen=True)
class WeeklyDistribution:
    """
    Distribución de días trabajados por día de la semana (0 = lunes).

    Los empates en el más/menos trabajado se resuelven a favor del primer
    día de la semana. Sin días trabajados ambos son None.
    """
    weekdays: Tuple[WeekdayStats, ...]
    total_worked_days: int
    most_worked: Optional[int]
    least_worked: Optional[int]

    @classmethod
    def from_counts(cls, worked: Tuple[int, ...], extra: Tuple[int, ...]) -> 'WeeklyDistribution':
        total = sum(worked)
        weekdays = tuple(
            WeekdayStats(index, worked[index], percentage(worked[index], total), extra[index])
            for index in range(len(worked))
        )
        if total == 0:
            return cls(weekdays, 0, None, None)
        # max/min devuelven el primer índice en caso de empate
        most = max(range(len(worked)), key=lambda i: worked[i])
        least = min(range(len(worked)), key=lambda i: worked[i])
        return cls(weekdays, total, most, least)

    def for_weekday(self, weekday: int) -> WeekdayStats:
        return self.weekdays[weekday]

    @property
    def most_worked_name(self) -> Optional[str]:
        return WEEKDAY_NAMES[self.most_worked] if self.most_worked is not None else None

    @property
    def least_worked_name(self) -> Optional[str]:
        return WEEKDAY_NAMES[self.least_worked] if self.least_worked is not None else None


@dataclass(frozen=True)
class MonthSummary:
    """Horas y días trabajados en un mes."""
    month: int
    worked_hours: float
    worked_days: int
    extra_hours: float = 0.0

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]


@dataclass(frozen=True)
class HoursBalance:
    """Saldo de horas trabajadas frente a las horas de convenio."""
    hours_worked: float
    contract_hours: float
    balance: float
    absolute_balance: float
    balance_type: BalanceType
    compliance_percentage: float
    status: BalanceStatus
    equivalent_days: float
    message: str

    @classmethod
    def calculate(cls, hours_worked: float, contract_hours: float,
                  hours_per_day: float = DEFAULT_HOURS_PER_DAY,
                  thresholds: Optional[Dict[str, float]] = None) -> 'HoursBalance':
        """
        Calcula el saldo.

        Con horas de convenio 0 el cumplimiento es 0.0 y el estado OK,
        para no producir divisiones por cero.
        """
        hours_worked = round(hours_worked, 2)
        contract_hours = round(contract_hours, 2)
        balance = round(hours_worked - contract_hours, 2)
        absolute = abs(balance)

        if balance > 0:
            balance_type = BalanceType.EMPRESA_DEBE
            message = f"La empresa te debe {absolute:.2f} horas"
        elif balance < 0:
            balance_type = BalanceType.EMPLEADO_DEBE
            message = f"Debes {absolute:.2f} horas"
        else:
            balance_type = BalanceType.EQUILIBRADO
            message = "Horas equilibradas"

        if contract_hours == 0:
            compliance = 0.0
            status = BalanceStatus.OK
        else:
            compliance = percentage(hours_worked, contract_hours)
            status = BalanceStatus.from_compliance(compliance, thresholds)

        equivalent_days = round(absolute / hours_per_day, 2) if hours_per_day > 0 else 0.0

        return cls(
            hours_worked=hours_worked,
            contract_hours=contract_hours,
            balance=balance,
            absolute_balance=absolute,
            balance_type=balance_type,
            compliance_percentage=compliance,
            status=status,
            equivalent_days=equivalent_days,
            message=message,
        )


@dataclass(frozen=True)
class DayStatistics:
    """
    Estadísticas del año: recuentos por estado, distribución semanal,
    desglose mensual y saldo de horas.

    Los porcentajes por estado se calculan sobre los días efectivos
    (total menos NoContratado); el de NoContratado se deja en 0.0.
    """
    total_days: int
    effective_days: int
    day_counts: DayCounts
    state_percentages: Dict[DayState, float]
    weekly: WeeklyDistribution
    monthly: Tuple[MonthSummary, ...]
    hours_balance: HoursBalance

    def count(self, state: DayState) -> int:
        return self.day_counts.get(state)

    def percentage_of(self, state: DayState) -> float:
        return self.state_percentages.get(state, 0.0)

    @property
    def not_hired_days(self) -> int:
        return self.count(DayState.NO_CONTRATADO)

    @property
    def working_days(self) -> int:
        """Días laborables: Trabajo + FestivoTrabajado."""
        return self.count(DayState.TRABAJO) + self.count(DayState.FESTIVO_TRABAJADO)

    @property
    def non_working_days(self) -> int:
        """Días no laborables: Descanso + Vacaciones + Festivo."""
        return (self.count(DayState.DESCANSO) + self.count(DayState.VACACIONES)
                + self.count(DayState.FESTIVO))

    @property
    def work_percentage(self) -> float:
        return percentage(self.working_days, self.effective_days)

    @property
    def worked_days_total(self) -> int:
        """Días con trabajo efectivo, incluidos guardias y turnos extra."""
        return sum(month.worked_days for month in self.monthly)

    def month(self, month: int) -> MonthSummary:
        return self.monthly[month - 1]

    def to_dict(self) -> dict:
        return {
            "total_dias": self.total_days,
            "dias_efectivos": self.effective_days,
            "dias_por_estado": self.day_counts.to_dict(),
            "porcentajes": {state.value: pct for state, pct in self.state_percentages.items()},
            "distribucion_semanal": {
                "dias": {w.name: w.worked_days for w in self.weekly.weekdays},
                "porcentajes": {w.name: w.percentage for w in self.weekly.weekdays},
                "turnos_extra": {w.name: w.extra_shift_days for w in self.weekly.weekdays},
                "mas_trabajado": self.weekly.most_worked_name,
                "menos_trabajado": self.weekly.least_worked_name,
            },
            "mensual": [
                {"mes": m.name, "horas": m.worked_hours, "dias_trabajados": m.worked_days,
                 "horas_extra": m.extra_hours}
                for m in self.monthly
            ],
            "saldo_horas": {
                "horas_trabajadas": self.hours_balance.hours_worked,
                "horas_convenio": self.hours_balance.contract_hours,
                "saldo": self.hours_balance.balance,
                "tipo": self.hours_balance.balance_type.value,
                "porcentaje_cumplimiento": self.hours_balance.compliance_percentage,
                "estado": self.hours_balance.status.value,
                "equivalente_dias": self.hours_balance.equivalent_days,
                "mensaje": self.hours_balance.message,
            },
        }
