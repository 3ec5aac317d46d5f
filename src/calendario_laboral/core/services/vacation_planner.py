"""
Planificación de vacaciones - Dominio puro.

Operaciones sobre listas de periodos: total de días sin duplicar,
detección de solapes y unificación de periodos. El resolvedor no las
necesita porque ya trata los solapes correctamente día a día.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Sequence, Set, Tuple

from ..models import VacationPeriod


@dataclass(frozen=True)
class VacationOverlap:
    """Solape entre un periodo nuevo y uno existente."""
    period: VacationPeriod
    overlap_days: int
    fully_contained: bool


def vacation_dates(periods: Iterable[VacationPeriod]) -> Set[date]:
    """Fechas cubiertas por al menos un periodo."""
    covered: Set[date] = set()
    for period in periods:
        covered.update(period.dates())
    return covered


def total_vacation_days(periods: Iterable[VacationPeriod]) -> int:
    """Días de vacaciones sin contar dos veces los días solapados."""
    return len(vacation_dates(periods))


def detect_overlaps(period: VacationPeriod,
                    existing: Sequence[VacationPeriod]) -> List[VacationOverlap]:
    """
    Detecta los periodos existentes que se solapan con uno nuevo.

    Args:
        period: Periodo a comprobar
        existing: Periodos ya registrados

    Returns:
        List[VacationOverlap]: Un elemento por periodo solapado, en el orden recibido
    """
    overlaps = []
    for other in existing:
        if not period.overlaps(other):
            continue
        start = max(period.start_date, other.start_date)
        end = min(period.end_date, other.end_date)
        overlaps.append(VacationOverlap(
            period=other,
            overlap_days=(end - start).days + 1,
            fully_contained=(other.start_date <= period.start_date
                             and period.end_date <= other.end_date),
        ))
    return overlaps


def has_overlaps(periods: Sequence[VacationPeriod]) -> bool:
    """True si algún par de periodos se solapa."""
    ordered = sorted(periods, key=lambda p: (p.start_date, p.end_date))
    return any(a.overlaps(b) for a, b in zip(ordered, ordered[1:]))


def merge_overlapping(periods: Iterable[VacationPeriod]) -> Tuple[VacationPeriod, ...]:
    """
    Unifica periodos solapados o contiguos.

    Conserva la primera descripción no vacía de cada grupo. Es idempotente:
    aplicarla sobre su propio resultado no cambia nada.
    """
    ordered = sorted(periods, key=lambda p: (p.start_date, p.end_date))
    if not ordered:
        return ()

    merged: List[VacationPeriod] = [ordered[0]]
    for period in ordered[1:]:
        current = merged[-1]
        if current.overlaps(period) or current.is_adjacent(period):
            merged[-1] = VacationPeriod(
                start_date=current.start_date,
                end_date=max(current.end_date, period.end_date),
                description=current.description or period.description,
            )
        else:
            merged.append(period)

    return tuple(merged)
