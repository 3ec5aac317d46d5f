"""
Conversión entre CalendarConfiguration y diccionarios JSON.

Las fechas se guardan como cadenas ISO-8601. Al reconstruir se vuelven a
construir los objetos de valor, así que una configuración guardada pasa
por las mismas validaciones que una nueva.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from ...core.models import (
    AnnualContractHours, CalendarConfiguration, CycleMode, CyclePosition, cycle_offset,
    ExtraShift, Guardia, Holiday, HolidayPolicy, StartedThisYear, VacationPeriod, WorkCycle,
    WorkedBefore, WorkingHoursConfig, Year
)

CONTRACT_STARTED_THIS_YEAR = "STARTED_THIS_YEAR"
CONTRACT_WORKED_BEFORE = "WORKED_BEFORE"

WORKING_HOURS_FIELDS = ("weekday", "saturday", "sunday", "holiday")


class StorageFormatError(ValueError):
    """Contenido guardado ilegible o con una estructura inesperada."""


def _parse_date(value: Any, field_name: str) -> date:
    if not isinstance(value, str):
        raise StorageFormatError(f"El campo {field_name} debe ser una fecha ISO")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise StorageFormatError(f"Fecha inválida en {field_name}: {value}")


def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise StorageFormatError(f"Falta el campo obligatorio '{key}'")
    return data[key]


def _as_dict(value: Any, field_name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise StorageFormatError(f"El campo {field_name} debe ser un objeto")
    return value


def _dict_list(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Lista opcional de objetos; vacía si falta o es null."""
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise StorageFormatError(f"El campo {key} debe ser una lista")
    return [_as_dict(item, key) for item in items]


# =====================================================================
# Serialización
# =====================================================================

def contract_start_to_dict(contract_start) -> Dict[str, Any]:
    if isinstance(contract_start, StartedThisYear):
        return {"type": CONTRACT_STARTED_THIS_YEAR, "date": contract_start.start_date.isoformat()}
    offset = contract_start.cycle_offset
    return {
        "type": CONTRACT_WORKED_BEFORE,
        "cycleOffset": offset.to_dict() if offset is not None else None,
    }


def configuration_to_dict(config: CalendarConfiguration) -> Dict[str, Any]:
    """Convierte una configuración en el diccionario 'data' del sobre guardado."""
    return {
        "year": config.year.value,
        "workCycle": config.work_cycle.to_dict(),
        "contractStart": contract_start_to_dict(config.contract_start),
        "workingHours": config.working_hours.to_dict(),
        "annualContractHours": config.annual_contract_hours.hours,
        "holidayPolicy": config.holiday_policy.value,
        "holidays": [
            {"date": h.date.isoformat(), "name": h.name} for h in config.holidays
        ],
        "vacations": [
            {"startDate": v.start_date.isoformat(), "endDate": v.end_date.isoformat(),
             "description": v.description}
            for v in config.vacations
        ],
        "guardias": [
            {"date": g.date.isoformat(), "hours": g.hours, "description": g.description}
            for g in config.guardias
        ],
        "extraShifts": [
            {"date": e.date.isoformat(), "hours": e.hours, "description": e.description}
            for e in config.extra_shifts
        ],
    }


# =====================================================================
# Deserialización
# =====================================================================

def work_cycle_from_dict(data: Any) -> WorkCycle:
    data = _as_dict(data, "workCycle")
    mode = _require(data, "mode")
    if mode == CycleMode.WEEKLY.value:
        mask = _require(data, "weeklyMask")
        if not isinstance(mask, list):
            raise StorageFormatError("El campo workCycle.weeklyMask debe ser una lista")
        return WorkCycle.weekly(mask)
    if mode == CycleMode.PARTS.value:
        parts = _require(data, "parts")
        if not isinstance(parts, list):
            raise StorageFormatError("El campo workCycle.parts debe ser una lista")
        return WorkCycle.from_parts(parts)
    raise StorageFormatError(f"Modo de ciclo desconocido: {mode}")


def cycle_offset_from_dict(data: Any) -> Optional[CyclePosition]:
    if data is None:
        return None
    data = _as_dict(data, "contractStart.cycleOffset")
    return cycle_offset(
        _require(data, "partNumber"),
        _require(data, "dayWithinPart"),
        _require(data, "dayType"),
    )


def contract_start_from_dict(data: Any):
    data = _as_dict(data, "contractStart")
    kind = _require(data, "type")
    if kind == CONTRACT_STARTED_THIS_YEAR:
        return StartedThisYear(_parse_date(_require(data, "date"), "contractStart.date"))
    if kind == CONTRACT_WORKED_BEFORE:
        return WorkedBefore(cycle_offset_from_dict(data.get("cycleOffset")))
    raise StorageFormatError(f"Tipo de inicio de contrato desconocido: {kind}")


def working_hours_from_dict(data: Any) -> WorkingHoursConfig:
    """Horas por tipo de día; las claves desconocidas se ignoran."""
    if data is None:
        return WorkingHoursConfig()
    data = _as_dict(data, "workingHours")
    return WorkingHoursConfig(**{
        key: value for key, value in data.items() if key in WORKING_HOURS_FIELDS
    })


def configuration_from_dict(data: Dict[str, Any],
                            reference_year: Optional[int] = None) -> CalendarConfiguration:
    """
    Reconstruye una configuración desde el diccionario 'data'.

    Args:
        data: Diccionario guardado
        reference_year: Año actual para validar la ventana de años (opcional)

    Raises:
        StorageFormatError: si falta algún campo, una fecha es ilegible o
            la estructura no es la esperada
        CalendarConfigurationError: si los valores no superan la validación
    """
    if not isinstance(data, dict):
        raise StorageFormatError("La configuración guardada debe ser un objeto")

    policy_value = data.get("holidayPolicy", HolidayPolicy.TRABAJAR.value)
    if not isinstance(policy_value, str):
        raise StorageFormatError("El campo holidayPolicy debe ser un texto")
    try:
        policy = HolidayPolicy.from_string(policy_value)
    except ValueError as e:
        raise StorageFormatError(str(e))

    return CalendarConfiguration(
        year=Year(_require(data, "year"), reference_year=reference_year),
        work_cycle=work_cycle_from_dict(_require(data, "workCycle")),
        contract_start=contract_start_from_dict(_require(data, "contractStart")),
        working_hours=working_hours_from_dict(data.get("workingHours")),
        annual_contract_hours=AnnualContractHours(
            data.get("annualContractHours", AnnualContractHours().hours)
        ),
        holiday_policy=policy,
        holidays=tuple(
            Holiday(_parse_date(_require(h, "date"), "holidays.date"), h.get("name"))
            for h in _dict_list(data, "holidays")
        ),
        vacations=tuple(
            VacationPeriod(
                _parse_date(_require(v, "startDate"), "vacations.startDate"),
                _parse_date(_require(v, "endDate"), "vacations.endDate"),
                v.get("description"),
            )
            for v in _dict_list(data, "vacations")
        ),
        guardias=tuple(
            Guardia(_parse_date(_require(g, "date"), "guardias.date"),
                    _require(g, "hours"), g.get("description") or "")
            for g in _dict_list(data, "guardias")
        ),
        extra_shifts=tuple(
            ExtraShift(_parse_date(_require(e, "date"), "extraShifts.date"),
                       _require(e, "hours"), e.get("description") or "")
            for e in _dict_list(data, "extraShifts")
        ),
    )
