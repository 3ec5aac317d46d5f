"""
Exportación del calendario a CSV (pandas) y JSON.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from ...application.ports import CalendarExporter
from ...core.models import CalendarDay, DayStatistics

CSV_OPTIONS = {"include_monthly": True, "separator": ",", "encoding": "utf-8"}
JSON_OPTIONS = {"indent": 2, "include_days": True}


def days_to_dataframe(days: Sequence[CalendarDay]) -> pd.DataFrame:
    """Tabla de días con una fila por fecha."""
    return pd.DataFrame([day.to_dict() for day in days])


def monthly_to_dataframe(statistics: DayStatistics) -> pd.DataFrame:
    """Tabla del desglose mensual."""
    return pd.DataFrame([
        {
            "mes": month.name,
            "horas": month.worked_hours,
            "dias_trabajados": month.worked_days,
            "horas_extra": month.extra_hours,
        }
        for month in statistics.monthly
    ])


def monthly_path_for(output_path: str) -> str:
    """Ruta del CSV mensual junto al CSV de días."""
    path = Path(output_path)
    return str(path.with_name(f"{path.stem}_mensual{path.suffix}"))


def _unknown_options(options: Dict[str, Any], known: Dict[str, Any]) -> List[str]:
    return [f"Opción desconocida: {key}" for key in options if key not in known]


class CSVCalendarExporter(CalendarExporter):
    """
    Exporta los días a CSV y, opcionalmente, el desglose mensual a
    un segundo fichero '<nombre>_mensual.csv'.
    """

    @property
    def format_name(self) -> str:
        return "csv"

    def export_calendar(self, days: Sequence[CalendarDay], statistics: DayStatistics,
                        output_path: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
        opts = {**CSV_OPTIONS, **(options or {})}

        days_to_dataframe(days).to_csv(
            output_path, index=False, sep=opts["separator"], encoding=opts["encoding"]
        )
        files = [output_path]

        if opts["include_monthly"]:
            monthly_path = monthly_path_for(output_path)
            monthly_to_dataframe(statistics).to_csv(
                monthly_path, index=False, sep=opts["separator"], encoding=opts["encoding"]
            )
            files.append(monthly_path)

        return files

    def validate_options(self, options: Dict[str, Any]) -> List[str]:
        errors = _unknown_options(options, CSV_OPTIONS)
        separator = options.get("separator", CSV_OPTIONS["separator"])
        if not isinstance(separator, str) or len(separator) != 1:
            errors.append("El separador debe ser un único carácter")
        return errors


class JSONCalendarExporter(CalendarExporter):
    """Exporta {days, statistics} a un fichero JSON."""

    @property
    def format_name(self) -> str:
        return "json"

    def export_calendar(self, days: Sequence[CalendarDay], statistics: DayStatistics,
                        output_path: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
        opts = {**JSON_OPTIONS, **(options or {})}

        payload = {"statistics": statistics.to_dict()}
        if opts["include_days"]:
            payload["days"] = [day.to_dict() for day in days]

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=opts["indent"], ensure_ascii=False)

        return [output_path]

    def validate_options(self, options: Dict[str, Any]) -> List[str]:
        errors = _unknown_options(options, JSON_OPTIONS)
        indent = options.get("indent", JSON_OPTIONS["indent"])
        if indent is not None and (not isinstance(indent, int) or indent < 0):
            errors.append("La indentación debe ser un entero no negativo")
        return errors
