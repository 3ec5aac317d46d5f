"""
Infrastructure Export - Adaptadores de exportación del calendario.
"""

from .calendar_exporters import (
    CSVCalendarExporter,
    JSONCalendarExporter,
    days_to_dataframe,
    monthly_to_dataframe
)

__all__ = [
    'CSVCalendarExporter',
    'JSONCalendarExporter',
    'days_to_dataframe',
    'monthly_to_dataframe',
]
