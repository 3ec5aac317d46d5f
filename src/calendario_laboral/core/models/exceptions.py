"""
Excepciones del dominio del calendario laboral.

Todos los errores se detectan al construir o validar los objetos de valor,
antes de generar ningún calendario. El generador y el agregador de
estadísticas no lanzan excepciones sobre una configuración válida.
"""


class CalendarConfigurationError(ValueError):
    """Error base para cualquier configuración inválida del calendario."""


class InvalidCycleError(CalendarConfigurationError):
    """Ciclo de trabajo mal formado (máscara sin días de trabajo, parte vacía...)."""


class InvalidOffsetError(CalendarConfigurationError):
    """Posición en el ciclo fuera del rango de la parte o tipo de día incoherente."""


class InvalidDateRangeError(CalendarConfigurationError):
    """Rango de fechas inválido o fecha fuera del año objetivo."""


class InvalidGuardiaPlacementError(CalendarConfigurationError):
    """Guardia registrada en un día que el ciclo marca como trabajado."""


class DuplicateDateError(CalendarConfigurationError):
    """Dos elementos registrados para la misma fecha donde debe ser única."""


class InvalidHoursError(CalendarConfigurationError):
    """Valor de horas fuera de los límites permitidos."""


class VacationLimitExceededError(CalendarConfigurationError):
    """Se supera el máximo de días de vacaciones por año."""
