"""
Constantes del dominio del calendario laboral.

Valores fijos que necesitan los modelos y servicios del núcleo. La capa de
infraestructura los reexporta y añade los suyos (almacenamiento, logging,
exportación); el núcleo nunca importa de ella.
"""

from typing import List

# =====================================================================
# Año objetivo
# =====================================================================

# Ventana de años permitidos respecto al año actual
YEAR_WINDOW = {
    "years_before": 2,
    "years_after": 5
}

# =====================================================================
# Ciclo de trabajo
# =====================================================================

DAYS_PER_WEEK = 7

# =====================================================================
# Horas
# =====================================================================

# Límites de horas por día (jornada, guardia, turno extra)
HOURS_LIMITS = {
    "min": 0.0,
    "max": 24.0,
    "decimal_places": 2
}

# Horas por defecto según el tipo de día
DEFAULT_WORKING_HOURS = {
    "weekday": 8.0,
    "saturday": 8.0,
    "sunday": 8.0,
    "holiday": 8.0
}

# Horas anuales de convenio
ANNUAL_CONTRACT_HOURS = {
    "min": 1,
    "max": 3000,
    "warning_low": 1000,
    "warning_high": 2500,
    "default": 1762,        # Jornada completa típica en España
    "weeks_per_year": 52,
    "max_weekly_hours": 168
}

# Horas de una jornada usadas para expresar el saldo en días
DEFAULT_HOURS_PER_DAY = 8.0

# =====================================================================
# Festivos, vacaciones y guardias
# =====================================================================

MAX_VACATION_DAYS = 30

TEXT_LIMITS = {
    "holiday_name": 100,
    "vacation_description": 100,
    "guardia_description": 200,
    "extra_shift_description": 200
}

# =====================================================================
# Estadísticas
# =====================================================================

# Umbrales del porcentaje de cumplimiento de horas de convenio
BALANCE_THRESHOLDS = {
    "excelente": 105.0,
    "ok": 100.0,
    "advertencia": 95.0
}

PERCENTAGE_DECIMALS = 2

# =====================================================================
# Nombres
# =====================================================================

# Índice 0 = lunes (date.weekday())
WEEKDAY_NAMES: List[str] = [
    "lunes", "martes", "miercoles", "jueves", "viernes", "sabado", "domingo"
]

WEEKDAY_DISPLAY_NAMES: List[str] = [
    "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"
]

MONTH_NAMES: List[str] = [
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre"
]

# =====================================================================
# Avisos del dominio
# =====================================================================

DOMAIN_WARNING_MESSAGES = {
    "annual_hours_low": "Las horas anuales son inusualmente bajas",
    "annual_hours_high": "Las horas anuales son inusualmente altas",
    "vacation_overlap": "Hay períodos de vacaciones solapados",
    "vacation_limit": "Se supera el límite anual de días de vacaciones"
}
