"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from calendario_laboral.core.models import (
    CalendarConfiguration,
    StartedThisYear,
    WorkCycle,
    WorkedBefore,
    Year,
    build_configuration,
    cycle_offset,
)
from calendario_laboral.core.services import CalendarGenerator, StatisticsAggregator

# Año fijo para que los tests no dependan del reloj
REFERENCE_YEAR = 2024


@pytest.fixture
def year_2024():
    """2024: bisiesto, el 1 de enero es lunes."""
    return Year(2024, reference_year=REFERENCE_YEAR)


@pytest.fixture
def year_2025():
    """2025: no bisiesto, el 1 de enero es miércoles."""
    return Year(2025, reference_year=REFERENCE_YEAR)


@pytest.fixture
def weekday_cycle():
    """Lunes a viernes."""
    return WorkCycle.weekly([True, True, True, True, True, False, False])


@pytest.fixture
def four_two_cycle():
    """4 días de trabajo y 2 de descanso."""
    return WorkCycle.from_parts([(4, 2)])


@pytest.fixture
def weekday_config(year_2024, weekday_cycle):
    """Lunes a viernes en 2024, sin overrides."""
    return CalendarConfiguration(year=year_2024, work_cycle=weekday_cycle)


@pytest.fixture
def four_two_config(year_2024, four_two_cycle):
    """4x2 que empieza el 1 de enero en el día 1 de trabajo de la parte 1."""
    return build_configuration(
        year_2024, four_two_cycle,
        contract_start=WorkedBefore(cycle_offset(1, 1, "WORK")),
    )


@pytest.fixture
def july_hire_config(year_2024, weekday_cycle):
    """Lunes a viernes con contrato desde el 1 de julio de 2024."""
    return build_configuration(
        year_2024, weekday_cycle, contract_start=StartedThisYear(date(2024, 7, 1))
    )


@pytest.fixture
def generator():
    return CalendarGenerator()


@pytest.fixture
def aggregator():
    return StatisticsAggregator()
