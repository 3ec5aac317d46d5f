#!/usr/bin/env python3
"""
Generador de Calendario Laboral

Uso:
    python main.py [configuracion.json] [salida.csv]

Sin argumentos se usa la ruta de almacenamiento configurada
(CALENDARIO_LABORAL_STORAGE_PATH).

Ejemplo:
    python main.py calendario-laboral-config.json calendario_2025.csv
"""

import sys

from calendario_laboral.application import (
    CalendarGenerationRequest,
    ExportCalendarUseCase,
    ExportFormat,
    ExportRequest,
    GenerateCalendarUseCase
)
from calendario_laboral.core.models import CalendarConfigurationError, DayState
from calendario_laboral.core.services import ConfigurationReviewer, StatisticsAggregator
from calendario_laboral.infrastructure.config import settings
from calendario_laboral.infrastructure.export import CSVCalendarExporter, JSONCalendarExporter
from calendario_laboral.infrastructure.persistence import (
    JSONConfigurationRepository,
    StorageFormatError
)
from calendario_laboral.infrastructure.services import StandardLoggingService, configure_logger


def print_summary(result):
    """Muestra por pantalla el resumen del calendario generado."""
    statistics = result.statistics
    balance = statistics.hours_balance

    print(f"\n=== CALENDARIO {result.configuration.year} ===")
    print(f"Ciclo: {result.configuration.work_cycle}")
    print(f"Días del año: {statistics.total_days} (efectivos: {statistics.effective_days})")

    print("\nDías por estado:")
    for state in DayState:
        count = statistics.count(state)
        if count:
            print(f"  {state.value:<17} {count:>4}  ({statistics.percentage_of(state):.2f}%)")

    print("\nDistribución semanal:")
    for weekday in statistics.weekly.weekdays:
        print(f"  {weekday.name:<10} {weekday.worked_days:>3} días ({weekday.percentage:.2f}%)")
    if statistics.weekly.most_worked_name:
        print(f"  Más trabajado: {statistics.weekly.most_worked_name}, "
              f"menos trabajado: {statistics.weekly.least_worked_name}")

    print("\nHoras por mes:")
    for month in statistics.monthly:
        print(f"  {month.name:<11} {month.worked_hours:>8.2f} h  {month.worked_days:>3} días")

    print("\nSaldo de horas:")
    print(f"  Trabajadas: {balance.hours_worked:.2f}  Convenio: {balance.contract_hours:.2f}")
    print(f"  {balance.message} ({balance.compliance_percentage:.2f}%, {balance.status.value})")

    if result.warnings:
        print("\nAvisos:")
        for warning in result.warnings:
            print(f"  - {warning}")


def main():
    """Función principal del generador de calendario."""
    if len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help"):
        print("Uso: python main.py [configuracion.json] [salida.csv]")
        print("Ejemplo: python main.py calendario-laboral-config.json calendario.csv")
        sys.exit(0)

    config_path = sys.argv[1] if len(sys.argv) > 1 else settings.get_storage_path()
    output_path = sys.argv[2] if len(sys.argv) > 2 else None

    logging_service = StandardLoggingService(
        configure_logger(level=settings.get_log_level())
    )
    repository = JSONConfigurationRepository(config_path)

    if not repository.exists():
        print(f"Error: no existe el fichero de configuración {config_path}")
        sys.exit(1)

    try:
        configuration = repository.load()
    except (StorageFormatError, CalendarConfigurationError) as e:
        print(f"Error: configuración inválida: {e}")
        sys.exit(1)

    # Generar calendario
    generate_use_case = GenerateCalendarUseCase(
        configuration_repository=repository,
        logging_service=logging_service,
        aggregator=StatisticsAggregator(
            settings.get_hours_per_day(), settings.get_balance_thresholds()
        ),
        reviewer=ConfigurationReviewer(settings.get_max_vacation_days())
    )
    result = generate_use_case.execute(CalendarGenerationRequest(configuration=configuration))

    if not result.success:
        print(f"Error: {result.message}")
        for error in result.errors[:10]:
            print(f"  - {error}")
        sys.exit(1)

    print_summary(result)

    # Exportar si se indicó salida
    if output_path:
        export_format = ExportFormat.JSON if output_path.endswith(".json") else ExportFormat.CSV
        export_use_case = ExportCalendarUseCase(
            [CSVCalendarExporter(), JSONCalendarExporter()], logging_service
        )
        export_result = export_use_case.execute(ExportRequest(
            days=result.days,
            statistics=result.statistics,
            format=export_format,
            output_path=output_path
        ))
        if not export_result.success:
            print(f"\nError: {export_result.message}")
            sys.exit(1)
        print(f"\n{settings.get_message('success', 'calendar_exported')}: "
              f"{', '.join(export_result.files)}")


if __name__ == "__main__":
    main()
