"""
Application Ports - Puertos e interfaces de la capa de aplicación.

Este paquete define todos los contratos entre la capa de aplicación
y la infraestructura externa.
"""

from .interfaces import (
    ConfigurationRepository,
    CalendarExporter,
    LoggingService
)

__all__ = [
    'ConfigurationRepository',
    'CalendarExporter',
    'LoggingService',
]
