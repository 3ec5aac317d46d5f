"""
Infrastructure Services - Servicios técnicos (logging).
"""

from .logging_service import StandardLoggingService, configure_logger

__all__ = [
    'StandardLoggingService',
    'configure_logger',
]
