"""
Infrastructure Persistence - Almacenamiento de configuraciones.
"""

from .serializer import (
    StorageFormatError,
    configuration_to_dict,
    configuration_from_dict
)
from .json_repository import JSONConfigurationRepository

__all__ = [
    'StorageFormatError',
    'configuration_to_dict',
    'configuration_from_dict',
    'JSONConfigurationRepository',
]
