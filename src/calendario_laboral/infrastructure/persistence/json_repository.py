"""
Repositorio de configuraciones en un fichero JSON.

El fichero contiene un sobre versionado:

    {"version": "1.0", "savedAt": "<ISO-8601>", "data": {...}}
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from ...application.ports import ConfigurationRepository
from ...core.models import CalendarConfiguration
from ..config.constants import STORAGE_CONFIG, WARNING_MESSAGES
from .serializer import StorageFormatError, configuration_from_dict, configuration_to_dict

logger = logging.getLogger(__name__)


class JSONConfigurationRepository(ConfigurationRepository):
    """
    Guarda y carga una configuración en un fichero JSON.

    Una versión distinta de la actual se registra como aviso y se intenta
    cargar igualmente.
    """

    def __init__(self, file_path: Union[str, Path] = STORAGE_CONFIG["default_filename"],
                 reference_year: Optional[int] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            file_path: Ruta del fichero
            reference_year: Año actual para validar la ventana de años (opcional)
            clock: Función que da la fecha de guardado
        """
        self.file_path = Path(file_path)
        self.reference_year = reference_year
        self.clock = clock

    def save(self, config: CalendarConfiguration) -> bool:
        envelope = {
            "version": STORAGE_CONFIG["version"],
            "savedAt": self.clock().isoformat(),
            "data": configuration_to_dict(config),
        }
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(envelope, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error("No se pudo guardar la configuración en %s: %s", self.file_path, e)
            return False

        logger.info("Configuración guardada en %s", self.file_path)
        return True

    def load(self) -> Optional[CalendarConfiguration]:
        """
        Carga la configuración guardada.

        Raises:
            StorageFormatError: si el fichero no tiene un sobre válido
            CalendarConfigurationError: si los datos no superan la validación
        """
        envelope = self._read_envelope()
        if envelope is None:
            return None

        version = envelope.get("version")
        if version != STORAGE_CONFIG["version"]:
            logger.warning("%s: %s (esperada %s)", WARNING_MESSAGES["storage_version"],
                           version, STORAGE_CONFIG["version"])

        return configuration_from_dict(envelope["data"], reference_year=self.reference_year)

    def exists(self) -> bool:
        return self.file_path.exists()

    def delete(self) -> bool:
        if not self.file_path.exists():
            return False
        self.file_path.unlink()
        logger.info("Configuración eliminada: %s", self.file_path)
        return True

    def get_metadata(self) -> Optional[Dict[str, Any]]:
        envelope = self._read_envelope()
        if envelope is None:
            return None
        return {
            "version": envelope.get("version"),
            "savedAt": envelope.get("savedAt"),
            "year": envelope["data"].get("year") if isinstance(envelope["data"], dict) else None,
            "path": str(self.file_path),
        }

    def _read_envelope(self) -> Optional[Dict[str, Any]]:
        if not self.file_path.exists():
            return None
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                envelope = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageFormatError(f"El fichero {self.file_path} no es JSON válido: {e}")
        except OSError as e:
            raise StorageFormatError(f"No se pudo leer el fichero {self.file_path}: {e}")

        if not isinstance(envelope, dict) or "data" not in envelope:
            raise StorageFormatError(
                f"El fichero {self.file_path} no contiene una configuración guardada"
            )
        return envelope
