"""
Configuración del calendario laboral.

Este módulo proporciona una interfaz unificada para acceder a toda la configuración
del sistema, incluyendo valores por defecto y validaciones.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    BALANCE_THRESHOLDS,
    DEBUG_CONFIG,
    DEFAULT_HOURS_PER_DAY,
    LOGGING_CONFIG,
    MAX_VACATION_DAYS,
    STORAGE_CONFIG,
    SUCCESS_MESSAGES,
    WARNING_MESSAGES
)

logger = logging.getLogger(LOGGING_CONFIG["logger_name"])

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """
    Clase principal de configuración del sistema.

    Maneja la carga de configuración desde múltiples fuentes, en este orden:
    - Valores por defecto
    - Archivo de configuración JSON
    - Variables de entorno CALENDARIO_LABORAL_*
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Inicializa la configuración.

        Args:
            config_file: Ruta al archivo de configuración personalizado (opcional)
        """
        self._config_data = {}
        self._config_file = config_file
        self._load_configuration()

    def _load_configuration(self):
        """Carga la configuración desde todas las fuentes disponibles."""
        # 1. Cargar valores por defecto
        self._load_defaults()

        # 2. Cargar desde archivo de configuración si existe
        if self._config_file and Path(self._config_file).exists():
            self._load_from_file(self._config_file)

        # 3. Cargar desde variables de entorno
        self._load_from_environment()

        # 4. Validar configuración
        self._validate_configuration()

    def _load_defaults(self):
        """Carga los valores por defecto desde constants.py."""
        self._config_data = copy.deepcopy({
            "hours": {
                "hours_per_day": DEFAULT_HOURS_PER_DAY
            },
            "vacations": {
                "max_days": MAX_VACATION_DAYS
            },
            "statistics": {
                "balance_thresholds": BALANCE_THRESHOLDS
            },
            "storage": {
                "path": STORAGE_CONFIG["default_filename"]
            },
            "logging": LOGGING_CONFIG,
            "messages": {
                "success": SUCCESS_MESSAGES,
                "warning": WARNING_MESSAGES
            },
            "debug": DEBUG_CONFIG
        })

    def _load_from_file(self, config_file: str):
        """Carga configuración desde archivo JSON."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("No se pudo cargar el archivo de configuración %s: %s", config_file, e)
            return

        # Merge de configuración usando deep update
        self._deep_update(self._config_data, file_config)

    def _load_from_environment(self):
        """Carga configuración desde variables de entorno."""
        # Mapeo de variables de entorno a configuración
        env_mappings = {
            "CALENDARIO_LABORAL_DEBUG": ("debug", "enable_debug", bool),
            "CALENDARIO_LABORAL_LOG_LEVEL": ("logging", "level", str),
            "CALENDARIO_LABORAL_STORAGE_PATH": ("storage", "path", str),
            "CALENDARIO_LABORAL_HOURS_PER_DAY": ("hours", "hours_per_day", float),
            "CALENDARIO_LABORAL_MAX_VACATION_DAYS": ("vacations", "max_days", int)
        }

        for env_var, (section, key, var_type) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    if var_type == bool:
                        value = env_value.lower() in ('true', '1', 'yes', 'on')
                    elif var_type == int:
                        value = int(env_value)
                    elif var_type == float:
                        value = float(env_value)
                    else:
                        value = env_value

                    if section not in self._config_data:
                        self._config_data[section] = {}
                    self._config_data[section][key] = value

                except ValueError:
                    logger.warning("Valor inválido para %s: %s", env_var, env_value)

    def _validate_configuration(self):
        """Valida que la configuración sea coherente."""
        errors = []

        thresholds = self._config_data["statistics"]["balance_thresholds"]
        if not thresholds["excelente"] >= thresholds["ok"] >= thresholds["advertencia"]:
            errors.append("Los umbrales de saldo deben cumplir excelente >= ok >= advertencia")

        if self._config_data["hours"]["hours_per_day"] <= 0:
            errors.append("Las horas por jornada deben ser mayores que 0")

        if self._config_data["vacations"]["max_days"] < 1:
            errors.append("Debe permitirse al menos 1 día de vacaciones")

        if str(self._config_data["logging"]["level"]).upper() not in VALID_LOG_LEVELS:
            errors.append(f"Nivel de log inválido: {self._config_data['logging']['level']}")

        if errors:
            raise ValueError("Errores en la configuración: " + "; ".join(errors))

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Actualiza recursivamente un diccionario."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    # =====================================================================
    # Métodos de acceso a configuración específica
    # =====================================================================

    def get_logging_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de logging."""
        return self._config_data["logging"]

    # =====================================================================
    # Métodos de utilidad
    # =====================================================================

    def is_debug_enabled(self) -> bool:
        """Verifica si el modo debug está habilitado."""
        return self._config_data["debug"]["enable_debug"]

    def get_log_level(self) -> str:
        """Nivel de log efectivo: DEBUG si el modo debug está activo."""
        if self.is_debug_enabled():
            return "DEBUG"
        return str(self._config_data["logging"]["level"]).upper()

    def get_hours_per_day(self) -> float:
        """Horas de una jornada usadas para expresar el saldo en días."""
        return self._config_data["hours"]["hours_per_day"]

    def get_storage_path(self) -> str:
        """Ruta por defecto del fichero de configuración guardada."""
        return self._config_data["storage"]["path"]

    def get_max_vacation_days(self) -> int:
        """Días de vacaciones permitidos al año."""
        return self._config_data["vacations"]["max_days"]

    def get_balance_thresholds(self) -> Dict[str, float]:
        """Umbrales excelente/ok/advertencia del estado del saldo de horas."""
        return self._config_data["statistics"]["balance_thresholds"]

    def get_message(self, category: str, key: str) -> str:
        """Obtiene un mensaje del sistema."""
        return self._config_data["messages"].get(category, {}).get(
            key, f"Mensaje no encontrado: {category}.{key}"
        )

    # =====================================================================
    # Métodos de configuración dinámica
    # =====================================================================

    def update_setting(self, path: str, value: Any):
        """
        Actualiza un valor de configuración dinámicamente.

        Args:
            path: Ruta del setting en formato "section.key" o "section.subsection.key"
            value: Nuevo valor
        """
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        Obtiene un valor de configuración por ruta.

        Args:
            path: Ruta del setting en formato "section.key"
            default: Valor por defecto si no se encuentra

        Returns:
            Valor de configuración o default
        """
        keys = path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def save_to_file(self, filename: str):
        """
        Guarda la configuración actual a un archivo.

        Args:
            filename: Nombre del archivo donde guardar
        """
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(self._config_data, f, indent=2, ensure_ascii=False)

    def reset_to_defaults(self):
        """Resetea la configuración a los valores por defecto."""
        self._load_defaults()

    def get_all_config(self) -> Dict[str, Any]:
        """Obtiene toda la configuración como diccionario."""
        return copy.deepcopy(self._config_data)


# =====================================================================
# Instancia global de configuración
# =====================================================================

# Instancia global que puede ser importada y usada en toda la aplicación
settings = Settings()

# Funciones de conveniencia para acceso rápido
def get_hours_per_day() -> float:
    """Obtiene las horas de una jornada."""
    return settings.get_hours_per_day()

def get_storage_path() -> str:
    """Obtiene la ruta por defecto del almacenamiento."""
    return settings.get_storage_path()

def get_log_level() -> str:
    """Obtiene el nivel de log configurado."""
    return settings.get_log_level()

def is_debug_mode() -> bool:
    """Verifica si está en modo debug."""
    return settings.is_debug_enabled()
