"""
Infrastructure - Adaptadores de configuración, persistencia, exportación y logging.

Los subpaquetes se importan explícitamente; este paquete no reexporta nada
para que el dominio pueda leer las constantes sin cargar los adaptadores.
"""
