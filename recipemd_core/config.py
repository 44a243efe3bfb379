# recipemd_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

from .domain_models import PARSE_MODES

"""
recipemd_core.config
====================

Gestión centralizada de configuración.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para uso local de la CLI.
- La librería (engine, builder, exportadores) NO lee configuración: recibe
  todo por parámetro. Solo la CLI resuelve defaults desde acá.

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Solo se valida el modo de parseo (argparse no valida los defaults). Un
  formato o perfil inválido falla donde se usa (`UnknownFormatError`).
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración.

    Attributes
    ----------
    parse_mode:
        Modo de parseo por defecto: "strict" | "permissive".
    output_format:
        Formato de salida por defecto: "json" | "html" | "markdown".
    html_profile:
        Id del perfil HTML por defecto (ver `domains/recipes/profiles.py`).
    output_dir:
        Directorio donde la CLI escribe salidas cuando se pide un archivo
        con ruta relativa.
    log_level:
        Nivel de logging de la CLI.
    """

    parse_mode: str = "strict"
    output_format: str = "json"
    html_profile: str = "plain_v1"

    # I/O
    output_dir: str = "output"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - RECIPEMD_PARSE_MODE (default: "strict")
    - RECIPEMD_OUTPUT_FORMAT (default: "json")
    - RECIPEMD_HTML_PROFILE (default: "plain_v1")
    - RECIPEMD_OUTPUT_DIR (default: "output")
    - LOG_LEVEL (default: "INFO")

    Notas
    -----
    - En tests, llamar `get_settings.cache_clear()` después de modificar el entorno.

    Raises
    ------
    ValueError
        Si RECIPEMD_PARSE_MODE no es un modo conocido.
    """
    parse_mode = os.getenv("RECIPEMD_PARSE_MODE", "strict")
    if parse_mode not in PARSE_MODES:
        raise ValueError(
            f"RECIPEMD_PARSE_MODE inválido: {parse_mode!r}. Opciones: {', '.join(PARSE_MODES)}"
        )

    return Settings(
        parse_mode=parse_mode,
        output_format=os.getenv("RECIPEMD_OUTPUT_FORMAT", "json"),
        html_profile=os.getenv("RECIPEMD_HTML_PROFILE", "plain_v1"),
        output_dir=os.getenv("RECIPEMD_OUTPUT_DIR", "output"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
