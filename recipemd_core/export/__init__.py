"""
Exportadores de recetas.

Cada exportador es una proyección pura de un `Recipe` terminado a un formato
de salida. Todos comparten la interfaz `RecipeExporter` (ver `core.abstractions`).
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.abstractions import RecipeExporter
from ..domains.recipes.models import Recipe
from ..domains.recipes.profiles import RecipeProfile, get_profile
from ..exceptions import UnknownFormatError
from .html_export import HtmlExporter
from .json_export import JsonExporter, recipe_from_export, to_export
from .markdown_export import MarkdownExporter

OUTPUT_FORMATS: Tuple[str, ...] = ("json", "html", "markdown")


def get_exporter(fmt: str, profile: Optional[RecipeProfile] = None) -> RecipeExporter:
    """
    Devuelve el exportador para `fmt`.

    Args:
        fmt: "json", "html" o "markdown".
        profile: Perfil HTML (solo se usa con "html"; default `plain_v1`).

    Raises:
        UnknownFormatError: Si el formato no existe.
    """
    if fmt == "json":
        return JsonExporter()
    if fmt == "html":
        return HtmlExporter(profile=profile or get_profile("plain_v1"))
    if fmt == "markdown":
        return MarkdownExporter()
    raise UnknownFormatError(fmt, OUTPUT_FORMATS)


def export_recipe(recipe: Recipe, fmt: str, profile: Optional[RecipeProfile] = None) -> str:
    """Exporta `recipe` al formato pedido."""
    return get_exporter(fmt, profile).export(recipe)


__all__ = [
    "OUTPUT_FORMATS",
    "HtmlExporter",
    "JsonExporter",
    "MarkdownExporter",
    "export_recipe",
    "get_exporter",
    "recipe_from_export",
    "to_export",
]
