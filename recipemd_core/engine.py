from __future__ import annotations

"""
recipemd_core.engine
====================

Orquestador de alto nivel del pipeline de recetas.

Este módulo expone una **API interna** y estable para correr el flujo completo
del core (markdown → bloques → Recipe → formato de salida), sin preocuparse por:

- archivos
- detalles de CLI

La idea es que:

- La CLI (`cli.py`) use estas funciones.
- Cualquier otra capa (scripts, servicios) también llame a este módulo.
"""

import logging
from typing import Optional, Tuple, TypedDict

from .core.abstractions import BlockParser
from .domain_models import ParseMode, ParseResult, ParseWarning
from .domains.recipes.builder import RecipeBuilder
from .domains.recipes.models import Recipe
from .domains.recipes.profiles import get_profile
from .export import export_recipe
from .markdown_tree import parse_blocks

logger = logging.getLogger(__name__)


class RecipeRunResult(TypedDict):
    """
    Resultado de una corrida completa del pipeline.

    Esta estructura es deliberadamente simple, pensada para:
    - Devolver datos a la CLI u otra capa llamadora.
    - Realizar asserts en tests de integración.
    """

    recipe: Recipe
    """Receta parseada (fuente de verdad tipada para los exportadores)."""

    warnings: Tuple[ParseWarning, ...]
    """Advertencias no fatales del parseo."""

    output: str
    """Salida serializada en el formato pedido."""


def parse_recipe(
    source: str,
    mode: ParseMode = "strict",
    block_parser: BlockParser = parse_blocks,
) -> ParseResult:
    """
    Parsea un documento RecipeMD.

    Args:
        source:
            Texto markdown completo.
        mode:
            "strict" (sin divisores → `StructureError`) o "permissive".
        block_parser:
            Convierte el texto en bloques (default: marko vía `parse_blocks`).

    Returns:
        ParseResult con la receta y las advertencias.

    Raises:
        StructureError: Si el documento no tiene la estructura mínima.
    """
    result = RecipeBuilder().build(block_parser(source), mode=mode)
    recipe = result.recipe
    logger.info(
        "Receta '%s': %d ingrediente(s), %d grupo(s), %d advertencia(s)",
        recipe.title,
        sum(1 for _ in recipe.iter_ingredients()),
        len(recipe.ingredient_groups),
        len(result.warnings),
    )
    return result


def run_recipe_pipeline(
    *,
    source: str,
    mode: ParseMode = "strict",
    output_format: str = "json",
    profile_id: Optional[str] = None,
) -> RecipeRunResult:
    """
    Ejecuta el pipeline completo (sin I/O de archivos).

    Flujo:
    ------
    1) Parseo markdown (`markdown_tree.parse_blocks`).
    2) Armado de la receta (`RecipeBuilder.build`).
    3) Export al formato pedido (`export.export_recipe`).

    Args:
        source:
            Texto markdown del documento.
        mode:
            Modo de parseo.
        output_format:
            "json", "html" o "markdown".
        profile_id:
            Perfil HTML (solo aplica a "html").

    Raises:
        StructureError: Documento sin estructura mínima.
        UnknownFormatError: Formato o perfil desconocido.
    """
    profile = get_profile(profile_id) if profile_id else None
    result = parse_recipe(source, mode=mode)
    output = export_recipe(result.recipe, output_format, profile)

    return RecipeRunResult(
        recipe=result.recipe,
        warnings=result.warnings,
        output=output,
    )
