"""
Builder para documentos de recetas.

Orquesta los componentes del pipeline estructural sobre una secuencia de
bloques ya parseados:

    segmentación → metadata → árbol de ingredientes → instrucciones

y arma el `Recipe` final junto a las advertencias acumuladas.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...domain_models import ParseMode, ParseResult, WarningSink
from ...exceptions import StructureError
from ...markdown_tree import Block, parse_blocks
from .ingredients import build_ingredient_groups
from .metadata import classify_metadata
from .models import Recipe
from .sections import segment_sections

logger = logging.getLogger(__name__)


class RecipeBuilder:
    """
    Builder para documentos de recetas.

    Implementa la lógica específica de recetas:
    - Segmentación en secciones
    - Clasificación de metadata
    - Armado del árbol de ingredientes

    Es stateless: una misma instancia puede usarse para varios documentos.
    """

    def build(self, blocks: Sequence[Block], mode: ParseMode = "strict") -> ParseResult:
        """
        Construye un `Recipe` a partir de bloques de nivel superior.

        Args:
            blocks: Bloques en orden de documento (de `parse_blocks` o armados a mano).
            mode: "strict" o "permissive" (solo afecta a la ausencia de divisores).

        Returns:
            ParseResult con la receta y las advertencias.

        Raises:
            StructureError: Sin título, o sin divisores en modo estricto.
            ValueError: Modo de parseo desconocido.
        """
        warnings: WarningSink = []

        sections = segment_sections(blocks, mode=mode, warnings=warnings)
        metadata = classify_metadata(sections.metadata, warnings)
        if metadata.title is None:
            raise StructureError.missing_title()

        ingredients = build_ingredient_groups(sections.ingredients, warnings)
        instructions = tuple(b.source for b in sections.instructions if b.source)

        recipe = Recipe(
            title=metadata.title,
            description=metadata.description,
            tags=metadata.tags,
            yields=metadata.yields,
            ingredients=ingredients,
            instructions=instructions,
            link_definitions=tuple(b.source for b in sections.link_definitions),
        )

        logger.debug("Receta '%s' armada con %d advertencia(s)", recipe.title, len(warnings))
        return ParseResult(recipe=recipe, warnings=tuple(warnings))

    def parse_document(self, markdown: str, mode: ParseMode = "strict") -> ParseResult:
        """
        Parsea un documento RecipeMD completo (texto markdown).
        """
        return self.build(parse_blocks(markdown), mode=mode)
