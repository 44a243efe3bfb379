"""
Abstracciones (Protocols) del pipeline de recetas.

Estos protocols definen las interfaces en las costuras del pipeline, para que
el engine pueda trabajar con cualquier implementación (parser markdown de
bloques, exportadores de formatos).
"""

from __future__ import annotations

from typing import List, Protocol

from ..markdown_tree import Block
from ..domains.recipes.models import Recipe


class BlockParser(Protocol):
    """
    Interfaz para convertir texto markdown en bloques de nivel superior.

    La implementación por defecto es `markdown_tree.parse_blocks` (marko).
    """

    def __call__(self, text: str) -> List[Block]:
        """
        Parsea `text` y devuelve los bloques en orden de documento.
        """
        ...


class RecipeExporter(Protocol):
    """
    Interfaz para proyectar un `Recipe` a un formato de salida.

    Cada exportador define:
    - Un identificador (`name`) usado en el registro de formatos
    - Cómo serializar la receta terminada
    """

    name: str

    def export(self, recipe: Recipe) -> str:
        """
        Serializa la receta.

        Args:
            recipe: Receta terminada (solo lectura).

        Returns:
            Texto en el formato del exportador.
        """
        ...
