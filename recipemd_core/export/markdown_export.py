"""
Export de reconstrucción (markdown RecipeMD).

Envuelve `RecipeRenderer` con la misma interfaz que el resto de los exportadores.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..domains.recipes.models import Recipe
from ..domains.recipes.renderer import RecipeRenderer


@dataclass
class MarkdownExporter:
    """
    Exportador markdown.

    Attributes
    ----------
    name:
        Identificador del exportador (clave en el registro de formatos).
    """

    name: str = "markdown"
    renderer: RecipeRenderer = field(default_factory=RecipeRenderer)

    def export(self, recipe: Recipe) -> str:
        return self.renderer.render_markdown(recipe)
