"""
Renderer para documentos de recetas.

Reconstruye el texto fuente RecipeMD a partir de un `Recipe`. No busca una copia
byte a byte del original: el objetivo es que volver a parsear la salida dé una
receta equivalente (mismo título, tags, yields y árbol de ingredientes).
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ...markdown_tree import escape_inline, escape_line_start
from .models import Amount, Ingredient, IngredientEntry, IngredientGroup, Recipe


def _link_destination(dest: str) -> str:
    if re.search(r"[\s()<>]", dest):
        return "<" + dest.replace("<", "%3C").replace(">", "%3E") + ">"
    return dest


def _heading(level: int, text: str) -> str:
    content = escape_inline(text.strip())
    if content.endswith("#"):
        content = content[:-1] + "\\#"
    return ("#" * level + " " + content).rstrip()


def _amount_text(amount: Amount) -> str:
    return escape_inline(str(amount))


class RecipeRenderer:
    """
    Renderer para documentos de recetas.

    Implementa la reconstrucción del markdown:
    - Metadata (título, descripción, tags, yields)
    - Ingredientes sueltos y grupos (headings del nivel original)
    - Instrucciones
    """

    def render_markdown(self, recipe: Recipe) -> str:
        """
        Renderiza la receta a markdown RecipeMD.

        Siempre se emiten los dos divisores (aunque las secciones estén vacías)
        y una línea en blanco entre bloques.
        """
        blocks: List[str] = []

        blocks.append(_heading(1, recipe.title))

        blocks.extend(recipe.description)

        tags = [escape_inline(t) for t in recipe.tags]
        if tags:
            blocks.append("*" + ", ".join(tags) + "*")

        yields = [_amount_text(y) for y in recipe.yields if str(y)]
        if yields:
            blocks.append("**" + ", ".join(yields) + "**")

        blocks.append("---")
        blocks.extend(self._render_entries(recipe.ingredients))
        blocks.append("---")

        blocks.extend(recipe.instructions)

        # Las definiciones de links valen para todo el documento
        blocks.extend(recipe.link_definitions)

        return "\n\n".join(blocks) + "\n"

    # ---------- Ingredientes ----------

    def _render_entries(self, entries: Tuple[IngredientEntry, ...]) -> List[str]:
        blocks: List[str] = []
        items: List[str] = []

        for entry in entries:
            if isinstance(entry, Ingredient):
                items.append(self._render_ingredient(entry))
                continue
            if items:
                blocks.append("\n".join(items))
                items = []
            blocks.extend(self._render_group(entry))

        if items:
            blocks.append("\n".join(items))
        return blocks

    def _render_group(self, group: IngredientGroup) -> List[str]:
        return [_heading(group.level, group.name)] + self._render_entries(group.children)

    def _render_ingredient(self, ingredient: Ingredient) -> str:
        name = escape_inline(ingredient.name)
        if ingredient.link is not None:
            name = f"[{name}]({_link_destination(ingredient.link)})"

        if ingredient.amount is not None and str(ingredient.amount):
            return f"- *{_amount_text(ingredient.amount)}* {name}"
        return f"- {escape_line_start(name)}"
