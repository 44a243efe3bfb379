"""
Export de presentación (HTML) de recetas.

Vocabulario de clases fijo:

    article.recipe
      h1.title
      div.description
      div.tags > span.tag
      div.yields > span.yield
      section.ingredients > ul > li.ingredient (em.amount, a)
        section.ingredient-group > h2..h6 + ul + subgrupos
      section.instructions

Los bloques de descripción e instrucciones se convierten de markdown a HTML
con marko; el resto del texto se escapa con `html.escape`.

Con `profile.schema_org` se agrega microdata schema.org (Recipe) sobre los
mismos elementos.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domains.recipes.models import Ingredient, IngredientGroup, Recipe
from ..domains.recipes.profiles import PLAIN_V1, RecipeProfile
from ..markdown_tree import render_html as markdown_to_html

SCHEMA_ORG_RECIPE = "https://schema.org/Recipe"


def _attrs(css_class: str, itemprop: Optional[str], schema_org: bool) -> str:
    out = f' class="{css_class}"'
    if schema_org and itemprop:
        out += f' itemprop="{itemprop}"'
    return out


def _heading_level(level: int) -> int:
    return min(max(level, 2), 6)


def _blocks_to_html(blocks: Tuple[str, ...], link_definitions: Tuple[str, ...]) -> str:
    # Las definiciones no generan HTML propio, solo resuelven los links por referencia
    return markdown_to_html("\n\n".join(blocks + link_definitions)).rstrip("\n")


@dataclass
class HtmlExporter:
    """
    Exportador HTML.

    Attributes
    ----------
    name:
        Identificador del exportador (clave en el registro de formatos).
    profile:
        Perfil de presentación (secciones visibles, títulos, schema.org).
    """

    name: str = "html"
    profile: RecipeProfile = field(default=PLAIN_V1)

    def export(self, recipe: Recipe) -> str:
        """
        Renderiza la receta completa como un `<article>`.
        """
        profile = self.profile
        schema = profile.schema_org
        show = set(profile.show)

        lines: List[str] = []
        if schema:
            lines.append(f'<article class="recipe" itemscope itemtype="{SCHEMA_ORG_RECIPE}">')
        else:
            lines.append('<article class="recipe">')

        lines.append(f"<h1{_attrs('title', 'name', schema)}>{html.escape(recipe.title)}</h1>")

        # DESCRIPCIÓN
        if "description" in show and recipe.description:
            lines.append(f"<div{_attrs('description', 'description', schema)}>")
            lines.append(_blocks_to_html(recipe.description, recipe.link_definitions))
            lines.append("</div>")

        # TAGS
        if "tags" in show and recipe.tags:
            spans = " ".join(
                f"<span{_attrs('tag', 'keywords', schema)}>{html.escape(tag)}</span>"
                for tag in recipe.tags
            )
            lines.append(f'<div class="tags">{spans}</div>')

        # YIELDS
        if "yields" in show and recipe.yields:
            spans = ", ".join(
                f"<span{_attrs('yield', 'recipeYield', schema)}>{html.escape(str(y))}</span>"
                for y in recipe.yields
            )
            lines.append(f'<div class="yields">{spans}</div>')

        # INGREDIENTES
        if "ingredients" in show and recipe.ingredients:
            lines.append('<section class="ingredients">')
            section_title = (profile.titles.get("ingredients", "") or "").strip()
            if section_title:
                lines.append(f"<h2>{html.escape(section_title)}</h2>")
            lines.extend(self._render_ingredient_list(recipe.ungrouped_ingredients))
            for group in recipe.ingredient_groups:
                lines.extend(self._render_group(group))
            lines.append("</section>")

        # INSTRUCCIONES
        if "instructions" in show and recipe.instructions:
            lines.append(f"<section{_attrs('instructions', 'recipeInstructions', schema)}>")
            section_title = (profile.titles.get("instructions", "") or "").strip()
            if section_title:
                lines.append(f"<h2>{html.escape(section_title)}</h2>")
            lines.append(_blocks_to_html(recipe.instructions, recipe.link_definitions))
            lines.append("</section>")

        lines.append("</article>")
        return "\n".join(lines) + "\n"

    # ---------- Ingredientes ----------

    def _render_group(self, group: IngredientGroup) -> List[str]:
        level = _heading_level(group.level)
        lines = ['<section class="ingredient-group">']
        lines.append(f"<h{level}>{html.escape(group.name)}</h{level}>")
        lines.extend(self._render_ingredient_list(group.ingredients))
        for child in group.groups:
            lines.extend(self._render_group(child))
        lines.append("</section>")
        return lines

    def _render_ingredient_list(self, ingredients: Tuple[Ingredient, ...]) -> List[str]:
        if not ingredients:
            return []
        lines = ["<ul>"]
        lines.extend(self._render_ingredient(i) for i in ingredients)
        lines.append("</ul>")
        return lines

    def _render_ingredient(self, ingredient: Ingredient) -> str:
        parts: List[str] = [f"<li{_attrs('ingredient', 'recipeIngredient', self.profile.schema_org)}>"]
        if ingredient.amount is not None and str(ingredient.amount):
            parts.append(f'<em class="amount">{html.escape(str(ingredient.amount))}</em> ')

        name = html.escape(ingredient.name)
        if ingredient.link is not None:
            name = f'<a href="{html.escape(ingredient.link, quote=True)}">{name}</a>'
        parts.append(name)
        parts.append("</li>")
        return "".join(parts)
