"""
Export estructurado (JSON) de recetas.

El esquema se define con modelos pydantic: sirven tanto para serializar un
`Recipe` como para validar un JSON externo y reconstruir la receta.

Reglas del esquema
------------------
- `factor` lleva siempre el texto original de la cantidad, nunca el float.
- `unit` es null cuando la unidad está vacía.
- `description` / `instructions` son los bloques unidos por una línea en blanco,
  o null si no hay bloques.
- Los ingredientes sueltos van en `ingredients`; los grupos en
  `ingredient_groups` (recursivo).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..domains.recipes.amounts import parse_amount
from ..domains.recipes.models import (
    Amount,
    Ingredient,
    IngredientEntry,
    IngredientGroup,
    Recipe,
)


# ============================================================
# Esquema
# ============================================================

class AmountExport(BaseModel):
    """Cantidad exportada."""

    factor: str = Field(..., description="Texto original de la cantidad")
    unit: Optional[str] = Field(default=None, description="Unidad (null si está vacía)")


class IngredientExport(BaseModel):
    """Ingrediente exportado."""

    name: str = Field(..., description="Nombre del ingrediente")
    amount: Optional[AmountExport] = Field(default=None, description="Cantidad, si la hay")
    link: Optional[str] = Field(default=None, description="Destino del link, si lo hay")


class IngredientGroupExport(BaseModel):
    """Grupo de ingredientes exportado (recursivo)."""

    title: str = Field(..., description="Texto del heading del grupo")
    ingredients: List[IngredientExport] = Field(default_factory=list)
    ingredient_groups: List["IngredientGroupExport"] = Field(default_factory=list)


class RecipeExport(BaseModel):
    """Documento de receta exportado."""

    title: str = Field(..., description="Título de la receta")
    description: Optional[str] = Field(default=None)
    tags: List[str] = Field(default_factory=list)
    yields: List[AmountExport] = Field(default_factory=list)
    ingredients: List[IngredientExport] = Field(default_factory=list)
    ingredient_groups: List[IngredientGroupExport] = Field(default_factory=list)
    instructions: Optional[str] = Field(default=None)


IngredientGroupExport.model_rebuild()


# ============================================================
# Recipe → export
# ============================================================

def _join_blocks(blocks: tuple) -> Optional[str]:
    return "\n\n".join(blocks) if blocks else None


def _amount_to_export(amount: Optional[Amount]) -> Optional[AmountExport]:
    if amount is None:
        return None
    return AmountExport(factor=amount.original_text, unit=amount.unit or None)


def _ingredient_to_export(ingredient: Ingredient) -> IngredientExport:
    return IngredientExport(
        name=ingredient.name,
        amount=_amount_to_export(ingredient.amount),
        link=ingredient.link,
    )


def _group_to_export(group: IngredientGroup) -> IngredientGroupExport:
    return IngredientGroupExport(
        title=group.name,
        ingredients=[_ingredient_to_export(i) for i in group.ingredients],
        ingredient_groups=[_group_to_export(g) for g in group.groups],
    )


def to_export(recipe: Recipe) -> RecipeExport:
    """
    Proyecta un `Recipe` al esquema de export.
    """
    return RecipeExport(
        title=recipe.title,
        description=_join_blocks(recipe.description),
        tags=list(recipe.tags),
        yields=[_amount_to_export(y) for y in recipe.yields],
        ingredients=[_ingredient_to_export(i) for i in recipe.ungrouped_ingredients],
        ingredient_groups=[_group_to_export(g) for g in recipe.ingredient_groups],
        instructions=_join_blocks(recipe.instructions),
    )


# ============================================================
# export → Recipe
# ============================================================

def _amount_from_export(data: Optional[AmountExport]) -> Optional[Amount]:
    if data is None:
        return None
    return parse_amount(data.factor)


def _ingredient_from_export(data: IngredientExport) -> Ingredient:
    return Ingredient(name=data.name, amount=_amount_from_export(data.amount), link=data.link)


def _group_depth(data: IngredientGroupExport) -> int:
    return 1 + max((_group_depth(g) for g in data.ingredient_groups), default=0)


def _group_from_export(data: IngredientGroupExport, level: int) -> IngredientGroup:
    children: List[IngredientEntry] = [_ingredient_from_export(i) for i in data.ingredients]
    children.extend(_group_from_export(g, level + 1) for g in data.ingredient_groups)
    return IngredientGroup(name=data.title, level=level, children=tuple(children))


def recipe_from_export(data: Union[str, Dict[str, Any], RecipeExport]) -> Recipe:
    """
    Valida un documento exportado y reconstruye el `Recipe`.

    Los niveles de los grupos se reconstruyen desde la profundidad de anidamiento
    (el primer nivel es 2). Las cantidades se vuelven a parsear desde `factor`.

    Raises:
        pydantic.ValidationError: Si el documento no respeta el esquema.
    """
    if isinstance(data, RecipeExport):
        doc = data
    elif isinstance(data, str):
        doc = RecipeExport.model_validate_json(data)
    else:
        doc = RecipeExport.model_validate(data)

    depth = max((_group_depth(g) for g in doc.ingredient_groups), default=0)
    if depth > 6:
        raise ValueError(f"Anidamiento de grupos demasiado profundo ({depth} niveles, máximo 6).")
    # Se arranca en nivel 2 salvo que la profundidad obligue a usar el nivel 1
    first_level = min(2, 7 - depth) if depth else 2

    ingredients: List[IngredientEntry] = [_ingredient_from_export(i) for i in doc.ingredients]
    ingredients.extend(_group_from_export(g, first_level) for g in doc.ingredient_groups)

    return Recipe(
        title=doc.title,
        description=(doc.description,) if doc.description else (),
        tags=tuple(doc.tags),
        yields=tuple(_amount_from_export(y) for y in doc.yields),
        ingredients=tuple(ingredients),
        instructions=(doc.instructions,) if doc.instructions else (),
    )


# ============================================================
# Exporter
# ============================================================

@dataclass
class JsonExporter:
    """
    Exportador JSON.

    Attributes
    ----------
    name:
        Identificador del exportador (clave en el registro de formatos).
    indent:
        Indentación del JSON generado.
    """

    name: str = "json"
    indent: int = 2

    def export(self, recipe: Recipe) -> str:
        return to_export(recipe).model_dump_json(indent=self.indent) + "\n"
