"""
Modelos de dominio específicos para recetas.

Estos modelos definen la estructura de datos de una receta RecipeMD ya parseada.
Se crean una sola vez durante el parseo y son de solo lectura después
(dataclasses congeladas, secuencias como tuplas): los serializadores proyectan,
nunca modifican.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Amount:
    """
    Cantidad de un ingrediente o de un rendimiento (yield).

    `original_text` siempre está presente, aunque no se haya podido
    interpretar la cantidad.
    """
    quantity: Optional[float]
    unit: str
    original_text: str

    def __str__(self) -> str:
        return self.original_text.strip()


@dataclass(frozen=True)
class Ingredient:
    """
    Representa un ingrediente de la receta.
    """
    name: str
    amount: Optional[Amount] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class IngredientGroup:
    """
    Grupo de ingredientes delimitado por un heading.

    `level` es el nivel del heading (1..6); los subgrupos siempre tienen
    un nivel estrictamente mayor.
    """
    name: str
    level: int
    children: Tuple["IngredientEntry", ...] = ()

    @property
    def ingredients(self) -> Tuple[Ingredient, ...]:
        return tuple(c for c in self.children if isinstance(c, Ingredient))

    @property
    def groups(self) -> Tuple["IngredientGroup", ...]:
        return tuple(c for c in self.children if isinstance(c, IngredientGroup))


IngredientEntry = Union[Ingredient, IngredientGroup]


@dataclass(frozen=True)
class Recipe:
    """
    Documento completo de receta (modelo final parseado del markdown).

    description / instructions son secuencias de bloques de texto markdown.
    link_definitions guarda las definiciones `[label]: destino` del documento,
    necesarias para resolver links por referencia dentro de esos bloques.
    """
    title: str
    description: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    yields: Tuple[Amount, ...] = ()
    ingredients: Tuple[IngredientEntry, ...] = field(default_factory=tuple)
    instructions: Tuple[str, ...] = ()
    link_definitions: Tuple[str, ...] = ()

    @property
    def ungrouped_ingredients(self) -> Tuple[Ingredient, ...]:
        return tuple(e for e in self.ingredients if isinstance(e, Ingredient))

    @property
    def ingredient_groups(self) -> Tuple[IngredientGroup, ...]:
        return tuple(e for e in self.ingredients if isinstance(e, IngredientGroup))

    def iter_ingredients(self) -> Iterator[Ingredient]:
        """Recorre todos los ingredientes (agrupados o no) en orden de documento."""
        stack = list(reversed(self.ingredients))
        while stack:
            entry = stack.pop()
            if isinstance(entry, Ingredient):
                yield entry
            else:
                stack.extend(reversed(entry.children))
