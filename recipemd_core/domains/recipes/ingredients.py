"""
Sección de ingredientes: parser de línea y constructor del árbol de grupos.

Una línea de ingrediente es el contenido inline del primer párrafo de un ítem
de lista:

    *2 1/4 cups* all-purpose flour
    *1* [pie crust](./pie-crust.md)

Los grupos se delimitan con headings; un heading de nivel mayor abre un
subgrupo del grupo abierto, uno de nivel igual o menor lo cierra.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ...domain_models import ParseWarning, WarningSink
from ...markdown_tree import Block, Inline, flatten_text
from .amounts import parse_amount
from .models import Ingredient, IngredientEntry, IngredientGroup

logger = logging.getLogger(__name__)


def _content_warning(warnings: WarningSink, message: str) -> None:
    logger.debug(message)
    warnings.append(ParseWarning("content", message))


# ============================================================
# Línea de ingrediente
# ============================================================

def parse_ingredient_line(
    inlines: Sequence[Inline],
    warnings: Optional[WarningSink] = None,
) -> Optional[Ingredient]:
    """
    Parsea una línea de ingrediente.

    Reglas:
    - Solo el primer nodo puede ser la cantidad (énfasis simple).
    - Si en el resto hay exactamente un link, su destino es `link`.
    - El nombre es el texto aplanado del resto, recortado.

    Returns:
        El ingrediente, o None si el nombre queda vacío (se registra una
        advertencia de contenido).
    """
    sink: WarningSink = warnings if warnings is not None else []
    nodes = list(inlines)

    amount = None
    if nodes and nodes[0].is_emphasis(1):
        amount = parse_amount(nodes[0].plain_text, sink)
        nodes = nodes[1:]

    links = [node for node in nodes if node.is_link]
    link = links[0].destination if len(links) == 1 else None

    name = flatten_text(nodes).strip()
    if not name:
        shown = flatten_text(inlines).strip() or "(vacía)"
        _content_warning(sink, f"Línea de ingrediente sin nombre descartada: {shown}")
        return None

    return Ingredient(name=name, amount=amount, link=link)


# ============================================================
# Árbol de grupos
# ============================================================

@dataclass
class _OpenGroup:
    """Grupo todavía abierto en la pila (mutable hasta el final del armado)."""
    name: str
    level: int
    children: List["_Entry"] = field(default_factory=list)

    def freeze(self) -> IngredientGroup:
        return IngredientGroup(
            name=self.name,
            level=self.level,
            children=_freeze_all(self.children),
        )


_Entry = Union[Ingredient, _OpenGroup]


def _freeze_all(entries: Sequence[_Entry]) -> Tuple[IngredientEntry, ...]:
    return tuple(e.freeze() if isinstance(e, _OpenGroup) else e for e in entries)


def build_ingredient_groups(
    blocks: Sequence[Block],
    warnings: Optional[WarningSink] = None,
) -> Tuple[IngredientEntry, ...]:
    """
    Construye el árbol de ingredientes a partir de headings y listas.

    Parameters
    ----------
    blocks:
        Bloques entre el primer y el segundo divisor.
    warnings:
        Lista donde registrar líneas descartadas y bloques inesperados.

    Returns
    -------
    Tuple[IngredientEntry, ...]
        Entradas de nivel superior en orden de documento: primero los
        ingredientes sueltos, luego los grupos.
    """
    sink: WarningSink = warnings if warnings is not None else []
    top_level: List[_Entry] = []
    stack: List[_OpenGroup] = []

    for block in blocks:
        if block.kind == "list":
            target = stack[-1].children if stack else top_level
            for item in block.items:
                ingredient = parse_ingredient_line(item, sink)
                if ingredient is not None:
                    target.append(ingredient)
            continue

        if block.is_heading():
            while stack and stack[-1].level >= block.level:
                stack.pop()
            group = _OpenGroup(name=block.text.strip(), level=block.level)
            (stack[-1].children if stack else top_level).append(group)
            stack.append(group)
            continue

        _content_warning(
            sink,
            f"Bloque '{block.kind}' inesperado en la sección de ingredientes: se ignora.",
        )

    return _freeze_all(top_level)
