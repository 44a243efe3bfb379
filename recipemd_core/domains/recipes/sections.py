"""
Segmentador de secciones.

Parte los bloques de nivel superior en metadata / ingredientes / instrucciones
usando los dos primeros divisores (thematic breaks). Un tercer divisor en
adelante es contenido común de las instrucciones.

Las definiciones de links (`[label]: destino`) no pertenecen a ninguna sección:
se apartan antes de buscar los divisores, estén donde estén.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ...domain_models import PARSE_MODES, ParseMode, ParseWarning, WarningSink
from ...exceptions import StructureError
from ...markdown_tree import Block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sections:
    """
    Resultado de la segmentación. Ningún bloque se duplica ni se pierde
    (salvo los dos divisores que actúan de frontera).
    """
    metadata: Tuple[Block, ...]
    ingredients: Tuple[Block, ...]
    instructions: Tuple[Block, ...]
    link_definitions: Tuple[Block, ...] = ()


def segment_sections(
    blocks: Sequence[Block],
    mode: ParseMode = "strict",
    warnings: Optional[WarningSink] = None,
) -> Sections:
    """
    Segmenta el documento en sus tres secciones.

    Parameters
    ----------
    blocks:
        Bloques de nivel superior, en orden de documento.
    mode:
        "strict" falla si no hay divisores; "permissive" trata todo como metadata.
    warnings:
        Lista donde registrar la advertencia de modo permisivo.

    Raises
    ------
    ValueError
        Modo desconocido.
    StructureError
        Modo estricto y ningún divisor.
    """
    if mode not in PARSE_MODES:
        raise ValueError(f"Modo de parseo desconocido: {mode!r}. Opciones: {', '.join(PARSE_MODES)}")

    definitions = tuple(b for b in blocks if b.kind == "link_definition")
    content = [b for b in blocks if b.kind != "link_definition"]

    breaks: List[int] = []
    for index, block in enumerate(content):
        if block.kind == "thematic_break":
            breaks.append(index)
            if len(breaks) == 2:
                break

    if not breaks:
        if mode == "strict":
            raise StructureError.missing_divider()
        message = "No hay divisores (---): todo el documento se trata como metadata."
        logger.debug(message)
        if warnings is not None:
            warnings.append(ParseWarning("missing_divider", message))
        return Sections(
            metadata=tuple(content),
            ingredients=(),
            instructions=(),
            link_definitions=definitions,
        )

    first = breaks[0]
    if len(breaks) == 1:
        return Sections(
            metadata=tuple(content[:first]),
            ingredients=tuple(content[first + 1:]),
            instructions=(),
            link_definitions=definitions,
        )

    second = breaks[1]
    return Sections(
        metadata=tuple(content[:first]),
        ingredients=tuple(content[first + 1:second]),
        instructions=tuple(content[second + 1:]),
        link_definitions=definitions,
    )
