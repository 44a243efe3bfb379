"""
Clasificador de metadata (bloques previos al primer divisor).

- Primer heading de nivel 1 → título.
- Párrafo cuyo único hijo es un énfasis simple (`*...*`) → tags.
- Párrafo cuyo único hijo es un énfasis doble (`**...**`) → yields.
- Todo lo demás → descripción.

Solo se respeta la primera aparición de título, tags y yields; las siguientes se
pliegan a la descripción con una advertencia de ambigüedad. El texto plegado se
escapa: cada bloque de la descripción es fuente markdown que se re-parsea como
ese mismo texto (y no como tags o yields).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ...domain_models import ParseWarning, WarningSink
from ...markdown_tree import Block, escape_text
from .amounts import parse_amount
from .models import Amount
from .splitting import split_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metadata:
    title: Optional[str]
    description: Tuple[str, ...]
    tags: Tuple[str, ...]
    yields: Tuple[Amount, ...]


def _ambiguity(warnings: WarningSink, message: str) -> None:
    logger.debug(message)
    warnings.append(ParseWarning("ambiguity", message))


def classify_metadata(
    blocks: Sequence[Block],
    warnings: Optional[WarningSink] = None,
) -> Metadata:
    """
    Clasifica los bloques de metadata.

    Args:
        blocks: Bloques anteriores al primer divisor.
        warnings: Lista donde registrar ambigüedades y fallas de cantidades.

    Returns:
        Metadata con `title=None` si no hubo ningún heading de nivel 1
        (el builder decide si eso es fatal).
    """
    sink: WarningSink = warnings if warnings is not None else []

    title: Optional[str] = None
    description: List[str] = []
    tags: Optional[Tuple[str, ...]] = None
    yields: Optional[Tuple[Amount, ...]] = None

    for block in blocks:
        if block.is_heading(1):
            if title is None:
                title = block.text.strip()
            else:
                _ambiguity(sink, f"Título duplicado '{block.text.strip()}': se agrega a la descripción.")
                description.append(escape_text(block.text.strip()))
            continue

        if block.kind == "paragraph" and block.has_sole_emphasis(1):
            content = block.text
            if tags is None:
                tags = tuple(split_list(content))
            else:
                _ambiguity(sink, "Párrafo de tags duplicado: se agrega a la descripción.")
                description.append(escape_text(content.strip()))
            continue

        if block.kind == "paragraph" and block.has_sole_emphasis(2):
            content = block.text
            if yields is None:
                yields = tuple(parse_amount(segment, sink) for segment in split_list(content))
            else:
                _ambiguity(sink, "Párrafo de yields duplicado: se agrega a la descripción.")
                description.append(escape_text(content.strip()))
            continue

        if block.source:
            description.append(block.source)

    return Metadata(
        title=title,
        description=tuple(description),
        tags=tags or (),
        yields=yields or (),
    )
