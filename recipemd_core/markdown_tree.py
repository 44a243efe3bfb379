from __future__ import annotations

"""
recipemd_core.markdown_tree
===========================

Adaptador entre el parser CommonMark externo (`marko`) y el pipeline de recetas.

El pipeline nunca inspecciona clases de marko: trabaja sobre un modelo de nodos
mínimo y neutro (`Block` / `Inline`) donde cada predicado estructural es una
consulta de capacidades (tipo de nodo, cantidad de hijos, fuerza del énfasis).

Esto permite:
- testear el pipeline construyendo secuencias de nodos a mano (ver helpers al final),
- cambiar de parser markdown tocando solo `parse_blocks()`.

Notas sobre marko
-----------------
- `marko.Markdown` NO es thread-safe: se crea una instancia por llamada.
- Cada bloque de nivel superior trae `source_span` sobre el texto ya normalizado
  (saltos de línea unificados), por eso normalizamos igual antes de recortar.
- `RawText` conserva las entidades HTML sin decodificar (`&amp;`); el renderer
  HTML de marko las decodifica antes de escapar, y acá hacemos lo mismo.
- Las definiciones de links (`[label]: destino`) se conservan como bloques
  `link_definition`: los bloques de descripción/instrucciones guardan su fuente
  markdown, y sin las definiciones los links por referencia quedan sin resolver.
"""

import html
import re
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Sequence, Tuple

import marko
from marko.md_renderer import MarkdownRenderer

InlineKind = Literal["text", "emphasis", "link", "image", "code", "html", "break"]
BlockKind = Literal["heading", "paragraph", "list", "thematic_break", "link_definition", "other"]

# Bloques de marko que no aportan contenido propio al documento
_SKIPPED_BLOCKS = {"BlankLine"}

# Caracteres con significado inline en CommonMark
_INLINE_SPECIAL = re.compile(r"([\\*_\[\]`<>&])")

# Marcadores de bloque que cambiarían el sentido de una línea si quedan al inicio
_LINE_START_MARKER = re.compile(r"^(\d+)([.)])(\s|$)|^([#>+\-=~|])")


# ============================================================
# Modelo neutro de nodos
# ============================================================

@dataclass(frozen=True)
class Inline:
    """
    Nodo inline.

    Attributes:
        kind:
            Tipo del nodo (texto, énfasis, link, ...).
        text:
            Contenido literal para nodos hoja (text, code, html, break).
        children:
            Hijos para nodos contenedores (emphasis, link, image).
        strength:
            Solo para `emphasis`: 1 = `*x*`, 2 = `**x**`.
        destination:
            Solo para `link` / `image`.
    """
    kind: InlineKind
    text: str = ""
    children: Tuple["Inline", ...] = ()
    strength: int = 0
    destination: Optional[str] = None

    def is_emphasis(self, strength: int) -> bool:
        return self.kind == "emphasis" and self.strength == strength

    @property
    def is_link(self) -> bool:
        return self.kind == "link"

    @property
    def plain_text(self) -> str:
        return flatten_text((self,))


@dataclass(frozen=True)
class Block:
    """
    Bloque de nivel superior del documento.

    Attributes:
        kind:
            heading | paragraph | list | thematic_break | link_definition | other.
        level:
            Nivel del heading (1..6). 0 para el resto.
        inlines:
            Contenido inline de headings y párrafos.
        items:
            Solo para listas: contenido inline del primer párrafo de cada ítem.
        source:
            Texto markdown original del bloque (sin líneas en blanco alrededor).
    """
    kind: BlockKind
    level: int = 0
    inlines: Tuple[Inline, ...] = ()
    items: Tuple[Tuple[Inline, ...], ...] = ()
    source: str = ""

    @property
    def text(self) -> str:
        return flatten_text(self.inlines)

    def is_heading(self, level: int | None = None) -> bool:
        return self.kind == "heading" and (level is None or self.level == level)

    def has_sole_emphasis(self, strength: int) -> bool:
        """
        True si el bloque tiene exactamente un hijo y ese hijo es un énfasis
        de la fuerza indicada (sin texto hermano).
        """
        return len(self.inlines) == 1 and self.inlines[0].is_emphasis(strength)


def flatten_text(inlines: Iterable[Inline]) -> str:
    """
    Aplana contenido inline a texto plano.

    Los énfasis y links aportan solo su texto; los saltos de línea se vuelven
    un espacio.
    """
    parts: List[str] = []
    for node in inlines:
        if node.kind == "break":
            parts.append(" ")
        elif node.children:
            parts.append(flatten_text(node.children))
        else:
            parts.append(node.text)
    return "".join(parts)


# ============================================================
# Adaptador marko → Block / Inline
# ============================================================

def _normalize_source(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
    return text.replace("\x00", "�")


def _convert_inlines(elements: Sequence[object] | str) -> Tuple[Inline, ...]:
    if isinstance(elements, str):
        return (Inline("text", text=elements),) if elements else ()
    return tuple(_convert_inline(e) for e in elements)


def _convert_inline(element) -> Inline:
    kind = element.get_type()
    children = element.children

    if kind == "Emphasis":
        return Inline("emphasis", children=_convert_inlines(children), strength=1)
    if kind == "StrongEmphasis":
        return Inline("emphasis", children=_convert_inlines(children), strength=2)
    if kind in ("Link", "AutoLink"):
        return Inline("link", children=_convert_inlines(children), destination=element.dest)
    if kind == "Image":
        return Inline("image", children=_convert_inlines(children), destination=element.dest)
    if kind == "LineBreak":
        return Inline("break", text="\n")
    if kind == "CodeSpan":
        return Inline("code", text=children)
    if kind == "InlineHTML":
        return Inline("html", text=children)

    if kind == "RawText":
        return Inline("text", text=html.unescape(children))

    # Literal (carácter escapado) y elementos de extensiones desconocidos
    if isinstance(children, str):
        return Inline("text", text=children)
    return Inline("text", text=flatten_text(_convert_inlines(children)))


def _block_source(element, source: str) -> str:
    span = getattr(element, "source_span", None)
    if span:
        return source[span[0]:span[1]].strip("\n").rstrip()
    with MarkdownRenderer() as renderer:
        return renderer.render(element).strip("\n").rstrip()


def _list_items(element) -> Tuple[Tuple[Inline, ...], ...]:
    items: List[Tuple[Inline, ...]] = []
    for item in element.children:
        paragraph = next((c for c in item.children if c.get_type() == "Paragraph"), None)
        items.append(_convert_inlines(paragraph.children) if paragraph is not None else ())
    return tuple(items)


def _convert_block(element, source: str) -> Block:
    kind = element.get_type()
    raw = _block_source(element, source)

    if kind in ("Heading", "SetextHeading"):
        return Block("heading", level=element.level, inlines=_convert_inlines(element.children), source=raw)
    if kind == "Paragraph":
        return Block("paragraph", inlines=_convert_inlines(element.children), source=raw)
    if kind == "List":
        return Block("list", items=_list_items(element), source=raw)
    if kind == "ThematicBreak":
        return Block("thematic_break", source=raw)
    if kind == "LinkRefDef":
        return Block("link_definition", source=raw)
    return Block("other", source=raw)


def parse_blocks(text: str) -> List[Block]:
    """
    Parsea markdown con marko y devuelve los bloques de nivel superior.

    Args:
        text: Documento markdown completo.

    Returns:
        Bloques en orden de documento (sin líneas en blanco).
    """
    source = _normalize_source(text)
    document = marko.Markdown().parse(source)
    return [
        _convert_block(element, source)
        for element in document.children
        if element.get_type() not in _SKIPPED_BLOCKS
    ]


def render_html(markdown_text: str) -> str:
    """Convierte un fragmento markdown a HTML con el renderer por defecto de marko."""
    return marko.Markdown().convert(markdown_text)


def escape_inline(text: str) -> str:
    """Escapa `text` para que se re-parsee como el mismo texto plano."""
    return _INLINE_SPECIAL.sub(r"\\\1", text)


def escape_line_start(text: str) -> str:
    """Escapa un marcador de bloque (`#`, `-`, `1.`, ...) al inicio de la línea."""
    match = _LINE_START_MARKER.match(text)
    if match is None:
        return text
    if match.group(1) is not None:
        return f"{match.group(1)}\\{match.group(2)}{text[match.end(2):]}"
    return "\\" + text


def escape_text(text: str) -> str:
    """
    Convierte texto plano en la fuente de un párrafo markdown que se
    re-parsea como ese mismo texto.
    """
    return escape_line_start(escape_inline(text))


# ============================================================
# Helpers para construir árboles a mano (tests, otros parsers)
# ============================================================

def text(value: str) -> Inline:
    return Inline("text", text=value)


def emphasis(*children: Inline | str, strength: int = 1) -> Inline:
    return Inline("emphasis", children=_wrap(children), strength=strength)


def strong(*children: Inline | str) -> Inline:
    return emphasis(*children, strength=2)


def link(destination: str, *children: Inline | str) -> Inline:
    return Inline("link", children=_wrap(children), destination=destination)


def heading(level: int, title: str) -> Block:
    return Block("heading", level=level, inlines=(text(title),), source=f"{'#' * level} {title}")


def paragraph(*children: Inline | str) -> Block:
    inlines = _wrap(children)
    return Block("paragraph", inlines=inlines, source=flatten_text(inlines))


def bullet_list(*items: Sequence[Inline | str]) -> Block:
    wrapped = tuple(_wrap(item) for item in items)
    source = "\n".join(f"- {flatten_text(item)}" for item in wrapped)
    return Block("list", items=wrapped, source=source)


def thematic_break() -> Block:
    return Block("thematic_break", source="---")


def link_definition(label: str, destination: str) -> Block:
    return Block("link_definition", source=f"[{label}]: {destination}")


def _wrap(children: Iterable[Inline | str]) -> Tuple[Inline, ...]:
    return tuple(text(c) if isinstance(c, str) else c for c in children)
