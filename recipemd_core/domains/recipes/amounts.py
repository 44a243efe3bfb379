"""
Parser de cantidades (amounts) de ingredientes y rendimientos.

Reglas, en orden de prioridad (gana la primera que aplica):

1. Se recorta el espacio alrededor.
2. Fracción vulgar unicode sola ("½") → su valor decimal.
3. Número mixto "W N/M" (o "W½") → W + N/M.
4. Fracción ASCII "N/M" → N/M.
5. Decimal con "." o "," como separador.
6. Entero.
7. Nada reconocido → sin cantidad, todo el texto es la unidad.

Lo que sigue al token numérico es la unidad. Un denominador cero o una sintaxis
numérica mal formada ("1/2/3", "1.2.3") no es fatal: cae en la regla 7 y, si el
llamador pasa una lista de advertencias, se registra `amount_parse_failure`.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from fractions import Fraction
from itertools import chain
from typing import Dict, Optional, Tuple

from ...domain_models import ParseWarning, WarningSink
from .models import Amount

logger = logging.getLogger(__name__)


def _vulgar_fractions() -> Dict[str, float]:
    # U+00BC..U+00BE, U+2150..U+215E (U+215F es solo un numerador) y U+2189
    codepoints = chain(range(0x00BC, 0x00BF), range(0x2150, 0x215F), (0x2189,))
    return {chr(cp): unicodedata.numeric(chr(cp)) for cp in codepoints}


VULGAR_FRACTIONS: Dict[str, float] = _vulgar_fractions()

_VULGAR = "[" + "".join(VULGAR_FRACTIONS) + "]"
_SLASH = "[/⁄]"

_VULGAR_ONLY = re.compile(rf"({_VULGAR})")
_MIXED_VULGAR = re.compile(rf"([0-9]+)\s*({_VULGAR})")
_MIXED = re.compile(rf"([0-9]+)\s+([0-9]+){_SLASH}([0-9]+)")
_FRACTION = re.compile(rf"([0-9]+){_SLASH}([0-9]+)")
_DECIMAL = re.compile(r"([0-9]+)[.,]([0-9]+)")
_INTEGER = re.compile(r"([0-9]+)")

# Un token numérico no puede seguir pegado a otro fragmento numérico
_NUMERIC_CONTINUATION = re.compile(rf"[0-9.,]|{_SLASH}|{_VULGAR}")


class _AmountSyntaxError(ValueError):
    pass


def _quantity_from(pattern_name: str, match: re.Match) -> float:
    groups = match.groups()
    if pattern_name == "vulgar":
        return VULGAR_FRACTIONS[groups[0]]
    if pattern_name == "mixed_vulgar":
        return int(groups[0]) + VULGAR_FRACTIONS[groups[1]]
    if pattern_name == "mixed":
        whole, num, den = (int(g) for g in groups)
        if den == 0:
            raise _AmountSyntaxError("denominador cero")
        return float(whole + Fraction(num, den))
    if pattern_name == "fraction":
        num, den = (int(g) for g in groups)
        if den == 0:
            raise _AmountSyntaxError("denominador cero")
        return float(Fraction(num, den))
    if pattern_name == "decimal":
        return float(f"{groups[0]}.{groups[1]}")
    return float(int(groups[0]))


_RULES: Tuple[Tuple[str, re.Pattern], ...] = (
    ("vulgar", _VULGAR_ONLY),
    ("mixed_vulgar", _MIXED_VULGAR),
    ("mixed", _MIXED),
    ("fraction", _FRACTION),
    ("decimal", _DECIMAL),
    ("integer", _INTEGER),
)


def _parse_numeric(text: str) -> Optional[Tuple[float, str]]:
    """
    Devuelve (cantidad, unidad) o None si `text` no empieza con un número.

    Raises
    ------
    _AmountSyntaxError
        Si empieza con un número pero la sintaxis es inválida.
    """
    for name, pattern in _RULES:
        match = pattern.match(text)
        if match is None:
            continue
        rest = text[match.end():]
        if _NUMERIC_CONTINUATION.match(rest):
            raise _AmountSyntaxError(f"sintaxis numérica inválida cerca de '{rest[:8]}'")
        return _quantity_from(name, match), rest.strip()
    return None


def parse_amount(text: str, warnings: Optional[WarningSink] = None) -> Amount:
    """
    Parsea un span de texto a `Amount`.

    Parameters
    ----------
    text:
        Texto candidato (p.ej. el contenido de un énfasis "*2 1/4 cups*").
    warnings:
        Lista opcional donde registrar fallas de parseo numérico.

    Returns
    -------
    Amount
        Siempre devuelve un Amount; `original_text` es `text` sin modificar.
    """
    stripped = text.strip()
    try:
        parsed = _parse_numeric(stripped)
    except _AmountSyntaxError as e:
        message = f"No se pudo interpretar la cantidad '{stripped}': {e}."
        logger.debug(message)
        if warnings is not None:
            warnings.append(ParseWarning("amount_parse_failure", message))
        parsed = None

    if parsed is None:
        return Amount(quantity=None, unit=stripped, original_text=text)

    quantity, unit = parsed
    return Amount(quantity=quantity, unit=unit, original_text=text)
