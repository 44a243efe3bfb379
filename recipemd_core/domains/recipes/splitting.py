"""
Separador de listas por comas (tags y yields).

Una coma es separador salvo que tenga un dígito ASCII inmediatamente antes
y otro inmediatamente después: en ese caso es separador decimal ("1,5 kg").
"""

from __future__ import annotations

from typing import List

_ASCII_DIGITS = frozenset("0123456789")


def split_list(text: str) -> List[str]:
    """
    Divide `text` en segmentos, respetando comas decimales.

    Examples
    --------
    >>> split_list("tag1, tag2, tag3")
    ['tag1', 'tag2', 'tag3']
    >>> split_list("4 servings, 1,5 kg")
    ['4 servings', '1,5 kg']
    """
    segments: List[str] = []
    current: List[str] = []
    last = len(text) - 1

    for i, ch in enumerate(text):
        if ch == ",":
            decimal = (
                0 < i < last
                and text[i - 1] in _ASCII_DIGITS
                and text[i + 1] in _ASCII_DIGITS
            )
            if not decimal:
                segments.append("".join(current))
                current = []
                continue
        current.append(ch)
    segments.append("".join(current))

    return [s.strip() for s in segments if s.strip()]
