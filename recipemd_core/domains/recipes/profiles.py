"""
Perfiles de presentación para el export HTML de recetas.

Este módulo define "perfiles" que controlan *cómo* se presenta un mismo
`Recipe` en HTML (por ejemplo: HTML plano vs HTML con microdata schema.org).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ...exceptions import UnknownFormatError


@dataclass(frozen=True)
class RecipeProfile:
    """
    Define un perfil de render HTML para una receta.

    Attributes
    ----------
    id:
        Identificador estable del perfil (útil para logging, config y tests).
        Ej: "plain_v1", "schema_org_v1".
    label:
        Etiqueta humana del perfil (para CLI / debugging).
    schema_org:
        Si es True, se agrega microdata schema.org (`itemscope`, `itemprop`)
        sobre los mismos elementos.
    show:
        Claves de secciones que deben renderizarse.
        Estas claves deben estar alineadas con lo que soporta `HtmlExporter`.
        Ej: "description", "tags", "ingredients", etc.
    titles:
        Mapeo de clave de sección → título visible. Un título vacío
        significa "sin heading" para esa sección.
    """

    id: str
    label: str
    schema_org: bool

    # Qué secciones mostrar (controla estructura)
    show: List[str]

    # Títulos por sección (controla lenguaje)
    titles: Dict[str, str]


# ============================================================
# Perfiles predefinidos (V1)
# ============================================================

_ALL_SECTIONS = ["description", "tags", "yields", "ingredients", "instructions"]

PLAIN_V1 = RecipeProfile(
    id="plain_v1",
    label="HTML plano",
    schema_org=False,
    show=list(_ALL_SECTIONS),
    titles={
        "ingredients": "",
        "instructions": "",
    },
)

SCHEMA_ORG_V1 = RecipeProfile(
    id="schema_org_v1",
    label="HTML con microdata schema.org",
    schema_org=True,
    show=list(_ALL_SECTIONS),
    titles={
        "ingredients": "Ingredientes",
        "instructions": "Instrucciones",
    },
)

PROFILES: Dict[str, RecipeProfile] = {p.id: p for p in (PLAIN_V1, SCHEMA_ORG_V1)}


# ============================================================
# Selector de perfil
# ============================================================

def get_profile(profile_id: str) -> RecipeProfile:
    """
    Devuelve el perfil predefinido para `profile_id`.

    Raises
    ------
    UnknownFormatError
        Si el id no corresponde a ningún perfil.
    """
    try:
        return PROFILES[profile_id]
    except KeyError:
        raise UnknownFormatError(profile_id, sorted(PROFILES)) from None
