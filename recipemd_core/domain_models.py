from __future__ import annotations

"""
recipemd_core.domain_models
===========================

Modelos "neutros" del pipeline (dataclasses) que no dependen del dominio de recetas:

- Modo de parseo (`ParseMode`)
- Advertencias no fatales (`ParseWarning`) y su clasificación (`WarningKind`)
- Resultado de un parseo (`ParseResult`)

Principios de diseño
--------------------
- Dataclasses sin lógica pesada: este módulo NO hace IO ni habla con marko.
- Las advertencias son registros, no excepciones: se acumulan y viajan junto
  a la receta para que la capa llamadora decida (estricto vs permisivo).
- Los modelos del dominio de recetas viven en `domains/recipes/models.py`.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Literal, Tuple

from .exceptions import RecipeWarningsError

if TYPE_CHECKING:
    from .domains.recipes.models import Recipe


# ============================================================
# Tipos base
# ============================================================

ParseMode = Literal["strict", "permissive"]
"""
Política de parseo.

- strict: la ausencia de divisores (---) aborta con `StructureError`.
- permissive: se devuelve una receta "best effort" más una advertencia.
"""

WarningKind = Literal["ambiguity", "content", "amount_parse_failure", "missing_divider"]
"""
Clasificación de advertencias.

- ambiguity: título duplicado, párrafo de tags/yields duplicado.
- content: línea de ingrediente sin nombre, bloque inesperado en ingredientes.
- amount_parse_failure: cantidad con sintaxis numérica inválida o denominador cero.
- missing_divider: modo permisivo sin ningún divisor.
"""

PARSE_MODES: Tuple[str, ...] = ("strict", "permissive")


# ============================================================
# Advertencias y resultado
# ============================================================

@dataclass(frozen=True)
class ParseWarning:
    """
    Advertencia no fatal registrada durante un parseo.

    Attributes:
        kind:
            Clasificación (ver `WarningKind`).

        message:
            Descripción humana, pensada para mostrarse en CLI o logs.
    """
    kind: WarningKind
    message: str

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"


@dataclass(frozen=True)
class ParseResult:
    """
    Resultado de parsear un documento RecipeMD.

    Attributes:
        recipe:
            Receta completa (best effort si hubo advertencias).

        warnings:
            Advertencias acumuladas, en el orden en que se detectaron.
    """
    recipe: "Recipe"
    warnings: Tuple[ParseWarning, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.warnings

    def raise_for_warnings(self) -> "ParseResult":
        """
        Trata cualquier advertencia como falla (manejo estricto elegido por el llamador).

        Raises
        ------
        RecipeWarningsError
            Si `warnings` no está vacío.
        """
        if self.warnings:
            raise RecipeWarningsError(self.warnings)
        return self


WarningSink = List[ParseWarning]
"""Lista mutable donde los componentes del pipeline van agregando advertencias."""
