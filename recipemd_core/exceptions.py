"""
Excepciones propias de recipemd_core.

Solo `StructureError` aborta un parseo. El resto de las anomalías se registran
como `ParseWarning` (ver `domain_models`) y viajan junto a la receta.
"""

from __future__ import annotations

from typing import Literal, Sequence

StructureReason = Literal["missing_title", "missing_divider"]


class RecipeMDError(Exception):
    """Excepción base del paquete."""
    pass


class StructureError(RecipeMDError):
    """El documento no tiene la estructura mínima de una receta."""

    def __init__(self, reason: StructureReason, message: str):
        self.reason = reason
        super().__init__(message)

    @classmethod
    def missing_title(cls) -> "StructureError":
        return cls("missing_title", "No se encontró un título (heading de nivel 1) antes del primer divisor.")

    @classmethod
    def missing_divider(cls) -> "StructureError":
        return cls("missing_divider", "No se encontró ningún divisor (---) que separe los ingredientes.")


class RecipeWarningsError(RecipeMDError):
    """Se pidió un parseo sin advertencias y hubo al menos una."""

    def __init__(self, warnings: Sequence[object]):
        self.warnings = tuple(warnings)
        super().__init__(f"El parseo produjo {len(self.warnings)} advertencia(s).")


class UnknownFormatError(RecipeMDError):
    """Formato de salida o perfil de presentación desconocido."""

    def __init__(self, value: str, available: Sequence[str]):
        self.value = value
        self.available = tuple(available)
        super().__init__(f"Valor desconocido '{value}'. Disponibles: {', '.join(self.available)}")
