"""
recipemd_core
=============

Pipeline de extracción estructural para recetas en markdown (RecipeMD).

Uso típico:

    from recipemd_core import parse_recipe, export_recipe

    result = parse_recipe(text, mode="permissive")
    html = export_recipe(result.recipe, "html")
"""

from .domain_models import ParseResult, ParseWarning
from .domains.recipes.models import Amount, Ingredient, IngredientGroup, Recipe
from .engine import parse_recipe, run_recipe_pipeline
from .exceptions import RecipeMDError, RecipeWarningsError, StructureError, UnknownFormatError
from .export import export_recipe, recipe_from_export

__version__ = "0.1.0"

__all__ = [
    "Amount",
    "Ingredient",
    "IngredientGroup",
    "ParseResult",
    "ParseWarning",
    "Recipe",
    "RecipeMDError",
    "RecipeWarningsError",
    "StructureError",
    "UnknownFormatError",
    "export_recipe",
    "parse_recipe",
    "recipe_from_export",
    "run_recipe_pipeline",
]
