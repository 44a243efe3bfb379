"""
Tests de integración del engine: markdown real → Recipe.
"""

import pytest

from recipemd_core.domains.recipes.models import Amount, Ingredient, IngredientGroup
from recipemd_core.engine import parse_recipe, run_recipe_pipeline
from recipemd_core.exceptions import RecipeWarningsError, StructureError, UnknownFormatError

from .samples import GUACAMOLE, PIE


def test_parse_full_recipe():
    result = parse_recipe(GUACAMOLE)
    recipe = result.recipe

    assert result.ok
    assert recipe.title == "Guacamole"
    assert recipe.description == ("Some people call it *guac*.",)
    assert recipe.tags == ("sauce", "vegan")
    assert recipe.yields == (
        Amount(quantity=4.0, unit="Servings", original_text="4 Servings"),
        Amount(quantity=200.0, unit="g", original_text="200g"),
    )
    assert recipe.ingredients == (
        Ingredient(name="avocado", amount=Amount(1.0, "", "1")),
        Ingredient(name="red pepper flakes", amount=Amount(1.5, "pinches", "1 1/2 pinches")),
        Ingredient(name="lemon juice"),
    )
    assert recipe.instructions == (
        "Remove flesh from avocado and roughly mash with fork.",
        "Season to taste.",
    )


def test_parse_grouped_ingredients():
    recipe = parse_recipe(PIE).recipe

    assert recipe.ingredients == (
        Ingredient(name="pie crust", amount=Amount(1.0, "", "1"), link="./pie-crust.md"),
        IngredientGroup(
            name="Filling",
            level=2,
            children=(
                Ingredient(
                    name="all-purpose flour",
                    amount=Amount(2.25, "cups", "2 1/4 cups"),
                ),
                IngredientGroup(
                    name="Spices",
                    level=3,
                    children=(Ingredient(name="cinnamon", amount=Amount(1.0, "tsp", "1 tsp")),),
                ),
            ),
        ),
        IngredientGroup(
            name="Topping",
            level=2,
            children=(Ingredient(name="sugar", amount=Amount(100.0, "g", "100 g")),),
        ),
    )
    assert [i.name for i in recipe.iter_ingredients()] == [
        "pie crust",
        "all-purpose flour",
        "cinnamon",
        "sugar",
    ]


def test_no_divider_strict_and_permissive():
    doc = "# Toast\n\nBread, toasted.\n"

    with pytest.raises(StructureError) as exc_info:
        parse_recipe(doc, mode="strict")
    assert exc_info.value.reason == "missing_divider"

    result = parse_recipe(doc, mode="permissive")
    assert result.recipe.title == "Toast"
    assert result.recipe.description == ("Bread, toasted.",)
    assert result.recipe.ingredients == ()
    assert result.recipe.instructions == ()
    assert len(result.warnings) == 1
    assert result.warnings[0].kind == "missing_divider"


def test_missing_title_fails_in_both_modes():
    doc = "Just an intro.\n\n---\n\n- salt\n"
    for mode in ("strict", "permissive"):
        with pytest.raises(StructureError) as exc_info:
            parse_recipe(doc, mode=mode)
        assert exc_info.value.reason == "missing_title"


def test_third_divider_is_instruction_content():
    doc = "# T\n\n---\n\n- x\n\n---\n\nStep one.\n\n---\n\nStep two.\n"
    recipe = parse_recipe(doc).recipe
    assert recipe.instructions == ("Step one.", "---", "Step two.")


def test_warnings_can_be_promoted_to_errors():
    doc = "# T\n\n# Again\n\n---\n\n- *2 cups*\n"
    result = parse_recipe(doc)

    assert result.recipe.description == ("Again",)
    assert result.recipe.ingredients == ()
    assert [w.kind for w in result.warnings] == ["ambiguity", "content"]
    with pytest.raises(RecipeWarningsError) as exc_info:
        result.raise_for_warnings()
    assert len(exc_info.value.warnings) == 2


def test_clean_result_passes_raise_for_warnings():
    result = parse_recipe(PIE)
    assert result.raise_for_warnings() is result


def test_run_pipeline_outputs_requested_format():
    run = run_recipe_pipeline(source=PIE, output_format="html", profile_id="schema_org_v1")
    assert run["recipe"].title == "Pie"
    assert run["warnings"] == ()
    assert 'itemtype="https://schema.org/Recipe"' in run["output"]


def test_run_pipeline_unknown_format():
    with pytest.raises(UnknownFormatError):
        run_recipe_pipeline(source=PIE, output_format="yaml")
    with pytest.raises(UnknownFormatError):
        run_recipe_pipeline(source=PIE, output_format="html", profile_id="fancy")


def test_custom_block_parser():
    from recipemd_core.markdown_tree import bullet_list, heading, thematic_break

    def fake_parser(text):
        return [heading(1, text), thematic_break(), bullet_list(["salt"])]

    recipe = parse_recipe("Hand built", block_parser=fake_parser).recipe
    assert recipe.title == "Hand built"
    assert recipe.ingredients == (Ingredient(name="salt"),)


def test_html_entities_are_decoded_once():
    doc = "# Salsa\n\n*fast &amp; easy*\n\n---\n\n- *1* salt &amp; pepper\n"
    recipe = parse_recipe(doc).recipe

    assert recipe.tags == ("fast & easy",)
    assert recipe.ingredients == (Ingredient(name="salt & pepper", amount=Amount(1.0, "", "1")),)

    html_out = run_recipe_pipeline(source=doc, output_format="html")["output"]
    assert '<span class="tag">fast &amp; easy</span>' in html_out
    assert "salt &amp; pepper</li>" in html_out
    assert "&amp;amp;" not in html_out

    markdown_out = run_recipe_pipeline(source=doc, output_format="markdown")["output"]
    assert parse_recipe(markdown_out).recipe == recipe


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        parse_recipe(PIE, mode="strcit")
