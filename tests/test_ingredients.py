"""
Tests del parser de líneas de ingrediente y del árbol de grupos.
"""

from recipemd_core.domains.recipes.ingredients import (
    build_ingredient_groups,
    parse_ingredient_line,
)
from recipemd_core.domains.recipes.models import Amount, Ingredient, IngredientGroup
from recipemd_core.markdown_tree import (
    bullet_list,
    emphasis,
    heading,
    link,
    paragraph,
    strong,
    text,
)


# ============================================================
# Línea de ingrediente
# ============================================================

def test_amount_and_name():
    ingredient = parse_ingredient_line([emphasis("2 1/4 cups"), text(" all-purpose flour")])
    assert ingredient == Ingredient(
        name="all-purpose flour",
        amount=Amount(quantity=2.25, unit="cups", original_text="2 1/4 cups"),
        link=None,
    )


def test_link_only():
    ingredient = parse_ingredient_line([link("./pie-crust.md", "pie crust")])
    assert ingredient.amount is None
    assert ingredient.name == "pie crust"
    assert ingredient.link == "./pie-crust.md"


def test_link_with_surrounding_text():
    ingredient = parse_ingredient_line(
        [emphasis("1"), text(" "), link("dough.md", "dough"), text(" ball")]
    )
    assert ingredient.name == "dough ball"
    assert ingredient.link == "dough.md"
    assert ingredient.amount.quantity == 1.0


def test_several_links_set_no_link():
    ingredient = parse_ingredient_line(
        [link("a.md", "salt"), text(" and "), link("b.md", "pepper")]
    )
    assert ingredient.name == "salt and pepper"
    assert ingredient.link is None


def test_only_leading_emphasis_is_amount():
    ingredient = parse_ingredient_line([text("eggs "), emphasis("2")])
    assert ingredient.amount is None
    assert ingredient.name == "eggs 2"


def test_strong_emphasis_is_not_amount():
    ingredient = parse_ingredient_line([strong("2"), text(" eggs")])
    assert ingredient.amount is None
    assert ingredient.name == "2 eggs"


def test_empty_name_is_dropped_with_warning():
    warnings = []
    assert parse_ingredient_line([emphasis("2 cups")], warnings) is None
    assert [w.kind for w in warnings] == ["content"]


# ============================================================
# Árbol de grupos
# ============================================================

def test_group_tree_from_heading_levels():
    blocks = [
        bullet_list(["loose"]),
        heading(2, "Dough"),
        bullet_list(["flour"]),
        heading(3, "Spices"),
        bullet_list(["cinnamon"]),
        heading(2, "Topping"),
        bullet_list(["sugar"]),
    ]

    entries = build_ingredient_groups(blocks)

    assert entries == (
        Ingredient(name="loose"),
        IngredientGroup(
            name="Dough",
            level=2,
            children=(
                Ingredient(name="flour"),
                IngredientGroup(name="Spices", level=3, children=(Ingredient(name="cinnamon"),)),
            ),
        ),
        IngredientGroup(name="Topping", level=2, children=(Ingredient(name="sugar"),)),
    )


def test_shallower_heading_closes_nested_groups():
    entries = build_ingredient_groups(
        [
            heading(3, "Deep"),
            bullet_list(["a"]),
            heading(2, "Shallow"),
            bullet_list(["b"]),
        ]
    )
    assert [(g.name, g.level) for g in entries] == [("Deep", 3), ("Shallow", 2)]
    assert entries[1].ingredients == (Ingredient(name="b"),)


def test_empty_group_is_kept():
    entries = build_ingredient_groups([heading(2, "Empty"), heading(2, "Full"), bullet_list(["x"])])
    assert entries[0] == IngredientGroup(name="Empty", level=2)
    assert entries[1].ingredients == (Ingredient(name="x"),)


def test_unexpected_block_is_skipped_with_warning():
    warnings = []
    entries = build_ingredient_groups([paragraph("stray"), bullet_list(["x"])], warnings)
    assert entries == (Ingredient(name="x"),)
    assert [w.kind for w in warnings] == ["content"]
