"""
Tests del segmentador de secciones (bloques armados a mano).
"""

import pytest

from recipemd_core.domains.recipes.sections import segment_sections
from recipemd_core.exceptions import StructureError
from recipemd_core.markdown_tree import (
    bullet_list,
    heading,
    link_definition,
    paragraph,
    thematic_break,
)


def test_two_breaks_split_three_sections():
    title = heading(1, "Soup")
    items = bullet_list(["water"])
    step = paragraph("Boil.")

    sections = segment_sections([title, thematic_break(), items, thematic_break(), step])

    assert sections.metadata == (title,)
    assert sections.ingredients == (items,)
    assert sections.instructions == (step,)


def test_single_break_runs_ingredients_to_end():
    items = bullet_list(["water"], ["salt"])
    sections = segment_sections([heading(1, "Soup"), thematic_break(), items])
    assert sections.ingredients == (items,)
    assert sections.instructions == ()


def test_later_breaks_stay_in_instructions():
    extra = thematic_break()
    blocks = [
        heading(1, "Soup"),
        thematic_break(),
        thematic_break(),
        paragraph("one"),
        extra,
        paragraph("two"),
    ]
    sections = segment_sections(blocks)
    assert sections.ingredients == ()
    assert sections.instructions == (paragraph("one"), extra, paragraph("two"))


def test_no_break_strict_raises():
    with pytest.raises(StructureError) as exc_info:
        segment_sections([heading(1, "Soup"), paragraph("text")], mode="strict")
    assert exc_info.value.reason == "missing_divider"


def test_no_break_permissive_warns_once():
    warnings = []
    blocks = [heading(1, "Soup"), paragraph("text")]
    sections = segment_sections(blocks, mode="permissive", warnings=warnings)

    assert sections.metadata == tuple(blocks)
    assert sections.ingredients == ()
    assert sections.instructions == ()
    assert [w.kind for w in warnings] == ["missing_divider"]


def test_link_definitions_are_collected_from_any_section():
    blog = link_definition("blog", "https://example.com/")
    shop = link_definition("shop", "https://example.com/shop")
    title = heading(1, "Soup")
    items = bullet_list(["water"])
    step = paragraph("Boil.")

    sections = segment_sections([title, blog, thematic_break(), items, shop, thematic_break(), step])

    assert sections.metadata == (title,)
    assert sections.ingredients == (items,)
    assert sections.instructions == (step,)
    assert sections.link_definitions == (blog, shop)


def test_link_definition_is_not_a_divider_in_permissive_mode():
    blog = link_definition("blog", "https://example.com/")
    warnings = []
    sections = segment_sections([heading(1, "Soup"), blog], mode="permissive", warnings=warnings)

    assert sections.metadata == (heading(1, "Soup"),)
    assert sections.link_definitions == (blog,)
    assert [w.kind for w in warnings] == ["missing_divider"]


@pytest.mark.parametrize("mode", ["strcit", "", "PERMISSIVE"])
def test_unknown_mode_raises(mode):
    with pytest.raises(ValueError):
        segment_sections([heading(1, "Soup"), thematic_break()], mode=mode)
