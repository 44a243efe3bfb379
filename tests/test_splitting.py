from recipemd_core.domains.recipes.splitting import split_list


def test_plain_commas():
    assert split_list("tag1, tag2, tag3") == ["tag1", "tag2", "tag3"]


def test_decimal_comma_is_kept():
    assert split_list("4 servings, 1,5 kg") == ["4 servings", "1,5 kg"]


def test_empty_segments_are_dropped():
    assert split_list(" a,, b ,") == ["a", "b"]
    assert split_list("") == []


def test_comma_next_to_space_splits():
    assert split_list("1, 5") == ["1", "5"]
    assert split_list(",1") == ["1"]
