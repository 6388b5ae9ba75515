import pytest

from bhavaphala.lord_effects import (
    bhava_lord_effect,
    ninth_bhava_lord_effect,
    second_bhava_lord_effect,
    seventh_bhava_lord_effect,
    sixth_bhava_lord_effect,
    tenth_bhava_lord_effect,
    third_bhava_lord_effect,
    twelfth_bhava_lord_effect,
)

FUNCTIONS = {
    2: second_bhava_lord_effect,
    3: third_bhava_lord_effect,
    6: sixth_bhava_lord_effect,
    7: seventh_bhava_lord_effect,
    9: ninth_bhava_lord_effect,
    10: tenth_bhava_lord_effect,
    12: twelfth_bhava_lord_effect,
}


@pytest.mark.parametrize("bhava", sorted(FUNCTIONS))
@pytest.mark.parametrize("placement", range(1, 13))
def test_named_function_matches_dispatch(bhava, placement):
    assert FUNCTIONS[bhava](placement) == bhava_lord_effect(bhava, placement)


@pytest.mark.parametrize("bhava", sorted(FUNCTIONS))
def test_each_placement_has_distinct_effect(bhava):
    effects = [bhava_lord_effect(bhava, p) for p in range(1, 13)]
    assert all(effects)
    assert len(set(effects)) == len(effects)


@pytest.mark.parametrize("bhava", sorted(FUNCTIONS))
@pytest.mark.parametrize("placement", [0, 13, -1, 100])
def test_out_of_range_placement_is_empty(bhava, placement):
    assert bhava_lord_effect(bhava, placement) == ""


@pytest.mark.parametrize("bhava", [1, 4, 5, 8, 11, 13, "2"])
def test_unknown_bhava_raises(bhava):
    with pytest.raises(ValueError):
        bhava_lord_effect(bhava, 1)


def test_pinned_values():
    assert ninth_bhava_lord_effect(8) == "The native will not be prosperous"
    assert third_bhava_lord_effect(8) == "The native will be a thief"
    assert third_bhava_lord_effect(3) == "The native will get happy through co-borns"
    assert tenth_bhava_lord_effect(11) == "The native will be endowed with wealth, happiness and sons."


def test_multiline_effects_keep_line_breaks():
    assert "\n" in second_bhava_lord_effect(1)
    assert second_bhava_lord_effect(1).startswith("The native will obtain sons and wealth")
    assert "\n" not in second_bhava_lord_effect(2)
    assert seventh_bhava_lord_effect(5).count("\n") == 2