import pytest

from bhavaphala.astro import Chart, Placement
from bhavaphala.third_house import third_house_effects

BASE = (
    "The third house is strong and suggests that the long term goal and courage "
    "and FIL relations are good."
)
SIBLINGS = "The native will have younger siblings and will be courageous"
NOTE = "The effects of the third house is to be announced after assessing the strength of such yogas"


def make_chart(
    ascendant="Mesha",
    surya="Mesha",
    chandra="Mesha",
    kuja="Mesha",
    budha="Mesha",
    guru="Mesha",
    shukra="Mesha",
    shani="Mesha",
    rahu="Mesha",
    ketu="Tula",
):
    return Chart(
        ascendant=ascendant,
        surya=surya,
        chandra=chandra,
        kuja=Placement(kuja),
        budha=Placement(budha),
        guru=Placement(guru),
        shukra=Placement(shukra),
        shani=Placement(shani),
        rahu=rahu,
        ketu=ketu,
    )


def test_no_influence_gives_only_base():
    assert third_house_effects(make_chart()) == [BASE]


def test_surya_in_third():
    effects = third_house_effects(make_chart(surya="Mithuna"))
    assert "The elder sibling will die" in effects
    assert effects[0] == BASE
    assert effects[-1] == NOTE


def test_shani_in_third():
    effects = third_house_effects(make_chart(shani="Mithuna"))
    assert "The younger sibling will die" in effects
    assert effects[-1] == NOTE


def test_kuja_in_third():
    effects = third_house_effects(make_chart(kuja="Mithuna"))
    assert "The elder siblings and the younger siblings will die" in effects


def test_guru_aspect_on_third():
    effects = third_house_effects(make_chart(guru="Kumbha"))
    assert SIBLINGS in effects
    assert effects[-1] == NOTE


def test_shukra_opposite_third():
    effects = third_house_effects(make_chart(shukra="Dhanassu"))
    assert SIBLINGS in effects


def test_budha_in_third_and_opposite_nothing():
    effects = third_house_effects(make_chart(budha="Mithuna"))
    assert effects.count(SIBLINGS) == 1
    assert effects[-1] == NOTE


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"surya": "Mithuna"},
        {"guru": "Kumbha"},
        {"ascendant": "Tula", "chandra": "Dhanassu"},
        {"ascendant": "Simha", "kuja": "Kanya"},
    ],
)
def test_note_present_exactly_when_other_readings(kwargs):
    effects = third_house_effects(make_chart(**kwargs))
    assert effects[0] == BASE
    assert (NOTE in effects) == (len(effects) > 1)