import pytest

from bhavaphala.astro import RAASHIS, Chart, Placement
from bhavaphala.twelfth_house import twelfth_house_effects

BASE = "The 12th house themes will be prominant in the life of the native"
GOOD_EXPENSES = "There will be expenses on good accounts"
SPOUSE = "The native will beget a spouse"
DEVOID = "The native will be devoid of happiness from wife, be troubled by expenses"
SANDALWOOD = (
    "The native will own sandalwood or sandalwood like substances, "
    "will own a house and a nice bed"
)


def make_chart(**overrides):
    values = dict(
        ascendant="Mesha",
        surya="Mithuna",
        chandra="Kumbha",
        kuja=Placement("Simha"),
        budha=Placement("Karkataka"),
        guru=Placement("Mesha"),
        shukra=Placement("Vrushabha"),
        shani=Placement("Kanya"),
        rahu="Tula",
        ketu="Mesha",
    )
    values.update(overrides)
    return Chart(**values)


@pytest.mark.parametrize("ascendant", RAASHIS)
def test_base_and_good_expenses_for_every_ascendant(ascendant):
    effects = twelfth_house_effects(make_chart(ascendant=ascendant))
    assert effects[0] == BASE
    assert effects[1] == GOOD_EXPENSES


def test_lord_in_first_begets_spouse():
    effects = twelfth_house_effects(make_chart())
    assert SPOUSE in effects
    assert DEVOID not in effects


def test_lord_in_sixth_is_devoid():
    effects = twelfth_house_effects(make_chart(guru=Placement("Kanya")))
    assert DEVOID in effects
    assert SPOUSE not in effects


def test_lord_debilitated_in_navamsha_is_devoid():
    chart = make_chart(nav_ascendant="Mesha", navamsha={"Guru": "Makara"})
    assert DEVOID in twelfth_house_effects(chart)


@pytest.mark.parametrize("chandra", ["Vrushabha", "Mithuna"])
def test_sandalwood_for_chandra_lord(chandra):
    effects = twelfth_house_effects(make_chart(ascendant="Simha", chandra=chandra))
    assert SANDALWOOD in effects


def test_no_sandalwood_for_chandra_in_kendra():
    effects = twelfth_house_effects(make_chart(ascendant="Simha", chandra="Kumbha"))
    assert SANDALWOOD not in effects
    assert SPOUSE in effects


def test_religious_spending():
    effects = twelfth_house_effects(make_chart(kuja=Placement("Meena"), shukra=Placement("Mesha")))
    assert effects[-1] == "The native will spend money on religious grounds"