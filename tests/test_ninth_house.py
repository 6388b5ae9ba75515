import pytest

from bhavaphala.astro import RAASHIS, Chart, Placement
from bhavaphala.ninth_house import ninth_house_effects

BASE = (
    "The ninth house is strong and indicates good fortune, strong belief system, "
    "and positive relations with father and gurus."
)
FORTUNATE = "The native will be fortunate"


def make_chart(**overrides):
    values = dict(
        ascendant="Mesha",
        surya="Mithuna",
        chandra="Kumbha",
        kuja=Placement("Simha"),
        budha=Placement("Karkataka"),
        guru=Placement("Dhanassu"),
        shukra=Placement("Vrushabha"),
        shani=Placement("Kanya"),
        rahu="Tula",
        ketu="Mesha",
    )
    values.update(overrides)
    return Chart(**values)


@pytest.mark.parametrize("ascendant", RAASHIS)
def test_base_reading_comes_first(ascendant):
    assert ninth_house_effects(make_chart(ascendant=ascendant))[0] == BASE


def test_ninth_lord_in_ninth_is_fortunate():
    assert ninth_house_effects(make_chart()).count(FORTUNATE) == 1


def test_combust_ninth_lord_loses_fortune():
    effects = ninth_house_effects(make_chart(guru=Placement("Dhanassu", combust=True)))
    assert FORTUNATE not in effects


def test_ascendant_and_sixth_lord_together_in_ninth():
    effects = ninth_house_effects(
        make_chart(kuja=Placement("Dhanassu"), budha=Placement("Dhanassu"))
    )
    assert "The native and the native's father are likely to be enemies" in effects


def test_wealth_and_vehicles():
    effects = ninth_house_effects(
        make_chart(
            ascendant="Vrushabha",
            shukra=Placement("Makara"),
            shani=Placement("Vrushabha"),
            guru=Placement("Vruschika"),
        )
    )
    assert "The native will gain wealth and vehicles" in effects


def test_unfortunate_with_debilitated_ascendant_lord():
    effects = ninth_house_effects(
        make_chart(kuja=Placement("Karkataka"), shani=Placement("Dhanassu"), chandra="Dhanassu")
    )
    assert effects[-1] == "The native will be unfortunate"


def test_father_poor_with_debilitated_ninth_lord_and_weak_kuja():
    effects = ninth_house_effects(make_chart(guru=Placement("Makara"), kuja=Placement("Meena")))
    assert any(e.startswith("The native's father is likely poor") for e in effects)


def test_strong_kuja_prevents_father_poverty():
    effects = ninth_house_effects(make_chart(guru=Placement("Makara"), kuja=Placement("Makara")))
    assert not any(e.startswith("The native's father is likely poor") for e in effects)