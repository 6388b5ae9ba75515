import pytest

from bhavaphala.astro import (
    DEBILITATION,
    EXALTATION,
    GRAHAS,
    NAKSHATRAS,
    OWN_SIGNS,
    RAASHIS,
    SIGN_LORDS,
    Chart,
    Placement,
    guru_aspects,
    house_of,
    is_dusthana,
    is_graha_combust,
    is_graha_strong,
    is_kendra,
    is_kona,
    is_lord_in_own_house,
    is_valid_graha,
    is_valid_nakshatra,
    is_valid_raashi,
    kuja_aspects,
    opposite_raashi,
    raashi_of_house,
    shani_aspects,
    sign_lord,
)


def make_chart(**overrides):
    values = dict(
        ascendant="Mesha",
        surya="Simha",
        chandra="Karkataka",
        kuja=Placement("Vruschika", combust=True),
        budha=Placement("Kanya"),
        guru=Placement("Dhanassu"),
        shukra=Placement("Tula", combust=True),
        shani=Placement("Makara"),
        rahu="Mithuna",
        ketu="Dhanassu",
        nav_ascendant="Kumbha",
        navamsha={"Shukra": "Kumbha", "Surya": "Meena"},
    )
    values.update(overrides)
    return Chart(**values)


def test_validators_accept_known_names():
    assert all(is_valid_raashi(r) for r in RAASHIS)
    assert all(is_valid_graha(g) for g in GRAHAS)
    assert all(is_valid_nakshatra(n) for n in NAKSHATRAS)
    assert len(NAKSHATRAS) == 27


@pytest.mark.parametrize("value", ["Rahu", "surya", "", None, 3])
def test_invalid_graha(value):
    assert is_valid_graha(value) is False


@pytest.mark.parametrize("value", ["Aries", "mesha", None, 1])
def test_invalid_raashi(value):
    assert is_valid_raashi(value) is False


def test_invalid_nakshatra():
    assert is_valid_nakshatra("Krittika") is True
    assert is_valid_nakshatra("Kritika") is False


@pytest.mark.parametrize("ascendant", RAASHIS)
@pytest.mark.parametrize("raashi", RAASHIS)
def test_house_round_trip(ascendant, raashi):
    house = house_of(ascendant, raashi)
    assert 1 <= house <= 12
    assert raashi_of_house(ascendant, house) == raashi


@pytest.mark.parametrize("raashi", RAASHIS)
def test_ascendant_is_first_house(raashi):
    assert house_of(raashi, raashi) == 1


@pytest.mark.parametrize("raashi", RAASHIS)
def test_opposite_is_involution(raashi):
    opposite = opposite_raashi(raashi)
    assert opposite != raashi
    assert opposite_raashi(opposite) == raashi
    assert house_of(raashi, opposite) == 7


@pytest.mark.parametrize("raashi", RAASHIS)
def test_aspects_hit_expected_houses(raashi):
    assert [house_of(raashi, r) for r in guru_aspects(raashi)] == [5, 7, 9]
    assert [house_of(raashi, r) for r in shani_aspects(raashi)] == [3, 7, 10]
    assert [house_of(raashi, r) for r in kuja_aspects(raashi)] == [4, 7, 8]


def test_bad_house_and_raashi_raise():
    with pytest.raises(ValueError):
        raashi_of_house("Mesha", 0)
    with pytest.raises(ValueError):
        raashi_of_house("Mesha", 13)
    with pytest.raises(ValueError):
        house_of("Aries", "Mesha")
    with pytest.raises(ValueError):
        guru_aspects("Nowhere")


def test_sign_lord_matches_own_signs():
    for raashi in RAASHIS:
        lord = sign_lord(raashi)
        assert raashi in OWN_SIGNS[lord]
        assert is_lord_in_own_house(lord, raashi)
    with pytest.raises(ValueError):
        sign_lord("Nowhere")


def test_lord_in_own_house_cases():
    assert is_lord_in_own_house("Kuja", "Mesha")
    assert is_lord_in_own_house("Kuja", "Vruschika")
    assert not is_lord_in_own_house("Kuja", "Tula")
    assert not is_lord_in_own_house("Rahu", "Mesha")


def test_exaltation_opposes_debilitation():
    for graha in GRAHAS:
        assert opposite_raashi(EXALTATION[graha]) == DEBILITATION[graha]
    assert SIGN_LORDS["Simha"] == "Surya"


def test_house_kinds():
    assert [h for h in range(1, 13) if is_kendra(h)] == [1, 4, 7, 10]
    assert [h for h in range(1, 13) if is_kona(h)] == [1, 5, 9]
    assert [h for h in range(1, 13) if is_dusthana(h)] == [6, 8, 12]
    assert not is_kendra(0) and not is_kona(0) and not is_dusthana(0)


def test_is_graha_combust():
    assert is_graha_combust("Kuja", True, False, False, False, False)
    assert not is_graha_combust("Kuja", False, True, True, True, True)
    assert is_graha_combust("Shani", False, False, False, False, True)
    assert not is_graha_combust("Surya", True, True, True, True, True)
    assert not is_graha_combust("Chandra", True, True, True, True, True)


@pytest.mark.parametrize(
    "flags, expected",
    [
        ((False, False, False, False), False),
        ((True, False, False, False), False),
        ((True, True, False, False), True),
        ((False, False, True, True), True),
        ((True, True, True, True), True),
    ],
)
def test_is_graha_strong(flags, expected):
    assert is_graha_strong(*flags) is expected


def test_chart_house_uses_ascendant():
    chart = make_chart()
    assert chart.house("Kuja") == house_of("Mesha", "Vruschika")
    assert chart.house("Rahu") == house_of("Mesha", "Mithuna")
    moved = make_chart(ascendant="Vruschika")
    assert moved.house("Kuja") == 1


def test_chart_navamsha_house():
    chart = make_chart()
    assert chart.navamsha_house("Shukra") == 1
    assert chart.navamsha_house("Surya") == house_of("Kumbha", "Meena")
    with pytest.raises(ValueError):
        chart.navamsha_house("Guru")
    with pytest.raises(ValueError):
        make_chart(nav_ascendant=None).navamsha_house("Shukra")


def test_chart_unknown_graha_raises():
    chart = make_chart()
    with pytest.raises(ValueError):
        chart.house("Mangal")
    with pytest.raises(ValueError):
        chart.navamsha_house("Mangal")


def test_chart_is_lord_combust():
    chart = make_chart()
    assert chart.is_lord_combust("Kuja") is True
    assert chart.is_lord_combust("Shukra") is True
    assert chart.is_lord_combust("Guru") is False
    assert chart.is_lord_combust("Surya") is False


def test_chart_rejects_bad_raashi():
    with pytest.raises(ValueError):
        make_chart(surya="Leo")
    with pytest.raises(ValueError):
        Placement("Leo")
    with pytest.raises(ValueError):
        make_chart(navamsha={"Pluto": "Mesha"})