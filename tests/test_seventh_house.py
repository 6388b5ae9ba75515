from bhavaphala.astro import Chart, Placement
from bhavaphala.seventh_house import seventh_house_effects

BEFRIEND = (
    "The native is likely to befriend the opposite gender with the intention to have "
    "sex with them"
)
PROBLEMS = (
    "The native will face problems in marriage/relationships or may face problems in marital life"
)


def make_chart(**overrides):
    base = dict(
        ascendant="Mesha",
        surya="Simha",
        chandra="Karkataka",
        kuja="Mesha",
        budha="Kanya",
        guru="Dhanassu",
        shukra="Vrushabha",
        shani="Makara",
        rahu="Mithuna",
        ketu="Dhanassu",
        chandra_waxing=True,
        budha_unafflicted=True,
    )
    base.update(overrides)
    for graha in ("kuja", "budha", "guru", "shukra", "shani"):
        base[graha] = Placement(base[graha])
    return Chart(**base)


def test_lord_in_seventh_gives_full_happiness():
    effects = seventh_house_effects(make_chart(shukra="Tula"))
    assert "The native will derive full happiness thorugh his wife and marriage" in effects
    assert BEFRIEND in effects
    assert PROBLEMS not in effects


def test_no_graha_in_seventh_has_no_befriend_reading():
    effects = seventh_house_effects(make_chart())
    assert BEFRIEND not in effects
    assert all(isinstance(text, str) for text in effects)


def test_surya_in_seventh_with_shukra():
    effects = seventh_house_effects(make_chart(surya="Tula", shukra="Tula"))
    assert (
        "The native will hate the opposite gender and is likely to befriend the opposite "
        "gender with the intention to have sex with them"
    ) in effects
    assert PROBLEMS in effects


def test_kuja_and_shani_in_seventh_close_the_reading():
    effects = seventh_house_effects(make_chart(kuja="Tula", shani="Tula"))
    assert effects[-2:] == [
        "The spouse is likely to be of questionable character due to Kuja in the 7th",
        "The spouse is likely to be of questionable character due to Shani in the 7th",
    ]


def test_shukra_in_fifth_with_rahu_in_ninth_delays_marriage():
    effects = seventh_house_effects(make_chart(shukra="Simha", rahu="Dhanassu", ketu="Mithuna"))
    assert "The mairrage of the native is likely to be delayed" in effects


def test_shukra_in_dusthana_spouse_sickly():
    effects = seventh_house_effects(make_chart(shukra="Kanya"))
    assert "The native's spouse maybe sickly depending on the strength of Venus" in effects


def test_rahu_alone_in_seventh_befriends():
    effects = seventh_house_effects(make_chart(rahu="Tula", ketu="Mesha"))
    assert BEFRIEND in effects