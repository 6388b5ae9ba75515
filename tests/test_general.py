from bhavaphala.astro import Chart, Placement
from bhavaphala.general import general_effects

PERSECUTION = (
    "The native is likely to suffer from persecution complex and are extremely stubborn in life"
)
VIOLENT = "The native will make for violent moods, behaviour and action"
TOO_MANY = "Too many afflictions makes the native dangerous. Intense penance is required"
NO_MENTAL_HEALTH = (
    "The native will not have mental health as moon is aspected/conjunct by a malefic "
    "with no protection from a benefic"
)
PROTECTED = ", but the native is protected by Guru / Shukra from this"


def make_chart(**overrides):
    values = dict(
        ascendant="Mesha",
        surya="Simha",
        chandra="Mithuna",
        kuja=Placement("Mithuna"),
        budha=Placement("Simha"),
        guru=Placement("Karkataka"),
        shukra=Placement("Karkataka"),
        shani=Placement("Mithuna"),
        rahu="Simha",
        ketu="Kumbha",
    )
    values.update(overrides)
    return Chart(**values)


def test_shukra_in_seventh_makes_horny():
    effects = general_effects(make_chart(shukra=Placement("Tula")))
    assert "The native will be very horny" in effects


def test_shukra_in_sign_of_kuja():
    effects = general_effects(make_chart(shukra=Placement("Mesha")))
    assert any("opposite gender to satisfy lust" in e for e in effects)


def test_shukra_in_sign_of_shani():
    effects = general_effects(make_chart(shukra=Placement("Makara"), shani=Placement("Simha")))
    assert any("same gender to satisfy lust" in e for e in effects)


def test_unprotected_afflictions():
    effects = general_effects(make_chart())
    assert PERSECUTION in effects
    assert VIOLENT in effects
    assert TOO_MANY in effects
    assert NO_MENTAL_HEALTH in effects
    assert effects.index(PERSECUTION) < effects.index(VIOLENT) < effects.index(TOO_MANY)


def test_guru_with_moon_shelters_afflictions():
    effects = general_effects(make_chart(guru=Placement("Mithuna")))
    assert PERSECUTION + PROTECTED in effects
    assert VIOLENT + PROTECTED in effects
    assert PERSECUTION not in effects
    assert NO_MENTAL_HEALTH not in effects
    assert "The native is magnanimous in both heart and mind" in effects


def test_moon_with_budha_in_meena():
    effects = general_effects(make_chart(chandra="Meena", budha=Placement("Meena")))
    assert "The native could harbour horrendous levels of avarice, hate, jeolousy" in effects


def test_single_affliction_is_not_too_many():
    effects = general_effects(
        make_chart(kuja=Placement("Simha"), shani=Placement("Mithuna"), rahu="Makara")
    )
    assert TOO_MANY not in effects


def test_effects_are_unique_strings():
    effects = general_effects(make_chart())
    assert len(effects) == len(set(effects))