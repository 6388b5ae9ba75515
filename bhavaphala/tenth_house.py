"""Readings for the tenth house: work, status and deeds."""

from __future__ import annotations

from .astro import (
    DEBILITATION,
    ENEMY_SIGNS,
    EXALTATION,
    OWN_SIGNS,
    Chart,
    guru_aspects,
    is_dusthana,
    is_graha_strong,
    is_kendra,
    is_kona,
    raashi_of_house,
    sign_lord,
)

_BODIES = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani", "Rahu", "Ketu")

# Sign of debilitation and the graha debilitated there.
_NEECH_OCCUPANT: dict[str, str] = {
    "Tula": "Surya",
    "Vruschika": "Chandra",
    "Karkataka": "Kuja",
    "Meena": "Budha",
    "Makara": "Guru",
    "Kanya": "Shukra",
}

_GAIN = "The native will gain through royal patronage and business"
_LOSE = "The native will lose through those in leadership positions and in business"
_HAPPY = "The native will lead a happy life"
_FAME = "The native will obtain fame"


def _navamsha_house(chart: Chart, graha: str) -> int | None:
    try:
        return chart.navamsha_house(graha)
    except ValueError:
        return None


def _malefic_in(house: dict[str, int], number: int, waxing: bool, unafflicted: bool) -> bool:
    return (
        house["Surya"] == number
        or house["Kuja"] == number
        or house["Shani"] == number
        or (house["Budha"] == number and not unafflicted)
        or (house["Chandra"] == number and not waxing)
    )


def _with_benefic(
    lord: str, placement: int, house: dict[str, int], waxing: bool, unafflicted: bool
) -> bool:
    return (
        (lord != "Guru" and house["Guru"] == placement)
        or (lord != "Shukra" and house["Shukra"] == placement)
        or (lord != "Chandra" and house["Chandra"] == placement and waxing)
        or (lord != "Budha" and house["Budha"] == placement and unafflicted)
    )


def _with_malefic(
    lord: str, placement: int, house: dict[str, int], waxing: bool, unafflicted: bool
) -> bool:
    return (
        (lord != "Surya" and house["Surya"] == placement)
        or (lord != "Kuja" and house["Kuja"] == placement)
        or (lord != "Shani" and house["Shani"] == placement)
        or (lord != "Chandra" and house["Chandra"] == placement and not waxing)
        or (lord != "Budha" and house["Budha"] == placement and not unafflicted)
    )


def tenth_house_effects(chart: Chart) -> list[str]:
    """Effects of the tenth house for the chart, in reading order."""
    asc = chart.ascendant
    waxing = chart.chandra_waxing
    unafflicted = chart.budha_unafflicted
    house = {body: chart.house(body) for body in _BODIES}

    def lord_of(number: int) -> tuple[str, int]:
        lord = sign_lord(raashi_of_house(asc, number))
        return lord, house[lord]

    asc_lord_placement = house[sign_lord(asc)]
    tenth_house = raashi_of_house(asc, 10)
    tenth_lord, tenth_placement = lord_of(10)
    _, eleventh_placement = lord_of(11)
    _, ninth_placement = lord_of(9)
    seventh_lord, seventh_placement = lord_of(7)
    eighth_lord, eighth_placement = lord_of(8)
    tenth_raashi = raashi_of_house(asc, tenth_placement)

    tenth_exalted = EXALTATION.get(tenth_lord) == tenth_raashi
    tenth_own = tenth_raashi in OWN_SIGNS.get(tenth_lord, ())
    tenth_debilitated = DEBILITATION.get(tenth_lord) == tenth_raashi

    surya = house["Surya"]
    chandra = house["Chandra"]
    kuja = house["Kuja"]
    guru = house["Guru"]
    shukra = house["Shukra"]
    shani = house["Shani"]
    rahu = house["Rahu"]

    tenth_with_benefic = _with_benefic(tenth_lord, tenth_placement, house, waxing, unafflicted)
    tenth_with_malefic = _with_malefic(tenth_lord, tenth_placement, house, waxing, unafflicted)
    seventh_with_malefic = _with_malefic(
        seventh_lord, seventh_placement, house, waxing, unafflicted
    )
    eighth_with_malefic = _with_malefic(eighth_lord, eighth_placement, house, waxing, unafflicted)
    malefic_in_seventh = _malefic_in(house, 7, waxing, unafflicted)
    malefic_in_tenth = _malefic_in(house, 10, waxing, unafflicted)
    malefic_in_eleventh = _malefic_in(house, 11, waxing, unafflicted)

    tenth_not_strong = not is_graha_strong(
        not chart.is_lord_combust(tenth_lord),
        not tenth_debilitated,
        tenth_raashi not in ENEMY_SIGNS.get(tenth_lord, ()),
        not is_dusthana(tenth_placement),
    )
    guru_raashi = raashi_of_house(asc, guru)
    tenth_aspected_by_guru = tenth_raashi in guru_aspects(chart.guru.raashi)
    tenth_with_or_aspected_by_guru = tenth_aspected_by_guru or tenth_placement == guru
    navamsha = {g: _navamsha_house(chart, g) for g in ("Surya", "Kuja", "Shani", "Chandra", "Budha")}
    nav_malefic_in_tenth = (
        navamsha["Surya"] == 10
        or navamsha["Kuja"] == 10
        or navamsha["Shani"] == 10
        or (navamsha["Chandra"] == 10 and not waxing)
        or (navamsha["Budha"] == 10 and not unafflicted)
    )
    neech_occupant = _NEECH_OCCUPANT.get(tenth_house)
    tenth_occupied_by_neech = neech_occupant is not None and house[neech_occupant] == 10

    effects = ["The native will see good results in 10th house themes"]

    if tenth_exalted or tenth_own:
        effects.append(
            "If the 10th lord is strong (check shadbala) then the native will enjoy complete "
            "paternal happiness and will obtain fame and will have a good job in life"
        )

    if tenth_not_strong:
        effects.append("The native will face obstructions in his work")

    if is_kendra(rahu) or is_kona(rahu):
        effects.append("The native will perform great religious activities")

    if tenth_with_benefic or tenth_raashi in ("Meena", "Dhanassu", "Vrushabha", "Tula"):
        effects.append(_GAIN)
    if tenth_lord != "Chandra" and waxing and tenth_raashi == "Karkataka":
        effects.append(_GAIN)
    if tenth_lord != "Budha" and unafflicted and tenth_raashi in ("Mithuna", "Kanya"):
        effects.append(_GAIN)

    if tenth_with_malefic or tenth_raashi in ("Kumbha", "Makara", "Vruschika", "Mesha", "Simha"):
        effects.append(_LOSE)
    if tenth_lord != "Chandra" and not waxing and tenth_raashi == "Karkataka":
        effects.append(_LOSE)
    if tenth_lord != "Budha" and not unafflicted and tenth_raashi in ("Mithuna", "Kanya"):
        effects.append(_LOSE)

    if malefic_in_tenth and malefic_in_eleventh:
        effects.append("The native will obtain only bad jobs and will hate his co-workers")

    if tenth_placement == 8 and rahu == 8:
        effects.append("The native will hate his co workers and be a fool and do bad jobs")

    if shani == 7 and kuja == 7 and seventh_with_malefic and tenth_placement == 7:
        effects.append("The native will be fond of sex and eating a lot of food")

    if tenth_exalted and tenth_placement == guru and ninth_placement == 10:
        effects.append("The native will be endowed with honour, wealth and valour")

    if eleventh_placement == 10 and tenth_placement == 1:
        effects.append(_HAPPY)
    if eleventh_placement == tenth_placement and is_kendra(tenth_placement):
        effects.append(_HAPPY)

    if tenth_raashi == "Meena" and tenth_lord != "Guru" and guru_raashi == "Meena":
        effects.append(
            "If the tenth lord has strength (check shadbala) then the native will obtain good "
            "clothes, ornaments and happiness"
        )

    if rahu == 11 and surya == 11 and shani == 11 and kuja == 11:
        effects.append("The native will cease his duties")

    if (
        guru_raashi == "Meena"
        and raashi_of_house(asc, shukra) == "Meena"
        and raashi_of_house(asc, chandra) == EXALTATION["Chandra"]
    ):
        effects.append(
            "If the ascendant lord is strong (check shadbala) then the native will be learned "
            "and wealthy and is likely to obtain liberation through Gnana yoga"
        )

    if tenth_placement == 11 and eleventh_placement == 1 and shukra == 10:
        effects.append("The native will be endowed with precious stones")

    if (
        tenth_with_or_aspected_by_guru
        and (is_kendra(tenth_placement) or is_kona(tenth_placement))
        and tenth_exalted
    ):
        effects.append("The native will be endowed with worthy jobs")

    if tenth_occupied_by_neech and shani == 10 and nav_malefic_in_tenth:
        effects.append("The native will be bereft of good acts")

    if eighth_with_malefic and eighth_placement == 10 and tenth_placement == 8:
        effects.append("The native will indulge in bad acts")

    if tenth_debilitated and malefic_in_tenth and malefic_in_seventh:
        effects.append("Obstructions to the natives acts will crop up")

    if (
        tenth_placement == 1
        and tenth_placement == asc_lord_placement
        and (is_kendra(chandra) or is_kona(chandra))
    ):
        effects.append("The native will be interested in good jobs")

    if chandra == 10 and is_kona(tenth_placement) and is_kendra(asc_lord_placement):
        effects.append(_FAME)
    if eleventh_placement == 10 and not tenth_not_strong and tenth_aspected_by_guru:
        effects.append(_FAME)
    if tenth_placement == 9 and asc_lord_placement == 10 and chandra == 5:
        effects.append(_FAME)

    return effects