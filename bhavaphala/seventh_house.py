"""Readings for the seventh house: spouse, marriage and partnerships."""

from __future__ import annotations

from .astro import (
    DEBILITATION,
    ENEMY_SIGNS,
    EXALTATION,
    OWN_SIGNS,
    Chart,
    guru_aspects,
    is_dusthana,
    opposite_raashi,
    raashi_of_house,
    sign_lord,
)

_BODIES = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani", "Rahu", "Ketu")
_MULTIPLE_SPOUSE_SIGNS = ("Tula", "Vrushabha", "Kumbha", "Makara")

_DELAYED = "The mairrage of the native is likely to be delayed"
_PROBLEMS = (
    "The native will face problems in marriage/relationships or may face problems in marital life"
)
_MULTIPLE = "The native is likely to get multiple spouses"


def _malefic_in(house: dict[str, int], number: int, waxing: bool, unafflicted: bool) -> bool:
    return (
        house["Shani"] == number
        or house["Kuja"] == number
        or (house["Budha"] == number and not unafflicted)
        or house["Surya"] == number
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


def seventh_house_effects(chart: Chart) -> list[str]:
    """Effects of the seventh house for the chart, in reading order."""
    asc = chart.ascendant
    waxing = chart.chandra_waxing
    unafflicted = chart.budha_unafflicted
    house = {body: chart.house(body) for body in _BODIES}

    lord = sign_lord(raashi_of_house(asc, 7))
    lord_placement = house[lord]
    lord_raashi = raashi_of_house(asc, lord_placement)
    lord_exalted = EXALTATION.get(lord) == lord_raashi

    shukra = house["Shukra"]
    shukra_raashi = raashi_of_house(asc, shukra)
    surya = house["Surya"]
    budha = house["Budha"]
    chandra = house["Chandra"]
    shani = house["Shani"]
    kuja = house["Kuja"]

    # The moon's aspect is taken from Budha's sign and Budha's from the moon's.
    moon_aspect_origin = raashi_of_house(asc, budha)
    budha_aspect_origin = raashi_of_house(asc, chandra)

    shukra_afflicted = (
        shukra in (surya, shani, kuja)
        or (shukra == budha and not unafflicted)
        or (shukra == chandra and not waxing)
    )
    lord_aspected_by_benefic = (
        (lord_raashi in guru_aspects(chart.guru.raashi) and lord != "Guru")
        or (lord != "Shukra" and opposite_raashi(shukra_raashi) == lord_raashi)
        or (lord != "Chandra" and opposite_raashi(moon_aspect_origin) == lord_raashi and waxing)
        or (lord != "Budha" and opposite_raashi(budha_aspect_origin) == lord_raashi and unafflicted)
    )
    lord_with_benefic = _with_benefic(lord, lord_placement, house, waxing, unafflicted)

    second_lord = sign_lord(raashi_of_house(asc, 2))
    second_lord_placement = house[second_lord]

    effects: list[str] = []

    if lord_placement == 7 or lord_exalted:
        effects.append("The native will derive full happiness thorugh his wife and marriage")

    if shukra == 2 and second_lord != "Kuja" and second_lord_placement == kuja:
        effects.append(_DELAYED)
    if shukra == 5 and house["Rahu"] in (5, 9):
        effects.append(_DELAYED)

    if (
        not lord_exalted
        and lord_raashi not in OWN_SIGNS.get(lord, ())
        and is_dusthana(lord_placement)
    ):
        effects.append("The native's spouse maybe sickly depending on the strength of the 7th lord")
        effects.append("The native's spouse is likely to insult the native")
    if (
        EXALTATION["Shukra"] != shukra_raashi
        and shukra_raashi not in OWN_SIGNS.get("Shukra", ())
        and is_dusthana(shukra)
    ):
        effects.append("The native's spouse maybe sickly depending on the strength of Venus")

    if shukra_afflicted:
        effects.append(_PROBLEMS)
    if (
        chart.is_lord_combust(lord)
        or lord_raashi in ENEMY_SIGNS.get(lord, ())
        or DEBILITATION.get(lord) == lord_raashi
    ):
        effects.append(_PROBLEMS)

    if lord_exalted:
        effects.append(_MULTIPLE)
    if lord_raashi in _MULTIPLE_SPOUSE_SIGNS and (lord_aspected_by_benefic or lord_with_benefic):
        effects.append(_MULTIPLE)

    if surya == 7:
        effects.append(
            "The native will hate the opposite gender and is likely to befriend the opposite "
            "gender with the intention to have sex with them"
        )

    if any(house[g] == 7 for g in ("Kuja", "Budha", "Guru", "Shani", "Shukra", "Chandra", "Rahu", "Ketu")):
        effects.append(
            "The native is likely to befriend the opposite gender with the intention to have "
            "sex with them"
        )

    if (
        _malefic_in(house, 7, waxing, unafflicted)
        and _malefic_in(house, 12, waxing, unafflicted)
        and chandra == 5
        and not waxing
    ):
        effects.append(
            "The spouse of the native will be the one to dominate the relationship and the "
            "spouse is likely to hate the family of the native"
        )

    if kuja == 7:
        effects.append("The spouse is likely to be of questionable character due to Kuja in the 7th")
    if shani == 7:
        effects.append("The spouse is likely to be of questionable character due to Shani in the 7th")

    return effects