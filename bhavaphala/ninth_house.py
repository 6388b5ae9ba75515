"""Readings for the ninth house: fortune, father and faith."""

from __future__ import annotations

from .astro import (
    DEBILITATION,
    ENEMY_SIGNS,
    EXALTATION,
    Chart,
    guru_aspects,
    is_dusthana,
    is_graha_strong,
    is_kendra,
    is_kona,
    raashi_of_house,
    sign_lord,
)


def _navamsha_house(chart: Chart, graha: str) -> int | None:
    try:
        return chart.navamsha_house(graha)
    except ValueError:
        return None


def _is_strong(chart: Chart, lord: str, placement: int, raashi: str) -> bool:
    return is_graha_strong(
        not chart.is_lord_combust(lord),
        DEBILITATION.get(lord) != raashi,
        raashi not in ENEMY_SIGNS.get(lord, ()),
        not is_dusthana(placement),
    )


def ninth_house_effects(chart: Chart) -> list[str]:
    """Effects of the ninth house for the chart, in reading order."""
    asc = chart.ascendant

    ninth_lord = sign_lord(raashi_of_house(asc, 9))
    ninth_lord_placement = chart.house(ninth_lord)
    ninth_lord_house = raashi_of_house(asc, ninth_lord_placement)
    sixth_lord_placement = chart.house(sign_lord(raashi_of_house(asc, 6)))
    fifth_lord_placement = chart.house(sign_lord(raashi_of_house(asc, 5)))

    guru_placement = chart.house("Guru")
    asc_lord = sign_lord(asc)
    asc_lord_placement = chart.house(asc_lord)
    asc_lord_house = raashi_of_house(asc, asc_lord_placement)
    asc_lord_strong = _is_strong(chart, asc_lord, asc_lord_placement, asc_lord_house)
    ninth_lord_strong = _is_strong(chart, ninth_lord, ninth_lord_placement, ninth_lord_house)

    shukra_placement = chart.house("Shukra")
    kuja_placement = chart.house("Kuja")
    kuja_raashi = chart.kuja.raashi
    kuja_unfortunate = (
        kuja_placement in (10, 12)
        and EXALTATION["Kuja"] != kuja_raashi
        and kuja_raashi not in ("Mesha", "Vruschika")
    )

    ninth_lord_aspected_by_guru = ninth_lord_house in guru_aspects(chart.guru.raashi)
    ninth_lord_with_guru = ninth_lord_placement == guru_placement
    sun_placement = chart.house("Surya")
    sun_exalted = EXALTATION["Surya"] == chart.surya
    shukra_exalted = EXALTATION["Shukra"] == chart.shukra.raashi
    ninth_lord_debilitated = DEBILITATION.get(ninth_lord) == ninth_lord_house
    ninth_lord_combust = chart.is_lord_combust(ninth_lord)

    effects = [
        "The ninth house is strong and indicates good fortune, strong belief system, "
        "and positive relations with father and gurus."
    ]

    if ninth_lord_placement == 9 and not ninth_lord_combust:
        effects.append("The native will be fortunate")
    if guru_placement == 9 and is_kendra(ninth_lord_placement) and asc_lord_strong:
        effects.append("The native will be fortunate")

    if shukra_placement == 9 and ninth_lord_strong and is_kendra(guru_placement):
        effects.append("The native's father will become fortunate")

    if ninth_lord_debilitated and kuja_unfortunate:
        effects.append(
            "The native's father is likely poor or the native will disinherit the fathers "
            "property or the native can only obtain the father's property through litigation"
        )

    if (
        EXALTATION.get(ninth_lord) == ninth_lord_house
        and is_kendra(shukra_placement)
        and _navamsha_house(chart, "Guru") == 9
    ):
        effects.append("Navamsha: The father of the native will live for a long time")

    if ninth_lord != "Guru" and ninth_lord_aspected_by_guru and is_kendra(ninth_lord_placement):
        effects.append("The native's father will be extremely fortunate")

    if sun_exalted and ninth_lord_placement == 11:
        effects.append(
            "The native will be devoted to his father and be virtuous and be dear to those "
            "in leadership positions"
        )

    if (
        (ninth_lord_aspected_by_guru or ninth_lord_with_guru)
        and is_kona(sun_placement)
        and ninth_lord_placement == 7
    ):
        effects.append("The native will be devoted to his father")

    if asc_lord_placement == 9 and sixth_lord_placement == asc_lord_placement:
        effects.append("The native and the native's father are likely to be enemies")

    if (
        ninth_lord != "Shukra"
        and shukra_exalted
        and ninth_lord_placement == shukra_placement
        and chart.house("Shani") == 3
    ):
        effects.append("The native will have abundant fortunes")

    if asc_lord_placement == 9 and ninth_lord_placement == 1 and guru_placement == 7:
        effects.append("The native will gain wealth and vehicles")

    if chart.house("Rahu") == 5 and fifth_lord_placement == 8 and ninth_lord_debilitated:
        effects.append("The native will be devoid of fortunes")

    if (
        chart.house("Shani") == 9
        and chart.house("Chandra") == 9
        and DEBILITATION.get(asc_lord) == asc_lord_house
    ):
        effects.append("The native will be unfortunate")

    return effects