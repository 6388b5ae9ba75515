"""Readings for the twelfth house: expenses, losses and the bed."""

from __future__ import annotations

from .astro import (
    DEBILITATION,
    ENEMY_SIGNS,
    EXALTATION,
    OWN_SIGNS,
    Chart,
    is_dusthana,
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


def twelfth_house_effects(chart: Chart) -> list[str]:
    """Effects of the twelfth house for the chart, in reading order."""
    asc = chart.ascendant
    twelfth_house = raashi_of_house(asc, 12)
    lord = sign_lord(twelfth_house)
    lord_placement = chart.house(lord)
    lord_raashi = raashi_of_house(asc, lord_placement)

    guru = chart.house("Guru")
    budha = chart.house("Budha")
    chandra = chart.house("Chandra")
    shukra = chart.house("Shukra")
    waxing = chart.chandra_waxing
    unafflicted = chart.budha_unafflicted

    lord_with_benefic = (
        (lord != "Guru" and guru == lord_placement)
        or (lord != "Shukra" and shukra == lord_placement)
        or (lord != "Budha" and budha == lord_placement and unafflicted)
        or (lord != "Chandra" and chandra == lord_placement and waxing)
    )
    benefic_in_twelfth = (
        guru == 12
        or shukra == 12
        or (budha == 12 and unafflicted)
        or (chandra == 12 and waxing)
    )
    lord_owns_twelfth = twelfth_house in OWN_SIGNS.get(lord, ())
    lord_exalted = EXALTATION.get(lord) == lord_raashi
    chandra_dignified = (
        chart.chandra in (EXALTATION["Chandra"], "Karkataka")
        or chart.navamsha.get("Chandra") == "Karkataka"
    )
    lord_navamsha_raashi = chart.navamsha.get(lord)
    lord_navamsha_house = _navamsha_house(chart, lord)

    effects = ["The 12th house themes will be prominant in the life of the native"]

    if lord_with_benefic or lord_exalted or lord_owns_twelfth or benefic_in_twelfth:
        effects.append("There will be expenses on good accounts")

    if lord == "Chandra" and (chandra_dignified or chandra in (11, 9, 5)):
        effects.append(
            "The native will own sandalwood or sandalwood like substances, "
            "will own a house and a nice bed"
        )

    if (
        lord_placement in (6, 8)
        or (lord_navamsha_raashi is not None and lord_navamsha_raashi in ENEMY_SIGNS.get(lord, ()))
        or (lord_navamsha_raashi is not None and DEBILITATION.get(lord) == lord_navamsha_raashi)
        or (lord_navamsha_house is not None and is_dusthana(lord_navamsha_house))
    ):
        effects.append("The native will be devoid of happiness from wife, be troubled by expenses")

    if is_kendra(lord_placement) or is_kona(lord_placement):
        effects.append("The native will beget a spouse")

    if chart.house(sign_lord(asc)) == 12 and lord_placement == 1 and shukra == lord_placement:
        effects.append("The native will spend money on religious grounds")

    return effects