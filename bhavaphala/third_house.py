"""Readings for the third house: siblings and courage."""

from __future__ import annotations

from .astro import Chart, guru_aspects, opposite_raashi, raashi_of_house

_BASE = (
    "The third house is strong and suggests that the long term goal and courage "
    "and FIL relations are good."
)
_SIBLINGS = "The native will have younger siblings and will be courageous"
_NOTE = (
    "The effects of the third house is to be announced after assessing the strength of such yogas"
)


def third_house_effects(chart: Chart) -> list[str]:
    """Effects of the third house for the chart, in reading order."""
    third_house = raashi_of_house(chart.ascendant, 3)
    house = {g: chart.house(g) for g in ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani")}

    effects = [_BASE]

    if any(house[g] == 3 for g in ("Budha", "Shukra", "Guru", "Chandra")):
        effects.append(_SIBLINGS)
    if (
        third_house in guru_aspects(chart.guru.raashi)
        or opposite_raashi(chart.shukra.raashi) == third_house
        or opposite_raashi(chart.budha.raashi) == third_house
    ):
        effects.append(_SIBLINGS)

    if house["Surya"] == 3:
        effects.append("The elder sibling will die")
    if house["Shani"] == 3:
        effects.append("The younger sibling will die")
    if house["Kuja"] == 3:
        effects.append("The elder siblings and the younger siblings will die")

    if len(effects) > 1:
        effects.append(_NOTE)

    return effects