"""Readings for the second house: wealth, family and speech."""

from __future__ import annotations

from .astro import (
    EXALTATION,
    Chart,
    guru_aspects,
    is_dusthana,
    is_kendra,
    is_kona,
    opposite_raashi,
    raashi_of_house,
    sign_lord,
)

_BODIES = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani", "Rahu")


def second_house_effects(chart: Chart) -> list[str]:
    """Effects of the second house for the chart, in reading order."""
    asc = chart.ascendant
    house = {body: chart.house(body) for body in _BODIES}

    second_house = raashi_of_house(asc, 2)
    second_lord = sign_lord(second_house)
    second_lord_placement = house[second_lord]
    second_lord_house = raashi_of_house(asc, second_lord_placement)
    eleventh_lord = sign_lord(raashi_of_house(asc, 11))
    eleventh_lord_placement = house[eleventh_lord]
    eleventh_lord_house = raashi_of_house(asc, eleventh_lord_placement)

    guru_raashi = chart.guru.raashi
    shukra_raashi = chart.shukra.raashi
    aspected_by_guru = guru_aspects(guru_raashi)
    malefic_in_second = house["Kuja"] == 2 or house["Surya"] == 2 or house["Shani"] == 2

    effects: list[str] = []

    if second_lord_placement == 2 or is_kendra(second_lord_placement):
        effects.append("As the second lord is in 2/4/5/7/9/10, wealth will be promoted")

    if is_dusthana(second_lord_placement):
        effects.append("Financial conditions will decline")

    if house["Shukra"] == 2 or house["Budha"] == 2:
        effects.append("Shukra/Budha will give wealth")

    if guru_raashi == second_house or guru_raashi == chart.kuja.raashi:
        effects.append("Guru will make the native wealthy")

    if house["Guru"] == 2:
        effects.append("SGuru(2nd lord) will give wealth but is not wholly auspicious")

    if malefic_in_second:
        effects.append("Surya/Shani/Kuja will destroy wealth")

    if eleventh_lord_placement == 2 and second_lord_placement == 11:
        effects.append("Wealth will be acquired by the native")

    if eleventh_lord_placement == second_lord_placement and (
        is_kendra(second_lord_placement) or is_kona(second_lord_placement)
    ):
        effects.append("Wealth will be acquired by the native")

    second_lord_in_kendra = is_kendra(second_lord_placement)
    if second_lord_in_kendra and is_kona(eleventh_lord_placement):
        effects.append("The subject will be wealthy")
    if second_lord_in_kendra and (
        eleventh_lord_house in aspected_by_guru or guru_raashi == eleventh_lord_house
    ):
        effects.append("The subject will be wealthy")
    if second_lord_in_kendra and (
        opposite_raashi(shukra_raashi) == eleventh_lord_house
        or shukra_raashi == eleventh_lord_house
    ):
        effects.append("The subject will be wealthy")

    if is_dusthana(second_lord_placement) and is_dusthana(eleventh_lord_placement):
        if malefic_in_second:
            effects.append("The native will be poor")
        if house["Kuja"] == 11 and house["Rahu"] == 2:
            effects.append("The native will lose wealth on account of royal punishments")

    waxing = chart.chandra_waxing
    if (
        house["Guru"] == 11
        and house["Shukra"] == 2
        and (house["Budha"] == 12 or (house["Chandra"] == 12 and waxing))
    ):
        if second_lord_placement in (house["Guru"], house["Shukra"], house["Budha"]) or (
            second_lord_placement == house["Chandra"] and waxing
        ):
            effects.append("The native will spend money on religious activities")

    if second_lord_house == EXALTATION.get(second_lord):
        effects.append(
            "The native looks after his people and will help others and will become famous"
        )

    if malefic_in_second and second_lord_placement in (
        house["Kuja"],
        house["Surya"],
        house["Shani"],
    ):
        effects.append("The native will be a liar")

    return effects