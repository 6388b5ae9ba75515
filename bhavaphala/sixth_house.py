"""Readings for the sixth house: disease, wounds and enemies."""

from __future__ import annotations

from .astro import Chart, raashi_of_house, sign_lord

_RELATIONS: dict[int, str] = {
    1: "the native",
    3: "the native's younger siblings",
    4: "the native's mother",
    5: "the natives's children",
    7: "the native's wife",
    9: "the native's father",
}

# Lagna lord's sign paired with the sign Budha must occupy to aspect it.
_BUDHA_ASPECT: dict[str, str] = {
    "Mesha": "Tula",
    "Vruschika": "Vrushabha",
    "Mithuna": "Dhanassu",
    "Kanya": "Meena",
}

_GRAHA_DISEASES: tuple[tuple[str, str], ...] = (
    ("Surya", "Tumours, fever will affect {}"),
    ("Budha", "Bilious diseases will affect {}"),
    ("Shukra", "Diseases caused by sexual union will affect {}"),
    ("Chandra", "Drwoning or respiratory related diseases will affect {}"),
    ("Kuja", "Diseases of blood vessels, hits or wounds will affect {}"),
    ("Guru", "{} will be free of diseases"),
    ("Shani", "Windy diseases will affect {}"),
)

_NODE_DISEASES: tuple[tuple[str, str], ...] = (
    ("Rahu", "Danger from criminals for {}"),
    ("Ketu", "Diseases of the navel will affect {}"),
)


def sixth_house_effects(chart: Chart) -> list[str]:
    """Effects of the sixth house for the chart, in reading order."""
    asc = chart.ascendant
    sixth_lord = sign_lord(raashi_of_house(asc, 6))
    sixth_lord_placement = chart.house(sixth_lord)
    eighth_lord = sign_lord(raashi_of_house(asc, 8))
    eighth_lord_placement = chart.house(eighth_lord)
    budha_raashi = chart.budha.raashi
    ascendant_lord_house = raashi_of_house(asc, chart.house(sign_lord(asc)))

    effects: list[str] = []

    if sixth_lord_placement in (1, 6, 8):
        effects.append("The native will get ulcers or bruises on the body")

    if _BUDHA_ASPECT.get(ascendant_lord_house) == budha_raashi:
        effects.append("The native will get facial diseases")

    relation = _RELATIONS.get(sixth_lord_placement)
    if eighth_lord_placement == sixth_lord_placement and relation is not None:
        for graha, text in _GRAHA_DISEASES:
            if (
                chart.house(graha) == sixth_lord_placement
                and graha != eighth_lord
                and graha != sixth_lord
            ):
                effects.append(text.format(relation))
        for node, text in _NODE_DISEASES:
            if chart.house(node) == sixth_lord_placement:
                effects.append(text.format(relation))

    return effects