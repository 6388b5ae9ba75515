"""General readings of temperament and mind, taken from the moon and Shukra."""

from __future__ import annotations

from .astro import (
    CHARA,
    DEBILITATION,
    ENEMY_SIGNS,
    RAASHI_QUALITY,
    Chart,
    guru_aspects,
    house_of,
    is_dusthana,
    is_kendra,
    is_kona,
    kuja_aspects,
    opposite_raashi,
    raashi_of_house,
    shani_aspects,
    sign_lord,
)

_PROTECTED = ", but the native is protected by Guru / Shukra from this"


def _navamsha_house(chart: Chart, graha: str) -> int | None:
    try:
        return chart.navamsha_house(graha)
    except ValueError:
        return None


def _raashis(chart: Chart) -> dict[str, str]:
    return {
        "Surya": chart.surya,
        "Chandra": chart.chandra,
        "Kuja": chart.kuja.raashi,
        "Budha": chart.budha.raashi,
        "Guru": chart.guru.raashi,
        "Shukra": chart.shukra.raashi,
        "Shani": chart.shani.raashi,
        "Rahu": chart.rahu,
        "Ketu": chart.ketu,
    }


def general_effects(chart: Chart) -> list[str]:
    """General effects for the chart, in reading order."""
    raashi = _raashis(chart)
    chandra = chart.chandra
    from_chandra = {body: house_of(chandra, r) for body, r in raashi.items()}

    chandra_lord = sign_lord(chandra)
    lord_placement = from_chandra[chandra_lord]
    lord_house = raashi_of_house(chandra, lord_placement)

    aspected_by_guru = guru_aspects(chart.guru.raashi)
    aspected_by_shani = shani_aspects(chart.shani.raashi)
    aspected_by_kuja = kuja_aspects(chart.kuja.raashi)

    asp_shukra = opposite_raashi(raashi["Shukra"]) == chandra
    asp_shani = chandra in aspected_by_shani
    asp_guru = chandra in aspected_by_guru
    asp_kuja = chandra in aspected_by_kuja
    with_shani = raashi["Shani"] == chandra
    with_kuja = raashi["Kuja"] == chandra
    with_rahu = raashi["Rahu"] == chandra
    with_ketu = raashi["Ketu"] == chandra
    with_guru = raashi["Guru"] == chandra
    with_shukra = raashi["Shukra"] == chandra
    sheltered = with_guru or with_shukra or asp_shukra or asp_guru
    with_budha = raashi["Budha"] == chandra
    watery_fixed = ("Vruschika", "Meena")
    chandra_or_budha_in_v_or_m = chandra in watery_fixed or raashi["Budha"] in watery_fixed

    shukra_house = chart.house("Shukra")
    shukra_raashi = raashi["Shukra"]
    nav_shukra_raashi = chart.navamsha.get("Shukra") if chart.nav_ascendant else None

    kuja_signs = ("Mesha", "Vruschika")
    shani_signs = ("Kumbha", "Makara")
    shukra_kuja = (
        shukra_raashi in kuja_signs
        or nav_shukra_raashi in kuja_signs
        or shukra_raashi in aspected_by_kuja
        or chart.house("Kuja") == shukra_house
    )
    shukra_shani = (
        shukra_raashi in shani_signs
        or nav_shukra_raashi in shani_signs
        or shukra_raashi in aspected_by_shani
        or chart.house("Shani") == shukra_house
    )

    effects: list[str] = []

    if shukra_house == 7 or _navamsha_house(chart, "Shukra") == 7:
        effects.append("The native will be very horny")

    if shukra_kuja:
        effects.append(
            "The native is likely to develop feelings to lick or kiss the private parts "
            "of the opposite gender to satisfy lust"
        )
    if shukra_shani:
        effects.append(
            "The native is likely to develop feelings to lick or kiss the private parts "
            "of the same gender to satisfy lust"
        )

    if asp_guru or with_guru:
        effects.append("The native is magnanimous in both heart and mind")

    if asp_shukra or with_shukra:
        effects.append(
            "The native is friendly in nature, amicable, fond of beauty and share happiness"
        )

    def sheltered_text(text: str) -> str:
        return text + _PROTECTED if sheltered else text

    if is_dusthana(chart.house("Chandra")):
        effects.append(
            sheltered_text("The native's mind may be weak and may not have a healthy attitude")
        )

    if chart.house("Surya") == 7:
        effects.append("The native is likely to hate the opposite gender")
    if _navamsha_house(chart, "Surya") == 7:
        effects.append(
            "As the native grows up, the native is likely to hate the opposite gender"
        )

    if with_budha and chandra_or_budha_in_v_or_m:
        effects.append("The native could harbour horrendous levels of avarice, hate, jeolousy")

    afflictions = (
        (
            asp_shani or with_shani,
            "The native is likely to suffer from persecution complex and are extremely "
            "stubborn in life",
        ),
        (asp_kuja or with_kuja, "The native will make for violent moods, behaviour and action"),
        (with_rahu, "The native suffers from dangerous levels of suspicion"),
        (with_ketu, "The native suffers from intense inferiority complex"),
    )
    affliction_count = 0
    for present, text in afflictions:
        if present:
            effects.append(sheltered_text(text))
            affliction_count += 1

    if affliction_count > 1:
        effects.append("Too many afflictions makes the native dangerous. Intense penance is required")

    malefic_with_lord = any(
        lord_placement == from_chandra[graha] and chandra_lord != graha
        for graha in ("Shani", "Kuja", "Surya")
    )
    if is_dusthana(lord_placement) or malefic_with_lord:
        effects.append(
            "Mental pleasure will diminish due to malefic aspect and dusthana placement "
            "of moon sign lord"
        )

    lord_in_kendra_or_kona = is_kendra(lord_placement) or is_kona(lord_placement)
    if lord_in_kendra_or_kona:
        effects.append(
            "Mental pleasure will be available all the time as moon sign lord is in Kendra/Kona"
        )

    relieved = (
        (from_chandra["Guru"] == lord_placement and chandra_lord != "Guru")
        or (from_chandra["Shukra"] == lord_placement and chandra_lord != "Shukra")
    ) and lord_in_kendra_or_kona

    if DEBILITATION.get(chandra_lord) == lord_house:
        if relieved:
            effects.append(
                "There will be psychological diseases as moon sign lord is neech, "
                "but they will disappear"
            )
        else:
            effects.append("There will be psychological diseases as moon sign lord is neech")

    if chandra_lord not in ("Surya", "Chandra") and chart.is_lord_combust(chandra_lord):
        if relieved:
            effects.append(
                "There will be psychological diseases as moon sign lord is combust, "
                "but they will disappear due to Guru/Shukra"
            )
        else:
            effects.append("There will be psychological diseases as moon sign lord is combust")

    if lord_house in ENEMY_SIGNS.get(chandra_lord, ()):
        if relieved:
            effects.append(
                "There will be psychological diseases as moon sign lord is in enemy sign, "
                "but they will disappear due to Guru/Shukra"
            )
        else:
            effects.append(
                "There will be psychological diseases as moon sign lord is in enemy sign"
            )

    if RAASHI_QUALITY[chandra] == CHARA and asp_guru:
        effects.append(
            "Mentally the individual will be satisfied as moon is in Chara and aspected by Guru"
        )

    if (
        not asp_guru
        and not asp_shukra
        and not with_guru
        and not with_shukra
        and (asp_kuja or asp_shani or with_shani or with_kuja)
    ):
        effects.append(
            "The native will not have mental health as moon is aspected/conjunct by a malefic "
            "with no protection from a benefic"
        )

    return effects