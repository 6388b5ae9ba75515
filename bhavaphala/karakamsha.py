"""Readings from the karakamsha, the navamsha sign of the atmakaraka."""

from __future__ import annotations

from dataclasses import dataclass

from .astro import (
    DEBILITATION,
    EXALTATION,
    guru_aspects,
    house_of,
    is_valid_raashi,
    kuja_aspects,
    opposite_raashi,
    raashi_of_house,
    shani_aspects,
    sign_lord,
)

_GRAHAS = ("Surya", "Budha", "Shukra", "Chandra", "Rahu", "Ketu", "Kuja", "Guru", "Shani")
_SEVEN = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani")

_EXALTED_IN: dict[str, str] = {EXALTATION[g]: g for g in _SEVEN if g in EXALTATION}
_DEBILITATED_IN: dict[str, str] = {DEBILITATION[g]: g for g in _SEVEN if g in DEBILITATION}

_KENDRA_OR_TRIKONA = frozenset({1, 4, 5, 7, 9, 10})
_AUTHOR_HOUSES = (1, 5)
_MOON_MARS_VENUS_SIGNS = ("Karkataka", "Mesha", "Vruschika", "Vrushabha", "Tula")
_VENUS_MARS_SIGNS = ("Vrushabha", "Tula", "Mesha", "Vruschika")

_MODIFIERS = (
    "A benefic's aspect will remove evils while that of a melefic will increase the bad "
    "effects. In case of both, check the shadbala and see which is stronger and if benefic "
    "is stronger no evils and if malefic is stronger than it causes no good."
)

_KARAKAMSHA_SIGN_EFFECTS: dict[str, str] = {
    "Mesha": "There will be nuisance from rats and cats." + _MODIFIERS,
    "Vrushabha": "There will be happiness from pets.",
    "Mithuna": "The native will be afflicted by itch etc." + _MODIFIERS,
    "Karkataka": "The native will have fear from water." + _MODIFIERS,
    "Simha": "There will be fear from animals." + _MODIFIERS,
    "Kanya": "There will be fear from itch, corpulence, fire etc." + _MODIFIERS,
    "Tula": "The native will be a trader having skills in making clothes.",
    "Vruschika": "The native will have fear from snakes." + _MODIFIERS,
    "Dhanassu": "The native is likely to fall from heights or vehicles." + _MODIFIERS,
    "Makara": "The native will make gains from conch, pearl, coral etc.",
    "Kumbha": (
        "The native will create data stores, or setting up charitable trusts, or working in "
        "battery tech, or civil engineering."
    ),
    "Meena": "The native will obtain Moksha",
}

_LONE_GRAHA_EFFECTS: tuple[tuple[str, str], ...] = (
    (
        "Guru",
        "The native will be a knower of everything, a writer, be versed in Vedas and Vedanta "
        "but not an oratorian or a grammarian.",
    ),
    ("Kuja", "The native is a logician"),
    ("Budha", "The native is a mimamsaka"),
    ("Shani", "The native is dumb-witted"),
    ("Surya", "The native is a musician"),
    ("Chandra", "The native is a follower of Sankhya philosophy"),
    ("Rahu", "The native is an astrologer"),
    ("Ketu", "The native is an astrologer"),
)

_OWN_LARGE_BUILDINGS = "The native will own large buildings"


@dataclass(frozen=True)
class KarakamshaChart:
    """Raashis of the grahas, the karakamsha and the lagna, with the moon and Budha's state."""

    karakamsha: str
    ascendant: str
    surya: str
    chandra: str
    kuja: str
    budha: str
    guru: str
    shukra: str
    shani: str
    rahu: str
    ketu: str
    moon_waxing: bool = False
    mercury_afflicted: bool = False

    def __post_init__(self) -> None:
        for name in ("karakamsha", "ascendant", *(g.lower() for g in _GRAHAS)):
            value = getattr(self, name)
            if not is_valid_raashi(value):
                raise ValueError(f"unknown raashi for {name}: {value!r}")

    def _raashi(self, graha: str) -> str:
        if graha == "Lagna":
            return self.ascendant
        if graha == "Mangal":
            return self.kuja
        if graha not in _GRAHAS:
            raise ValueError(f"unknown graha: {graha!r}")
        return getattr(self, graha.lower())

    def house(self, graha: str) -> int:
        """House of a graha (or of "Lagna") counted from the karakamsha."""
        return house_of(self.karakamsha, self._raashi(graha))


def karakamsha_effects(chart: KarakamshaChart) -> list[str]:
    """Effects read from the karakamsha, in reading order."""
    k = chart.karakamsha
    asc = chart.ascendant
    waxing = chart.moon_waxing
    afflicted = chart.mercury_afflicted
    h = {g: chart.house(g) for g in _GRAHAS}
    lagna = chart.house("Lagna")

    by_guru = guru_aspects(chart.guru)
    by_shani = shani_aspects(chart.shani)
    by_kuja = kuja_aspects(chart.kuja)
    opp_surya = opposite_raashi(chart.surya)
    opp_budha = opposite_raashi(chart.budha)
    opp_chandra = opposite_raashi(chart.chandra)
    opp_shukra = opposite_raashi(chart.shukra)

    def benefic_in(number: int) -> bool:
        return (
            h["Guru"] == number
            or h["Shukra"] == number
            or (h["Chandra"] == number and waxing)
            or (h["Budha"] == number and not afflicted)
        )

    def malefic_in(number: int) -> bool:
        return (
            any(h[g] == number for g in ("Surya", "Shani", "Kuja", "Rahu", "Ketu"))
            or (h["Chandra"] == number and not waxing)
            or (h["Budha"] == number and afflicted)
        )

    def benefic_aspects(raashi: str) -> bool:
        return (
            raashi in by_guru
            or opp_shukra == raashi
            or (opp_chandra == raashi and waxing)
            or (opp_budha == raashi and not afflicted)
        )

    def angle_or_trine(graha: str) -> bool:
        return h[graha] in _KENDRA_OR_TRIKONA

    malefic_aspect_on_karakamsha = (
        k in by_shani
        or k in by_kuja
        or opp_surya == k
        or (opp_budha == k and afflicted)
        or (opp_chandra == k and not waxing)
    )

    no_malefics_in_karakamsha = (
        all(h[g] != 1 for g in ("Surya", "Shani", "Kuja", "Rahu", "Ketu"))
        and (h["Chandra"] != 1 or waxing)
        and (h["Budha"] != 1 or not afflicted)
    )
    only_benefics_in_karakamsha = benefic_in(1) and no_malefics_in_karakamsha
    benefics_in_lagna = (
        h["Guru"] == lagna
        or h["Shukra"] == lagna
        or (h["Chandra"] == lagna and waxing)
        or (h["Budha"] == lagna and not afflicted)
    )

    benefics_in_angle_or_trine = (
        angle_or_trine("Guru")
        or angle_or_trine("Shukra")
        or (angle_or_trine("Chandra") and waxing)
        or (angle_or_trine("Budha") and not afflicted)
    )
    malefics_in_angle_or_trine = (
        any(angle_or_trine(g) for g in ("Shani", "Kuja", "Rahu", "Ketu", "Surya"))
        or (angle_or_trine("Chandra") and not waxing)
        or (angle_or_trine("Budha") and afflicted)
    )

    second_house = raashi_of_house(k, 2)
    venus_or_mars_aspect_second = second_house in by_kuja or opp_shukra == second_house

    eighth_house = raashi_of_house(k, 8)
    eighth_lord = sign_lord(eighth_house)
    eighth_lord_placement = h[eighth_lord]
    malefic_in_eighth = (
        (eighth_lord != "Surya" and h["Surya"] == 8)
        or (eighth_lord != "Shani" and h["Shani"] == 8)
        or (eighth_lord != "Kuja" and h["Kuja"] == 8)
        or h["Rahu"] == 8
        or h["Ketu"] == 8
        or (eighth_lord != "Chandra" and h["Chandra"] == 8 and not waxing)
        or (eighth_lord != "Budha" and h["Budha"] == 8 and afflicted)
    )
    malefic_aspect_on_eighth = (
        (eighth_lord != "Shani" and eighth_house in by_shani)
        or (eighth_lord != "Kuja" and eighth_house in by_kuja)
        or (eighth_lord != "Surya" and opp_surya == eighth_house)
        or (eighth_lord != "Budha" and opp_budha == eighth_house and afflicted)
        or (eighth_lord != "Chandra" and opp_chandra == eighth_house and not waxing)
    )
    eighth_afflicted = malefic_in_eighth or malefic_aspect_on_eighth

    ninth_house = raashi_of_house(k, 9)
    fourth_house = raashi_of_house(k, 4)
    fifth_house = raashi_of_house(k, 5)

    exalted_graha = _EXALTED_IN.get(fourth_house)
    graha_exalted_in_fourth = exalted_graha is not None and h[exalted_graha] == 4
    debilitated_graha = _DEBILITATED_IN.get(fourth_house)
    fourth_lord_placement = h[sign_lord(fourth_house)]
    neech_bhanga_in_fourth = (
        debilitated_graha is not None
        and h[debilitated_graha] == fourth_lord_placement
        and fourth_lord_placement == 4
    )

    def count_in(number: int) -> int:
        return sum(1 for g in _GRAHAS if h[g] == number)

    effects: list[str] = []

    if benefic_in(9) or benefic_aspects(ninth_house):
        effects.append(
            "The native will be truthful, devoted to elders and attached to his own religion"
        )

    if benefic_in(8) or eighth_lord_placement == 8:
        if eighth_afflicted:
            effects.append("The native will have a medium life-span.")
        else:
            effects.append("The native will be long lived.")
    elif eighth_afflicted:
        effects.append("The native's life span may not be long.")

    if malefic_in(6):
        effects.append("The native will be an agriculturist.")
    if benefic_in(6):
        effects.append("The native will be lazy.")

    if h["Chandra"] == 7 and h["Guru"] == 7:
        effects.append("The native will beget a very beautiful wife.")
    if h["Shukra"] == 7:
        effects.append("The native will beget a sensuous wife.")
    if h["Budha"] == 7:
        effects.append("The native will beget a wife well versed in arts.")
    if h["Budha"] == 10 and h["Shukra"] == 10:
        effects.append("The native will gain in business and will do many great deeds.")
    if h["Rahu"] == 7:
        effects.append("The native is likely to marry an individual as his or her second spouse.")
    if h["Surya"] == 7:
        effects.append("The native will beget a wife that is confined to domestic core.")
    if h["Shani"] == 7:
        effects.append(
            "The native will beget a wife of higher age bracket or a pious wife or a sick wife."
        )

    if fifth_house in by_kuja:
        effects.append("The native may get boils or ulcers")
    if h["Ketu"] == 11:
        effects.append("The native may get dysentry or diseases related to impure water")
    if h["Budha"] == 5:
        effects.append("The native will be an ascetic of the highest order")
    if h["Surya"] == 5 and h["Kuja"] == 5:
        effects.append(
            "The native may be involved in activities or professions requiring precision tools, "
            "sharp instruments, or decisive technical action"
        )
    if h["Shani"] == 5:
        effects.append(
            "The native may engage in activities requiring focus, precision, and strategic targeting"
        )
    if h["Shukra"] == 5:
        effects.append("The native may become a poet and a eloquent speaker.")

    if h["Guru"] in _AUTHOR_HOUSES and h["Guru"] == h["Chandra"]:
        effects.append("The native will be an author")
    if h["Shukra"] in _AUTHOR_HOUSES and h["Shukra"] == h["Chandra"]:
        effects.append("The native will be an ordinary author")

    for graha, text in _LONE_GRAHA_EFFECTS:
        if h[graha] in _AUTHOR_HOUSES and count_in(h[graha]) == 1:
            effects.append(text)

    if graha_exalted_in_fourth:
        effects.append(_OWN_LARGE_BUILDINGS)
    if neech_bhanga_in_fourth:
        effects.append(
            "The native will own large buildings after struggles and initial setbacks."
        )
    if h["Chandra"] == 4 and h["Shukra"] == 4:
        effects.append(_OWN_LARGE_BUILDINGS)
    if h["Rahu"] == 4 and h["Shani"] == 4:
        effects.append(
            "The native may reside in or acquire property built with durable, heavy materials "
            "such as concrete or stone, indicating strong and long-lasting structures"
        )
    if h["Rahu"] == 5 and h["Kuja"] == 5:
        effects.append("The native may suffer from a pulmonary consumption")
    if h["Kuja"] == 4 and h["Ketu"] == 4:
        effects.append(
            "The native may be associated with properties built using engineered or modular "
            "materials, such as brick or structured construction, often reflecting practical "
            "and functional design"
        )
    if h["Guru"] == 4:
        effects.append(
            "The native may own or reside in spacious, well-designed homes with natural or "
            "traditional elements, often reflecting comfort and wisdom in living spaces"
        )
    if h["Surya"] == 4:
        effects.append(
            "The native may reside in simple or minimalistic dwellings, possibly with temporary "
            "or lightweight structures, or environments exposed to natural elements"
        )

    if benefic_in(3):
        effects.append("The native will be timid.")
    if malefic_in(3):
        effects.append("The native will be courageous.")

    if second_house in _VENUS_MARS_SIGNS:
        text = "The native will be addicted to others wives. "
        if venus_or_mars_aspect_second:
            text += "This will continue until the last breath of the native."
        if h["Ketu"] != 2:
            effects.append(text)
        if h["Rahu"] == 2:
            effects.append("The natives wealth maybe be destroyed")

    if h["Surya"] == 1:
        effects.append("The native will be engaged in royal assignments")
    if h["Surya"] == 1 and h["Rahu"] == 1:
        effects.append(
            "The native will have fear from snake. A benefic aspect ensures no fear and a "
            "malefic aspect worsens this effect"
        )
    if h["Rahu"] == 1:
        effects.append(
            "The native is likely to become an engineer or works involving secrecy or medical "
            "technician"
        )
    if h["Ketu"] == 1:
        text = (
            "The native may be associated with works involving large assets, heavy machinery, "
            "or specialized technical domains. "
        )
        if malefic_aspect_on_karakamsha:
            text += "The native may have diseases or problems related to the ear."
        effects.append(text)
    if h["Shani"] == 1:
        effects.append("The native will inherit the profession of his family for livelihood")
    if h["Shukra"] == 1:
        effects.append("The native will be long lived and be sensuous.")
    if h["Kuja"] == 1:
        effects.append(
            "If Kuja has obtained minimum in shadbala then the native may be inclined towards "
            "the use of weapons, sharp instruments, or professions involving precision, force, "
            "and technical skill"
        )
    if h["Budha"] == 1:
        effects.append(
            "The native will be skillful in arts and trading, be intelligent and educated"
        )
    if h["Guru"] == 1:
        effects.append(
            "The native will be engaged towards good acts and inclined towards spiritualism"
        )

    if only_benefics_in_karakamsha and (benefic_aspects(asc) or benefics_in_lagna):
        effects.append(
            "The native will undoubtedly obtain leadership position in a huge organization"
        )

    effects.append(_KARAKAMSHA_SIGN_EFFECTS[k])

    if benefics_in_angle_or_trine:
        text = "The native will obtain wealth and learning"
        if malefics_in_angle_or_trine:
            text += ", but results will be mixed due to presence of malefics"
        effects.append(text)

    if k in _MOON_MARS_VENUS_SIGNS:
        effects.append("The native may be inclined towards other's spouse")
    else:
        effects.append("The native will never be inclined towards other's spouse")

    return effects