"""Signs, lords, houses, aspects and the natal chart used by the readings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

RAASHIS: tuple[str, ...] = (
    "Mesha",
    "Vrushabha",
    "Mithuna",
    "Karkataka",
    "Simha",
    "Kanya",
    "Tula",
    "Vruschika",
    "Dhanassu",
    "Makara",
    "Kumbha",
    "Meena",
)

GRAHAS: tuple[str, ...] = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani")

NODES: tuple[str, ...] = ("Rahu", "Ketu")

NAKSHATRAS: tuple[str, ...] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishta",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)

SIGN_LORDS: dict[str, str] = {
    "Mesha": "Kuja",
    "Vrushabha": "Shukra",
    "Mithuna": "Budha",
    "Karkataka": "Chandra",
    "Simha": "Surya",
    "Kanya": "Budha",
    "Tula": "Shukra",
    "Vruschika": "Kuja",
    "Dhanassu": "Guru",
    "Makara": "Shani",
    "Kumbha": "Shani",
    "Meena": "Guru",
}

OWN_SIGNS: dict[str, tuple[str, ...]] = {
    graha: tuple(r for r in RAASHIS if SIGN_LORDS[r] == graha) for graha in GRAHAS
}

EXALTATION: dict[str, str] = {
    "Surya": "Mesha",
    "Chandra": "Vrushabha",
    "Kuja": "Makara",
    "Budha": "Kanya",
    "Guru": "Karkataka",
    "Shukra": "Meena",
    "Shani": "Tula",
}

DEBILITATION: dict[str, str] = {
    "Surya": "Tula",
    "Chandra": "Vruschika",
    "Kuja": "Karkataka",
    "Budha": "Meena",
    "Guru": "Makara",
    "Shukra": "Kanya",
    "Shani": "Mesha",
}

ENEMY_SIGNS: dict[str, tuple[str, ...]] = {
    "Surya": ("Vrushabha", "Tula", "Makara", "Kumbha"),
    "Chandra": (),
    "Kuja": ("Mithuna", "Kanya"),
    "Budha": ("Karkataka",),
    "Guru": ("Mithuna", "Kanya", "Vrushabha", "Tula"),
    "Shukra": ("Simha", "Karkataka"),
    "Shani": ("Simha", "Karkataka", "Mesha", "Vruschika"),
}

CHARA = "Chara"
STHIRA = "Sthira"
DWISWABHAVA = "Dwiswabhava"

RAASHI_QUALITY: dict[str, str] = {
    raashi: (CHARA, STHIRA, DWISWABHAVA)[i % 3] for i, raashi in enumerate(RAASHIS)
}

_INDEX = {raashi: i for i, raashi in enumerate(RAASHIS)}
_VALID_GRAHAS = frozenset(GRAHAS)
_VALID_NAKSHATRAS = frozenset(NAKSHATRAS)
_VALID_RAASHIS = frozenset(RAASHIS)

_GURU_ASPECT_HOUSES = (5, 7, 9)
_SHANI_ASPECT_HOUSES = (3, 7, 10)
_KUJA_ASPECT_HOUSES = (4, 7, 8)


def _index(raashi: str) -> int:
    if not is_valid_raashi(raashi):
        raise ValueError(f"unknown raashi: {raashi!r}")
    return _INDEX[raashi]


def is_valid_graha(value: object) -> bool:
    """Whether value names one of the seven grahas."""
    return isinstance(value, str) and value in _VALID_GRAHAS


def is_valid_nakshatra(value: object) -> bool:
    """Whether value names one of the 27 nakshatras."""
    return isinstance(value, str) and value in _VALID_NAKSHATRAS


def is_valid_raashi(value: object) -> bool:
    """Whether value names one of the twelve raashis."""
    return isinstance(value, str) and value in _VALID_RAASHIS


def sign_lord(raashi: str) -> str:
    """The graha that rules the raashi."""
    _index(raashi)
    return SIGN_LORDS[raashi]


def house_of(ascendant: str, raashi: str) -> int:
    """House number (1-12) that raashi occupies counted from ascendant."""
    return (_index(raashi) - _index(ascendant)) % 12 + 1


def raashi_of_house(ascendant: str, house: int) -> str:
    """Raashi that falls in the given house counted from ascendant."""
    if not isinstance(house, int) or not 1 <= house <= 12:
        raise ValueError(f"house must be between 1 and 12, got {house!r}")
    return RAASHIS[(_index(ascendant) + house - 1) % 12]


def opposite_raashi(raashi: str) -> str:
    """The raashi seventh from the given one."""
    return raashi_of_house(raashi, 7)


def _aspects(raashi: str, houses: tuple[int, ...]) -> list[str]:
    return [raashi_of_house(raashi, house) for house in houses]


def guru_aspects(raashi: str) -> list[str]:
    """Raashis aspected by Guru placed in raashi (5th, 7th and 9th)."""
    return _aspects(raashi, _GURU_ASPECT_HOUSES)


def shani_aspects(raashi: str) -> list[str]:
    """Raashis aspected by Shani placed in raashi (3rd, 7th and 10th)."""
    return _aspects(raashi, _SHANI_ASPECT_HOUSES)


def kuja_aspects(raashi: str) -> list[str]:
    """Raashis aspected by Kuja placed in raashi (4th, 7th and 8th)."""
    return _aspects(raashi, _KUJA_ASPECT_HOUSES)


def is_kendra(house: int) -> bool:
    return house in (1, 4, 7, 10)


def is_kona(house: int) -> bool:
    return house in (1, 5, 9)


def is_dusthana(house: int) -> bool:
    return house in (6, 8, 12)


def is_graha_combust(
    graha: str,
    kuja_combust: bool,
    shukra_combust: bool,
    budha_combust: bool,
    guru_combust: bool,
    shani_combust: bool,
) -> bool:
    """Whether graha is combust given the combustion flag of each graha that can be."""
    flags = {
        "Kuja": kuja_combust,
        "Shukra": shukra_combust,
        "Budha": budha_combust,
        "Guru": guru_combust,
        "Shani": shani_combust,
    }
    return flags.get(graha, False)


def is_lord_in_own_house(lord: str, raashi: str) -> bool:
    """Whether lord sits in a raashi it rules."""
    return raashi in OWN_SIGNS.get(lord, ())


def is_graha_strong(
    is_not_combust: bool,
    is_not_debilitated: bool,
    is_not_in_enemy_sign: bool,
    is_not_in_dusthana: bool,
) -> bool:
    """A graha counts as strong when at least two of the four conditions hold."""
    conditions = (is_not_combust, is_not_debilitated, is_not_in_enemy_sign, is_not_in_dusthana)
    return sum(bool(c) for c in conditions) >= 2


@dataclass(frozen=True)
class Placement:
    """The raashi a graha occupies and whether it is combust."""

    raashi: str
    combust: bool = False

    def __post_init__(self) -> None:
        _index(self.raashi)


@dataclass(frozen=True)
class Chart:
    """A natal chart: ascendant, graha placements and navamsha placements."""

    ascendant: str
    surya: str
    chandra: str
    kuja: Placement
    budha: Placement
    guru: Placement
    shukra: Placement
    shani: Placement
    rahu: str
    ketu: str
    nav_ascendant: str | None = None
    navamsha: Mapping[str, str] = field(default_factory=dict)
    chandra_waxing: bool = True
    budha_unafflicted: bool = True

    def __post_init__(self) -> None:
        for raashi in (self.ascendant, self.surya, self.chandra, self.rahu, self.ketu):
            _index(raashi)
        if self.nav_ascendant is not None:
            _index(self.nav_ascendant)
        for graha, raashi in self.navamsha.items():
            if graha not in GRAHAS and graha not in NODES:
                raise ValueError(f"unknown graha: {graha!r}")
            _index(raashi)

    def _natal_raashi(self, graha: str) -> str:
        placements = {
            "Surya": self.surya,
            "Chandra": self.chandra,
            "Kuja": self.kuja.raashi,
            "Budha": self.budha.raashi,
            "Guru": self.guru.raashi,
            "Shukra": self.shukra.raashi,
            "Shani": self.shani.raashi,
            "Rahu": self.rahu,
            "Ketu": self.ketu,
        }
        try:
            return placements[graha]
        except KeyError:
            raise ValueError(f"unknown graha: {graha!r}") from None

    def house(self, graha: str) -> int:
        """House of graha counted from the ascendant."""
        return house_of(self.ascendant, self._natal_raashi(graha))

    def navamsha_house(self, graha: str) -> int:
        """House of graha in the navamsha counted from the navamsha ascendant."""
        if graha not in GRAHAS and graha not in NODES:
            raise ValueError(f"unknown graha: {graha!r}")
        if self.nav_ascendant is None:
            raise ValueError("chart has no navamsha ascendant")
        try:
            raashi = self.navamsha[graha]
        except KeyError:
            raise ValueError(f"no navamsha placement for {graha}") from None
        return house_of(self.nav_ascendant, raashi)

    def is_lord_combust(self, lord: str) -> bool:
        """Whether lord is combust; Surya, Chandra and the nodes never are."""
        return is_graha_combust(
            lord,
            self.kuja.combust,
            self.shukra.combust,
            self.budha.combust,
            self.guru.combust,
            self.shani.combust,
        )