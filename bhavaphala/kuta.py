"""Ashtakuta matching of a groom and a bride by raashi and nakshatra."""

from __future__ import annotations

from dataclasses import dataclass

from .astro import NAKSHATRAS, is_valid_nakshatra, is_valid_raashi, sign_lord


@dataclass(frozen=True)
class KutaResult:
    """Score and remarks for one kuta; index is its position among the kutas."""

    index: int
    score: float
    comments: str


@dataclass(frozen=True)
class TaraResult:
    """Remarks and score for one direction of the tara kuta."""

    comments: str
    score: int


def _check_raashi(raashi: str) -> str:
    if not is_valid_raashi(raashi):
        raise ValueError(f"unknown raashi: {raashi!r}")
    return raashi


def _check_nakshatra(nakshatra: str) -> str:
    if not is_valid_nakshatra(nakshatra):
        raise ValueError(f"unknown nakshatra: {nakshatra!r}")
    return nakshatra


# Varna -------------------------------------------------------------------

_BRAHMIN, _KSHATRIYA, _VAISHYA, _SHUDRA = 4, 3, 2, 1

_VARNA: dict[str, int] = {
    "Karkataka": _BRAHMIN,
    "Vruschika": _BRAHMIN,
    "Meena": _BRAHMIN,
    "Mesha": _KSHATRIYA,
    "Simha": _KSHATRIYA,
    "Dhanassu": _KSHATRIYA,
    "Vrushabha": _VAISHYA,
    "Kanya": _VAISHYA,
    "Makara": _VAISHYA,
    "Mithuna": _SHUDRA,
    "Tula": _SHUDRA,
    "Kumbha": _SHUDRA,
}


def varna_kuta(groom_raashi: str, bride_raashi: str) -> KutaResult:
    """Varna kuta from the moon signs of groom and bride."""
    groom = _VARNA[_check_raashi(groom_raashi)]
    bride = _VARNA[_check_raashi(bride_raashi)]
    if groom < bride:
        extra = "But the man is likely to dominate the woman"
    else:
        extra = "But the woman is likely to dominate the man"
    if abs(groom - bride) in (0, 2):
        return KutaResult(
            0,
            1.0,
            "Both the man and the woman will respect each others role in the relationship."
            + extra,
        )
    return KutaResult(
        0,
        0.0,
        "Both the man and the woman may not respect each others role in the relationship."
        + extra,
    )


# Vashya ------------------------------------------------------------------

_CHATUSHPADA = "Chatushpada"
_MANAVA = "Manava"
_JALACHARA = "Jalachara"
_VANACHARA = "Vanachara"
_KEETA = "Keeta"

_VASHYA: dict[str, str] = {
    "Mesha": _CHATUSHPADA,
    "Vrushabha": _CHATUSHPADA,
    "Mithuna": _MANAVA,
    "Karkataka": _JALACHARA,
    "Simha": _VANACHARA,
    "Kanya": _MANAVA,
    "Tula": _MANAVA,
    "Vruschika": _KEETA,
    "Kumbha": _MANAVA,
    "Meena": _JALACHARA,
}

_SPLIT_VASHYA: dict[str, tuple[str, str]] = {
    "Dhanassu": (_MANAVA, _CHATUSHPADA),
    "Makara": (_CHATUSHPADA, _JALACHARA),
}

_VASHYA_SCORES: dict[str, dict[str, float]] = {
    _CHATUSHPADA: {_CHATUSHPADA: 2, _MANAVA: 1, _JALACHARA: 1, _VANACHARA: 0.5, _KEETA: 1},
    _MANAVA: {_CHATUSHPADA: 0, _MANAVA: 2, _JALACHARA: 0.5, _VANACHARA: 0, _KEETA: 1},
    _JALACHARA: {_CHATUSHPADA: 1, _MANAVA: 0.5, _JALACHARA: 2, _VANACHARA: 1, _KEETA: 1},
    _VANACHARA: {_CHATUSHPADA: 0.5, _MANAVA: 0, _JALACHARA: 1, _VANACHARA: 2, _KEETA: 0},
    _KEETA: {_CHATUSHPADA: 1, _MANAVA: 1, _JALACHARA: 1, _VANACHARA: 0, _KEETA: 2},
}


def _vashya_of(raashi: str, first_half: bool) -> str:
    _check_raashi(raashi)
    if raashi in _SPLIT_VASHYA:
        first, second = _SPLIT_VASHYA[raashi]
        return first if first_half else second
    return _VASHYA[raashi]


def vashya_kuta(
    groom_raashi: str, bride_raashi: str, groom_first_half: bool, bride_first_half: bool
) -> KutaResult:
    """Vashya kuta; the halves matter only for Dhanassu and Makara."""
    groom = _vashya_of(groom_raashi, groom_first_half)
    bride = _vashya_of(bride_raashi, bride_first_half)
    score = float(_VASHYA_SCORES[groom][bride])
    if score == 2:
        comments = "Both the man and the woman will have control over the other."
    elif score == 1:
        comments = "Both the man and the woman will have partial control over the other."
    else:
        comments = "Both the man and the woman may not have control over the other."
    return KutaResult(1, score, comments)


# Tara --------------------------------------------------------------------

_TARA_TEXT: dict[int, tuple[str, int]] = {
    2: ("{} nakshatra brings wealth, prosperity, and good fortune to {} nakshatra.", 3),
    3: ("{} nakshatra may bring obstacles, dangers, or challenges to {} nakshatra.", 0),
    4: ("{} nakshatra ensures well-being, growth, and security for {} nakshatra.", 3),
    5: ("{} nakshatra may indicate opposition, enemies, or conflict for {} nakshatra.", 0),
    6: ("{} nakshatra is supportive, helping {} nakshatra achieve goals and find success.", 3),
    7: (
        "{} nakshatra may bring significant distress, destruction, or serious trouble to {} nakshatra.",
        0,
    ),
    8: ("{} nakshatra fosters friendship, harmony, and mutual understanding with {} nakshatra.", 3),
    9: ("{} nakshatra brings the highest form of luck and great friendship to {} nakshatra.", 3),
    0: ("{} nakshatra brings the highest form of luck and great friendship to {} nakshatra.", 3),
}

_TARA_EXEMPT = ("Mrigashira", "Magha", "Swati", "Anuradha")


def mod(n: int, m: int) -> int:
    """Remainder of n by m that is never negative for positive m."""
    return ((n % m) + m) % m


def tara_type(
    tara_number: int, is_bride: bool, groom_nakshatra: str, bride_nakshatra: str
) -> TaraResult:
    """Remarks and score for a tara number counted from one partner to the other."""
    if tara_number == 1:
        if is_bride:
            comment = ""
        elif groom_nakshatra == bride_nakshatra:
            comment = (
                f"{groom_nakshatra} nakshatra aligns with {bride_nakshatra}'s birth star, "
                "generally indicating challenges."
            )
        else:
            comment = (
                f"{groom_nakshatra} nakshatra may bring challenges to {bride_nakshatra} "
                "and vice versa."
            )
        return TaraResult(comment, 0)
    try:
        template, score = _TARA_TEXT[tara_number]
    except KeyError:
        return TaraResult("Unable to calculate Tara compatibility", 0)
    return TaraResult(template.format(groom_nakshatra, bride_nakshatra), score)


def _nakshatra_number(nakshatra: str) -> int:
    return NAKSHATRAS.index(_check_nakshatra(nakshatra)) + 1


def tara_kuta(groom_nakshatra: str, bride_nakshatra: str) -> KutaResult:
    """Tara kuta: the mean of the taras counted both ways."""
    groom_num = _nakshatra_number(groom_nakshatra)
    bride_num = _nakshatra_number(bride_nakshatra)
    groom = tara_type(mod(bride_num - groom_num + 1, 9), False, groom_nakshatra, bride_nakshatra)
    bride = tara_type(mod(groom_num - bride_num + 1, 9), True, bride_nakshatra, groom_nakshatra)
    if groom_nakshatra in _TARA_EXEMPT or bride_nakshatra in _TARA_EXEMPT:
        note = " Note:- Mrigashira, Magha, Swati & Anuradha are exempt from bad luck"
    else:
        note = ""
    score = (groom.score + bride.score) / 2
    return KutaResult(2, score, groom.comments + bride.comments + note)


# Yoni --------------------------------------------------------------------

_YONI: dict[str, str] = {
    "Ashwini": "Horse",
    "Bharani": "Elephant",
    "Krittika": "Sheep",
    "Rohini": "Snake",
    "Mrigashira": "Snake",
    "Ardra": "Dog",
    "Punarvasu": "Cat",
    "Pushya": "Sheep",
    "Ashlesha": "Cat",
    "Magha": "Rat",
    "Purva Phalguni": "Rat",
    "Uttara Phalguni": "Cow",
    "Hasta": "Buffalo",
    "Chitra": "Tiger",
    "Swati": "Buffalo",
    "Vishakha": "Tiger",
    "Anuradha": "Deer",
    "Jyeshtha": "Deer",
    "Mula": "Dog",
    "Purva Ashadha": "Monkey",
    "Uttara Ashadha": "Mongoose",
    "Shravana": "Monkey",
    "Dhanishta": "Lion",
    "Shatabhisha": "Horse",
    "Purva Bhadrapada": "Lion",
    "Uttara Bhadrapada": "Cow",
    "Revati": "Elephant",
}

_YONI_ORDER = (
    "Horse", "Elephant", "Sheep", "Snake", "Dog", "Cat", "Rat",
    "Cow", "Buffalo", "Tiger", "Deer", "Monkey", "Mongoose", "Lion",
)

_YONI_ROWS = (
    (4, 2, 2, 3, 2, 2, 2, 1, 0, 1, 3, 3, 2, 1),
    (2, 4, 3, 3, 2, 2, 2, 2, 3, 1, 2, 3, 2, 0),
    (2, 3, 4, 2, 1, 2, 1, 3, 3, 1, 2, 0, 3, 1),
    (3, 3, 2, 4, 2, 1, 1, 1, 1, 2, 2, 2, 0, 2),
    (2, 2, 1, 2, 4, 2, 1, 2, 2, 1, 0, 2, 1, 1),
    (2, 2, 2, 1, 2, 4, 0, 2, 2, 1, 3, 3, 2, 1),
    (2, 2, 1, 1, 1, 0, 4, 2, 2, 2, 2, 2, 1, 2),
    (1, 2, 3, 1, 2, 2, 2, 4, 3, 0, 3, 2, 2, 1),
    (0, 3, 3, 1, 2, 2, 2, 3, 4, 1, 2, 2, 2, 1),
    (1, 1, 1, 2, 1, 1, 2, 0, 1, 4, 1, 1, 2, 1),
    (3, 2, 2, 2, 0, 3, 2, 3, 2, 1, 4, 2, 2, 1),
    (3, 3, 0, 2, 2, 3, 2, 2, 2, 1, 2, 4, 3, 2),
    (2, 2, 3, 0, 1, 2, 1, 2, 2, 2, 2, 3, 4, 2),
    (1, 0, 1, 2, 1, 1, 2, 1, 1, 1, 1, 2, 2, 4),
)

_YONI_SCORES: dict[str, dict[str, int]] = {
    row_yoni: dict(zip(_YONI_ORDER, row)) for row_yoni, row in zip(_YONI_ORDER, _YONI_ROWS)
}

_YONI_FANTASY: dict[str, str] = {
    "Horse": "Seems aloof about sex, yet possesses powerful hidden passion and stamina and craves fast, free, adventurous encounters with real endurance once the session begins",
    "Elephant": "Slow, deep, long-lasting, very sensual and heavy body contact, enjoys prolonged foreplay and staying inside long",
    "Sheep": "Gentle, submissive, loves being led and guided, enjoys soft repeated movements and feeling protected",
    "Snake": "Intense eye contact, hypnotic seduction, twisting and coiling positions, very sensual tongue play, slow penetration with sudden deep thrusts",
    "Dog": "Loyal but lustful, loves from behind, quick and enthusiastic sessions, high stamina, can go many rounds",
    "Cat": "Playful, teasing, loves being chased and caught, independent but becomes very demanding once aroused, lots of scratching and biting",
    "Rat": "Fast, sneaky, opportunistic sex, loves quickies in unusual places, very high frequency, multiple short sessions",
    "Cow": "Nurturing, slow and steady, sensual massage-like lovemaking, enjoys being mounted and giving complete surrender, long comfortable sessions",
    "Buffalo": "Powerful, dominant, earthy, heavy pounding, likes raw physical strength and stamina displays, can be very territorial during sex",
    "Tiger": "Fierce, predatory, dominant, loves the hunt and pouncing, intense eye contact, growling, powerful thrusts, can be rough and passionate",
    "Deer": "Graceful, shy at first, then very sensitive and responsive, loves gentle but deep lovemaking in beautiful settings, easily startled",
    "Monkey": "Teases and flirts for a very long time, playful and mischievous foreplay, but once it starts \u2014 short, explosive, and restless",
    "Mongoose": "Fearless, quick attacks, loves fighting for dominance even during sex, intense battles that turn into passionate mating, very courageous",
    "Lion": "King/Queen energy, very proud, loves being worshipped, BDSM foreplay, powerful and regal positions, roars during climax",
}


def yoni_kuta(groom_nakshatra: str, bride_nakshatra: str) -> KutaResult:
    """Yoni kuta from the animals of the two nakshatras."""
    groom_yoni = _YONI[_check_nakshatra(groom_nakshatra)]
    bride_yoni = _YONI[_check_nakshatra(bride_nakshatra)]
    score = _YONI_SCORES[groom_yoni][bride_yoni]
    comments = (
        f"The grooms nakshatra is {groom_nakshatra} and its passion animal is {groom_yoni}"
        f" which has the following fantasy:{_YONI_FANTASY[groom_yoni]}."
        f" The brides nakshatra is {bride_nakshatra} and its passion animal is {bride_yoni}"
        f" which has the following fantasy:{_YONI_FANTASY[bride_yoni]}."
        f" The union gives us a score of {score}"
    )
    return KutaResult(3, float(score), comments)


# Graha maitri ------------------------------------------------------------

_MAITRI_ORDER = ("Surya", "Chandra", "Kuja", "Budha", "Guru", "Shukra", "Shani")

_MAITRI_ROWS = (
    (5, 5, 5, 4, 5, 0, 0),
    (5, 5, 4, 1, 4, 0.5, 0.5),
    (5, 4, 5, 0.5, 5, 3, 0.5),
    (4, 1, 0.5, 5, 0.5, 5, 4),
    (5, 4, 5, 0.5, 5, 0.5, 3),
    (0, 0.5, 3, 5, 0.5, 5, 5),
    (0, 0.5, 0.5, 4, 3, 5, 5),
)

_MAITRI: dict[str, dict[str, float]] = {
    lord: dict(zip(_MAITRI_ORDER, row)) for lord, row in zip(_MAITRI_ORDER, _MAITRI_ROWS)
}

_LORD_DESCRIPTIONS: dict[str, str] = {
    "Kuja": "Those born in {} Raashi are driven, often taking decisive actions and showing strong initiative.",
    "Shukra": "Those born in {} Raashi are drawn to love, beauty, and fostering harmonious relationships.",
    "Budha": "Those born in {} Raashi excel in communication, intellect, and adaptability.",
    "Surya": "Those born in {} Raashi radiate authority, vitality, and confident self-expression.",
    "Guru": "Those born in {} Raashi embody wisdom, growth, and a benevolent spirit.",
    "Shani": "Those born in {} Raashi are disciplined, often facing delays but embracing responsibilities.",
    "Chandra": "Those born in {} Raashi are guided by emotions, intuition, and nurturing qualities.",
}


def _lord_description(lord: str, raashi: str) -> str:
    template = _LORD_DESCRIPTIONS.get(lord, "No description available for {} Raashi.")
    return template.format(raashi)


def maitri_kuta(groom_raashi: str, bride_raashi: str) -> KutaResult:
    """Graha maitri kuta from the friendship of the two moon-sign lords."""
    groom_lord = sign_lord(_check_raashi(groom_raashi))
    bride_lord = sign_lord(_check_raashi(bride_raashi))
    score = float(_MAITRI[groom_lord][bride_lord])
    comments = (
        _lord_description(groom_lord, groom_raashi)
        + _lord_description(bride_lord, bride_raashi)
        + f" The friendship between these two will have a score of {int(score)}"
    )
    return KutaResult(4, score, comments)


# Nadi --------------------------------------------------------------------

_NADI: dict[str, str] = {}
for _nadi, _members in (
    ("Aadi", ("Ashwini", "Ardra", "Punarvasu", "Uttara Phalguni", "Hasta",
              "Jyeshtha", "Mula", "Shatabhisha", "Purva Bhadrapada")),
    ("Madhya", ("Bharani", "Mrigashira", "Pushya", "Purva Phalguni", "Chitra",
                "Anuradha", "Purva Ashadha", "Dhanishta", "Uttara Bhadrapada")),
    ("Antya", ("Krittika", "Rohini", "Ashlesha", "Magha", "Swati",
               "Vishakha", "Uttara Ashadha", "Shravana", "Revati")),
):
    for _member in _members:
        _NADI[_member] = _nadi

_NADI_EXCEPTIONS = (
    "Rohini", "Ardra", "Magha", "Hasta", "Vishakha", "Shravana", "Uttara Bhadrapada", "Revati",
)

_NADI_PARTIAL_EXCEPTIONS = (
    "Ashwini", "Kritika", "Mrigashira", "Punarvasu", "Pushya", "Purva Phalguni",
    "Uttara Phalguni", "Chitra", "Anuradha", "Purva Ashadha", "Uttara Ashadha",
)

_NADI_DOSHA = (
    "Nadi dosha: This may cause either the husband or the wife or the child to develop some genetic disease \n"
    "        although modern medicine can help to mitigate them I am of the opinion prevention is better than cure."
)
_NADI_EXEMPT = (
    "Nadi dosha: Exists. But astrologers have observed that this pair is exempt from the rule. \n"
    "            But ensure that the pada of the boy preceeds the pada of the girl if all the padas of a nakshatra is in the same\n"
    "            Raashi else do viceversa."
)
_NADI_PARTIALLY_EXEMPT = (
    "Nadi dosha: Exists. But astrologers have observed that this pair is partially exempt from the rule. \n"
    "            But ensure that the pada of the boy preceeds the pada of the girl if all the padas of a nakshatra is in the same\n"
    "            Raashi else do viceversa."
)


def nadi_kuta(groom_nakshatra: str, bride_nakshatra: str) -> KutaResult:
    """Nadi kuta: full marks unless both nakshatras share a nadi."""
    groom_nadi = _NADI[_check_nakshatra(groom_nakshatra)]
    bride_nadi = _NADI[_check_nakshatra(bride_nakshatra)]
    if groom_nadi != bride_nadi:
        return KutaResult(7, 8.0, "No Naadi dosha")
    score, comment = 0, _NADI_DOSHA
    if groom_nakshatra in _NADI_EXCEPTIONS:
        score, comment = 7, _NADI_EXEMPT
    if groom_nakshatra in _NADI_PARTIAL_EXCEPTIONS:
        score, comment = 4, _NADI_PARTIALLY_EXEMPT
    return KutaResult(7, float(score), comment)


# Rajju and other doshas --------------------------------------------------

_RAJJU: dict[str, str] = {}
for _rajju, _members in (
    ("Paada", ("Ashwini", "Ashlesha", "Magha", "Jyeshtha", "Mula", "Revati")),
    ("Ooru", ("Bharani", "Pushya", "Purva Phalguni", "Anuradha", "Purva Ashadha",
              "Uttara Bhadrapada")),
    ("Nabhi", ("Krittika", "Punarvasu", "Uttara Phalguni", "Vishakha", "Uttara Ashadha",
               "Purva Bhadrapada")),
    ("Kanta", ("Rohini", "Ardra", "Hasta", "Swati", "Shravana", "Shatabhisha")),
    ("Sira", ("Mrigashira", "Chitra", "Dhanishta")),
):
    for _member in _members:
        _RAJJU[_member] = _rajju

_RAJJU_DOSHAS: dict[str, str] = {
    "Paada": "Rajju dosha: Paada (feet) - May cause long distance relationship / separation\n",
    "Ooru": "Rajju dosha: Ooru (Thigh) - May cause decline of wealth / financial problems\n",
    "Nabhi": "Rajju dosha: Nabhi (navel) - May cause loss of children / progeny issues\n",
    "Kanta": "Rajju dosha: Kanta (neck) - May cause loss of spouse / serious danger to partner\n",
    "Sira": "Rajju dosha: Sira (head) - May cause loss of spouse / very severe\n",
}

_FORBIDDEN_PAIRS = (
    ("Krittika", "Ashlesha"),
    ("Ashlesha", "Swati"),
    ("Chitra", "Purva Ashadha"),
    ("Anuradha", "Dhanishta"),
    ("Dhanishta", "Bharani"),
    ("Shatabhisha", "Krittika"),
    ("Revati", "Ardra"),
    ("Jyeshtha", "Uttara Phalguni"),
    ("Vishakha", "Shravana"),
    ("Ashwini", "Shravana"),
)


def rajju_and_other_doshas(
    groom_nakshatra: str, bride_nakshatra: str, groom_raashi: str, bride_raashi: str
) -> str:
    """Rajju dosha and the forbidden or favoured nakshatra pairs, as one text."""
    groom_rajju = _RAJJU[_check_nakshatra(groom_nakshatra)]
    bride_rajju = _RAJJU[_check_nakshatra(bride_nakshatra)]
    same_ruler = sign_lord(_check_raashi(groom_raashi)) == sign_lord(_check_raashi(bride_raashi))

    parts: list[str] = []
    if groom_rajju == bride_rajju:
        parts.append(_RAJJU_DOSHAS[groom_rajju])
        if same_ruler:
            parts.append("But this pair is exempt from this dosha\n")
    else:
        parts.append("No Rajju dosha.")

    if (groom_nakshatra, bride_nakshatra) in _FORBIDDEN_PAIRS:
        parts.append(
            "This pair is not recommended irrespective of the AstaKuta score "
            "(forbidden / prohibited nakshatra combination)"
        )

    if {groom_nakshatra, bride_nakshatra} == {"Anuradha", "Rohini"}:
        parts.append(
            "According to Astakuta this pair is the second / third best. However, throughout "
            "history astrologers have observed that this is the #1 pair in terms of "
            "personality compatibility"
        )

    return "".join(parts)