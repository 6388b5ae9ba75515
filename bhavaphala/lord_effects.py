"""Effects of a bhava lord according to the house it occupies."""

from __future__ import annotations

_SECOND: tuple[str, ...] = (
    "The native will obtain sons and wealth, be inimical to his own family, lustful and will do others job and be a fraud.\n"
    "\t\tThe native would face financial upheavals and this may not apply completely to a capricorn ascendant.",
    "The native will be wealthy and proud and have many spouses and be bereft of progeny.",
    "The native will be valorous, wise, lustful and virtuous. All of these will happen if the lord is related to a benefic.\n"
    "\t\tIf related to a malefic the native will be a heterodox, will not fear God and have dirty conduct. The native may be a pimp",
    "The native will acquire all kinds of wealth be a heterodox and of questionable character.",
    "The native will be wealthy and his sons will also earn money on their own. Resort to trickery and not have a happy family life.\n"
    "\t\tWill not be kind to others and be lustful and may be prone to losing a child prematurely",
    "If the 2nd lord is with a benefic the native will gain through his enemies and lose if with malefics along with getting hit by them.\n"
    "\t\tLoss of wealth through theives and servants stealing wealth.",
    "The native will be addicted to others wives and be a doctor. If a malefic is associated with the second lord,\n"
    "\t\tthen even the wife may have questionable character.",
    "The native will have land and wealth but limited marital felicity and be bereft of happiness from co-borns",
    "The native will be wealthy, diligent, skillful, visit shrines and observing religious code",
    "The native will be horny, honourable, learned, will have many wives and much wealth",
    "The native will have all kinds of wealth, be ever diligent, honourable and famous",
    "The native will be adventurous, be devoid of wealth and interested in others wealth and the first born will make the native sad.\n"
    "\t\tExcept Aries ascendant or if the second lord is with 2 or more benefics then the native instead gain from this configuration.",
)

_THIRD: tuple[str, ...] = (
    "The native will have self earned wealth be intelligent even if not gone to school.\n"
    "\t\tThe native will have a unslakable lust",
    "The native will not have valour and be lazy and have an eye on others wives and wealth. May resort to unnatural means for gratification.",
    "The native will get happy through co-borns",
    "The native will be wealthy, intelligent but acquire a wicked spouse",
    "The native will have sons and if conjunct/ aspected by a malefic will have a formidable wife.",
    "The native will be inimical to the co-born, be affluent and be dear to his maternal aunt",
    "The native will be interested in serving those in leadership positions and will be happy during the end of his life. Do not make own business",
    "The native will be a thief",
    "The native will not get happiness from father but make fortune through his wife and enjoy happiness through his own children",
    "The native will have all kinds of happiness and be self-made and interested in nurturing wicked females",
    "The native will gain in trading be intelligent but may not be educated and may not be a worthy friend.",
    "The native will spend on evil deeds, have a wicked father and will be fortunate through a female / wife.\n"
    "\t\tThe native will be bestowed with all kinds of happiness but still feel miserable.",
)

_SIXTH: tuple[str, ...] = (
    "The native will be sickly, famous, inimical to his own men, rich, honorouable, adventoruos and virtuous",
    "Adventoruous, famous among his race men, will live in alien places, be a skillful speaker and interested in his own work.",
    "Be short tempered, bereft of courage, inimical to his co-born and have disobedient servants.",
    "Be devoid of maternal happiness. Be intelligent, be a liar, be jealous and rich",
    "The native will have fluctuating finances be inimical to his children and friends. Be happy selfish and kind.",
    "The native will have enimity with his own kinsmen and be happy with others. The native will have a long life",
    "The native will not derive happiness through wedlock. Be famous, virtuous, honorouable, adventorous and wealthy.\n"
    "\t\tThe native's spouse may be an enemy to the native",
    "Be sickly, desire others wealth, be interested in others spouses and be impure. The native will keep on incurring enmity with others and be sad.",
    "Maybe involved in real estate business and face ups and downs in finances",
    "Will not be disposed to his father and be happy in foreign countries and be a gifted speaker.\n"
    "\t\tWill be greatly valourous and litigation on account of ancestral property.",
    "The native will gain wealth through enemies and have progeic issues.",
    "The native will spend on vices, be hostile to learned people and will torture living beings. Will have questionable character and \n"
    "\t\ton derving pleasure from other females.",
)

_SEVENTH: tuple[str, ...] = (
    "The native will go to others spouses, be wicked, skillful, devoid of courage and not be firm in words and actions.\n"
    "\t\tWill impart courage to others although not have courage with oneself.",
    "The native will have many spouses and gain through his spouse and be procrastinatnig in nature.",
    "The native may face loss of sons but all the daughters will live",
    "The spouse of the native will not be under control but will be devoted to the native. Will be fond of the truth and be intelligent.",
    "The native will be honorouable, endowed with seven principal virtues and endowed with all kinds of wealth.\n"
    "\t\tBut there will be delays and disappointment in married life and the conjugal life seldom proves happy.\n"
    "\t\tEither there will be unhappiness on account of children or loss of children.",
    "The native will beget a sickly spouse and be short tempred and devoid of happiness.",
    "The native will be endowed with happiness through his spouse and the spouse will be courageous, skillful and intelligent.",
    "The native will be deprived of marital happiness and will not obey the native.",
    "The native will unite with other then own spouse but be well disposed to own spouse",
    "The native will beget a disobedient spouse and will be religious and endowed with wealth and sons.",
    "The native will gain wealth through the spouse and be unhappy from own sons (but gaining a son is very unlikely).",
    "The native may become poor, be a miser and earn livelihood through selling clothes. The spouse maybe a spendthrift.",
)

_NINTH: tuple[str, ...] = (
    "The native will be fortunate, virtuous, honoured by those in leadership positions and learned and honoured by public",
    "The native will be a scholar and endowed with happiness from wife and sons.",
    "The native will be endowed with fraternal bliss, be wealthy and virtuous and charming",
    "The native will enjoy houses, vehicales and happiness and be devoted to his mother.",
    "The native will be endowed with sons and prosperity, devoted to elders, bold, charitable and leanred.",
    "The native will enjoy meagre prosperity, be devoid of happiness from maternal relatives and be always troubled by enemies.",
    "The native will beget happiness from marriage, be virtuous and famous.",
    "The native will not be prosperous",
    "The native will be endowed with abundant fortunes, virtues ad beauty and will enjoy much happiness from co-born",
    "The native will obtain leadership positions and be virtuous and dear to all",
    "The native will enjoy gains, be virtuous and meritorious in acts (NA for Mithuna lagna)",
    "The native will incure loss of fortunes will spend money on auspicious accounts and thereby become poor.",
)

_TENTH: tuple[str, ...] = (
    "The native will be scholarly, famous, be a poet and increase his wealth slowly",
    "The native will be wealthy, virtuous, honoroued by those in leadership positions, be charitable and enjoy happiness from father",
    "The native will enjoy happiness from co-born and servants and be valorous, virtuous, eloquent and beautiful",
    "The native will happy, interested in mothers welfare, possess vehicles, lands and houses be virtous and wealthy",
    "The native will be endowed with all kinds of learning, be always delighted and be wealthy and endowed with sons.",
    "The native will be bereft of paternal happiness, be skillful, be bereft of we4alth and troubled by enemies",
    "The native will be endowed with happiness through wife, be intelligent, virtous, eloquent, truthful and religious",
    "The native will be devoid of good acts, long lived and intent on blaming others",
    "The native who be born of royal scion will obtain leadership positions and the ordinary individual will be equal to those in leadership positions.",
    "The native will be skillful in all jobs, be valouruous, truthful and devoted to elders",
    "The native will be endowed with wealth, happiness and sons.",
    "The native will spend on royal abodes will have fear from enemies and will be worried in spite of being skillful",
)

_TWELFTH: tuple[str, ...] = (
    "The native will be a spendthrift, be weak in constitution, will suffer from diseases and be devoid of wealth and learning",
    "The native will always spend on auspicious deeds be religious, will speak sweetly and be endowed with virtues and happiness",
    "The native will be devoid of fraternal bliss, will hate others and be selfish",
    "The native will be devoid of maternal happiness and will gradually accure losses in respect of lands, vehicles and houses",
    "The native will be bereft of sons and learning",
    "The native will incur enemit with his own men, be given to anger, be sinful, miserable and will go to others spouse",
    "The native will incur expenses on account of his wife, will not enjoy conjugal bliss",
    "The native will always gain, will speak affably and be endowed with good qualities",
    "The native will dishonour his elders, be inimical even to his friends and be always intent on achieving his own ends",
    "The native will incur expenses through royal persons and will enjoy moderate paternal bliss",
    "The native will incur losses, be bought up by others and will sometimes gain through others",
    "The native will only face heavy expenditures, will not have physical felicity, be iritable and spiteful",
)

_BY_BHAVA: dict[int, tuple[str, ...]] = {
    2: _SECOND,
    3: _THIRD,
    6: _SIXTH,
    7: _SEVENTH,
    9: _NINTH,
    10: _TENTH,
    12: _TWELFTH,
}


def bhava_lord_effect(bhava: int, placement: int) -> str:
    """Effect of the lord of bhava placed in the given house.

    Raises ValueError for a bhava without readings; a placement outside
    1-12 yields an empty string.
    """
    try:
        effects = _BY_BHAVA[bhava]
    except (KeyError, TypeError):
        raise ValueError(f"no lord effects for bhava {bhava!r}") from None
    if isinstance(placement, int) and not isinstance(placement, bool) and 1 <= placement <= 12:
        return effects[placement - 1]
    return ""


def second_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(2, placement)


def third_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(3, placement)


def sixth_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(6, placement)


def seventh_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(7, placement)


def ninth_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(9, placement)


def tenth_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(10, placement)


def twelfth_bhava_lord_effect(placement: int) -> str:
    return bhava_lord_effect(12, placement)