# bhavaphala

Rule-based interpretation of Vedic (Parashari) birth charts. You say where the
grahas sit, and the package returns the classical readings as plain English
sentences.

What it covers:

- **House effects** for the 2nd, 3rd, 6th, 7th, 9th, 10th and 12th bhavas,
  and general mind and temperament readings taken from the Moon and Shukra.
  The functions are `second_house_effects`, `third_house_effects`,
  `sixth_house_effects`, `seventh_house_effects`, `ninth_house_effects`,
  `tenth_house_effects`, `twelfth_house_effects` and `general_effects`. Each
  one takes a `Chart` and returns a list of strings in reading order.
- **House-lord effects**: the reading for the lord of a bhava placed in houses
  1 to 12 (`bhava_lord_effect` and one function for each bhava).
- **Karakamsha** readings from a `KarakamshaChart` (`karakamsha_effects`).
- **Ashtakuta matching** between a groom and a bride: varna, vashya, tara,
  yoni, graha maitri and nadi, with rajju and forbidden-pair checks as well.
- **Helpers** in `bhavaphala.astro` for sign lords, house arithmetic,
  Guru/Shani/Kuja special aspects, kendra/kona/dusthana tests, combustion and
  strength checks, and validation of graha, nakshatra and raashi names.

The package has no runtime dependencies.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Names

Raashis use these spellings: Mesha, Vrushabha, Mithuna, Karkataka, Simha,
Kanya, Tula, Vruschika, Dhanassu, Makara, Kumbha, Meena.

Grahas use these spellings: Surya, Chandra, Kuja, Budha, Guru, Shukra, Shani,
and Rahu and Ketu where the nodes apply.

Nakshatras use the 27 names in `bhavaphala.astro.NAKSHATRAS`, for example
"Ashwini", "Rohini", "Purva Phalguni" and "Uttara Bhadrapada".

```python
from bhavaphala.astro import is_valid_raashi, is_valid_nakshatra, sign_lord, house_of

is_valid_raashi("Dhanassu")      # True
is_valid_nakshatra("Rohini")     # True
sign_lord("Karkataka")           # "Chandra"
house_of("Mesha", "Karkataka")   # 4
```

Functions that take a raashi or nakshatra raise `ValueError` when they get an
unknown name.

## Chart readings

A `Chart` holds the ascendant and the raashi of each graha. Surya, Chandra,
Rahu and Ketu are plain raashi names. Kuja, Budha, Guru, Shukra and Shani are
`Placement` objects, which also record combustion. The navamsha ascendant and
the navamsha placements are optional. A rule that depends on a navamsha
placement you left out simply does not apply.

```python
from bhavaphala.astro import Chart, Placement
from bhavaphala.general import general_effects
from bhavaphala.second_house import second_house_effects
from bhavaphala.tenth_house import tenth_house_effects

chart = Chart(
    ascendant="Mesha",
    surya="Simha",
    chandra="Karkataka",
    kuja=Placement("Makara"),
    budha=Placement("Kanya", combust=True),
    guru=Placement("Dhanassu"),
    shukra=Placement("Tula"),
    shani=Placement("Kumbha"),
    rahu="Mithuna",
    ketu="Dhanassu",
    nav_ascendant="Vrushabha",
    navamsha={"Shukra": "Meena", "Surya": "Vruschika", "Guru": "Karkataka"},
    chandra_waxing=True,
    budha_unafflicted=True,
)

for line in general_effects(chart):
    print(line)
for line in second_house_effects(chart) + tenth_house_effects(chart):
    print(line)
```

`Chart.house(graha)` gives the house a graha occupies, counted from the
ascendant. `Chart.navamsha_house(graha)` gives the same in the navamsha, and
raises `ValueError` when that placement or the navamsha ascendant is missing.
`Chart.is_lord_combust(lord)` says whether a sign lord is combust. Surya,
Chandra and the nodes never are.

## Karakamsha

```python
from bhavaphala.karakamsha import KarakamshaChart, karakamsha_effects

kchart = KarakamshaChart(
    karakamsha="Meena",
    ascendant="Mesha",
    surya="Simha", chandra="Karkataka", kuja="Makara", budha="Kanya",
    guru="Dhanassu", shukra="Tula", shani="Kumbha", rahu="Mithuna", ketu="Dhanassu",
    moon_waxing=True,
    mercury_afflicted=False,
)
for line in karakamsha_effects(kchart):
    print(line)
```

`KarakamshaChart.house(graha)` counts houses from the karakamsha. It also
accepts `"Lagna"` for the ascendant.

## House-lord readings

```python
from bhavaphala.lord_effects import bhava_lord_effect, ninth_bhava_lord_effect

print(ninth_bhava_lord_effect(10))
print(bhava_lord_effect(7, 5))     # 7th lord placed in the 5th house
```

Readings exist for the lords of bhavas 2, 3, 6, 7, 9, 10 and 12.
`bhava_lord_effect` raises `ValueError` for any other bhava. A placement
outside 1 to 12 gives an empty string.

## Marriage matching (Ashtakuta)

```python
from bhavaphala.kuta import (
    varna_kuta, vashya_kuta, tara_kuta, yoni_kuta,
    maitri_kuta, nadi_kuta, rajju_and_other_doshas,
)

results = [
    varna_kuta("Mesha", "Simha"),
    vashya_kuta("Mesha", "Simha", True, True),
    tara_kuta("Ashwini", "Magha"),
    yoni_kuta("Ashwini", "Magha"),
    maitri_kuta("Mesha", "Simha"),
    nadi_kuta("Ashwini", "Magha"),
]
for result in results:
    print(result.index, result.score, result.comments)

print(rajju_and_other_doshas("Ashwini", "Magha", "Mesha", "Simha"))
```

Each kuta function returns a `KutaResult`. Its `index` is the kuta's position
in the Ashtakuta table, `score` is a float, and `comments` is a remark.

- Varna and graha maitri take the moon signs.
- Vashya takes the moon signs and whether each partner was born in the first
  half of the sign. The half matters only for Dhanassu and Makara.
- Tara, yoni and nadi take the nakshatras. The tara score is the mean of the
  taras counted in each direction. `tara_type` and `mod` are available on their
  own.
- `rajju_and_other_doshas` returns its findings as one string.

## What it does not do

- It does not compute a chart. There is no ephemeris and no birth-time
  calculation. You must supply the raashi placements, combustion and the moon
  and Budha flags yourself.
- It offers only functions to call from Python. There is no command-line tool,
  web service, user accounts, tokens or storage.

The readings are traditional textual rules. They are meant as material for an
astrologer to weigh against shadbala and the rest of the chart, and several of
them say so.