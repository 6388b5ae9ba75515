"""Rule-based readings of Vedic birth charts: house and house-lord effects, karakamsha and Ashtakuta matching."""

__version__ = "0.1.0"

__all__ = [
    "astro",
    "lord_effects",
    "second_house",
    "third_house",
    "kuta",
    "sixth_house",
    "general",
    "ninth_house",
    "twelfth_house",
    "seventh_house",
    "tenth_house",
    "karakamsha",
]