"""
Taste category classification.

Categories are checked top to bottom and the first matching condition wins.
Conditions overlap, so the order below decides the outcome for many vectors:
a hot, savory palate is a HEAT SEEKER before it is ever a BOLD FIRE.
"""
from __future__ import annotations

from typing import Callable

from .models import FlavorVector, TasteCategory

HIGH_THRESHOLD = 6.5
LOW_THRESHOLD = 3.5
BROAD_THRESHOLD = 5.5


def _high(v: float) -> bool:
    return v >= HIGH_THRESHOLD


def _low(v: float) -> bool:
    return v < LOW_THRESHOLD


Condition = Callable[[FlavorVector], bool]

CATEGORIES: list[tuple[Condition, TasteCategory]] = [
    (
        lambda p: all(v >= BROAD_THRESHOLD for v in p.scores()),
        TasteCategory(
            id="all_rounder",
            label="ALL ROUNDER",
            emoji="🌈",
            message=(
                "Your profile is categorised under ALL ROUNDER — you like everything "
                "and the kitchen genuinely cannot go wrong with you!"
            ),
        ),
    ),
    (
        lambda p: all(v < BROAD_THRESHOLD for v in p.scores()),
        TasteCategory(
            id="purist",
            label="THE PURIST",
            emoji="🤍",
            message=(
                "Your profile is THE PURIST — you prefer clean, simple flavors and "
                "want the ingredient to speak for itself."
            ),
        ),
    ),
    (
        lambda p: _high(p.spice) and not _high(p.sweet) and not _high(p.sour),
        TasteCategory(
            id="heat_seeker",
            label="HEAT SEEKER",
            emoji="🔥",
            message=(
                "Your profile is HEAT SEEKER — you live for the burn. The hotter "
                "the dish, the bigger your smile."
            ),
        ),
    ),
    (
        lambda p: _high(p.sweet) and _low(p.spice) and _low(p.salty),
        TasteCategory(
            id="sweet_tooth",
            label="SWEET TOOTH",
            emoji="🍯",
            message=(
                "Your profile is SWEET TOOTH — a hint of sweetness makes every dish "
                "better and dessert is never optional."
            ),
        ),
    ),
    (
        lambda p: _high(p.salty) and _low(p.sweet) and _low(p.spice),
        TasteCategory(
            id="salt_lover",
            label="SALT LOVER",
            emoji="🧂",
            message=(
                "Your profile is SALT LOVER — bold salty flavors are your comfort "
                "zone. Bland food simply does not cut it."
            ),
        ),
    ),
    (
        lambda p: _high(p.sour) and _low(p.sweet) and _low(p.spice),
        TasteCategory(
            id="sour_power",
            label="SOUR POWER",
            emoji="🍋",
            message=(
                "Your profile is SOUR POWER — tangy, citrusy, acidic food makes "
                "your taste buds sing."
            ),
        ),
    ),
    (
        lambda p: _high(p.bitter) and _low(p.sweet),
        TasteCategory(
            id="bitter_expert",
            label="BITTER EXPERT",
            emoji="☕",
            message=(
                "Your profile is BITTER EXPERT — dark, earthy, complex flavors are "
                "your thing. You probably love black coffee."
            ),
        ),
    ),
    (
        lambda p: _high(p.umami) and _low(p.sweet) and _low(p.sour),
        TasteCategory(
            id="umami_hunter",
            label="UMAMI HUNTER",
            emoji="🌿",
            message=(
                "Your profile is UMAMI HUNTER — rich, deep, savory flavors are what "
                "you chase in every dish."
            ),
        ),
    ),
    (
        lambda p: _high(p.spice) and _high(p.sweet),
        TasteCategory(
            id="fiery_sweet",
            label="FIERY SWEET",
            emoji="🌶🍯",
            message=(
                "Your profile is FIERY SWEET — heat and sweetness together is your "
                "ideal combo. Korean BBQ was made for you."
            ),
        ),
    ),
    (
        lambda p: _high(p.salty) and _high(p.sour),
        TasteCategory(
            id="tangy_salt",
            label="TANGY SALT",
            emoji="🧂🍋",
            message=(
                "Your profile is TANGY SALT — punchy, sharp flavors that wake the "
                "palate up immediately are your thing."
            ),
        ),
    ),
    (
        lambda p: _high(p.spice) and _high(p.umami),
        TasteCategory(
            id="bold_fire",
            label="BOLD FIRE",
            emoji="🔥🌿",
            message=(
                "Your profile is BOLD FIRE — rich, deep, savory heat is your ideal "
                "combination. Ramen and curries are your love language."
            ),
        ),
    ),
    (
        lambda p: _high(p.sweet) and _high(p.sour),
        TasteCategory(
            id="sweet_tangy",
            label="SWEET & TANGY",
            emoji="🍯🍋",
            message=(
                "Your profile is SWEET & TANGY — you love the playful balance "
                "between sweetness and acidity. Tamarind chutney, always."
            ),
        ),
    ),
    (
        lambda p: _high(p.salty) and _high(p.umami),
        TasteCategory(
            id="savory_depth",
            label="SAVORY DEPTH",
            emoji="🧂🌿",
            message=(
                "Your profile is SAVORY DEPTH — bold salty umami combos are your "
                "comfort zone. Extra soy sauce on everything."
            ),
        ),
    ),
    (
        lambda p: _high(p.bitter) and _high(p.umami),
        TasteCategory(
            id="complex_palate",
            label="COMPLEX PALATE",
            emoji="☕🌿",
            message=(
                "Your profile is COMPLEX PALATE — sophisticated, layered flavors "
                "that most people take time to appreciate."
            ),
        ),
    ),
    (
        lambda p: _high(p.spice) and _high(p.salty) and _high(p.sour),
        TasteCategory(
            id="chaos_palate",
            label="CHAOS PALATE",
            emoji="🌪️",
            message=(
                "Your profile is CHAOS PALATE — bold across the board. You love "
                "intensity and nothing is ever too much!"
            ),
        ),
    ),
    (
        lambda p: _high(p.sweet) and _high(p.salty) and _high(p.umami),
        TasteCategory(
            id="comfort_seeker",
            label="COMFORT SEEKER",
            emoji="🤗",
            message=(
                "Your profile is COMFORT SEEKER — sweet, salty, and rich umami is "
                "your holy trinity. You eat with your heart."
            ),
        ),
    ),
    (
        lambda p: _high(p.bitter) and _high(p.sour) and _high(p.spice),
        TasteCategory(
            id="adventurer",
            label="FLAVOR ADVENTURER",
            emoji="🧭",
            message=(
                "Your profile is FLAVOR ADVENTURER — unusual dimensions, always open "
                "to something new. The menu is your playground."
            ),
        ),
    ),
    (
        lambda p: True,
        TasteCategory(
            id="still_learning",
            label="STILL DISCOVERING",
            emoji="🔍",
            message=(
                "Your profile is STILL DISCOVERING — give us a few more visits and "
                "we will nail your palate. Keep tasting!"
            ),
        ),
    ),
]

FALLBACK_CATEGORY: TasteCategory = CATEGORIES[-1][1]


def classify_profile(profile: FlavorVector) -> TasteCategory:
    """Return the first category whose condition holds for *profile*."""
    for condition, category in CATEGORIES:
        if condition(profile):
            return category
    return FALLBACK_CATEGORY
