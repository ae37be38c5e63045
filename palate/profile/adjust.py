from __future__ import annotations

import math

from .models import (
    DIMENSIONS,
    Dish,
    FeedbackEvent,
    FlavorVector,
    SaltRating,
    SpiceRating,
    SweetRating,
)

# How far each button choice moves its score at full nudge strength
SPICE_DELTAS: dict[SpiceRating, float] = {
    SpiceRating.too_mild: -2.0,
    SpiceRating.just_right: 0.0,
    SpiceRating.too_hot: 2.0,
}
SWEET_DELTAS: dict[SweetRating, float] = {
    SweetRating.not_sweet: -1.5,
    SweetRating.just_right: 0.0,
    SweetRating.too_sweet: 1.5,
}
SALT_DELTAS: dict[SaltRating, float] = {
    SaltRating.bland: -1.5,
    SaltRating.just_right: 0.0,
    SaltRating.too_salty: 1.5,
}

NUDGE_BASE = 1.2
DECAY_RATE = 0.85
SENTIMENT_FACTOR = 0.5
REORDER_FACTOR = 0.4

# (dimension, feedback field, delta table), applied in this order
_RATING_STEPS: tuple[tuple[str, str, dict], ...] = (
    ("spice", "spice_rating", SPICE_DELTAS),
    ("sweet", "sweet_rating", SWEET_DELTAS),
    ("salty", "salt_rating", SALT_DELTAS),
)


def clamp(value: float) -> float:
    return min(10.0, max(0.0, value))


def nudge_toward(current: float, target: float, amount: float) -> float:
    """Move *current* toward *target* by at most *amount*, never past it."""
    diff = target - current
    if abs(diff) <= amount:
        return target
    return current + math.copysign(amount, diff)


def nudge_magnitude(visit_count: int) -> float:
    """Step size for the given 1-indexed visit; the first visit is undecayed."""
    return NUDGE_BASE * DECAY_RATE ** max(0, visit_count - 1)


def matching_dimensions(dish: Dish | None) -> list[str]:
    """Dish tags that name a flavor dimension exactly, deduplicated in order."""
    if dish is None:
        return []
    return [tag for tag in dict.fromkeys(dish.flavor_tags) if tag in DIMENSIONS]


def adjust_profile(
    current: FlavorVector,
    feedback: FeedbackEvent,
    dish: Dish | None,
    visit_count: int,
) -> FlavorVector:
    """
    Apply one feedback event to a flavor vector and return the new vector.

    Steps run in a fixed order and each reads the scores left by the previous
    one: spice, sweet and salt button corrections, then the like/dislike pull
    on the dish's flavor tags, then the re-order boost on the same tags.
    """
    scores = current.model_dump()
    nudge = nudge_magnitude(visit_count)
    scale = nudge / NUDGE_BASE

    # Direct button corrections; "just right" leaves the score alone
    for dimension, field, deltas in _RATING_STEPS:
        rating = getattr(feedback, field)
        if rating is None or rating.value == "just_right":
            continue
        scores[dimension] = clamp(scores[dimension] + deltas[rating] * scale)

    tagged = matching_dimensions(dish)

    # Overall like/dislike pulls tagged dimensions toward an end of the scale
    if feedback.liked_overall is not None:
        target = 10.0 if feedback.liked_overall else 0.0
        for dimension in tagged:
            scores[dimension] = nudge_toward(
                scores[dimension], target, nudge * SENTIMENT_FACTOR
            )

    # Would order again is a flat positive boost on the same tags
    if feedback.would_order_again is True:
        for dimension in tagged:
            scores[dimension] = clamp(scores[dimension] + nudge * REORDER_FACTOR)

    return FlavorVector(**scores)
