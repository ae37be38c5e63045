from __future__ import annotations

from typing import Iterable

from .adjust import clamp
from .models import FlavorVector, TasteTag, neutral_profile

# Starting offsets from neutral for each tag a diner can pick at sign-up
TAG_SEEDS: dict[TasteTag, dict[str, float]] = {
    TasteTag.purist: {"spice": -1.5, "sweet": -1.0, "salty": -0.5, "bitter": -0.5},
    TasteTag.heat: {"spice": 2.5},
    TasteTag.citrus: {"sour": 2.0, "sweet": 0.5},
    TasteTag.sweet: {"sweet": 2.5, "sour": 0.5},
    TasteTag.herby: {"umami": 1.5, "bitter": 0.8},
    TasteTag.savory: {"umami": 2.0, "salty": 1.5},
}


def seed_profile_from_tags(tags: Iterable[TasteTag | str]) -> FlavorVector:
    """
    Build the initial flavor vector for a new diner.

    Tags are applied in order and every touched score is clamped right after
    its tag's offset, so a score pushed past 10 by an early tag is capped
    before a later tag pulls it back down.
    """
    scores = neutral_profile().model_dump()
    for tag in tags:
        for dimension, delta in TAG_SEEDS.get(TasteTag(tag), {}).items():
            scores[dimension] = clamp(scores[dimension] + delta)
    return FlavorVector(**scores)
