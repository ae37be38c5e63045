from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DIMENSIONS: tuple[str, ...] = ("spice", "sweet", "salty", "sour", "bitter", "umami")
NEUTRAL_SCORE = 5.0


class TasteTag(str, Enum):
    purist = "purist"
    heat = "heat"
    citrus = "citrus"
    sweet = "sweet"
    herby = "herby"
    savory = "savory"


class SpiceRating(str, Enum):
    too_mild = "too_mild"
    just_right = "just_right"
    too_hot = "too_hot"


class SweetRating(str, Enum):
    not_sweet = "not_sweet"
    just_right = "just_right"
    too_sweet = "too_sweet"


class SaltRating(str, Enum):
    bland = "bland"
    just_right = "just_right"
    too_salty = "too_salty"


class TextureRating(str, Enum):
    bad = "bad"
    okay = "okay"
    great = "great"


class FlavorVector(BaseModel):
    """Six flavor scores, each within [0, 10]."""

    model_config = ConfigDict(frozen=True)

    spice: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)
    sweet: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)
    salty: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)
    sour: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)
    bitter: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)
    umami: float = Field(default=NEUTRAL_SCORE, ge=0.0, le=10.0)

    def scores(self) -> list[float]:
        return [getattr(self, d) for d in DIMENSIONS]


def neutral_profile() -> FlavorVector:
    """Return a fresh all-neutral vector."""
    return FlavorVector()


class FeedbackEvent(BaseModel):
    liked_overall: bool | None = None
    spice_rating: SpiceRating | None = None
    sweet_rating: SweetRating | None = None
    salt_rating: SaltRating | None = None
    # Kept for the record; does not move any score.
    texture_rating: TextureRating | None = None
    would_order_again: bool | None = None
    vibe_score: float = 0.0


class Dish(BaseModel):
    id: str
    name: str
    flavor_tags: list[str] = Field(default_factory=list)
    image_url: str | None = None
    active: bool = True


class TasteCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    emoji: str
    message: str
