from __future__ import annotations

from pydantic import BaseModel, Field

from ..profile.models import FeedbackEvent, FlavorVector, TasteCategory, TasteTag


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    phone_number: str = Field(..., min_length=1)
    name: str = Field(..., min_length=2, max_length=40)
    tags: list[TasteTag] = Field(default_factory=list, max_length=3)


class DinerOut(BaseModel):
    phone_number: str
    name: str
    taste_tags: list[TasteTag]
    visit_count: int
    first_seen_at: str


class DishCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    flavor_tags: list[str] = Field(default_factory=list)
    image_url: str | None = None


class FeedbackRequest(FeedbackEvent):
    phone_number: str = Field(..., min_length=1)
    dish_ids: list[str] = Field(
        default_factory=list,
        description="Dishes eaten this visit; empty for general feedback",
    )
    vibe_score: float = Field(..., ge=0.0, le=100.0)


class FeedbackEntryOut(FeedbackEvent):
    id: str
    phone_number: str
    dish_id: str | None
    created_at: str
    dish_name: str | None = None
    dish_flavor_tags: list[str] = Field(default_factory=list)


class TasteProfileOut(BaseModel):
    phone_number: str
    flavors: FlavorVector
    category: TasteCategory
    avg_vibe: int
    confidence: float = Field(..., ge=0.0, le=1.0)
    confidence_label: str
    last_updated: str


class DashboardRow(TasteProfileOut):
    diner: DinerOut
