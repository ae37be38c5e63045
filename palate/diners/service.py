"""
Diner registration and feedback submission.

Each submission is one read-modify-write of a single diner's profile snapshot
and visit count. Nothing in here yields, so callers running on one event loop
never interleave two submissions for the same diner.
"""
from __future__ import annotations

import logging
from typing import Any

from ..analytics.feedback import get_feedback, record_feedback
from ..analytics.store import REGISTRATION, SUBMISSION, record_event
from ..dishes.data_store import get_dish
from ..profile.adjust import adjust_profile
from ..profile.classify import FALLBACK_CATEGORY, classify_profile
from ..profile.models import (
    Dish,
    FeedbackEvent,
    FlavorVector,
    TasteCategory,
    TasteTag,
    neutral_profile,
)
from ..profile.seed import seed_profile_from_tags
from ..profile.stats import compute_avg_vibe, compute_confidence, confidence_label
from . import store
from .models import FeedbackRequest

logger = logging.getLogger(__name__)


class DinerNotFoundError(LookupError):
    pass


class DishNotFoundError(LookupError):
    pass


class DinerExistsError(ValueError):
    pass


def _snapshot(
    flavors: FlavorVector,
    avg_vibe: int,
    confidence: float,
    category: TasteCategory | None = None,
) -> dict[str, Any]:
    category = category or classify_profile(flavors)
    return {
        "flavors": flavors.model_dump(),
        "category": category.model_dump(),
        "avg_vibe": avg_vibe,
        "confidence": confidence,
        "confidence_label": confidence_label(confidence),
    }


def register_diner(phone_number: str, name: str, tags: list[TasteTag]) -> dict[str, Any]:
    """Create a diner and the profile seeded from their sign-up tags."""
    if store.get_diner(phone_number) is not None:
        raise DinerExistsError(phone_number)

    diner = store.add_diner(phone_number, name, [TasteTag(t).value for t in tags])
    seeded = seed_profile_from_tags(tags)
    # No feedback yet, so the category stays at the fallback until the first visit
    store.upsert_profile(
        phone_number,
        _snapshot(seeded, avg_vibe=0, confidence=0.0, category=FALLBACK_CATEGORY),
    )
    record_event(REGISTRATION, phone_number, tags=diner["taste_tags"])
    logger.info("Registered diner %s with tags %s", phone_number, diner["taste_tags"])
    return diner


def current_flavors(phone_number: str) -> FlavorVector:
    profile = store.get_profile(phone_number)
    if profile is None:
        return neutral_profile()
    return FlavorVector(**profile["flavors"])


def submit_feedback(request: FeedbackRequest) -> dict[str, Any]:
    """
    Record one visit's feedback and return the diner's new profile snapshot.

    Every dish in the request is applied in turn, each adjustment starting from
    the previous one's result, but the visit counts once. Unknown diners and
    dishes are rejected before anything is written.
    """
    phone = request.phone_number
    diner = store.get_diner(phone)
    if diner is None:
        raise DinerNotFoundError(phone)

    dishes: list[Dish | None] = []
    for dish_id in request.dish_ids:
        dish = get_dish(dish_id)
        if dish is None:
            raise DishNotFoundError(dish_id)
        dishes.append(dish)
    if not dishes:
        dishes.append(None)

    event = FeedbackEvent(**request.model_dump(include=set(FeedbackEvent.model_fields)))
    for dish in dishes:
        record_feedback(phone, dish.id if dish else None, event)

    visit_count = diner["visit_count"] + 1
    flavors = current_flavors(phone)
    for dish in dishes:
        flavors = adjust_profile(flavors, event, dish, visit_count)

    confidence = compute_confidence(visit_count)
    snapshot = store.upsert_profile(
        phone,
        _snapshot(flavors, compute_avg_vibe(get_feedback(phone)), confidence),
    )
    store.set_visit_count(phone, visit_count)

    record_event(
        SUBMISSION,
        phone,
        dish_ids=[d.id for d in dishes if d is not None],
        liked_overall=event.liked_overall,
        category_id=snapshot["category"]["id"],
    )
    logger.info(
        "Visit %d for %s: %s (confidence %.2f)",
        visit_count,
        phone,
        snapshot["category"]["id"],
        confidence,
    )
    return snapshot


def feedback_history(phone_number: str) -> list[dict[str, Any]]:
    """Feedback entries for a diner, newest first, with the dish name attached."""
    entries = list(reversed(get_feedback(phone_number)))
    rows: list[dict[str, Any]] = []
    for entry in entries:
        dish = get_dish(entry["dish_id"]) if entry["dish_id"] else None
        rows.append({
            **entry,
            "dish_name": dish.name if dish else None,
            "dish_flavor_tags": dish.flavor_tags if dish else [],
        })
    return rows
