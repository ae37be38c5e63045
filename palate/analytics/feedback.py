from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from ..profile.models import FeedbackEvent

# Append-only; one row per dish in a submission, or one dish-less row
_feedback: list[dict[str, Any]] = []


def record_feedback(
    phone_number: str,
    dish_id: str | None,
    event: FeedbackEvent,
) -> dict[str, Any]:
    entry = {
        "id": uuid.uuid4().hex,
        "phone_number": phone_number,
        "dish_id": dish_id,
        **event.model_dump(mode="json", include=set(FeedbackEvent.model_fields)),
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    _feedback.append(entry)
    return entry


def get_feedback(phone_number: str | None = None) -> list[dict[str, Any]]:
    if phone_number is None:
        return _feedback
    return [f for f in _feedback if f["phone_number"] == phone_number]


def clear_feedback() -> None:
    _feedback.clear()
