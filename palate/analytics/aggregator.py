from __future__ import annotations

from collections import Counter
from typing import Any

from .feedback import get_feedback
from .store import REGISTRATION, SUBMISSION


def compute_analytics(
    events: list[dict[str, Any]],
    profiles: list[dict[str, Any]],
) -> dict[str, Any]:
    registrations = sum(1 for e in events if e["type"] == REGISTRATION)
    submissions = [e for e in events if e["type"] == SUBMISSION]

    # Sign-up tag popularity
    tag_counter: Counter[str] = Counter()
    for e in events:
        if e["type"] == REGISTRATION:
            tag_counter.update(e.get("tags", []) or [])
    top_tags = [{"name": n, "count": c} for n, c in tag_counter.most_common()]

    # Dishes most often liked
    feedback = get_feedback()
    liked_counter: Counter[str] = Counter()
    for f in feedback:
        if f.get("dish_id") and f.get("liked_overall") is True:
            liked_counter[f["dish_id"]] += 1
    top_dishes = [{"dish_id": d, "likes": c} for d, c in liked_counter.most_common(10)]

    # Current category of every stored profile
    category_counter: Counter[str] = Counter(p["category"]["id"] for p in profiles)

    liked = sum(1 for f in feedback if f.get("liked_overall") is True)
    disliked = sum(1 for f in feedback if f.get("liked_overall") is False)
    opinions = liked + disliked

    return {
        "total_registrations": registrations,
        "total_submissions": len(submissions),
        "top_tags": top_tags,
        "top_dishes": top_dishes,
        "category_distribution": dict(category_counter),
        "avg_vibe": round(sum(p["avg_vibe"] for p in profiles) / len(profiles), 1) if profiles else 0.0,
        "avg_confidence": round(sum(p["confidence"] for p in profiles) / len(profiles), 3) if profiles else 0.0,
        "feedback_summary": {
            "total": len(feedback),
            "liked": liked,
            "disliked": disliked,
            "no_opinion": len(feedback) - opinions,
            "satisfaction_rate": round(liked / opinions * 100, 1) if opinions else 0.0,
        },
    }
