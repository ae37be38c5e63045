from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

FULL_CONFIDENCE_VISITS = 8


def compute_avg_vibe(entries: Sequence[Mapping[str, Any]]) -> int:
    """Mean vibe score over *entries*, rounded half up; missing scores count as 0."""
    if not entries:
        return 0
    total = sum(e.get("vibe_score") or 0 for e in entries)
    return math.floor(total / len(entries) + 0.5)


def compute_confidence(visit_count: int) -> float:
    return min(visit_count / FULL_CONFIDENCE_VISITS, 1.0)


def confidence_label(confidence: float) -> str:
    percent = math.floor(confidence * 100 + 0.5)
    if percent >= 75:
        return "Established"
    if percent >= 40:
        return "Building"
    return "New"
