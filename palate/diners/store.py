from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

_diners: dict[str, dict[str, Any]] = {}
_profiles: dict[str, dict[str, Any]] = {}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def add_diner(phone_number: str, name: str, taste_tags: list[str]) -> dict[str, Any]:
    diner = {
        "phone_number": phone_number,
        "name": name,
        "taste_tags": list(taste_tags),
        "visit_count": 0,
        "first_seen_at": _now(),
    }
    _diners[phone_number] = diner
    return diner


def get_diner(phone_number: str) -> dict[str, Any] | None:
    return _diners.get(phone_number)


def set_visit_count(phone_number: str, visit_count: int) -> None:
    if phone_number in _diners:
        _diners[phone_number]["visit_count"] = visit_count


def get_profile(phone_number: str) -> dict[str, Any] | None:
    return _profiles.get(phone_number)


def upsert_profile(phone_number: str, snapshot: dict[str, Any]) -> dict[str, Any]:
    snapshot = {**snapshot, "phone_number": phone_number, "last_updated": _now()}
    _profiles[phone_number] = snapshot
    return snapshot


def list_profiles() -> list[dict[str, Any]]:
    """Profiles joined with their diner, most frequent visitors first."""
    rows = [
        {**profile, "diner": _diners[phone]}
        for phone, profile in _profiles.items()
        if phone in _diners
    ]
    rows.sort(key=lambda r: r["diner"]["visit_count"], reverse=True)
    return rows


def clear_diners() -> None:
    _diners.clear()
    _profiles.clear()
