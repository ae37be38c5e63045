"""
Dish catalog.

Responsibilities:
- Load the kitchen's dish list (name, flavor tags, image) from CSV on first use.
- Serve dish lookups by id for feedback submissions.
- Accept new dishes added from the admin dashboard for the process lifetime.
"""
from __future__ import annotations

import logging
import uuid
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_CONFIG
from ..profile.models import Dish

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = ["id", "name", "flavor_tags", "image_url", "active"]

_dishes: dict[str, Dish] | None = None


def _split_tags(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def _load(path: Path) -> dict[str, Dish]:
    if not path.is_file():
        logger.warning("Dish catalog %s not found, starting with an empty catalog", path)
        return {}

    df = pd.read_csv(path, dtype=str)
    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    df["flavor_tags_list"] = df["flavor_tags"].fillna("").apply(_split_tags)
    df["active_flag"] = df["active"].fillna("true").str.strip().str.lower() != "false"

    dishes: dict[str, Dish] = {}
    for _, row in df.iterrows():
        dish = Dish(
            id=str(row["id"]).strip(),
            name=str(row["name"]).strip(),
            flavor_tags=row["flavor_tags_list"],
            image_url=row["image_url"] if pd.notna(row["image_url"]) else None,
            active=bool(row["active_flag"]),
        )
        dishes[dish.id] = dish

    logger.info("Loaded %d dishes from %s", len(dishes), path)
    return dishes


def get_catalog() -> dict[str, Dish]:
    """Return the in-memory dish catalog, loading it on first call."""
    global _dishes
    if _dishes is None:
        _dishes = _load(DEFAULT_CONFIG.dishes_csv)
    return _dishes


def list_dishes(active_only: bool = True) -> list[Dish]:
    dishes = get_catalog().values()
    return [d for d in dishes if d.active or not active_only]


def get_dish(dish_id: str) -> Dish | None:
    return get_catalog().get(dish_id)


def add_dish(name: str, flavor_tags: list[str], image_url: str | None = None) -> Dish:
    dish = Dish(
        id=uuid.uuid4().hex,
        name=name,
        flavor_tags=flavor_tags,
        image_url=image_url,
    )
    get_catalog()[dish.id] = dish
    return dish


def reload_catalog(path: Path | None = None) -> dict[str, Dish]:
    """Drop any added dishes and reload the catalog from *path*."""
    global _dishes
    _dishes = _load(path or DEFAULT_CONFIG.dishes_csv)
    return _dishes
