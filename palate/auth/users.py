from __future__ import annotations

from typing import Any

import bcrypt

from ..config import DEFAULT_CONFIG, AppConfig

STAFF = "staff"
ADMIN = "admin"

_staff: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def add_staff(username: str, password: str, role: str = STAFF) -> None:
    if role not in (STAFF, ADMIN):
        raise ValueError(f"Unknown staff role: {role}")
    _staff[username] = {"password_hash": _hash_password(password), "role": role}


def _seed_staff(config: AppConfig = DEFAULT_CONFIG) -> None:
    """Kitchen floor and manager accounts, created on import."""
    add_staff("staff", config.staff_password, STAFF)
    add_staff("admin", config.admin_password, ADMIN)


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username, role}`` or ``None``."""
    record = _staff.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": username, "role": record["role"]}
    return None


_seed_staff()
