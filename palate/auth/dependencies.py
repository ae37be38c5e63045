from __future__ import annotations

from fastapi import HTTPException, Request

from .users import ADMIN


def _session_staff(request: Request) -> dict:
    staff = request.session.get("staff")
    if not staff:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return staff


def require_staff(request: Request) -> dict:
    """Raise 401 unless a staff member is logged in."""
    return _session_staff(request)


def require_admin(request: Request) -> dict:
    """Raise 401 if not logged in, 403 if not a manager."""
    staff = _session_staff(request)
    if staff.get("role") != ADMIN:
        raise HTTPException(status_code=403, detail="Admin access required")
    return staff
