from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .auth.dependencies import require_admin, require_staff
from .auth.users import authenticate
from .config import DEFAULT_CONFIG
from .diners import store
from .diners.models import (
    DashboardRow,
    DinerOut,
    DishCreateRequest,
    FeedbackEntryOut,
    FeedbackRequest,
    LoginRequest,
    RegisterRequest,
    TasteProfileOut,
)
from .diners.service import (
    DinerExistsError,
    DinerNotFoundError,
    DishNotFoundError,
    feedback_history,
    register_diner,
    submit_feedback,
)
from .dishes.data_store import add_dish, get_dish, list_dishes
from .profile.models import Dish

logging.basicConfig(level=DEFAULT_CONFIG.log_level)

app = FastAPI(title="Palate Taste Profile API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_CONFIG.session_secret)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/dishes", response_model=list[Dish])
def dishes() -> list[Dish]:
    return list_dishes()


@app.get("/dishes/{dish_id}", response_model=Dish)
def dish(dish_id: str) -> Dish:
    found = get_dish(dish_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return found


# ── Diner endpoints ──────────────────────────────────────────────────────


@app.post("/diners", response_model=DinerOut)
def register(body: RegisterRequest) -> DinerOut:
    try:
        diner = register_diner(body.phone_number, body.name, body.tags)
    except DinerExistsError:
        raise HTTPException(status_code=409, detail="Diner already registered")
    return DinerOut(**diner)


@app.get("/diners/{phone}", response_model=DinerOut)
def diner(phone: str) -> DinerOut:
    found = store.get_diner(phone)
    if found is None:
        raise HTTPException(status_code=404, detail="Diner not found")
    return DinerOut(**found)


# Runs on the event loop with no await inside, so submissions for the same
# diner are applied one after another.
@app.post("/feedback", response_model=TasteProfileOut)
async def feedback(body: FeedbackRequest) -> TasteProfileOut:
    try:
        snapshot = submit_feedback(body)
    except DinerNotFoundError:
        raise HTTPException(status_code=404, detail="Diner not found")
    except DishNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"Dish not found: {exc.args[0]}")
    return TasteProfileOut(**snapshot)


@app.get("/profiles/{phone}", response_model=TasteProfileOut)
def profile(phone: str) -> TasteProfileOut:
    found = store.get_profile(phone)
    if found is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return TasteProfileOut(**found)


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    staff = authenticate(body.username, body.password)
    if not staff:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["staff"] = staff
    return {"status": "ok", "staff": staff}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(staff: dict = Depends(require_staff)) -> dict:
    return staff


# ── Staff dashboard ──────────────────────────────────────────────────────


@app.get("/profiles", response_model=list[DashboardRow])
def profiles(staff: dict = Depends(require_staff)) -> list[DashboardRow]:
    return [DashboardRow(**row) for row in store.list_profiles()]


@app.get("/feedback/{phone}", response_model=list[FeedbackEntryOut])
def history(phone: str, staff: dict = Depends(require_staff)) -> list[FeedbackEntryOut]:
    if store.get_diner(phone) is None:
        raise HTTPException(status_code=404, detail="Diner not found")
    return [FeedbackEntryOut(**row) for row in feedback_history(phone)]


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.post("/dishes", response_model=Dish)
def create_dish(body: DishCreateRequest, staff: dict = Depends(require_admin)) -> Dish:
    return add_dish(body.name, body.flavor_tags, body.image_url)


@app.get("/analytics")
def analytics(staff: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events(), store.list_profiles())
