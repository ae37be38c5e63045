"""Shared pytest fixtures: every test starts from empty stores and the bundled catalog."""

from __future__ import annotations

import pytest

from palate.analytics.feedback import clear_feedback
from palate.analytics.store import clear_events
from palate.diners.store import clear_diners
from palate.dishes.data_store import reload_catalog


@pytest.fixture(autouse=True)
def _reset_stores() -> None:
    clear_diners()
    clear_feedback()
    clear_events()
    reload_catalog()
