"""Pytest configuration and fixtures for Hilal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so hilal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from hilal.core.adjustment import HijriCalendarAdjustment  # noqa: E402
from hilal.core.calendar import HijriCalendar  # noqa: E402
from hilal.format.locales import reset_custom_providers  # noqa: E402


@pytest.fixture
def calendar() -> HijriCalendar:
    """A fresh Umm al-Qura calendar."""
    return HijriCalendar()


@pytest.fixture
def tabular_calendar() -> HijriCalendar:
    """A calendar using only the tabular algorithm."""
    return HijriCalendar(use_umm_al_qura=False)


@pytest.fixture
def engine() -> HijriCalendarAdjustment:
    """A fresh adjustment engine with no overrides."""
    return HijriCalendarAdjustment()


@pytest.fixture(autouse=True)
def _reset_locales():
    yield
    reset_custom_providers()
