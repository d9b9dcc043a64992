"""
Pytest configuration and shared fixtures

Provides metric histories shared by the calculator, chart builder and renderer tests.
"""

from datetime import date

import pytest

from dashtrends.domain.metrics import MetricSnapshot
from dashtrends.settings import ThemeConfig, reset_theme_config


@pytest.fixture(autouse=True)
def _isolate_theme(monkeypatch):
    """Keep DASH_TREND_* variables from the developer's shell out of tests"""
    for name in ("DASH_TREND_UP_COLOR", "DASH_TREND_DOWN_COLOR", "DASH_TREND_FLAT_COLOR"):
        monkeypatch.delenv(name, raising=False)
    reset_theme_config()
    yield
    reset_theme_config()


@pytest.fixture
def two_week_history():
    """History where metric x rises from 10 to 15"""
    return [
        MetricSnapshot(date=date(2026, 2, 1), metrics={"x": 10}),
        MetricSnapshot(date=date(2026, 2, 8), metrics={"x": 15}),
    ]


@pytest.fixture
def weekly_history():
    """Five weekly samples with a gap (None) and a missing key"""
    return [
        MetricSnapshot(date=date(2026, 1, 4), metrics={"coverage": 71.5, "bugs": 40}),
        MetricSnapshot(date=date(2026, 1, 11), metrics={"coverage": None, "bugs": 38}),
        MetricSnapshot(date=date(2026, 1, 18), metrics={"coverage": 74.25, "bugs": 35}),
        MetricSnapshot(date=date(2026, 1, 25), metrics={"bugs": 35}),
        MetricSnapshot(date=date(2026, 2, 1), metrics={"coverage": 78.0, "bugs": 30}),
    ]


@pytest.fixture
def rating_history():
    """1-5 rating where 1 is best"""
    return [
        MetricSnapshot(date=date(2026, 1, 1), metrics={"rating": 4}),
        MetricSnapshot(date=date(2026, 1, 8), metrics={"rating": 3}),
        MetricSnapshot(date=date(2026, 1, 15), metrics={"rating": 1}),
    ]


@pytest.fixture
def theme():
    """Concrete colors so assertions don't depend on CSS variables"""
    return ThemeConfig(up_color="#10b981", down_color="#ef4444", flat_color="#94a3b8")
