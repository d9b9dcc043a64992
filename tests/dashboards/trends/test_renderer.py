#!/usr/bin/env python3
"""
Tests for TrendCardRenderer

Validates card HTML for each chart state, plot options handed to the
plotting library, and XSS protection.
"""

from datetime import date

import pytest
from bs4 import BeautifulSoup

from dashtrends.dashboards.trends.chart_builder import ChartState, build_chart
from dashtrends.dashboards.trends.renderer import TrendCardRenderer
from dashtrends.domain.metrics import MetricSnapshot
from dashtrends.domain.options import ChartOptions


def _soup(html):
    return BeautifulSoup(html, "html.parser")


class TestRender:
    """Card HTML"""

    def test_no_data_placeholder(self, theme):
        chart = build_chart([], {}, "x", ChartOptions(title="Widgets"))
        card = _soup(TrendCardRenderer(chart, theme).render()).find("div", class_="card")

        assert card["data-state"] == "no_data"
        assert card.find("h2").get_text() == "Widgets"
        assert card.find("span", class_="muted").get_text() == "No data"
        assert card.find("span", class_="big") is None

    def test_value_only(self, theme):
        chart = build_chart([], {"x": 1500}, "x", ChartOptions(title="Lines", suffix=" loc"))
        card = _soup(TrendCardRenderer(chart, theme).render())

        assert card.find("span", class_="big").get_text() == "1,500 loc"
        assert card.find("div", class_="trend-chart") is None
        assert card.find("span", class_="trend-arrow") is None

    def test_series_card(self, two_week_history, theme):
        chart = build_chart(two_week_history, {"x": 15}, "x", ChartOptions(title="Coverage", suffix="%"))
        card = _soup(TrendCardRenderer(chart, theme).render())

        assert card.find("span", class_="big").get_text() == "15%"
        assert card.find("span", class_="trend-caption").get_text() == "+5% from previous"
        assert "color: #10b981" in card.find("span", class_="trend-arrow")["style"]
        assert card.find("div", class_="trend-chart")["data-points"] == "2"

    def test_single_entry_no_trend_caption(self, theme):
        history = [MetricSnapshot(date=date(2026, 1, 1), metrics={"x": 3})]
        card = _soup(TrendCardRenderer(build_chart(history, {"x": 3}, "x"), theme).render())

        assert card.find("span", class_="trend-caption").get_text() == "No trend"
        assert card.find("span", class_="trend-arrow") is None

    def test_escapes_title(self, theme):
        chart = build_chart([], {}, "x", ChartOptions(title="<img src=x onerror=alert(1)>"))
        html = TrendCardRenderer(chart, theme).render()

        assert "<img" not in html
        assert "&lt;img" in html


class TestBuildContext:
    def test_context_keys(self, two_week_history, theme):
        chart = build_chart(two_week_history, {"x": 15}, "x")
        context = TrendCardRenderer(chart, theme).build_context()

        assert context["state"] == ChartState.SERIES.value
        assert context["headline"] == "15"
        assert context["has_chart"] is True
        assert context["point_count"] == 2
        assert "<svg" in context["arrow"]


class TestPlotSpec:
    """Options for the plotting library"""

    def test_no_chart(self, theme):
        chart = build_chart([], {"x": 1}, "x")
        assert TrendCardRenderer(chart, theme).plot_spec() is None

    def test_series(self, two_week_history, theme):
        chart = build_chart(two_week_history, {"x": 15}, "x")
        spec = TrendCardRenderer(chart, theme).plot_spec()

        assert spec["height"] == 180
        assert (spec["margin_top"], spec["margin_right"], spec["margin_bottom"], spec["margin_left"]) == (8, 12, 24, 40)
        assert spec["x"] is chart.x_axis
        assert spec["y"] is chart.y_axis
        assert spec["marks"] == list(chart.marks)

    @pytest.mark.parametrize("latest", [{"x": 10}, {}])
    def test_single_point(self, theme, latest):
        history = [MetricSnapshot(date=date(2026, 1, 1), metrics={"x": 10})]
        spec = TrendCardRenderer(build_chart(history, latest, "x"), theme).plot_spec()

        assert len(spec["marks"]) == 2
