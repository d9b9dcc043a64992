#!/usr/bin/env python3
"""
TrendCardRenderer - HTML rendering for metric trend cards

Renders the card around a chart descriptor (title, headline value, trend
arrow and delta caption) and hands the mark list and axis options to the
plotting library untouched.
"""

from typing import Any

from dashtrends.dashboards.components.cards import trend_arrow
from dashtrends.dashboards.trends.chart_builder import ChartDescriptor
from dashtrends.domain.constants import chart_layout
from dashtrends.settings import ThemeConfig, get_theme_config
from dashtrends.template_engine import render_template


class TrendCardRenderer:
    """Renders one trend card from a ChartDescriptor"""

    def __init__(self, descriptor: ChartDescriptor, theme: ThemeConfig | None = None):
        """Initialize renderer

        Args:
            descriptor: Output of build_chart()
            theme: Color tokens for the trend arrow (default: global theme)
        """
        self.descriptor = descriptor
        self.theme = theme or get_theme_config()

    def render(self) -> str:
        """Render the card HTML

        Returns:
            HTML string; a "No data" placeholder card for the no_data state
        """
        return render_template("components/trend_chart_card.html", **self.build_context())

    def build_context(self) -> dict[str, Any]:
        """Build the template context

        Returns:
            Dictionary with card text, arrow HTML and chart presence
        """
        chart = self.descriptor
        return {
            "title": chart.title,
            "state": chart.state.value,
            "headline": chart.headline,
            "arrow": trend_arrow(chart.trend, self.theme),
            "delta_caption": chart.delta_caption,
            "has_chart": chart.has_chart,
            "point_count": len(chart.points),
        }

    def plot_spec(self) -> dict[str, Any] | None:
        """Options for the plotting library

        Returns:
            Frame size, axis configs and marks, or None when there is nothing to plot
        """
        chart = self.descriptor
        if not chart.has_chart:
            return None

        return {
            "height": chart_layout.HEIGHT,
            "margin_top": chart_layout.MARGIN_TOP,
            "margin_right": chart_layout.MARGIN_RIGHT,
            "margin_bottom": chart_layout.MARGIN_BOTTOM,
            "margin_left": chart_layout.MARGIN_LEFT,
            "x": chart.x_axis,
            "y": chart.y_axis,
            "marks": list(chart.marks),
        }
