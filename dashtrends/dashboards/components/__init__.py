"""
Dashboard Components - Reusable HTML building blocks

    - cards: Metric cards, trend arrows
    - icons: Trend direction SVG assets

Usage:
    from dashtrends.dashboards.components.cards import metric_card, trend_arrow

    card_html = metric_card("Open Bugs", "42")
"""

from .cards import metric_card, trend_arrow
from .icons import arrow_svg

__all__ = [
    "metric_card",
    "trend_arrow",
    "arrow_svg",
]
