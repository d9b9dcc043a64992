"""
Card components for trend dashboards

Provides metric card and trend arrow HTML generators using Jinja2 templates.
"""

from dashtrends.dashboards.components.icons import arrow_svg
from dashtrends.domain.metrics import TrendDescriptor
from dashtrends.settings import ThemeConfig, get_theme_config
from dashtrends.template_engine import render_template


def trend_arrow(trend: TrendDescriptor, theme: ThemeConfig | None = None) -> str:
    """
    Generate a colored trend arrow.

    Args:
        trend: Trend descriptor from the calculator
        theme: Color tokens (default: global theme from the environment)

    Returns:
        HTML string, or "" when there is no trend

    Example:
        html = trend_arrow(compute_trend(history, latest, "bugs", TrendOptions(inverse=True)))
        # <span class="trend-arrow trend-down" style="color: var(--dash-trend-up); ...">...</span>
    """
    if not trend.has_trend:
        return ""

    theme = theme or get_theme_config()
    return render_template(
        "components/trend_arrow.html",
        direction=trend.direction.value,
        color=theme.color_for(trend.semantic_color),
        svg=arrow_svg(trend.direction),
    )


def metric_card(title: str, value: str, subtitle: str = "", color: str = "", icon: str = "") -> str:
    """
    Generate a metric card HTML component.

    Args:
        title: Card title
        value: Main value to display (large text)
        subtitle: Optional caption below the value
        color: Optional color for the value
        icon: Optional icon text shown before the title

    Returns:
        HTML string for metric card

    Example:
        html = metric_card("Open Bugs", format_metric(42), subtitle="-5 from previous")
    """
    return render_template(
        "components/metric_card.html", title=title, value=value, subtitle=subtitle, color=color, icon=icon
    )
