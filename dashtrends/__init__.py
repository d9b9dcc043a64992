"""
dashtrends - metric trend and time-series chart data for dashboard cards

Usage:
    from dashtrends import ChartOptions, MetricSnapshot, build_chart, compute_trend

    history = [
        MetricSnapshot(date=date(2026, 2, 1), metrics={"bugs": 10}),
        MetricSnapshot(date=date(2026, 2, 8), metrics={"bugs": 15}),
    ]
    trend = compute_trend(history, {"bugs": 15}, "bugs")
    chart = build_chart(history, {"bugs": 15}, "bugs", ChartOptions(title="Open Bugs", inverse=True))
"""

from dashtrends.dashboards.trends import (
    AxisConfig,
    ChartDataBuilder,
    ChartDescriptor,
    ChartState,
    Mark,
    MarkType,
    TrendCalculator,
    TrendCardRenderer,
    build_chart,
    compute_trend,
)
from dashtrends.domain import (
    ChartOptions,
    ChartPoint,
    Direction,
    MetricSnapshot,
    SemanticColor,
    TrendDescriptor,
    TrendOptions,
)

__version__ = "1.0.0"

__all__ = [
    "compute_trend",
    "build_chart",
    "TrendCalculator",
    "ChartDataBuilder",
    "TrendCardRenderer",
    "MetricSnapshot",
    "ChartPoint",
    "TrendDescriptor",
    "Direction",
    "SemanticColor",
    "TrendOptions",
    "ChartOptions",
    "ChartDescriptor",
    "ChartState",
    "AxisConfig",
    "Mark",
    "MarkType",
]
