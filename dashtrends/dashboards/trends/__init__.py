"""Trend card calculation and rendering logic"""

from dashtrends.dashboards.trends.calculator import TrendCalculator, compute_trend
from dashtrends.dashboards.trends.chart_builder import (
    AxisConfig,
    ChartDataBuilder,
    ChartDescriptor,
    ChartState,
    Mark,
    MarkType,
    build_chart,
)
from dashtrends.dashboards.trends.renderer import TrendCardRenderer

__all__ = [
    "TrendCalculator",
    "compute_trend",
    "ChartDataBuilder",
    "build_chart",
    "ChartDescriptor",
    "ChartState",
    "AxisConfig",
    "Mark",
    "MarkType",
    "TrendCardRenderer",
]
