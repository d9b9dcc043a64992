"""
Domain Models - Type-safe data structures for metric trends

This package contains dataclasses representing the trend engine's concepts:
    - metrics: MetricSnapshot, ChartPoint, TrendDescriptor
    - options: TrendOptions, ChartOptions
    - constants: Chart layout and mark style

Usage:
    from dashtrends.domain.metrics import MetricSnapshot
    from dashtrends.domain.options import ChartOptions

    snapshot = MetricSnapshot(date=date(2026, 2, 7), metrics={"bugs": 42})
    options = ChartOptions(title="Open Bugs", inverse=True)
"""

from .constants import chart_layout, mark_style
from .metrics import ChartPoint, Direction, MetricSnapshot, SemanticColor, TrendDescriptor
from .options import ChartOptions, TrendOptions

__all__ = [
    # Value types
    "MetricSnapshot",
    "ChartPoint",
    "TrendDescriptor",
    "Direction",
    "SemanticColor",
    # Options
    "TrendOptions",
    "ChartOptions",
    # Constants
    "chart_layout",
    "mark_style",
]
