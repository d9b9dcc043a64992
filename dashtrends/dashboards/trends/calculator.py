"""Trend calculation logic for metric cards

Compares the two most recent values of a metric:
- Signed delta text ("+5", "-0.3", "0")
- Raw direction of movement (drives the arrow)
- Semantic color under polarity rules (inverse / neutral)
"""

from dashtrends.domain.metrics import (
    Direction,
    LatestMetrics,
    MetricHistory,
    SemanticColor,
    TrendDescriptor,
)
from dashtrends.domain.options import TrendOptions
from dashtrends.utils.formatting import format_delta


class TrendCalculator:
    """Calculate the trend between the previous snapshot and the latest metrics"""

    def __init__(self, options: TrendOptions | None = None):
        """Initialize calculator with polarity rules

        Args:
            options: Polarity rules (defaults: inverse=False, neutral=False)
        """
        self.options = options or TrendOptions()

    def calculate(self, history: MetricHistory, latest: LatestMetrics, key: str) -> TrendDescriptor:
        """Calculate the trend for one metric

        The previous value comes from the second-to-last snapshot; the current
        value comes from ``latest``, which may be ahead of the history.

        Args:
            history: Chronologically ordered snapshots
            latest: Most recent metric values
            key: Metric key

        Returns:
            TrendDescriptor, or TrendDescriptor.none() if there is nothing to compare
        """
        if len(history) < 2:
            return TrendDescriptor.none()

        previous = history[-2].value(key)
        current = latest.get(key)

        # 0 is a real value; only None means "not sampled"
        if previous is None or current is None:
            return TrendDescriptor.none()

        delta = current - previous
        text = format_delta(delta)

        if delta == 0:
            return TrendDescriptor(display_text=text, direction=Direction.FLAT, semantic_color=SemanticColor.FLAT)

        direction = Direction.UP if delta > 0 else Direction.DOWN
        return TrendDescriptor(display_text=text, direction=direction, semantic_color=self.get_semantic_color(delta))

    def get_semantic_color(self, delta: float) -> SemanticColor:
        """Classify a non-zero delta as good (up) or bad (down)

        Args:
            delta: current - previous

        Returns:
            SemanticColor.FLAT when neutral, else UP for improvement and DOWN for regression
        """
        if self.options.neutral:
            return SemanticColor.FLAT

        is_positive_trend = delta < 0 if self.options.inverse else delta > 0
        return SemanticColor.UP if is_positive_trend else SemanticColor.DOWN


def compute_trend(
    history: MetricHistory,
    latest: LatestMetrics,
    key: str,
    options: TrendOptions | None = None,
) -> TrendDescriptor:
    """
    Convenience function to calculate a trend.

    Example:
        trend = compute_trend(history, {"bugs": 12}, "bugs", TrendOptions(inverse=True))
        if trend.has_trend:
            print(trend.display_text, trend.direction.value)
    """
    return TrendCalculator(options).calculate(history, latest, key)
