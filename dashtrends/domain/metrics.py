"""
Base domain models for metric history

Provides the value types shared by the trend and chart engines:
    - MetricSnapshot: One timestamped set of metric values
    - ChartPoint: One projected (date, value) pair for a single metric
    - TrendDescriptor: Result of comparing the two most recent values
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

MetricValue = int | float | None


class Direction(str, Enum):
    """Raw direction of movement between two samples (drives the arrow icon)"""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"
    NONE = "none"


class SemanticColor(str, Enum):
    """Semantic color category; resolved to a concrete color at the rendering boundary"""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class MetricSnapshot:
    """
    Point-in-time sample of every metric on a dashboard.

    Attributes:
        date: When the sample was recorded
        metrics: Mapping of metric key to value; None or a missing key means
                 "not sampled that day"

    Example:
        >>> snapshot = MetricSnapshot(date=date(2026, 2, 7), metrics={"coverage": 81.5})
        >>> snapshot.value("coverage")
        81.5
        >>> snapshot.value("bugs") is None
        True
    """

    date: date
    metrics: Mapping[str, MetricValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """
        Validate date is a date or datetime object.

        Raises:
            TypeError: If date is not a date/datetime instance
        """
        if not isinstance(self.date, date):
            raise TypeError(f"date must be date or datetime, got {type(self.date)}")

    def value(self, key: str) -> MetricValue:
        """
        Get the value recorded for a metric.

        Args:
            key: Metric key

        Returns:
            Recorded value, or None if absent
        """
        return self.metrics.get(key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetricSnapshot":
        """
        Build a snapshot from a ``{"date": ..., "metrics": {...}}`` mapping.

        Args:
            data: Mapping with a date (date object or ISO string) and a metrics mapping

        Returns:
            MetricSnapshot instance

        Raises:
            ValueError: If the date string is not ISO formatted
        """
        raw_date = data["date"]
        if isinstance(raw_date, str):
            raw_date = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
        return cls(date=raw_date, metrics=dict(data.get("metrics") or {}))


# Chronologically ordered (ascending) sequence of snapshots. Order is the caller's responsibility.
MetricHistory = Sequence[MetricSnapshot]

# Most recent values, passed separately from the history
LatestMetrics = Mapping[str, MetricValue]


@dataclass(frozen=True)
class ChartPoint:
    """One plotted sample of a single metric"""

    date: date
    value: float


@dataclass(frozen=True)
class TrendDescriptor:
    """
    Trend between the two most recent values of a metric.

    Attributes:
        display_text: Signed delta text (e.g. "+5", "-0.3", "0"); empty when there is no trend
        direction: Raw direction of movement, independent of polarity
        semantic_color: Whether the movement is good (up), bad (down) or neutral (flat)
    """

    display_text: str
    direction: Direction
    semantic_color: SemanticColor

    @classmethod
    def none(cls) -> "TrendDescriptor":
        """Descriptor used when no comparison is possible"""
        return cls(display_text="", direction=Direction.NONE, semantic_color=SemanticColor.FLAT)

    @property
    def has_trend(self) -> bool:
        return self.direction is not Direction.NONE
