"""Chart data builder for metric trend cards

Turns an ordered metric history into a render-ready chart descriptor:
- Projection of one metric key (missing samples dropped)
- Axis inversion for "lower is better" scales
- Tick and tooltip formatter selection
- Mark list for the plotting library (reference rule + dot for a single
  point; area, line, dots and pointer tooltip for a series)
- Headline value and trend summary from the un-inverted data
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any

from dashtrends.core.logging_config import get_logger
from dashtrends.dashboards.trends.calculator import compute_trend
from dashtrends.domain.constants import chart_layout, mark_style
from dashtrends.domain.metrics import ChartPoint, LatestMetrics, MetricHistory, MetricValue, TrendDescriptor
from dashtrends.domain.options import ChartOptions, NumberFormatter
from dashtrends.utils.formatting import (
    MISSING_VALUE,
    format_date,
    format_integer,
    format_metric,
    format_number,
    is_integral,
)

logger = get_logger(__name__)


class ChartState(str, Enum):
    """What the rendering layer should draw"""

    NO_DATA = "no_data"  # placeholder only
    VALUE_ONLY = "value_only"  # headline value, no chart
    SINGLE_POINT = "single_point"  # reference rule + one marker
    SERIES = "series"  # area + line + dots + tooltip


class MarkType(str, Enum):
    RULE_Y = "rule_y"
    AREA_Y = "area_y"
    LINE_Y = "line_y"
    DOT = "dot"
    TIP = "tip"


@dataclass(frozen=True)
class AxisConfig:
    """
    Axis options for the plotting library.

    Attributes:
        domain: Fixed (start, end); None lets the plotter derive it from the data
        tick_format: Formatter applied to tick positions
        scale: "linear" for values, "time" for dates
        grid: Draw grid lines
        label: Axis label (None hides it)
    """

    domain: tuple[Any, Any] | None = None
    tick_format: NumberFormatter | None = None
    scale: str = "linear"
    grid: bool = False
    label: str | None = None


@dataclass(frozen=True)
class Mark:
    """
    One declarative chart mark.

    Attributes:
        type: Mark kind
        data: Points (or raw values for a reference rule)
        channels: Data-to-visual mappings (e.g. {"x": "date", "y": "value"})
        style: Constant visual properties (fill, stroke, opacity, radius, curve)
        title: Tooltip text for a point, for tip marks
    """

    type: MarkType
    data: tuple[Any, ...]
    channels: Mapping[str, Any] = field(default_factory=dict)
    style: Mapping[str, Any] = field(default_factory=dict)
    title: Callable[[ChartPoint], str] | None = None


@dataclass(frozen=True)
class ChartDescriptor:
    """
    Everything the rendering layer needs to draw one trend card.

    ``points`` are in plot coordinates (inverted when the axis is reversed);
    ``display_value`` converts a plot value back to its display text.
    """

    title: str
    state: ChartState
    headline: str
    trend: TrendDescriptor
    delta_caption: str
    color: str
    display_value: Callable[[float], str]
    points: tuple[ChartPoint, ...] = ()
    x_axis: AxisConfig | None = None
    y_axis: AxisConfig | None = None
    marks: tuple[Mark, ...] = ()

    @property
    def has_chart(self) -> bool:
        return self.state in (ChartState.SINGLE_POINT, ChartState.SERIES)

    def tooltips(self) -> list[str]:
        """Tooltip text for every plotted point (empty when there is no tip mark)"""
        for mark in self.marks:
            if mark.type is MarkType.TIP and mark.title is not None:
                return [mark.title(point) for point in mark.data]
        return []


class ChartDataBuilder:
    """Build chart descriptors for one set of chart options"""

    def __init__(self, options: ChartOptions | None = None):
        """Initialize builder

        Args:
            options: Chart options (see ChartOptions for defaults)
        """
        self.options = options or ChartOptions()

        if self.options.reverse and self.options.y_domain is None:
            logger.warning(f"Ignoring reverse=True for chart '{self.options.title}': y_domain is required")

    def build(self, history: MetricHistory, latest: LatestMetrics, key: str) -> ChartDescriptor:
        """Build the chart descriptor for one metric

        Args:
            history: Chronologically ordered snapshots (never mutated)
            latest: Most recent metric values
            key: Metric key

        Returns:
            ChartDescriptor in one of the ChartState layouts
        """
        options = self.options
        projected = self.project(history, key)

        # Trend and headline always use the real values
        trend = compute_trend(history, latest, key, options.trend_options)
        base = {
            "title": options.title,
            "headline": self.format_headline(latest.get(key)),
            "trend": trend,
            "delta_caption": self._delta_caption(trend, history),
            "color": options.color,
            "display_value": self.display_value,
        }

        if not projected:
            state = ChartState.NO_DATA if latest.get(key) is None else ChartState.VALUE_ONLY
            logger.debug(f"No chartable values for '{key}' ({state.value})")
            return ChartDescriptor(state=state, **base)

        points = tuple(self.to_plot_point(p) for p in projected)
        y_axis = AxisConfig(domain=options.y_domain, tick_format=self.select_tick_format(projected), grid=True)

        if len(points) == 1:
            point = points[0]
            padding = timedelta(days=chart_layout.SINGLE_POINT_PADDING_DAYS)
            x_axis = AxisConfig(domain=(point.date - padding, point.date), scale="time")
            marks = self._single_point_marks(point)
            state = ChartState.SINGLE_POINT
        else:
            x_axis = AxisConfig(scale="time")
            marks = self._series_marks(points)
            state = ChartState.SERIES

        logger.debug(f"Built {state.value} chart for '{key}' with {len(points)} point(s)")
        return ChartDescriptor(state=state, points=points, x_axis=x_axis, y_axis=y_axis, marks=marks, **base)

    @staticmethod
    def project(history: MetricHistory, key: str) -> list[ChartPoint]:
        """Project one metric out of the history, dropping missing samples"""
        return [
            ChartPoint(date=snapshot.date, value=snapshot.value(key))
            for snapshot in history
            if snapshot.value(key) is not None
        ]

    def reverse_value(self, value: float) -> float:
        """Map a value across the fixed domain (its own inverse); identity when not reversed"""
        if not self.options.is_reversed:
            return value
        low, high = self.options.y_domain
        return high + low - value

    def to_plot_point(self, point: ChartPoint) -> ChartPoint:
        if not self.options.is_reversed:
            return point
        return ChartPoint(date=point.date, value=self.reverse_value(point.value))

    def format_value(self, value: float) -> str:
        """Format a real (non-inverted) value for display"""
        if self.options.value_format is not None:
            return self.options.value_format(value)
        return format_metric(value, self.options.suffix)

    def format_headline(self, value: MetricValue) -> str:
        if value is None:
            return MISSING_VALUE
        return self.format_value(value)

    def display_value(self, plot_value: float) -> str:
        """Display text for a plotted value, undoing any axis inversion first"""
        return self.format_value(self.reverse_value(plot_value))

    def select_tick_format(self, projected: list[ChartPoint]) -> NumberFormatter:
        """Pick the tick formatter; on a reversed axis it is fed the real value"""
        options = self.options

        if options.tick_format is not None:
            base_format = options.tick_format
        elif options.suffix:
            suffix = options.suffix

            def base_format(value: float) -> str:
                return format_number(value, suffix)

        elif all(is_integral(p.value) for p in projected):
            base_format = format_integer
        else:
            base_format = format_number

        if not options.is_reversed:
            return base_format

        def reversed_format(position: float) -> str:
            return base_format(self.reverse_value(position))

        return reversed_format

    def _delta_caption(self, trend: TrendDescriptor, history: MetricHistory) -> str:
        if trend.display_text:
            return f"{trend.display_text}{self.options.suffix} from previous"
        if len(history) == 1:
            return "No trend"
        return ""

    def _tooltip(self, point: ChartPoint) -> str:
        return f"{format_date(point.date)}: {self.display_value(point.value)}"

    def _single_point_marks(self, point: ChartPoint) -> tuple[Mark, ...]:
        color = self.options.color
        return (
            Mark(
                type=MarkType.RULE_Y,
                data=(point.value,),
                style={
                    "stroke": color,
                    "stroke_width": mark_style.STROKE_WIDTH,
                    "stroke_opacity": mark_style.STROKE_OPACITY,
                },
            ),
            Mark(
                type=MarkType.DOT,
                data=(point,),
                channels={"x": "date", "y": "value"},
                style={"fill": color, "fill_opacity": mark_style.DOT_OPACITY, "r": mark_style.SINGLE_DOT_RADIUS},
            ),
        )

    def _series_marks(self, points: tuple[ChartPoint, ...]) -> tuple[Mark, ...]:
        color = self.options.color
        baseline = self.options.y_domain[0] if self.options.y_domain is not None else 0

        return (
            Mark(
                type=MarkType.AREA_Y,
                data=points,
                channels={"x": "date", "y1": baseline, "y2": "value"},
                style={"fill": color, "fill_opacity": mark_style.AREA_OPACITY, "curve": mark_style.CURVE},
            ),
            Mark(
                type=MarkType.LINE_Y,
                data=points,
                channels={"x": "date", "y": "value"},
                style={
                    "stroke": color,
                    "stroke_width": mark_style.STROKE_WIDTH,
                    "stroke_opacity": mark_style.STROKE_OPACITY,
                    "curve": mark_style.CURVE,
                },
            ),
            Mark(
                type=MarkType.DOT,
                data=points,
                channels={"x": "date", "y": "value"},
                style={"fill": color, "fill_opacity": mark_style.DOT_OPACITY, "r": mark_style.DOT_RADIUS},
            ),
            Mark(
                type=MarkType.TIP,
                data=points,
                channels={"x": "date", "y": "value"},
                style={"pointer": "x"},
                title=self._tooltip,
            ),
        )


def build_chart(
    history: MetricHistory,
    latest: LatestMetrics,
    key: str,
    options: ChartOptions | None = None,
) -> ChartDescriptor:
    """
    Convenience function to build a chart descriptor.

    Example:
        chart = build_chart(history, latest, "rating", ChartOptions(y_domain=(1, 5), reverse=True))
        if chart.has_chart:
            plot(chart.marks, x=chart.x_axis, y=chart.y_axis)
    """
    return ChartDataBuilder(options).build(history, latest, key)
