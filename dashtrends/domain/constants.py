"""
Chart Constants

Centralized layout and mark-style constants for trend charts.
Provides immutable configuration values handed to the plotting library.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartLayoutConfig:
    """
    Trend chart layout constants.

    Immutable configuration for the plot frame and degenerate-series handling.

    Attributes:
        HEIGHT: Plot height in pixels
        MARGIN_TOP: Top margin in pixels
        MARGIN_RIGHT: Right margin in pixels
        MARGIN_BOTTOM: Bottom margin in pixels (room for date ticks)
        MARGIN_LEFT: Left margin in pixels (room for value ticks)
        SINGLE_POINT_PADDING_DAYS: Days shown before a lone data point

    Example:
        >>> layout = chart_layout
        >>> print(layout.HEIGHT)
        180
        >>> print(layout.SINGLE_POINT_PADDING_DAYS)
        6
    """

    HEIGHT: int = 180
    """Plot height in pixels"""

    MARGIN_TOP: int = 8
    """Top margin in pixels"""

    MARGIN_RIGHT: int = 12
    """Right margin in pixels"""

    MARGIN_BOTTOM: int = 24
    """Bottom margin in pixels"""

    MARGIN_LEFT: int = 40
    """Left margin in pixels"""

    SINGLE_POINT_PADDING_DAYS: int = 6
    """Days of time axis shown before a single data point"""


@dataclass(frozen=True)
class MarkStyleConfig:
    """
    Mark style constants.

    Attributes:
        STROKE_WIDTH: Width of line and reference-rule strokes
        STROKE_OPACITY: Opacity of line and reference-rule strokes
        AREA_OPACITY: Fill opacity of the area under the curve
        DOT_OPACITY: Fill opacity of point markers
        DOT_RADIUS: Marker radius for multi-point series
        SINGLE_DOT_RADIUS: Marker radius for a single point
        CURVE: Interpolation used for lines and areas

    Example:
        >>> style = mark_style
        >>> print(style.CURVE)
        monotone-x
    """

    STROKE_WIDTH: float = 1.5
    """Width of line and reference-rule strokes"""

    STROKE_OPACITY: float = 0.7
    """Opacity of line and reference-rule strokes"""

    AREA_OPACITY: float = 0.1
    """Fill opacity of the area under the curve"""

    DOT_OPACITY: float = 0.6
    """Fill opacity of point markers"""

    DOT_RADIUS: float = 2.5
    """Marker radius for multi-point series"""

    SINGLE_DOT_RADIUS: float = 3.0
    """Marker radius for a single point"""

    CURVE: str = "monotone-x"
    """Interpolation used for lines and areas"""


# Singleton instances for easy import
chart_layout = ChartLayoutConfig()
mark_style = MarkStyleConfig()
