"""
Option records for trend and chart calculations

Every option has an explicit default so callers never rely on the
presence or absence of a key.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from numbers import Real

NumberFormatter = Callable[[float], str]


@dataclass(frozen=True)
class TrendOptions:
    """
    Polarity rules for trend classification.

    Attributes:
        inverse: A numeric decrease is the good direction (e.g. fewer defects)
        neutral: Always report the flat color (counts with no good/bad polarity)
    """

    inverse: bool = False
    neutral: bool = False


@dataclass(frozen=True)
class ChartOptions:
    """
    Options for building a trend chart.

    Attributes:
        title: Card heading
        color: Base color for chart marks (CSS color or variable)
        suffix: Unit appended to displayed values (e.g. "%")
        y_domain: Fixed (min, max) for the vertical axis
        inverse: Passed through to the trend calculation
        neutral: Passed through to the trend calculation
        tick_format: Custom formatter for vertical axis ticks
        value_format: Custom formatter for headline and tooltip values
        reverse: Draw lower raw values higher on the chart (requires y_domain)

    Raises:
        ValueError: If y_domain is not a pair of numbers with min < max
    """

    title: str = ""
    color: str = "var(--dash-trend-flat)"
    suffix: str = ""
    y_domain: tuple[float, float] | None = None
    inverse: bool = False
    neutral: bool = False
    tick_format: NumberFormatter | None = None
    value_format: NumberFormatter | None = None
    reverse: bool = False

    def __post_init__(self) -> None:
        if self.y_domain is None:
            return

        if not isinstance(self.y_domain, Sequence) or len(self.y_domain) != 2:
            raise ValueError(f"y_domain must be a (min, max) pair, got {self.y_domain!r}")

        low, high = self.y_domain
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in (low, high)):
            raise ValueError(f"y_domain bounds must be numbers, got {self.y_domain!r}")
        if low >= high:
            raise ValueError(f"y_domain min must be less than max: {low} >= {high}")

        # Normalize lists to an immutable tuple
        object.__setattr__(self, "y_domain", (low, high))

    @property
    def trend_options(self) -> TrendOptions:
        return TrendOptions(inverse=self.inverse, neutral=self.neutral)

    @property
    def is_reversed(self) -> bool:
        """True when axis inversion actually applies (reverse needs a finite domain)"""
        return self.reverse and self.y_domain is not None
