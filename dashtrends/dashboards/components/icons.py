"""
Trend arrow icons

Fixed 12x12 SVG assets for each trend direction. Strokes use
currentColor so the surrounding element's color decides the hue.
"""

from dashtrends.domain.metrics import Direction

_SVG_ATTRS = (
    'width="12" height="12" viewBox="0 0 12 12" fill="none" stroke="currentColor" '
    'stroke-width="2" stroke-linecap="round" stroke-linejoin="round"'
)

ARROW_ICONS: dict[Direction, str] = {
    Direction.UP: f'<svg {_SVG_ATTRS}><path d="M2 10 L10 2"/><path d="M5 2 L10 2 L10 7"/></svg>',
    Direction.DOWN: f'<svg {_SVG_ATTRS}><path d="M2 2 L10 10"/><path d="M5 10 L10 10 L10 5"/></svg>',
    Direction.FLAT: f'<svg {_SVG_ATTRS}><path d="M2 6 L10 6"/><path d="M7 3 L10 6 L7 9"/></svg>',
}


def arrow_svg(direction: Direction) -> str:
    """
    Get the arrow icon for a trend direction.

    Args:
        direction: Trend direction tag

    Returns:
        SVG markup, or an empty string for Direction.NONE
    """
    return ARROW_ICONS.get(Direction(direction), "")
