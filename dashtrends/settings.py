"""
Theme Configuration

Resolves the trend engine's semantic color categories (up / down / flat)
to concrete color tokens. Values come from the environment (a .env file
is loaded with python-dotenv) and default to the CSS variables every
dashboard theme defines:

    DASH_TREND_UP_COLOR    (default: var(--dash-trend-up))
    DASH_TREND_DOWN_COLOR  (default: var(--dash-trend-down))
    DASH_TREND_FLAT_COLOR  (default: var(--dash-trend-flat))

Usage:
    from dashtrends.settings import get_theme_config

    theme = get_theme_config()
    color = theme.color_for(trend.semantic_color)

Raises:
    ConfigurationError: If a color token is set but empty
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from dashtrends.domain.metrics import SemanticColor


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class ThemeConfig:
    """
    Validated trend color tokens.
    """

    up_color: str = "var(--dash-trend-up)"
    down_color: str = "var(--dash-trend-down)"
    flat_color: str = "var(--dash-trend-flat)"

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("up_color", "down_color", "flat_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"Theme {name} must be a non-empty color token")

    def color_for(self, semantic_color: SemanticColor) -> str:
        """
        Resolve a semantic color category.

        Args:
            semantic_color: Category emitted by the trend calculator

        Returns:
            Color token (CSS color or variable reference)
        """
        return {
            SemanticColor.UP: self.up_color,
            SemanticColor.DOWN: self.down_color,
            SemanticColor.FLAT: self.flat_color,
        }[SemanticColor(semantic_color)]

    @classmethod
    def from_env(cls) -> "ThemeConfig":
        """
        Load theme tokens from environment variables (after reading .env).

        Returns:
            ThemeConfig with unset variables left at their defaults
        """
        load_dotenv()
        defaults = cls()
        return cls(
            up_color=os.getenv("DASH_TREND_UP_COLOR", defaults.up_color),
            down_color=os.getenv("DASH_TREND_DOWN_COLOR", defaults.down_color),
            flat_color=os.getenv("DASH_TREND_FLAT_COLOR", defaults.flat_color),
        )


# Global theme instance
_theme: ThemeConfig | None = None


def get_theme_config() -> ThemeConfig:
    """
    Get the global theme configuration (singleton pattern).

    Returns:
        ThemeConfig loaded from the environment on first use
    """
    global _theme
    if _theme is None:
        _theme = ThemeConfig.from_env()
    return _theme


def reset_theme_config() -> None:
    """Forget the cached theme so the next get_theme_config() re-reads the environment."""
    global _theme
    _theme = None
