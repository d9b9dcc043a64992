"""
Jinja2 Template Engine for Trend Card HTML

Loads the card templates under dashtrends/templates/components/ and renders
them with autoescaping, so metric titles, delta text and formatted values
can never inject markup:

    trend_chart_card.html   full trend card (TrendCardRenderer.render)
    trend_arrow.html        colored delta arrow (cards.trend_arrow)
    metric_card.html        headline number card (cards.metric_card)

Undefined context variables raise instead of rendering as empty strings,
so a card context missing a field fails at render time.

Usage:
    from dashtrends.template_engine import render_template

    html = render_template("components/metric_card.html", title="Open Bugs", value="42")
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


class TemplateEngine:
    """
    Autoescaping, strict-undefined Jinja2 environment for the trend card templates.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory holding components/*.html (default: dashtrends/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,  # a missing context variable is a bug
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Template path relative to the templates dir, e.g. "components/trend_arrow.html"
            **context: Card fields (title, value, trend, color tokens)

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


# Global template engine instance
_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).

    Returns:
        TemplateEngine: The template engine
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """
    Convenience function to render a template.

    Args:
        template_name: Name of template file
        **context: Template variables

    Returns:
        Rendered HTML string
    """
    return get_template_engine().render(template_name, **context)
