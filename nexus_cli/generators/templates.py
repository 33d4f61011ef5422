"""Jinja2 template rendering for the NEXUS ecosystem files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``nexus_cli/generators/templates/`` directory and renders them with
project-specific context data.  Rendering is pure: writing the result to
disk is the reconciler's (or the project writer's) job.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from nexus_cli.utils import slugify


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

FRAMEWORK_LABELS: dict[str, str] = {
    "nextjs": "Next.js 15 (App Router)",
    "react-vite": "React + Vite",
    "sveltekit": "SvelteKit",
    "nuxt": "Nuxt 3",
    "astro": "Astro",
    "remix": "Remix",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the ``.nexus`` documentation set.

    Templates are ``.j2`` files under a configurable template directory and
    are rendered with a context dictionary holding project metadata (display
    name, framework, persona, date, etc.).  Undefined variables raise instead
    of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = slugify
        self.env.filters["framework_label"] = framework_label

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"docs/01_vision.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def framework_label(value: str) -> str:
    """Human-readable name for a frontend framework id."""
    return FRAMEWORK_LABELS.get(value, value)
