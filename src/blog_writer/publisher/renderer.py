"""
Preview Renderer for generated blog posts.
Renders a ResultView as a standalone HTML page with Jinja2.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from blog_writer.common.logging import setup_logging
from blog_writer.content_writer.catalog import get_post_type_info

from .models import ResultView

logger = setup_logging(module_name="publisher.renderer")


class PreviewRenderer:
    """
    Renders result views using Jinja2 templates.

    Usage:
        renderer = PreviewRenderer()
        html = renderer.render(view)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the preview renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, view: ResultView) -> str:
        """
        Render the preview page.

        The body is inserted as markup; it has already been sanitized by
        the post-processor. Everything else is autoescaped.
        """
        template = self.env.get_template("preview.html.jinja2")
        info = get_post_type_info(view.post_type)
        return template.render(
            view=view,
            post_type_name=info.name if info else view.post_type,
        )


def save_preview(view: ResultView, output_path: Path) -> str:
    """Render a preview page and write it to disk.

    Returns:
        Absolute path to the saved file
    """
    html = PreviewRenderer().render(view)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)

    logger.info("Saved preview to %s", output_path)
    return str(output_path.resolve())
