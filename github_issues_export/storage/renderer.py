"""Markdown rendering of exported issues (Jinja2)."""

from pathlib import Path

import jinja2

from ..errors import TemplateError
from ..github_client.models import IssueWithComments

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = "issue.md.j2"


class MarkdownRenderer:
    """Renders an IssueWithComments into markdown text.

    The bundled template is used unless ``template_path`` points at a
    replacement. The template receives ``issue`` and ``comments``.
    """

    def __init__(self, template_path: Path | None = None):
        """Load and compile the template.

        Args:
            template_path: Optional template file overriding the bundled one

        Raises:
            TemplateError: If the template is missing or does not compile
        """
        if template_path is None:
            search_dir, name = TEMPLATES_DIR, DEFAULT_TEMPLATE
        else:
            search_dir, name = template_path.parent, template_path.name

        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(search_dir)),
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        try:
            self.template = env.get_template(name)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Could not load template {search_dir / name}") from e

    def render(self, data: IssueWithComments) -> str:
        """Render one issue and its comments."""
        try:
            return self.template.render(issue=data.issue, comments=data.comments)
        except jinja2.TemplateError as e:
            raise TemplateError(
                f"Could not render issue #{data.issue.number}"
            ) from e
