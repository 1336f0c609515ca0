"""Runtime configuration for an export run.

The configuration is read once at startup and passed explicitly to the
client and storage layers.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .errors import AuthError
from .github_client.query import IssueState

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_OUTPUT_DIR = Path("./md")
DEFAULT_TIMEOUT = 5.0
USER_AGENT = f"github-issues-export/{__version__}"


class ExportConfig(BaseModel):
    """Immutable settings for one export run."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="GitHub token sent as a bearer credential")
    output_dir: Path = Field(DEFAULT_OUTPUT_DIR, description="Output directory")
    state: IssueState = Field(IssueState.OPEN, description="Issue state filter")
    api_url: str = Field(DEFAULT_API_URL, description="GitHub REST API root")
    template_path: Path | None = Field(
        None, description="Markdown template overriding the bundled one"
    )
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="HTTP timeout (seconds)")
    user_agent: str = Field(USER_AGENT, description="User-Agent header value")

    @classmethod
    def from_env(
        cls,
        token: str | None = None,
        api_url: str | None = None,
        **overrides: object,
    ) -> "ExportConfig":
        """Build configuration from explicit values and environment variables.

        Args:
            token: GitHub token. If None, reads from GITHUB_TOKEN env var.
            api_url: API root. If None, reads GITHUB_API_URL or uses github.com.
            **overrides: Remaining ExportConfig fields

        Raises:
            AuthError: If no token is available
        """
        token = token or os.getenv("GITHUB_TOKEN")
        if not token or not token.strip():
            raise AuthError(
                "Missing obligatory environment variable GITHUB_TOKEN "
                "(or pass --token)"
            )

        api_url = api_url or os.getenv("GITHUB_API_URL") or DEFAULT_API_URL
        return cls(token=token.strip(), api_url=api_url.rstrip("/"), **overrides)
