from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/112.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>; blank inputs fall back to defaults
    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    url: str
    limit_rate: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    archive_dir: str = "archive"
    contact_email: str = ""
    schedule_description: str = ""

    readme_path: str = "README.md"
    index_path: str = "index.html"
    branch: str = "main"

    probe_timeout: float = 30
    fetch_retries: int = 3
    fetch_max_time: int = 30
    mirror_timeout: float | None = None

    # Set by the Actions runner, not by a `with:` input
    github_repository: str = Field(
        "", validation_alias=AliasChoices("github_repository", "GITHUB_REPOSITORY")
    )

    @property
    def metadata_path(self) -> Path:
        return Path(self.archive_dir) / "metadata.json"

    @property
    def repo_owner(self) -> str:
        return self.github_repository.partition("/")[0]

    @property
    def repo_name(self) -> str:
        return self.github_repository.partition("/")[2]

    @property
    def pages_url(self) -> str:
        return f"https://{self.repo_owner}.github.io/{self.repo_name}/"

    @property
    def zip_download_url(self) -> str:
        return f"https://github.com/{self.repo_owner}/{self.repo_name}/archive/refs/heads/{self.branch}.zip"

    @property
    def issues_url(self) -> str:
        return f"https://github.com/{self.repo_owner}/{self.repo_name}/issues"
