"""
README.md and index.html listing every archived URL.

Both files are regenerated in full from metadata.json on every run.
"""
from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from webarchive.config import Settings
from webarchive.models import ArchiveRecord

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
FAILED_LABEL = "❌ FAILED"
PLACEHOLDER_LINK = "#"

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(enabled_extensions=("html.j2",), default_for_string=False),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def _rows(records: dict[str, ArchiveRecord]) -> list[dict]:
    return [
        {
            "url": url,
            "href": rec.archived_path or PLACEHOLDER_LINK,
            "status": FAILED_LABEL if rec.failed else rec.last_archived,
            "failed": rec.failed,
        }
        for url, rec in records.items()
    ]


def _context(records: dict[str, ArchiveRecord], settings: Settings) -> dict:
    return {
        "rows": _rows(records),
        "pages_url": settings.pages_url,
        "zip_download_url": settings.zip_download_url,
        "issues_url": settings.issues_url,
        "contact_email": settings.contact_email,
        "schedule_description": settings.schedule_description,
    }


def render_readme(records: dict[str, ArchiveRecord], settings: Settings) -> str:
    return env.get_template("README.md.j2").render(_context(records, settings))


def render_index(records: dict[str, ArchiveRecord], settings: Settings) -> str:
    return env.get_template("index.html.j2").render(_context(records, settings))


def write_indexes(records: dict[str, ArchiveRecord], settings: Settings) -> None:
    for path, content in (
        (Path(settings.readme_path), render_readme(records, settings)),
        (Path(settings.index_path), render_index(records, settings)),
    ):
        path.write_text(content, encoding="utf-8")
        logger.info("Updated %s (%d entries)", path, len(records))
