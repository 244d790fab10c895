"""
Recursive site mirror with wget.

Links are rewritten for offline browsing and page requisites (CSS, images,
scripts) are fetched alongside. wget lays files out as <archive_dir>/<host>/<path>.
"""
from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from webarchive.strategies.base import RetrievalStrategy
from webarchive.utils import is_valid_url

logger = logging.getLogger(__name__)


def mirror_output_path(url: str, archive_dir: str) -> Path | None:
    """Where the entry page of a mirror lands, or None for a non-http(s) URL."""
    if not is_valid_url(url):
        return None
    parsed = urlparse(url)
    host = parsed.hostname or ""
    filename = PurePosixPath(parsed.path).name
    if filename and "." in filename:
        return Path(archive_dir) / f"{host}{parsed.path}"
    return Path(archive_dir) / host / "index.html"


def _adjusted_candidates(url: str, archive_dir: str) -> list[Path]:
    # --adjust-extension saves /docs as docs.html, or docs/index.html when it is a directory
    parsed = urlparse(url)
    path = parsed.path.rstrip("/")
    if not path or "." in PurePosixPath(path).name:
        return []
    base = Path(archive_dir) / f"{parsed.hostname}{path}"
    return [base.with_name(base.name + ".html"), base / "index.html"]


def remove_backups(root: Path) -> int:
    removed = 0
    for orig in root.rglob("*.orig"):
        if orig.is_file():
            orig.unlink()
            removed += 1
    if removed:
        logger.debug("Removed %d .orig files under %s", removed, root)
    return removed


class SiteMirror(RetrievalStrategy):
    name = "wget"

    def command(self, url: str) -> list[str]:
        args = [
            "wget",
            "--mirror",
            "--convert-links",
            "--adjust-extension",
            "--page-requisites",
            "--no-parent",
            "-e", "robots=off",
            "--random-wait",
            f"--user-agent={self.settings.user_agent}",
            "--no-check-certificate",
        ]
        if self.settings.limit_rate:
            args.append(f"--limit-rate={self.settings.limit_rate}")
        args += ["-P", self.settings.archive_dir, url]
        return args

    def resolve_output_path(self, url: str) -> Path | None:
        expected = mirror_output_path(url, self.settings.archive_dir)
        if expected is None:
            return None
        # a host-level index.html may belong to an earlier mirror of the root URL
        for candidate in _adjusted_candidates(url, self.settings.archive_dir):
            if candidate.is_file():
                logger.info("Mirror entry page found at %s", candidate.as_posix())
                return candidate
        if not expected.is_file():
            logger.warning("Expected mirror entry page %s was not found on disk", expected.as_posix())
        return expected

    async def retrieve(self, url: str) -> str | None:
        logger.info("Using wget to archive: %s", url)

        result = await self.runner.run(self.command(url), timeout=self.settings.mirror_timeout)
        archive_root = Path(self.settings.archive_dir)
        if archive_root.is_dir():
            remove_backups(archive_root)

        if not result.ok:
            logger.error("Archive failure: %s (exit %s)\n%s", url, result.returncode, result.tail())
            return None

        output_path = self.resolve_output_path(url)
        if output_path is None:
            logger.error("Archive failure: %s is not an http(s) URL", url)
            return None
        return output_path.as_posix()
