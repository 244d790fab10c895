"""
Single-page fetch with curl, used for subreddit wikis.

old.reddit.com renders the wiki server-side, so one document is enough. The
over18 cookie gets past the interstitial on NSFW communities.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from webarchive.strategies.base import RetrievalStrategy

logger = logging.getLogger(__name__)

SUBREDDIT_RE = re.compile(r"r/([^/]+)")


def extract_subreddit(url: str) -> str | None:
    match = SUBREDDIT_RE.search(url)
    return match.group(1) if match else None


class SinglePageFetch(RetrievalStrategy):
    name = "curl"

    def command(self, url: str, output_path: Path) -> list[str]:
        return [
            "curl",
            "-L",
            "-A", self.settings.user_agent,
            "--compressed",
            "--fail",
            "--retry", str(self.settings.fetch_retries),
            "--max-time", str(self.settings.fetch_max_time),
            "-b", "over18=1",
            "-o", output_path.as_posix(),
            url,
        ]

    async def retrieve(self, url: str) -> str | None:
        logger.info("Using curl to archive: %s", url)

        subreddit = extract_subreddit(url)
        if not subreddit:
            logger.error("Could not extract subreddit from URL: %s", url)
            return None

        output_dir = Path(self.settings.archive_dir) / "reddit"
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / f"{subreddit}.html"

        result = await self.runner.run(self.command(url, output_path))
        if not result.ok:
            logger.error("Archive failure: %s (exit %s)\n%s", url, result.returncode, result.tail())
            return None

        return output_path.as_posix()
