from __future__ import annotations

import argparse
import asyncio
import logging
import os

from pydantic import ValidationError

from webarchive.config import Settings
from webarchive.log import configure_logging
from webarchive.orchestrator import ArchiveAborted, ArchiveRun

logger = logging.getLogger(__name__)

# CLI flag -> Settings field; anything left unset falls through to INPUT_* env vars
FLAG_FIELDS = (
    "url",
    "limit_rate",
    "user_agent",
    "archive_dir",
    "contact_email",
    "schedule_description",
    "github_repository",
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="webarchive",
        description="Archive one URL, record it in metadata.json and regenerate README.md / index.html.",
    )
    ap.add_argument("url", nargs="?", default=None,
                    help="URL to archive, or r/<subreddit> for a subreddit wiki (default: $INPUT_URL)")
    ap.add_argument("--limit-rate", default=None, help="Bandwidth cap passed to wget, e.g. 200k")
    ap.add_argument("--user-agent", default=None, help="User-Agent for the probe, curl and wget")
    ap.add_argument("--archive-dir", default=None, help="Storage root (default: archive)")
    ap.add_argument("--contact-email", default=None, help="Address linked from the generated indexes")
    ap.add_argument("--schedule-description", default=None, help="Free text shown on index.html")
    ap.add_argument("--repository", dest="github_repository", default=None,
                    help="owner/name used for Pages, ZIP and issue links (default: $GITHUB_REPOSITORY)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, github_actions=os.environ.get("GITHUB_ACTIONS") == "true")

    overrides = {field: getattr(args, field) for field in FLAG_FIELDS if getattr(args, field) is not None}
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        logger.error("Action failed: invalid configuration\n%s", exc)
        return 1

    try:
        outcome = asyncio.run(ArchiveRun(settings).run())
    except ArchiveAborted as exc:
        logger.error("Action failed: %s", exc)
        return 1
    except Exception as exc:
        logger.exception("Action failed: %s", exc)
        return 1

    logger.info("Run finished: %s", outcome.value)
    return 0
