"""
One archive run: probe → retrieve → record → render.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from webarchive.classifier import classify
from webarchive.config import Settings
from webarchive.metadata import MetadataStore
from webarchive.models import FAILED, ArchiveRecord, RunOutcome, Strategy, Verdict
from webarchive.reachability import ReachabilityChecker
from webarchive.render import write_indexes
from webarchive.runner import CommandRunner, SubprocessRunner
from webarchive.strategies.base import RetrievalStrategy
from webarchive.strategies.mirror import SiteMirror
from webarchive.strategies.single_page import SinglePageFetch
from webarchive.utils import utc_today

logger = logging.getLogger(__name__)

STRATEGIES: dict[Strategy, type[RetrievalStrategy]] = {
    Strategy.SINGLE_PAGE: SinglePageFetch,
    Strategy.MIRROR: SiteMirror,
}


class ArchiveAborted(RuntimeError):
    """The target or the network is broken; nothing is recorded for this run."""


class ArchiveRun:
    def __init__(
        self,
        settings: Settings,
        runner: CommandRunner | None = None,
        checker: ReachabilityChecker | None = None,
        today: Callable[[], str] = utc_today,
    ):
        self.settings = settings
        self.runner = runner or SubprocessRunner()
        self.checker = checker or ReachabilityChecker(settings)
        self.today = today
        self.store = MetadataStore(settings.metadata_path)

    def strategy_for(self, strategy: Strategy) -> RetrievalStrategy:
        return STRATEGIES[strategy](self.settings, self.runner)

    async def run(self) -> RunOutcome:
        url = self.settings.url

        Path(self.settings.archive_dir).mkdir(parents=True, exist_ok=True)
        self.store.load()

        logger.info("Validating URL: %s", url)
        probe = await self.checker.check(url)
        if probe.verdict is Verdict.FATAL:
            reason = f"HTTP {probe.status}" if probe.status else "Invalid URL or unreachable"
            raise ArchiveAborted(f"Critical error: Could not access {url} ({reason})")
        if probe.verdict is Verdict.SKIP:
            logger.warning("URL %s returned 404. Skipping archiving.", url)
            return RunOutcome.SKIPPED

        logger.info("URL is valid (HTTP %s). Proceeding with archiving...", probe.status)

        target = classify(url)
        archived_path = await self.strategy_for(target.strategy).retrieve(target.url)

        if archived_path:
            record = ArchiveRecord(url=url, last_archived=self.today(), archived_path=archived_path)
            logger.info("Successfully archived: %s → %s", url, archived_path)
            outcome = RunOutcome.ARCHIVED
        else:
            record = ArchiveRecord(url=url, last_archived=FAILED, archived_path=None)
            logger.warning("Archive attempt failed for %s", url)
            outcome = RunOutcome.FAILED

        self.store.upsert(record)
        self.store.save()
        write_indexes(self.store.records, self.settings)
        return outcome
