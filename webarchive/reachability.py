"""
Reachability probe: one GET whose body is never read, used only for its status code.

A 404 means the page is gone and the run is skipped. No status at all or a
5xx means something is broken upstream and the run is aborted rather than
recorded as a failed archive.
"""
from __future__ import annotations

import logging

import httpx

from webarchive.classifier import classify
from webarchive.config import Settings
from webarchive.models import ProbeResult, Verdict
from webarchive.utils import is_valid_url

logger = logging.getLogger(__name__)


class ReachabilityChecker:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.transport = transport

    async def _status(self, url: str) -> int | None:
        if not is_valid_url(url):
            logger.debug("not an http(s) URL: %s", url)
            return None
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.probe_timeout,
                follow_redirects=False,
                headers={"User-Agent": self.settings.user_agent},
                transport=self.transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    return response.status_code
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("probe of %s failed: %s", url, exc)
            return None

    async def check(self, url: str) -> ProbeResult:
        probe_url = classify(url).url
        status = await self._status(probe_url)

        if status is None:
            logger.error("Critical error: Could not access %s (Invalid URL or unreachable)", url)
            return ProbeResult(url=probe_url, verdict=Verdict.FATAL)

        if status == 404:
            logger.warning("Skipping %s (404 Not Found)", url)
            return ProbeResult(url=probe_url, verdict=Verdict.SKIP, status=status)

        if 500 <= status < 600:
            logger.error("Critical error: Could not access %s (HTTP %s)", url, status)
            return ProbeResult(url=probe_url, verdict=Verdict.FATAL, status=status)

        return ProbeResult(url=probe_url, verdict=Verdict.CONTINUE, status=status)
