from __future__ import annotations

from collections.abc import Callable, Sequence

import httpx
import pytest

from webarchive.config import Settings
from webarchive.models import CommandResult
from webarchive.reachability import ReachabilityChecker
from webarchive.runner import CommandRunner


class FakeRunner(CommandRunner):
    def __init__(self, returncode: int | None = 0, output: str = "", effect: Callable[[list[str]], None] | None = None):
        self.returncode = returncode
        self.output = output
        self.effect = effect
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    async def run(self, args: Sequence[str], timeout: float | None = None) -> CommandResult:
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        if self.effect:
            self.effect(list(args))
        return CommandResult(returncode=self.returncode, output=self.output)


def status_checker(settings: Settings, status: int) -> ReachabilityChecker:
    return ReachabilityChecker(settings, transport=httpx.MockTransport(lambda request: httpx.Response(status)))


def unreachable_checker(settings: Settings) -> ReachabilityChecker:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    return ReachabilityChecker(settings, transport=httpx.MockTransport(handler))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_REPOSITORY", "GITHUB_ACTIONS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def make_settings(workdir):
    def factory(url: str = "https://example.com", **overrides) -> Settings:
        values = {"github_repository": "octo/web-archive", **overrides}
        return Settings(url=url, **values)

    return factory
