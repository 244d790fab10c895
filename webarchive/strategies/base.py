from __future__ import annotations

from abc import ABC, abstractmethod

from webarchive.config import Settings
from webarchive.runner import CommandRunner


class RetrievalStrategy(ABC):
    name: str

    def __init__(self, settings: Settings, runner: CommandRunner):
        self.settings = settings
        self.runner = runner

    @abstractmethod
    async def retrieve(self, url: str) -> str | None:
        """Return the archived file path, or None when retrieval failed."""
        raise NotImplementedError
