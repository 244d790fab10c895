from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

FAILED = "FAILED"


class Strategy(str, Enum):
    SINGLE_PAGE = "single_page"  # curl, one rendered page
    MIRROR = "mirror"            # wget --mirror


class Verdict(str, Enum):
    CONTINUE = "continue"
    SKIP = "skip"
    FATAL = "fatal"


class RunOutcome(str, Enum):
    ARCHIVED = "archived"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ClassifiedUrl:
    url: str
    strategy: Strategy


@dataclass(frozen=True)
class ProbeResult:
    url: str
    verdict: Verdict
    status: int | None = None


@dataclass(frozen=True)
class CommandResult:
    returncode: int | None    # None when the command never ran to completion
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def tail(self, lines: int = 20) -> str:
        return "\n".join(self.output.strip().splitlines()[-lines:])


@dataclass
class ArchiveRecord:
    url: str
    last_archived: str          # ISO date, or FAILED
    archived_path: str | None = None

    @property
    def failed(self) -> bool:
        return self.last_archived == FAILED

    def to_dict(self) -> dict[str, Any]:
        return {"lastArchived": self.last_archived, "archivedPath": self.archived_path}

    @classmethod
    def from_dict(cls, url: str, data: dict[str, Any]) -> ArchiveRecord:
        last_archived = data["lastArchived"]
        archived_path = data.get("archivedPath")
        if not isinstance(last_archived, str):
            raise ValueError(f"lastArchived must be a string for {url}")
        if archived_path is not None and not isinstance(archived_path, str):
            raise ValueError(f"archivedPath must be a string or null for {url}")
        return cls(url=url, last_archived=last_archived, archived_path=archived_path)
