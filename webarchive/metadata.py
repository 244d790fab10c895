"""
metadata.json: the durable state of the archive, one entry per URL.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from webarchive.models import ArchiveRecord

logger = logging.getLogger(__name__)


class MetadataStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.records: dict[str, ArchiveRecord] = {}

    def load(self) -> dict[str, ArchiveRecord]:
        self.records = {}
        if not self.path.exists():
            return self.records

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top level is not an object")
            records = {url: ArchiveRecord.from_dict(url, entry) for url, entry in data.items()}
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Error reading %s, initializing a new one. (%s)", self.path.name, exc)
            return self.records

        self.records = records
        return self.records

    def upsert(self, record: ArchiveRecord) -> None:
        self.records[record.url] = record

    def dumps(self, records: dict[str, ArchiveRecord] | None = None) -> str:
        records = self.records if records is None else records
        return json.dumps({url: rec.to_dict() for url, rec in records.items()}, indent=2, ensure_ascii=False)

    def save(self, records: dict[str, ArchiveRecord] | None = None) -> None:
        if records is not None:
            self.records = records
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.dumps(), encoding="utf-8")
