from datetime import UTC, datetime
from urllib.parse import urlparse


def is_valid_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:  # e.g. unbalanced IPv6 brackets
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def utc_today() -> str:
    return datetime.now(UTC).date().isoformat()
