"""
Decides which retrieval strategy handles a URL.

Subreddit shorthand (`r/<name>`) is rewritten to the wiki on old.reddit.com,
which serves plain server-rendered HTML, and fetched as a single page.
Everything else is mirrored as-is.
"""
from __future__ import annotations

import logging

from webarchive.models import ClassifiedUrl, Strategy

logger = logging.getLogger(__name__)

SUBREDDIT_PREFIX = "r/"
WIKI_HOST = "https://old.reddit.com"


def classify(url: str) -> ClassifiedUrl:
    if url.startswith(SUBREDDIT_PREFIX):
        wiki_url = f"{WIKI_HOST}/{url}/wiki"
        logger.info("Converted subreddit URL to wiki: %s", wiki_url)
        return ClassifiedUrl(url=wiki_url, strategy=Strategy.SINGLE_PAGE)
    return ClassifiedUrl(url=url, strategy=Strategy.MIRROR)
