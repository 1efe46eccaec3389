"""Sentence supply: RSS and NewsAPI fan-out, sentence extraction, random pick."""
import os
import re as _re
import html
import random
import asyncio
import datetime
from typing import List, Optional

import feedparser
import httpx

from log import get_logger

logger = get_logger("eisaku.feeds")

from models import (
    CandidateSentence, FeedSource, RSS_FEEDS,
    SENTENCE_MIN_LEN, SENTENCE_MAX_LEN, SENTENCE_TERMINATOR, REJECT_MARKERS,
    ITEMS_PER_FEED,
    NEWS_API_URL, NEWS_API_DOMAINS, NEWS_API_PAGE_SIZE, NEWS_API_PLACEHOLDER,
)

_TAG_RE = _re.compile(r"<[^>]+>")


class NoSentencesError(Exception):
    """Every source came back empty."""


def get_news_api_key() -> Optional[str]:
    key = os.environ.get("NEWS_API_KEY")
    if not key or key == NEWS_API_PLACEHOLDER:
        return None
    return key


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True)


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def extract_sentences(text: str, source: str, category: str, published_at: str) -> List[CandidateSentence]:
    """Split text on 。 and keep the short, complete sentences."""
    sentences = []
    for part in (text or "").split(SENTENCE_TERMINATOR):
        if not part.strip():
            continue
        candidate = part.strip() + SENTENCE_TERMINATOR
        if not SENTENCE_MIN_LEN <= len(candidate) <= SENTENCE_MAX_LEN:
            continue
        if any(marker in candidate for marker in REJECT_MARKERS):
            continue
        sentences.append(CandidateSentence(
            sentence=candidate, source=source, category=category, publishedAt=published_at,
        ))
    return sentences


def _plain_text(markup: str) -> str:
    return html.unescape(_TAG_RE.sub("", markup or "")).strip()


def entry_text(entry) -> str:
    """Text of the entry's description, falling back to its full content.

    For RSS, ``summary`` is ``<description>`` and ``content`` is
    ``<content:encoded>``, the whole article body.
    """
    summary = entry.get("summary", "")
    if summary:
        return _plain_text(summary) or summary
    content = ""
    if entry.get("content"):
        content = entry["content"][0].get("value", "")
    return _plain_text(content) or content


def entry_published(entry) -> str:
    return entry.get("published") or entry.get("updated") or _now_iso()


async def fetch_feed(client: httpx.AsyncClient, feed: FeedSource) -> List[CandidateSentence]:
    """Fetch one feed; any failure counts as zero sentences."""
    try:
        resp = await client.get(feed.url)
        resp.raise_for_status()
        parsed = feedparser.parse(resp.content)
        if parsed.bozo and not parsed.entries:
            raise ValueError(f"unparseable feed: {parsed.bozo_exception}")

        sentences = []
        for entry in parsed.entries[:ITEMS_PER_FEED]:
            sentences.extend(extract_sentences(
                entry_text(entry), feed.source, feed.category, entry_published(entry),
            ))
        logger.debug("Feed fetched", extra={"component": "rss", "source": feed.source, "count": len(sentences)})
        return sentences
    except Exception:
        logger.exception("RSS fetch error", extra={"component": "rss", "source": feed.source, "url": feed.url})
        return []


async def fetch_from_rss(client: httpx.AsyncClient, sources=RSS_FEEDS) -> List[CandidateSentence]:
    results = await asyncio.gather(*(fetch_feed(client, feed) for feed in sources))
    return [s for sentences in results for s in sentences]


async def fetch_from_news_api(client: httpx.AsyncClient, api_key: str) -> List[CandidateSentence]:
    """Query NewsAPI for the allow-listed Japanese outlets."""
    try:
        resp = await client.get(
            NEWS_API_URL,
            params={"domains": NEWS_API_DOMAINS, "pageSize": NEWS_API_PAGE_SIZE, "apiKey": api_key},
        )
        if not resp.is_success:
            logger.warning("NewsAPI returned error", extra={"component": "newsapi", "status_code": resp.status_code})
            return []

        data = resp.json()
        articles = data.get("articles") or []
        if data.get("status") != "ok" or not articles:
            return []

        sentences = []
        for article in articles:
            description = article.get("description")
            if not description:
                continue
            sentences.extend(extract_sentences(
                description,
                (article.get("source") or {}).get("name", ""),
                "news",
                article.get("publishedAt") or "",
            ))
        return sentences
    except Exception:
        logger.exception("NewsAPI error", extra={"component": "newsapi"})
        return []


async def _no_sentences() -> List[CandidateSentence]:
    return []


async def gather_sentences() -> List[CandidateSentence]:
    """Collect candidates from every source concurrently."""
    api_key = get_news_api_key()
    async with _client() as client:
        rss_sentences, news_sentences = await asyncio.gather(
            fetch_from_rss(client),
            fetch_from_news_api(client, api_key) if api_key else _no_sentences(),
        )
    logger.info(
        "Sentences gathered",
        extra={"component": "news", "count": len(rss_sentences) + len(news_sentences)},
    )
    return rss_sentences + news_sentences


def pick_sentence(sentences: List[CandidateSentence], rng=random) -> CandidateSentence:
    if not sentences:
        raise NoSentencesError("No suitable sentences found")
    return sentences[rng.randrange(len(sentences))]
