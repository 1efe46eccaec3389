"""Sentence supplier route for Eisaku."""
from log import get_logger

logger = get_logger("eisaku.news_routes")

from fastapi import APIRouter, HTTPException

import feeds
from feeds import NoSentencesError

router = APIRouter()


@router.get("/api/news", tags=["Practice"], summary="Pick a random Japanese news sentence")
@router.get("/api/sentences", tags=["Practice"], include_in_schema=False)
async def get_news_sentence():
    try:
        sentences = await feeds.gather_sentences()
        selected = feeds.pick_sentence(sentences)
    except NoSentencesError:
        raise HTTPException(500, "No suitable sentences found")
    except Exception:
        logger.exception("Error fetching sentences", extra={"component": "news"})
        raise HTTPException(500, "Failed to fetch sentences")

    return {
        "sentence": selected.sentence,
        "source": selected.source,
        "category": selected.category,
        "publishedAt": selected.publishedAt,
    }
