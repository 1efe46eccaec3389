"""API route handlers for Eisaku."""
from fastapi import APIRouter

import translator
import feeds
from models import RSS_FEEDS
from news_routes import router as news_router
from hint_routes import router as hint_router

router = APIRouter()
router.include_router(news_router)
router.include_router(hint_router)


@router.get("/api/health", tags=["System"], summary="Health check with configuration status")
async def health_check():
    return {
        "status": "ok",
        "deepl_configured": translator.get_api_key() is not None,
        "newsapi_configured": feeds.get_news_api_key() is not None,
        "feeds": len(RSS_FEEDS),
    }


@router.get("/api/sources", tags=["Reference"], summary="List RSS feed sources")
async def list_sources():
    return [feed.model_dump() for feed in RSS_FEEDS]
