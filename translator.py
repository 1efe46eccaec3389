"""DeepL translation client."""
import os
from typing import List, Optional

import httpx

from log import get_logger

logger = get_logger("eisaku.translator")

# --- Config ---
DEEPL_API_URL = "https://api-free.deepl.com/v2/translate"
SOURCE_LANG = "JA"
TARGET_LANG = "EN"


class TranslationError(Exception):
    """DeepL answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"DeepL API error: {status_code}")
        self.status_code = status_code
        self.body = body


def get_api_key() -> Optional[str]:
    return os.environ.get("DEEPL_API_KEY") or None


def get_api_url() -> str:
    return os.environ.get("DEEPL_API_URL", DEEPL_API_URL)


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


async def translate(texts: List[str], api_key: str) -> List[str]:
    """Translate Japanese texts to English, preserving input order."""
    async with _client() as client:
        resp = await client.post(
            get_api_url(),
            headers={"Authorization": f"DeepL-Auth-Key {api_key}"},
            json={
                "text": texts,
                "source_lang": SOURCE_LANG,
                "target_lang": TARGET_LANG,
            },
        )
    if not resp.is_success:
        raise TranslationError(resp.status_code, resp.text)
    translations = resp.json().get("translations") or []
    logger.debug("DeepL translated", extra={"component": "deepl", "count": len(translations)})
    return [t.get("text", "") for t in translations]
