"""Hint route for Eisaku."""
from log import get_logger

logger = get_logger("eisaku.hint_routes")

from fastapi import APIRouter, HTTPException

import translator
import hints
from translator import TranslationError
from models import HintRequest

router = APIRouter()

HINT_FAILED = "ヒントの取得に失敗しました"


@router.post("/api/hint", tags=["Practice"], summary="Vocabulary and grammar hint for a sentence")
@router.post("/api/hints", tags=["Practice"], include_in_schema=False)
async def get_hint(req: HintRequest):
    if not req.sentence:
        raise HTTPException(400, "文が指定されていません")

    api_key = translator.get_api_key()
    if not api_key:
        raise HTTPException(500, "APIキーが設定されていません")

    try:
        exclude = await hints.katakana_exclusions(req.sentence, api_key)
        translations = await translator.translate([req.sentence], api_key)
    except TranslationError as e:
        logger.error(
            "DeepL API error",
            extra={"component": "deepl", "status_code": e.status_code, "detail": e.body},
        )
        raise HTTPException(500, HINT_FAILED)
    except Exception:
        logger.exception("Hint API error", extra={"component": "hint"})
        raise HTTPException(500, HINT_FAILED)

    translation = translations[0] if translations else ""
    if not translation:
        raise HTTPException(500, "翻訳結果を取得できませんでした")

    hint = hints.build_hint(translation, exclude)
    return {"hint": hints.format_hint(hint)}
