"""Keyword and grammar-pattern hints derived from an English translation."""
import re as _re
from typing import Callable, List, Set, Tuple

from log import get_logger

logger = get_logger("eisaku.hints")

from models import STOP_WORDS, PROPER_NOUNS, MAX_KEYWORDS, MAX_GRAMMAR_PATTERNS, Hint
from translator import translate

_KATAKANA_RE = _re.compile(r"[\u30A0-\u30FF]+")
_NUMERIC_RE = _re.compile(r"[0-9]+")
_PUNCT_RE = _re.compile(r"[.,!?;:'\"()\[\]{}]")

KEYWORDS_HEADER = "【使える単語・熟語】"
GRAMMAR_HEADER = "【文法表現】"
BASIC_VOCABULARY_MESSAGE = "この文は基本的な単語で構成されています。"


def extract_katakana(text: str) -> List[str]:
    return [k for k in _KATAKANA_RE.findall(text) if len(k) >= 2]


def exclusion_words(translations: List[str]) -> Set[str]:
    """English words for katakana loanwords; obvious from the source, so not hints."""
    words = set()
    for translation in translations:
        cleaned = _PUNCT_RE.sub("", translation.lower()).strip()
        for word in cleaned.split():
            if len(word) > 1:
                words.add(word)
    return words


async def katakana_exclusions(sentence: str, api_key: str) -> Set[str]:
    katakana = extract_katakana(sentence)
    if not katakana:
        return set()
    try:
        return exclusion_words(await translate(katakana, api_key))
    except Exception:
        logger.warning("Katakana translation failed; no exclusions", exc_info=True, extra={"component": "hint"})
        return set()


def extract_keywords(translation: str, exclude: Set[str]) -> List[str]:
    keywords = []
    for word in _PUNCT_RE.sub(" ", translation.lower()).split():
        if len(word) <= 2:
            continue
        if word in STOP_WORDS or word in PROPER_NOUNS or word in exclude:
            continue
        if _NUMERIC_RE.fullmatch(word):
            continue
        if word not in keywords:
            keywords.append(word)
    return keywords[:MAX_KEYWORDS]


# \w means ASCII word characters only; accented or CJK letters never complete a pattern.
_WAS_PASSIVE_RE = _re.compile(r"was \w+ed", _re.ASCII)
_PRESENT_PASSIVE_RE = _re.compile(r"(?:is|are) \w+ed|(?:is|are) being", _re.ASCII)
_ING_RE = _re.compile(r"\w+ing", _re.ASCII)
_REPORTED_THAT_RE = _re.compile(r"(?:said|reported|announced|believed|thought|known) that")
_INFINITIVE_RE = _re.compile(r"\w+ to \w+", _re.ASCII)


def _contains(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(n in text for n in needles)


def _perfect(text: str) -> bool:
    return _contains("have ", "has ")(text) and not _contains("have to", "has to")(text)


def _past_passive(text: str) -> bool:
    return "was " in text and _WAS_PASSIVE_RE.search(text) is not None


def _present_passive(text: str) -> bool:
    return _contains("is ", "are ")(text) and _PRESENT_PASSIVE_RE.search(text) is not None


def _progressive(text: str) -> bool:
    return _ING_RE.search(text) is not None and _contains("is ", "are ", "was ", "were ")(text)


def _that_clause(text: str) -> bool:
    return " that " in text and _REPORTED_THAT_RE.search(text) is not None


def _infinitive(text: str) -> bool:
    return " to " in text and _INFINITIVE_RE.search(text) is not None


# Checked in order; earlier rules win when more than MAX_GRAMMAR_PATTERNS match.
GRAMMAR_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (_contains("will ", "'ll "), "will + 動詞原形（未来形）"),
    (_contains("have been", "has been"), "have/has been + 過去分詞（現在完了受動態）"),
    (_perfect, "have/has + 過去分詞（現在完了形）"),
    (_contains("have to", "has to"), "have to + 動詞原形（〜しなければならない）"),
    (_past_passive, "was/were + 過去分詞（過去受動態）"),
    (_present_passive, "is/are + 過去分詞（現在受動態）"),
    (_contains("going to "), "be going to + 動詞原形（〜する予定）"),
    (_contains("would "), "would + 動詞原形（〜だろう/仮定法）"),
    (_contains("could "), "could + 動詞原形（〜できた/可能性）"),
    (_contains("should "), "should + 動詞原形（〜すべき）"),
    (_contains("must "), "must + 動詞原形（〜しなければならない）"),
    (_contains("may ", "might "), "may/might + 動詞原形（〜かもしれない）"),
    (_progressive, "be + 動詞ing（進行形）"),
    (_that_clause, "that節（〜ということ）"),
    (_infinitive, "to不定詞"),
)


def detect_grammar_patterns(translation: str) -> List[str]:
    text = translation.lower()
    patterns = [label for check, label in GRAMMAR_RULES if check(text)]
    return patterns[:MAX_GRAMMAR_PATTERNS]


def build_hint(translation: str, exclude: Set[str]) -> Hint:
    return Hint(
        keywords=extract_keywords(translation, exclude),
        grammar_patterns=detect_grammar_patterns(translation),
    )


def format_hint(hint: Hint) -> str:
    sections = []
    if hint.keywords:
        sections.append("\n".join([KEYWORDS_HEADER] + [f"• {w}" for w in hint.keywords]))
    if hint.grammar_patterns:
        sections.append("\n".join([GRAMMAR_HEADER] + [f"• {p}" for p in hint.grammar_patterns]))
    if not sections:
        return BASIC_VOCABULARY_MESSAGE
    return "\n\n".join(sections)
