"""Pydantic schemas, constants, and static data for Eisaku."""
from typing import Optional, List
from pydantic import BaseModel

# --- Constants ---
CATEGORIES = ("tech", "culture", "food", "fashion", "world", "news")

SENTENCE_MIN_LEN = 10
SENTENCE_MAX_LEN = 60
SENTENCE_TERMINATOR = "。"
REJECT_MARKERS = ("…", "[", "【")
ITEMS_PER_FEED = 10

NEWS_API_URL = "https://newsapi.org/v2/everything"
NEWS_API_DOMAINS = "nhk.or.jp,asahi.com,mainichi.jp,yomiuri.co.jp"
NEWS_API_PAGE_SIZE = 50
NEWS_API_PLACEHOLDER = "your_newsapi_key_here"

MAX_KEYWORDS = 5
MAX_GRAMMAR_PATTERNS = 2

# --- Pydantic Models ---

class FeedSource(BaseModel):
    url: str
    source: str
    category: str

    model_config = {"frozen": True}


class CandidateSentence(BaseModel):
    sentence: str
    source: str
    category: str
    publishedAt: str


class HintRequest(BaseModel):
    sentence: Optional[str] = None


class Hint(BaseModel):
    keywords: List[str] = []
    grammar_patterns: List[str] = []


# --- Static Data ---

RSS_FEEDS = (
    # テクノロジー
    FeedSource(url="https://gigazine.net/news/rss_2.0/", source="GIGAZINE", category="tech"),
    FeedSource(url="https://rss.itmedia.co.jp/rss/2.0/itmedia_all.xml", source="ITmedia", category="tech"),
    # カルチャー・エンタメ
    FeedSource(url="https://natalie.mu/music/feed/news", source="音楽ナタリー", category="culture"),
    FeedSource(url="https://natalie.mu/eiga/feed/news", source="映画ナタリー", category="culture"),
    FeedSource(url="https://www.cinra.net/feed/reader", source="CINRA", category="culture"),
    # 飲食・グルメ
    FeedSource(url="https://www.gnavi.co.jp/dressing/feed/", source="dressing", category="food"),
    FeedSource(url="https://macaro-ni.jp/feed", source="macaroni", category="food"),
    # ファッション
    FeedSource(url="https://www.wwdjapan.com/feed", source="WWD JAPAN", category="fashion"),
    FeedSource(url="https://www.fashionsnap.com/feed/", source="FASHIONSNAP", category="fashion"),
    # 世界・国際
    FeedSource(url="https://www.bbc.com/japanese/index.xml", source="BBC Japan", category="world"),
    FeedSource(url="https://www.cnn.co.jp/rss/index.rdf", source="CNN Japan", category="world"),
)

# Articles, prepositions, auxiliaries and contraction fragments
STOP_WORDS = frozenset([
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "shall", "can", "need", "dare",
    "ought", "used", "to", "of", "in", "for", "on", "with", "at", "by",
    "from", "as", "into", "through", "during", "before", "after", "above",
    "below", "between", "under", "again", "further", "then", "once", "here",
    "there", "when", "where", "why", "how", "all", "each", "few", "more",
    "most", "other", "some", "such", "no", "nor", "not", "only", "own",
    "same", "so", "than", "too", "very", "just", "and", "but", "if", "or",
    "because", "until", "while", "although", "though", "that", "which",
    "who", "whom", "this", "these", "those", "it", "its", "i", "you", "he",
    "she", "we", "they", "me", "him", "her", "us", "them", "my", "your",
    "his", "our", "their", "what", "am", "also", "about", "up", "out",
    "over", "down", "off", "any", "both", "either", "neither", "many",
    "much", "s", "t", "d", "ll", "ve", "re", "m",
])

# Companies, brands, products and places
PROPER_NOUNS = frozenset([
    "google", "apple", "amazon", "microsoft", "meta", "facebook", "twitter",
    "instagram", "youtube", "netflix", "spotify", "uber", "airbnb", "tesla",
    "sony", "nintendo", "toyota", "honda", "nissan", "mazda", "subaru",
    "panasonic", "sharp", "toshiba", "hitachi", "fujitsu", "nec", "canon",
    "nikon", "olympus", "yamaha", "kawasaki", "suzuki", "mitsubishi",
    "softbank", "docomo", "kddi", "rakuten", "line", "mercari", "zozo",
    "uniqlo", "muji", "daiso", "lawson", "familymart", "seven", "eleven",
    "starbucks", "mcdonalds", "disney", "pixar", "marvel", "dc", "warner",
    "universal", "paramount", "fox", "hbo", "bbc", "cnn", "nhk",
    "samsung", "lg", "huawei", "xiaomi", "oppo", "vivo", "oneplus",
    "intel", "amd", "nvidia", "qualcomm", "arm", "ibm", "oracle", "sap",
    "salesforce", "adobe", "zoom", "slack", "dropbox", "github", "gitlab",
    "openai", "anthropic", "deepmind", "chatgpt", "gpt", "claude",
    "iphone", "ipad", "mac", "macbook", "imac", "airpods", "apple watch",
    "android", "windows", "linux", "ios", "macos", "chrome", "safari", "firefox",
    "japan", "tokyo", "osaka", "kyoto", "america", "usa", "china", "korea",
    "europe", "asia", "africa",
])
