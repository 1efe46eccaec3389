"""Tests for sentence extraction and the RSS/NewsAPI fan-out."""
import asyncio

import httpx
import pytest

import feeds
from feeds import NoSentencesError, extract_sentences, pick_sentence
from models import RSS_FEEDS, CandidateSentence

RSS_DOC = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>テスト</title>
<item>
  <title>新製品</title>
  <description>本日は新しいスマートフォンが発表されました。詳細は後ほど…。短い。</description>
  <pubDate>Mon, 01 Jan 2024 00:00:00 +0900</pubDate>
</item>
</channel></rss>
"""

NEWS_API_BODY = {
    "status": "ok",
    "totalResults": 2,
    "articles": [
        {
            "title": "a",
            "description": "政府は来年度の予算案を閣議で決定しました。",
            "source": {"name": "NHK"},
            "publishedAt": "2024-01-02T03:04:05Z",
        },
        {"title": "b", "description": None, "source": {"name": "Asahi"}, "publishedAt": "2024-01-02T00:00:00Z"},
    ],
}


def _sentences(result):
    return [s.sentence for s in result]


def test_extract_keeps_only_short_complete_sentences():
    text = "これはテストです。それはすごいですね！今日は晴れです。"
    result = extract_sentences(text, "src", "tech", "2024-01-01")
    # "これはテストです。" is 9 characters and falls under the minimum
    assert _sentences(result) == ["それはすごいですね！今日は晴れです。"]
    assert result[0].source == "src"
    assert result[0].category == "tech"
    assert result[0].publishedAt == "2024-01-01"


def test_extract_rejects_markers_and_long_fragments():
    text = (
        "【速報】大きな地震が発生しました。"
        "続報は後ほどお伝えする予定です…。"
        "記事の一部です[続きを読む]ここまで。"
        + "あ" * 60 + "。"
        + "ちょうど十文字です。"
    )
    result = extract_sentences(text, "src", "world", "now")
    assert _sentences(result) == ["ちょうど十文字です。"]


def test_extract_length_bounds_are_inclusive():
    exactly_min = "あ" * 9
    exactly_max = "い" * 59
    result = extract_sentences(f"{exactly_min}。{exactly_max}。", "s", "food", "t")
    assert [len(s) for s in _sentences(result)] == [10, 60]


def test_extract_invariants_hold_for_mixed_text():
    text = "。。 。短。" + "あいうえおかきくけこさ。" * 3 + "…という話だ。" + "う" * 80
    for s in extract_sentences(text, "s", "news", "t"):
        assert 10 <= len(s.sentence) <= 60
        assert s.sentence.endswith("。")
        assert not any(m in s.sentence for m in ("…", "[", "【"))


def test_extract_trims_whitespace_around_fragments():
    result = extract_sentences("  東京では朝から雪が降っています  。", "s", "world", "t")
    assert _sentences(result) == ["東京では朝から雪が降っています。"]


def test_extract_empty_text():
    assert extract_sentences("", "s", "tech", "t") == []


def test_pick_sentence_uses_uniform_index():
    class FixedRng:
        def randrange(self, n):
            assert n == 3
            return 2

    sentences = [
        CandidateSentence(sentence=f"{i}番目の文章はここにあります。", source="s", category="tech", publishedAt="t")
        for i in range(3)
    ]
    assert pick_sentence(sentences, rng=FixedRng()) is sentences[2]


def test_pick_sentence_empty_raises():
    with pytest.raises(NoSentencesError):
        pick_sentence([])


def test_entry_text_prefers_plain_snippet():
    entry = {"summary": "<p>春の新作が&amp;登場しました。</p>"}
    assert feeds.entry_text(entry) == "春の新作が&登場しました。"


def test_entry_text_falls_back_to_content():
    entry = {"content": [{"value": "秋の限定メニューが始まりました。"}], "summary": ""}
    assert feeds.entry_text(entry) == "秋の限定メニューが始まりました。"


def test_entry_text_prefers_description_over_encoded_body(mock_upstream):
    doc = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
<channel><title>グルメ</title>
<item>
  <title>新作</title>
  <description>春の新作メニューが今日から登場しました。</description>
  <content:encoded><![CDATA[<p>本文の最初の段落がここに入ります。</p><p>記事の二つ目の段落もここに入ります。</p>]]></content:encoded>
</item>
</channel></rss>
"""
    only = RSS_FEEDS[0]
    mock_upstream(lambda request: httpx.Response(200, text=doc))

    async def run():
        async with feeds._client() as client:
            return await feeds.fetch_feed(client, only)

    assert _sentences(asyncio.run(run())) == ["春の新作メニューが今日から登場しました。"]


def test_entry_published_fallback_is_current_time():
    assert feeds.entry_published({"published": "Mon, 01 Jan 2024"}) == "Mon, 01 Jan 2024"
    assert feeds.entry_published({"updated": "2024-01-01T00:00:00Z"}) == "2024-01-01T00:00:00Z"
    assert feeds.entry_published({}).startswith("20")


def test_gather_skips_failing_feed(mock_upstream):
    broken = RSS_FEEDS[0].url

    def handler(request):
        if str(request.url) == broken:
            return httpx.Response(503)
        return httpx.Response(200, text=RSS_DOC)

    mock_upstream(handler)
    result = asyncio.run(feeds.gather_sentences())

    assert len(result) == len(RSS_FEEDS) - 1
    assert set(_sentences(result)) == {"本日は新しいスマートフォンが発表されました。"}
    assert RSS_FEEDS[0].source not in {s.source for s in result}
    assert result[0].publishedAt == "Mon, 01 Jan 2024 00:00:00 +0900"


def test_gather_survives_network_errors(mock_upstream):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    mock_upstream(handler)
    assert asyncio.run(feeds.gather_sentences()) == []


def test_gather_only_reads_first_ten_items(mock_upstream):
    items = "".join(
        f"<item><description>{i}件目のニュースをお届けします。</description></item>" for i in range(15)
    )
    doc = f'<?xml version="1.0"?><rss version="2.0"><channel><title>t</title>{items}</channel></rss>'
    only = RSS_FEEDS[0]

    def handler(request):
        return httpx.Response(200, text=doc)

    mock_upstream(handler)

    async def run():
        async with feeds._client() as client:
            return await feeds.fetch_feed(client, only)

    result = asyncio.run(run())
    assert len(result) == 10
    assert result[0].sentence == "0件目のニュースをお届けします。"
    assert {s.category for s in result} == {only.category}


def test_news_api_skipped_without_key(mock_upstream):
    requested = []

    def handler(request):
        requested.append(request.url.host)
        return httpx.Response(404)

    mock_upstream(handler)
    assert asyncio.run(feeds.gather_sentences()) == []
    assert "newsapi.org" not in requested


def test_news_api_skipped_for_placeholder_key(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "your_newsapi_key_here")
    assert feeds.get_news_api_key() is None


def test_news_api_sentences_are_tagged(mock_upstream, monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "secret")
    seen = {}

    def handler(request):
        if request.url.host == "newsapi.org":
            seen.update(request.url.params)
            return httpx.Response(200, json=NEWS_API_BODY)
        return httpx.Response(500)

    mock_upstream(handler)
    result = asyncio.run(feeds.gather_sentences())

    assert seen["domains"] == "nhk.or.jp,asahi.com,mainichi.jp,yomiuri.co.jp"
    assert seen["pageSize"] == "50"
    assert seen["apiKey"] == "secret"
    assert len(result) == 1
    assert result[0].sentence == "政府は来年度の予算案を閣議で決定しました。"
    assert result[0].source == "NHK"
    assert result[0].category == "news"
    assert result[0].publishedAt == "2024-01-02T03:04:05Z"


@pytest.mark.parametrize("response", [
    httpx.Response(401, json={"status": "error"}),
    httpx.Response(200, json={"status": "error", "articles": []}),
    httpx.Response(200, json={"status": "ok", "totalResults": 0, "articles": []}),
    httpx.Response(200, text="not json"),
])
def test_news_api_failures_yield_nothing(mock_upstream, monkeypatch, response):
    monkeypatch.setenv("NEWS_API_KEY", "secret")
    mock_upstream(lambda request: response if request.url.host == "newsapi.org" else httpx.Response(500))
    assert asyncio.run(feeds.gather_sentences()) == []
