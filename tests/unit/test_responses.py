from app.core.responses import error_response, feed_response
from app.services.feed.assembler import assemble


def test_feed_response_uses_camel_case_and_omits_absent_fields():
    page = assemble(
        [
            {
                "mint": "MintA",
                "logoURI": "https://img.test/a.png",
                "contents": [{"content": "hi", "url": "https://x.com/1", "postedAt": "2025-01-01T00:00:00Z"}],
                "tokenSummary": {"summaryShort": "AI take"},
            }
        ]
    )
    body = feed_response(page)

    assert set(body) == {"data", "hasMore", "tokensMap"}
    assert body["hasMore"] is False
    post, summary = body["data"]
    assert post["kind"] == "text"
    assert post["sourceUrl"] == "https://x.com/1"
    assert post["createdAt"] == "2025-01-01T00:00:00Z"
    assert "updatedAt" in post
    assert "sourceUrl" not in summary
    assert body["tokensMap"]["MintA"]["logoURI"] == "https://img.test/a.png"
    assert "organicScore" not in body["tokensMap"]["MintA"]


def test_error_response_envelope():
    payload, status = error_response("UPSTREAM_ERROR", "Failed to fetch content", "trace-1", 500)
    assert status == 500
    assert payload["data"] is None
    assert payload["error"]["code"] == "UPSTREAM_ERROR"
    assert payload["error"]["details"] == {}
