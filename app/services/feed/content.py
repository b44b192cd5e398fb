from collections.abc import Mapping
from typing import Any

from app.schemas.feed import ContentKind, ContentRecord
from app.services.feed.resolvers import (
    first_identifier,
    first_text,
    resolve_author,
    resolve_citations,
    resolve_kind,
    resolve_timestamp,
)
from app.utils.hashing import ContentIdFactory

JUPITER_AUTHOR = "jupiter"

# (payload key, record kind, id suffix)
SUMMARY_SOURCES = (
    ("tokenSummary", ContentKind.summary, "token-summary"),
    ("newsSummary", ContentKind.news, "news-summary"),
)


def _entry_record(mint: str, entry: Mapping[str, Any], ids: ContentIdFactory, now: str) -> ContentRecord | None:
    body = (first_text(entry, ("content", "text")) or "").strip()
    if not body:
        return None

    return ContentRecord(
        id=first_identifier(entry, ("contentId", "id")) or ids.next_id(mint, body),
        mint=mint,
        kind=resolve_kind(entry),
        body=body,
        author=resolve_author(entry.get("submittedBy")),
        source_url=first_text(entry, ("url", "source")),
        citations=resolve_citations(entry.get("citations")),
        created_at=resolve_timestamp(entry, ("postedAt", "createdAt"), now),
        updated_at=resolve_timestamp(entry, ("updatedAt",), now),
    )


def _summary_record(
    mint: str, summary: Any, kind: ContentKind, suffix: str, now: str
) -> ContentRecord | None:
    if not isinstance(summary, Mapping):
        return None
    body = (first_text(summary, ("summaryFull", "summaryShort")) or "").strip()
    if not body:
        return None

    stamp = resolve_timestamp(summary, ("updatedAt",), now)
    return ContentRecord(
        id=f"{mint}-{suffix}",
        mint=mint,
        kind=kind,
        body=body,
        author=JUPITER_AUTHOR,
        citations=resolve_citations(summary.get("citations")),
        created_at=stamp,
        updated_at=stamp,
    )


def extract_content(
    mint: str, item: Mapping[str, Any], ids: ContentIdFactory, now: str
) -> list[ContentRecord]:
    """Flatten the free-form entries and AI summaries of one token item.

    Entries keep their upstream order and are followed by the token summary,
    then the news digest. Blank bodies are dropped.
    """
    records: list[ContentRecord] = []

    entries = item.get("contents")
    if isinstance(entries, list):
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            record = _entry_record(mint, entry, ids, now)
            if record is not None:
                records.append(record)

    for key, kind, suffix in SUMMARY_SOURCES:
        record = _summary_record(mint, item.get(key), kind, suffix, now)
        if record is not None:
            records.append(record)

    return records
