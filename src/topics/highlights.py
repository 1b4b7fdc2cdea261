from __future__ import annotations

"""Highlight rendering helpers for match spans."""

from typing import Iterable

from src.topics.types import MatchResult, MatchSpan


def merge_spans(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
    """Union overlapping or touching spans into ordered, disjoint spans."""
    merged: list[MatchSpan] = []
    for span in sorted(spans, key=lambda item: (item.start, item.end)):
        if span.start >= span.end:
            continue
        if merged and span.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = MatchSpan(start=last.start, end=max(last.end, span.end))
            continue
        merged.append(span)
    return merged


def mark_text(
    text: str,
    spans: Iterable[MatchSpan],
    open_marker: str = "[[",
    close_marker: str = "]]",
) -> str:
    """Wrap every highlighted region of text in markers."""
    parts: list[str] = []
    position = 0
    for span in merge_spans(spans):
        start = max(span.start, position)
        end = min(span.end, len(text))
        if start >= end:
            continue
        parts.append(text[position:start])
        parts.append(f"{open_marker}{text[start:end]}{close_marker}")
        position = end
    parts.append(text[position:])
    return "".join(parts)


def build_highlights(
    text: str,
    result: MatchResult,
    max_snippets: int = 3,
    window: int = 80,
) -> list[str]:
    """Extract marked context snippets around matched regions."""
    if not text.strip() or not result.matched_groups:
        return []
    regions = merge_spans(result.spans())
    highlights: list[str] = []
    covered_until = -1
    for region in regions:
        if region.end <= covered_until:
            continue
        start = max(0, region.start - window)
        end = min(len(text), region.end + window)
        inside = [
            MatchSpan(start=span.start - start, end=span.end - start)
            for span in regions
            if span.start >= start and span.end <= end
        ]
        snippet = mark_text(text[start:end], inside).strip()
        if not snippet:
            continue
        highlights.append(snippet)
        covered_until = end
        if len(highlights) >= max_snippets:
            break
    return highlights
