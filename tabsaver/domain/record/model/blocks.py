"""Builders for the JSON shapes of property values and content blocks."""

from typing import Any

UNTITLED_RECORD = "Untitled"

DEGRADE_HEADING = "Saved details (matching database properties were missing):"


def text_run(content: str, link: str | None = None) -> dict[str, Any]:
    text: dict[str, Any] = {"content": content}
    if link:
        text["link"] = {"url": link}
    return {"type": "text", "text": text}


def title_value(title: str | None) -> dict[str, Any]:
    """Title property value: one run with the trimmed title, or "Untitled"."""
    safe = (title or "").strip()
    return {"title": [text_run(safe or UNTITLED_RECORD)]}


def url_value(url: str | None) -> dict[str, Any]:
    return {"url": url or None}


def paragraph(text: str) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {"rich_text": [text_run(text)]},
    }


def bullet(text: str, link: str | None = None) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "bulleted_list_item",
        "bulleted_list_item": {"rich_text": [text_run(text, link)]},
    }


def timestamp_bullet(label: str, source_url: str | None) -> dict[str, Any]:
    return bullet(f"- {label}", (source_url or "").strip() or None)


def degrade_note(missing_lines: list[str]) -> list[dict[str, Any]]:
    """Blocks recording values that had no matching schema field."""
    if not missing_lines:
        return []
    return [paragraph(DEGRADE_HEADING), *(paragraph(line) for line in missing_lines)]
