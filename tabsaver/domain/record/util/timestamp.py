"""Playback-position helpers for timestamp notes."""

import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from tabsaver.domain.record.model.value import TimestampNote

VIDEO_HOSTS = frozenset({"www.youtube.com", "m.youtube.com", "youtu.be"})

_HOURS = re.compile(r"(\d+)h")
_MINUTES = re.compile(r"(\d+)m")
_SECONDS = re.compile(r"(\d+)s")
_BARE = re.compile(r"^(\d+)$")


def format_position(seconds: int) -> str:
    """Whole seconds as ``<minutes>:<two-digit seconds>`` (75 -> "1:15")."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def stamp_url(url: str, seconds: int) -> str:
    """``url`` with its ``t`` parameter set to ``<seconds>s``."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "t"]
    query.append(("t", f"{max(0, int(seconds))}s"))
    return urlunsplit(parts._replace(query=urlencode(query)))


def parse_position(value: str | None) -> int | None:
    """Parse ``123``, ``1m23s`` or ``1h2m3s``; None when empty or zero."""
    value = (value or "").strip()
    if not value:
        return None

    bare = _BARE.match(value)
    if bare:
        total = int(bare.group(1))
    else:
        total = 0
        for pattern, factor in ((_HOURS, 3600), (_MINUTES, 60), (_SECONDS, 1)):
            match = pattern.search(value)
            if match:
                total += int(match.group(1)) * factor
    return total or None


def position_from_url(url: str) -> int | None:
    try:
        query = dict(parse_qsl(urlsplit(url).query))
    except ValueError:
        return None
    return parse_position(query.get("t"))


def is_video_url(url: str | None) -> bool:
    if not url:
        return False
    try:
        return urlsplit(url).hostname in VIDEO_HOSTS
    except ValueError:
        return False


def note_at(url: str, seconds: int) -> TimestampNote:
    """Timestamp note for ``seconds`` into the video at ``url``."""
    return TimestampNote(formatted_label=format_position(seconds), source_url=stamp_url(url, seconds))
