from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import parse_qs, unquote, urlencode, urlsplit


logger = logging.getLogger(__name__)


CANONICAL_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube.com/embed/{video_id}"

VIDEO_ID_RE = re.compile(r"[A-Za-z0-9_-]{11}")

_SCHEME = r"^(?:https?://)?"
# Any single subdomain label (www., m., music., gaming.) in front of youtube.com.
_YOUTUBE_HOST = r"(?:[A-Za-z0-9-]+\.)?youtube\.com"
# The captured id must not run on into a 12th identifier character.
_ID = r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"


def _shape(pattern: str) -> re.Pattern[str]:
    return re.compile(_SCHEME + pattern + _ID, re.IGNORECASE)


class VideoShape(Enum):
    # tried in declaration order, first match wins
    WATCH = _shape(_YOUTUBE_HOST + r"/watch\?v=")
    SHORT_LINK = _shape(r"youtu\.be/")
    EMBED = _shape(_YOUTUBE_HOST + r"/embed/")
    MOBILE = _shape(r"m\.youtube\.com/watch\?v=")
    GAMING = _shape(_YOUTUBE_HOST + r"/gaming/watch\?v=")
    TV = _shape(_YOUTUBE_HOST + r"/tv/watch/")
    MUSIC = _shape(r"music\.youtube\.com/watch\?v=")
    SHORTS = _shape(_YOUTUBE_HOST + r"/shorts/")
    LIVE = _shape(_YOUTUBE_HOST + r"/live/")
    ATTRIBUTION = _shape(_YOUTUBE_HOST + r"/attribution_link\?.*[?&]v=")
    WATCH_PARAM_NOT_FIRST = _shape(_YOUTUBE_HOST + r"/watch\?.*[?&]v=")

    def match(self, text: str) -> str | None:
        # attribution links usually carry the watch path percent-encoded in `u=`
        candidate = unquote(text) if self is VideoShape.ATTRIBUTION else text
        found = self.value.search(candidate)
        return found.group(1) if found else None


@dataclass(frozen=True)
class ParseResult:
    video_id: str
    start_time: int | None
    playlist_id: str | None
    is_valid: bool
    original_input: str
    canonical_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "videoId": self.video_id,
            "startTime": self.start_time,
            "playlistId": self.playlist_id,
            "isValid": self.is_valid,
            "originalUrl": self.original_input,
            "normalizedUrl": self.canonical_url,
        }


def extract_video_id(text: str) -> str | None:
    """Return the 11-character video id behind ``text`` or ``None``.

    Accepts a bare id or any of the URL shapes in :class:`VideoShape`.
    The first shape that matches wins; malformed input is not an error.
    """
    if not isinstance(text, str):
        return None
    cleaned = text.strip()
    if not cleaned:
        return None

    if VIDEO_ID_RE.fullmatch(cleaned):
        return cleaned

    for shape in VideoShape:
        video_id = shape.match(cleaned)
        if video_id:
            logger.debug("matched shape=%s video_id=%s", shape.name, video_id)
            return video_id

    logger.debug("no youtube video id in input=%r", cleaned[:200])
    return None


_COMPOUND_TIME_RE = re.compile(r"(?:([0-9]+)h)?(?:([0-9]+)m)?(?:([0-9]+)s)?", re.IGNORECASE)
_COLON_TIME_RE = re.compile(r"[0-9]+(?::[0-9]+){1,2}")


def parse_time_parameter(value: str | None) -> int | None:
    if not value:
        return None
    value = value.strip()

    if value.isascii() and value.isdigit():
        return int(value)

    match = _COMPOUND_TIME_RE.fullmatch(value)
    if match and any(match.groups()):
        hours, minutes, seconds = (int(part or 0) for part in match.groups())
        return hours * 3600 + minutes * 60 + seconds

    if _COLON_TIME_RE.fullmatch(value):
        total = 0
        for power, field in enumerate(reversed(value.split(":"))):
            total += int(field) * 60**power
        return total

    return None


_QUERY_FALLBACK_RE = re.compile(r"[?&](t|start|list)=([^&#]*)")


def _query_params(text: str) -> dict[str, str]:
    try:
        query = urlsplit(text).query
        return {key: values[0] for key, values in parse_qs(query).items()}
    except ValueError:
        logger.debug("urlsplit failed, falling back to regex input=%r", text[:200])

    params: dict[str, str] = {}
    for match in _QUERY_FALLBACK_RE.finditer(text):
        if match.group(2):
            params.setdefault(match.group(1), unquote(match.group(2)))
    return params


def parse_youtube_url(text: str) -> ParseResult:
    raw = text if isinstance(text, str) else ""
    video_id = extract_video_id(raw)
    start_time: int | None = None
    playlist_id: str | None = None

    if video_id and "?" in raw:
        params = _query_params(raw.strip())
        raw_time = params.get("t") or params.get("start")
        if raw_time:
            start_time = parse_time_parameter(raw_time)
        playlist_id = params.get("list") or None

    return ParseResult(
        video_id=video_id or "",
        start_time=start_time,
        playlist_id=playlist_id,
        is_valid=video_id is not None,
        original_input=raw,
        canonical_url=CANONICAL_WATCH_URL.format(video_id=video_id) if video_id else raw,
    )


def is_valid_youtube_url(text: str) -> bool:
    return extract_video_id(text) is not None


def normalize_youtube_url(text: str) -> str | None:
    parsed = parse_youtube_url(text)
    return parsed.canonical_url if parsed.is_valid else None


def build_timestamped_url(video_id: str, start_time: int) -> str:
    return f"{CANONICAL_WATCH_URL.format(video_id=video_id)}&t={start_time}s"


def build_embed_url(video_id: str, *, start_time: int = 0, autoplay: bool = False) -> str | None:
    resolved = extract_video_id(video_id)
    if not resolved:
        return None
    query = urlencode(
        {
            "autoplay": "1" if autoplay else "0",
            "start": str(max(start_time, 0)),
            "rel": "0",
            "modestbranding": "1",
            "enablejsapi": "1",
        }
    )
    return f"{EMBED_URL.format(video_id=resolved)}?{query}"
