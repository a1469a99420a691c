from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from urllib.error import URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from .errors import YouTubeAPIError
from .url_parser import CANONICAL_WATCH_URL


logger = logging.getLogger(__name__)


OEMBED_ENDPOINT = "https://www.youtube.com/oembed"


@dataclass(frozen=True)
class VideoInfo:
    video_id: str
    title: str
    author: str
    thumbnail_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "videoId": self.video_id,
            "title": self.title,
            "author": self.author,
            "thumbnailUrl": self.thumbnail_url,
        }


def _fetch_oembed(canonical_url: str, timeout: int) -> dict:
    query = urlencode({"url": canonical_url, "format": "json"})
    req = Request(f"{OEMBED_ENDPOINT}?{query}", headers={"User-Agent": "Mozilla/5.0"})
    with urlopen(req, timeout=timeout) as resp:  # nosec - url is rebuilt from a validated video id
        return json.loads(resp.read().decode("utf-8", errors="replace"))


def fetch_video_info(video_id: str, *, timeout: int = 15) -> VideoInfo:
    canonical_url = CANONICAL_WATCH_URL.format(video_id=video_id)
    try:
        data = _fetch_oembed(canonical_url, timeout)
    except (URLError, TimeoutError, ValueError) as exc:
        logger.warning("oEmbed lookup failed video_id=%s error=%s", video_id, type(exc).__name__)
        raise YouTubeAPIError(f"could not fetch metadata for {video_id}") from exc

    if not isinstance(data, dict):
        raise YouTubeAPIError(f"unexpected oEmbed response for {video_id}")

    return VideoInfo(
        video_id=video_id,
        title=str(data.get("title") or "").strip(),
        author=str(data.get("author_name") or "").strip(),
        thumbnail_url=str(data.get("thumbnail_url") or "").strip(),
    )
