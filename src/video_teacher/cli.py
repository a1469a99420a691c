from __future__ import annotations

import sys

from dotenv import load_dotenv

from .config import configure_logging
from .url_parser import build_embed_url, build_timestamped_url, parse_youtube_url


def _preview(text: str | None, limit: int = 200) -> str:
    if not text:
        return ""
    normalized = text.strip()
    if len(normalized) <= limit:
        return normalized
    return normalized[:limit] + "..."


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    url = args[0].strip() if args else input("Enter YouTube URL: ").strip()

    if not url:
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        print(f"Using test URL: {url}")

    parsed = parse_youtube_url(url)
    if not parsed.is_valid:
        print(f"Invalid YouTube URL: {_preview(url)}")
        sys.exit(1)

    print("\n=== VIDEO ===\n")
    print(f"video_id: {parsed.video_id}")
    print(f"canonical_url: {parsed.canonical_url}")
    print(f"embed_url: {build_embed_url(parsed.video_id, start_time=parsed.start_time or 0)}")
    if parsed.start_time is not None:
        print(f"start_time: {parsed.start_time}")
        print(f"timestamped_url: {build_timestamped_url(parsed.video_id, parsed.start_time)}")
    if parsed.playlist_id:
        print(f"playlist_id: {parsed.playlist_id}")


if __name__ == "__main__":
    main()
