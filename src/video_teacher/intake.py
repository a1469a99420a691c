from __future__ import annotations

import logging
from typing import Any

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import IntakeConfig, configure_logging, load_intake_config
from .errors import ValidationError, VideoTeacherError
from .url_parser import build_embed_url, build_timestamped_url, parse_youtube_url
from .video_info import fetch_video_info


logger = logging.getLogger(__name__)


MISSING_URL_MESSAGE = "Please enter a YouTube URL"
INVALID_URL_MESSAGE = (
    "Invalid YouTube URL format. Supports all YouTube URL formats "
    "including youtu.be, mobile, shorts, embed, and more."
)


def _read_url(value: Any, max_chars: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(MISSING_URL_MESSAGE)
    if len(value) > max_chars:
        raise ValidationError(f"URL is too long (max {max_chars} characters)")
    return value


def resolve_payload(url: str, cfg: IntakeConfig, *, lookup: bool = False) -> dict[str, Any]:
    parsed = parse_youtube_url(url)
    if not parsed.is_valid:
        logger.info("rejected intake url=%r", url[:200])
        raise ValidationError(INVALID_URL_MESSAGE)

    payload: dict[str, Any] = {
        "result": parsed.to_dict(),
        "embedUrl": build_embed_url(parsed.video_id, start_time=parsed.start_time or 0),
        "timestampedUrl": (
            build_timestamped_url(parsed.video_id, parsed.start_time) if parsed.start_time is not None else None
        ),
    }
    if lookup:
        info = fetch_video_info(parsed.video_id, timeout=cfg.oembed_timeout_sec)
        payload["video"] = info.to_dict()

    logger.info("resolved intake video_id=%s lookup=%s", parsed.video_id, lookup)
    return payload


def create_wsgi_application(cfg: IntakeConfig | None = None) -> Flask:
    load_dotenv()
    configure_logging()
    cfg = cfg or load_intake_config()
    app = Flask(__name__)

    @app.errorhandler(VideoTeacherError)
    def handle_video_teacher_error(exc: VideoTeacherError) -> tuple[Response, int]:
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception) -> HTTPException | tuple[Response, int]:
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("unexpected error handling %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error", "code": "INTERNAL_ERROR"}), 500

    @app.get("/")
    def health() -> tuple[str, int]:
        return "ok", 200

    @app.post("/api/resolve")
    def resolve_post() -> tuple[Response, int]:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError(MISSING_URL_MESSAGE)
        url = _read_url(body.get("url"), cfg.max_input_chars)
        return jsonify(resolve_payload(url, cfg, lookup=body.get("lookup") is True)), 200

    @app.get("/api/resolve")
    def resolve_get() -> tuple[Response, int]:
        url = _read_url(request.args.get("url"), cfg.max_input_chars)
        return jsonify(resolve_payload(url, cfg)), 200

    return app


def run_server() -> None:
    load_dotenv()
    cfg = load_intake_config()
    app = create_wsgi_application(cfg)
    logger.info("starting intake server host=%s port=%s", cfg.host, cfg.port)
    app.run(host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    run_server()
