from __future__ import annotations

from typing import Any


class VideoTeacherError(RuntimeError):
    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.code}


class ValidationError(VideoTeacherError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400, "VALIDATION_ERROR")


class YouTubeAPIError(VideoTeacherError):
    def __init__(self, message: str) -> None:
        super().__init__(f"YouTube API error: {message}", 503, "YOUTUBE_API_ERROR")
