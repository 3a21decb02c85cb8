from __future__ import annotations

from typing import ClassVar


class NameGenerationError(RuntimeError):
    """Base class for failures surfaced by the name generation pipeline.

    Each subclass carries a stable ``kind`` tag, the HTTP status it maps to and a
    fixed user-facing message. ``str(exc)`` keeps the internal detail for logs;
    callers must only ever show ``public_message``.
    """

    kind: ClassVar[str] = "UnknownFailure"
    status_code: ClassVar[int] = 500
    public_message: ClassVar[str] = "상품명 생성 중 오류가 발생했습니다. 다시 시도해주세요."


class MissingFieldError(NameGenerationError):
    """Raised when category or keywords are missing or blank."""

    kind = "MissingField"
    status_code = 400
    public_message = "카테고리와 키워드는 필수 입력 항목입니다."


class InvalidFieldError(NameGenerationError):
    """Raised when a request field has the wrong shape."""

    kind = "InvalidField"
    status_code = 400
    public_message = "입력 형식이 올바르지 않습니다."


class ProviderFailureError(NameGenerationError):
    """Raised when the completion service fails or returns no text."""

    kind = "ProviderFailure"
    public_message = "AI 응답을 받지 못했습니다. 다시 시도해주세요."


class ResponseParseError(NameGenerationError):
    """Raised when the completion text is not a usable candidate list."""

    kind = "ParseError"
    public_message = "AI 응답을 파싱하지 못했습니다. 다시 시도해주세요."


class UnknownGenerationError(NameGenerationError):
    """Raised for any unexpected failure inside the pipeline."""
