from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from services.errors import InvalidFieldError, MissingFieldError

logger = logging.getLogger(__name__)

MAX_FEATURES = 3


@dataclass(frozen=True)
class GenerationRequest:
    category: str
    keywords: str
    features: tuple[str, ...] = ()


def _required_text(payload: Mapping[str, object], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise MissingFieldError(f"{field} is required.")
    return value.strip()


def _features(payload: Mapping[str, object]) -> tuple[str, ...]:
    raw = payload.get("features")
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise InvalidFieldError("features must be a list of strings.")
    # null entries count as blanks.
    if not all(item is None or isinstance(item, str) for item in raw):
        raise InvalidFieldError("features must be a list of strings.")

    cleaned = [item.strip() for item in raw if item and item.strip()]
    if len(cleaned) > MAX_FEATURES:
        logger.debug("Dropping %s features beyond the first %s", len(cleaned) - MAX_FEATURES, MAX_FEATURES)
    return tuple(cleaned[:MAX_FEATURES])


def validate(payload: Mapping[str, object]) -> GenerationRequest:
    """Check a raw request payload and return a trimmed ``GenerationRequest``."""
    return GenerationRequest(
        category=_required_text(payload, "category"),
        keywords=_required_text(payload, "keywords"),
        features=_features(payload),
    )
