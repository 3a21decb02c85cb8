from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from services.errors import ResponseParseError

logger = logging.getLogger(__name__)

SCORE_BAND = (70, 100)


@dataclass(frozen=True)
class NameCandidate:
    name: str
    keywords: list[str]
    seo_score: int


def _coerce_score(value: object, index: int) -> int:
    # bool is an int subclass; a model answering `true` is not a score.
    if isinstance(value, bool):
        raise ResponseParseError(f"Candidate {index} has a boolean seoScore.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ResponseParseError(f"Candidate {index} has a non-integer seoScore.")


def _candidate(item: object, index: int) -> NameCandidate:
    if not isinstance(item, dict):
        raise ResponseParseError(f"Candidate {index} is not an object.")

    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ResponseParseError(f"Candidate {index} is missing a name.")

    keywords = item.get("keywords")
    if not isinstance(keywords, list) or not all(isinstance(word, str) for word in keywords):
        raise ResponseParseError(f"Candidate {index} has invalid keywords.")

    score = _coerce_score(item.get("seoScore"), index)
    low, high = SCORE_BAND
    if not low <= score <= high:
        logger.warning("Candidate %s reported seoScore %s outside %s-%s", index, score, low, high)

    return NameCandidate(
        name=name.strip(),
        keywords=[word.strip() for word in keywords if word.strip()],
        seo_score=score,
    )


def normalize(json_text: str) -> list[NameCandidate]:
    """Parse the extracted completion text into an ordered candidate list.

    Scores are forwarded as the model reported them; only their type is checked.
    Any structural problem fails the whole response.
    """
    try:
        payload = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise ResponseParseError("Completion text is not valid JSON.") from exc

    if not isinstance(payload, list):
        raise ResponseParseError("Completion JSON is not an array.")
    if not payload:
        raise ResponseParseError("Completion JSON array is empty.")

    return [_candidate(item, index) for index, item in enumerate(payload)]
