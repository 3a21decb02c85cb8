from __future__ import annotations

import json
from collections.abc import Sequence

import pytest

from services.completion_client import CompletionError
from services.prompt_builder import ChatMessage

GRANOLA_NAMES = [
    "유기농 그래놀라 500g 대용량 프리미엄 시리얼",
    "국내산 유기농 그래놀라 대용량 500g 아침식사",
    "베스트 유기농 그래놀라 500g 건강 간식",
    "유기농 그래놀라 1+1 500g 대용량 무료배송",
    "프리미엄 유기농 수제 그래놀라 500g",
    "인기 유기농 그래놀라 저당 500g 대용량",
    "유기농 오트 그래놀라 500g 다이어트 시리얼",
    "무료배송 유기농 그래놀라 500g 견과류 듬뿍",
    "유기농 그래놀라 대용량 500g 요거트 토핑",
    "건강한 아침 유기농 그래놀라 500g 1+1",
]


class StubCompletionClient:
    """Completion client double that records calls and replays a fixed reply."""

    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[Sequence[ChatMessage]] = []

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        if not self.reply:
            raise CompletionError("OpenAI returned empty response.")
        return self.reply


@pytest.fixture
def ten_candidates() -> list[dict[str, object]]:
    return [
        {"name": name, "keywords": ["유기농", "그래놀라"], "seoScore": 95 - index}
        for index, name in enumerate(GRANOLA_NAMES)
    ]


@pytest.fixture
def ten_candidates_json(ten_candidates: list[dict[str, object]]) -> str:
    return json.dumps(ten_candidates, ensure_ascii=False)


@pytest.fixture
def granola_payload() -> dict[str, object]:
    return {
        "category": "식품/건강식품",
        "keywords": "유기농 그래놀라",
        "features": ["500g 대용량"],
    }


@pytest.fixture
def stub_client_factory() -> type[StubCompletionClient]:
    return StubCompletionClient
