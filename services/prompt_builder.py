from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from services.request_validator import GenerationRequest

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "당신은 한국 이커머스 플랫폼(쿠팡, 네이버 스마트스토어) 상품명 SEO 전문가입니다. "
    "JSON 형식으로만 응답합니다."
)

PROMPT_TEMPLATE = """
당신은 쿠팡과 네이버 스마트스토어 상품명 SEO 전문가입니다.

다음 상품 정보를 기반으로 검색 최적화된 상품명 10개를 생성해주세요.

## 상품 정보
- 카테고리: {category}
- 핵심 키워드: {keywords}
{features_line}
## 상품명 생성 규칙
1. 쿠팡/네이버 검색 알고리즘 최적화: 핵심 키워드를 상품명 앞쪽에 배치
2. 50자 이내 권장 (최대 100자)
3. 패턴: [수식어] + 핵심키워드 + 상품특징 + 용량/수량/규격
4. 클릭률 높은 수식어 활용: 프리미엄, 인기, 베스트, 1+1, 대용량, 국내산, 무료배송 등
5. 자연스러운 한국어 표현
6. 각 상품명은 서로 다른 키워드 조합과 수식어 사용
7. 실제 쿠팡/스마트스토어에서 잘 팔리는 상품명 스타일 참고

## 응답 형식
반드시 아래 JSON 형식으로만 응답하세요. 다른 텍스트는 포함하지 마세요.

[
  {{
    "name": "상품명",
    "keywords": ["포함된", "주요", "키워드"],
    "seoScore": 85
  }}
]

seoScore는 70~100 사이 정수로, 다음 기준으로 채점:
- 핵심 키워드 포함 여부 (30점)
- 키워드 앞배치 여부 (20점)
- 적절한 글자수 (20점)
- 수식어 활용 (15점)
- 구매 전환 유도 표현 (15점)
""".strip()

FEATURES_LINE = "- 특징/장점: {features}\n"

Role = Literal["system", "user"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


PromptMessages = tuple[ChatMessage, ChatMessage]


class PromptBuilder:
    """Render the system and user messages for one generation request."""

    def __init__(self, max_keywords_chars: int = 500) -> None:
        self._max_keywords_chars = max_keywords_chars

    def _truncate(self, text: str) -> str:
        if len(text) <= self._max_keywords_chars:
            return text
        logger.debug("Truncating keywords from %s to %s chars", len(text), self._max_keywords_chars)
        return text[: self._max_keywords_chars].rstrip()

    def build(self, request: GenerationRequest) -> PromptMessages:
        features_text = ", ".join(item for item in request.features if item)
        features_line = FEATURES_LINE.format(features=features_text) if features_text else ""

        prompt = PROMPT_TEMPLATE.format(
            category=request.category,
            keywords=self._truncate(request.keywords),
            features_line=features_line,
        )
        return (
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=prompt),
        )
