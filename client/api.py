from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "네트워크 오류가 발생했습니다. 다시 시도해주세요."
FALLBACK_ERROR_MESSAGE = "오류가 발생했습니다."


class NameGeneratorAPIError(RuntimeError):
    """Raised when the generation API rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class GeneratedName:
    name: str
    keywords: list[str]
    seo_score: int


class NameGeneratorClient:
    """Call the name generation HTTP API."""

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 90.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_prefix = api_prefix
        self._timeout = timeout
        self._transport = transport

    async def generate(
        self,
        category: str,
        keywords: str,
        features: Sequence[str] = (),
    ) -> list[GeneratedName]:
        body = {
            "category": category,
            "keywords": keywords.strip(),
            "features": [item for item in features if item],
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(f"{self._api_prefix}/generate", json=body)
        except httpx.HTTPError as exc:
            logger.warning("Generation request to %s failed: %s", self._base_url, exc)
            raise NameGeneratorAPIError(NETWORK_ERROR_MESSAGE) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise NameGeneratorAPIError(FALLBACK_ERROR_MESSAGE, response.status_code) from exc

        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise NameGeneratorAPIError(message or FALLBACK_ERROR_MESSAGE, response.status_code)

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise NameGeneratorAPIError(FALLBACK_ERROR_MESSAGE, response.status_code)

        try:
            return [
                GeneratedName(
                    name=item["name"],
                    keywords=list(item.get("keywords", [])),
                    seo_score=item["seoScore"],
                )
                for item in results
            ]
        except (KeyError, TypeError, AttributeError) as exc:
            raise NameGeneratorAPIError(FALLBACK_ERROR_MESSAGE, response.status_code) from exc
