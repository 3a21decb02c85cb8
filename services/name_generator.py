from __future__ import annotations

import logging
from collections.abc import Mapping

from services import request_validator, response_extractor, result_validator
from services.completion_client import CompletionClient, CompletionError
from services.errors import NameGenerationError, ProviderFailureError, UnknownGenerationError
from services.prompt_builder import PromptBuilder
from services.result_validator import NameCandidate

logger = logging.getLogger(__name__)


class NameGeneratorService:
    """Generate SEO product title candidates from a product description.

    One call runs validation, prompting, completion, extraction and
    normalization in order. Every failure is terminal and surfaces as a
    ``NameGenerationError`` subclass; nothing is retried here.
    """

    def __init__(self, client: CompletionClient, prompt_builder: PromptBuilder | None = None) -> None:
        self._client = client
        self._prompt_builder = prompt_builder or PromptBuilder()

    async def generate(self, payload: Mapping[str, object]) -> list[NameCandidate]:
        try:
            return await self._run(payload)
        except NameGenerationError as exc:
            logger.warning("Name generation failed (%s): %s", exc.kind, exc)
            raise
        except Exception as exc:  # noqa: BLE001 - anything unexpected becomes an opaque failure
            logger.exception("Unexpected error during name generation")
            raise UnknownGenerationError("Unexpected error during name generation.") from exc

    async def _run(self, payload: Mapping[str, object]) -> list[NameCandidate]:
        request = request_validator.validate(payload)
        messages = self._prompt_builder.build(request)

        try:
            raw_text = await self._client.complete(messages)
        except CompletionError as exc:
            raise ProviderFailureError(str(exc)) from exc

        candidates = result_validator.normalize(response_extractor.extract(raw_text))
        logger.info("Generated %s name candidates for category %s", len(candidates), request.category)
        return candidates
