from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from schemas.name_generation import (
    ErrorResponse,
    NameCandidateResponse,
    NameGenerationRequest,
    NameGenerationResponse,
)
from services.completion_client import CompletionClient, OpenAICompletionClient
from services.name_generator import NameGeneratorService
from services.prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["names"])


def get_completion_client(settings: Settings = Depends(get_settings)) -> CompletionClient:
    api_key = settings.openai_api_key
    if api_key is None:
        logger.error("OpenAI API key is not configured; generation requests will fail")

    return OpenAICompletionClient(
        api_key=api_key.get_secret_value() if api_key else None,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
        timeout=settings.openai_timeout_seconds,
    )


def get_name_generator(
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
) -> NameGeneratorService:
    return NameGeneratorService(
        client=client,
        prompt_builder=PromptBuilder(max_keywords_chars=settings.max_keywords_chars),
    )


@router.post(
    "/generate",
    response_model=NameGenerationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_names(
    payload: NameGenerationRequest,
    service: NameGeneratorService = Depends(get_name_generator),
) -> NameGenerationResponse:
    # NameGenerationError is rendered by the app-level handler as {"error": ...}.
    candidates = await service.generate(payload.model_dump())

    return NameGenerationResponse(
        results=[
            NameCandidateResponse(
                name=candidate.name,
                keywords=candidate.keywords,
                seo_score=candidate.seo_score,
            )
            for candidate in candidates
        ]
    )
