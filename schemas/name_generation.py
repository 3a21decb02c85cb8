from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NameGenerationRequest(BaseModel):
    # Field shapes and blanks are checked by the request validator, not here.
    category: Any = None
    keywords: Any = None
    features: Any = None


class NameCandidateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    keywords: list[str]
    seo_score: int = Field(alias="seoScore")


class NameGenerationResponse(BaseModel):
    results: list[NameCandidateResponse]


class ErrorResponse(BaseModel):
    error: str
