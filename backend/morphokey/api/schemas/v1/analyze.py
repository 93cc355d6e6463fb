from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    text: str = Field(...)


class AnalyzeTokensRequest(BaseModel):
    # Analyzer rows as [surface, pos, ...]; shorter rows are dropped.
    tokens: list[list[str | None]] = Field(default_factory=list)


class CandidateRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    weight: float
    part_of_speech: str = Field(..., alias="partOfSpeech")


class AnalyzeResponse(BaseModel):
    candidates: dict[str, list[CandidateRecord]]


class SuggestRequest(BaseModel):
    text: str = Field(...)
    last_word: str | None = None
    limit: int | None = Field(None, ge=1)


class SuggestResponse(BaseModel):
    last_word: str | None
    matched: bool
    candidates: list[CandidateRecord]
