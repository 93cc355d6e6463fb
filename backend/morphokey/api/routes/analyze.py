from __future__ import annotations

import logging

from anyio import fail_after, to_thread
from fastapi import APIRouter, HTTPException, Request

from morphokey.api.schemas.v1.analyze import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnalyzeTokensRequest,
    CandidateRecord,
    SuggestRequest,
    SuggestResponse,
)
from morphokey.nlp.adapter import TokenizationError, TokenizerAdapter
from morphokey.services.prediction import AnalysisResult, Candidate, suggest_next
from morphokey.services.use_cases.analyze import AnalyzeTextUseCase

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_record(candidate: Candidate) -> CandidateRecord:
    return CandidateRecord(
        text=candidate.text,
        weight=candidate.weight,
        part_of_speech=candidate.part_of_speech,
    )


def _to_records(result: AnalysisResult) -> dict[str, list[CandidateRecord]]:
    return {
        word: [_to_record(candidate) for candidate in candidates]
        for word, candidates in result.items()
    }


def _require_tokenizer(request: Request) -> TokenizerAdapter:
    tokenizer = getattr(request.app.state, "tokenizer", None)
    if not bool(getattr(request.app.state, "tokenizer_ready", False)) or tokenizer is None:
        raise HTTPException(
            status_code=503,
            detail="Tokenizer unavailable. Check backend logs and MeCab installation.",
        )
    return tokenizer


async def _analyze(request: Request, text: str) -> AnalysisResult:
    use_case = AnalyzeTextUseCase(_require_tokenizer(request))
    timeout = request.app.state.settings.analysis_timeout_seconds
    try:
        # The tokenizer thread is abandoned on timeout; it holds no shared model state.
        with fail_after(timeout):
            return await to_thread.run_sync(use_case.execute, text, abandon_on_cancel=True)
    except TokenizationError as exc:
        logger.exception("analyze_tokenization_failed", extra={"input_chars": len(text)})
        raise HTTPException(
            status_code=503,
            detail=f"Tokenization failed: {exc}",
        ) from exc
    except TimeoutError as exc:
        logger.warning(
            "analyze_timeout",
            extra={"input_chars": len(text), "timeout_seconds": timeout},
        )
        raise HTTPException(
            status_code=504,
            detail=f"Analysis did not finish within {timeout} seconds.",
        ) from exc


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_text(payload: AnalyzeRequest, request: Request) -> AnalyzeResponse:
    result = await _analyze(request, payload.text)
    return AnalyzeResponse(candidates=_to_records(result))


@router.post("/analyze/tokens", response_model=AnalyzeResponse)
def analyze_pretokenized(payload: AnalyzeTokensRequest) -> AnalyzeResponse:
    result = AnalyzeTextUseCase.execute_tokens(payload.tokens)
    return AnalyzeResponse(candidates=_to_records(result))


@router.post("/suggest", response_model=SuggestResponse)
async def suggest(payload: SuggestRequest, request: Request) -> SuggestResponse:
    result = await _analyze(request, payload.text)
    limit = payload.limit or request.app.state.settings.suggestion_limit
    candidates, matched = suggest_next(result, payload.last_word, limit=limit)
    return SuggestResponse(
        last_word=payload.last_word,
        matched=matched,
        candidates=[_to_record(candidate) for candidate in candidates],
    )
