from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence

from morphokey.nlp.adapter import MorphToken, TokenizerAdapter
from morphokey.services.prediction import AnalysisResult, analyze_tokens


logger = logging.getLogger(__name__)


class AnalyzeTextUseCase:
    """Tokenize one text and build its next-word candidate mapping.

    The model is rebuilt on every call; nothing is kept between calls.
    ``TokenizationError`` from the adapter propagates unchanged.
    """

    def __init__(self, tokenizer: TokenizerAdapter):
        self._tokenizer = tokenizer

    def execute(self, text: str) -> AnalysisResult:
        started = time.perf_counter()
        tokens = self._tokenizer.tokenize(text)
        result = analyze_tokens(tokens)
        logger.info(
            "analysis_completed",
            extra={
                "source": "text",
                "input_chars": len(text),
                "token_count": len(tokens),
                "word_count": len(result),
                "elapsed_ms": round((time.perf_counter() - started) * 1000.0, 3),
            },
        )
        return result

    @staticmethod
    def execute_tokens(rows: Iterable[MorphToken | Sequence[str]]) -> AnalysisResult:
        rows = list(rows)
        result = analyze_tokens(rows)
        logger.info(
            "analysis_completed",
            extra={"source": "tokens", "token_count": len(rows), "word_count": len(result)},
        )
        return result
