from __future__ import annotations

from collections.abc import Iterable, Sequence

from morphokey.nlp.adapter import MorphToken
from morphokey.services.prediction.candidates import (
    AnalysisResult,
    Candidate,
    candidates_for_word,
    generate_candidates,
)
from morphokey.services.prediction.fallback import FallbackPool, all_candidates, suggest_next
from morphokey.services.prediction.indexer import CorpusIndex, build_corpus_index


def analyze_tokens(tokens: Iterable[MorphToken | Sequence[str]]) -> AnalysisResult:
    return generate_candidates(build_corpus_index(tokens))


__all__ = [
    "AnalysisResult",
    "Candidate",
    "CorpusIndex",
    "FallbackPool",
    "all_candidates",
    "analyze_tokens",
    "build_corpus_index",
    "candidates_for_word",
    "generate_candidates",
    "suggest_next",
]
