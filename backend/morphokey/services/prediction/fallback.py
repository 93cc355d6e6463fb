from __future__ import annotations

from collections.abc import Iterator

from morphokey.services.prediction.candidates import AnalysisResult, Candidate


def all_candidates(result: AnalysisResult) -> list[Candidate]:
    """Every candidate in ``result``, first occurrence per ``text`` wins.

    Lists are walked in the mapping's insertion order; the output is neither
    re-sorted nor re-normalized.
    """
    seen: set[str] = set()
    pool: list[Candidate] = []
    for candidates in result.values():
        for candidate in candidates:
            if candidate.text in seen:
                continue
            seen.add(candidate.text)
            pool.append(candidate)
    return pool


class FallbackPool:
    def __init__(self, result: AnalysisResult):
        self._candidates = all_candidates(result)
        self._texts = frozenset(candidate.text for candidate in self._candidates)

    def all_candidates(self) -> list[Candidate]:
        return list(self._candidates)

    def __contains__(self, text: object) -> bool:
        return text in self._texts

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)


def suggest_next(
    result: AnalysisResult,
    last_word: str | None,
    limit: int | None = None,
) -> tuple[list[Candidate], bool]:
    """Candidates for the word typed last, and whether it had its own entry.

    A miss (first keystroke, or a word that never appeared) falls back to the
    whole pool.
    """
    matched = bool(last_word) and last_word in result
    candidates = list(result[last_word]) if matched else all_candidates(result)
    if limit is not None:
        candidates = candidates[: max(limit, 0)]
    return candidates, matched
