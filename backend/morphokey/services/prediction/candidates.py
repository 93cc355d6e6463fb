from __future__ import annotations

from dataclasses import dataclass

from morphokey.nlp.adapter import UNKNOWN_POS
from morphokey.services.prediction.indexer import CorpusIndex


@dataclass(frozen=True)
class Candidate:
    text: str
    weight: float
    part_of_speech: str

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "weight": self.weight,
            "partOfSpeech": self.part_of_speech,
        }


AnalysisResult = dict[str, list[Candidate]]


def self_candidate(index: CorpusIndex, word: str) -> Candidate:
    return Candidate(text=word, weight=1.0, part_of_speech=index.pos_of(word) or UNKNOWN_POS)


def candidates_for_word(index: CorpusIndex, word: str) -> list[Candidate]:
    following = index.outgoing(word)
    if not following:
        return [self_candidate(index, word)]

    total = sum(following.values())
    raw: list[tuple[str, float, str]] = []
    for next_word, count in following.items():
        if count <= 0:
            continue
        raw.append((next_word, count / total, index.pos_of(next_word) or UNKNOWN_POS))

    # Divided through by the recomputed sum even though it is already 1.0.
    normalizer = sum(probability for _, probability, _ in raw)
    candidates = [
        Candidate(
            text=next_word,
            weight=probability / normalizer if normalizer > 0 else 0.0,
            part_of_speech=pos,
        )
        for next_word, probability, pos in raw
    ]
    # sorted() is stable: equal weights keep the order the transitions were first seen.
    candidates = sorted(candidates, key=lambda candidate: candidate.weight, reverse=True)

    if not candidates:
        return [self_candidate(index, word)]
    return candidates


def generate_candidates(index: CorpusIndex) -> AnalysisResult:
    return {word: candidates_for_word(index, word) for word in index.counts}
