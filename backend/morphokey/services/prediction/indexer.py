from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from morphokey.nlp.adapter import MorphToken
from morphokey.nlp.token_filter import coerce_token, is_symbol_token


TransitionTable = dict[str, dict[str, int]]


@dataclass
class CorpusIndex:
    """Raw counts gathered from one tokenized text.

    ``sequence`` keeps every surviving surface in order (duplicates included).
    ``pos_by_word`` holds the tag of the last occurrence of each surface.
    All mappings keep first-insertion order.
    """

    sequence: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)
    pos_by_word: dict[str, str] = field(default_factory=dict)
    transitions: TransitionTable = field(default_factory=dict)

    def pos_of(self, word: str) -> str | None:
        return self.pos_by_word.get(word)

    def outgoing(self, word: str) -> dict[str, int]:
        return self.transitions.get(word, {})


def build_corpus_index(tokens: Iterable[MorphToken | Sequence[str]]) -> CorpusIndex:
    index = CorpusIndex()

    for row in tokens:
        token = coerce_token(row)
        if token is None or is_symbol_token(token):
            continue
        index.sequence.append(token.surface)
        index.counts[token.surface] = index.counts.get(token.surface, 0) + 1
        index.pos_by_word[token.surface] = token.pos

    for current_word, next_word in zip(index.sequence, index.sequence[1:]):
        following = index.transitions.setdefault(current_word, {})
        following[next_word] = following.get(next_word, 0) + 1

    return index
