from __future__ import annotations

from morphokey.nlp.adapter import MorphToken
from morphokey.services.prediction.indexer import build_corpus_index


def _tokens(*pairs: tuple[str, str]) -> list[MorphToken]:
    return [MorphToken(surface=surface, pos=pos) for surface, pos in pairs]


def test_indexer_counts_words_and_adjacent_pairs() -> None:
    index = build_corpus_index(_tokens(("猫", "名詞"), ("が", "助詞"), ("猫", "名詞"), ("は", "助詞")))

    assert index.sequence == ["猫", "が", "猫", "は"]
    assert index.counts == {"猫": 2, "が": 1, "は": 1}
    assert index.transitions == {"猫": {"が": 1, "は": 1}, "が": {"猫": 1}}
    assert index.outgoing("は") == {}


def test_indexer_drops_symbols_before_pairing() -> None:
    index = build_corpus_index(
        _tokens(("晴れ", "名詞"), ("。", "記号"), ("雨", "名詞"), ("、", "記号"))
    )

    assert index.sequence == ["晴れ", "雨"]
    assert "。" not in index.counts
    assert index.transitions == {"晴れ": {"雨": 1}}


def test_indexer_keeps_tag_of_last_occurrence() -> None:
    index = build_corpus_index(_tokens(("する", "動詞"), ("こと", "名詞"), ("する", "名詞")))

    assert index.pos_of("する") == "名詞"
    assert index.counts["する"] == 2


def test_indexer_skips_malformed_rows_silently() -> None:
    index = build_corpus_index(
        [
            ["今日", "名詞", "普通名詞"],
            ["壊れた"],
            [],
            None,
            ["は", None],
            MorphToken(surface="晴れ", pos="名詞"),
        ]
    )

    assert index.sequence == ["今日", "晴れ"]
    assert index.transitions == {"今日": {"晴れ": 1}}


def test_indexer_accepts_empty_and_single_token_input() -> None:
    empty = build_corpus_index([])
    single = build_corpus_index(_tokens(("雨", "名詞")))

    assert empty.counts == {}
    assert empty.transitions == {}
    assert single.counts == {"雨": 1}
    assert single.transitions == {}


def test_indexer_repeated_pair_accumulates() -> None:
    index = build_corpus_index(_tokens(("ね", "助詞"), ("ね", "助詞"), ("ね", "助詞")))

    assert index.transitions == {"ね": {"ね": 2}}
