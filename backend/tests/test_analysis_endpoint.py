from __future__ import annotations

import math
import time

import pytest
from fastapi.testclient import TestClient

from morphokey.core.config import Settings
from morphokey.main import create_app


def _settings(**overrides) -> Settings:
    values = dict(
        environment="test",
        app_name="morphokey-backend-test",
        host="127.0.0.1",
        port=8001,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def analysis_client(slash_tokenizer_factory):
    app = create_app(_settings(), tokenizer_factory=slash_tokenizer_factory)
    with TestClient(app) as client:
        yield client


def test_text_input_returns_candidates_per_word(analysis_client: TestClient) -> None:
    response = analysis_client.post("/api/analyze", json={"text": "今日/名詞 は/助詞 晴れ/名詞"})

    assert response.status_code == 200
    assert response.json() == {
        "candidates": {
            "今日": [{"text": "は", "weight": 1.0, "partOfSpeech": "助詞"}],
            "は": [{"text": "晴れ", "weight": 1.0, "partOfSpeech": "名詞"}],
            "晴れ": [{"text": "晴れ", "weight": 1.0, "partOfSpeech": "名詞"}],
        }
    }


def test_weights_are_fractions_summing_to_one(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/analyze",
        json={"text": "猫/名詞 が/助詞 猫/名詞 は/助詞 。/記号"},
    )

    candidates = response.json()["candidates"]
    assert list(candidates) == ["猫", "が", "は"]
    assert [item["text"] for item in candidates["猫"]] == ["が", "は"]
    assert math.isclose(sum(item["weight"] for item in candidates["猫"]), 1.0, abs_tol=1e-9)


def test_empty_and_symbol_only_text_give_empty_mapping(analysis_client: TestClient) -> None:
    empty = analysis_client.post("/api/analyze", json={"text": ""})
    symbols = analysis_client.post("/api/analyze", json={"text": "。/記号 、/記号"})

    assert empty.status_code == 200
    assert empty.json() == {"candidates": {}}
    assert symbols.json() == {"candidates": {}}


def test_tokenization_error_maps_to_503(analysis_client: TestClient) -> None:
    response = analysis_client.post("/api/analyze", json={"text": "/名詞"})

    assert response.status_code == 503
    assert response.json()["detail"].startswith("Tokenization failed")


def test_pretokenized_rows_skip_short_rows(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/analyze/tokens",
        json={"tokens": [["今日", "名詞", "副詞可能"], ["壊"], ["は", "助詞"], ["晴れ", "名詞"]]},
    )

    assert response.status_code == 200
    assert list(response.json()["candidates"]) == ["今日", "は", "晴れ"]


def test_suggest_returns_direct_entry_or_pool(analysis_client: TestClient) -> None:
    text = "猫/名詞 が/助詞 猫/名詞 は/助詞"
    hit = analysis_client.post("/api/suggest", json={"text": text, "last_word": "猫"})
    miss = analysis_client.post("/api/suggest", json={"text": text, "last_word": "犬"})
    first = analysis_client.post("/api/suggest", json={"text": text})

    assert hit.json()["matched"] is True
    assert [item["text"] for item in hit.json()["candidates"]] == ["が", "は"]
    assert miss.json()["matched"] is False
    assert [item["text"] for item in miss.json()["candidates"]] == ["が", "は", "猫"]
    assert first.json()["candidates"] == miss.json()["candidates"]


def test_suggest_respects_request_and_configured_limits(slash_tokenizer_factory) -> None:
    app = create_app(_settings(suggestion_limit=1), tokenizer_factory=slash_tokenizer_factory)
    text = "猫/名詞 が/助詞 猫/名詞 は/助詞"

    with TestClient(app) as client:
        configured = client.post("/api/suggest", json={"text": text, "last_word": "犬"})
        requested = client.post("/api/suggest", json={"text": text, "last_word": "犬", "limit": 2})

    assert [item["text"] for item in configured.json()["candidates"]] == ["が"]
    assert [item["text"] for item in requested.json()["candidates"]] == ["が", "は"]


def test_analyze_returns_503_when_tokenizer_failed_to_load() -> None:
    def _broken_factory(_settings: Settings):
        raise RuntimeError("MeCab dictionary not found")

    app = create_app(_settings(), tokenizer_factory=_broken_factory)
    with TestClient(app) as client:
        response = client.post("/api/analyze", json={"text": "今日"})
        tokens = client.post("/api/analyze/tokens", json={"tokens": [["今日", "名詞"]]})

    assert response.status_code == 503
    assert "Tokenizer unavailable" in response.json()["detail"]
    assert tokens.status_code == 200


def test_analyze_times_out_with_504() -> None:
    class SlowTokenizer:
        def tokenize(self, text: str):
            time.sleep(0.5)
            return []

        def metadata(self) -> dict[str, str]:
            return {"adapter": "SlowTokenizer"}

    app = create_app(
        _settings(analysis_timeout_seconds=0.05),
        tokenizer_factory=lambda _settings: SlowTokenizer(),
    )
    with TestClient(app) as client:
        response = client.post("/api/analyze", json={"text": "今日"})

    assert response.status_code == 504
