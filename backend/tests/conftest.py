from __future__ import annotations

import pytest

from morphokey.nlp.adapter import MorphToken, TokenizationError


class StubTokenizer:
    def tokenize(self, text: str) -> list[MorphToken]:
        return []

    def metadata(self) -> dict[str, str]:
        return {"adapter": "StubTokenizer"}


class SlashTokenizer:
    """Reads pre-analyzed text such as ``"今日/名詞 は/助詞"``."""

    def tokenize(self, text: str) -> list[MorphToken]:
        tokens: list[MorphToken] = []
        for chunk in text.split():
            surface, _, pos = chunk.rpartition("/")
            if not surface:
                raise TokenizationError(f"cannot analyze chunk {chunk!r}")
            tokens.append(MorphToken(surface=surface, pos=pos))
        return tokens

    def metadata(self) -> dict[str, str]:
        return {"adapter": "SlashTokenizer"}


@pytest.fixture
def stub_tokenizer_factory():
    return lambda _settings: StubTokenizer()


@pytest.fixture
def slash_tokenizer_factory():
    return lambda _settings: SlashTokenizer()
