from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


SYMBOL_POS = "記号"
UNKNOWN_POS = "不明"


class TokenizationError(Exception):
    """Raised when the morphological analyzer fails or rejects its input."""


@dataclass(frozen=True)
class MorphToken:
    surface: str
    pos: str


class TokenizerAdapter(Protocol):
    def tokenize(self, text: str) -> list[MorphToken]:
        ...

    def metadata(self) -> dict[str, str]:
        ...
