from __future__ import annotations

from collections.abc import Sequence

from morphokey.nlp.adapter import SYMBOL_POS, MorphToken


def is_symbol_token(token: MorphToken) -> bool:
    return token.pos == SYMBOL_POS


def coerce_token(row: MorphToken | Sequence[str] | None) -> MorphToken | None:
    """Turn an analyzer row such as ``["今日", "名詞", ...]`` into a token.

    Rows with fewer than two fields, or with a missing surface or tag, give
    ``None`` so callers can drop them without raising.
    """
    if row is None:
        return None
    if isinstance(row, MorphToken):
        surface, pos = row.surface, row.pos
    else:
        if isinstance(row, str) or len(row) < 2:
            return None
        surface, pos = row[0], row[1]
    if surface is None or pos is None:
        return None
    if isinstance(row, MorphToken):
        return row
    return MorphToken(surface=str(surface), pos=str(pos))
