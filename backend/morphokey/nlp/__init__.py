from morphokey.nlp.adapter import (
    SYMBOL_POS,
    UNKNOWN_POS,
    MorphToken,
    TokenizationError,
    TokenizerAdapter,
)

__all__ = [
    "SYMBOL_POS",
    "UNKNOWN_POS",
    "MorphToken",
    "TokenizationError",
    "TokenizerAdapter",
]
