from __future__ import annotations

import logging
import threading
from importlib.metadata import PackageNotFoundError, version as package_version

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from morphokey.core.config import Settings
from morphokey.nlp.adapter import SYMBOL_POS, MorphToken, TokenizationError, TokenizerAdapter


logger = logging.getLogger(__name__)

SUPPORTED_FUGASHI = SpecifierSet(">=1.3,<2")
# UniDic splits punctuation out as 補助記号; the model only knows one symbol tag.
_SYMBOL_ALIASES = frozenset({SYMBOL_POS, "補助記号"})


class FugashiTokenizerAdapter(TokenizerAdapter):
    def __init__(self, mecab_args: str = ""):
        self.mecab_args = mecab_args
        # Import lazily so backend startup can degrade cleanly if MeCab is absent.
        import fugashi

        self._tagger, self.dictionary_format = _build_tagger(fugashi, mecab_args)
        self._lock = threading.Lock()
        self._warn_if_fugashi_version_unsupported()

    def tokenize(self, text: str) -> list[MorphToken]:
        if not text.strip():
            return []

        try:
            with self._lock:
                nodes = list(self._tagger(text))
            return [self._to_morph_token(node) for node in nodes if node.surface]
        except Exception as exc:
            raise TokenizationError(f"MeCab failed to analyze input: {exc}") from exc

    def metadata(self) -> dict[str, str]:
        return {
            "adapter": self.__class__.__name__,
            "fugashi": _installed_version("fugashi"),
            "dictionary": self._dictionary_name(),
            "dictionary_format": self.dictionary_format,
            "mecab_args": self.mecab_args,
        }

    def _to_morph_token(self, node) -> MorphToken:
        feature = node.feature
        pos = getattr(feature, "pos1", None)
        if pos is None:
            # GenericTagger (e.g. IPADIC) exposes a plain tuple of fields.
            pos = feature[0] if feature else ""
        if pos in _SYMBOL_ALIASES:
            pos = SYMBOL_POS
        return MorphToken(surface=node.surface, pos=pos)

    def _dictionary_name(self) -> str:
        info = getattr(self._tagger, "dictionary_info", None) or []
        if not info:
            return "unknown"
        return str(info[0].get("filename", "unknown"))

    def _warn_if_fugashi_version_unsupported(self) -> None:
        runtime_version_str = _installed_version("fugashi")
        try:
            runtime_version = Version(runtime_version_str)
        except InvalidVersion:
            logger.warning(
                "tokenizer_fugashi_version_parse_failed",
                extra={"runtime_fugashi": runtime_version_str},
            )
            return

        if SUPPORTED_FUGASHI.contains(runtime_version, prereleases=True):
            return

        logger.warning(
            "tokenizer_fugashi_version_unsupported",
            extra={
                "runtime_fugashi": runtime_version_str,
                "supported": str(SUPPORTED_FUGASHI),
            },
        )


def _build_tagger(fugashi, mecab_args: str):
    try:
        return fugashi.Tagger(mecab_args), "unidic"
    except RuntimeError as exc:
        # Tagger only accepts UniDic; IPADIC and other dictionaries need GenericTagger.
        if "GenericTagger" not in str(exc):
            raise
    logger.info("tokenizer_generic_dictionary", extra={"mecab_args": mecab_args})
    return fugashi.GenericTagger(mecab_args), "generic"


def _installed_version(distribution: str) -> str:
    try:
        return package_version(distribution)
    except PackageNotFoundError:
        return "unknown"


def load_japanese_tokenizer(settings: Settings) -> TokenizerAdapter:
    return FugashiTokenizerAdapter(mecab_args=settings.mecab_args)
