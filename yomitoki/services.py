"""
Parse and kana services built on an AnalyzerHandle.

Both services validate their input, take one owned snapshot of tokens
from the handle, and assemble a plain Python value from it.

Example:
    >>> from yomitoki.analyzer import AnalyzerHandle
    >>> from yomitoki.services import KanaService, ParseService
    >>> handle = AnalyzerHandle()
    >>> ParseService(handle).parse("猫")
    [['名詞', '一般', '*', '*', '*', '*', '猫', 'ネコ', 'ネコ']]
    >>> KanaService(handle).to_kana("猫")
    'ネコ'
"""

import logging
from typing import List

from .exceptions import InvalidArgumentError
from .japanese.features import reading_of

logger = logging.getLogger(__name__)


def require_text(function_name: str, value) -> str:
    """
    Check that ``value`` is a ``str``.

    Raises:
        InvalidArgumentError: Naming ``function_name`` and the expected type.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(function_name, "str", value)
    return value


class ParseService:
    """Full morphological parse into per-token feature fields."""

    def __init__(self, handle):
        self.handle = handle

    def parse(self, text: str) -> List[List[str]]:
        """
        Parse ``text`` into one list of feature fields per token.

        Args:
            text: Input text.

        Returns:
            List[List[str]]: Tokens in input order. Inner lists keep every
            decoded field, so their lengths vary between tokens.

        Raises:
            InvalidArgumentError: If text is not a str.
            EngineInitializationError: If the engine cannot be built.
        """
        require_text("parse", text)
        tokens = self.handle.tokens(text)
        logger.debug("Parsed %d tokens from %d characters", len(tokens), len(text))
        return [list(token.fields) for token in tokens]


class KanaService:
    """Reduction of text to its kana reading."""

    def __init__(self, handle):
        self.handle = handle

    def to_kana(self, text: str, use_surface_fallback: bool = False) -> str:
        """
        Concatenate the reading of every token in ``text``.

        Tokens whose feature has no reading field (typically words missing
        from the dictionary) contribute their surface text when
        ``use_surface_fallback`` is true and nothing otherwise.

        Args:
            text: Input text.
            use_surface_fallback: Keep the surface of tokens without a reading.

        Returns:
            str: The readings joined without a separator.

        Raises:
            InvalidArgumentError: If text is not a str.
            EngineInitializationError: If the engine cannot be built.
        """
        require_text("to_kana", text)
        pieces = []
        missing = 0
        for token in self.handle.tokens(text):
            reading = reading_of(token.fields)
            if reading is not None:
                pieces.append(reading)
                continue
            missing += 1
            if use_surface_fallback:
                pieces.append(token.surface)

        if missing:
            logger.debug("%d tokens had no reading (fallback=%s)", missing, bool(use_surface_fallback))
        return "".join(pieces)
