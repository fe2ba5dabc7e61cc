"""
Result classes for the HTTP surface.

The binding functions return plain lists and strings. These classes wrap
those values with the input text and provide ``to_dict()`` for JSON
responses, as used by ``web.app``.

Classes:
    ParseResult: Per-token feature fields of one text.
    KanaResult: Kana reading of one text.

Example:
    >>> from yomitoki.results import KanaResult
    >>> KanaResult(text="猫", kana="ネコ").to_dict()
    {'text': '猫', 'kana': 'ネコ', 'use_surface_fallback': False}
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParseResult:
    """
    Result of a morphological parse.

    Attributes:
        text: The analyzed text.
        tokens: One list of feature fields per token.
    """

    text: str
    tokens: List[List[str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of tokens."""
        return len(self.tokens)

    def to_dict(self) -> Dict:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dict: ``text``, ``tokens`` and ``count``.
        """
        return {
            "text": self.text,
            "tokens": [list(fields) for fields in self.tokens],
            "count": self.count,
        }


@dataclass
class KanaResult:
    """
    Result of a kana conversion.

    Attributes:
        text: The converted text.
        kana: The concatenated readings.
        use_surface_fallback: Whether unknown words kept their surface.
    """

    text: str
    kana: str
    use_surface_fallback: bool = False

    def to_dict(self) -> Dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "text": self.text,
            "kana": self.kana,
            "use_surface_fallback": self.use_surface_fallback,
        }
