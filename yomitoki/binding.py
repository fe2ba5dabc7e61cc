"""
Module-level entry points.

These functions are what ``import yomitoki`` exposes. They share one
default ``AnalyzerHandle``, created on first use, so the engine is built
once per process no matter how many callers use them.

Code that wants its own engine (tests, servers with a different backend)
should build an ``AnalyzerHandle`` and the services directly instead.
"""

import threading
from typing import List

from .analyzer import AnalyzerHandle
from .services import KanaService, ParseService, require_text

_default_lock = threading.Lock()
_default_handle = None


def default_handle() -> AnalyzerHandle:
    """Return the process-wide handle, creating it on first call."""
    global _default_handle
    if _default_handle is None:
        with _default_lock:
            if _default_handle is None:
                _default_handle = AnalyzerHandle()
    return _default_handle


def parse(text: str) -> List[List[str]]:
    """
    Parse Japanese text into per-token feature fields.

    Args:
        text: The text to analyze.

    Returns:
        List[List[str]]: One list of feature fields per token, in order.

    Raises:
        InvalidArgumentError: If text is not a str (also a TypeError).
        EngineInitializationError: If no analyzer engine can be built.

    Example:
        >>> parse("猫")
        [['名詞', '一般', '*', '*', '*', '*', '猫', 'ネコ', 'ネコ']]
        >>> parse("")
        []
    """
    require_text("parse", text)
    return ParseService(default_handle()).parse(text)


def to_kana(text: str, use_surface_fallback: bool = False) -> str:
    """
    Convert Japanese text to its katakana reading.

    Args:
        text: The text to convert.
        use_surface_fallback: When true, tokens missing from the dictionary
                              keep their original text; otherwise they are
                              dropped.

    Returns:
        str: The concatenated readings.

    Raises:
        InvalidArgumentError: If text is not a str (also a TypeError).
        EngineInitializationError: If no analyzer engine can be built.

    Example:
        >>> to_kana("今日は晴れ")
        'キョウハハレ'
    """
    require_text("to_kana", text)
    return KanaService(default_handle()).to_kana(text, bool(use_surface_fallback))


def str2kana(text: str, use_surface_fallback: bool = False) -> str:
    """Alias of :func:`to_kana`."""
    require_text("str2kana", text)
    return to_kana(text, use_surface_fallback)


__all__ = ["default_handle", "parse", "str2kana", "to_kana"]
