"""
Japanese language processing utilities for yomitoki.

This subpackage holds everything that touches the morphological analyzer
directly: engine construction, feature decoding and node iteration.

Japanese text presents unique challenges for NLP because:
1. Words are not separated by spaces (unlike English)
2. Multiple writing systems are used (hiragana, katakana, kanji)
3. The reading of kanji depends on context and needs a dictionary

MeCab and SudachiPy solve these with dictionary-driven analysis; this
subpackage adapts their output into plain Python values.

Usage:
    >>> from yomitoki.japanese import create_engine, snapshot
    >>> engine = create_engine("auto")
    >>> [t.surface for t in snapshot(engine, "猫が鳴く")]
    ['猫', 'が', '鳴く']

Components:
    create_engine: Build a MeCab or Sudachi engine
    active_backend: Report which backend 'auto' would pick
    decode_feature: Split a feature annotation into fields
    tokenize / snapshot: Walk an engine's node chain
"""

from .features import READING_INDEX, decode_feature, reading_of
from .tokenizers import active_backend, create_engine, has_mecab, has_sudachi
from .tokens import Token, snapshot, tokenize

__all__ = [
    "READING_INDEX",
    "Token",
    "active_backend",
    "create_engine",
    "decode_feature",
    "has_mecab",
    "has_sudachi",
    "reading_of",
    "snapshot",
    "tokenize",
]
