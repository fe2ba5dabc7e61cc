"""
Yomitoki: Japanese morphological parsing and kana readings.

Yomitoki is a thin Python layer over a Japanese morphological analyzer
(MeCab, or SudachiPy as an alternative). It turns the analyzer's node
chain into plain Python values and reduces text to its katakana reading.

Key Features:
    - Per-token feature fields straight from the analyzer dictionary
    - Katakana readings with optional fallback for unknown words
    - One lazily built, thread-safe analyzer engine per handle
    - Loud failures: bad arguments raise, they never return None
    - FastAPI endpoints for both operations (see ``web.app``)

Quick Start:
    >>> import yomitoki
    >>>
    >>> # Per-token feature fields
    >>> yomitoki.parse("猫が鳴く")
    [['名詞', '一般', '*', '*', '*', '*', '猫', 'ネコ', 'ネコ'], ...]
    >>>
    >>> # Katakana reading
    >>> yomitoki.to_kana("猫が鳴く")
    'ネコガナク'
    >>>
    >>> # Keep the original text of words missing from the dictionary
    >>> yomitoki.to_kana("ほげ猫", use_surface_fallback=True)

Custom Engine:
    >>> from yomitoki import AnalyzerHandle, KanaService
    >>> handle = AnalyzerHandle(backend="sudachi")
    >>> KanaService(handle).to_kana("猫")
    'ネコ'

Installation Requirements:
    MeCab needs an IPADIC-layout dictionary set as default in mecabrc
    (field 8 is the reading only in that layout; UniDic is rejected):
        apt install mecab-ipadic-utf8
        pip install mecab-python3
    or use SudachiPy instead:
        pip install sudachipy sudachidict_core

Classes:
    AnalyzerHandle: Owns one lazily built analyzer engine.
    ParseService: Per-token feature fields on top of a handle.
    KanaService: Kana readings on top of a handle.
    ParseResult / KanaResult: JSON-friendly result records.

Functions:
    parse: Parse text with the default handle.
    to_kana: Convert text to kana with the default handle.
    str2kana: Alias of to_kana.
"""

__version__ = "0.1.0"

# Engine lifecycle
from .analyzer import AnalyzerHandle

# Services
from .services import ParseService, KanaService

# Result classes for structured output
from .results import ParseResult, KanaResult

# Module-level entry points
from .binding import default_handle, parse, to_kana, str2kana

# Exceptions
from .exceptions import YomitokiError, InvalidArgumentError, EngineInitializationError

# Backend utilities (for advanced users)
from .japanese import active_backend

__all__ = [
    # Version info
    "__version__",
    # Engine lifecycle
    "AnalyzerHandle",
    # Services
    "ParseService",
    "KanaService",
    # Result classes
    "ParseResult",
    "KanaResult",
    # Entry points
    "default_handle",
    "parse",
    "to_kana",
    "str2kana",
    # Exceptions
    "YomitokiError",
    "InvalidArgumentError",
    "EngineInitializationError",
    # Backend utilities
    "active_backend",
]
