"""
Morphological analyzer engines for Japanese text.

This module wraps the two engines yomitoki can drive:

- MeCab, through the ``mecab-python3`` binding. Its ``parseToNode`` output
  is a linked chain of nodes bracketed by BOS/EOS sentinels, each node
  carrying a comma-delimited feature string.
- SudachiPy, which ships its own dictionary (``sudachidict_core``). Its
  morphemes are adapted into the same node-chain shape so both engines
  look identical to the rest of the package.

Engines are never created on import. ``create_engine`` builds one on
demand; ``yomitoki.analyzer.AnalyzerHandle`` decides when.

Installation:
    apt install mecab-ipadic-utf8    # IPADIC, found through mecabrc
    pip install mecab-python3
    pip install sudachipy sudachidict_core

Example:
    >>> from yomitoki.japanese.tokenizers import has_mecab, has_sudachi
    >>> if has_mecab():
    ...     print("MeCab is available for Japanese analysis")
"""

import importlib.util
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..exceptions import EngineInitializationError
from .features import IPADIC_FIELD_COUNT, decode_feature

BACKENDS = ("auto", "mecab", "sudachi")

# Sentinel feature string used by MeCab for BOS/EOS nodes.
SENTINEL_FEATURE = "BOS/EOS,*,*,*,*,*,*,*,*"

# IPADIC writes a comma inside a field as its full-width form.
FULLWIDTH_COMMA = "，"

# A word every general dictionary knows, parsed once to check the layout.
LAYOUT_CHECK_TEXT = "猫"


def has_mecab() -> bool:
    """
    Check if the MeCab Python binding can be imported.

    Returns:
        bool: True if ``mecab-python3`` is installed, False otherwise.
              A True result does not guarantee a usable dictionary.
    """
    return importlib.util.find_spec("MeCab") is not None


def has_sudachi() -> bool:
    """
    Check if SudachiPy can be imported.

    Returns:
        bool: True if ``sudachipy`` is installed, False otherwise.
    """
    return importlib.util.find_spec("sudachipy") is not None


def active_backend() -> str:
    """
    Return the name of the backend that ``"auto"`` would select.

    Returns:
        str: 'mecab' if the MeCab binding is installed, 'sudachi' if only
             SudachiPy is installed, 'none' if neither is.

    Example:
        >>> backend = active_backend()
        >>> if backend == 'none':
        ...     print("Install mecab-python3 or sudachipy")
    """
    if has_mecab():
        return "mecab"
    if has_sudachi():
        return "sudachi"
    return "none"


@dataclass
class MorphemeNode:
    """
    One node of a linked analyzer result.

    Mirrors the attributes of ``MeCab.Node`` that yomitoki reads, so the
    Sudachi adapter can hand out the same shape.

    Attributes:
        surface: Surface text of the token.
        length: UTF-8 byte length of the logical surface.
        feature: Comma-delimited feature annotation.
        next: The following node, or None on the last (EOS) node.
    """

    surface: str = ""
    length: int = 0
    feature: str = SENTINEL_FEATURE
    next: Optional["MorphemeNode"] = field(default=None, repr=False)


def link_nodes(nodes: Iterable[MorphemeNode]) -> MorphemeNode:
    """
    Chain nodes between a BOS and an EOS sentinel.

    Args:
        nodes: Real (non-sentinel) nodes in token order.

    Returns:
        MorphemeNode: The BOS sentinel at the head of the chain.
    """
    head = MorphemeNode()
    tail = head
    for node in nodes:
        tail.next = node
        tail = node
    tail.next = MorphemeNode()
    return head


def check_feature_layout(head) -> None:
    """
    Check that a parsed chain uses the IPADIC feature layout.

    Only the first real token is inspected. Known words have exactly
    nine fields in IPADIC; UniDic rows are much longer and carry the
    written form, not the reading, at index 8.

    Raises:
        EngineInitializationError: If the first token has more fields
                                   than the IPADIC layout.
    """
    node = head.next if head is not None else None
    if node is None or node.next is None:
        return

    fields = decode_feature(node.feature or "")
    if len(fields) > IPADIC_FIELD_COUNT:
        raise EngineInitializationError(
            f"MeCab dictionary has {len(fields)} feature fields per word; "
            f"an IPADIC-layout dictionary ({IPADIC_FIELD_COUNT} fields, reading "
            "at index 8) is required. Install mecab-ipadic and make it the "
            "default dictionary in mecabrc."
        )


class MecabEngine:
    """
    Engine backed by ``MeCab.Tagger`` with its default configuration.

    The dictionary is located by MeCab's own discovery (mecabrc). It must
    use the IPADIC feature layout, where field 8 is the reading; a UniDic
    dictionary is rejected at construction.
    """

    name = "mecab"

    def __init__(self):
        import MeCab  # type: ignore

        self._tagger = MeCab.Tagger("")
        # Older bindings return corrupted surfaces from parseToNode
        # until parse() has been called once.
        self._tagger.parse("")
        check_feature_layout(self._tagger.parseToNode(LAYOUT_CHECK_TEXT))

    def parse_to_node(self, text: str):
        return self._tagger.parseToNode(text)


class SudachiEngine:
    """
    Engine backed by a SudachiPy tokenizer.

    Sudachi morphemes are converted to IPADIC-shaped feature strings:
    the six part-of-speech fields, then dictionary form, reading and
    pronunciation. Sudachi has no separate pronunciation, so the reading
    is used for both. Out-of-vocabulary morphemes stop after the
    dictionary form, as MeCab does for unknown words. Commas inside a
    field (the 読点 token, for one) become full-width so the field count
    stays fixed.
    """

    name = "sudachi"

    def __init__(self):
        from sudachipy import tokenizer as _sudachi_tokenizer  # type: ignore
        from sudachipy import dictionary as _sudachi_dictionary  # type: ignore

        self._tokenizer = _sudachi_dictionary.Dictionary().create()

        # SplitMode options:
        #   - A: Short unit (similar to unidic-cwj short unit)
        #   - B: Middle unit (default, balanced)
        #   - C: Long unit (named entities kept together)
        self._mode = _sudachi_tokenizer.Tokenizer.SplitMode.C

    def parse_to_node(self, text: str) -> MorphemeNode:
        morphemes = self._tokenizer.tokenize(text, self._mode)
        return link_nodes(self._to_node(m) for m in morphemes)

    @staticmethod
    def _to_node(morpheme) -> MorphemeNode:
        surface = morpheme.surface()
        fields = list(morpheme.part_of_speech())
        fields.append(morpheme.dictionary_form())
        if not morpheme.is_oov():
            reading = morpheme.reading_form()
            fields.extend([reading, reading])
        return MorphemeNode(
            surface=surface,
            length=len(surface.encode("utf-8")),
            feature=",".join(f.replace(",", FULLWIDTH_COMMA) for f in fields),
        )


def create_engine(backend: str = "auto"):
    """
    Construct an analyzer engine.

    Args:
        backend: 'mecab', 'sudachi', or 'auto' (MeCab first, then Sudachi).

    Returns:
        An engine object exposing ``name`` and ``parse_to_node(text)``.

    Raises:
        ValueError: If backend is not a known name.
        EngineInitializationError: If the engine is not installed or its
            constructor fails (e.g. no dictionary found).
    """
    if backend not in BACKENDS:
        raise ValueError(
            f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}"
        )

    if backend == "auto":
        backend = active_backend()
        if backend == "none":
            raise EngineInitializationError(
                "No Japanese morphological analyzer is installed. "
                "Install it with: pip install mecab-python3 and a system mecab-ipadic "
                "(or: pip install sudachipy sudachidict_core)"
            )

    if backend == "mecab":
        if not has_mecab():
            raise EngineInitializationError(
                "mecab-python3 package is not installed. "
                "Install it with: pip install mecab-python3 (with a system mecab-ipadic)"
            )
        engine_cls = MecabEngine
    else:
        if not has_sudachi():
            raise EngineInitializationError(
                "sudachipy package is not installed. "
                "Install it with: pip install sudachipy sudachidict_core"
            )
        engine_cls = SudachiEngine

    try:
        return engine_cls()
    except Exception as e:
        raise EngineInitializationError(
            f"Failed to initialize {backend} engine: {e}"
        ) from e


__all__ = [
    "BACKENDS",
    "MorphemeNode",
    "MecabEngine",
    "SudachiEngine",
    "active_backend",
    "check_feature_layout",
    "create_engine",
    "has_mecab",
    "has_sudachi",
    "link_nodes",
]
