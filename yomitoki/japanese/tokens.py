"""
Iteration over an engine's node chain.

An engine's ``parse_to_node`` returns the head of a linked chain::

    BOS -> token -> token -> ... -> EOS -> None

The head is always a BOS sentinel and the only node without a successor
is the EOS sentinel, so real tokens are exactly the nodes after the head
that still have a ``next``. Nodes belong to the engine and are only valid
until its next parse, so each one is copied into a ``Token``.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from .features import decode_feature


@dataclass(frozen=True)
class Token:
    """
    An owned copy of one analyzed token.

    Attributes:
        surface: The token text, exactly ``length`` bytes of the node surface.
        length: UTF-8 byte length of the surface.
        feature: The raw feature annotation.
        fields: ``feature`` split on commas.
    """

    surface: str
    length: int
    feature: str
    fields: List[str] = field(default_factory=list)


def surface_span(surface, length: int) -> str:
    """
    Cut a node surface to its logical length.

    Engines may hand back a surface that runs past the token (the rest of
    the input buffer), so only the first ``length`` bytes belong to it.
    A length that ends inside a character leaves U+FFFD in its place.
    """
    if isinstance(surface, bytes):
        raw = surface
    else:
        raw = (surface or "").encode("utf-8")
    return raw[:length].decode("utf-8", errors="replace")


def tokenize(engine, text: str) -> Iterator[Token]:
    """
    Yield the real tokens of ``text``, skipping the BOS and EOS sentinels.

    The generator calls the engine once and must be consumed before the
    engine parses anything else.
    """
    head = engine.parse_to_node(text)
    if head is None:
        return

    node = head.next
    while node is not None and node.next is not None:
        feature = node.feature or ""
        yield Token(
            surface=surface_span(node.surface, node.length),
            length=node.length,
            feature=feature,
            fields=decode_feature(feature),
        )
        node = node.next


def snapshot(engine, text: str, lock=None) -> List[Token]:
    """
    Tokenize ``text`` fully and return the tokens as a list.

    Args:
        engine: An engine exposing ``parse_to_node``.
        text: Input text.
        lock: Optional mutex held for the parse and the copy.

    Returns:
        List[Token]: Tokens in input order; empty for blank input.
    """
    if lock is None:
        return list(tokenize(engine, text))
    with lock:
        return list(tokenize(engine, text))


__all__ = ["Token", "snapshot", "surface_span", "tokenize"]
