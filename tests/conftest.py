"""
Pytest configuration and fixtures for yomitoki tests.

The fake engine below returns node chains shaped like MeCab's
(BOS -> tokens -> EOS), so the suite runs without any dictionary.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from yomitoki.analyzer import AnalyzerHandle
from yomitoki.japanese.tokenizers import MorphemeNode, link_nodes


# Feature strings keyed by surface, IPADIC layout.
FEATURES = {
    "猫": "名詞,一般,*,*,*,*,猫,ネコ,ネコ",
    "が": "助詞,格助詞,一般,*,*,*,が,ガ,ガ",
    "鳴く": "動詞,自立,*,*,五段・カ行イ音便,基本形,鳴く,ナク,ナク",
    "今日": "名詞,副詞可能,*,*,*,*,今日,キョウ,キョー",
    "は": "助詞,係助詞,*,*,*,*,は,ハ,ワ",
    "犬": "名詞,一般,*,*,*,*,*",
    "ほげ": "名詞,固有名詞,一般,*,*,*,*",
    "。": "記号,句点,*,*,*,*,。,。,。",
}


def make_node(surface, feature=None):
    """Build a real (non-sentinel) node for ``surface``."""
    if feature is None:
        feature = FEATURES[surface]
    return MorphemeNode(
        surface=surface,
        length=len(surface.encode("utf-8")),
        feature=feature,
    )


class FakeEngine:
    """
    Engine stand-in that splits input on the surfaces it was given.

    ``script`` maps an input text to the list of surfaces it tokenizes
    into. Unlisted text is split on spaces, so "" and "   " give no tokens.
    """

    name = "fake"

    def __init__(self, script=None, features=None):
        self.script = script or {}
        self.features = dict(FEATURES)
        if features:
            self.features.update(features)
        self.calls = []

    def parse_to_node(self, text):
        self.calls.append(text)
        surfaces = self.script.get(text)
        if surfaces is None:
            surfaces = text.split()
        return link_nodes(make_node(s, self.features[s]) for s in surfaces)


@pytest.fixture
def fake_engine():
    """A fake engine with a few scripted sentences."""
    return FakeEngine(
        script={
            "猫": ["猫"],
            "犬": ["犬"],
            "猫が鳴く": ["猫", "が", "鳴く"],
            "今日は犬。": ["今日", "は", "犬", "。"],
            "ほげ猫": ["ほげ", "猫"],
        }
    )


@pytest.fixture
def handle(fake_engine):
    """An AnalyzerHandle that builds the fake engine."""
    return AnalyzerHandle(backend="auto", engine_factory=lambda backend: fake_engine)

