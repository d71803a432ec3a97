"""Shared fixtures: src/ on sys.path and an in-memory NLP provider."""

import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from text_analyzer.embeddings import WordEmbedding  # noqa: E402
from text_analyzer.policies import NameType  # noqa: E402


class FakeProvider:
    """Provider returning canned results, recording the calls made."""

    def __init__(self, language='en', sentiment=0.5, lemmas=None, names=None, embeddings=None):
        self.language = language
        self.score = sentiment
        self.lemmas = lemmas
        self.names = names or []
        self.embeddings = embeddings or {}
        self.calls = []

    def dominant_language(self, text):
        self.calls.append(('dominant_language', text))
        return self.language

    def sentiment(self, text):
        self.calls.append(('sentiment', text))
        return self.score

    def lemma_tags(self, text):
        self.calls.append(('lemma_tags', text))
        if self.lemmas is not None:
            return list(self.lemmas)
        return [(word, word.lower()) for word in text.split(' ')]

    def word_embedding(self, language):
        self.calls.append(('word_embedding', language))
        return self.embeddings.get(language)

    def name_tags(self, text):
        self.calls.append(('name_tags', text))
        return list(self.names)


@pytest.fixture
def fake_provider():
    return FakeProvider(
        names=[
            ('Angela Merkel', NameType.PERSON),
            ('visited', None),
            ('Paris', NameType.PLACE),
            ('for', None),
            ('UNESCO', NameType.ORGANIZATION),
            ('today', NameType.OTHER),
        ],
    )


@pytest.fixture
def small_embedding():
    words = ['king', 'queen', 'prince', 'banana', 'apple']
    vectors = [
        [1.0, 0.0, 0.0],
        [0.95, 0.05, 0.0],
        [0.85, 0.3, 0.0],
        [0.0, 1.0, 0.2],
        [0.0, 0.9, 0.4],
    ]
    return WordEmbedding(words, vectors)
