import numpy as np
import pytest
import spacy

from text_analyzer import embeddings
from text_analyzer.embeddings import EmbeddingRegistry, WordEmbedding
from text_analyzer.preprocess import ModelNotFoundError


def test_neighbors_sorted_without_query_word(small_embedding):
    neighbors = small_embedding.neighbors('king', 10)
    words = [word for word, _ in neighbors]
    scores = [score for _, score in neighbors]
    assert 'king' not in words
    assert words[:2] == ['queen', 'prince']
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == pytest.approx(0.95 / np.hypot(0.95, 0.05), rel=1e-5)


def test_neighbors_respect_maximum_count(small_embedding):
    assert len(small_embedding.neighbors('king', 2)) == 2
    assert [word for word, _ in small_embedding.neighbors('banana', 1)] == ['apple']
    assert small_embedding.neighbors('king', 0) == []


def test_neighbors_fall_back_to_lowercase(small_embedding):
    assert small_embedding.neighbors('King', 1) == small_embedding.neighbors('king', 1)


def test_unknown_word_has_no_neighbors(small_embedding):
    assert small_embedding.neighbors('spaceship', 5) == []


def test_zero_vectors_are_never_neighbors():
    embedding = WordEmbedding(['a', 'b', 'empty'], [[1.0, 0.0], [0.5, 0.5], [0.0, 0.0]])
    assert [word for word, _ in embedding.neighbors('a', 5)] == ['b']
    assert embedding.neighbors('empty', 5) == []


def test_mismatched_rows():
    with pytest.raises(ValueError):
        WordEmbedding(['a', 'b'], [[1.0, 0.0]])


def test_from_spacy_vectors():
    nlp = spacy.blank('en')
    nlp.vocab.set_vector('cat', np.array([1.0, 0.1, 0.0], dtype=np.float32))
    nlp.vocab.set_vector('dog', np.array([0.9, 0.2, 0.0], dtype=np.float32))
    nlp.vocab.set_vector('car', np.array([0.0, 0.1, 1.0], dtype=np.float32))

    embedding = WordEmbedding.from_spacy(nlp)
    assert sorted(embedding.words) == ['car', 'cat', 'dog']
    assert embedding.neighbors('cat', 1)[0][0] == 'dog'


def test_from_spacy_without_vectors():
    assert WordEmbedding.from_spacy(spacy.blank('en')) is None


def test_registry_unknown_language():
    registry = EmbeddingRegistry({'en': 'en_core_web_md'})
    assert registry.word_embedding('und') is None
    assert registry.word_embedding(None) is None


def test_registry_missing_model_is_absent(monkeypatch):
    def missing(model_name):
        raise ModelNotFoundError(model_name)

    monkeypatch.setattr(embeddings, 'load_model', missing)
    registry = EmbeddingRegistry({'en': 'en_core_web_md'})
    assert registry.word_embedding('en') is None


def test_registry_caches_per_model(monkeypatch):
    loaded = []

    def fake_load(model_name):
        loaded.append(model_name)
        nlp = spacy.blank('en')
        nlp.vocab.set_vector('cat', np.array([1.0, 0.0], dtype=np.float32))
        return nlp

    monkeypatch.setattr(embeddings, 'load_model', fake_load)
    registry = EmbeddingRegistry({'en': 'en_core_web_md'})
    first = registry.word_embedding('en')
    assert registry.word_embedding('en') is first
    assert loaded == ['en_core_web_md']


def test_aliases_share_the_row_of_their_word():
    embedding = WordEmbedding(['king', 'queen', 'car'], [[1.0, 0.1], [0.9, 0.2], [0.0, 1.0]],
                              aliases={'kings': 0, 'King': 0})
    assert embedding.neighbors('kings', 2) == embedding.neighbors('king', 2)
    assert [word for word, _ in embedding.neighbors('kings', 2)] == ['queen', 'car']


def test_alias_to_missing_row():
    with pytest.raises(ValueError):
        WordEmbedding(['king'], [[1.0, 0.0]], aliases={'kings': 3})


def test_from_spacy_keeps_keys_sharing_a_row():
    nlp = spacy.blank('en')
    nlp.vocab.set_vector('king', np.array([1.0, 0.1, 0.0], dtype=np.float32))
    nlp.vocab.set_vector('queen', np.array([0.9, 0.2, 0.0], dtype=np.float32))
    nlp.vocab.set_vector('car', np.array([0.0, 0.1, 1.0], dtype=np.float32))
    vectors = nlp.vocab.vectors
    king_row = vectors.key2row[nlp.vocab.strings['king']]
    vectors.add(nlp.vocab.strings.add('kings'), row=king_row)

    embedding = WordEmbedding.from_spacy(nlp)
    assert len(embedding.words) == 3
    from_alias = embedding.neighbors('kings', 2)
    assert from_alias == embedding.neighbors('king', 2)
    assert [word for word, _ in from_alias] == ['queen', 'car']
