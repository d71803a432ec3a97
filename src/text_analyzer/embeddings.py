"""Word embedding nearest-neighbor queries over spaCy vector tables."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from text_analyzer.preprocess import ModelNotFoundError, load_model

logger = logging.getLogger(__name__)


class WordEmbedding:
    """Cosine similarity search over a fixed vocabulary of word vectors."""

    def __init__(self, words: Sequence[str], vectors: np.ndarray, aliases: Optional[Dict[str, int]] = None):
        """
        Initialize embedding.

        Args:
            words: Vocabulary, one word per row of `vectors`, used to name results
            vectors: Array of shape (len(words), dim)
            aliases: Other words mapped to a row they share with its named word
        """
        if len(words) != len(vectors):
            raise ValueError(f"Got {len(words)} words for {len(vectors)} vectors")

        self.words = list(words)
        self.vectors = np.asarray(vectors, dtype=np.float32)
        self.index = {}
        for row, word in enumerate(self.words):
            self.index.setdefault(word, row)
        for word, row in (aliases or {}).items():
            if not 0 <= row < len(self.words):
                raise ValueError(f"Alias {word!r} points to missing row {row}")
            self.index.setdefault(word, row)

        norms = np.linalg.norm(self.vectors, axis=1)
        # Zero vectors never match anything
        norms[norms == 0] = np.inf
        self.norms = norms

    @classmethod
    def from_spacy(cls, nlp) -> Optional['WordEmbedding']:
        """
        Build an embedding from the vector table of a spaCy pipeline.

        Pruned tables map many keys onto one row; every key stays searchable,
        while results are named after the first key seen for their row.

        Returns:
            WordEmbedding, or None if the pipeline carries no vectors
        """
        vectors = nlp.vocab.vectors
        if vectors.shape[0] == 0 or vectors.shape[1] == 0:
            return None

        strings = nlp.vocab.strings
        row_keys = {}
        for key, row in vectors.key2row.items():
            if key in strings:
                row_keys.setdefault(row, []).append(strings[key])

        rows = sorted(row_keys)
        position = {row: i for i, row in enumerate(rows)}
        words = [row_keys[row][0] for row in rows]
        aliases = {word: position[row] for row in rows for word in row_keys[row][1:]}
        data = vectors.data if len(rows) == vectors.shape[0] else vectors.data[rows]
        return cls(words, data, aliases)

    def _row_for(self, word: str) -> Optional[int]:
        row = self.index.get(word)
        if row is None:
            row = self.index.get(word.lower())
        return row

    def neighbors(self, word: str, maximum_count: int) -> List[Tuple[str, float]]:
        """
        Find the words closest to `word`.

        Args:
            word: Query word
            maximum_count: Maximum number of neighbors to return

        Returns:
            List of (word, cosine similarity) tuples, most similar first, without the query word
            or any other word sharing its vector row.
            Empty if the word has no vector.
        """
        row = self._row_for(word)
        if row is None or maximum_count <= 0 or not np.isfinite(self.norms[row]):
            return []

        scores = (self.vectors @ self.vectors[row]) / (self.norms * self.norms[row])
        scores[~np.isfinite(self.norms)] = -np.inf
        scores[row] = -np.inf

        count = min(maximum_count, len(self.words) - 1)
        if count <= 0:
            return []

        # Top `count` rows, then sort only those
        best = np.argpartition(-scores, count - 1)[:count]
        best = best[np.argsort(-scores[best], kind='stable')]

        return [(self.words[i], float(scores[i])) for i in best if np.isfinite(scores[i])]


class EmbeddingRegistry:
    """Look up word embeddings by language code."""

    def __init__(self, models: Dict[str, str]):
        """
        Initialize registry.

        Args:
            models: Mapping of language code to spaCy model name with vectors
        """
        self.models = dict(models)
        self._cache: Dict[str, Optional[WordEmbedding]] = {}

    def word_embedding(self, language: Optional[str]) -> Optional[WordEmbedding]:
        """
        Get the embedding for a language.

        Returns:
            WordEmbedding, or None if no usable model exists for the language
        """
        model_name = self.models.get(language or '')
        if model_name is None:
            logger.debug(f"No embedding model configured for language {language!r}")
            return None

        if model_name not in self._cache:
            try:
                embedding = WordEmbedding.from_spacy(load_model(model_name))
                if embedding is None:
                    logger.warning(f"No word vectors available in {model_name}")
            except ModelNotFoundError as e:
                logger.warning(str(e))
                embedding = None
            self._cache[model_name] = embedding

        return self._cache[model_name]
