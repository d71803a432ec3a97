"""NLP provider combining language detection, sentiment, tagging and embeddings."""

import logging
from typing import List, Optional, Tuple

from text_analyzer.config import Settings
from text_analyzer.embeddings import EmbeddingRegistry, WordEmbedding
from text_analyzer.language_detector import LanguageDetector
from text_analyzer.policies import NameType
from text_analyzer.preprocess import TextPreprocessor
from text_analyzer.sentiment import SentimentAnalyzer

logger = logging.getLogger(__name__)


class NoPipelineError(ValueError):
    """No tagging pipeline is configured for a language and no fallback is set."""


class NLPProvider:
    """
    The five capabilities the analyzer relies on.

    Every method returns None (or an empty list) when the underlying library has
    no answer; choosing defaults is up to the caller. spaCy pipelines are only
    loaded on first use.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.language_detector = LanguageDetector()
        self.sentiment_analyzer = SentimentAnalyzer()
        self.embeddings = EmbeddingRegistry(self.settings.embeddings)
        self._preprocessors = {}

    def preprocessor_for(self, text: str) -> TextPreprocessor:
        """Tagging preprocessor for the language of the text."""
        language = self.dominant_language(text)
        model_name = self.settings.pipeline_for(language)
        if model_name is None:
            raise NoPipelineError(f"No spaCy pipeline configured for language {language!r} and no fallback model set")
        if model_name not in self._preprocessors:
            self._preprocessors[model_name] = TextPreprocessor(model_name)
        return self._preprocessors[model_name]

    def dominant_language(self, text: str) -> Optional[str]:
        return self.language_detector.dominant_language(text)

    def sentiment(self, text: str) -> Optional[float]:
        return self.sentiment_analyzer.score(text)

    def lemma_tags(self, text: str) -> List[Tuple[str, Optional[str]]]:
        return self.preprocessor_for(text).lemma_tags(text)

    def word_embedding(self, language: Optional[str]) -> Optional[WordEmbedding]:
        return self.embeddings.word_embedding(language)

    def name_tags(self, text: str) -> List[Tuple[str, Optional[NameType]]]:
        return self.preprocessor_for(text).name_tags(text)
