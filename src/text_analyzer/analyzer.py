"""Text analyzer producing the report for one run."""

import logging
from typing import List, Sequence

from text_analyzer import policies
from text_analyzer.config import AnalyzerConfig
from text_analyzer.formatting import format_entity, format_list, format_neighbor

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """Run the requested analyses over the input words and format the results."""

    def __init__(self, provider, config: AnalyzerConfig, words: Sequence[str]):
        """
        Initialize analyzer.

        Args:
            provider: Object with the NLPProvider methods
            config: Run options; "everything" is expanded here
            words: Input words, joined with single spaces
        """
        self.provider = provider
        self.config = config.resolve()
        self.text = ' '.join(words)

    def detect_language(self) -> str:
        return policies.language_or_default(self.provider.dominant_language(self.text))

    def sentiment(self) -> float:
        return policies.sentiment_or_default(self.provider.sentiment(self.text))

    def lemmas(self) -> List[str]:
        """
        Get the stem form of each word segment.

        Returns:
            Stems in text order, duplicates kept, empty segments skipped
        """
        results = []
        for segment, lemma in self.provider.lemma_tags(self.text):
            stem_form = policies.lemma_or_segment(lemma, segment)
            if stem_form:
                results.append(stem_form)
        return results

    def alternatives(self, word: str) -> List[str]:
        """
        Get report lines with similar words for one word.

        Only neighbors more similar than `far_away` are listed.
        """
        language = policies.language_or_default(self.provider.dominant_language(self.text))
        embedding = self.provider.word_embedding(language)
        if embedding is None:
            return [policies.missing_embedding_message(word)]

        results = [f"Similar words to '{word}':"]
        for similar_word, similarity in embedding.neighbors(word, self.config.maximum_alternatives):
            if similarity > self.config.far_away:
                results.append(format_neighbor(similar_word, similarity))
        return results

    def entities(self) -> List[str]:
        """
        Get the names found in the text, limited to the enabled categories.

        Returns:
            Lines like "Place: Paris" in text order
        """
        results = []
        for segment, name_type in self.provider.name_tags(self.text):
            if name_type is None:
                continue
            flag = policies.ENTITY_FLAGS.get(name_type)
            if flag is not None and getattr(self.config, flag):
                results.append(format_entity(name_type, segment))
        return results

    def report(self) -> List[str]:
        """
        Build the full report.

        Returns:
            Output lines: the input text first, then one section per enabled analysis
        """
        config = self.config
        lines = ['', self.text]

        if config.detect_language:
            lines += ['', f"Detected language: {self.detect_language()}"]

        if config.sentiment_analysis:
            lines += ['', f"Sentiment analysis: {self.sentiment()}"]

        if config.lemmatize:
            lines += ['', "Found the following lemma:", f"\t{format_list(self.lemmas())}"]

        if config.alternatives:
            lines += ['', "Found the following alternatives:"]
            for word in self.lemmas():
                lines.append('')
                lines += self.alternatives(word)

        if config.wants_entities:
            lines += ['', "Found the following entities:"]
            lines += [f"\t{entity}" for entity in self.entities()]

        logger.debug(f"Report has {len(lines)} lines")
        return lines
