"""Paragraph-level sentiment scoring using TextBlob."""

from typing import Optional

from textblob import TextBlob


class SentimentAnalyzer:
    """Score how positive or negative a paragraph is."""

    def paragraph_at(self, text: str, start: int = 0) -> str:
        """
        Get the paragraph containing the character at `start`.

        Args:
            text: Full text
            start: Character offset inside the paragraph

        Returns:
            Paragraph text without its line break
        """
        begin = text.rfind('\n', 0, start) + 1
        end = text.find('\n', start)
        if end == -1:
            end = len(text)
        return text[begin:end]

    def score(self, text: str) -> Optional[float]:
        """
        Score the paragraph starting at the first character of the text.

        Returns:
            Polarity between -1.0 (negative) and 1.0 (positive), or None for an empty paragraph
        """
        paragraph = self.paragraph_at(text, 0)
        if not paragraph.strip():
            return None
        return TextBlob(paragraph).sentiment.polarity
