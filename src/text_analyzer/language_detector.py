"""Dominant language detection using langdetect."""

import logging
from typing import Optional

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

# langdetect is randomized; a fixed seed keeps repeated runs consistent
DetectorFactory.seed = 0


class LanguageDetector:
    """Detect the dominant language of a text."""

    def dominant_language(self, text: str) -> Optional[str]:
        """
        Detect the dominant language.

        Args:
            text: Text to analyze

        Returns:
            ISO 639-1 language code (e.g. 'en', 'de'), or None if it cannot be determined
        """
        if not text or not text.strip():
            return None
        try:
            return detect(text)
        except LangDetectException as e:
            logger.debug(f"No language detected for {text!r}: {e}")
            return None
