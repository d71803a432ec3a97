"""Text preprocessing module using spaCy."""

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

import pandas as pd
import spacy
from spacy.language import Language

from text_analyzer.policies import NameType, name_type_for_label

logger = logging.getLogger(__name__)


class ModelNotFoundError(RuntimeError):
    """A spaCy pipeline is not installed."""

    def __init__(self, model_name: str):
        super().__init__(
            f"Model {model_name} not found. Please install it using `python -m spacy download {model_name}`"
        )
        self.model_name = model_name


@lru_cache(maxsize=None)
def load_model(model_name: str) -> Language:
    """
    Load a spaCy pipeline once per process.

    Args:
        model_name: Name of spaCy model to load

    Returns:
        Loaded pipeline

    Raises:
        ModelNotFoundError: if the model is not installed
    """
    logger.info(f"Loading spaCy model '{model_name}'")
    try:
        return spacy.load(model_name)
    except OSError as e:
        raise ModelNotFoundError(model_name) from e


class TextPreprocessor:
    """Split text into word segments with their lemmas and entity categories."""

    def __init__(self, model_name: Optional[str] = 'en_core_web_sm', nlp: Optional[Language] = None):
        """
        Initialize preprocessor with spaCy model.

        Args:
            model_name: Name of spaCy model to use, ignored when `nlp` is given
            nlp: Already loaded pipeline
        """
        self.nlp = nlp if nlp is not None else load_model(model_name)

    def process_text(self, text: str) -> pd.DataFrame:
        """
        Tokenize text.

        Args:
            text: Text to process

        Returns:
            DataFrame with columns: token, whitespace, lemma, is_space, ent_iob, ent_label
        """
        data = {
            'token': [],
            'whitespace': [],
            'lemma': [],
            'is_space': [],
            'ent_iob': [],
            'ent_label': []
        }

        self.nlp.max_length = max(self.nlp.max_length, len(text) + 100)
        doc = self.nlp(text)
        for token in doc:
            data['token'].append(token.text)
            data['whitespace'].append(token.whitespace_)
            # Pipelines without a lemmatizer leave lemma_ empty
            data['lemma'].append(token.lemma_ or None)
            data['is_space'].append(token.is_space)
            data['ent_iob'].append(token.ent_iob_)
            data['ent_label'].append(token.ent_type_ or None)

        logger.debug(f"Processed {len(doc)} tokens")
        return pd.DataFrame(data, dtype=object)

    def lemma_tags(self, text: str) -> List[Tuple[str, Optional[str]]]:
        """
        Get the lemma of each word segment.

        Returns:
            List of (segment, lemma) tuples in text order; lemma is None for whitespace and when the pipeline has none
        """
        tokens_df = self.process_text(text)
        # Lemmatizers echo whitespace tokens back as their own lemma
        return [
            (token, None if is_space else lemma)
            for token, lemma, is_space in zip(tokens_df['token'], tokens_df['lemma'], tokens_df['is_space'])
        ]

    def name_tags(self, text: str) -> List[Tuple[str, Optional[NameType]]]:
        """
        Get the entity category of each word segment, joining multi-word names into one segment.

        Returns:
            List of (segment, category) tuples in text order; category is None outside entities
        """
        tokens_df = self.process_text(text)
        segments = []
        previous_ws = ''
        for row in tokens_df.itertuples(index=False):
            if row.ent_iob == 'I' and segments and segments[-1][1] is not None:
                # Continue the current name, keeping the original spacing
                name, name_type = segments[-1]
                segments[-1] = (name + previous_ws + row.token, name_type)
            elif row.ent_iob == 'B' and row.ent_label:
                segments.append((row.token, name_type_for_label(row.ent_label)))
            else:
                segments.append((row.token, None))
            previous_ws = row.whitespace
        return segments
