"""Default values for absent provider results and entity category tables."""

from enum import Enum
from typing import Optional

import regex as re

# Language code reported when no language can be determined
UNDETERMINED = 'und'
DEFAULT_SENTIMENT = 0.0

# Whitespace at either end of a segment or lemma
_EDGE_WHITESPACE = re.compile(r"^\p{White_Space}+|\p{White_Space}+$")


class NameType(Enum):
    """Entity category of a name-tagged segment."""

    PERSON = 'Person'
    PLACE = 'Place'
    ORGANIZATION = 'Organization'
    OTHER = 'Other'


# spaCy entity labels (OntoNotes and WikiNER schemes)
SPACY_LABELS = {
    'PERSON': NameType.PERSON,
    'PER': NameType.PERSON,
    'GPE': NameType.PLACE,
    'LOC': NameType.PLACE,
    'FAC': NameType.PLACE,
    'ORG': NameType.ORGANIZATION,
}

# Config switch that has to be on for a category to be printed.
# "names" has no entry: on its own it prints no category.
ENTITY_FLAGS = {
    NameType.PERSON: 'mame',
    NameType.PLACE: 'place',
    NameType.ORGANIZATION: 'organization',
}


def name_type_for_label(label: str) -> NameType:
    return SPACY_LABELS.get(label, NameType.OTHER)


def language_or_default(language: Optional[str]) -> str:
    return language or UNDETERMINED


def sentiment_or_default(score) -> float:
    """Parse a provider score, falling back to 0.0 when absent or not a number."""
    if score is None:
        return DEFAULT_SENTIMENT
    try:
        return float(score)
    except (TypeError, ValueError):
        return DEFAULT_SENTIMENT


def lemma_or_segment(lemma: Optional[str], segment: str) -> str:
    """Provider lemma, else the segment text, without surrounding whitespace."""
    return _EDGE_WHITESPACE.sub('', lemma or segment)


def missing_embedding_message(word: str) -> str:
    return f"No embedding found for the word '{word}'."
