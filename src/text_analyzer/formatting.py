"""Text formatting of analysis results."""

from typing import Sequence

from text_analyzer.policies import NameType


def format_list(items: Sequence[str], conjunction: str = 'and') -> str:
    """
    Join items as a natural-language list.

    Examples:
        ['a'] -> 'a'
        ['a', 'b'] -> 'a and b'
        ['a', 'b', 'c'] -> 'a, b, and c'
    """
    items = list(items)
    if len(items) <= 1:
        return ''.join(items)
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def format_neighbor(word: str, similarity: float) -> str:
    return f"\t- {word} (Similarity: {similarity})"


def format_entity(name_type: NameType, text: str) -> str:
    return f"{name_type.value}: {text}"
