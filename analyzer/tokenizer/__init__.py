"""
Tokenizer Component for the Text Analyzer.

This module splits raw text into lowercase alphanumeric words. Any run of
non-alphanumeric characters acts as a separator and is discarded.
"""

from analyzer.tokenizer.base import TokenizerBase
from analyzer.tokenizer.word_tokenizer import WordTokenizer
from analyzer.tokenizer.types import TokenizationResult


def create_tokenizer() -> WordTokenizer:
    """
    Factory function to create a tokenizer instance.

    Returns:
        Configured WordTokenizer instance

    Examples:
        >>> tokenizer = create_tokenizer()
        >>> isinstance(tokenizer, WordTokenizer)
        True
    """
    return WordTokenizer()


def tokenize_text(text: str) -> TokenizationResult:
    """
    Tokenize text with the default tokenizer and wrap the outcome.

    Args:
        text: Input text string

    Returns:
        Frozen TokenizationResult holding the text and its words

    Raises:
        ValueError: If text is not a string
    """
    words = create_tokenizer().tokenize(text)
    return TokenizationResult(text=text, words=tuple(words))


__all__ = [
    "create_tokenizer",
    "tokenize_text",
    "TokenizerBase",
    "WordTokenizer",
    "TokenizationResult",
]
