"""
Text Analyzer Component.

Provides word statistics (counts, uniqueness, length metrics, frequency
tables) and lazy traversal over single words and consecutive word pairs.
"""

from analyzer.text_analyzer.text_analyzer import TextAnalyzer
from analyzer.text_analyzer.iterators import WordIterator, WordPairIterator
from analyzer.text_analyzer.types import TextStatistics, WordFrequency


def create_text_analyzer(text: str = "") -> TextAnalyzer:
    """
    Factory function to create a text analyzer instance.

    Args:
        text: Text to analyze (default: empty text)

    Returns:
        TextAnalyzer over the given text

    Examples:
        >>> analyzer = create_text_analyzer("Hello, hello world")
        >>> analyzer.unique_word_count()
        2
    """
    return TextAnalyzer(text)


__all__ = [
    "create_text_analyzer",
    "TextAnalyzer",
    "WordIterator",
    "WordPairIterator",
    "TextStatistics",
    "WordFrequency",
]
