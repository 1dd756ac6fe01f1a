from collections import Counter, defaultdict
from typing import Callable, Dict, List, Optional, Tuple
import logging

from analyzer.tokenizer import tokenize_text
from analyzer.tokenizer.types import TokenizationResult
from analyzer.text_analyzer.iterators import WordIterator, WordPairIterator
from analyzer.text_analyzer.types import TextStatistics, WordFrequency

# Configure logging
logger = logging.getLogger(__name__)


class TextAnalyzer:
    """
    Read-only analysis over the words of a text.

    The text is tokenized once at construction. Every query afterwards is a
    pure read over the stored word tuple, so queries can be repeated and
    interleaved freely, and any number of cursors may traverse the words at
    the same time.
    """

    def __init__(self, text: str):
        """
        Tokenize the text and store the result.

        Args:
            text: Input text string, may be empty

        Raises:
            ValueError: If text is not a string
        """
        self._result: TokenizationResult = tokenize_text(text)
        logger.info(
            f"Initialized TextAnalyzer with {len(self._result.words)} words "
            f"from {len(text)} characters"
        )

    @property
    def text(self) -> str:
        """The original input text."""
        return self._result.text

    @property
    def words(self) -> Tuple[str, ...]:
        """The lowercase words in order of appearance."""
        return self._result.words

    def __len__(self) -> int:
        return len(self._result.words)

    def __iter__(self) -> WordIterator:
        return self.iter_words()

    def __repr__(self) -> str:
        return f"TextAnalyzer(words={len(self)}, text={self.text[:30]!r})"

    def word_count(self) -> int:
        """Return the total number of words, duplicates included."""
        return len(self._result.words)

    def unique_word_count(self) -> int:
        """Return the number of distinct words."""
        return len(set(self._result.words))

    def longest_word(self) -> Optional[str]:
        """
        Return the longest word.

        Ties go to the word that appears first in the text.

        Returns:
            The longest word, or None if the text has no words
        """
        if not self._result.words:
            return None
        return max(self._result.words, key=len)

    def average_word_length(self) -> float:
        """
        Return the mean length of the words.

        Returns:
            Sum of word lengths divided by word count, 0.0 if there are no words
        """
        if not self._result.words:
            return 0.0
        total_length = sum(len(word) for word in self._result.words)
        return total_length / len(self._result.words)

    def filter_words(self, condition: Callable[[str], bool]) -> List[str]:
        """
        Return the words accepted by a predicate.

        The predicate is called exactly once per word, in text order. Any
        exception it raises propagates to the caller.

        Args:
            condition: Predicate over a single word

        Returns:
            Accepted words in their original order

        Examples:
            >>> TextAnalyzer("hi my rust friends").filter_words(lambda w: len(w) < 3)
            ['hi', 'my']
        """
        return [word for word in self._result.words if condition(word)]

    def word_frequencies(self) -> Dict[str, int]:
        """
        Count the occurrences of every distinct word.

        Returns:
            New dictionary mapping each word to its count
        """
        frequencies: defaultdict = defaultdict(int)
        for word in self._result.words:
            frequencies[word] += 1

        logger.debug(f"Counted {len(frequencies)} distinct words")
        return dict(frequencies)

    def most_common_words(self, n: int = 10) -> List[WordFrequency]:
        """
        Return the n most frequent words.

        Words with equal counts keep the order of their first appearance.

        Args:
            n: Number of entries to return (must be positive)

        Returns:
            List of WordFrequency entries, most frequent first

        Raises:
            ValueError: If n is not a positive integer
        """
        if not isinstance(n, int) or n <= 0:
            raise ValueError("n must be a positive integer")

        counts = Counter(self._result.words)
        return [
            WordFrequency(word=word, count=count)
            for word, count in counts.most_common(n)
        ]

    def statistics(self) -> TextStatistics:
        """Bundle the scalar statistics into one frozen model."""
        return TextStatistics(
            word_count=self.word_count(),
            unique_word_count=self.unique_word_count(),
            longest_word=self.longest_word(),
            average_word_length=self.average_word_length(),
        )

    def iter_words(self) -> WordIterator:
        """Return a fresh cursor over the words."""
        return WordIterator(self._result.words)

    def word_pairs(self) -> WordPairIterator:
        """Return a fresh cursor over consecutive word pairs."""
        return WordPairIterator(self._result.words)
