from typing import Iterator, Sequence, Tuple
import logging

# Configure logging
logger = logging.getLogger(__name__)


class WordIterator(Iterator[str]):
    """
    Lazy cursor over a sequence of words.

    The cursor shares the analyzer's word tuple and keeps its own position,
    so several cursors over the same analyzer never interfere.
    """

    def __init__(self, words: Sequence[str]):
        self._words = words
        self._index = 0

    def __iter__(self) -> "WordIterator":
        return self

    def __next__(self) -> str:
        if self._index < len(self._words):
            word = self._words[self._index]
            self._index += 1
            return word
        raise StopIteration

    def __length_hint__(self) -> int:
        return len(self._words) - self._index


class WordPairIterator(Iterator[Tuple[str, str]]):
    """
    Lazy cursor over consecutive overlapping word pairs.

    Yields (words[i], words[i + 1]) for every i up to len(words) - 2.

    Examples:
        >>> list(WordPairIterator(("a", "b", "c")))
        [('a', 'b'), ('b', 'c')]
    """

    def __init__(self, words: Sequence[str]):
        self._words = words
        self._index = 0
        if len(words) < 2:
            logger.debug(f"Too few words for pairs: {len(words)} < 2")

    def __iter__(self) -> "WordPairIterator":
        return self

    def __next__(self) -> Tuple[str, str]:
        if self._index + 1 < len(self._words):
            pair = (self._words[self._index], self._words[self._index + 1])
            self._index += 1
            return pair
        raise StopIteration

    def __length_hint__(self) -> int:
        return max(0, len(self._words) - self._index - 1)
