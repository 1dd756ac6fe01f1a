from abc import ABC, abstractmethod
from typing import List
import logging

# Configure logging
logger = logging.getLogger(__name__)


class TokenizerBase(ABC):
    """
    Base class holding the word contract shared by all tokenizers.

    Subclasses only decide where the text is split. The base class rejects
    non-string input, drops empty fragments and lowercases every word.
    """

    @abstractmethod
    def split(self, text: str) -> List[str]:
        """
        Split text into raw fragments.

        Args:
            text: Input text, already known to be a string

        Returns:
            Fragments in order of appearance, possibly including empty ones
        """
        pass

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into lowercase words.

        Args:
            text: Input text string

        Returns:
            Non-empty lowercase words in order of appearance, duplicates retained

        Raises:
            ValueError: If text is not a string
        """
        if not isinstance(text, str):
            raise ValueError("Input must be a string")

        tokens = [fragment.lower() for fragment in self.split(text) if fragment]
        logger.debug(f"Tokenized {len(text)} characters into {len(tokens)} words")
        return tokens
