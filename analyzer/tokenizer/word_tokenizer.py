from analyzer.tokenizer.base import TokenizerBase
from typing import List
import re
import logging

# Configure logging
logger = logging.getLogger(__name__)


class WordTokenizer(TokenizerBase):
    """Tokenizer that splits text on runs of non-alphanumeric characters."""

    def __init__(self):
        # Same character class as str.isalnum(): word characters minus underscore
        self._word_pattern = re.compile(r"[^\W_]+")
        logger.debug("Initialized WordTokenizer")

    def split(self, text: str) -> List[str]:
        """
        Return every maximal run of alphanumeric characters.

        Examples:
            >>> WordTokenizer().tokenize("Hello, world--again!")
            ['hello', 'world', 'again']
        """
        return self._word_pattern.findall(text)
