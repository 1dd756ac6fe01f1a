"""
Text Analyzer Report
Runs every analysis over a text and prints the results
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from pydantic import BaseModel, Field, ConfigDict

from analyzer.text_analyzer import TextAnalyzer

# Configure logging
logger = logging.getLogger(__name__)

SAMPLE_TEXT = "Rust is fast and safe. Rust is empowering developers."


class ReportConfig(BaseModel):
    """Configuration for building a report."""

    long_word_min_length: int = Field(
        3, ge=0, description="Words longer than this are listed as long words"
    )
    top_k: int = Field(5, ge=1, description="Number of most frequent words to show")


class WordRule(BaseModel):
    """A described predicate over a single word."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., min_length=1, description="Human readable rule")
    check: Callable[[str], bool] = Field(..., description="Predicate over a word")


def default_rules(config: ReportConfig) -> List[WordRule]:
    """Rules applied when the caller supplies none."""
    limit = config.long_word_min_length
    return [
        WordRule(
            description=f"Words longer than {limit} letters",
            check=lambda word: len(word) > limit,
        ),
        WordRule(
            description="Words starting with 'r'",
            check=lambda word: word.startswith("r"),
        ),
    ]


def build_report(
    text: str,
    config: Optional[ReportConfig] = None,
    rules: Optional[List[WordRule]] = None,
) -> Dict[str, Any]:
    """
    Analyze a text and collect every result into a dictionary.

    Args:
        text: Text to analyze
        config: Report configuration (default: ReportConfig())
        rules: Word rules to evaluate (default: default_rules(config))

    Returns:
        Dictionary with statistics, frequencies, rule matches and pairs
    """
    if config is None:
        config = ReportConfig()
    if rules is None:
        rules = default_rules(config)

    analyzer = TextAnalyzer(text)
    stats = analyzer.statistics()

    report = {
        "text": analyzer.text,
        "words": list(analyzer.iter_words()),
        "statistics": stats.model_dump(),
        "most_common": [
            entry.model_dump() for entry in analyzer.most_common_words(config.top_k)
        ],
        "rules": {rule.description: analyzer.filter_words(rule.check) for rule in rules},
        "pairs": list(analyzer.word_pairs()),
    }

    logger.info(
        f"Built report: {stats.word_count} words, {len(rules)} rules evaluated"
    )
    return report


def main(text: str = SAMPLE_TEXT) -> None:
    """Print a report for the given text."""
    print("📝 Text Analyzer")
    report = build_report(text)
    stats = report["statistics"]

    print(f"\nText: '{report['text']}'")
    print(f"   Word count: {stats['word_count']}")
    print(f"   Unique words: {stats['unique_word_count']}")
    print(f"   Longest word: {stats['longest_word']}")
    print(f"   Average word length: {stats['average_word_length']:.2f}")

    print("\n📊 Most common words:")
    for entry in report["most_common"]:
        print(f"   → '{entry['word']}' ({entry['count']})")

    print("\n🔍 Rules:")
    for description, matches in report["rules"].items():
        print(f"   {description}: {matches}")

    print("\n🔗 Word pairs:")
    for first, second in report["pairs"]:
        print(f"   {first} → {second}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
