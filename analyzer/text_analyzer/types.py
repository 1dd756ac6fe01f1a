from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional


class WordFrequency(BaseModel):
    """Model for a single entry of the frequency table."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, description="The distinct word")
    count: int = Field(..., description="Number of occurrences in the text")

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        """Validate count is positive."""
        if v <= 0:
            raise ValueError("Count must be positive")
        return v


class TextStatistics(BaseModel):
    """Model for the scalar statistics of an analyzed text."""

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(..., ge=0, description="Total number of words")
    unique_word_count: int = Field(..., ge=0, description="Number of distinct words")
    longest_word: Optional[str] = Field(
        None, description="First word of maximal length, None for empty text"
    )
    average_word_length: float = Field(
        ..., ge=0.0, description="Mean word length, 0.0 for empty text"
    )

    @field_validator("unique_word_count")
    @classmethod
    def validate_unique_count(cls, v: int, info) -> int:
        """Validate that distinct words never outnumber all words."""
        total = info.data.get("word_count")
        if total is not None and v > total:
            raise ValueError(
                f"unique_word_count {v} exceeds word_count {total}"
            )
        return v
