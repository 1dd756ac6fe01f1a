from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Tuple


class TokenizationResult(BaseModel):
    """Model for the tokenized form of a text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The original input text")
    words: Tuple[str, ...] = Field(
        default_factory=tuple, description="Lowercase words in order of appearance"
    )

    @field_validator("words")
    @classmethod
    def validate_words(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Validate that no word is empty."""
        if any(not word for word in v):
            raise ValueError("words cannot contain empty tokens")
        return v
