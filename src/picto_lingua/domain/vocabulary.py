"""Models for generated vocabulary."""

from pydantic import BaseModel, ConfigDict


class VocabularyItem(BaseModel):
    """Single vocabulary word with its definition and example."""

    model_config = ConfigDict(frozen=True)

    word: str
    definition: str
    example: str | None = None
    dutch_word: str | None = None
    dutch_definition: str | None = None
    dutch_example: str | None = None
