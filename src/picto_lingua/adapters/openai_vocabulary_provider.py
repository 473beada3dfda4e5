"""OpenAI chat completions client for vocabulary generation."""

import logging
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError
from pydantic import TypeAdapter, ValidationError

from picto_lingua.domain.vocabulary import VocabularyItem
from picto_lingua.services.vocabulary import UpstreamFailureError, VocabularyProvider

_logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a language learning tool that generates vocabulary words "
    "with definitions and examples."
)

_VOCABULARY_LIST = TypeAdapter(list[VocabularyItem])


def build_prompt(theme: str, count: int, language: str) -> str:
    """Build the user prompt for a vocabulary request."""
    if language.lower() == "dutch":
        return (
            f'Generate {count} vocabulary words related to the theme "{theme}" '
            "in both English and Dutch.\n"
            "Each word should have:\n"
            "- English word\n"
            "- English definition\n"
            "- Example sentence in English\n"
            "- Dutch translation of the word\n"
            "- Dutch definition\n"
            "- Example sentence in Dutch\n\n"
            "Format your response as a JSON array of objects, "
            "where each object contains:\n"
            '- "word": the English vocabulary word\n'
            '- "definition": a brief English definition of the word\n'
            '- "example": a simple example sentence using the word in English\n'
            '- "dutch_word": the Dutch translation of the word\n'
            '- "dutch_definition": a brief Dutch definition of the word\n'
            '- "dutch_example": a simple example sentence using the word in Dutch\n\n'
            "Only provide the JSON output, no additional text."
        )
    return (
        f'Generate {count} vocabulary words related to the theme "{theme}".\n'
        "Each word should have a definition and a simple example sentence.\n"
        "Format your response as a JSON array of objects, "
        "where each object contains:\n"
        '- "word": the vocabulary word\n'
        '- "definition": a brief definition of the word\n'
        '- "example": a simple example sentence using the word\n\n'
        "Only provide the JSON output, no additional text."
    )


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences around a JSON payload."""
    cleaned = text.strip()
    if "```" in cleaned:
        cleaned = cleaned.replace("```json", "").replace("```", "").strip()
    return cleaned


def parse_vocabulary(text: str) -> list[VocabularyItem]:
    """Parse a JSON array of vocabulary items."""
    try:
        return _VOCABULARY_LIST.validate_json(strip_code_fences(text))
    except ValidationError as exc:
        raise UpstreamFailureError(
            f"Error parsing vocabulary response: {exc.error_count()} errors"
        ) from exc


@dataclass
class OpenAIVocabularyProvider(VocabularyProvider):
    """Vocabulary provider backed by OpenAI chat completions."""

    client: AsyncOpenAI
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7

    @classmethod
    def create(
        cls, api_key: str, model: str, timeout_seconds: float = 30.0
    ) -> "OpenAIVocabularyProvider":
        """Create a provider with a managed OpenAI client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds), model=model
        )

    async def generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        """Ask the model for vocabulary and validate the JSON it returns."""
        prompt = build_prompt(theme, count, language)
        _logger.debug("Vocabulary prompt for %s/%s: %s", theme, language, prompt)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except OpenAIError as exc:
            _logger.warning("OpenAI vocabulary request failed: %s", exc)
            raise UpstreamFailureError(f"Error generating vocabulary: {exc}") from exc

        if not response.choices or not response.choices[0].message.content:
            raise UpstreamFailureError("OpenAI returned an empty response")
        items = parse_vocabulary(response.choices[0].message.content)
        _logger.info("Parsed %s vocabulary items for theme %s", len(items), theme)
        return items

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
