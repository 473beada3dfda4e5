"""Offline vocabulary provider backed by bundled datasets."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from picto_lingua.domain.vocabulary import VocabularyItem
from picto_lingua.services.vocabulary import DataUnavailableError, VocabularyProvider

_logger = logging.getLogger(__name__)


def _items(*rows: tuple[str, ...]) -> tuple[VocabularyItem, ...]:
    keys = (
        "word",
        "definition",
        "example",
        "dutch_word",
        "dutch_definition",
        "dutch_example",
    )
    return tuple(VocabularyItem(**dict(zip(keys, row, strict=False))) for row in rows)


ENGLISH_DATASETS: dict[str, tuple[VocabularyItem, ...]] = {
    "park": _items(
        (
            "bench",
            "A long seat for two or more people",
            "We sat on the bench in the park.",
        ),
        (
            "playground",
            "An area for children with swings, slides, etc.",
            "The children had fun at the playground.",
        ),
        (
            "fountain",
            "An ornamental structure that sends water into the air",
            "The fountain in the park was beautiful.",
        ),
        (
            "path",
            "A way or track for walking or cycling",
            "We walked along the path through the park.",
        ),
        (
            "tree",
            "A tall plant with a wooden trunk and branches",
            "The trees in the park provide shade in summer.",
        ),
        (
            "grass",
            "Plants with narrow green leaves that cover the ground",
            "The grass in the park was freshly cut.",
        ),
        ("picnic", "An outdoor meal", "We had a picnic in the park on Sunday."),
        (
            "jogger",
            "A person who runs at a steady speed for exercise",
            "Joggers often use the park in the morning.",
        ),
        (
            "lake",
            "A large area of water surrounded by land",
            "There is a small lake in the center of the park.",
        ),
        (
            "garden",
            "An area where flowers and plants are grown",
            "The botanical garden in the park has rare flowers.",
        ),
    ),
    "cafe": _items(
        (
            "coffee",
            "A hot drink made from roasted coffee beans",
            "I ordered a coffee at the cafe.",
        ),
        (
            "barista",
            "A person who makes and serves coffee",
            "The barista made a beautiful design in my latte.",
        ),
        (
            "menu",
            "A list of food and drinks available",
            "The cafe has a varied menu with many options.",
        ),
        (
            "pastry",
            "A sweet baked food made with dough",
            "The cafe sells delicious pastries.",
        ),
        (
            "table",
            "A piece of furniture with a flat top",
            "We found a table by the window in the cafe.",
        ),
        (
            "espresso",
            "A strong coffee made by forcing steam through ground coffee beans",
            "An espresso is perfect for a quick caffeine boost.",
        ),
        (
            "latte",
            "Coffee made with hot milk",
            "She ordered a vanilla latte at the cafe.",
        ),
        (
            "wifi",
            "Wireless internet connection",
            "The cafe offers free wifi to customers.",
        ),
        (
            "ambiance",
            "The character and atmosphere of a place",
            "The cafe has a cozy ambiance with soft lighting.",
        ),
        (
            "tip",
            "Money given to a server as a reward for good service",
            "I left a generous tip at the cafe.",
        ),
    ),
}

DUTCH_DATASETS: dict[str, tuple[VocabularyItem, ...]] = {
    "park": _items(
        (
            "bench",
            "A long seat for two or more people",
            "We sat on the bench in the park.",
            "bank",
            "Een lange zitplaats voor twee of meer personen",
            "We zaten op de bank in het park.",
        ),
        (
            "playground",
            "An area for children with swings, slides, etc.",
            "The children had fun at the playground.",
            "speeltuin",
            "Een gebied voor kinderen met schommels, glijbanen, etc.",
            "De kinderen hadden plezier in de speeltuin.",
        ),
        (
            "fountain",
            "An ornamental structure that sends water into the air",
            "The fountain in the park was beautiful.",
            "fontein",
            "Een sierelement dat water in de lucht spuit",
            "De fontein in het park was prachtig.",
        ),
        (
            "path",
            "A way or track for walking or cycling",
            "We walked along the path through the park.",
            "pad",
            "Een weg of spoor om te wandelen of fietsen",
            "We liepen over het pad door het park.",
        ),
        (
            "tree",
            "A tall plant with a wooden trunk and branches",
            "The trees in the park provide shade in summer.",
            "boom",
            "Een hoge plant met een houten stam en takken",
            "De bomen in het park geven schaduw in de zomer.",
        ),
    ),
    "cafe": _items(
        (
            "coffee",
            "A hot drink made from roasted coffee beans",
            "I ordered a coffee at the cafe.",
            "koffie",
            "Een warme drank gemaakt van gebrande koffiebonen",
            "Ik bestelde een koffie in het café.",
        ),
        (
            "barista",
            "A person who makes and serves coffee",
            "The barista made a beautiful design in my latte.",
            "barista",
            "Een persoon die koffie maakt en serveert",
            "De barista maakte een mooie tekening in mijn latte.",
        ),
        (
            "menu",
            "A list of food and drinks available",
            "The cafe has a varied menu with many options.",
            "menu",
            "Een lijst met beschikbaar eten en drinken",
            "Het café heeft een gevarieerd menu met veel opties.",
        ),
        (
            "pastry",
            "A sweet baked food made with dough",
            "The cafe sells delicious pastries.",
            "gebak",
            "Een zoet gebakken voedsel gemaakt van deeg",
            "Het café verkoopt heerlijk gebak.",
        ),
        (
            "table",
            "A piece of furniture with a flat top",
            "We found a table by the window in the cafe.",
            "tafel",
            "Een meubelstuk met een plat oppervlak",
            "We vonden een tafel bij het raam in het café.",
        ),
    ),
}


@dataclass
class StaticVocabularyProvider(VocabularyProvider):
    """Vocabulary provider serving pre-seeded datasets per theme."""

    datasets: Mapping[str, tuple[VocabularyItem, ...]] = field(
        default_factory=lambda: dict(ENGLISH_DATASETS)
    )
    translated_datasets: Mapping[str, Mapping[str, tuple[VocabularyItem, ...]]] = (
        field(default_factory=lambda: {"dutch": dict(DUTCH_DATASETS)})
    )

    async def generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        """Return the first ``count`` items of the theme's dataset."""
        dataset = self._select_dataset(theme, language.lower())
        if dataset is None:
            raise DataUnavailableError(theme)
        return list(dataset[: max(count, 0)])

    def _select_dataset(
        self, theme: str, language: str
    ) -> tuple[VocabularyItem, ...] | None:
        translated = self.translated_datasets.get(language, {}).get(theme)
        if translated is not None:
            return translated
        if language in self.translated_datasets:
            _logger.info(
                "No %s dataset for theme %s, falling back to English", language, theme
            )
        return self.datasets.get(theme)
