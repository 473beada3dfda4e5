"""Static catalog of learning themes."""

from dataclasses import dataclass, field

from picto_lingua.domain.themes import Theme

DEFAULT_THEMES: tuple[Theme, ...] = (
    Theme("cafe", "Café/Coffee Shop", "Vocabulary related to cafés and coffee shops"),
    Theme("park", "Park/Nature", "Vocabulary related to parks and nature"),
    Theme("airport", "Airport/Travel", "Vocabulary related to airports and travel"),
    Theme("kitchen", "Kitchen/Cooking", "Vocabulary related to kitchens and cooking"),
    Theme("office", "Office/Workplace", "Vocabulary related to offices and workplaces"),
    Theme("beach", "Beach/Ocean", "Vocabulary related to beaches and oceans"),
    Theme("city", "City/Urban", "Vocabulary related to cities and urban environments"),
    Theme("home", "Home/Living Space", "Vocabulary related to homes and living spaces"),
    Theme(
        "grocery",
        "Grocery Store/Shopping",
        "Vocabulary related to grocery stores and shopping",
    ),
    Theme(
        "restaurant",
        "Restaurant/Dining",
        "Vocabulary related to restaurants and dining",
    ),
)


@dataclass
class ThemeCatalog:
    """Lookup over a fixed list of themes."""

    themes: tuple[Theme, ...] = field(default=DEFAULT_THEMES)

    def list_themes(self) -> list[Theme]:
        """Return all themes in display order."""
        return list(self.themes)

    def get_theme(self, theme_id: str) -> Theme | None:
        """Return a theme by id, if present."""
        for theme in self.themes:
            if theme.id == theme_id:
                return theme
        return None

    def is_valid(self, theme_id: str) -> bool:
        """Check whether a theme id is known."""
        return self.get_theme(theme_id) is not None
