"""Display strings for the scoreboard in Chinese, Japanese and English.

Every user-facing string goes through `t()`, including the seat labels
that double as default nicknames and the round label stored with each
history entry. Those stored strings keep the language that was active
when the hand was settled; switching language does not rewrite history.

    set_language("en")
    t("round.label", wind="East", number=1, honba=0)  # -> "East 1, 0 honba"
"""

SUPPORTED_LANGUAGES = ("zh", "ja", "en")


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language. Unknown codes fall back to Chinese."""
        cls._lang = lang if lang in SUPPORTED_LANGUAGES else "zh"
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "ja":
            from scoreboard.ui.locales.ja import TRANSLATIONS
        elif cls._lang == "en":
            from scoreboard.ui.locales.en import TRANSLATIONS
        else:
            from scoreboard.ui.locales.zh import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()
