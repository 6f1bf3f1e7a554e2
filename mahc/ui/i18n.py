"""Internationalization support for calculator output.

Usage:
    from mahc.ui.i18n import t, set_language, translate_yaku

    set_language("ja")          # Switch to Japanese
    t("label.han")              # -> "翻"
    translate_yaku("立直")       # -> "立直" (ja) / "Riichi" (en)
"""

import importlib

# language code -> locale module holding a TRANSLATIONS dict
LOCALE_MODULES = {
    "en": "mahc.ui.locales.en",
    "ja": "mahc.ui.locales.ja",
}
SUPPORTED_LANGUAGES = tuple(LOCALE_MODULES)
DEFAULT_LANGUAGE = "en"


class I18n:
    """Active language and its translation table, shared process-wide."""

    _lang: str = DEFAULT_LANGUAGE
    _translations: dict = {}

    @classmethod
    def _load_translations(cls, lang: str) -> dict:
        if lang not in LOCALE_MODULES:
            raise ValueError(f"unsupported language {lang!r}")
        return importlib.import_module(LOCALE_MODULES[lang]).TRANSLATIONS

    @classmethod
    def use(cls, lang: str):
        # Load first so a bad code leaves the current language in place
        cls._translations = cls._load_translations(lang)
        cls._lang = lang

    @classmethod
    def current(cls) -> str:
        return cls._lang

    @classmethod
    def lookup(cls, key: str) -> str:
        if not cls._translations:
            cls.use(cls._lang)
        return cls._translations.get(key, key)


def t(key: str, **kwargs) -> str:
    """Translate a key, filling {placeholders} from kwargs when given."""
    text = I18n.lookup(key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError):
        return text


def set_language(lang: str):
    I18n.use(lang)


def get_language() -> str:
    return I18n.current()


def translate_yaku(yaku_name: str) -> str:
    """Translate a yaku name from its Japanese key to the current language.

    Yakuhai entries such as '役牌 中' translate both halves.
    """
    if " " in yaku_name:
        kind, tile = yaku_name.split(" ", 1)
        return f"{t(f'yaku.{kind}')} {t(f'tile.{tile}')}"
    return t(f"yaku.{yaku_name}")


def translate_error(error) -> str:
    """Localized message for a calculator error, falling back to its text."""
    key = f"error.{error.code}"
    text = t(key)
    return str(error) if text == key else text
