"""Tests for i18n.py - translated output"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahc.core.errors import NoYaku, NoFu
from mahc.ui.i18n import get_language, set_language, t, translate_error, translate_yaku


@pytest.fixture(autouse=True)
def reset_language():
    yield
    set_language("en")


class TestTranslate:
    def test_default_english(self):
        set_language("en")
        assert get_language() == "en"
        assert translate_yaku("立直") == "Riichi"
        assert t("label.total", han=3, fu=30) == "3 han 30 fu"

    def test_japanese_keeps_names(self):
        set_language("ja")
        assert translate_yaku("立直") == "立直"
        assert translate_yaku("役牌 中") == "役牌 中"

    def test_yakuhai_split(self):
        set_language("en")
        assert translate_yaku("役牌 中") == "Yakuhai Red"
        assert translate_yaku("自風 東") == "Seat Wind East"

    def test_unknown_key(self):
        assert t("label.nothing") == "label.nothing"

    def test_unsupported_language(self):
        with pytest.raises(ValueError):
            set_language("fr")
        assert get_language() == "en"

    def test_failed_switch_keeps_language(self):
        set_language("ja")
        with pytest.raises(ValueError):
            set_language("fr")
        assert get_language() == "ja"
        assert translate_yaku("平和") == "平和"


class TestTranslateError:
    def test_english_falls_back_to_message(self):
        set_language("en")
        assert translate_error(NoFu()) == "No Fu provided!"

    def test_japanese_message(self):
        set_language("ja")
        assert translate_error(NoYaku()) == "役がありません"
