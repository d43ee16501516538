"""Tests for the command-line demo in main.py."""

from __future__ import annotations

from main import SAMPLE_VALUE, main


class TestMain:
    def test_sample_value_in_every_language(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert SAMPLE_VALUE in out
        for code in ("ar", "zh-TW", "vi"):
            assert code in out

    def test_selected_languages(self, capsys):
        assert main(["1000", "en", "ms"]) == 0
        out = capsys.readouterr().out
        assert "One Thousand" in out
        assert "seribu" in out

    def test_special_value_is_reported(self, capsys):
        assert main(["0", "en"]) == 0
        assert "ZERO" in capsys.readouterr().out

    def test_unsupported_language_exits_2(self, capsys):
        assert main(["5", "en", "xx"]) == 2
        assert "UNSUPPORTED_LANGUAGE" in capsys.readouterr().out
