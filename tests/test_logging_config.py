"""
Tests for logging configuration.
"""
import logging

import pytest

from voice_nlu.logging_config import parse_level, parse_module_levels, setup_logging


@pytest.fixture
def restore_levels():
    """Put back logger levels changed by setup_logging."""
    names = ("voice_nlu", "voice_nlu.pipeline", "voice_nlu.numerals", "httpx")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.usefixtures("restore_levels")
class TestSetupLogging:

    def test_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert setup_logging() == logging.INFO
        assert logging.getLogger("voice_nlu").level == logging.INFO

    def test_reads_log_level_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        setup_logging()
        assert logging.getLogger("voice_nlu").level == logging.WARNING

    def test_explicit_level_beats_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        setup_logging(level="error")
        assert logging.getLogger("voice_nlu").level == logging.ERROR

    def test_module_levels(self, monkeypatch):
        monkeypatch.setenv("VOICE_NLU_LOG_MODULES", "pipeline=DEBUG, voice_nlu.numerals=ERROR")
        setup_logging(level="WARNING")
        assert logging.getLogger("voice_nlu").level == logging.WARNING
        assert logging.getLogger("voice_nlu.pipeline").level == logging.DEBUG
        assert logging.getLogger("voice_nlu.numerals").level == logging.ERROR

    def test_http_noise_reduced_outside_debug(self):
        setup_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING


class TestParsing:

    @pytest.mark.parametrize("raw,expected", [
        (None, "INFO"),
        ("", "INFO"),
        (" debug ", "DEBUG"),
        ("VERBOSE", "INFO"),
    ])
    def test_parse_level(self, raw, expected):
        assert parse_level(raw) == expected

    def test_parse_module_levels_skips_bad_entries(self):
        levels = parse_module_levels("pipeline=DEBUG,engine=LOUD,=INFO,lexicon")
        assert levels == {"voice_nlu.pipeline": "DEBUG"}


class TestEngineLogging:
    """Engine warnings for rejected input."""

    def test_unknown_variant_fallback_is_logged(self, caplog):
        from voice_nlu import UtteranceEngine

        with caplog.at_level(logging.WARNING, logger="voice_nlu"):
            UtteranceEngine("xx-YY")

        assert any("falling back" in record.getMessage() for record in caplog.records)

    def test_rejected_import_is_logged(self, caplog, en_us):
        with caplog.at_level(logging.WARNING, logger="voice_nlu"):
            assert en_us.import_configuration({"variant": "xx-YY"}) is False

        assert any("rejected" in record.getMessage() for record in caplog.records)

    def test_transcripts_not_logged_at_info(self, caplog, en_us):
        with caplog.at_level(logging.INFO, logger="voice_nlu"):
            en_us.process_transcript("my secret order")

        for record in caplog.records:
            assert "secret" not in record.getMessage()
