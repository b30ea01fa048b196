"""
Tests pour configure_logging (loguru).
"""

import io
import json

import pytest
from loguru import logger

from moviebuddy.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


class TestConfigureLogging:
    """Tests pour la configuration des handlers."""

    def test_console_respects_level_and_shows_context(self, test_settings):
        stream = io.StringIO()
        settings = test_settings.model_copy(update={"log_level": "info", "log_file": None})

        configure_logging(settings, stream=stream)
        logger.debug("invisible")
        logger.info("Recherche par annee", release_year=2015)

        text = stream.getvalue()
        assert "invisible" not in text
        assert "Recherche par annee" in text
        assert "'release_year': 2015" in text

    def test_without_log_file_only_console(self, test_settings):
        settings = test_settings.model_copy(update={"log_file": None})
        assert len(configure_logging(settings, stream=io.StringIO())) == 1

    def test_file_receives_debug_as_json(self, test_settings, tmp_path):
        log_file = tmp_path / "logs" / "moviebuddy.log"
        settings = test_settings.model_copy(update={"log_file": log_file})

        handler_ids = configure_logging(settings, stream=io.StringIO())
        logger.debug("Cache miss", key="movies:csv")
        logger.remove()

        assert len(handler_ids) == 2
        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        cache_miss = [r for r in records if r["record"]["message"] == "Cache miss"]
        assert cache_miss[0]["record"]["extra"] == {"key": "movies:csv"}
