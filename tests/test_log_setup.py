"""Tests for logging setup."""

import logging

from textual.logging import TextualHandler

from config import AppConfig
from log_setup import setup_logging


class TestSetupLogging:
    def test_defaults_to_textual_handler(self) -> None:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert [type(h) for h in root.handlers] == [TextualHandler]

    def test_level_and_file(self, tmp_path) -> None:
        path = tmp_path / "rollem.log"
        setup_logging(AppConfig(log_level="debug", log_file=str(path)))

        logging.getLogger("dice").debug("hello from the roller")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert logging.getLogger().level == logging.DEBUG
        assert "hello from the roller" in path.read_text(encoding="utf-8")

        for handler in logging.getLogger().handlers:
            handler.close()
        logging.basicConfig(handlers=[TextualHandler()], force=True)
