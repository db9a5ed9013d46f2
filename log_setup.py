# log_setup.py

import logging

from textual.logging import TextualHandler

from config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: AppConfig = None) -> None:
    """
    Route stdlib logging into Textual.

    TextualHandler forwards records to the devtools console (`textual console`)
    and stays off the screen the app is drawing on. When config.log_file is
    set, records are also appended to that file.
    """
    config = config or AppConfig()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    handlers = [TextualHandler()]
    if config.log_file:
        fh = logging.FileHandler(config.log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(fh)

    # force=True so a second call (tests, re-launch) replaces the handlers
    logging.basicConfig(level=level, handlers=handlers, force=True)
