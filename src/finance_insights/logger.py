import logging
import logging.config
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "app.log"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# ANSI SGR parameters per level.
_LEVEL_SGR = {
    logging.DEBUG: "90",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "31;1",
}


class ColourizedFormatter(logging.Formatter):
    """Colours the level name only; message text is left untouched."""

    def __init__(self, *args, use_colour: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.use_colour = use_colour and "NO_COLOR" not in os.environ

    def format(self, record: logging.LogRecord) -> str:
        sgr = _LEVEL_SGR.get(record.levelno) if self.use_colour else None
        if sgr is None:
            return super().format(record)
        plain = record.levelname
        record.levelname = f"\x1b[{sgr}m{plain}\x1b[0m"
        try:
            return super().format(record)
        finally:
            # The record is shared with the file handler.
            record.levelname = plain


def get_log_level() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    return level if logging.getLevelName(level) in _LEVEL_SGR else "INFO"


def _build_handlers(log_dir: str | None) -> dict[str, dict]:
    handlers = {
        "console": {"class": "logging.StreamHandler", "stream": "ext://sys.stdout", "formatter": "colour"},
    }
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, LOG_FILENAME),
            "formatter": "plain",
        }
    return handlers


def get_logging_config() -> dict:
    """dictConfig for the app and uvicorn; `LOG_DIR` adds a plain-text file handler."""
    handlers = _build_handlers(os.getenv("LOG_DIR"))
    names = list(handlers)
    loggers = {name: {"handlers": names, "level": "INFO", "propagate": False} for name in SERVER_LOGGERS}
    loggers[""] = {"handlers": names, "level": get_log_level()}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colour": {"()": f"{__name__}.ColourizedFormatter", "format": LOG_FORMAT},
            "plain": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging() -> None:
    logging.config.dictConfig(get_logging_config())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
