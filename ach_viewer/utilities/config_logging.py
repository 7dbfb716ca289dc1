# ach_viewer/utilities/config_logging.py
import logging.config
from pathlib import Path

LOG_FILE = Path("logs") / "ach_viewer.log"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(LOG_FILE),
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # package: per-line decode detail goes to the file only
        "ach_viewer": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
            "propagate": False,
        },
        # root logger: pandas and the rest stay quiet unless something is wrong
        "": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    },
}


def configure_logging(config: dict | None = None) -> None:
    """Apply ``config`` (default ``LOGGING``), creating the log folder first."""
    config = config or LOGGING
    filename = config.get("handlers", {}).get("file", {}).get("filename")
    if filename:
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(config)
