"""
Logging setup for the WorkBridge API.

JSON_LOGS switches stdout between one JSON object per line (for log
shippers) and a plain text line for local development.
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

# Third-party loggers that drown out request logs at INFO
NOISY_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


class MarketplaceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON records with a `location` pointer on warnings and errors."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if record.levelno >= logging.WARNING:
            log_record["location"] = f"{record.module}.{record.funcName}:{record.lineno}"


def build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return MarketplaceJsonFormatter(
            "%(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            timestamp=True,
        )
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Route every logger through a single stdout handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_logs))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name, level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
