"""Logging for the CLI: a file log under ~/.citecheck plus stderr."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy below these levels
_QUIET = {
    "httpx": logging.WARNING,  # one INFO line per request
    "httpcore": logging.WARNING,
    "pdfminer": logging.ERROR,
}


def default_log_file() -> Path:
    return Path.home() / ".citecheck" / "logs" / "citecheck.log"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> Path:
    """Configure root handlers once and return the log file path."""
    log_file = log_file or default_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    level = logging.DEBUG if verbose else logging.WARNING
    for name in ("citecheck", "config"):
        logging.getLogger(name).setLevel(level)
    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)
    return log_file
