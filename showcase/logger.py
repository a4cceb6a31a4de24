# showcase/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Tuple

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# requests logs every manifest connection at DEBUG through urllib3
QUIET_LOGGERS = ("urllib3",)

_configured = False


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _build_handlers() -> Tuple[List[logging.Handler], List[str]]:
    """Handlers requested by the LOG_* environment, plus any setup problems."""
    handlers: List[logging.Handler] = []
    problems: List[str] = []

    if _env_flag("LOG_TO_STDOUT", "true"):
        handlers.append(logging.StreamHandler(sys.stdout))

    if _env_flag("LOG_TO_FILE", "true"):
        log_file = os.getenv("LOG_FILE", "/data/homepage.log")
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    log_file,
                    maxBytes=int(os.getenv("LOG_MAX_BYTES", str(1024 * 1024))),
                    backupCount=int(os.getenv("LOG_BACKUPS", "3")),
                    encoding="utf-8",
                )
            )
        except Exception as e:
            problems.append(f"Could not open log file {log_file}: {e}")

    return handlers, problems


def setup_logging():
    global _configured
    if _configured:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    problems: List[str] = []
    # an embedding application that already configured logging wins
    if not root.handlers:
        handlers, problems = _build_handlers()
        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _configured = True
    for message in problems:
        root.warning("%s", message)


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
