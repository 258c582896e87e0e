from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


LOGGER_NAME = "brave_search"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logger = get_logger()
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_event(logger: logging.Logger, payload: Dict[str, Any], level: int = logging.INFO) -> None:
    if not logger.isEnabledFor(level):
        return
    payload["timestamp"] = datetime.now(timezone.utc).isoformat()
    logger.log(level, json.dumps(payload, ensure_ascii=True))
