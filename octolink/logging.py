import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from octolink.config import get_settings

LOGGER_NAME = "octolink"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "logger": record.name,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if _ring_handler(logger) is not None:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)


def recent_events(name: str = LOGGER_NAME) -> List[Dict]:
    handler = _ring_handler(logging.getLogger(name))
    return handler.get_events() if handler else []


def _ring_handler(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
