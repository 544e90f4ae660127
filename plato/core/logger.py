import collections
import logging
from datetime import datetime
from typing import Dict, List

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LogBuffer:
    def __init__(self, max_size: int = 500):
        self.logs = collections.deque(maxlen=max_size)

    def add_log(self, record: logging.LogRecord):
        # Only explicit "step" records are kept, not general application logs
        if getattr(record, "is_step", False):
            self.logs.append({
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": "STEP",
                "module": record.name,
                "message": record.getMessage(),
            })

    def get_logs(self) -> List[Dict]:
        return list(self.logs)

    def clear(self):
        self.logs.clear()


# Global instance
log_buffer = LogBuffer()


class BufferHandler(logging.Handler):
    def emit(self, record):
        if getattr(record, "is_step", False):
            try:
                log_buffer.add_log(record)
            except Exception:
                self.handleError(record)


def setup_logging(level: str = "INFO"):
    """Attach a console handler and the step buffer to the app loggers."""
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    # Avoid duplicate handlers if setup runs again (app factory in tests)
    if not any(isinstance(h, BufferHandler) for h in root_logger.handlers):
        buffer_handler = BufferHandler()
        buffer_handler.setFormatter(formatter)
        root_logger.addHandler(buffer_handler)

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "plato"):
        logging.getLogger(logger_name).setLevel(level.upper())


def log_step(message: str, logger_name: str = "plato.steps"):
    """Log a user-facing step that the debug console can replay."""
    logging.getLogger(logger_name).info(message, extra={"is_step": True})
