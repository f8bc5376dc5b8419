# scalar_autograd/logger.py
import json
import logging
import sys

DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """
    Format records as one JSON object per line
    """

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        return json.dumps(log_record, ensure_ascii=False)


def setup_logger(name="scalar_autograd", level=logging.INFO, json_format=False):
    """
    Attach a single stdout handler to the package logger and return it.

    Calling this more than once only updates the level; handlers are not stacked.
    The library itself never calls this on import.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter() if json_format else logging.Formatter(DEFAULT_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
