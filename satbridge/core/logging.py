import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SATBRIDGE_LOG_LEVEL"

def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Returns a configured logger with the given name.
    The level comes from `level`, else SATBRIDGE_LOG_LEVEL, else INFO.
    """
    logger = logging.getLogger(name)

    log_level_str = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    logger.setLevel(getattr(logging, log_level_str, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False

    return logger


class SolverLogAdapter(logging.LoggerAdapter):
    """Prefixes every message with the solver executable it concerns."""

    def process(self, msg, kwargs):
        return f"[{self.extra['solver']}] {msg}", kwargs


def solver_logger(logger: logging.Logger, executable: str) -> SolverLogAdapter:
    return SolverLogAdapter(logger, {"solver": os.path.basename(executable) or executable})
