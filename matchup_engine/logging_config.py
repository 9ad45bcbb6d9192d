"""
logging_config.py

Logger configuration for batch runs - call setup_logging() once from the entry point
"""
import logging
import os
from datetime import datetime

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("matchup_engine")


def setup_logging(level: str = "INFO", log_dir: str = "logs") -> str:
    """Attach a timestamped file handler and a console handler; returns the log file path"""
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = os.path.join(log_dir, f"matchups_{timestamp}.log")

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_filename, encoding="utf-8"),
            logging.StreamHandler()
        ],
        force=True,
    )
    return log_filename


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
