"""
Logging configuration for the terminal and file output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def setup_logging(
    log_dir: Optional[Union[Path, str]] = None,
    level: int = logging.INFO,
    console: Optional[Console] = None,
    console_level: int = logging.WARNING,
) -> Optional[Path]:
    """
    Configure the root logger with a rich console handler and an optional file.

    The console only shows warnings and above so it does not clutter the
    scoreboard; the file (e.g. logs/2026-01-31_14-30-00.log) gets `level`.
    Returns the log file path if one was created, None otherwise.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # clear existing handlers to avoid duplicates on repeated calls
    root_logger.handlers.clear()

    console_handler = RichHandler(console=console, show_path=False)
    console_handler.setLevel(console_level)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        dir_path = Path(log_dir)
        dir_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(LOG_FILE_TIMESTAMP_FORMAT)
        file_path = dir_path / f"{timestamp}.log"
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root_logger.addHandler(file_handler)
        return file_path

    return None
