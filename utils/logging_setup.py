"""
Logging setup for the command-line entry points.

The GTP engine writes protocol responses to stdout, so the console handler
is always bound to stderr. A per-session log file is added when a
directory is configured.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_dir: Optional[Path],
    run_name: str,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Route root logging to stderr and, optionally, to ``<log_dir>/<run_name>.log``.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for the log file, created if missing (None = stderr only)
        run_name: Log file name without extension
        level: Logging level for the root logger and every handler
        format_string: Record format; defaults to DEFAULT_FORMAT

    Returns:
        Path to the log file, or None when logging to stderr only

    Example:
        >>> setup_logging(None, "gtp", logging.DEBUG)
        >>> logging.getLogger("duo_gtp").debug("goes to stderr, never stdout")
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{run_name}.log"
    _attach(root_logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level, formatter)
    return log_file


def _attach(logger: logging.Logger, handler: logging.Handler, level: int,
            formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
