"""
Command-line entry point for the GTP engine.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from utils.logging_setup import setup_logging

from .config import create_arg_parser, parse_args_to_config
from .engine import GtpEngine

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)
    try:
        config = parse_args_to_config(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    log_dir = Path(config.log_dir) if config.log_dir else None
    setup_logging(log_dir, config.log_file_name, config.level)
    config.log_config(logger)

    engine = GtpEngine(config)
    return engine.run(stdin or sys.stdin, stdout or sys.stdout)
