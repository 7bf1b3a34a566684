"""
Configuration for the GTP front end.

Values come from defaults, an optional YAML/JSON file and command-line
overrides, applied in that order.
"""

import argparse
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """
    Structured engine configuration.

    Attributes:
        name: Reported by the ``name`` command
        version: Reported by the ``version`` command
        game_name: The only game ``set_game`` accepts
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for a log file (None = console only)
        log_file_name: Log file name without extension
    """

    name: str = "blokus-duo-engine"
    version: str = "0.1.0"
    game_name: str = "Blokus Duo"
    log_level: str = "WARNING"
    log_dir: Optional[str] = None
    log_file_name: str = "gtp"

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EngineConfig":
        """Create config from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in (config_dict or {}).items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "EngineConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_file(self, config_path: Path):
        """Save config to YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.to_dict()

        with open(config_path, "w", encoding="utf-8") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("Engine: %s %s (game: %s)", self.name, self.version, self.game_name)
        logger.info("Log level: %s, log dir: %s", self.log_level, self.log_dir or "console only")


def create_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser for the GTP engine."""
    parser = argparse.ArgumentParser(
        description="Blokus Duo rules engine speaking the Go Text Protocol on stdin/stdout",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML or JSON config file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (overrides config file)"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for a log file (logs always go to stderr too)"
    )
    return parser


def parse_args_to_config(args: argparse.Namespace) -> EngineConfig:
    """Convert parsed arguments to EngineConfig."""
    if args.config:
        config = EngineConfig.from_file(Path(args.config))
    else:
        config = EngineConfig()

    # Override with CLI arguments (only if explicitly provided)
    if args.log_level:
        config.log_level = args.log_level
    if args.log_dir:
        config.log_dir = args.log_dir

    return config
