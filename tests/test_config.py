"""
Tests for engine configuration and the command-line entry point.
"""

import io
import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path

import yaml

from duo_gtp.cli import main
from duo_gtp.config import EngineConfig, create_arg_parser, parse_args_to_config


class TestEngineConfig(unittest.TestCase):
    """Test EngineConfig construction and persistence."""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults(self):
        config = EngineConfig()
        self.assertEqual(config.game_name, "Blokus Duo")
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.level, logging.WARNING)
        self.assertIsNone(config.log_dir)

    def test_log_level_normalized(self):
        self.assertEqual(EngineConfig(log_level="debug").level, logging.DEBUG)
        with self.assertRaises(ValueError):
            EngineConfig(log_level="chatty")

    def test_from_dict_ignores_unknown_keys(self):
        config = EngineConfig.from_dict({"name": "duo", "seed": 42})
        self.assertEqual(config.name, "duo")
        self.assertEqual(EngineConfig.from_dict(None), EngineConfig())

    def test_yaml_round_trip(self):
        path = self.temp_dir / "engine.yaml"
        EngineConfig(name="duo", log_level="INFO").save_to_file(path)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(yaml.safe_load(f)["name"], "duo")
        self.assertEqual(EngineConfig.from_file(path), EngineConfig(name="duo", log_level="INFO"))

    def test_json_round_trip(self):
        path = self.temp_dir / "engine.json"
        EngineConfig(version="1.2").save_to_file(path)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(json.load(f)["version"], "1.2")
        self.assertEqual(EngineConfig.from_file(path).version, "1.2")

    def test_bad_files(self):
        with self.assertRaises(FileNotFoundError):
            EngineConfig.from_file(self.temp_dir / "missing.yaml")
        path = self.temp_dir / "engine.toml"
        path.write_text("name = 'duo'\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            EngineConfig.from_file(path)
        with self.assertRaises(ValueError):
            EngineConfig().save_to_file(path)

    def test_cli_overrides_file(self):
        path = self.temp_dir / "engine.yaml"
        EngineConfig(log_level="ERROR", name="from-file").save_to_file(path)
        args = create_arg_parser().parse_args(["--config", str(path), "--log-level", "debug"])
        config = parse_args_to_config(args)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.name, "from-file")


class TestMain(unittest.TestCase):
    """Test the GTP entry point end to end."""

    def setUp(self):
        self.root_logger = logging.getLogger()
        self.saved_handlers = self.root_logger.handlers[:]
        self.saved_level = self.root_logger.level
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        for handler in self.root_logger.handlers[:]:
            self.root_logger.removeHandler(handler)
            handler.close()
        for handler in self.saved_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.saved_level)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_main_serves_commands(self):
        stdout = io.StringIO()
        code = main([], stdin=io.StringIO("play b e10\nrecord\nquit\n"), stdout=stdout)
        self.assertEqual(code, 0)
        self.assertEqual(stdout.getvalue(), "= \n\n= 55a0\n\n= \n\n")

    def test_main_writes_log_file(self):
        stdout = io.StringIO()
        main(["--log-level", "INFO", "--log-dir", str(self.temp_dir)],
             stdin=io.StringIO("play b e10\n"), stdout=stdout)
        for handler in self.root_logger.handlers:
            handler.flush()
        log_text = (self.temp_dir / "gtp.log").read_text(encoding="utf-8")
        self.assertIn("play violet e10 -> 55a0", log_text)

    def test_bad_config_exits(self):
        with self.assertRaises(SystemExit):
            main(["--config", str(self.temp_dir / "missing.yaml")], stdin=io.StringIO(""), stdout=io.StringIO())


if __name__ == '__main__':
    unittest.main()
