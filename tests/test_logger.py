"""
Tests for Logger.

Run with: pytest tests/test_logger.py
"""

import os
import tempfile

from multihot import Logger, create_logger, encode, OutOfRangePolicy


def test_writes_timestamped_lines_to_file():
	with tempfile.TemporaryDirectory() as tmpdir:
		logger = Logger("prep", log_dir=tmpdir, console=False)
		logger("hello")
		logger.header("Results")
		logger.close()

		assert os.path.dirname(logger.log_file) == tmpdir
		assert os.path.basename(logger.log_file).startswith("prep_")
		with open(logger.log_file) as f:
			lines = f.read().splitlines()

		assert lines[0].endswith(" | hello")
		assert any(line.endswith("  Results") for line in lines)
		assert any(line.endswith("=" * 70) for line in lines)


def test_section_uses_lighter_divider():
	with tempfile.TemporaryDirectory() as tmpdir:
		logger = Logger("steps", log_dir=tmpdir, console=False)
		logger.section("Vocabulary")
		logger.close()

		with open(logger.log_file) as f:
			messages = [line.split(" | ", 1)[1] for line in f.read().splitlines()]

		assert messages == ["", "-" * 50, "  Vocabulary", "-" * 50]


def test_no_file_when_disabled(capsys):
	logger = Logger("console_only", to_file=False)
	assert logger.log_file is None
	logger.warning("careful")
	logger.close()
	assert "careful" in capsys.readouterr().err


def test_level_filters_messages():
	import logging

	with tempfile.TemporaryDirectory() as tmpdir:
		logger = Logger("quiet", log_dir=tmpdir, console=False, level=logging.WARNING)
		logger("info is dropped")
		logger.warning("warning is kept")
		logger.close()

		with open(logger.log_file) as f:
			text = f.read()
		assert "info is dropped" not in text
		assert "warning is kept" in text


def test_logger_plugs_into_encode():
	with tempfile.TemporaryDirectory() as tmpdir:
		logger = create_logger("encode", log_dir=tmpdir, console=False)
		encode([[0, 4]], dimension=2, policy=OutOfRangePolicy.SKIP, logger=logger)
		logger.close()

		with open(logger.log_file) as f:
			assert "Skipped 1 out-of-range indices" in f.read()


def test_repr():
	logger = Logger("r", to_file=False, console=False)
	assert repr(logger) == "Logger(name='r', log_file='None')"
