"""
Logging for multihot preprocessing runs.

Components here never print; they take an optional logging function
(Callable[[str], None]) and call it with one-line status messages.
Logger is the ready-made implementation of that function:
- Timestamped lines to console and/or a file
- Date-based log directory structure (logs/YYYY/MM/DD/)
- Callable, so it can be passed wherever a logging function is accepted
"""

import os
import logging
from datetime import datetime
from typing import Optional


class Logger:
	"""
	Logger that writes timestamped messages to console and a log file.

	Usage:
		logger = Logger("imdb_prep", log_dir="logs")

		vocab = Vocabulary(num_words=10000, logger=logger)
		x = encode(sequences, dimension=10000,
			policy=OutOfRangePolicy.SKIP, logger=logger)

		logger.header("Encoded")
		logger(f"x: {tuple(x.shape)}")

	Attributes:
		name: Logger name (used for the log filename)
		log_file: Path to the log file, or None when file output is off
	"""

	def __init__(
		self,
		name: str = "multihot",
		log_dir: Optional[str] = None,
		console: bool = True,
		to_file: bool = True,
		level: int = logging.INFO,
		timestamp_format: str = '%H:%M:%S',
	):
		"""
		Args:
			name: Base name for the log file
			log_dir: Log directory (default: ./logs/YYYY/MM/DD/)
			console: Also log to stderr
			to_file: Write a log file at all
			level: Minimum level passed through to handlers
			timestamp_format: strftime format for line timestamps
		"""
		self.name = name
		self.log_file = None

		now = datetime.now()
		timestamp = now.strftime("%Y%m%d_%H%M%S_%f")

		self._logger = logging.getLogger(f'multihot.{name}.{timestamp}')
		self._logger.setLevel(level)
		self._logger.propagate = False
		self._logger.handlers.clear()

		formatter = logging.Formatter('%(asctime)s | %(message)s', datefmt=timestamp_format)

		if to_file:
			if log_dir is None:
				log_dir = os.path.join("logs", now.strftime("%Y"), now.strftime("%m"), now.strftime("%d"))
			os.makedirs(log_dir, exist_ok=True)
			self.log_file = os.path.join(log_dir, f"{name}_{timestamp}.log")

			file_handler = logging.FileHandler(self.log_file)
			file_handler.setFormatter(formatter)
			self._logger.addHandler(file_handler)

		if console:
			console_handler = logging.StreamHandler()
			console_handler.setFormatter(formatter)
			self._logger.addHandler(console_handler)

	def __call__(self, message: str = "") -> None:
		self.log(message)

	def log(self, message: str = "", level: int = logging.INFO) -> None:
		"""Log a message and flush every handler."""
		self._logger.log(level, message)
		for handler in self._logger.handlers:
			handler.flush()

	def warning(self, message: str) -> None:
		self.log(message, level=logging.WARNING)

	def separator(self, char: str = "=", width: int = 70) -> None:
		self.log(char * width)

	def header(self, title: str, char: str = "=", width: int = 70) -> None:
		"""Log a title framed by separators."""
		self.log()
		self.separator(char, width)
		self.log(f"  {title}")
		self.separator(char, width)

	def section(self, title: str, char: str = "-", width: int = 50) -> None:
		"""Log a lighter divider for a sub-step."""
		self.log()
		self.separator(char, width)
		self.log(f"  {title}")
		self.separator(char, width)

	def close(self) -> None:
		"""Detach and close all handlers (releases the log file)."""
		for handler in list(self._logger.handlers):
			handler.close()
			self._logger.removeHandler(handler)

	def __repr__(self) -> str:
		return f"Logger(name='{self.name}', log_file='{self.log_file}')"


def create_logger(
	name: str = "multihot",
	log_dir: Optional[str] = None,
	console: bool = True,
) -> Logger:
	"""Factory function to create a Logger with file and optional console output."""
	return Logger(name=name, log_dir=log_dir, console=console)
