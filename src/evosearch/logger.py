"""
Logging for evosearch runs.

Two layers, both on top of the standard logging module:
- Logger: one log file per run under logs/YYYY/MM/DD/ (plus the console),
  with framed header/section blocks and aligned settings listings
- OptimizationLogger: the solver's level-aware channel (TRACE to ERROR); it
  either goes through logging or forwards to a Callable[[str], None], and
  hands run framing to a forwarded Logger
"""

import os
import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

# Custom TRACE level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Logger:
	"""
	Per-run log file with optional console echo.

	Callable, so it fits any `logger: Callable[[str], None]` slot. When handed
	to the Solver, each run is framed with a header, its settings and a
	summary section:

		log = Logger("circle_route")
		best = solve(..., logger=log)
		log.close()

	Attributes:
		name: Run name, prefix of the log file name
		log_file: Path of the log file
	"""

	def __init__(
		self,
		name: str = "search",
		log_dir: Optional[str] = None,
		project_root: Optional[str] = None,
		console: bool = True,
		timestamp_format: str = '%H:%M:%S',
	):
		"""
		Args:
			name: Run name (e.g., "circle_route")
			log_dir: Explicit directory; default is <project_root>/logs/YYYY/MM/DD
			project_root: Base for the default directory (default: cwd)
			console: Echo every line to stderr as well
			timestamp_format: strftime format of the per-line timestamp
		"""
		self.name = name
		started = datetime.now()
		stamp = started.strftime("%Y%m%d_%H%M%S")

		if log_dir is None:
			log_dir = os.path.join(
				project_root or os.getcwd(), "logs",
				started.strftime("%Y"), started.strftime("%m"), started.strftime("%d"),
			)
		os.makedirs(log_dir, exist_ok=True)
		self.log_file = os.path.join(log_dir, f"{name}_{stamp}.log")

		self._logger = logging.getLogger(f"evosearch.run.{name}.{stamp}")
		self._logger.setLevel(logging.INFO)
		self._logger.handlers.clear()
		self._logger.propagate = False

		handlers: list[logging.Handler] = [logging.FileHandler(self.log_file)]
		if console:
			handlers.append(logging.StreamHandler())
		formatter = logging.Formatter('%(asctime)s | %(message)s', datefmt=timestamp_format)
		for handler in handlers:
			handler.setFormatter(formatter)
			self._logger.addHandler(handler)

	def __call__(self, message: str = "") -> None:
		"""Write one line and flush, so an interrupted run keeps its log."""
		self._logger.info(message)
		for handler in self._logger.handlers:
			handler.flush()

	def _framed(self, title: str, rule: str) -> None:
		self()
		self(rule)
		self(f"  {title}")
		self(rule)

	def header(self, title: str, width: int = 70) -> None:
		"""Run banner between '=' rules."""
		self._framed(title, "=" * width)

	def section(self, title: str, width: int = 50) -> None:
		"""Phase divider between '-' rules."""
		self._framed(title, "-" * width)

	def settings(self, values: Mapping[str, Any]) -> None:
		"""One aligned `key : value` line per entry."""
		width = max((len(key) for key in values), default=0)
		for key, value in values.items():
			self(f"  {key:<{width}} : {value}")

	def close(self) -> None:
		"""Detach and close the handlers (releases the log file)."""
		for handler in list(self._logger.handlers):
			handler.close()
			self._logger.removeHandler(handler)

	def __repr__(self) -> str:
		return f"Logger(name='{self.name}', log_file='{self.log_file}')"


def create_logger(
	name: str = "search",
	log_dir: Optional[str] = None,
	console: bool = True,
) -> Logger:
	"""Logger for one run; see Logger for the directory layout."""
	return Logger(name=name, log_dir=log_dir, console=console)

class OptimizationLogger:
	"""
	Logger wrapper with TRACE, DEBUG, INFO, WARNING, ERROR levels.

	TRACE: per-generation progress (very verbose)
	DEBUG: pool rebuilds, diversification
	INFO: phase transitions, improvements, final summary
	ERROR: errors and warnings

	Usage:
		logger = OptimizationLogger("Solver", level=logging.DEBUG)
		logger.debug("Pool rebuilt...")
		logger.info("New best")

	With a file logger (any Callable[[str], None], e.g. a Logger instance):
		logger = OptimizationLogger("Solver", file_logger=Logger("run"))
	"""

	def __init__(
		self,
		name: str,
		level: int = logging.INFO,
		file_logger: Optional[Callable[[str], None]] = None,
	):
		self._logger = logging.getLogger(f"evosearch.optimizer.{name}")
		self._logger.setLevel(level)
		self._name = name
		self._file_logger = file_logger

	def _emit(self, level: int, msg: str) -> None:
		if not self._logger.isEnabledFor(level):
			return
		if self._file_logger:
			self._file_logger(msg)
		else:
			self._logger.log(level, msg)

	@property
	def name(self) -> str:
		return self._name

	def is_enabled_for(self, level: int) -> bool:
		return self._logger.isEnabledFor(level)

	def trace(self, msg: str) -> None:
		"""Log at TRACE level."""
		self._emit(TRACE, msg)

	def debug(self, msg: str) -> None:
		"""Log at DEBUG level."""
		self._emit(logging.DEBUG, msg)

	def info(self, msg: str) -> None:
		"""Log at INFO level."""
		self._emit(logging.INFO, msg)

	def warning(self, msg: str) -> None:
		"""Log at WARNING level."""
		self._emit(logging.WARNING, msg)

	def error(self, msg: str) -> None:
		"""Log at ERROR level."""
		self._emit(logging.ERROR, msg)

	def _frame(self, kind: str, title: str, rule: str) -> None:
		if not self._logger.isEnabledFor(logging.INFO):
			return
		frame = getattr(self._file_logger, kind, None)
		if callable(frame):
			frame(title)
		else:
			self._emit(logging.INFO, f"{rule * 3} {title} {rule * 3}")

	def header(self, title: str) -> None:
		"""Run banner at INFO; a forwarded Logger draws its own frame."""
		self._frame("header", title, "=")

	def section(self, title: str) -> None:
		"""Phase divider at INFO; a forwarded Logger draws its own frame."""
		self._frame("section", title, "-")

	def settings(self, values: Mapping[str, Any]) -> None:
		"""Key/value listing at INFO."""
		if not self._logger.isEnabledFor(logging.INFO):
			return
		listing = getattr(self._file_logger, "settings", None)
		if callable(listing):
			listing(values)
			return
		for key, value in values.items():
			self._emit(logging.INFO, f"  {key}: {value}")

	def __call__(self, msg: str) -> None:
		"""Default: INFO level (backward compatible with print-style logging)."""
		self.info(msg)

	def set_level(self, level: int) -> None:
		"""Change log level dynamically."""
		self._logger.setLevel(level)
