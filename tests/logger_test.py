#!/usr/bin/env python3
"""
Tests for Logger and OptimizationLogger.

Run with:
	pytest tests/logger_test.py
"""

import logging
import os

from evosearch.logger import TRACE, Logger, OptimizationLogger, create_logger
from evosearch.solver import Solver, SolverConfig


def test_logger_writes_file(tmp_path):
	logger = Logger("unit", log_dir=str(tmp_path), console=False)
	logger("hello")
	logger.header("Results")
	logger.close()

	assert os.path.dirname(logger.log_file) == str(tmp_path)
	content = open(logger.log_file).read()
	assert "| hello" in content
	assert "  Results" in content
	assert "=" * 70 in content


def test_logger_date_directory(tmp_path):
	logger = Logger("dated", project_root=str(tmp_path), console=False)
	logger.close()
	relative = os.path.relpath(logger.log_file, str(tmp_path))
	parts = relative.split(os.sep)
	assert parts[0] == "logs"
	assert len(parts) == 5
	assert parts[4].startswith("dated_")


def test_create_logger(tmp_path):
	logger = create_logger("factory", log_dir=str(tmp_path), console=False)
	assert isinstance(logger, Logger)
	logger.close()


def test_optimization_logger_forwards_to_file_logger():
	lines = []
	log = OptimizationLogger("UnitForward", level=logging.INFO, file_logger=lines.append)
	log.debug("hidden")
	log.info("shown")
	log("also shown")
	log.error("error shown")
	assert lines == ["shown", "also shown", "error shown"]


def test_optimization_logger_levels():
	lines = []
	log = OptimizationLogger("UnitLevels", level=logging.WARNING, file_logger=lines.append)
	assert not log.is_enabled_for(logging.INFO)
	log.info("hidden")
	log.warning("warn")
	log.set_level(TRACE)
	assert log.is_enabled_for(TRACE)
	log.trace("trace")
	assert lines == ["warn", "trace"]
	assert log.name == "UnitLevels"


def test_optimization_logger_uses_logging(caplog):
	log = OptimizationLogger("UnitCaplog", level=logging.INFO)
	with caplog.at_level(logging.INFO, logger="evosearch.optimizer.UnitCaplog"):
		log.info("through logging")
	assert "through logging" in caplog.text


def test_logger_settings_are_aligned(tmp_path):
	logger = Logger("settings", log_dir=str(tmp_path), console=False)
	logger.settings({"seed": 3, "diversify_top_n": 5})
	logger.close()
	content = open(logger.log_file).read()
	assert "|   seed            : 3" in content
	assert "|   diversify_top_n : 5" in content


def test_solver_run_is_framed_in_log_file(tmp_path):
	logger = Logger("framed", log_dir=str(tmp_path), console=False)
	Solver(config=SolverConfig(seed=3), logger=logger).run(
		target_length=3, alphabet="abc", cost=lambda g: 0,
	)
	logger.close()

	content = open(logger.log_file).read()
	assert "=" * 70 in content
	assert "  Solver: target_length=3, alphabet=3 symbols" in content
	assert "number_of_parent_lines" in content
	assert "-" * 50 in content
	assert "  Summary" in content
	assert content.index("Solver: target_length") < content.index("Initialized 2 lines")
	assert content.index("CONVERGED") < content.index("  Summary")


def test_optimization_logger_frames_without_file_logger():
	lines = []
	log = OptimizationLogger("UnitFrames", file_logger=lines.append)
	log.header("Run")
	log.section("Phase")
	log.settings({"a": 1})
	assert lines == ["=== Run ===", "--- Phase ---", "  a: 1"]

	log.set_level(logging.WARNING)
	log.header("hidden")
	assert len(lines) == 3
