"""evosearch - adaptive evolutionary search over symbol sequences."""

from evosearch.logger import Logger, OptimizationLogger, create_logger
from evosearch.progress import ProgressTracker, ProgressStats
from evosearch.random_source import RandomSource, ScriptedRandomSource
from evosearch.individual import Individual
from evosearch.canonical import canonicalize, identity
from evosearch.parent_line import ParentLine
from evosearch.solver import Solver, SolverConfig, SolverState, SolveResult, solve

__all__ = [
	'Logger', 'OptimizationLogger', 'create_logger',
	'ProgressTracker', 'ProgressStats',
	'RandomSource', 'ScriptedRandomSource',
	'Individual',
	'canonicalize', 'identity',
	'ParentLine',
	'Solver', 'SolverConfig', 'SolverState', 'SolveResult', 'solve',
]
