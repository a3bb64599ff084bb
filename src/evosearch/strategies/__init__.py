"""
Variation strategies and strategy-pool weighting.

Usage:
	from evosearch.strategies import StrategyRegistry, StrategyPool

	registry = StrategyRegistry.default()
	pool = StrategyPool.uniform(registry)
	child = pool.sample(rng).create_child(parent_a, parent_b, alphabet, rng)
"""

from evosearch.strategies.base import StrategyBase
from evosearch.strategies.random_init import RandomInitStrategy
from evosearch.strategies.mutation import MutateStrategy
from evosearch.strategies.crossover import CrossoverStrategy
from evosearch.strategies.reverse import ReverseStrategy
from evosearch.strategies.shift import ShiftStrategy
from evosearch.strategies.swap import SwapStrategy
from evosearch.strategies.registry import StrategyRegistry, DEFAULT_STRATEGY_TYPES
from evosearch.strategies.pool import StrategyPool

__all__ = [
	# Base
	'StrategyBase',
	# Operators
	'RandomInitStrategy',
	'MutateStrategy',
	'CrossoverStrategy',
	'ReverseStrategy',
	'ShiftStrategy',
	'SwapStrategy',
	# Registry and weighting
	'StrategyRegistry',
	'DEFAULT_STRATEGY_TYPES',
	'StrategyPool',
]
