"""
Statically declared registry of variation strategies.

The solver samples from the registered strategies; every StrategyPool keeps
one copy of each of them so no operator is ever starved.
"""

from typing import Iterable, Iterator, Optional

from evosearch.strategies.base import StrategyBase
from evosearch.strategies.crossover import CrossoverStrategy
from evosearch.strategies.mutation import MutateStrategy
from evosearch.strategies.reverse import ReverseStrategy
from evosearch.strategies.shift import ShiftStrategy
from evosearch.strategies.swap import SwapStrategy

DEFAULT_STRATEGY_TYPES: tuple[type[StrategyBase], ...] = (
	CrossoverStrategy,
	MutateStrategy,
	ReverseStrategy,
	ShiftStrategy,
	SwapStrategy,
)


class StrategyRegistry:
	"""
	Fixed, ordered collection of strategy instances.

	Usage:
		registry = StrategyRegistry.default()
		registry = StrategyRegistry([SwapStrategy(), ReverseStrategy()])
	"""

	def __init__(self, strategies: Iterable[StrategyBase]):
		self._strategies: tuple[StrategyBase, ...] = tuple(strategies)
		if not self._strategies:
			raise ValueError("StrategyRegistry needs at least one strategy")
		names = [s.name for s in self._strategies]
		if len(set(names)) != len(names):
			raise ValueError(f"Duplicate strategy names: {names}")

	@classmethod
	def default(cls) -> 'StrategyRegistry':
		"""One instance of each built-in variation strategy."""
		return cls(strategy_type() for strategy_type in DEFAULT_STRATEGY_TYPES)

	@property
	def strategies(self) -> tuple[StrategyBase, ...]:
		return self._strategies

	def get(self, name: str) -> Optional[StrategyBase]:
		"""Look up a registered strategy by name."""
		for strategy in self._strategies:
			if strategy.name == name:
				return strategy
		return None

	def __len__(self) -> int:
		return len(self._strategies)

	def __iter__(self) -> Iterator[StrategyBase]:
		return iter(self._strategies)

	def __contains__(self, strategy: object) -> bool:
		return any(strategy is s for s in self._strategies)

	def __repr__(self) -> str:
		return f"StrategyRegistry({[s.name for s in self._strategies]})"
