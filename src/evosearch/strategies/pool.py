"""
StrategyPool: weighted multiset of strategies used as a sampling distribution.

Rebuilt from the ancestry of every new global best. Strategies that produced
the best individual's ancestors receive extra copies, so they are sampled
more often, while one copy of every registered strategy keeps all of them
available.

Example (5 registered strategies, best lineage made by 6 Swaps and 2 Reverses):
	ancestor_total = 8, scale_target = min(8, 3 * 5) = 8
	Swap    gets floor(8 * 6 / 8) = 6 extra copies
	Reverse gets floor(8 * 2 / 8) = 2 extra copies
	pool size = 5 + 8 = 13
"""

from collections import Counter
from typing import Iterator, Optional

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase
from evosearch.strategies.registry import StrategyRegistry


class StrategyPool:
	"""
	Ordered list of strategy references; repetition is weight.

	Args:
		strategies: Pool contents
	"""

	def __init__(self, strategies: list[StrategyBase]):
		if not strategies:
			raise ValueError("StrategyPool cannot be empty")
		self._strategies = list(strategies)

	@classmethod
	def uniform(cls, registry: StrategyRegistry) -> 'StrategyPool':
		"""One copy of every registered strategy."""
		return cls(list(registry))

	@classmethod
	def from_ancestry(
		cls,
		best: Individual,
		registry: StrategyRegistry,
		ancestor_strategy_multiplier: int = 3,
	) -> 'StrategyPool':
		"""
		Build a pool biased towards the strategies in best's lineage.

		Nodes whose strategy is not registered (RandomInit roots) are ignored.

		Args:
			best: Individual whose ancestry chain is walked to the root
			registry: Registered strategies (each gets one guaranteed copy)
			ancestor_strategy_multiplier: Caps the extra copies at
				multiplier * len(registry)
		"""
		ancestor_strategies = [
			node.strategy for node in best.ancestors()
			if node.strategy is not None and node.strategy in registry
		]
		strategies = list(registry)
		ancestor_total = len(ancestor_strategies)
		if ancestor_total == 0:
			return cls(strategies)

		scale_target = min(ancestor_total, ancestor_strategy_multiplier * len(registry))
		# Counter preserves first-appearance order
		for strategy, count in Counter(ancestor_strategies).items():
			strategies.extend([strategy] * (scale_target * count // ancestor_total))
		return cls(strategies)

	def sample(self, rng: RandomSourceProtocol) -> StrategyBase:
		"""Draw one strategy uniformly from the pool (one rng call)."""
		return self._strategies[rng.next(0, len(self._strategies))]

	def count(self, strategy: StrategyBase) -> int:
		"""Number of copies of `strategy` in the pool."""
		return sum(1 for s in self._strategies if s is strategy)

	def weights(self) -> dict[str, int]:
		"""Copies per strategy name, in pool order."""
		return dict(Counter(s.name for s in self._strategies))

	def __len__(self) -> int:
		return len(self._strategies)

	def __iter__(self) -> Iterator[StrategyBase]:
		return iter(self._strategies)

	def __getitem__(self, index: int) -> StrategyBase:
		return self._strategies[index]

	def __repr__(self) -> str:
		return f"StrategyPool({self.weights()})"
