"""
Swap strategy: exchange the symbols at two random positions.
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase
from evosearch.strategies.reverse import draw_two_points


class SwapStrategy(StrategyBase):
	"""Exchanges genes[a] and genes[b]."""

	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Optional[Individual]:
		points = draw_two_points(len(parent_a.genes), rng)
		if points is None:
			return None
		a, b = points

		genes = list(parent_a.genes)
		genes[a], genes[b] = genes[b], genes[a]
		return self._child_of(parent_a, genes)
