"""
Reverse strategy: reverse the inclusive range between two random points.

Equivalent to a 2-opt move on a cyclic tour.
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase


def draw_two_points(length: int, rng: RandomSourceProtocol) -> Optional[tuple[int, int]]:
	"""
	Draw two positions, redrawing the second once on collision.

	Returns:
		(first, second), or None if the redraw collided again
	"""
	first = rng.next(0, length)
	second = rng.next(0, length)
	if first == second:
		second = rng.next(0, length)
		if first == second:
			return None
	return first, second


class ReverseStrategy(StrategyBase):
	"""Reverses genes[low..high] inclusive."""

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
		low, high = min(points), max(points)

		genes = list(parent_a.genes)
		genes[low:high + 1] = genes[low:high + 1][::-1]
		return self._child_of(parent_a, genes)
