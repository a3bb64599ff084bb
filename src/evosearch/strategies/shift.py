"""
Shift strategy: rotate a segment of the parent by one position.

Draw order: direction (1 = left), segment start, segment length (>= 2).
Shifting right moves the first symbol of the segment to its end; shifting
left moves the last symbol to its front.

	ABCDEFGH, right, start 0, length 4 -> BCDAEFGH
	ABCDEFGH, left,  start 1, length 4 -> AEBCDFGH
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase

SHIFT_LEFT = 1


class ShiftStrategy(StrategyBase):
	"""Moves one symbol from one end of a random segment to the other."""

	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Optional[Individual]:
		genes = list(parent_a.genes)
		length = len(genes)
		if length < 2:
			return None

		shifting_left = rng.next(0, 2) == SHIFT_LEFT
		start = rng.next(0, max(1, length - 2))
		segment_length = rng.next(2, length + 1 - start)
		end = start + segment_length

		segment = genes[start:end]
		if shifting_left:
			segment = segment[-1:] + segment[:-1]
		else:
			segment = segment[1:] + segment[:1]
		genes[start:end] = segment
		return self._child_of(parent_a, genes)
