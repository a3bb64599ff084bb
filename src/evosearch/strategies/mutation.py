"""
Mutate strategy: replace one symbol of the parent.

Draws the location first, then the replacement symbol. Drawing the symbol
already at that location yields a child identical to its parent; the solver's
duplicate suppression drops it.
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase


class MutateStrategy(StrategyBase):
	"""Point mutation at a random location."""

	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Individual:
		genes = list(parent_a.genes)
		location = rng.next(0, len(genes))
		genes[location] = alphabet[rng.next(0, len(alphabet))]
		return self._child_of(parent_a, genes)
