"""
RandomInit strategy: a fresh, uniformly random candidate with no parent.

Used to seed the initial population. It is not part of the variation
registry, so it never appears in a StrategyPool and never counts towards
ancestry weighting.
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual, make_genes
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase


class RandomInitStrategy(StrategyBase):
	"""
	Samples every position independently from the alphabet.

	Args:
		length: Number of genes of every produced individual
	"""

	def __init__(self, length: int):
		if length < 1:
			raise ValueError(f"length must be >= 1, got {length}")
		self._length = length

	@property
	def length(self) -> int:
		return self._length

	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Individual:
		symbols = [alphabet[rng.next(0, len(alphabet))] for _ in range(self._length)]
		return Individual(genes=make_genes(symbols, alphabet), strategy=self)

	def __repr__(self) -> str:
		return f"RandomInitStrategy(length={self._length})"
