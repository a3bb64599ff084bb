"""
ParentLine: one bounded, fitness-sorted population with its own StrategyPool.

The solver evolves several lines round-robin. Each line keeps its individuals
sorted ascending by fitness and never holds more than the current maximum
pool size after a merge.
"""

from typing import Iterable, Iterator

from evosearch.individual import Individual
from evosearch.strategies.pool import StrategyPool


def _by_fitness(individual: Individual) -> float:
	return individual.fitness


class ParentLine:
	"""
	Args:
		individuals: Scored seed individuals (sorted on construction)
		strategy_pool: Pool this line samples strategies from
	"""

	def __init__(self, individuals: Iterable[Individual], strategy_pool: StrategyPool):
		self._individuals = sorted(individuals, key=_by_fitness)
		if not self._individuals:
			raise ValueError("ParentLine needs at least one individual")
		self.strategy_pool = strategy_pool

	@property
	def individuals(self) -> list[Individual]:
		return self._individuals

	@property
	def best(self) -> Individual:
		return self._individuals[0]

	def merge(self, children: Iterable[Individual], max_pool_size: int) -> None:
		"""Fold scored children in, re-sort (stable) and truncate to max_pool_size."""
		merged = self._individuals + list(children)
		merged.sort(key=_by_fitness)
		self._individuals = merged[:max_pool_size]

	def top(self, n: int) -> list[Individual]:
		"""The n best individuals."""
		return self._individuals[:n]

	def replace(self, individuals: Iterable[Individual]) -> None:
		"""Replace the population (used by diversification)."""
		replacement = sorted(individuals, key=_by_fitness)
		if not replacement:
			raise ValueError("ParentLine cannot be replaced by an empty population")
		self._individuals = replacement

	def __len__(self) -> int:
		return len(self._individuals)

	def __iter__(self) -> Iterator[Individual]:
		return iter(self._individuals)

	def __getitem__(self, index: int) -> Individual:
		return self._individuals[index]

	def __repr__(self) -> str:
		return f"ParentLine(size={len(self._individuals)}, best={self.best.fitness}, pool={self.strategy_pool!r})"
