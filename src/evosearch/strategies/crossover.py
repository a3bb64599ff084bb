"""
Crossover strategy: copy a contiguous run of parent B into parent A.

Draw order: source offset into B, destination offset into A, run length.
The run length is at least 1 and never reaches past the end of either parent.
"""

from typing import Any, Optional, Sequence

from evosearch.individual import Individual
from evosearch.random_source import RandomSourceProtocol
from evosearch.strategies.base import StrategyBase


class CrossoverStrategy(StrategyBase):
	"""Overwrites a run of A's genes with a run taken from B."""

	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Individual:
		genes_a = parent_a.genes
		genes_b = parent_b.genes if parent_b is not None else genes_a
		source_start = rng.next(0, len(genes_b))
		dest_start = rng.next(0, len(genes_a))
		max_run = min(len(genes_a) - dest_start, len(genes_b) - source_start)
		run = rng.next(1, max_run + 1)

		genes = list(genes_a)
		genes[dest_start:dest_start + run] = genes_b[source_start:source_start + run]
		return self._child_of(parent_a, genes)
