"""
Base class for variation strategies.

A strategy turns one or two parent Individuals into a child Individual. Every
strategy is stateless apart from construction arguments, draws all of its
randomness from the RandomSource it is handed, and records itself and the
first parent as the child's lineage.

Subclasses must implement:
- create_child(): produce a child, or None when the draw collapsed to the parent

Usage:
	strategy = SwapStrategy()
	child = strategy.create_child(parent_a, parent_b, alphabet, rng)
	if child is not None:
		...
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from evosearch.individual import Individual, make_genes
from evosearch.random_source import RandomSourceProtocol


class StrategyBase(ABC):
	"""Abstract base class for variation strategies."""

	@property
	def name(self) -> str:
		"""Short description, e.g. "Swap" for SwapStrategy."""
		return type(self).__name__.replace("Strategy", "")

	@abstractmethod
	def create_child(
		self,
		parent_a: Optional[Individual],
		parent_b: Optional[Individual],
		alphabet: Sequence[Any],
		rng: RandomSourceProtocol,
	) -> Optional[Individual]:
		"""
		Create a child individual.

		Args:
			parent_a: Primary parent (recorded as the child's parent)
			parent_b: Secondary parent (only used by Crossover)
			alphabet: Symbols a gene may take
			rng: Random source every draw is taken from

		Returns:
			A new, unscored Individual, or None when the operator had no effect
		"""
		...

	def _child_of(self, parent: Individual, symbols: Sequence[Any]) -> Individual:
		return Individual(
			genes=make_genes(symbols, parent.genes),
			strategy=self,
			parent=parent,
		)

	def __repr__(self) -> str:
		return f"{type(self).__name__}()"

