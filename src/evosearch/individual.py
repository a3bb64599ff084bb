"""
Individual: one node of a lineage tree.

An Individual holds an encoded candidate (its genes), the fitness assigned by
the external cost function (lower is better, 0 is perfect), the strategy that
produced it and a reference to the parent it was derived from. Parents are
always created before their children, so the parent chain is acyclic and ends
at an individual produced by RandomInit.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Optional, Sequence, Union

if TYPE_CHECKING:
	from evosearch.strategies.base import StrategyBase

Genes = Union[str, tuple]


def make_genes(symbols: Sequence[Any], like: Sequence[Any]) -> Genes:
	"""Build genes of the same kind as `like` (str stays str, anything else becomes a tuple)."""
	if isinstance(like, str):
		return ''.join(symbols)
	return tuple(symbols)


@dataclass(eq=False)
class Individual:
	"""
	Lineage node.

	Attributes:
		genes: Encoded candidate (str or tuple of symbols)
		fitness: Score from the cost function, None until scored
		strategy: Strategy that produced this individual
		parent: Individual this one was derived from (None for roots)
	"""
	genes: Genes
	fitness: Optional[float] = None
	strategy: Optional['StrategyBase'] = field(default=None, repr=False)
	parent: Optional['Individual'] = field(default=None, repr=False)

	@property
	def strategy_name(self) -> str:
		return self.strategy.name if self.strategy is not None else "?"

	def ancestors(self) -> Iterator['Individual']:
		"""Yield this individual, then its parent, up to the root."""
		node: Optional[Individual] = self
		while node is not None:
			yield node
			node = node.parent

	@property
	def lineage_length(self) -> int:
		"""Number of nodes in the ancestry chain, this individual included."""
		return sum(1 for _ in self.ancestors())

	def __repr__(self) -> str:
		genes = self.genes if isinstance(self.genes, str) else list(self.genes)
		return f"Individual(genes={genes!r}, fitness={self.fitness}, strategy={self.strategy_name})"
