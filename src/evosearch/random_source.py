"""
Random sources for the search engine.

Every strategy and the solver draw integers through a RandomSource so the
exact call sequence can be replayed in tests:

	rng = RandomSource(seed=42)
	location = rng.next(0, len(genes))

	# Deterministic: every call consumes the next scripted value and checks bounds
	rng = ScriptedRandomSource([3, 7])
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSourceProtocol(Protocol):
	"""Anything that can draw a uniform integer in [inclusive_min, exclusive_max)."""

	def next(self, inclusive_min: int, exclusive_max: int) -> int:
		...


class RandomSource:
	"""
	Uniform integer sampling backed by numpy's PCG64 generator.

	Args:
		seed: Optional seed for reproducible runs (None = OS entropy)
	"""

	def __init__(self, seed: Optional[int] = None):
		self._seed = seed
		self._rng = np.random.default_rng(seed)

	@property
	def seed(self) -> Optional[int]:
		return self._seed

	def next(self, inclusive_min: int, exclusive_max: int) -> int:
		"""Return an int in [inclusive_min, exclusive_max)."""
		if exclusive_max <= inclusive_min:
			raise ValueError(
				f"Empty range [{inclusive_min}, {exclusive_max})"
			)
		return int(self._rng.integers(inclusive_min, exclusive_max))

	def __repr__(self) -> str:
		return f"RandomSource(seed={self._seed})"


class ScriptedRandomSource:
	"""
	Returns a fixed sequence of values, asserting each call's bounds.

	Raises:
		IndexError: when more values are requested than were scripted
		AssertionError: when a scripted value falls outside the requested range
	"""

	def __init__(self, values: Sequence[int]):
		self._values = list(values)
		self._index = 0
		self.calls: list[tuple[int, int]] = []

	def next(self, inclusive_min: int, exclusive_max: int) -> int:
		if self._index >= len(self._values):
			raise IndexError(
				f"ScriptedRandomSource exhausted after {len(self._values)} values"
			)
		value = self._values[self._index]
		self._index += 1
		self.calls.append((inclusive_min, exclusive_max))
		assert value >= inclusive_min, f"{value} < {inclusive_min}"
		assert value < exclusive_max, f"{value} >= {exclusive_max}"
		return value

	@property
	def remaining(self) -> int:
		"""Number of scripted values not yet consumed."""
		return len(self._values) - self._index

	def __repr__(self) -> str:
		return f"ScriptedRandomSource(consumed={self._index}/{len(self._values)})"
