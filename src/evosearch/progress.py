"""
Progress tracking for the generation loop.

Records one tick per generation and keeps a bounded history, so memory stays
flat over runs of many thousands of generations.
"""

from collections import deque
from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass
class ProgressStats:
	"""Statistics for a single generation."""
	generation: int
	line_index: int
	best_global: float
	best_current: float
	avg_current: float
	worst_current: float
	children: int
	improved: bool = False


class ProgressTracker:
	"""
	Tracks search progress and logs standardized metrics (lower is better).

	Usage:
		tracker = ProgressTracker(logger=log.trace, prefix="[Solver]")
		for generation in ...:
			tracker.tick(fitness_values, generation, line_index, best, children)
		summary = tracker.summary()

	The tracker logs lines like:
		[Solver] [Gen 12 line 1] best=512.0000, current=530.0000, avg=601.2500, children=81 *
	"""

	def __init__(
		self,
		logger: Optional[Callable[[str], None]] = None,
		prefix: str = "",
		history_size: int = 1000,
	):
		"""
		Args:
			logger: Callable that logs messages (None = no logging)
			prefix: Prefix for log messages (e.g., "[Solver]")
			history_size: Number of most recent ticks kept
		"""
		self._log = logger
		self._prefix = prefix + " " if prefix else ""

		self._first: Optional[ProgressStats] = None
		self._best_global: Optional[float] = None
		self._best_generation: int = 0
		self._ticks = 0
		self._improvements = 0
		self._history: deque = deque(maxlen=history_size)

	def tick(
		self,
		fitness_values: List[float],
		generation: int,
		line_index: int,
		best_global: float,
		children: int,
	) -> ProgressStats:
		"""
		Record one generation.

		Args:
			fitness_values: Fitness of the active line after the merge
			generation: Generation number
			line_index: Index of the line that was evolved
			best_global: Global best fitness after this generation
			children: Number of children accepted this generation
		"""
		if not fitness_values:
			raise ValueError("fitness_values cannot be empty")

		improved = self._best_global is not None and best_global < self._best_global
		if self._best_global is None or improved:
			self._best_global = best_global
			self._best_generation = generation
		if improved:
			self._improvements += 1

		stats = ProgressStats(
			generation=generation,
			line_index=line_index,
			best_global=best_global,
			best_current=fitness_values[0],
			avg_current=sum(fitness_values) / len(fitness_values),
			worst_current=fitness_values[-1],
			children=children,
			improved=improved,
		)
		if self._first is None:
			self._first = stats
		self._ticks += 1
		self._history.append(stats)

		if self._log is not None:
			self._log_tick(stats)
		return stats

	def _log_tick(self, stats: ProgressStats) -> None:
		improved_str = " *" if stats.improved else ""
		self._log(
			f"{self._prefix}[Gen {stats.generation} line {stats.line_index}] "
			f"best={stats.best_global:.4f}, "
			f"current={stats.best_current:.4f}, "
			f"avg={stats.avg_current:.4f}, "
			f"children={stats.children}{improved_str}"
		)

	@property
	def best_global(self) -> Optional[float]:
		return self._best_global

	@property
	def best_generation(self) -> int:
		return self._best_generation

	@property
	def history(self) -> List[ProgressStats]:
		"""Most recent ticks (bounded)."""
		return list(self._history)

	@property
	def generations_run(self) -> int:
		return self._ticks

	def summary(self) -> dict:
		"""Get summary statistics."""
		if self._first is None:
			return {"generations": 0}

		initial = self._first.best_global
		final = self._best_global
		improvement = (initial - final) / initial * 100 if initial else 0.0
		return {
			"generations": self._ticks,
			"initial_fitness": initial,
			"final_fitness": final,
			"improvement_pct": improvement,
			"best_generation": self._best_generation,
			"improvements": self._improvements,
		}

	def log_summary(self, log: Callable[[str], None]) -> None:
		"""Log a summary of the run."""
		s = self.summary()
		if s["generations"] == 0:
			log(f"{self._prefix}No generations completed")
			return

		log(f"{self._prefix}Summary:")
		log(f"  Generations: {s['generations']}")
		log(f"  Initial: {s['initial_fitness']:.4f}")
		log(f"  Final: {s['final_fitness']:.4f}")
		log(f"  Improvement: {s['improvement_pct']:.2f}%")
		log(f"  Best at generation: {s['best_generation']}")
		log(f"  Generations with a new best: {s['improvements']}")
