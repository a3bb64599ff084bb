"""
Adaptive multi-line evolutionary solver.

The solver searches for a fixed-length symbol sequence that minimizes an
external cost function. It keeps several parent lines (bounded, sorted
populations), evolves them round-robin with the variation strategies, and
adapts each line's strategy pool to the lineage of the global best.

The core loop:
1. Seed every line with the same distinct random individuals
2. Evolve the active line: draw parents and strategies, keep unique children
3. Score children; a new global best rebuilds the line's strategy pool
4. Merge children into the line, sort, truncate
5. Move to the previous line while progress is made, otherwise diversify the
   stalled line with the top individuals of every line
6. Stop on fitness 0 (converged) or when the time budget is spent

Usage:
	from evosearch import solve, canonicalize

	best = solve(
		target_length=len(alphabet),
		alphabet=alphabet,
		cost=route_length,
		on_improvement=lambda gen, fit, genes, strategy: print(gen, fit, genes, strategy),
		no_improvement_budget_seconds=20,
		canonicalize=canonicalize,
	)
"""

import logging
import math
import numbers
import time
from dataclasses import asdict, dataclass, field, replace
from enum import IntEnum, auto
from typing import Any, Callable, Optional, Sequence

from evosearch.canonical import identity
from evosearch.individual import Genes, Individual
from evosearch.logger import TRACE, OptimizationLogger
from evosearch.parent_line import ParentLine
from evosearch.progress import ProgressStats, ProgressTracker
from evosearch.random_source import RandomSource, RandomSourceProtocol
from evosearch.strategies.pool import StrategyPool
from evosearch.strategies.random_init import RandomInitStrategy
from evosearch.strategies.registry import StrategyRegistry

# (generation, fitness, genes, strategy_name) -> None
ImprovementCallback = Callable[[int, float, Genes, str], None]
CostFunction = Callable[[Genes], float]
CanonicalizeFunction = Callable[[Genes], Genes]


class SolverState(IntEnum):
	"""Lifecycle of one solve() call."""
	INITIALIZING = auto()
	EVOLVING = auto()
	CONVERGED = auto()  # Reached fitness 0
	TIMED_OUT = auto()  # Time budget spent


@dataclass
class SolverConfig:
	"""
	Configuration for the solver.

	- number_of_parent_lines: populations evolved round-robin
	- no_improvement_budget_seconds: wall-clock budget; a hard cap measured from
	  the start of the run unless reset_on_improvement is set
	- pool_size_multiplier: initial population and per-generation child count
	  is len(alphabet) * pool_size_multiplier
	- ancestor_strategy_multiplier: caps the extra strategy copies at
	  multiplier * number of registered strategies
	- diversify_top_n: individuals taken from every line when diversifying
	- reset_on_improvement: restart the stopwatch on every new best
	  (sliding "no improvement" window)
	- max_duplicate_draws: consecutive rejected draws before a generation (or
	  the initialization) gives up on filling its quota
	- seed: seed for the default RandomSource
	- history_size: number of recent generations kept in the result history
	"""
	number_of_parent_lines: int = 2
	no_improvement_budget_seconds: float = 20.0
	pool_size_multiplier: int = 3
	ancestor_strategy_multiplier: int = 3
	diversify_top_n: int = 5
	reset_on_improvement: bool = False
	max_duplicate_draws: int = 10000
	seed: Optional[int] = None
	history_size: int = 1000

	def validate(self) -> None:
		"""Raise ValueError on any out-of-range setting."""
		if self.number_of_parent_lines < 1:
			raise ValueError(f"number_of_parent_lines must be >= 1, got {self.number_of_parent_lines}")
		if not self.no_improvement_budget_seconds > 0:
			raise ValueError(
				f"no_improvement_budget_seconds must be > 0, got {self.no_improvement_budget_seconds}"
			)
		if self.pool_size_multiplier < 1:
			raise ValueError(f"pool_size_multiplier must be >= 1, got {self.pool_size_multiplier}")
		if self.ancestor_strategy_multiplier < 0:
			raise ValueError(
				f"ancestor_strategy_multiplier must be >= 0, got {self.ancestor_strategy_multiplier}"
			)
		if self.diversify_top_n < 1:
			raise ValueError(f"diversify_top_n must be >= 1, got {self.diversify_top_n}")
		if self.max_duplicate_draws < 1:
			raise ValueError(f"max_duplicate_draws must be >= 1, got {self.max_duplicate_draws}")
		if self.history_size < 1:
			raise ValueError(f"history_size must be >= 1, got {self.history_size}")


@dataclass
class SolveResult:
	"""
	Result of one run.

	Attributes:
		best_genes: Canonical genes of the best individual
		best_fitness: Its fitness (0 when converged)
		best_strategy: Name of the strategy that produced it
		state: CONVERGED or TIMED_OUT
		generations_run: Evolution generations completed
		elapsed_seconds: Wall-clock duration of the run
		improvements: Number of new global bests after initialization
		diversifications: Number of times a stalled line was diversified
		max_pool_size: Final (possibly grown) population bound
		history: Most recent per-generation statistics
	"""
	best_genes: Genes
	best_fitness: float
	best_strategy: str
	state: SolverState
	generations_run: int
	elapsed_seconds: float
	improvements: int
	diversifications: int
	max_pool_size: int
	history: list[ProgressStats] = field(default_factory=list)

	@property
	def converged(self) -> bool:
		return self.state == SolverState.CONVERGED

	def __repr__(self) -> str:
		return (
			f"SolveResult("
			f"state={self.state.name}, "
			f"fitness={self.best_fitness}, "
			f"generations={self.generations_run}, "
			f"elapsed={self.elapsed_seconds:.2f}s)"
		)


class Solver:
	"""
	Multi-line adaptive evolutionary search.

	One Solver instance runs one search at a time; all run state is created by
	run() and dropped when it returns. Use separate instances for concurrent
	searches.

	Args:
		config: Solver configuration (defaults to SolverConfig())
		registry: Variation strategies (defaults to StrategyRegistry.default())
		random_source: Integer source for every draw (defaults to
			RandomSource(config.seed))
		logger: Optional Callable[[str], None] receiving log lines
		log_level: Logging level for the solver's OptimizationLogger
		clock: Monotonic clock in seconds (defaults to time.perf_counter)
	"""

	def __init__(
		self,
		config: Optional[SolverConfig] = None,
		registry: Optional[StrategyRegistry] = None,
		random_source: Optional[RandomSourceProtocol] = None,
		logger: Optional[Callable[[str], None]] = None,
		log_level: int = logging.INFO,
		clock: Callable[[], float] = time.perf_counter,
	):
		self._config = config or SolverConfig()
		self._registry = registry or StrategyRegistry.default()
		self._rng = random_source if random_source is not None else RandomSource(self._config.seed)
		self._log = OptimizationLogger(self.name, level=log_level, file_logger=logger)
		self._clock = clock

	@property
	def name(self) -> str:
		return "Solver"

	@property
	def config(self) -> SolverConfig:
		return self._config

	@property
	def registry(self) -> StrategyRegistry:
		return self._registry

	def run(
		self,
		target_length: int,
		alphabet: Sequence[Any],
		cost: CostFunction,
		on_improvement: Optional[ImprovementCallback] = None,
		canonicalize: CanonicalizeFunction = identity,
	) -> SolveResult:
		"""
		Search for the lowest-cost sequence.

		Args:
			target_length: Length of every candidate (>= 1)
			alphabet: Non-empty str or sequence of orderable symbols
			cost: Fitness function, lower is better, 0 is perfect
			on_improvement: Called with (generation, fitness, genes, strategy_name)
				for the initial best and every new global best
			canonicalize: Maps equivalent encodings to one representative; must be
				idempotent and preserve length and alphabet

		Returns:
			SolveResult with the best canonical genes found

		Raises:
			ValueError: invalid arguments or configuration, NaN cost,
				length-changing canonicalization
			TypeError: non-numeric cost
		"""
		self._config.validate()
		if isinstance(target_length, bool) or not isinstance(target_length, int) or target_length < 1:
			raise ValueError(f"target_length must be an int >= 1, got {target_length!r}")
		if alphabet is None or len(alphabet) == 0:
			raise ValueError("alphabet must not be empty")
		if not callable(cost):
			raise ValueError("cost must be callable")

		run = _SearchRun(
			config=self._config,
			registry=self._registry,
			rng=self._rng,
			log=self._log,
			clock=self._clock,
			target_length=target_length,
			alphabet=alphabet,
			cost=cost,
			on_improvement=on_improvement,
			canonicalize=canonicalize,
		)
		return run.execute()

	def __repr__(self) -> str:
		return f"Solver(config={self._config}, registry={self._registry!r})"


class _SearchRun:
	"""State of a single run: lines, best individual, seen genes, stopwatch."""

	def __init__(
		self,
		config: SolverConfig,
		registry: StrategyRegistry,
		rng: RandomSourceProtocol,
		log: OptimizationLogger,
		clock: Callable[[], float],
		target_length: int,
		alphabet: Sequence[Any],
		cost: CostFunction,
		on_improvement: Optional[ImprovementCallback],
		canonicalize: CanonicalizeFunction,
	):
		self._config = config
		self._registry = registry
		self._rng = rng
		self._log = log
		self._clock = clock
		self._target_length = target_length
		self._alphabet = alphabet
		self._cost = cost
		self._on_improvement = on_improvement
		self._canonicalize = canonicalize

		self._budget = config.no_improvement_budget_seconds
		self._max_pool_size = len(alphabet) * config.pool_size_multiplier
		self._unique_genes_seen: set = set()
		self._lines: list[ParentLine] = []
		self._line_index = 0
		self._best: Optional[Individual] = None
		self._state = SolverState.INITIALIZING
		self._improvements = 0
		self._diversifications = 0

		self._run_started = clock()
		self._stopwatch_started = self._run_started

		progress_log = log.trace if log.is_enabled_for(TRACE) else None
		self._tracker = ProgressTracker(
			logger=progress_log,
			prefix=f"[{log.name}]",
			history_size=config.history_size,
		)

	# =========================================================================
	# Helpers
	# =========================================================================

	def _elapsed(self) -> float:
		"""Seconds since the stopwatch was last reset."""
		return self._clock() - self._stopwatch_started

	def _timed_out(self) -> bool:
		return self._elapsed() > self._budget

	def _score(self, genes: Genes) -> float:
		value = self._cost(genes)
		if isinstance(value, bool) or not isinstance(value, numbers.Real):
			raise TypeError(f"cost returned non-numeric value {value!r} for {genes!r}")
		if math.isnan(value):
			raise ValueError(f"cost returned NaN for {genes!r}")
		return value

	def _accept(self, individual: Individual) -> bool:
		"""Canonicalize the individual's genes; True if they were not seen before."""
		genes = self._canonicalize(individual.genes)
		if len(genes) != len(individual.genes):
			raise ValueError(
				f"canonicalize changed length {len(individual.genes)} -> {len(genes)}"
			)
		individual.genes = genes
		if genes in self._unique_genes_seen:
			return False
		self._unique_genes_seen.add(genes)
		return True

	def _report(self, generation: int, individual: Individual) -> None:
		self._log.info(
			f"[{self._log.name}] Gen {generation}: fitness={individual.fitness} "
			f"by {individual.strategy_name} (elapsed {self._clock() - self._run_started:.2f}s)"
		)
		if self._on_improvement is not None:
			self._on_improvement(generation, individual.fitness, individual.genes, individual.strategy_name)

	# =========================================================================
	# Phases
	# =========================================================================

	def _initialize(self) -> None:
		"""Seed every line with the same distinct random individuals."""
		cfg = self._config
		random_init = RandomInitStrategy(self._target_length)
		initial: list[Individual] = []
		duplicate_draws = 0
		while len(initial) < self._max_pool_size:
			individual = random_init.create_child(None, None, self._alphabet, self._rng)
			if self._accept(individual):
				initial.append(individual)
				duplicate_draws = 0
				continue
			duplicate_draws += 1
			if duplicate_draws >= cfg.max_duplicate_draws:
				self._log.warning(
					f"[{self._log.name}] Only {len(initial)} distinct initial individuals "
					f"after {duplicate_draws} duplicate draws"
				)
				break

		for individual in initial:
			individual.fitness = self._score(individual.genes)
		initial.sort(key=lambda x: x.fitness)

		self._lines = [
			ParentLine(initial, StrategyPool.uniform(self._registry))
			for _ in range(cfg.number_of_parent_lines)
		]
		self._best = initial[0]
		self._log.info(
			f"[{self._log.name}] Initialized {cfg.number_of_parent_lines} lines with "
			f"{len(initial)} individuals, strategies={[s.name for s in self._registry]}"
		)
		self._report(1, self._best)

	def _generate_children(self, line: ParentLine) -> list[Individual]:
		"""Draw unique children from the line until max_pool_size are accepted."""
		cfg = self._config
		individuals = line.individuals
		count = len(individuals)
		pool = line.strategy_pool

		b_index = self._rng.next(0, count)
		children: list[Individual] = []
		rejected = 0
		while len(children) < self._max_pool_size:
			a_index = self._rng.next(0, count)
			while a_index == b_index and count > 1:
				a_index = self._rng.next(0, count)
			strategy = pool.sample(self._rng)
			child = strategy.create_child(individuals[a_index], individuals[b_index], self._alphabet, self._rng)
			b_index = a_index

			if child is not None and self._accept(child):
				children.append(child)
				rejected = 0
				continue
			rejected += 1
			if rejected >= cfg.max_duplicate_draws or self._timed_out():
				break
		return children

	def _score_children(self, line: ParentLine, children: list[Individual], generation: int) -> None:
		"""Score children; promote strict improvements to the global best."""
		for child in children:
			child.fitness = self._score(child.genes)
			if child.fitness < self._best.fitness:
				self._best = child
				self._improvements += 1
				line.strategy_pool = StrategyPool.from_ancestry(
					child, self._registry, self._config.ancestor_strategy_multiplier,
				)
				lineage_length = child.lineage_length
				if lineage_length > self._max_pool_size:
					self._max_pool_size = lineage_length
				self._log.debug(
					f"[{self._log.name}] Line {self._line_index} pool rebuilt from "
					f"{lineage_length} ancestors: {line.strategy_pool.weights()}"
				)
				self._report(generation, child)
				if self._config.reset_on_improvement:
					self._stopwatch_started = self._clock()

	def _diversify(self, line: ParentLine) -> None:
		"""Replace a stalled line with the top individuals of every line."""
		pooled: dict = {}
		for other in self._lines:
			for individual in other.top(self._config.diversify_top_n):
				pooled.setdefault(individual.genes, individual)
		line.replace(pooled.values())
		self._diversifications += 1
		self._log.debug(
			f"[{self._log.name}] Diversified line {self._line_index}: "
			f"{len(line)} individuals, best={line.best.fitness}"
		)

	def _select_next_line(self, line: ParentLine) -> None:
		if line.best.fitness == self._best.fitness or self._elapsed() < self._budget / 2:
			self._line_index = (self._line_index - 1) % len(self._lines)
		else:
			self._diversify(line)

	def execute(self) -> SolveResult:
		self._log.header(
			f"{self._log.name}: target_length={self._target_length}, "
			f"alphabet={len(self._alphabet)} symbols"
		)
		self._log.settings(asdict(self._config))
		self._initialize()
		self._state = SolverState.EVOLVING

		generation = 1
		while True:
			if self._best.fitness == 0:
				self._state = SolverState.CONVERGED
				break
			if self._timed_out():
				self._state = SolverState.TIMED_OUT
				break

			line = self._lines[self._line_index]
			evolved_index = self._line_index
			children = self._generate_children(line)
			self._score_children(line, children, generation)
			line.merge(children, self._max_pool_size)
			self._tracker.tick(
				[x.fitness for x in line],
				generation=generation,
				line_index=evolved_index,
				best_global=self._best.fitness,
				children=len(children),
			)
			generation += 1
			self._select_next_line(line)

		elapsed = self._clock() - self._run_started
		self._log.info(
			f"[{self._log.name}] {self._state.name} after {self._tracker.generations_run} generations "
			f"({elapsed:.2f}s): fitness={self._best.fitness}, improvements={self._improvements}, "
			f"diversifications={self._diversifications}, max_pool_size={self._max_pool_size}"
		)
		self._log.section("Summary")
		self._tracker.log_summary(self._log.info)

		return SolveResult(
			best_genes=self._canonicalize(self._best.genes),
			best_fitness=self._best.fitness,
			best_strategy=self._best.strategy_name,
			state=self._state,
			generations_run=self._tracker.generations_run,
			elapsed_seconds=elapsed,
			improvements=self._improvements,
			diversifications=self._diversifications,
			max_pool_size=self._max_pool_size,
			history=self._tracker.history,
		)


def solve(
	target_length: int,
	alphabet: Sequence[Any],
	cost: CostFunction,
	on_improvement: Optional[ImprovementCallback],
	no_improvement_budget_seconds: float,
	number_of_parent_lines: int = 2,
	canonicalize: CanonicalizeFunction = identity,
	*,
	config: Optional[SolverConfig] = None,
	random_source: Optional[RandomSourceProtocol] = None,
	logger: Optional[Callable[[str], None]] = None,
) -> Genes:
	"""
	Run one search and return the best canonical genes.

	Args:
		target_length: Length of every candidate (>= 1)
		alphabet: Non-empty str or sequence of symbols
		cost: Fitness function, lower is better, 0 is perfect
		on_improvement: (generation, fitness, genes, strategy_name) callback
		no_improvement_budget_seconds: Time budget (> 0)
		number_of_parent_lines: Number of populations evolved round-robin
		canonicalize: Representative-of-equivalents function (default identity)
		config: Remaining settings; budget and line count above take precedence
		random_source: Injected integer source (default seeded from config.seed)
		logger: Optional Callable[[str], None] for log lines

	Returns:
		Genes of the best individual, canonicalized
	"""
	cfg = replace(
		config or SolverConfig(),
		number_of_parent_lines=number_of_parent_lines,
		no_improvement_budget_seconds=no_improvement_budget_seconds,
	)
	solver = Solver(config=cfg, random_source=random_source, logger=logger)
	result = solver.run(
		target_length=target_length,
		alphabet=alphabet,
		cost=cost,
		on_improvement=on_improvement,
		canonicalize=canonicalize,
	)
	return result.best_genes
