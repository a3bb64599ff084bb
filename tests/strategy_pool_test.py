#!/usr/bin/env python3
"""
Tests for the strategy registry and ancestry-weighted StrategyPool.

Run with:
	pytest tests/strategy_pool_test.py
"""

import pytest

from evosearch.individual import Individual
from evosearch.random_source import ScriptedRandomSource
from evosearch.strategies import (
	CrossoverStrategy,
	MutateStrategy,
	RandomInitStrategy,
	StrategyPool,
	StrategyRegistry,
	SwapStrategy,
)


def _lineage(registry, names):
	"""Chain rooted at a RandomInit individual; names are applied root-first."""
	node = Individual(genes="ab", fitness=10, strategy=RandomInitStrategy(2))
	for name in names:
		node = Individual(genes="ab", fitness=node.fitness - 1, strategy=registry.get(name), parent=node)
	return node


def test_default_registry():
	registry = StrategyRegistry.default()
	assert [s.name for s in registry] == ["Crossover", "Mutate", "Reverse", "Shift", "Swap"]
	assert len(registry) == 5
	assert registry.get("Swap") is registry.strategies[4]
	assert registry.get("RandomInit") is None


def test_registry_rejects_empty_and_duplicates():
	with pytest.raises(ValueError):
		StrategyRegistry([])
	with pytest.raises(ValueError):
		StrategyRegistry([SwapStrategy(), SwapStrategy()])


def test_registry_membership_is_identity():
	registry = StrategyRegistry.default()
	assert registry.get("Mutate") in registry
	assert MutateStrategy() not in registry


def test_uniform_pool():
	registry = StrategyRegistry.default()
	pool = StrategyPool.uniform(registry)
	assert len(pool) == 5
	assert all(pool.count(s) == 1 for s in registry)


def test_pool_from_ancestry():
	registry = StrategyRegistry.default()
	best = _lineage(registry, ["Swap", "Swap", "Reverse"])
	pool = StrategyPool.from_ancestry(best, registry)

	# 3 non-root ancestors: Reverse x1, Swap x2; scale target 3
	assert len(pool) == 8
	assert pool.count(registry.get("Swap")) == 3
	assert pool.count(registry.get("Reverse")) == 2
	assert pool.count(registry.get("Mutate")) == 1
	assert pool.count(registry.get("Crossover")) == 1
	assert pool.count(registry.get("Shift")) == 1


def test_pool_extra_copies_are_capped():
	registry = StrategyRegistry.default()
	best = _lineage(registry, ["Swap"] * 30 + ["Mutate"] * 10)
	pool = StrategyPool.from_ancestry(best, registry)

	# scale target min(40, 15) = 15: Swap floor(15*30/40)=11, Mutate floor(15*10/40)=3
	assert pool.count(registry.get("Swap")) == 12
	assert pool.count(registry.get("Mutate")) == 4
	assert len(pool) == 19
	assert len(pool) <= len(registry) + 3 * len(registry)


def test_pool_from_root_only_is_uniform():
	registry = StrategyRegistry.default()
	root = Individual(genes="ab", fitness=1, strategy=RandomInitStrategy(2))
	pool = StrategyPool.from_ancestry(root, registry)
	assert len(pool) == len(registry)


def test_pool_ignores_unregistered_strategies():
	registry = StrategyRegistry([SwapStrategy(), CrossoverStrategy()])
	stranger = Individual(genes="ab", fitness=3, strategy=MutateStrategy())
	best = Individual(genes="ab", fitness=2, strategy=registry.get("Swap"), parent=stranger)
	pool = StrategyPool.from_ancestry(best, registry)
	assert pool.weights() == {"Swap": 2, "Crossover": 1}


def test_pool_sample_uses_one_draw():
	registry = StrategyRegistry.default()
	pool = StrategyPool.uniform(registry)
	rng = ScriptedRandomSource([3])
	assert pool.sample(rng) is registry.strategies[3]
	assert rng.calls == [(0, 5)]


def test_empty_pool_rejected():
	with pytest.raises(ValueError):
		StrategyPool([])
