#!/usr/bin/env python3
"""
Tests for RandomSource and ScriptedRandomSource.

Run with:
	pytest tests/random_source_test.py
"""

import pytest

from evosearch.random_source import RandomSource, RandomSourceProtocol, ScriptedRandomSource


def test_values_within_bounds():
	rng = RandomSource(seed=7)
	values = [rng.next(3, 9) for _ in range(500)]
	assert all(3 <= v < 9 for v in values)
	assert set(values) == set(range(3, 9)), "every value in range should appear"


def test_returns_python_int():
	assert type(RandomSource(seed=1).next(0, 10)) is int


def test_same_seed_same_sequence():
	a = RandomSource(seed=42)
	b = RandomSource(seed=42)
	assert [a.next(0, 1000) for _ in range(50)] == [b.next(0, 1000) for _ in range(50)]


def test_empty_range_raises():
	with pytest.raises(ValueError):
		RandomSource(seed=0).next(5, 5)


def test_single_value_range():
	assert RandomSource(seed=0).next(4, 5) == 4


def test_protocol():
	assert isinstance(RandomSource(), RandomSourceProtocol)
	assert isinstance(ScriptedRandomSource([]), RandomSourceProtocol)


def test_scripted_returns_in_order_and_records_bounds():
	rng = ScriptedRandomSource([1, 0, 5])
	assert rng.next(0, 2) == 1
	assert rng.next(0, 3) == 0
	assert rng.next(2, 6) == 5
	assert rng.calls == [(0, 2), (0, 3), (2, 6)]
	assert rng.remaining == 0


def test_scripted_out_of_bounds_fails():
	with pytest.raises(AssertionError):
		ScriptedRandomSource([8]).next(0, 8)
	with pytest.raises(AssertionError):
		ScriptedRandomSource([1]).next(2, 8)


def test_scripted_exhausted():
	rng = ScriptedRandomSource([0])
	rng.next(0, 1)
	with pytest.raises(IndexError):
		rng.next(0, 1)
