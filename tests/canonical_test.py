#!/usr/bin/env python3
"""
Tests for cyclic canonicalization.

Run with:
	pytest tests/canonical_test.py
"""

import random

import pytest

from evosearch.canonical import canonicalize, identity


def _variants(sequence):
	"""All rotations and mirror-reversals of a sequence."""
	rotations = [sequence[i:] + sequence[:i] for i in range(len(sequence))]
	return rotations + [r[::-1] for r in rotations]


def test_all_rotations_and_reversals_of_abcdef():
	sequences = [
		"abcdef", "bcdefa", "cdefab",
		"defabc", "efabcd", "fabcde",
		"fedcba", "edcbaf", "dcbafe",
		"cbafed", "bafedc", "afedcb",
	]
	for sequence in sequences:
		assert canonicalize(sequence) == "abcdef", sequence


def test_circle_route_optimum_is_canonical():
	optimal = "*azyxwvutsrqponmlkjihgfedcb"
	assert canonicalize(optimal) == optimal
	for variant in _variants(optimal):
		assert canonicalize(variant) == optimal


def test_smallest_symbol_repeated():
	"""With repeated minima the smallest rotation among their occurrences wins."""
	assert canonicalize("baab") == "aabb"
	assert canonicalize("abab") == "abab"


def test_backward_wins_when_smaller():
	assert canonicalize("acb") == "abc"


def test_tuples():
	assert canonicalize((3, 1, 2)) == (1, 2, 3)
	assert canonicalize((2, 1, 3)) == (1, 2, 3)


def test_single_symbol():
	assert canonicalize("x") == "x"


def test_empty_raises():
	with pytest.raises(ValueError):
		canonicalize("")


def test_random_sequences_properties():
	"""Same length, same multiset, idempotent, equal across all variants."""
	rng = random.Random(1234)
	for _ in range(200):
		length = rng.randint(1, 12)
		sequence = "".join(rng.choice("abcde") for _ in range(length))
		result = canonicalize(sequence)
		assert len(result) == len(sequence)
		assert sorted(result) == sorted(sequence)
		assert canonicalize(result) == result
		for variant in _variants(sequence):
			assert canonicalize(variant) == result


def test_identity():
	assert identity("cab") == "cab"
