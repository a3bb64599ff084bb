"""
Canonical form for cyclic sequences.

A tour visiting the same symbols in the same cyclic order is the same tour no
matter where it starts or which direction it runs. `canonicalize` maps every
rotation and mirror-reversal of a sequence to one representative so that
equivalent candidates collapse for deduplication:

	canonicalize("cdefab") == canonicalize("fedcba") == "abcdef"
"""

from typing import Sequence, TypeVar

S = TypeVar('S', str, tuple)


def _smallest_rotation_from(sequence: S, first) -> S:
	"""Smallest rotation among those starting at an occurrence of `first`."""
	length = len(sequence)
	doubled = sequence + sequence
	return min(
		doubled[i:i + length]
		for i in range(length)
		if sequence[i] == first
	)


def canonicalize(sequence: S) -> S:
	"""
	Return the rotation/reflection representative of a cyclic sequence.

	The smallest symbol m is located; among rotations of the sequence that
	start at an occurrence of m the lexicographically smallest is "forward",
	the same search on the reversed sequence gives "backward", and the smaller
	of the two is returned.

	Args:
		sequence: Non-empty str or tuple of orderable symbols

	Returns:
		Sequence of the same type, length and symbol multiset

	Raises:
		ValueError: if the sequence is empty
	"""
	if len(sequence) == 0:
		raise ValueError("Cannot canonicalize an empty sequence")
	first = min(sequence)
	forward = _smallest_rotation_from(sequence, first)
	backward = _smallest_rotation_from(sequence[::-1], first)
	return forward if forward <= backward else backward


def identity(sequence: Sequence) -> Sequence:
	"""Default canonicalization: every encoding is its own representative."""
	return sequence
