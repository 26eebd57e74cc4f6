import math

import pytest

import serialism.reduction


# ─── flatten ──────────────────────────────────────────────────────────────────


def test_flatten_fully () -> None:

	"""Default depth collapses every level."""

	assert serialism.reduction.flatten([1, [2, [3, [4]]], []]) == [1, 2, 3, 4]


def test_flatten_depth () -> None:

	"""A depth limits how many levels collapse."""

	assert serialism.reduction.flatten([1, [2, [3, [4]]]], 1) == [1, 2, [3, [4]]]
	assert serialism.reduction.flatten([1, [2, [3, [4]]]], 0) == [1, [2, [3, [4]]]]


def test_flatten_scalar_and_default () -> None:

	"""A scalar flattens to a singleton, and no argument gives [0]."""

	assert serialism.reduction.flatten(5) == [5]
	assert serialism.reduction.flatten() == [0]


def test_flatten_does_not_alias () -> None:

	"""Partially flattened nodes are copies."""

	source = [[1, [2]]]
	result = serialism.reduction.flatten(source, 1)
	result[1].append(3)

	assert source == [[1, [2]]]


# ─── truncate and sum ─────────────────────────────────────────────────────────


def test_truncate () -> None:

	"""Values truncate towards zero, recursively."""

	result = serialism.reduction.truncate([1.7, -1.7, [2.2, "c"]])

	assert result[:2] == [1, -1]
	assert result[2][0] == 2
	assert math.isnan(result[2][1])
	assert serialism.reduction.truncate(3.9) == 3


def test_sum_skips_non_numeric () -> None:

	"""Symbols and NaN count as nothing."""

	assert serialism.reduction.sum([1, [2, "c"], float("nan"), 3.5]) == pytest.approx(6.5)
	assert serialism.reduction.sum() == 0
	assert serialism.reduction.sum_ is serialism.reduction.sum


# ─── minimum and maximum ──────────────────────────────────────────────────────


def test_minimum_maximum_nested () -> None:

	"""Extremes are found across every level."""

	assert serialism.reduction.minimum([5, [2, [9]], -1]) == -1
	assert serialism.reduction.maximum([5, [2, [9]], -1]) == 9


def test_minimum_maximum_scalar_passthrough () -> None:

	"""A scalar is its own minimum and maximum."""

	assert serialism.reduction.minimum(4) == 4
	assert serialism.reduction.maximum("c") == "c"


def test_minimum_maximum_ignore_symbols () -> None:

	"""Non-numeric leaves do not take part."""

	assert serialism.reduction.minimum([3, "a", 1]) == 1
	assert serialism.reduction.maximum([3, "a", 1]) == 3


def test_minimum_maximum_empty () -> None:

	"""An empty node has no extremes: infinity as for an empty reduction."""

	assert serialism.reduction.minimum([]) == math.inf
	assert serialism.reduction.maximum([]) == -math.inf


# ─── normalize ────────────────────────────────────────────────────────────────


def test_normalize () -> None:

	"""Values are rescaled to [0, 1]."""

	assert serialism.reduction.normalize([0, 1, 2, 3, 4]) == [0, 0.25, 0.5, 0.75, 1]


def test_normalize_keeps_shape () -> None:

	"""Nested structure is preserved."""

	assert serialism.reduction.normalize([5, [10, 15]]) == [0.0, [0.5, 1.0]]


def test_normalize_degenerate_range_is_zero () -> None:

	"""A constant sequence normalizes to zeros rather than NaN."""

	assert serialism.reduction.normalize([7, 7, 7]) == [0, 0, 0]
	assert serialism.reduction.normalize(3) == [0]


def test_normalize_symbol_only_affects_leaf () -> None:

	"""A symbol becomes NaN while the numbers normalize as usual."""

	result = serialism.reduction.normalize([1, "a", 3])

	assert result[0] == 0.0
	assert math.isnan(result[1])
	assert result[2] == 1.0


def test_signed_normalize () -> None:

	"""Values are rescaled to [-1, 1]."""

	assert serialism.reduction.signed_normalize([0, 5, 10]) == [-1.0, 0.0, 1.0]


# ─── unique ───────────────────────────────────────────────────────────────────


def test_unique_keeps_first_occurrence () -> None:

	"""Duplicates are dropped in first-seen order."""

	assert serialism.reduction.unique([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_unique_flattens_one_level () -> None:

	"""Chords are flattened into their notes first."""

	assert serialism.reduction.unique([0, [3, 7], 0, [7, 10]]) == [0, 3, 7, 10]


def test_unique_deeper_lists_compared_by_value () -> None:

	"""Lists two levels deep are kept as items and deduplicated by equality."""

	assert serialism.reduction.unique([[[1, 2]], [[1, 2]], "c", "c"]) == [[1, 2], "c"]
