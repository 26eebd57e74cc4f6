import pytest

import serialism.generators


# --- spread ---


def test_spread_float_counts_up_by_default () -> None:

	"""With only a length, values count from zero."""

	assert serialism.generators.spread_float(4) == [0.0, 1.0, 2.0, 3.0]


def test_spread_float_excludes_hi () -> None:

	"""The high bound is not reached."""

	assert serialism.generators.spread_float(4, 0, 1) == [0.0, 0.25, 0.5, 0.75]


def test_spread_float_swaps_bounds () -> None:

	"""Reversed bounds are put in order."""

	assert serialism.generators.spread_float(4, 1, 0) == [0.0, 0.25, 0.5, 0.75]


def test_spread_floors () -> None:

	"""The integer version rounds down."""

	assert serialism.generators.spread(5, 0, 12) == [0, 2, 4, 7, 9]


def test_spread_minimum_length () -> None:

	"""A length below one still gives one value."""

	assert serialism.generators.spread(0, 3, 9) == [3]


def test_spread_exp_curves_spacing () -> None:

	"""An exponent above one bunches values towards the low end."""

	values = serialism.generators.spread_float_exp(4, 0, 16, 2)

	assert values == pytest.approx([0.0, 1.0, 4.0, 9.0])
	assert serialism.generators.spread_exp(4, 0, 16, 2) == [0, 1, 4, 9]


def test_spread_inclusive () -> None:

	"""The inclusive versions reach the high bound."""

	assert serialism.generators.spread_inclusive_float(5, 0, 1) == [0.0, 0.25, 0.5, 0.75, 1.0]
	assert serialism.generators.spread_inclusive(5, 0, 12) == [0, 3, 6, 9, 12]
	assert serialism.generators.spread_inclusive_float(1, 3, 9) == [3.0]


def test_spread_inclusive_exp () -> None:

	"""Curved inclusive spacing keeps both ends."""

	values = serialism.generators.spread_inclusive_float_exp(3, 0, 8, 3)

	assert values == pytest.approx([0.0, 1.0, 8.0])
	assert serialism.generators.spread_inclusive_exp(3, 0, 8, 3) == [0, 1, 8]


# --- euclid ---


def test_euclid_tresillo () -> None:

	"""Three hits in eight steps is the tresillo."""

	assert serialism.generators.euclid(8, 3) == [1, 0, 0, 1, 0, 0, 1, 0]


def test_euclid_hit_count () -> None:

	"""The number of hits is preserved for every combination."""

	for steps in range(1, 17):
		for hits in range(steps + 1):
			pattern = serialism.generators.euclid(steps, hits)
			assert len(pattern) == steps
			assert sum(pattern) == hits


def test_euclid_rotation () -> None:

	"""Rotation shifts the pattern to the right."""

	assert serialism.generators.euclid(8, 3, 1) == [0, 1, 0, 0, 1, 0, 0, 1]


def test_euclid_limits_hits () -> None:

	"""Hits outside [0, steps] are limited rather than rejected."""

	assert serialism.generators.euclid(4, 9) == [1, 1, 1, 1]
	assert serialism.generators.euclid(4, -2) == [0, 0, 0, 0]


# --- bresenham ---


def test_bresenham () -> None:

	"""Bresenham spreads hits along a line."""

	assert serialism.generators.bresenham(8, 3) == [0, 0, 1, 0, 0, 1, 0, 1]
	assert sum(serialism.generators.bresenham(16, 5)) == 5
	assert serialism.generators.bresenham(0, 3) == []
