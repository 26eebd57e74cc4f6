"""Flatten, summarise and rescale sequences.

These reductions are what visualisation and statistics code uses to bring a
generated pattern into a known range before drawing or analysing it.
"""

import logging
import math
import typing

import serialism.arithmetic
import serialism.constants
import serialism.sequence


logger = logging.getLogger(__name__)


def flatten (value: serialism.sequence.Sequence = (0,), depth: float = math.inf) -> serialism.sequence.Node:

	"""Collapse nested Nodes up to *depth* levels into one list, keeping order.

	Parameters:
		value: Sequence to flatten (a Scalar becomes a singleton)
		depth: How many levels to collapse (default: all of them)

	Example:
		```python
		flatten([1, [2, [3, [4]]]])      # [1, 2, 3, 4]
		flatten([1, [2, [3, [4]]]], 1)   # [1, 2, [3, [4]]]
		```
	"""

	return _flatten(serialism.sequence.to_node(value), depth)


def _flatten (node: serialism.sequence.Node, depth: float) -> serialism.sequence.Node:

	result: serialism.sequence.Node = []

	for item in node:
		if serialism.sequence.is_node(item) and depth >= 1:
			result.extend(_flatten(item, depth - 1))
		else:
			result.append(item)

	return result


def _numeric_leaves (value: serialism.sequence.Sequence) -> typing.List[float]:

	"""Return all numeric, non-NaN leaves of *value* in order."""

	return [
		item for item in flatten(value)
		if serialism.sequence.is_number(item) and not serialism.sequence.is_nan(item)
	]


def truncate (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Sequence:

	"""Truncate every value towards zero.  Non-numeric leaves become NaN."""

	def _truncate (x: typing.Any) -> typing.Any:

		if serialism.sequence.is_node(x):
			return [_truncate(item) for item in x]

		if not serialism.sequence.is_number(x) or not math.isfinite(x):
			return serialism.sequence.to_float(x)

		return math.trunc(x)

	return _truncate(value)


def sum (value: serialism.sequence.Sequence = (0,)) -> float:

	"""Add up every numeric leaf, skipping symbols and NaN."""

	total = 0

	for item in _numeric_leaves(value):
		total += item

	return total


sum_ = sum


def minimum (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Sequence:

	"""Return the lowest numeric leaf.  A Scalar input is returned unchanged."""

	if not serialism.sequence.is_node(value):
		return value

	return min(_numeric_leaves(value), default=serialism.constants.INF)


def maximum (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Sequence:

	"""Return the highest numeric leaf.  A Scalar input is returned unchanged."""

	if not serialism.sequence.is_node(value):
		return value

	return max(_numeric_leaves(value), default=-serialism.constants.INF)


def normalize (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Sequence:

	"""Rescale a sequence so its lowest value is 0 and its highest is 1.

	The shape of the input is kept.  When every value is the same there is
	no range to divide by, and every numeric leaf normalizes to 0.
	Symbolic leaves come out as NaN.

	Example:
		```python
		normalize([0, 1, 2, 3, 4])     # [0.0, 0.25, 0.5, 0.75, 1.0]
		normalize([5, [10, 15]])       # [0.0, [0.5, 1.0]]
		normalize([7, 7, 7])           # [0, 0, 0]
		```
	"""

	node = serialism.sequence.to_node(value)
	low = minimum(node)
	span = maximum(node) - low
	shifted = serialism.arithmetic.subtract(node, low)

	if not span > 0:
		logger.debug(f"normalize: degenerate range {span!r}, returning zeros")
		return serialism.arithmetic.multiply(shifted, 0)

	return serialism.arithmetic.divide(shifted, span)


def signed_normalize (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Sequence:

	"""Rescale a sequence into ``[-1, 1]``."""

	return serialism.arithmetic.subtract(serialism.arithmetic.multiply(normalize(value), 2), 1)


def _same (a: typing.Any, b: typing.Any) -> bool:

	"""Equality that also treats two NaN leaves as the same value."""

	if serialism.sequence.is_nan(a) and serialism.sequence.is_nan(b):
		return True

	if serialism.sequence.is_number(a) and serialism.sequence.is_number(b):
		return a == b

	return type(a) is type(b) and a == b


def unique (value: serialism.sequence.Sequence = (0,)) -> serialism.sequence.Node:

	"""Remove duplicate values, keeping the first occurrence of each.

	The input is flattened by one level first, so a list of chords becomes a
	list of their distinct notes.

	Example:
		```python
		unique([0, [3, 7], 0, [7, 10]])   # [0, 3, 7, 10]
		```
	"""

	result: serialism.sequence.Node = []

	for item in flatten(value, 1):
		if not any(_same(item, seen) for seen in result):
			result.append(serialism.sequence.copy(item))

	return result
