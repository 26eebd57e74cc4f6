"""The recursive sequence model shared by every operation.

A *Sequence* is either a Scalar - a number or a symbolic token such as a
pitch name - or a Node: an ordered list of Sequences, nested to any depth and
possibly ragged.

    3                      # numeric scalar
    "eb4"                  # symbolic scalar
    [0, [3, 7], "r", []]   # node

Plain Python lists are the Node representation, so callers never need to wrap
their data.  Tuples are accepted wherever a Node is expected and come back as
lists.  Recursive code dispatches on :func:`is_node`, :func:`is_number` and
:func:`is_symbol` rather than probing types itself.
"""

import math
import typing

import serialism.constants


Scalar = typing.Union[int, float, str]
Sequence = typing.Union[Scalar, typing.List[typing.Any], typing.Tuple[typing.Any, ...]]
Node = typing.List[Sequence]


def is_node (value: typing.Any) -> bool:

	"""Return True if *value* is a Node (a list or tuple)."""

	return isinstance(value, (list, tuple))


def is_number (value: typing.Any) -> bool:

	"""Return True if *value* is a numeric scalar (including NaN and infinity)."""

	return isinstance(value, (int, float))


def is_symbol (value: typing.Any) -> bool:

	"""Return True if *value* is a scalar that does not take part in arithmetic."""

	return not is_node(value) and not is_number(value)


def is_nan (value: typing.Any) -> bool:

	"""Return True for a float NaN leaf."""

	return isinstance(value, float) and math.isnan(value)


def to_float (value: typing.Any) -> float:

	"""Return *value* as a float, or NaN for anything that is not a number."""

	if is_number(value):
		return float(value)

	return serialism.constants.NAN


def copy (value: Sequence) -> Sequence:

	"""Return a copy of *value* that shares no list with it.

	Scalars are immutable and returned as they are.  Every nested Node is
	rebuilt, so mutating the copy can never reach the original.
	"""

	if is_node(value):
		return [copy(item) for item in value]

	return value


def to_node (value: typing.Optional[Sequence] = None) -> Node:

	"""Return *value* as a fresh Node.

	A Scalar becomes a singleton list and ``None`` becomes ``[0]``.  A Node is
	copied so that the caller's container is never handed back.

	Example:
		```python
		to_node(5)        # [5]
		to_node((1, 2))   # [1, 2]
		to_node(None)     # [0]
		```
	"""

	if value is None:
		return list(serialism.constants.EMPTY_FALLBACK)

	if is_node(value):
		return [copy(item) for item in value]

	return [value]


def to_values (value: typing.Optional[Sequence]) -> Node:

	"""Like :func:`to_node`, but an empty Node also falls back to ``[0]``.

	Used for sequences that serve as a modulo base, where an empty list has
	no meaningful element to return.
	"""

	node = to_node(value)

	if not node:
		return list(serialism.constants.EMPTY_FALLBACK)

	return node


def from_node (value: Sequence, index: int = 0) -> Sequence:

	"""Return the element at *index* of a Node, or the Scalar itself."""

	if is_node(value):
		return value[index]

	return value


def length (value: typing.Any) -> int:

	"""Return the length of a Node, or 1 for anything else."""

	if is_node(value):
		return len(value)

	return 1


size = length


def depth (value: Sequence) -> int:

	"""Return the nesting depth: 0 for a Scalar, 1 for a flat Node."""

	if not is_node(value):
		return 0

	return 1 + max((depth(item) for item in value), default=0)
