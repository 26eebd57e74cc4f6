"""Broadcasting arithmetic over nested sequences.

:func:`combine` pairs two Sequences element by element, one level at a time.
When both sides are Nodes the shorter one cycles against the longer one:

    combine([1, 2, 3, 4], [1, 2, 3], operator.add)   # [2, 4, 6, 5]
    combine([0, 1, [2, 3]], [[5, 7], 10], mean)      # [[2.5, 3.5], 5.5, [3.5, 5.0]]

A Scalar on either side is paired with every element of the other side, and
the nesting of the result mirrors whichever operand is a Node at each level.

Arithmetic never raises for bad numeric input.  A symbolic leaf produces NaN
for that leaf only, and division by zero, overflow and domain errors give the
IEEE-754 result (``inf``, ``-inf`` or ``nan``) instead of an exception.
"""

import math
import typing

import serialism.constants
import serialism.sequence


Operation = typing.Callable[[float, float], float]


def combine (a: serialism.sequence.Sequence, b: serialism.sequence.Sequence, operation: Operation) -> serialism.sequence.Sequence:

	"""Apply *operation* to every pairing of *a* and *b*, broadcasting the shorter side.

	The operation only ever sees two scalars.  It is wrapped so that symbolic
	leaves and floating-point failures turn into NaN or infinity rather than
	exceptions.

	Parameters:
		a: Left-hand Scalar or Node
		b: Right-hand Scalar or Node
		operation: Function of two numbers returning a number

	Example:
		```python
		# take the larger value at each position
		combine([10, 2, 1, 5], [4, 9, 7, 3], max)   # [10, 9, 7, 5]
		```
	"""

	return _combine(a, b, _guard(operation))


def _combine (a: typing.Any, b: typing.Any, operation: Operation) -> typing.Any:

	"""Recursive worker behind :func:`combine`."""

	a_is_node = serialism.sequence.is_node(a)

	if serialism.sequence.is_node(b):

		left = a if a_is_node else [a]
		count = max(len(left), len(b))

		return [
			_combine(_cycle(left, i), _cycle(b, i), operation)
			for i in range(count)
		]

	if not a_is_node:
		return operation(a, b)

	return [_combine(item, b, operation) for item in a]


def _cycle (node: typing.Sequence[typing.Any], index: int) -> typing.Any:

	"""Return ``node[index % len(node)]``, or NaN when the node is empty."""

	if not node:
		return serialism.constants.NAN

	return node[index % len(node)]


def _guard (operation: Operation) -> Operation:

	"""Wrap a scalar operation so it follows IEEE-754 instead of raising."""

	def guarded (x: typing.Any, y: typing.Any) -> float:

		if not serialism.sequence.is_number(x) or not serialism.sequence.is_number(y):
			return serialism.constants.NAN

		try:
			result = operation(x, y)

		except ZeroDivisionError:
			return _divide(x, y)

		except OverflowError:
			return serialism.constants.INF

		except (ValueError, TypeError):
			return serialism.constants.NAN

		# Negative bases with fractional exponents give a complex number.
		if isinstance(result, complex):
			return serialism.constants.NAN

		return result

	return guarded


def _divide (x: float, y: float) -> float:

	"""Divide with IEEE-754 semantics for a zero divisor."""

	if y != 0:
		return x / y

	if x == 0 or math.isnan(x):
		return serialism.constants.NAN

	sign = math.copysign(1.0, x) * math.copysign(1.0, y)
	return math.copysign(serialism.constants.INF, sign)


def _modulo (x: float, m: float) -> float:

	"""Euclidean modulo: the result takes the sign of the divisor."""

	if m == 0:
		return serialism.constants.NAN

	return ((x % m) + m) % m


def _power (x: float, y: float) -> float:

	"""Raise *x* to *y*, returning infinity where the result has no finite value."""

	if x == 0 and y < 0:
		return serialism.constants.INF

	try:
		return math.pow(x, y)

	except OverflowError:
		# Only a negative base raised to an odd integer stays negative.
		if x < 0 and float(y).is_integer() and int(y) % 2 == 1:
			return -serialism.constants.INF
		return serialism.constants.INF


def add (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 0) -> serialism.sequence.Sequence:

	"""Add two values or sequences."""

	return combine(a, b, lambda x, y: x + y)


def subtract (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 0) -> serialism.sequence.Sequence:

	"""Subtract *b* from *a*."""

	return combine(a, b, lambda x, y: x - y)


def multiply (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 1) -> serialism.sequence.Sequence:

	"""Multiply two values or sequences."""

	return combine(a, b, lambda x, y: x * y)


def divide (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 1) -> serialism.sequence.Sequence:

	"""Divide *a* by *b*.  A zero divisor gives ``inf``, ``-inf`` or ``nan``."""

	return combine(a, b, _divide)


def mod (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 12) -> serialism.sequence.Sequence:

	"""Euclidean modulo of *a* by *b*.

	Unlike a truncating remainder, negative inputs wrap around to the top of
	the range, which is what pitch-class arithmetic needs:

		mod([-1, 13, 25], 12)   # [11, 1, 1]
	"""

	return combine(a, b, _modulo)


def power (a: serialism.sequence.Sequence = 0, b: serialism.sequence.Sequence = 1) -> serialism.sequence.Sequence:

	"""Raise *a* to the power of *b*."""

	return combine(a, b, _power)


pow_ = power


def sqrt (a: serialism.sequence.Sequence = 0) -> serialism.sequence.Sequence:

	"""Square root of every value.  Negative values give NaN."""

	return combine(a, 0, lambda x, _: math.sqrt(x))
