"""Map values into a numeric range.

Three ways to keep values inside ``[lo, hi]``:

- :func:`wrap` - cyclic, like a modulo with an adjustable floor
- :func:`constrain` - clamp to the nearest bound
- :func:`fold` - reflect off the bounds, so values bounce back inwards

plus :func:`lerp` for blending two values or sequences.

The bounds may be given in either order.  Every function works elementwise
on nested Nodes and returns a Scalar when given a Scalar.  Symbolic leaves
become NaN.
"""

import math
import typing

import serialism.arithmetic
import serialism.constants
import serialism.interpolation
import serialism.sequence


Bound = typing.Union[int, float]


def _elementwise (value: typing.Any, fn: typing.Callable[[float], float]) -> typing.Any:

	"""Apply *fn* to every numeric leaf of *value*, NaN for the rest."""

	if serialism.sequence.is_node(value):
		return [_elementwise(item, fn) for item in value]

	if not serialism.sequence.is_number(value):
		return serialism.constants.NAN

	return fn(value)


def _ordered (lo: Bound, hi: Bound) -> typing.Tuple[Bound, Bound]:

	"""Return the bounds with the smaller one first."""

	if lo > hi:
		return hi, lo

	return lo, hi


def wrap (value: serialism.sequence.Sequence = 0, lo: Bound = serialism.constants.DEFAULT_LO, hi: Bound = serialism.constants.DEFAULT_HI) -> serialism.sequence.Sequence:

	"""Wrap values into the half-open range ``[lo, hi)``.

	Similar to a modulo, except the low end of the range can move too.
	Negative inputs wrap from the top of the range.

	Parameters:
		value: Scalar or Node to wrap
		lo: One end of the range (default 12)
		hi: The other end of the range (default 0)

	Example:
		```python
		wrap([-1, 0, 11, 12, 13])        # [11, 0, 11, 0, 1]
		wrap([0, 5, 10, 15], 3, 8)       # [5, 5, 5, 5]
		```
	"""

	lo, hi = _ordered(lo, hi)
	span = hi - lo

	def _wrap (x: float) -> float:
		if span == 0:
			return serialism.constants.NAN
		return (((x - lo) % span) + span) % span + lo

	return _elementwise(value, _wrap)


def constrain (value: serialism.sequence.Sequence = 0, lo: Bound = serialism.constants.DEFAULT_LO, hi: Bound = serialism.constants.DEFAULT_HI) -> serialism.sequence.Sequence:

	"""Clamp values to the closed range ``[lo, hi]``.

	Example:
		```python
		constrain([-5, 3, 20], 0, 12)   # [0, 3, 12]
		```
	"""

	lo, hi = _ordered(lo, hi)

	def _constrain (x: float) -> float:
		if math.isnan(x):
			return serialism.constants.NAN
		return min(hi, max(lo, x))

	return _elementwise(value, _constrain)


bound = constrain
clip = constrain
clamp = constrain


def scale (value: serialism.sequence.Sequence, in_lo: Bound, in_hi: Bound, out_lo: Bound, out_hi: Bound) -> serialism.sequence.Sequence:

	"""Linearly map values from ``[in_lo, in_hi]`` to ``[out_lo, out_hi]``.

	No clamping is applied.  A zero-width input range gives NaN.
	"""

	in_span = in_hi - in_lo
	out_span = out_hi - out_lo

	def _scale (x: float) -> float:
		if in_span == 0:
			return serialism.constants.NAN
		return (x - in_lo) / in_span * out_span + out_lo

	return _elementwise(value, _scale)


def fold (value: serialism.sequence.Sequence = 0, lo: Bound = serialism.constants.DEFAULT_LO, hi: Bound = serialism.constants.DEFAULT_HI) -> serialism.sequence.Sequence:

	"""Fold values back into ``[lo, hi]`` when they exceed it.

	Values past a bound are reflected inwards, giving a continuous triangle
	wave rather than the jump of :func:`wrap`.  The reflection is computed as
	``asin(sin(x * pi/2)) / (pi/2)`` on the value mapped to ``[-1, 1]``.
	Infinite values fold to NaN.

	Example:
		```python
		fold([10, 12, 14, 16], 0, 12)   # [10, 12, 10, 8] (approximately)
		```
	"""

	lo, hi = _ordered(lo, hi)

	def _fold (x: float) -> float:
		if lo == hi or not math.isfinite(x):
			return serialism.constants.NAN
		unit = (x - lo) / (hi - lo) * 2.0 - 1.0
		unit = math.asin(math.sin(unit * serialism.constants.HALF_PI)) / serialism.constants.HALF_PI
		return (unit + 1.0) / 2.0 * (hi - lo) + lo

	return _elementwise(value, _fold)


bounce = fold


def lerp (
	a: serialism.sequence.Sequence = 0,
	b: serialism.sequence.Sequence = 0,
	f: float = 0.5,
	mode: typing.Union[str, serialism.interpolation.InterpolationFn] = serialism.constants.DEFAULT_INTERPOLATION
) -> serialism.sequence.Sequence:

	"""Interpolate between two values or sequences.

	Computes ``a * (1 - g) + b * g`` where ``g`` is *f* shaped by the
	interpolation curve named by *mode*.  Sequences broadcast against each
	other through :func:`serialism.arithmetic.combine`.

	Parameters:
		a: Start value or sequence
		b: End value or sequence
		f: Fraction from a (0.0) to b (1.0), default 0.5; NaN or infinite
			fractions give NaN
		mode: Interpolation curve name or callable (see
			:mod:`serialism.interpolation`)

	Example:
		```python
		lerp([0, 10], [10, 20], 0.25)   # [2.5, 12.5]
		```
	"""

	curve = serialism.interpolation.get_interpolation(mode)

	if serialism.sequence.is_number(f) and math.isfinite(f):
		g = curve(f)
	else:
		g = serialism.constants.NAN

	return serialism.arithmetic.combine(a, b, lambda x, y: x * (1 - g) + y * g)


mix = lerp
