"""Deterministic generators for raw material to feed the transformers.

Evenly spaced ranges (the ``spread`` family) give melodic and dynamic
contours; :func:`euclid` and :func:`bresenham` give binary rhythms that
:func:`serialism.transform.spray` can fill with values.
"""

import logging
import math
import typing

import serialism.transform


logger = logging.getLogger(__name__)


def _bounds (length: int, lo: typing.Optional[float], hi: float) -> typing.Tuple[float, float]:

	"""Default *lo* to *length* and put the bounds in ascending order."""

	if lo is None:
		lo = length

	if lo > hi:
		return hi, lo

	return lo, hi


def spread_float (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0) -> typing.List[float]:

	"""Evenly spaced values from *lo* up to (but excluding) *hi*.

	With only a length, counts from 0 to length - 1.

	Example:
		```python
		spread_float(4)           # [0.0, 1.0, 2.0, 3.0]
		spread_float(4, 0, 1)     # [0.0, 0.25, 0.5, 0.75]
		```
	"""

	return spread_float_exp(length, lo, hi, 1)


def spread_float_exp (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0, exponent: float = 1) -> typing.List[float]:

	"""Like :func:`spread_float`, with spacing curved by *exponent*.

	Exponents above 1 bunch values towards *lo*; below 1 towards *hi*.
	"""

	length = max(1, abs(int(length)))
	lo, hi = _bounds(length, lo, hi)

	return [math.pow(i / length, exponent) * (hi - lo) + lo for i in range(length)]


def spread (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0) -> typing.List[int]:

	"""Integer version of :func:`spread_float`, rounded down.

	Example:
		```python
		spread(5, 0, 12)   # [0, 2, 4, 7, 9]
		```
	"""

	return [math.floor(v) for v in spread_float(length, lo, hi)]


def spread_exp (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0, exponent: float = 1) -> typing.List[int]:

	"""Integer version of :func:`spread_float_exp`, rounded down."""

	return [math.floor(v) for v in spread_float_exp(length, lo, hi, exponent)]


def spread_inclusive_float (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0) -> typing.List[float]:

	"""Evenly spaced values from *lo* up to and including *hi*.

	Example:
		```python
		spread_inclusive_float(5, 0, 1)   # [0.0, 0.25, 0.5, 0.75, 1.0]
		```
	"""

	return spread_inclusive_float_exp(length, lo, hi, 1)


def spread_inclusive_float_exp (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0, exponent: float = 1) -> typing.List[float]:

	"""Like :func:`spread_inclusive_float`, with spacing curved by *exponent*.

	A single value has nowhere to spread to and is just *lo*.
	"""

	length = max(1, abs(int(length)))
	lo, hi = _bounds(length, lo, hi)

	if length == 1:
		return [float(lo)]

	return [math.pow(i / (length - 1), exponent) * (hi - lo) + lo for i in range(length)]


def spread_inclusive (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0) -> typing.List[int]:

	"""Integer version of :func:`spread_inclusive_float`, rounded down."""

	return [math.floor(v) for v in spread_inclusive_float(length, lo, hi)]


def spread_inclusive_exp (length: int = 1, lo: typing.Optional[float] = None, hi: float = 0, exponent: float = 1) -> typing.List[int]:

	"""Integer version of :func:`spread_inclusive_float_exp`, rounded down."""

	return [math.floor(v) for v in spread_inclusive_float_exp(length, lo, hi, exponent)]


def euclid (steps: int = 8, hits: int = 4, rotation: int = 0) -> typing.List[int]:

	"""
	Generate a Euclidean rhythm using Bjorklund's algorithm.

	Distributes *hits* onsets as evenly as possible over *steps*, starting on
	a hit, then rotates the result.  Hits are limited to ``[0, steps]``.

	Example:
		```python
		euclid(8, 3)      # [1, 0, 0, 1, 0, 0, 1, 0]
		euclid(8, 3, 1)   # [0, 1, 0, 0, 1, 0, 0, 1]
		```
	"""

	steps = max(0, int(steps))
	pulses = max(0, min(steps, int(hits)))

	if pulses != hits:
		logger.debug(f"euclid: hits {hits} limited to {pulses} for {steps} steps")

	if pulses == 0:
		return [0] * steps

	if pulses == steps:
		return serialism.transform.rotate([1] * steps, rotation)

	sequence: typing.List[int] = []
	counts: typing.List[int] = []
	remainders = [pulses]
	divisor = steps - pulses
	level = 0

	while True:
		counts.append(divisor // remainders[level])
		remainders.append(divisor % remainders[level])
		divisor = remainders[level]
		level += 1
		if remainders[level] <= 1:
			break

	counts.append(divisor)

	def build (level: int) -> None:
		if level == -1:
			sequence.append(0)
		elif level == -2:
			sequence.append(1)
		else:
			for _ in range(counts[level]):
				build(level - 1)
			if remainders[level] != 0:
				build(level - 2)

	build(level)
	first = sequence.index(1)

	return serialism.transform.rotate(sequence[first:] + sequence[:first], rotation)


def bresenham (steps: int = 8, hits: int = 4) -> typing.List[int]:

	"""
	Generate a rhythm using Bresenham's line algorithm.

	Example:
		```python
		bresenham(8, 3)   # [0, 0, 1, 0, 0, 1, 0, 1]
		```
	"""

	sequence = [0] * max(0, int(steps))
	error = 0

	for i in range(len(sequence)):
		error += hits
		if error >= len(sequence):
			sequence[i] = 1
			error -= len(sequence)

	return sequence
