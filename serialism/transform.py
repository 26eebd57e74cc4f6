"""Transformers: operations that reshape a sequence.

A transformer always takes the sequence to transform as its first argument,
never changes that sequence in place, and returns a freshly built list.  A
bare Scalar is treated as a one-element sequence.

Many of these are the elemental pattern manipulations that keep working on
musical material - rotate, reverse, mirror, interleave, repeat, stretch -
and they work just as well on pitches, velocities, durations or symbols:

    rotate([0, 3, 7, 10], 1)                 # [10, 0, 3, 7]
    palindrome([0, 3, 7], no_double=True)    # [0, 3, 7, 3]
    spray([60, 63, 67], [1, 0, 1, 1, 0])     # [60, 0, 63, 67, 0]
    stretch([0, 12], 5)                      # [0.0, 3.0, 6.0, 9.0, 12.0]
"""

import logging
import math
import typing

import serialism.arithmetic
import serialism.constants
import serialism.interpolation
import serialism.ranges
import serialism.reduction
import serialism.sequence


logger = logging.getLogger(__name__)

Sequence = serialism.sequence.Sequence
Node = serialism.sequence.Node


def _as_int (value: typing.Any, default: int = 0) -> int:

	"""Truncate a numeric argument towards zero, or use *default* for NaN and symbols."""

	if not serialism.sequence.is_number(value) or not math.isfinite(value):
		return default

	return int(value)


# ─── Order ────────────────────────────────────────────────────────────────────


def rotate (value: Sequence = (0,), steps: float = 0) -> Node:

	"""Rotate the items of a sequence.

	Positive steps move items to the right, negative steps to the left.
	Rotating by the length of the sequence gives the sequence back.

	Example:
		```python
		rotate([0, 1, 2, 3], 1)    # [3, 0, 1, 2]
		rotate([0, 1, 2, 3], -1)   # [1, 2, 3, 0]
		```
	"""

	node = serialism.sequence.to_node(value)
	count = len(node)
	shift = _as_int(steps)

	return [node[((i - shift) % count + count) % count] for i in range(count)]


def reverse (value: Sequence = (0,)) -> Node:

	"""Reverse the order of items in a sequence."""

	return serialism.sequence.to_node(value)[::-1]


def palindrome (value: typing.Optional[Sequence] = None, no_double: bool = False) -> Node:

	"""Append the reverse of a sequence to itself.

	Parameters:
		value: Sequence to mirror
		no_double: Drop the first and last item of the reversed half, so the
			turning points are not repeated

	Example:
		```python
		palindrome([0, 3, 7])                    # [0, 3, 7, 7, 3, 0]
		palindrome([0, 3, 7], no_double=True)    # [0, 3, 7, 3]
		```
	"""

	node = serialism.sequence.to_node(value)
	mirrored = serialism.sequence.copy(node)[::-1]

	if no_double:
		mirrored = mirrored[1:-1]

	return node + mirrored


palin = palindrome
mirror = palindrome


def invert (value: Sequence = (0,), lo: typing.Optional[float] = None, hi: typing.Optional[float] = None) -> Sequence:

	"""Flip values upside down, mapping the lowest to the highest and back.

	Without *lo* and *hi* the sequence's own minimum and maximum are used.
	With only *lo*, values are flipped around that centre.  With both, values
	are flipped within that range.  Nested sequences are inverted recursively.

	Example:
		```python
		invert([0, 2, 4, 7])        # [7, 5, 3, 0]
		invert([0, 2, 4, 7], 5)     # [10, 8, 6, 3]
		```
	"""

	node = serialism.sequence.to_node(value)

	if lo is None:
		lo = serialism.reduction.minimum(node)
		hi = serialism.reduction.maximum(node)

	elif hi is None:
		hi = lo

	return serialism.arithmetic.subtract(lo + hi, node)


# ─── Combining several sequences ──────────────────────────────────────────────


def join (*values: Sequence) -> Node:

	"""Concatenate sequences into one list."""

	result: Node = []

	for value in values:
		result.extend(serialism.sequence.to_node(value))

	return result


def lace (*values: Sequence) -> Node:

	"""Interleave two or more sequences, one item from each per step.

	The result runs for the length of the longest input.  An input that has
	run out contributes nothing to the remaining steps - it is skipped, not
	padded.

	Example:
		```python
		lace([0, 0, 0], [1, 2], [5])   # [0, 1, 5, 0, 2, 0]
		```
	"""

	if not values:
		return list(serialism.constants.EMPTY_FALLBACK)

	nodes = [serialism.sequence.to_node(value) for value in values]
	longest = max(len(node) for node in nodes)
	result: Node = []

	for i in range(longest):
		for node in nodes:
			if i < len(node):
				result.append(node[i])

	return result


zip_ = lace
interleave = lace


def merge (*values: Sequence) -> Node:

	"""Group the items at each index of several sequences into one list per step.

	Nested items are flattened into the group, so the result is always two
	levels deep.  The result has the length of the longest input.

	Example:
		```python
		merge([0, 3, 7], [12, [15, 19]])   # [[0, 12], [3, 15, 19], [7]]
		```
	"""

	if not values:
		return list(serialism.constants.EMPTY_FALLBACK)

	nodes = [serialism.sequence.to_node(value) for value in values]
	longest = max(len(node) for node in nodes)
	result: Node = []

	for i in range(longest):

		group: Node = []

		for node in nodes:
			if i >= len(node):
				continue
			if serialism.sequence.is_node(node[i]):
				group.extend(node[i])
			else:
				group.append(node[i])

		result.append(group)

	return result


def array_combinations (*values: Sequence) -> Node:

	"""Step through several sequences together until every phase lines up again.

	Returns one group per step, holding the current item of each input.  The
	number of steps is the least common multiple of the input lengths, so each
	input completes a whole number of cycles.  Empty inputs are ignored.

	Example:
		```python
		array_combinations([0, 1], [4, 5, 6])
		# [[0, 4], [1, 5], [0, 6], [1, 4], [0, 5], [1, 6]]
		```
	"""

	nodes = [node for node in (serialism.sequence.to_node(value) for value in values) if node]

	if not nodes:
		return []

	steps = 1

	for node in nodes:
		steps = steps * len(node) // math.gcd(steps, len(node))

	return [
		[serialism.sequence.copy(node[i % len(node)]) for node in nodes]
		for i in range(steps)
	]


def step (*values: Sequence) -> Node:

	"""Alternate through several sequences until every combination has played.

	Like :func:`lace`, but continues for the least common multiple of the
	input lengths, so every pairing of consecutive positions occurs.

	Example:
		```python
		step([0, 1], [4, 5, 6])   # [0, 4, 1, 5, 0, 6, 1, 4, 0, 5, 1, 6]
		```
	"""

	if not values:
		return list(serialism.constants.EMPTY_FALLBACK)

	return serialism.reduction.flatten(array_combinations(*values), 1)


# ─── Indexing ─────────────────────────────────────────────────────────────────


def lookup (indices: Sequence = (0,), values: Sequence = (0,)) -> Node:

	"""Build a sequence by looking up each index in *values*.

	Indices wrap around the length of *values*, so any integer is valid, and
	nested index lists produce nested results.  Non-numeric indices are
	skipped.

	Example:
		```python
		lookup([0, 2, [1, 5], -1], ["c", "e", "g"])   # ['c', 'g', ['e', 'g'], 'g']
		```
	"""

	table = serialism.sequence.to_values(values)

	def _lookup (node: Node) -> Node:

		result: Node = []

		for index in node:
			if serialism.sequence.is_node(index):
				result.append(_lookup(index))
			elif serialism.sequence.is_number(index) and math.isfinite(index):
				result.append(serialism.sequence.copy(table[math.floor(index) % len(table)]))

		return result

	return _lookup(serialism.sequence.to_node(indices))


def spray (values: Sequence = (0,), beats: Sequence = (0,)) -> Node:

	"""Place values on the active steps of a rhythm.

	Each beat greater than 0 is replaced by the next item of *values*,
	cycling when the values run out.  Other beats are kept as they are.

	Example:
		```python
		spray([12, 19, 24], [1, 0, 0, 1, 1, 0, 1])   # [12, 0, 0, 19, 24, 0, 12]
		```
	"""

	source = serialism.sequence.to_values(values)
	result = serialism.sequence.to_node(beats)
	placed = 0

	for i, beat in enumerate(result):
		if serialism.sequence.is_number(beat) and beat > 0:
			result[i] = serialism.sequence.copy(source[placed % len(source)])
			placed += 1

	return result


# ─── Repetition ───────────────────────────────────────────────────────────────


def repeat (value: Sequence = (0,), counts: Sequence = 1) -> Node:

	"""Repeat each item of a sequence a number of times.

	*counts* may be a single number or a sequence that cycles across the
	items.  Fractional counts round up; negative or NaN counts repeat an
	item zero times.

	Example:
		```python
		repeat([0, 3, 7], [1, 2])   # [0, 3, 3, 7]
		repeat([1, 2], [1.5, 1])    # [1, 1, 2]
		```
	"""

	node = serialism.sequence.to_node(value)
	times = serialism.sequence.to_node(counts) or [1]
	result: Node = []

	for i, item in enumerate(node):
		amount = times[i % len(times)]
		if serialism.sequence.is_number(amount) and math.isfinite(amount) and amount > 0:
			count = math.ceil(amount)
		else:
			count = 0
		result.extend(serialism.sequence.copy(item) for _ in range(count))

	return result


def duplicate (value: Sequence = (0,), count: float = 2) -> Node:

	"""Concatenate a sequence with itself, giving *count* copies in total (at least one)."""

	node = serialism.sequence.to_node(value)
	result: Node = []

	for _ in range(max(1, _as_int(count, 1))):
		result.extend(serialism.sequence.copy(node))

	return result


def _append_text (value: Sequence, text: str) -> Sequence:

	"""Append *text* to every leaf of *value*."""

	if serialism.sequence.is_node(value):
		return [_append_text(item, text) for item in value]

	return f"{value}{text}"


def clone (value: Sequence = (0,), *offsets: Sequence) -> Node:

	"""Follow a sequence with one offset copy of it per offset.

	Offsets accumulate: each copy starts from the values of the copy before
	it.  A numeric offset is added to every value; a string offset is
	appended to every value, which suits pitch names and octave numbers.

	Example:
		```python
		clone([0, 7], 12, 12)        # [0, 7, 12, 19, 24, 31]
		clone([0, [3, 7]], 5)        # [0, [3, 7], 5, [8, 12]]
		clone(["c", "e"], "#")       # ['c', 'e', 'c#', 'e#']
		```
	"""

	current = serialism.sequence.to_node(value)
	result = serialism.sequence.copy(current)

	for offset in offsets:

		if isinstance(offset, str):
			current = _append_text(current, offset)
		else:
			current = serialism.arithmetic.add(current, offset)

		result.extend(serialism.sequence.copy(current))

	return result


# ─── Length ───────────────────────────────────────────────────────────────────


def padding (value: Sequence = (), length: int = 0, pad: Sequence = 0, shift: float = 0) -> Node:

	"""Pad a sequence with *pad* up to *length* items, then rotate it by *shift*.

	A sequence already longer than *length* is only rotated.

	Example:
		```python
		padding(["c", "f", "g"], 7, "-", 2)   # ['-', '-', 'c', 'f', 'g', '-', '-']
		```
	"""

	node = serialism.sequence.to_node(value)
	missing = _as_int(length) - len(node)

	node.extend(serialism.sequence.copy(pad) for _ in range(missing))

	return rotate(node, shift)


def every (value: Sequence = (0,), bars: float = 1, div: int = 16, pad: Sequence = 0, shift: float = 0) -> Node:

	"""Pad a phrase so it plays once every *bars* bars of *div* steps.

	Parameters:
		value: The phrase or rhythm
		bars: Number of bars the result should span (default 1)
		div: Steps per bar (default 16)
		pad: Value for the added steps (default 0, a rest)
		shift: Rotation in bars (fractions allowed)

	Example:
		```python
		every([1, 0, 1, 1, 1], 2, 8)
		# [1, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]
		```
	"""

	length = math.floor(bars * div)
	offset = math.floor(shift * div)

	return padding(value, length, pad, offset)


def filter_values (value: Sequence = (), remove: Sequence = ()) -> Node:

	"""Remove every item equal to one of the values in *remove*."""

	unwanted = serialism.sequence.to_node(remove)

	return [item for item in serialism.sequence.to_node(value) if item not in unwanted]


_KINDS: typing.Dict[str, typing.Callable[[typing.Any], bool]] = {
	"number": serialism.sequence.is_number,
	"string": lambda item: isinstance(item, str),
	"list": serialism.sequence.is_node,
}


def filter_type (value: Sequence = (0,), types: typing.Union[str, typing.Sequence[str]] = "number") -> Node:

	"""Keep only the items of the given kinds: ``"number"``, ``"string"`` or ``"list"``.

	Items are grouped in the order the kinds are listed.

	Example:
		```python
		filter_type([0, "c", [1, 2], 3.5], "number")               # [0, 3.5]
		filter_type([0, "c", [1, 2], 3.5], ["string", "number"])   # ['c', 0, 3.5]
		```
	"""

	node = serialism.sequence.to_node(value)
	kinds = [types] if isinstance(types, str) else list(types)
	result: Node = []

	for kind in kinds:

		if kind not in _KINDS:
			available = ", ".join(f'"{k}"' for k in _KINDS)
			raise ValueError(f"Unknown item type {kind!r}. Available types: {available}")

		result.extend(item for item in node if _KINDS[kind](item))

	return result


def slice (value: Sequence = (0,), sizes: Sequence = (0,), keep_rest: bool = True) -> Node:

	"""Cut a sequence into consecutive chunks.

	Chunk lengths cycle through the positive values of *sizes* for as long as
	a full chunk still fits.  What is left over becomes a final, shorter chunk
	when *keep_rest* is True.

	Example:
		```python
		slice([0, 1, 2, 3, 4, 5, 6, 7], [3, 2])          # [[0, 1, 2], [3, 4], [5, 6, 7]]
		slice([0, 1, 2, 3, 4, 5, 6], 3)                  # [[0, 1, 2], [3, 4, 5], [6]]
		slice([0, 1, 2, 3, 4, 5, 6], 3, keep_rest=False) # [[0, 1, 2], [3, 4, 5]]
		```
	"""

	node = serialism.sequence.to_node(value)
	lengths = [size for size in (_as_int(s) for s in serialism.sequence.to_node(sizes)) if size > 0]
	result: Node = []
	start = 0

	if lengths:

		i = 0

		while start + lengths[i % len(lengths)] <= len(node):
			end = start + lengths[i % len(lengths)]
			result.append(node[start:end])
			start = end
			i += 1

	if keep_rest and start < len(node):
		result.append(node[start:])

	return result


slice_ = slice


def split (value: Sequence = (0,), sizes: Sequence = (1,)) -> Node:

	"""Split a sequence into chunks until none of it is left.

	Chunk sizes are taken from *sizes* in turn, starting again from the first
	when they run out.  Sizes of zero or less are skipped.

	Example:
		```python
		split([1, 2, 3, 4, 5, 6, 7], [2, 3])   # [[1, 2], [3, 4, 5], [6, 7]]
		```
	"""

	rest = serialism.sequence.to_node(value)
	lengths = [_as_int(s) for s in serialism.sequence.to_node(sizes)]

	if not any(size > 0 for size in lengths):
		logger.debug(f"split: no positive sizes in {lengths!r}, returning the input whole")
		return [rest]

	result: Node = []
	i = 0

	while True:

		size = lengths[i % len(lengths)]
		i += 1

		if size <= 0:
			continue

		result.append(rest[:size])
		rest = rest[size:]

		if not rest:
			return result


def stretch (
	value: Sequence = (0,),
	length: float = 2,
	mode: typing.Union[str, serialism.interpolation.InterpolationFn] = serialism.constants.DEFAULT_INTERPOLATION
) -> Node:

	"""Resample a sequence to exactly *length* items, interpolating in between.

	The first and last items are kept in place and the others are spread
	evenly across the new length.  The output has at least two items, so a
	shorter request returns the outermost values.

	Parameters:
		value: Sequence to stretch or shrink
		length: Number of items in the result (minimum 2)
		mode: Interpolation curve between neighbours - ``"none"``,
			``"nearest"``, ``"linear"``, ``"cosine"`` or ``"cubic"`` (see
			:mod:`serialism.interpolation`)

	Example:
		```python
		stretch([0, 10], 5)                      # [0.0, 2.5, 5.0, 7.5, 10.0]
		stretch([0, 12], 5, mode="none")         # [0.0, 0.0, 0.0, 0.0, 12.0]
		```
	"""

	node = serialism.sequence.to_values(value)
	count = max(2, _as_int(length, 2))
	curve = serialism.interpolation.get_interpolation(mode)
	last = len(node) - 1
	result: Node = []

	for i in range(count):

		position = i / (count - 1) * last
		lower = int(position)
		upper = min(lower + 1, last) % len(node)

		result.append(serialism.ranges.lerp(node[lower], node[upper], position - lower, curve))

	return result
