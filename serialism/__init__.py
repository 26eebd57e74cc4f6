"""
Serialism - deterministic transformations of number sequences for
algorithmic composition.

A pattern in Serialism is just a Python list: numbers, symbols such as pitch
names, or nested lists of either, ragged or not.  Every function takes such a
sequence and returns a new one, never touching its input, so transformations
chain freely:

    ```python
    import serialism

    notes = serialism.spread(4, 0, 12)                 # [0, 3, 6, 9]
    notes = serialism.palindrome(notes, no_double=True)
    notes = serialism.add(notes, [60, 72])             # broadcast offsets
    rhythm = serialism.euclid(16, 7)
    melody = serialism.spray(notes, rhythm)
    ```

What's inside:

- **Broadcasting arithmetic.** ``add``, ``subtract``, ``multiply``,
  ``divide``, ``mod``, ``power`` and ``sqrt`` work on scalars and nested
  sequences alike, cycling the shorter operand.  Bad input produces NaN at
  the offending leaf, never an exception.
- **Range mapping.** ``wrap``, ``constrain``, ``fold`` and ``lerp`` keep
  values inside a range cyclically, by clamping, by reflection, or blend
  between two values with a choice of interpolation curves.
- **Reduction.** ``flatten``, ``sum_``, ``minimum``, ``maximum``, ``unique``,
  ``normalize`` and ``signed_normalize`` summarise and rescale patterns.
- **Transformers.** ``rotate``, ``reverse``, ``palindrome``, ``invert``,
  ``lace``, ``merge``, ``step``, ``lookup``, ``spray``, ``repeat``,
  ``duplicate``, ``clone``, ``padding``, ``every``, ``slice_``, ``split`` and
  ``stretch`` reshape patterns.
- **Generators.** The ``spread`` family and ``euclid``/``bresenham`` rhythms.

Package-level exports: the functions above plus ``combine``, ``Config`` and
``load_config``.
"""

import serialism.arithmetic
import serialism.config
import serialism.generators
import serialism.interpolation
import serialism.ranges
import serialism.reduction
import serialism.sequence
import serialism.transform


# Arithmetic engine
combine = serialism.arithmetic.combine
add = serialism.arithmetic.add
subtract = serialism.arithmetic.subtract
multiply = serialism.arithmetic.multiply
divide = serialism.arithmetic.divide
mod = serialism.arithmetic.mod
power = serialism.arithmetic.power
sqrt = serialism.arithmetic.sqrt

# Range mapping
wrap = serialism.ranges.wrap
constrain = serialism.ranges.constrain
clamp = serialism.ranges.clamp
fold = serialism.ranges.fold
lerp = serialism.ranges.lerp

# Reduction and normalization
flatten = serialism.reduction.flatten
sum_ = serialism.reduction.sum_
minimum = serialism.reduction.minimum
maximum = serialism.reduction.maximum
normalize = serialism.reduction.normalize
signed_normalize = serialism.reduction.signed_normalize
unique = serialism.reduction.unique

# Transformers
rotate = serialism.transform.rotate
reverse = serialism.transform.reverse
palindrome = serialism.transform.palindrome
invert = serialism.transform.invert
lace = serialism.transform.lace
merge = serialism.transform.merge
step = serialism.transform.step
lookup = serialism.transform.lookup
spray = serialism.transform.spray
repeat = serialism.transform.repeat
duplicate = serialism.transform.duplicate
clone = serialism.transform.clone
padding = serialism.transform.padding
every = serialism.transform.every
slice_ = serialism.transform.slice_
split = serialism.transform.split
stretch = serialism.transform.stretch

# Generators
spread = serialism.generators.spread
spread_float = serialism.generators.spread_float
euclid = serialism.generators.euclid
bresenham = serialism.generators.bresenham

# Configuration
Config = serialism.config.Config
load_config = serialism.config.load_config
register_interpolation = serialism.interpolation.register_interpolation
