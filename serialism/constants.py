"""Numeric constants and parameter defaults.

The π-derived constants are computed once at import and never reassigned.
They are used by the range folding and cosine interpolation code:

- `PI`: half a turn
- `HALF_PI`: the folding period used by `serialism.ranges.fold()`
- `TWO_PI`: a full turn

The ``DEFAULT_*`` values are the documented fallbacks of the range and
interpolation functions when an argument is omitted.
"""

import math


PI = math.pi
HALF_PI = math.pi / 2.0
TWO_PI = math.pi * 2.0

NAN = float("nan")
INF = float("inf")

# Range functions take (lo, hi) in either order; 12 and 0 give one octave.
DEFAULT_LO = 12
DEFAULT_HI = 0

DEFAULT_INTERPOLATION = "linear"

# Conventional stand-in for a missing or empty sequence argument.
EMPTY_FALLBACK = (0,)
