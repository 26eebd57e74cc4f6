"""Interpolation curves for blending between two values.

An interpolation curve maps a fraction *f* in [0, 1] - how far we are from
the first value towards the second - to the weight actually given to the
second value.  :func:`serialism.ranges.lerp` and
:func:`serialism.transform.stretch` take the curve through their ``mode``
parameter:

    serialism.ranges.lerp(0, 10, 0.25, mode="cosine")
    serialism.transform.stretch([0, 12, 7], 16, mode="cubic")

    # Custom callable - receives and returns a float in [0, 1]:
    serialism.transform.stretch([0, 12], 8, mode=lambda f: f ** 2)

Available modes:

    "none"     Hold the first value until the next one arrives - stepped output.
    "nearest"  Snap to whichever value is closer.
    "linear"   Straight line between the two values (default).
    "cosine"   Half a cosine period - eases in and out of each value.
    "cubic"    Hermite smoothstep - a steeper S-curve than cosine.

All curves satisfy f(1) = 1 except "none", and f(0) = 0 for every curve.
"""

from __future__ import annotations

import math
import typing

import serialism.constants


# ─── Interpolation curves ─────────────────────────────────────────────────────


def none (f: float) -> float:
    """Always weight the first value: no interpolation at all."""
    return 0.0


def nearest (f: float) -> float:
    """Step to the second value once the midpoint is reached."""
    return 0.0 if f < 0.5 else 1.0


def linear (f: float) -> float:
    """No shaping - constant rate between the two values."""
    return f


def cosine (f: float) -> float:
    """Half-period cosine: slow at both ends, fastest in the middle."""
    return (1.0 - math.cos(f * serialism.constants.PI)) / 2.0


def cubic (f: float) -> float:
    """Hermite smoothstep: zero slope at both values."""
    return f * f * (3.0 - 2.0 * f)


# ─── Registry and lookup ──────────────────────────────────────────────────────

InterpolationFn = typing.Callable[[float], float]

INTERPOLATION_FUNCTIONS: typing.Dict[str, InterpolationFn] = {
    "none":    none,
    "nearest": nearest,
    "linear":  linear,
    "cosine":  cosine,
    "cubic":   cubic,
}


def get_interpolation (mode: typing.Union[str, InterpolationFn]) -> InterpolationFn:
    """Return the interpolation curve for *mode*.

    *mode* may be a name string (see :data:`INTERPOLATION_FUNCTIONS`) or any
    callable that maps a float in [0, 1] to a weight.

    Raises :class:`ValueError` for unknown string names.
    """
    if callable(mode):
        return mode
    if mode not in INTERPOLATION_FUNCTIONS:
        available = ", ".join(f'"{k}"' for k in sorted(INTERPOLATION_FUNCTIONS))
        raise ValueError(
            f"Unknown interpolation mode {mode!r}. Available modes: {available}"
        )
    return INTERPOLATION_FUNCTIONS[mode]


def register_interpolation (name: str, fn: InterpolationFn) -> None:
    """Make a custom curve available by name to every ``mode`` parameter.

    Example::

        serialism.interpolation.register_interpolation("square", lambda f: f * f)
        serialism.transform.stretch([0, 10], 5, mode="square")
    """
    if not callable(fn):
        raise ValueError(f"Interpolation {name!r} must be callable")
    INTERPOLATION_FUNCTIONS[name] = fn
