"""Random sources for Dirichlet sampling.

Sampling only needs one capability from its random source: drawing a
Gamma(shape, scale) variate. ``numpy.random.Generator`` provides this directly
and ``random.Random`` does through a small adapter.
"""

import random
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class GammaSource(Protocol):
    """Anything that can draw a Gamma(shape, scale) variate."""

    def gamma(self, shape: float, scale: float = 1.0) -> float: ...


class StdlibGammaSource:
    """Adapt a ``random.Random`` instance to the ``GammaSource`` protocol."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def gamma(self, shape: float, scale: float = 1.0) -> float:
        return self.rng.gammavariate(shape, scale)

    def __repr__(self) -> str:
        return f"StdlibGammaSource({self.rng!r})"


def as_gamma_source(rng: Any = None) -> GammaSource:
    """Turn a seed, generator or ``None`` into a ``GammaSource``.

    ``None`` gives a freshly seeded numpy generator; integers, bit generators and
    ``SeedSequence`` objects seed one. ``random.Random`` instances are
    wrapped. Objects already exposing ``gamma`` are returned unchanged.
    """
    if rng is None or isinstance(
        rng, (int, np.integer, np.random.SeedSequence, np.random.BitGenerator)
    ):
        if isinstance(rng, bool):
            raise TypeError(f"Cannot use {rng!r} as a random source")
        return np.random.default_rng(rng)
    if isinstance(rng, random.Random):
        return StdlibGammaSource(rng)
    if callable(getattr(rng, "gamma", None)):
        return rng
    raise TypeError(
        f"Cannot use {type(rng).__name__} as a random source: "
        "expected a seed, random.Random or an object with a gamma() method"
    )
