"""The Dirichlet distribution.

A Dirichlet distribution is a family of continuous multivariate probability
distributions parameterized by a vector ``alpha`` of positive reals. It is the
multivariate generalization of the beta distribution: every sample is a vector
of non-negative reals summing to one.

Samples are drawn by taking one Gamma(alpha[i], 1) variate per component and
normalizing by their sum.

Example::

    >>> from dirichlet_sampler import Dirichlet
    >>> d = Dirichlet([1.0, 2.0, 3.0])
    >>> x = d.sample(221)
    >>> len(x)
    3
"""

import logging
import math
import numbers
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
import numpy.typing as npt

from dirichlet_sampler.errors import AlphaTooShort, AlphaTooSmall, SizeTooSmall
from dirichlet_sampler.rng import GammaSource, as_gamma_source

logger = logging.getLogger(__name__)


class Dirichlet:
    """The Dirichlet distribution ``Dirichlet(alpha)``.

    Instances are immutable: ``alpha`` is stored as a read-only copy of the
    vector passed in.

    Raises:
        AlphaTooShort: if ``alpha`` has fewer than 2 elements.
        AlphaTooSmall: if any element of ``alpha`` is not strictly positive
            (this includes NaN).
    """

    __slots__ = ("_alpha",)

    def __init__(self, alpha: Iterable[float]) -> None:
        if isinstance(alpha, (str, bytes)):
            raise TypeError(f"alpha must be a sequence of numbers, got {alpha!r}")
        if isinstance(alpha, np.ndarray) and alpha.ndim != 1:
            raise ValueError(f"alpha must be one-dimensional, got shape {alpha.shape}")
        values = list(alpha)
        for value in values:
            if not isinstance(value, numbers.Real):
                raise TypeError(f"alpha elements must be real numbers, got {value!r}")
        a = np.array(values, dtype=np.float64)
        if a.shape[0] < 2:
            raise AlphaTooShort(
                f"alpha must have at least 2 elements, got {a.size}"
            )
        for i, value in enumerate(a):
            # NaN fails this comparison too.
            if not value > 0.0:
                raise AlphaTooSmall(f"alpha[{i}] must be > 0, got {value}")
        a.setflags(write=False)
        self._alpha = a
        logger.debug("Constructed Dirichlet with %d components", a.shape[0])

    @classmethod
    def new(cls, alpha: Iterable[float]) -> "Dirichlet":
        """Construct a distribution from a concentration vector."""
        return cls(alpha)

    @classmethod
    def new_with_size(cls, alpha: float, size: int) -> "Dirichlet":
        """Construct a symmetric distribution of ``size`` copies of ``alpha``.

        Raises:
            AlphaTooSmall: if ``alpha`` is not strictly positive or is NaN.
            SizeTooSmall: if ``size < 2``.
        """
        if not alpha > 0.0:
            raise AlphaTooSmall(f"alpha must be > 0, got {alpha}")
        if size < 2:
            raise SizeTooSmall(f"size must be at least 2, got {size}")
        return cls(np.full(size, alpha, dtype=np.float64))

    @property
    def alpha(self) -> npt.NDArray[np.float64]:
        """The concentration parameters, as a read-only array."""
        return self._alpha

    def __len__(self) -> int:
        return self._alpha.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dirichlet):
            return NotImplemented
        return bool(np.array_equal(self._alpha, other._alpha))

    def __hash__(self) -> int:
        return hash(self._alpha.tobytes())

    def __reduce__(self) -> tuple[type["Dirichlet"], tuple[list[float]]]:
        return (self.__class__, (self._alpha.tolist(),))

    def __repr__(self) -> str:
        return f"Dirichlet(alpha={self._alpha.tolist()!r})"

    def sample(self, rng: Any = None) -> npt.NDArray[np.float64]:
        """Draw one vector from the distribution.

        ``rng`` may be ``None``, an integer seed, a ``numpy.random.Generator``,
        a ``random.Random`` or anything with a ``gamma(shape, scale)`` method.

        If every Gamma draw underflows to zero the result is NaN, and if the
        draws overflow when summed the result is all zeros. Both can only
        happen for extreme concentration values and are logged, not raised.
        """
        return self._sample(as_gamma_source(rng))

    def sample_n(self, n: int, rng: Any = None) -> npt.NDArray[np.float64]:
        """Draw ``n`` independent vectors as rows of an ``(n, len(self))`` array."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        logger.debug("Drawing %d samples from %r", n, self)
        source = as_gamma_source(rng)
        out = np.empty((n, len(self)), dtype=np.float64)
        for row in range(n):
            out[row] = self._sample(source)
        return out

    def sample_iter(self, rng: Any = None) -> Iterator[npt.NDArray[np.float64]]:
        """Yield independent samples forever, all from the same source."""
        source = as_gamma_source(rng)
        while True:
            yield self._sample(source)

    def _sample(self, source: GammaSource) -> npt.NDArray[np.float64]:
        samples = np.empty(len(self), dtype=np.float64)
        total = np.float64(0.0)
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            for i, a in enumerate(self._alpha):
                samples[i] = source.gamma(float(a), 1.0)
                total += samples[i]
            inv = np.float64(1.0) / total
            samples *= inv
        if not (math.isfinite(total) and total > 0.0):
            logger.warning(
                "Gamma draws summed to %r for alpha=%r; sample is not normalized",
                float(total),
                self._alpha.tolist(),
            )
        return samples
