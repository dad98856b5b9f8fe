"""Package initialization for dirichlet-sampler.

Draw random probability vectors from a Dirichlet distribution by normalizing
independent Gamma variates.
"""

from dirichlet_sampler.dirichlet import Dirichlet
from dirichlet_sampler.errors import (
    AlphaTooShort,
    AlphaTooSmall,
    DirichletError,
    SizeTooSmall,
)
from dirichlet_sampler.rng import GammaSource, StdlibGammaSource, as_gamma_source

__version__ = "0.1.0"
__all__ = [
    "AlphaTooShort",
    "AlphaTooSmall",
    "Dirichlet",
    "DirichletError",
    "GammaSource",
    "SizeTooSmall",
    "StdlibGammaSource",
    "as_gamma_source",
]
