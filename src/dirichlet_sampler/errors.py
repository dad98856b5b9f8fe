"""Errors raised when constructing a Dirichlet distribution."""


class DirichletError(ValueError):
    """Base class for invalid Dirichlet parameters."""


class AlphaTooShort(DirichletError):
    """The concentration vector has fewer than 2 elements."""


class AlphaTooSmall(DirichletError):
    """A concentration value is zero, negative or NaN."""


class SizeTooSmall(DirichletError):
    """The requested number of components is less than 2."""
