"""Tests for Dirichlet behaving as an immutable value."""

import copy
import pickle

import numpy as np
import pytest


def test_alpha_is_a_copy() -> None:
    """Mutating the input array does not change the distribution."""
    from dirichlet_sampler import Dirichlet

    values = np.array([1.0, 2.0, 3.0])
    d = Dirichlet(values)
    values[0] = 100.0
    assert d.alpha[0] == 1.0


def test_alpha_is_read_only() -> None:
    """Verify alpha cannot be written in place."""
    from dirichlet_sampler import Dirichlet

    d = Dirichlet([1.0, 2.0])
    with pytest.raises(ValueError):
        d.alpha[0] = 5.0


def test_cannot_set_new_attributes() -> None:
    """Verify alpha cannot be reassigned."""
    from dirichlet_sampler import Dirichlet

    d = Dirichlet([1.0, 2.0])
    with pytest.raises(AttributeError):
        d.alpha = np.array([3.0, 4.0])  # type: ignore[misc]


def test_equality_and_hash() -> None:
    """Verify equality and hashing compare the concentration vectors."""
    from dirichlet_sampler import Dirichlet

    a = Dirichlet([1.0, 2.0])
    b = Dirichlet.new_with_size(1.0, 2)
    assert a == Dirichlet([1.0, 2.0])
    assert hash(a) == hash(Dirichlet([1.0, 2.0]))
    assert a != b
    assert b == Dirichlet([1.0, 1.0])
    assert a != [1.0, 2.0]


def test_copies_are_equal_and_read_only() -> None:
    """Copied and unpickled distributions keep a read-only alpha."""
    from dirichlet_sampler import Dirichlet

    d = Dirichlet([0.1, 0.2, 0.3])
    copies = [copy.copy(d), copy.deepcopy(d), pickle.loads(pickle.dumps(d))]
    for c in copies:
        assert c == d
        assert hash(c) == hash(d)
        with pytest.raises(ValueError):
            c.alpha[0] = 5.0
        assert c.alpha.tolist() == [0.1, 0.2, 0.3]


def test_repr() -> None:
    """Verify repr shows the concentration vector."""
    from dirichlet_sampler import Dirichlet

    assert repr(Dirichlet([1.0, 2.5])) == "Dirichlet(alpha=[1.0, 2.5])"
