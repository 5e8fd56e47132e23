import operator

import numpy as np

from .prelude import *
from .exceptions import InvalidDimension, InvalidOrder

DIMENSIONS = (1, 2, 3)


def _frozen(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


# the 1d Kronecker delta degenerates to the scalar 1
_KRONECKER = (
    _frozen(np.array(1)),
    _frozen(np.eye(2, dtype=int)),
    _frozen(np.eye(3, dtype=int)),
)


def validate_dimension(D: int) -> int:
    """Checks that `D` is a supported Euclidean space dimension.

    Parameters
    ----------
    D : int

    Returns
    -------
    int
        `D` as a plain integer

    Raises
    ------
    InvalidDimension
        if `D` is not in ``{1, 2, 3}``
    """
    D = operator.index(D)
    if D not in DIMENSIONS:
        raise InvalidDimension(D)
    return D


def validate_order(n: int) -> int:
    """Checks that the tensor order `n` is non-negative.

    Raises
    ------
    InvalidOrder
    """
    n = operator.index(n)
    if n < 0:
        raise InvalidOrder(n)
    return n


def fast_delta(D: int = 2) -> jax.Array:
    """Kronecker delta without bounds checks on `D`.

    Only call this with an already validated dimension.
    """
    return jnp.asarray(_KRONECKER[D - 1])


def delta(D: int = 2) -> jax.Array:
    """Kronecker delta tensor in a `D`-dimensional Euclidean space.

    Parameters
    ----------
    D : int, optional
        space dimension in ``{1, 2, 3}``, by default 2

    Returns
    -------
    jax.Array
        rank 2 identity for ``D > 1``, the 0-d array ``1`` for ``D = 1``

    Raises
    ------
    InvalidDimension

    Examples
    --------
    >>> delta(3)
    Array([[1, 0, 0],
           [0, 1, 0],
           [0, 0, 1]], dtype=int32)
    >>> delta(1)
    Array(1, dtype=int32)
    """
    return fast_delta(validate_dimension(D))
