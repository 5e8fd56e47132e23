"""Orthogonality tensors."""
import logging

from .prelude import *
from .kronecker import fast_delta, validate_dimension, validate_order
from .product import evaluate

logger = logging.getLogger(__name__)


def orthogonal(n: int, D: int = 2) -> jax.Array:
    """Orthogonality tensor Ο of order `n`, i.e. rank ``2n``, in `D` dimensions.

    Permutatorial product of `n` Kronecker deltas where the first axis of
    every delta is held fixed.

    Parameters
    ----------
    n : int
        order, ``n >= 0``
    D : int, optional
        space dimension in ``{1, 2, 3}``, by default 2

    Returns
    -------
    jax.Array

    Raises
    ------
    InvalidDimension
    InvalidOrder

    Examples
    --------
    >>> orthogonal(2)[:, :, 1, 0]
    Array([[0, 1],
           [0, 0]], dtype=int32)
    """
    D = validate_dimension(D)
    n = validate_order(n)
    if n == 0 or D == 1:
        return jnp.asarray(1)
    K = fast_delta(D)
    if n == 1:
        return K

    logger.debug("orthogonality tensor of order %d in %d dimensions", n, D)
    fixed = set(range(1, 2 * n, 2))
    return evaluate((K,) * n, fixed, "permutation", D)


Ο = orthogonal  # Greek capital omicron
