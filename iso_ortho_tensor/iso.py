"""Isotropic tensors."""
import logging

from .prelude import *
from .kronecker import fast_delta, validate_dimension, validate_order
from .product import evaluate

logger = logging.getLogger(__name__)


def _isotropic(n: int, D: int) -> jax.Array:
    if n == 0 or D == 1:
        return jnp.asarray(1)
    K = fast_delta(D)
    if n == 1:
        return K
    logger.debug("isotropic tensor of order %d in %d dimensions", n, D)
    return evaluate((K, _isotropic(n - 1, D)), {1}, "combination", D)


def isotropic(n: int, D: int = 2) -> jax.Array:
    """Isotropic tensor Δ of order `n`, i.e. rank ``2n``, in `D` dimensions.

    The tensor is built recursively as the combinatorial product of one
    Kronecker delta with the isotropic tensor of order ``n - 1``, holding the
    first axis of the delta fixed.

    Parameters
    ----------
    n : int
        order, ``n >= 0``
    D : int, optional
        space dimension in ``{1, 2, 3}``, by default 2

    Returns
    -------
    jax.Array
        the 0-d array ``1`` for ``n = 0`` or ``D = 1``

    Raises
    ------
    InvalidDimension
    InvalidOrder

    Examples
    --------
    >>> isotropic(2)[:, :, 0, 0]
    Array([[3, 0],
           [0, 1]], dtype=int32)
    """
    D = validate_dimension(D)
    n = validate_order(n)
    return _isotropic(n, D)


Δ = isotropic
