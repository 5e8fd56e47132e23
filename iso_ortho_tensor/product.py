from typing import Iterable, Literal, Sequence, TypeAlias
import logging
import string

from .prelude import *
from .indices import IndexAssignment, generate_combinations, generate_permutations

logger = logging.getLogger(__name__)

Kind: TypeAlias = Literal["combination", "permutation"]

_GENERATORS = {
    "combination": generate_combinations,
    "permutation": generate_permutations,
}


def _einsum_str(assignment: IndexAssignment, dims: Sequence[int]) -> str:
    letters = string.ascii_letters
    subs = []
    start = 0
    for d in dims:
        subs.append("".join(letters[label - 1] for label in assignment[start:start + d]))
        start += d
    return ",".join(subs) + "->" + letters[:start]


def evaluate(
    operands: Sequence[jax.Array],
    fixed: Iterable[int],
    kind: Kind,
    D: int,
) -> jax.Array:
    r"""Nonstandard tensor product of the `operands`.

    For every index assignment ``t`` of the selected generator the term

    .. math::
        T_{i_1 \dots i_R} = \prod_k A^{(k)}_{i_{t(s_k)} \dots i_{t(e_k)}}

    is added to the result, where ``s_k..e_k`` are the positions covered by
    the k-th operand. Each term is evaluated as a single einsum.

    Parameters
    ----------
    operands : Sequence[jax.Array]
        integer tensors whose axes all have extent `D`
    fixed : Iterable[int]
        1-based axis positions which are not redistributed
    kind : {"combination", "permutation"}
        selects unordered or ordered distribution of the free labels
    D : int
        space dimension

    Returns
    -------
    jax.Array
        tensor of rank ``sum(op.ndim for op in operands)``
    """
    if kind not in _GENERATORS:
        raise ValueError(f"Unknown product kind {kind!r}. Use 'combination' or 'permutation'.")
    if D < 1:
        raise ValueError(f"Space dimension must be positive, got {D}.")

    operands = tuple(jnp.asarray(op) for op in operands)
    for op in operands:
        if any(s != D for s in op.shape):
            raise ValueError(f"Operand of shape {op.shape} does not match the space dimension D = {D}.")

    dims = tuple(op.ndim for op in operands)
    rank = sum(dims)
    if rank > len(string.ascii_letters):
        raise ValueError(f"Products of total rank {rank} are not supported.")

    assignments = _GENERATORS[kind](dims, fixed)
    logger.debug("%s product of ranks %s: %d terms", kind, dims, len(assignments))

    dtype = jnp.result_type(*operands)
    if rank == 0:
        return jnp.prod(jnp.stack(operands)).astype(dtype)

    result = jnp.zeros((D,) * rank, dtype=dtype)
    for t in assignments:
        result = result + jnp.einsum(_einsum_str(t, dims), *operands).astype(dtype)
    return result


def _dimension(operands: Sequence[jax.Array]) -> int:
    shapes = [jnp.shape(op) for op in operands]
    return next((s[0] for s in shapes if len(s) > 0), 1)


def combinatorial_product(operands: Sequence[jax.Array], fixed: Iterable[int]) -> jax.Array:
    """Combinatorial nonstandard product, the space dimension is taken from the operands.

    Examples
    --------
    >>> from iso_ortho_tensor import delta, isotropic
    >>> bool((combinatorial_product((delta(2), delta(2)), (1,)) == isotropic(2)).all())
    True
    """
    return evaluate(operands, fixed, "combination", _dimension(operands))


def permutatorial_product(operands: Sequence[jax.Array], fixed: Iterable[int]) -> jax.Array:
    """Permutatorial nonstandard product, the space dimension is taken from the operands."""
    return evaluate(operands, fixed, "permutation", _dimension(operands))
