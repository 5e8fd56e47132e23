"""Index assignments of the nonstandard tensor products.

An index assignment is a tuple ``t`` of 1-based axis labels with one entry per
axis of the product. Axis ``i`` of the result reads the label ``t[i - 1]``
of one summation term. Fixed positions always carry their own label, the
free labels are distributed among the remaining slots, operand by operand.
"""
from typing import Callable, Iterable, Iterator, Sequence, TypeAlias
from collections import deque
import itertools
import math

IndexAssignment: TypeAlias = tuple[int, ...]
Selection: TypeAlias = Callable[[Sequence[int], int], Iterator[tuple[int, ...]]]


def _check_arguments(dims: Sequence[int], fixed: Iterable[int]) -> tuple[tuple[int, ...], frozenset[int]]:
    dims = tuple(dims)
    if len(dims) == 0:
        raise ValueError("At least one operand dimension is required.")
    if any(d < 0 for d in dims):
        raise ValueError(f"Operand dimensions must be non-negative, got {dims}.")

    fixed = frozenset(fixed)
    total = sum(dims)
    invalid = sorted(i for i in fixed if not 1 <= i <= total)
    if invalid:
        raise ValueError(f"Fixed positions {invalid} are outside the valid range [1, {total}].")
    return dims, fixed


def _distribute(dims: Sequence[int], fixed: Iterable[int], select: Selection) -> list[IndexAssignment]:
    dims, fixed = _check_arguments(dims, fixed)
    free_labels = tuple(i for i in range(1, sum(dims) + 1) if i not in fixed)

    # (operand, prefix) pairs, processed breadth first
    queue = deque([(0, ())])
    assignments = []
    while queue:
        k, prefix = queue.popleft()
        if k == len(dims):
            assignments.append(prefix)
            continue

        start = len(prefix) + 1
        slots = range(start, start + dims[k])
        free_slots = [p for p in slots if p not in fixed]
        used = set(prefix)
        allowed = [label for label in free_labels if label not in used]

        for choice in select(allowed, len(free_slots)):
            chosen = dict(zip(free_slots, choice))
            queue.append((k + 1, prefix + tuple(chosen.get(p, p) for p in slots)))

    return assignments


def generate_combinations(dims: Sequence[int], fixed: Iterable[int]) -> list[IndexAssignment]:
    """Index assignments of the combinatorial product.

    The free slots of every operand receive an unordered choice of the
    remaining free labels, written in ascending order.

    Parameters
    ----------
    dims : Sequence[int]
        rank of each operand
    fixed : Iterable[int]
        1-based positions which keep their own label

    Returns
    -------
    list[IndexAssignment]

    Examples
    --------
    >>> generate_combinations((2, 2), {1})
    [(1, 2, 3, 4), (1, 3, 2, 4), (1, 4, 2, 3)]
    """
    return _distribute(dims, fixed, itertools.combinations)


def generate_permutations(dims: Sequence[int], fixed: Iterable[int]) -> list[IndexAssignment]:
    """Index assignments of the permutatorial product.

    Like :func:`generate_combinations`, but each ordering of the chosen labels
    is a distinct assignment.

    Parameters
    ----------
    dims : Sequence[int]
        rank of each operand
    fixed : Iterable[int]
        1-based positions which keep their own label

    Returns
    -------
    list[IndexAssignment]

    Examples
    --------
    >>> generate_permutations((2, 2), {1, 3})
    [(1, 2, 3, 4), (1, 4, 3, 2)]
    """
    return _distribute(dims, fixed, itertools.permutations)


def _count(dims: Sequence[int], fixed: Iterable[int], count: Callable[[int, int], int]) -> int:
    dims, fixed = _check_arguments(dims, fixed)
    pool = sum(dims) - len(fixed)
    total, start = 1, 1
    for d in dims:
        n_free = sum(1 for p in range(start, start + d) if p not in fixed)
        total *= count(pool, n_free)
        pool -= n_free
        start += d
    return total


def count_combinations(dims: Sequence[int], fixed: Iterable[int]) -> int:
    """Number of assignments produced by :func:`generate_combinations`."""
    return _count(dims, fixed, math.comb)


def count_permutations(dims: Sequence[int], fixed: Iterable[int]) -> int:
    """Number of assignments produced by :func:`generate_permutations`."""
    return _count(dims, fixed, math.perm)
