from iso_ortho_tensor.exceptions import (
    IsoOrthoTensorError,
    DomainError,
    InvalidDimension,
    InvalidOrder,
)
from iso_ortho_tensor.kronecker import delta, fast_delta
from iso_ortho_tensor.indices import (
    generate_combinations,
    generate_permutations,
    count_combinations,
    count_permutations,
)
from iso_ortho_tensor.product import evaluate, combinatorial_product, permutatorial_product
from iso_ortho_tensor.iso import isotropic, Δ
from iso_ortho_tensor.ortho import orthogonal, Ο

__version__ = "0.1.0"

__all__ = (
    "IsoOrthoTensorError",
    "DomainError",
    "InvalidDimension",
    "InvalidOrder",
    "delta",
    "fast_delta",
    "generate_combinations",
    "generate_permutations",
    "count_combinations",
    "count_permutations",
    "evaluate",
    "combinatorial_product",
    "permutatorial_product",
    "isotropic",
    "Δ",
    "orthogonal",
    "Ο",
)
