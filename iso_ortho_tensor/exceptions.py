class IsoOrthoTensorError(Exception):
    """Base class for iso-ortho-tensor exceptions."""


class DomainError(IsoOrthoTensorError, ValueError):
    """An argument lies outside the mathematical domain of the operation."""


class InvalidDimension(DomainError):
    def __init__(self, dimension: int):
        super().__init__(f"dimension D = {dimension} outside the valid domain [1, 3]")
        self.dimension = dimension


class InvalidOrder(DomainError):
    def __init__(self, order: int):
        super().__init__(f"order n = {order} must be non-negative")
        self.order = order
