"""Custom exceptions for ndrank."""


class NdRankError(Exception):
    """Base exception for ndrank errors."""


class ValidationError(NdRankError, ValueError):
    """Raised when an operator argument violates its contract."""


class ShapeMismatchError(ValidationError):
    """Raised when two operands of a pairwise operator differ in shape."""

    def __init__(self, left_shape: tuple[int, ...], right_shape: tuple[int, ...]) -> None:
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        super().__init__(f"Shape mismatch: {self.left_shape} vs {self.right_shape}")


class AxisOutOfRangeError(ValidationError, IndexError):
    """Raised when an axis index does not name a dimension of the input."""

    def __init__(self, axis: int, ndim: int) -> None:
        self.axis = axis
        self.ndim = ndim
        super().__init__(f"Axis {axis} is out of range for array of dimension {ndim}")


class InvalidBucketCountError(ValidationError):
    """Raised when the requested number of buckets is not a positive integer."""

    def __init__(self, buckets: object) -> None:
        self.buckets = buckets
        super().__init__(f"buckets must be a positive integer, got: {buckets!r}")


class UnknownRankMethodError(ValidationError):
    """Raised when a rank method cannot be resolved."""

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(f"Unknown rank method: {method!r}")


class NotWriteableError(ValidationError):
    """Raised when an in-place operator is given a read-only target."""


class ConfigurationError(NdRankError):
    """Raised when configuration is invalid or missing."""
