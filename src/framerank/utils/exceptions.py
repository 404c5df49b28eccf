"""
Exceptions shared by the post-processing stage and its configuration.
"""


class PostprocessingError(Exception):
    """Base exception for post-processing errors."""

    pass


class InvalidConfiguration(PostprocessingError, ValueError):
    """Raised at construction when a size, factor or count is out of range."""

    pass


class DimensionMismatch(PostprocessingError, ValueError):
    """Raised when a score vector does not match the vocabulary size."""

    def __init__(self, expected: int, actual: int | tuple[int, ...]):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected a score vector of length {expected}, got {actual}"
        )


class InvalidScores(PostprocessingError, ValueError):
    """Raised when a score vector holds non-numeric or non-finite entries."""

    pass
