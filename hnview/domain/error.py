"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class RenderError(DomainError):
    """Raised when a render request cannot be laid out.

    Malformed comment text never raises; only invalid layout parameters
    (negative indentation or widths) do.
    """

    def __init__(self, message: str):
        super().__init__(message)
