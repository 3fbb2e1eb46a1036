"""Parser error types."""


class ParseError(Exception):
    """Raised when a bracketed arbitrary value cannot be decoded."""

    def __init__(self, message: str, column: int | None = None):
        self.column = column
        super().__init__(message)
