"""Errors raised by paginators."""

# Stable identifiers, matched by callers instead of the message text
CURRENT_PAGE_LOWER_THAN_ONE = 1573047338


class InvalidArgumentError(ValueError):
    """Raised when a paginator receives an argument it cannot correct."""

    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.code = code

    def to_dict(self) -> dict:
        return {"detail": str(self), "code": self.code}
