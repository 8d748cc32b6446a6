class AtomFeedError(Exception):
    pass


class FeedValidationError(AtomFeedError, ValueError):
    """Raised when caller-supplied feed or entry data cannot be normalized."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingRequiredFieldError(FeedValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}", field=field)


class InvalidContentError(FeedValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(
            f"{field} must have an inline value or a src reference", field=field
        )
