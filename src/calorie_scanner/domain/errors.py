"""Errors raised by the recognition core."""


class InvalidImageError(ValueError):
    """Raised when an image cannot be turned into a usable pixel buffer."""


class RecognitionUnavailableError(RuntimeError):
    """Raised by a recognition strategy that cannot produce a result."""

    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.cause = cause
