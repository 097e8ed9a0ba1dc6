class BookingApiError(RuntimeError):
    """Raised when the booking backend rejects a call or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogUnavailableError(RuntimeError):
    """Raised when services or stylists cannot be loaded."""
    pass


class NotificationError(RuntimeError):
    """Raised when the confirmation notification endpoint fails."""
    pass
