"""Widget error taxonomy."""


class WidgetError(Exception):
    """Base class for tabular input errors."""

    pass


class InvalidConfiguration(WidgetError):
    """Widget options cannot be resolved (fatal to construction)."""

    pass


class UnsupportedOperation(WidgetError):
    """A renderer or column variant does not implement a rendering step."""

    pass


class PayloadError(WidgetError):
    """Client payload is oversized, too deep, or cannot be parsed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original
