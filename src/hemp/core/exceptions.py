class HempError(Exception):
    """Base class for all custom exceptions in the hemp library."""

    pass


class NoPresenterError(HempError):
    """Raised when presenting without a presenter and no default is configured."""

    pass


class UnwritableError(HempError):
    """Raised on indexed assignment or deletion against presented output."""

    pass


class PropertyNotResolvableError(HempError, AttributeError):
    """Raised when neither the presenter nor the wrapped record provides a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Property [{name}] could not be resolved.")
        self.name = name


__all__ = [
    "HempError",
    "NoPresenterError",
    "UnwritableError",
    "PropertyNotResolvableError",
]
