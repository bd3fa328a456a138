"""Error classification for the carousel core.

The windowing and pagination arithmetic is total over well-formed integers and
never raises. Errors come from the layer around it: invalid options, unknown
control values, or a transition requested while the previous one is still
settling.

Example:
    from virchual.core.errors import CarouselBusyError, ErrorCategory

    try:
        carousel.next()
    except CarouselBusyError as ex:
        assert ex.category is ErrorCategory.BUSY
"""

from enum import Enum, auto

from pydantic import ValidationError


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    INVALID_INPUT = auto()  # Bad argument from the calling UI layer
    CONFIGURATION = auto()  # Options failed validation
    BUSY = auto()  # Transition requested while another one is settling
    UNKNOWN = auto()  # Unclassified error


class CarouselError(Exception):
    """Base error raised by the carousel core.

    Attributes:
        category: The specific type of error.
        original_error: The underlying exception that was classified.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory | None = None,
    ) -> "CarouselError":
        """Create a carousel error from an existing exception."""
        if category is None:
            category = classify_error(ex)
        return cls(
            message=str(ex),
            category=category,
            original_error=ex,
        )


class CarouselBusyError(CarouselError):
    """Raised when a transition is requested before the previous one settled."""

    def __init__(self, message: str = "Carousel transition still settling") -> None:
        super().__init__(message, ErrorCategory.BUSY)


class InvalidOptionsError(CarouselError):
    """Raised when carousel options fail validation."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.CONFIGURATION,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, category, original_error)


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, CarouselError):
        return error.category

    # ValidationError subclasses ValueError, check it first
    if isinstance(error, ValidationError):
        return ErrorCategory.CONFIGURATION

    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.INVALID_INPUT

    return ErrorCategory.UNKNOWN
