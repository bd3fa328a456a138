"""Core carousel logic.

Platform-agnostic windowing, pagination and navigation for a circular
carousel, plus the logging, error and options support they share.
"""

from virchual.core.carousel_logic import (
    Carousel,
    CarouselState,
    Direction,
    SlideAction,
    Transition,
    plan_slides,
)
from virchual.core.errors import (
    CarouselBusyError,
    CarouselError,
    ErrorCategory,
    InvalidOptionsError,
    classify_error,
)
from virchual.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from virchual.core.options import CarouselOptions
from virchual.core.pagination import (
    Bullet,
    Pagination,
    PaginationState,
    PaginationStep,
    SlotUpdate,
    get_real_index,
    is_edge_bullet,
    map_active_index,
    rewind,
)
from virchual.core.sliding_window import get_wrapped, sliding_window, window_range

__all__ = [
    # Carousel
    "Carousel",
    "CarouselState",
    "Direction",
    "SlideAction",
    "Transition",
    "plan_slides",
    # Error handling
    "CarouselBusyError",
    "CarouselError",
    "ErrorCategory",
    "InvalidOptionsError",
    "classify_error",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Options
    "CarouselOptions",
    # Pagination
    "Bullet",
    "Pagination",
    "PaginationState",
    "PaginationStep",
    "SlotUpdate",
    "get_real_index",
    "is_edge_bullet",
    "map_active_index",
    "rewind",
    # Sliding window
    "get_wrapped",
    "sliding_window",
    "window_range",
]
