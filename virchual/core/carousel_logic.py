"""Carousel business logic - platform agnostic.

A carousel shows a ring of slides through a fixed window: the current slide
plus ``window`` slides on each side are mounted, everything else is not. Each
step moves the window by one slide, wrapping at both ends, and moves the
pagination strip along with it.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from virchual.core.errors import CarouselBusyError, CarouselError, ErrorCategory
from virchual.core.logging import get_logger
from virchual.core.options import CarouselOptions
from virchual.core.pagination import Pagination, PaginationStep, Sign, rewind
from virchual.core.sliding_window import window_range

if TYPE_CHECKING:
    from virchual.ports.renderer import CarouselRenderer

logger = get_logger(__name__)

T = TypeVar("T")

# Offset (percent) the outgoing slide is translated by when a step starts
OUTGOING_OFFSET = -100


class Direction(Enum):
    """Direction of travel through the carousel."""

    PREV = "prev"
    NEXT = "next"

    @property
    def sign(self) -> Sign:
        return -1 if self is Direction.PREV else 1

    @classmethod
    def from_control(cls, value: str) -> "Direction":
        """Map a control button value ("prev" or "next") to a direction."""
        try:
            return cls(value)
        except ValueError as ex:
            raise CarouselError(
                f"Unknown carousel control: {value!r}",
                ErrorCategory.INVALID_INPUT,
                ex,
            ) from ex


@dataclass(frozen=True)
class SlideAction:
    """Mount or unmount instruction for a single slide.

    Attributes:
        index: Slide index.
        mount: True to mount, False to unmount.
        position: Offset in percent of the frame width (mounted slides only).
        prepend: Insert before the already mounted slides.
        is_active: Whether this is the current slide.
    """

    index: int
    mount: bool
    position: int | None = None
    prepend: bool = False
    is_active: bool = False


@dataclass(frozen=True)
class Transition:
    """Result of a single step through the carousel."""

    direction: Direction
    previous_index: int
    current_index: int
    slides: list[SlideAction]
    pagination: PaginationStep | None = None


def plan_slides(
    total: int,
    current: int,
    window: int,
    direction: Direction | None = None,
    first_mounted: bool = False,
) -> list[SlideAction]:
    """Work out which slides to mount and unmount around ``current``.

    Slides inside the window are mounted at their offset from the center.
    The slides just outside it, one on each side, are unmounted. On a plain
    mount (no direction) slides left of the center are prepended when slide 0
    is already displayed.

    Args:
        total: Total number of slides.
        current: Index of the current slide.
        window: Slides mounted on each side of the current one.
        direction: Direction of the step that led here, None on initial mount.
        first_mounted: Whether slide 0 is currently mounted.

    Returns:
        Actions ordered left to right. Each slide appears at most once.
    """
    mountable = window_range(current, window, total)
    surrounding = window_range(current, window + 1, total)

    actions: list[SlideAction] = []
    seen: set[int] = set()

    for index in surrounding:
        if index in seen:
            continue
        seen.add(index)

        if index not in mountable:
            actions.append(SlideAction(index=index, mount=False))
            continue

        offset = mountable.index(index)
        prepend = direction is Direction.PREV or (
            direction is None and first_mounted and offset - window < 0
        )
        actions.append(
            SlideAction(
                index=index,
                mount=True,
                position=(window - offset) * -100,
                prepend=prepend,
                is_active=index == current,
            )
        )

    return actions


@dataclass(frozen=True)
class CarouselState(Generic[T]):
    """State for a circular carousel.

    Attributes:
        items: The slides.
        current_index: Index of the current slide.
        busy: True while dragging or transitioning. Clicks should be blocked.
        settling: True until the running transition reports it has finished.
        mounted: Indices of mounted slides.
    """

    items: tuple[T, ...]
    current_index: int = 0
    busy: bool = False
    settling: bool = False
    mounted: frozenset[int] = field(default_factory=frozenset)

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> T | None:
        if 0 <= self.current_index < len(self.items):
            return self.items[self.current_index]
        return None


class Carousel(Generic[T]):
    """Controls carousel navigation, slide mounting and pagination.

    The controller owns the carousel state and replaces it as a whole on every
    step. Steps are strictly sequential: after ``next()`` or ``prev()`` the
    caller must report the end of the visual transition with ``settle()``
    before the next step.
    """

    def __init__(
        self,
        slides: Sequence[T] | Callable[[], Sequence[T]],
        options: CarouselOptions | Mapping[str, Any] | None = None,
        renderer: "CarouselRenderer | None" = None,
    ) -> None:
        """Initialize the carousel.

        Args:
            slides: The slides, or a callable producing them.
            options: Options model or a mapping validated into one.
            renderer: Receives display updates. None keeps the carousel headless.

        Raises:
            InvalidOptionsError: If ``options`` fails validation.
        """
        items = slides() if callable(slides) else slides

        if options is None:
            options = CarouselOptions()
        elif not isinstance(options, CarouselOptions):
            options = CarouselOptions.from_mapping(dict(options))

        self.options = options
        self._renderer = renderer
        self._state: CarouselState[T] = CarouselState(items=tuple(items))
        self._pagination = Pagination(
            len(self._state.items),
            bullets=options.bullets,
            diameter=options.bullet_diameter,
            is_active=options.pagination,
        )

    @property
    def state(self) -> CarouselState[T]:
        return self._state

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def pagination(self) -> Pagination:
        return self._pagination

    def mount(self) -> list[SlideAction]:
        """Render pagination and mount the slides around the current one."""
        logger.debug("carousel_mounted", total_items=self._state.total_items)

        bullets = self._pagination.render()
        if self._renderer is not None and bullets:
            self._renderer.render_bullets(
                bullets, self._pagination.strip_width, self._pagination.strip_height
            )

        actions = plan_slides(
            self._state.total_items,
            self._state.current_index,
            self.options.window,
            first_mounted=0 in self._state.mounted,
        )
        self._state = replace(self._state, mounted=self._apply_slides(actions))
        return actions

    def next(self) -> Transition:
        """Go to the next slide."""
        logger.debug("carousel_next", current_index=self._state.current_index)
        return self.go(Direction.NEXT)

    def prev(self) -> Transition:
        """Go to the previous slide."""
        logger.debug("carousel_prev", current_index=self._state.current_index)
        return self.go(Direction.PREV)

    def go(self, direction: Direction) -> Transition:
        """Move one slide in ``direction``, wrapping around either end.

        Raises:
            CarouselBusyError: If the previous transition has not settled.
            CarouselError: If the carousel has no slides.
        """
        state = self._state
        if state.settling:
            raise CarouselBusyError()
        if state.total_items == 0:
            raise CarouselError("Cannot navigate an empty carousel", ErrorCategory.INVALID_INPUT)

        if self._renderer is not None and state.current_index in state.mounted:
            self._renderer.translate_slide(state.current_index, OUTGOING_OFFSET)

        current_index = rewind(state.current_index + direction.sign, state.total_items - 1)
        actions = plan_slides(
            state.total_items,
            current_index,
            self.options.window,
            direction=direction,
            first_mounted=0 in state.mounted,
        )
        mounted = self._apply_slides(actions)

        step = self._pagination.advance(direction.sign)
        if step is not None:
            self._apply_pagination(step, direction)

        self._state = replace(
            state,
            current_index=current_index,
            busy=True,
            settling=True,
            mounted=mounted,
        )

        return Transition(
            direction=direction,
            previous_index=state.current_index,
            current_index=current_index,
            slides=actions,
            pagination=step,
        )

    def settle(self) -> None:
        """Report that the running transition has finished."""
        self._state = replace(self._state, busy=False, settling=False)

    def drag(self, offset_x: float, direction: Direction) -> list[tuple[int, float]]:
        """Follow a drag gesture with every slide in the window.

        Args:
            offset_x: Horizontal drag distance in px.
            direction: Direction the gesture will move the carousel.

        Returns:
            ``(slide index, offset)`` pairs that were applied.
        """
        self._state = replace(self._state, busy=True)

        sign = 1 if direction is Direction.PREV else -1
        offset = sign * abs(offset_x)
        indices = window_range(self._state.current_index, self.options.window, self._state.total_items)

        moves = [(index, offset) for index in dict.fromkeys(indices)]
        if self._renderer is not None:
            for index, x in moves:
                self._renderer.translate_slide(index, x)
        return moves

    def drag_end(self, direction: Direction) -> Transition:
        """Finish a drag gesture by stepping in its direction."""
        logger.debug("carousel_drag_end", direction=direction.value)
        return self.go(direction)

    def press_control(self, value: str) -> Transition:
        """Handle a prev/next control button.

        Raises:
            CarouselError: If ``value`` is not a known control.
        """
        return self.go(Direction.from_control(value))

    def should_block_click(self) -> bool:
        """Clicks on slides are swallowed while dragging or transitioning."""
        return self._state.busy

    def _apply_slides(self, actions: list[SlideAction]) -> frozenset[int]:
        mounted = set(self._state.mounted)

        for action in actions:
            if action.mount:
                mounted.add(action.index)
                if self._renderer is not None:
                    self._renderer.mount_slide(action.index, action.position or 0, action.prepend)
                    self._renderer.set_slide_active(action.index, action.is_active)
            elif action.index in mounted:
                mounted.discard(action.index)
                if self._renderer is not None:
                    self._renderer.unmount_slide(action.index)

        return frozenset(mounted)

    def _apply_pagination(self, step: PaginationStep, direction: Direction) -> None:
        if self._renderer is None:
            return

        if step.evicted_key is not None:
            self._renderer.remove_bullet(step.evicted_key)
        for update in step.updated:
            self._renderer.update_bullet(update)
        if step.inserted is not None:
            self._renderer.insert_bullet(step.inserted, at_start=direction is Direction.PREV)
            logger.debug(
                "pagination_bullet_inserted",
                slot_index=step.inserted.slot_index,
                real_index=step.inserted.real_index,
            )
