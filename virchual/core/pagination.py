"""Pagination bullets for a circular carousel.

A small fixed strip of bullets mirrors the position of the carousel over a
larger ring of slides. Near either end of the ring the active bullet slides
towards that end of the strip; in between it stays on the center slot and the
strip scrolls by evicting the bullet on the trailing side and inserting a new
one on the leading side.

Bullets are plain data. A renderer reconciles them with UI elements using
``Bullet.key`` as the element identity.
"""

from dataclasses import dataclass, field, replace
from typing import Literal

from virchual.core.logging import get_logger

logger = get_logger(__name__)

Sign = Literal[-1, 1]

DEFAULT_BULLETS = 5
DEFAULT_DIAMETER = 16


def map_active_index(index: int, center: int, bullets: int, total: int) -> int:
    """Map a slide index to the slot of the active bullet.

    Args:
        index: Current slide index.
        center: Center slot of the strip (5 bullets -> center 2).
        bullets: Number of bullets in the strip.
        total: Total number of slides.

    Returns:
        Slot index in ``[0, bullets - 1]``.
    """
    if bullets >= total:
        return index

    # Right tail starts where the last full strip begins to center on index
    return index - max(index - center, 0) + max(index - (total - bullets + center), 0)


def is_edge_bullet(index: int, real_index: int, bullets: int, total: int) -> bool:
    """Return True if the bullet hides more slides beyond the strip.

    Args:
        index: Slot index of the bullet.
        real_index: Slide index the bullet represents.
        bullets: Number of bullets in the strip.
        total: Total number of slides.
    """
    if index == 0:
        return real_index != 0

    if index == bullets - 1:
        return real_index + 1 < total

    return False


def get_real_index(index: int, current_index: int, active_index: int) -> int:
    """Slide index represented by the bullet in slot ``index``."""
    return current_index - active_index + index


def rewind(index: int, max_index: int) -> int:
    """Wrap a single step past either end of ``0..max_index``."""
    if index > max_index:
        return 0
    if index < 0:
        return max_index
    return index


@dataclass(frozen=True)
class Bullet:
    """A bullet in the pagination strip.

    Attributes:
        key: Stable identity of the bullet across steps.
        slot_index: Position of the bullet in the strip.
        real_index: Slide index the bullet represents.
        is_active: Whether this bullet marks the current slide.
        is_edge: Whether more slides lie beyond the strip on this side.
        position: Horizontal offset in px.
    """

    key: int
    slot_index: int
    real_index: int
    is_active: bool
    is_edge: bool
    position: int


@dataclass(frozen=True)
class SlotUpdate:
    """Change applied to a bullet that survived a step.

    ``position`` is None unless the strip scrolled this step.
    """

    key: int
    slot_index: int
    real_index: int
    is_active: bool
    is_edge: bool
    position: int | None = None


@dataclass(frozen=True)
class PaginationStep:
    """Result of moving the pagination by one slide.

    Attributes:
        current_index: Slide index after the step.
        active_index: Slot of the active bullet after the step.
        evicted: Slot index of the removed bullet, if the strip scrolled.
        evicted_key: Key of the removed bullet, if the strip scrolled.
        inserted: Bullet added on the opposite end, if the strip scrolled.
        updated: Updates for every surviving bullet in strip order.
    """

    current_index: int
    active_index: int
    evicted: int | None = None
    evicted_key: int | None = None
    inserted: Bullet | None = None
    updated: list[SlotUpdate] = field(default_factory=list)


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of the pagination strip."""

    current_index: int = 0
    bullets: tuple[Bullet, ...] = ()

    @property
    def real_indices(self) -> list[int]:
        return [bullet.real_index for bullet in self.bullets]

    @property
    def active_bullet(self) -> Bullet | None:
        return next((bullet for bullet in self.bullets if bullet.is_active), None)


class Pagination:
    """Bullet strip that follows the carousel one step at a time.

    Steps must be applied strictly in sequence. Each step assumes the previous
    one was fully applied, so callers must not advance while a visual
    transition is still running.
    """

    def __init__(
        self,
        total_items: int,
        bullets: int = DEFAULT_BULLETS,
        diameter: int = DEFAULT_DIAMETER,
        is_active: bool = True,
    ) -> None:
        """Initialize the pagination.

        Args:
            total_items: Total number of slides.
            bullets: Maximum number of visible bullets.
            diameter: Bullet size in px, used for positioning.
            is_active: Set False to disable pagination entirely.
        """
        assert total_items >= 0, f"total_items must be non-negative, got {total_items}"
        assert bullets >= 0, f"bullets must be non-negative, got {bullets}"

        self._total_items = total_items
        self._bullet_count = min(total_items, bullets)
        self._center_index = self._bullet_count // 2
        self._diameter = diameter
        self._is_active = is_active
        self._state = PaginationState()
        self._next_key = 0

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def bullets(self) -> tuple[Bullet, ...]:
        return self._state.bullets

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def bullet_count(self) -> int:
        return self._bullet_count

    @property
    def center_index(self) -> int:
        return self._center_index

    @property
    def real_indices(self) -> list[int]:
        return self._state.real_indices

    @property
    def active_bullet(self) -> Bullet | None:
        return self._state.active_bullet

    @property
    def strip_width(self) -> int:
        return self._bullet_count * self._diameter

    @property
    def strip_height(self) -> int:
        return self._diameter

    def render(self) -> list[Bullet]:
        """Build the initial bullet strip.

        Pagination switches itself off when it was disabled or there are fewer
        than two slides; nothing is rendered in that case.

        Returns:
            Bullets in strip order, empty when pagination is inactive.
        """
        if not self._is_active or self._total_items < 2:
            self._is_active = False
            self._state = PaginationState(current_index=self._state.current_index)
            logger.debug("pagination_inactive", total_items=self._total_items)
            return []

        current_index = self._state.current_index
        active_index = self._map_active_index(current_index)
        bullets = tuple(
            self._create_bullet(
                slot_index,
                get_real_index(slot_index, current_index, active_index),
                is_active=slot_index == active_index,
            )
            for slot_index in range(self._bullet_count)
        )
        self._state = PaginationState(current_index=current_index, bullets=bullets)

        logger.debug(
            "pagination_rendered",
            bullets=self._bullet_count,
            total_items=self._total_items,
        )
        return list(bullets)

    def next(self) -> PaginationStep | None:
        return self.advance(1)

    def prev(self) -> PaginationStep | None:
        return self.advance(-1)

    def advance(self, sign: Sign) -> PaginationStep | None:
        """Move the strip one slide forwards (+1) or backwards (-1).

        The strip scrolls only while the active bullet sits on the center slot
        and slides remain unseen on the side being moved away from. Scrolling
        drops the trailing bullet, shifts the rest one slot against the
        direction of travel and inserts a new bullet at the leading end.

        Args:
            sign: +1 for next, -1 for previous.

        Returns:
            The applied step, or None when pagination is inactive.
        """
        assert sign in (-1, 1), f"sign must be -1 or +1, got {sign}"

        if not self._is_active:
            return None

        current_index = rewind(self._state.current_index + sign, self._total_items - 1)
        active_index = self._map_active_index(current_index)

        overflow_left = current_index - self._center_index > 0
        overflow_right = current_index + self._bullet_count - self._center_index < self._total_items
        # nothing to scroll until the strip has been rendered
        scroll = bool(self._state.bullets) and active_index == self._center_index and (
            overflow_left if sign > 0 else overflow_right
        )

        remove_index: int | None = None
        if scroll:
            remove_index = 0 if sign > 0 else self._bullet_count - 1

        bullets: list[Bullet] = []
        updates: list[SlotUpdate] = []
        evicted_key: int | None = None

        for slot_index, bullet in enumerate(self._state.bullets):
            if slot_index == remove_index:
                evicted_key = bullet.key
                continue

            # close the gap left by the removed bullet
            shifted = slot_index - sign if scroll else slot_index
            real_index = get_real_index(shifted, current_index, active_index)
            position = shifted * self._diameter if scroll else None

            moved = replace(
                bullet,
                slot_index=shifted,
                real_index=real_index,
                is_active=shifted == active_index,
                is_edge=is_edge_bullet(shifted, real_index, self._bullet_count, self._total_items),
                position=bullet.position if position is None else position,
            )
            bullets.append(moved)
            updates.append(
                SlotUpdate(
                    key=moved.key,
                    slot_index=moved.slot_index,
                    real_index=moved.real_index,
                    is_active=moved.is_active,
                    is_edge=moved.is_edge,
                    position=position,
                )
            )

        inserted: Bullet | None = None
        if remove_index is not None:
            insert_index = self._bullet_count - 1 - remove_index
            inserted = self._create_bullet(
                insert_index,
                get_real_index(insert_index, current_index, active_index),
                is_active=insert_index == active_index,
            )
            if sign > 0:
                bullets.append(inserted)
            else:
                bullets.insert(0, inserted)

        self._state = PaginationState(current_index=current_index, bullets=tuple(bullets))

        logger.debug(
            "pagination_advanced",
            sign=sign,
            current_index=current_index,
            active_index=active_index,
            scrolled=scroll,
        )

        return PaginationStep(
            current_index=current_index,
            active_index=active_index,
            evicted=remove_index,
            evicted_key=evicted_key,
            inserted=inserted,
            updated=updates,
        )

    def _map_active_index(self, index: int) -> int:
        return map_active_index(index, self._center_index, self._bullet_count, self._total_items)

    def _create_bullet(self, slot_index: int, real_index: int, is_active: bool = False) -> Bullet:
        bullet = Bullet(
            key=self._next_key,
            slot_index=slot_index,
            real_index=real_index,
            is_active=is_active,
            is_edge=is_edge_bullet(slot_index, real_index, self._bullet_count, self._total_items),
            position=slot_index * self._diameter,
        )
        self._next_key += 1
        return bullet
