"""Renderer protocols.

The carousel core works on plain data (slide actions, bullets). A renderer
reconciles that data with whatever UI toolkit displays the carousel. No
toolkit types cross this boundary.
"""

from typing import Protocol

from virchual.core.pagination import Bullet, SlotUpdate


class SlideRenderer(Protocol):
    """Protocol for displaying slides."""

    def mount_slide(self, index: int, position: int, prepend: bool) -> None:
        """Show a slide, or move it if it is already shown.

        Args:
            index: Slide index.
            position: Horizontal offset in percent of the frame width.
            prepend: Insert before the other mounted slides instead of after.
        """
        ...

    def unmount_slide(self, index: int) -> None:
        """Remove a slide from display."""
        ...

    def translate_slide(self, index: int, offset: float) -> None:
        """Move a mounted slide by ``offset`` while dragging or transitioning."""
        ...

    def set_slide_active(self, index: int, is_active: bool) -> None:
        """Mark a slide as the current one."""
        ...


class BulletRenderer(Protocol):
    """Protocol for displaying the pagination strip."""

    def render_bullets(self, bullets: list[Bullet], width: int, height: int) -> None:
        """Create the strip with its initial bullets.

        Args:
            bullets: Bullets in strip order.
            width: Strip width in px.
            height: Strip height in px.
        """
        ...

    def remove_bullet(self, key: int) -> None:
        """Remove the bullet with the given key."""
        ...

    def update_bullet(self, update: SlotUpdate) -> None:
        """Apply flags and, if set, a new position to an existing bullet."""
        ...

    def insert_bullet(self, bullet: Bullet, at_start: bool) -> None:
        """Add a bullet at the start or end of the strip."""
        ...


class CarouselRenderer(SlideRenderer, BulletRenderer, Protocol):
    """Renderer handling both slides and pagination."""
