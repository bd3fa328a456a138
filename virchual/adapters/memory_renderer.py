"""In-memory implementation of the renderer protocols.

Keeps the displayed state of a carousel in plain Python structures: which
slides are mounted and in what order, where they sit, and the ordered bullet
strip. Used for headless runs and tests.
"""

from dataclasses import replace

from virchual.core.pagination import Bullet, SlotUpdate


class MemoryRenderer:
    """In-memory implementation of CarouselRenderer.

    Example:
        renderer = MemoryRenderer()
        carousel = Carousel(slides, renderer=renderer)
        carousel.mount()
        assert renderer.mounted == [9, 0, 1]
    """

    def __init__(self) -> None:
        """Initialize the renderer with nothing displayed."""
        # Mounted slide indices in display order
        self.mounted: list[int] = []
        self.positions: dict[int, int] = {}
        self.translations: dict[int, float] = {}
        self.active_slide: int | None = None

        # Bullet strip in display order
        self.bullets: list[Bullet] = []
        self.strip_size: tuple[int, int] | None = None

    def mount_slide(self, index: int, position: int, prepend: bool) -> None:
        if index not in self.positions:
            if prepend:
                self.mounted.insert(0, index)
            else:
                self.mounted.append(index)
        self.positions[index] = position
        self.translations.pop(index, None)

    def unmount_slide(self, index: int) -> None:
        if index in self.positions:
            self.mounted.remove(index)
            del self.positions[index]
        self.translations.pop(index, None)
        if self.active_slide == index:
            self.active_slide = None

    def translate_slide(self, index: int, offset: float) -> None:
        self.translations[index] = offset

    def set_slide_active(self, index: int, is_active: bool) -> None:
        if is_active:
            self.active_slide = index
        elif self.active_slide == index:
            self.active_slide = None

    def render_bullets(self, bullets: list[Bullet], width: int, height: int) -> None:
        self.bullets = list(bullets)
        self.strip_size = (width, height)

    def remove_bullet(self, key: int) -> None:
        self.bullets = [bullet for bullet in self.bullets if bullet.key != key]

    def update_bullet(self, update: SlotUpdate) -> None:
        for i, bullet in enumerate(self.bullets):
            if bullet.key == update.key:
                self.bullets[i] = replace(
                    bullet,
                    slot_index=update.slot_index,
                    real_index=update.real_index,
                    is_active=update.is_active,
                    is_edge=update.is_edge,
                    position=bullet.position if update.position is None else update.position,
                )
                return
        raise KeyError(f"No bullet with key {update.key}")

    def insert_bullet(self, bullet: Bullet, at_start: bool) -> None:
        if at_start:
            self.bullets.insert(0, bullet)
        else:
            self.bullets.append(bullet)

    @property
    def active_bullet(self) -> Bullet | None:
        return next((bullet for bullet in self.bullets if bullet.is_active), None)
