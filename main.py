"""Entry point for a headless carousel demo."""

from virchual.adapters import MemoryRenderer
from virchual.core.carousel_logic import Carousel
from virchual.core.logging import configure_logging, get_logger
from virchual.core.options import CarouselOptions

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)

DEMO_SLIDES = 10


def describe_strip(renderer: MemoryRenderer) -> str:
    """Render the bullet strip as text, e.g. ``o O o o <``."""
    marks = []
    for bullet in renderer.bullets:
        if bullet.is_active:
            marks.append("O")
        elif bullet.is_edge:
            marks.append("<" if bullet.slot_index == 0 else ">")
        else:
            marks.append("o")
    return " ".join(marks)


def main() -> None:
    """Step a demo carousel forward around the ring and back again."""
    renderer = MemoryRenderer()
    carousel = Carousel(
        [f"slide-{i}" for i in range(DEMO_SLIDES)],
        options=CarouselOptions.from_env(),
        renderer=renderer,
    )
    carousel.mount()
    logger.info("demo_mounted", slides=renderer.mounted, strip=describe_strip(renderer))

    for step in (carousel.next,) * DEMO_SLIDES + (carousel.prev,) * 3:
        transition = step()
        carousel.settle()
        logger.info(
            "demo_step",
            direction=transition.direction.value,
            current_index=transition.current_index,
            slides=renderer.mounted,
            strip=describe_strip(renderer),
        )


if __name__ == "__main__":
    main()
