"""Ports (interfaces) between the carousel core and the UI layer."""

from virchual.ports.renderer import BulletRenderer, CarouselRenderer, SlideRenderer

__all__ = [
    "BulletRenderer",
    "CarouselRenderer",
    "SlideRenderer",
]
