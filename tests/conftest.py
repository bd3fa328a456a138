"""Shared pytest fixtures for virchual tests."""

import pytest

from virchual.adapters.memory_renderer import MemoryRenderer
from virchual.core.carousel_logic import Carousel


@pytest.fixture
def slides() -> list[str]:
    """Provide ten named slides.

    Returns:
        list[str]: ``slide-0`` through ``slide-9``.
    """
    return [f"slide-{i}" for i in range(10)]


@pytest.fixture
def renderer() -> MemoryRenderer:
    """Provide a fresh in-memory renderer.

    Returns:
        MemoryRenderer: A renderer with nothing displayed.
    """
    return MemoryRenderer()


@pytest.fixture
def carousel(slides: list[str], renderer: MemoryRenderer) -> Carousel[str]:
    """Provide a mounted carousel with default options.

    The carousel renders into the ``renderer`` fixture, so tests can inspect
    both the carousel state and what is displayed.

    Returns:
        Carousel[str]: A mounted carousel positioned on slide 0.
    """
    instance: Carousel[str] = Carousel(slides, renderer=renderer)
    instance.mount()
    return instance
