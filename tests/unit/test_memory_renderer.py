"""Tests for the in-memory renderer."""

import pytest

from virchual.adapters.memory_renderer import MemoryRenderer
from virchual.core.pagination import Bullet, SlotUpdate


def make_bullet(key: int, slot_index: int, **overrides) -> Bullet:
    values = {
        "key": key,
        "slot_index": slot_index,
        "real_index": slot_index,
        "is_active": False,
        "is_edge": False,
        "position": slot_index * 16,
    }
    values.update(overrides)
    return Bullet(**values)


class TestSlides:
    def test_mount_appends_and_prepends(self):
        renderer = MemoryRenderer()
        renderer.mount_slide(1, 0, prepend=False)
        renderer.mount_slide(2, 100, prepend=False)
        renderer.mount_slide(0, -100, prepend=True)

        assert renderer.mounted == [0, 1, 2]

    def test_remount_moves_in_place(self):
        renderer = MemoryRenderer()
        renderer.mount_slide(1, 0, prepend=False)
        renderer.translate_slide(1, -40)

        renderer.mount_slide(1, -100, prepend=True)

        assert renderer.mounted == [1]
        assert renderer.positions == {1: -100}
        assert renderer.translations == {}

    def test_unmount(self):
        renderer = MemoryRenderer()
        renderer.mount_slide(3, 0, prepend=False)
        renderer.set_slide_active(3, True)

        renderer.unmount_slide(3)
        renderer.unmount_slide(4)

        assert renderer.mounted == []
        assert renderer.active_slide is None

    def test_active_slide(self):
        renderer = MemoryRenderer()
        renderer.set_slide_active(2, True)
        renderer.set_slide_active(1, False)
        assert renderer.active_slide == 2


class TestBullets:
    def test_render_and_insert(self):
        renderer = MemoryRenderer()
        renderer.render_bullets([make_bullet(0, 0), make_bullet(1, 1)], 32, 16)
        renderer.insert_bullet(make_bullet(2, 0), at_start=True)
        renderer.insert_bullet(make_bullet(3, 3), at_start=False)

        assert [b.key for b in renderer.bullets] == [2, 0, 1, 3]
        assert renderer.strip_size == (32, 16)

    def test_update_keeps_position_when_unset(self):
        renderer = MemoryRenderer()
        renderer.render_bullets([make_bullet(0, 1)], 16, 16)

        renderer.update_bullet(
            SlotUpdate(key=0, slot_index=0, real_index=4, is_active=True, is_edge=True)
        )

        bullet = renderer.bullets[0]
        assert bullet.slot_index == 0
        assert bullet.real_index == 4
        assert bullet.position == 16
        assert renderer.active_bullet is bullet

    def test_update_unknown_bullet(self):
        renderer = MemoryRenderer()
        with pytest.raises(KeyError):
            renderer.update_bullet(
                SlotUpdate(key=9, slot_index=0, real_index=0, is_active=False, is_edge=False)
            )

    def test_remove(self):
        renderer = MemoryRenderer()
        renderer.render_bullets([make_bullet(0, 0), make_bullet(1, 1)], 32, 16)
        renderer.remove_bullet(0)
        assert [b.key for b in renderer.bullets] == [1]
