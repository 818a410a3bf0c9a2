"""Unit tests for the clip profile and the clip solids."""

import pytest

from skapa.domain import CLIP_HEIGHT, SolidKernel
from skapa.domain.services.clip_profile import CLIP_PROFILE, clip_cross_section, clips


class TestClips:
    """Tests for the clip profile and solids."""

    def test_profile_sits_behind_origin(self, kernel: SolidKernel) -> None:
        x_min, y_min, x_max, y_max = clip_cross_section(kernel).bounds()

        assert y_max == pytest.approx(0.0)
        assert y_min == pytest.approx(-6.5)
        assert x_max == pytest.approx(-0.95)
        assert x_min == pytest.approx(-3.05)

    def test_pair_is_mirrored(self, kernel: SolidKernel) -> None:
        left, right = clips(kernel)
        lx_min, _, _, lx_max, _, _ = left.bounding_box()
        rx_min, _, _, rx_max, _, _ = right.bounding_box()

        assert lx_min == pytest.approx(-rx_max)
        assert lx_max == pytest.approx(-rx_min)
        assert left.volume() == pytest.approx(right.volume())

    def test_clip_height(self, kernel: SolidKernel) -> None:
        _, right = clips(kernel)
        _, _, z_min, _, _, z_max = right.bounding_box()

        assert (z_min, z_max) == pytest.approx((0.0, CLIP_HEIGHT))

    def test_chamfer_removes_overhang(self, kernel: SolidKernel) -> None:
        _, plain = clips(kernel)
        _, chamfered = clips(kernel, chamfer=True)

        assert chamfered.volume() < plain.volume()
        assert chamfered.bounding_box()[5] == pytest.approx(CLIP_HEIGHT)

    def test_profile_is_closed_polygon(self) -> None:
        assert len(CLIP_PROFILE) == 7
        assert CLIP_PROFILE[0][1] == CLIP_PROFILE[1][1] == 0.0
