"""Tests for the box assembler and the async entry point."""

import pytest
from manifold3d import Manifold

from skapa.domain import (
    BoxAssembler,
    BoxParameters,
    CornerRadii,
    GeometricLimitCalculator,
    OpenFrontParams,
    SolidKernel,
    box,
)

pytestmark = pytest.mark.slow


def material_near(solid: Manifold, x: float, y: float, z: float) -> float:
    """Volume of `solid` inside a 0.4 mm cube centred on a point."""
    return (solid ^ Manifold.cube((0.4, 0.4, 0.4), True).translate((x, y, z))).volume()


@pytest.fixture
def assembler(kernel: SolidKernel) -> BoxAssembler:
    return BoxAssembler(kernel)


class TestBase:
    """Tests for the clip-less shell."""

    def test_shell_bounds(
        self, assembler: BoxAssembler, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        solid = assembler.base(default_box, default_radii)

        assert solid.bounding_box() == pytest.approx((-40.0, -30.0, 0.0, 40.0, 30.0, 52.0))

    def test_shell_volume(
        self, assembler: BoxAssembler, default_box: BoxParameters
    ) -> None:
        """With sharp corners the shell is outer block minus the pocket."""
        solid = assembler.base(default_box, CornerRadii.uniform(0.0))
        expected = 80 * 60 * 52 - 76 * 56 * 49

        assert solid.volume() == pytest.approx(expected, rel=1e-6)

    def test_inner_corners_follow_outer_radii(
        self, assembler: BoxAssembler, default_box: BoxParameters
    ) -> None:
        sharp = assembler.base(default_box, CornerRadii.uniform(0.0)).volume()
        rounded = assembler.base(default_box, CornerRadii.uniform(10.0)).volume()

        # rounding removes less from the shell than from the block
        assert rounded < sharp

    def test_open_front_removes_material(
        self, assembler: BoxAssembler, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        closed = assembler.base(default_box, default_radii)
        opened = assembler.base(
            default_box,
            default_radii,
            OpenFrontParams(openness=0.5, bottom_offset=10.0, cutout_radius=6.0),
        )

        assert opened.volume() < closed.volume()


class TestBuild:
    """Tests for the full box with clips."""

    def test_default_box(
        self, assembler: BoxAssembler, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        solid = assembler.build(default_box, default_radii)
        x_min, y_min, z_min, x_max, y_max, z_max = solid.bounding_box()

        assert solid.volume() > 0
        assert solid.num_tri() > 0
        assert (x_min, x_max) == pytest.approx((-40.0, 40.0))
        assert (z_min, z_max) == pytest.approx((0.0, 52.0))
        assert y_max == pytest.approx(30.0)
        # clips hang 6.5 mm behind the back face
        assert y_min == pytest.approx(-36.5)

    def test_clips_add_volume(
        self, assembler: BoxAssembler, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        shell = assembler.base(default_box, default_radii).volume()
        full = assembler.build(default_box, default_radii).volume()

        assert full > shell

    def test_corner_clips_only_uses_less_material(
        self, assembler: BoxAssembler, default_radii: CornerRadii
    ) -> None:
        tall = BoxParameters(height=92.0, width=130.0, depth=60.0, wall=2.0, bottom=3.0)
        all_clips = assembler.build(tall, default_radii, corner_clips_only=False)
        corners = assembler.build(tall, default_radii, corner_clips_only=True)

        assert corners.volume() < all_clips.volume()

    def test_open_front_box(
        self, assembler: BoxAssembler, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        params = OpenFrontParams(openness=0.5, bottom_offset=10.0, cutout_radius=6.0)
        closed = assembler.build(default_box, default_radii)
        opened = assembler.build(default_box, default_radii, params)

        assert 0 < opened.volume() < closed.volume()
        assert opened.bounding_box()[5] == pytest.approx(52.0)

    def test_asymmetric_radii(self, assembler: BoxAssembler, default_box: BoxParameters) -> None:
        radii = CornerRadii(front_left=2.0, front_right=20.0, back_left=10.0, back_right=0.0)
        params = OpenFrontParams(openness=0.8, bottom_offset=10.0, cutout_radius=6.0)
        solid = assembler.build(default_box, radii, params)

        assert solid.volume() > 0
        assert solid.bounding_box()[0] == pytest.approx(-40.0)


class TestTightCorners:
    """Openings bent around corners sharper than the wall."""

    def test_sharp_front_corner_is_opened_like_the_round_one(
        self, assembler: BoxAssembler, default_box: BoxParameters
    ) -> None:
        radii = CornerRadii(front_left=0.0, front_right=6.0, back_left=6.0, back_right=6.0)
        params = GeometricLimitCalculator().clamp_open_front(default_box, radii, 0.8, 10.0, 6.0)
        solid = assembler.build(default_box, radii, params)

        left = material_near(solid, -39.0, 0.0, 40.0)
        right = material_near(solid, 39.0, 0.0, 40.0)

        assert right == pytest.approx(0.0, abs=1e-6)
        assert left == pytest.approx(right, abs=1e-6)

    @pytest.mark.parametrize(
        ("dimensions", "radii", "openness"),
        [
            ((52.0, 80.0, 60.0), CornerRadii.uniform(0.0), 0.9),
            ((52.0, 80.0, 60.0), CornerRadii.uniform(1.0), 0.9),
            ((52.0, 80.0, 60.0), CornerRadii.uniform(2.0), 0.9),
            ((92.0, 150.0, 80.0), CornerRadii(3.0, 20.0, 15.0, 2.0), 0.97),
        ],
    )
    def test_single_closed_solid(
        self,
        assembler: BoxAssembler,
        dimensions: tuple[float, float, float],
        radii: CornerRadii,
        openness: float,
    ) -> None:
        height, width, depth = dimensions
        params = BoxParameters(height=height, width=width, depth=depth, wall=2.0, bottom=3.0)
        opening = GeometricLimitCalculator().clamp_open_front(params, radii, openness, 10.0, 6.0)
        solid = assembler.build(params, radii, opening)

        parts = solid.decompose()
        assert len(parts) == 1
        assert solid.volume() > 0
        assert solid.genus() == 0


class TestAsyncBox:
    """Tests for the async `box` entry point."""

    @pytest.mark.asyncio
    async def test_box_with_single_radius(self, kernel: SolidKernel) -> None:
        solid = await box(kernel, height=52.0, width=80.0, depth=60.0, radii=6.0, wall=2.0, bottom=3.0)

        assert solid.volume() > 0
        assert solid.bounding_box()[5] == pytest.approx(52.0)

    @pytest.mark.asyncio
    async def test_box_matches_assembler(self, kernel: SolidKernel, default_box: BoxParameters) -> None:
        radii = CornerRadii(front_left=4.0, front_right=8.0, back_left=6.0, back_right=6.0)
        params = OpenFrontParams(openness=0.4, bottom_offset=5.0, cutout_radius=3.0)

        solid = await box(
            kernel,
            height=52.0,
            width=80.0,
            depth=60.0,
            radii=radii,
            wall=2.0,
            bottom=3.0,
            open_front=params,
            corner_clips_only=True,
        )
        expected = BoxAssembler(kernel).build(default_box, radii, params, True)

        assert solid.volume() == pytest.approx(expected.volume())

    @pytest.mark.asyncio
    async def test_box_sets_up_kernel(self) -> None:
        fresh = SolidKernel()
        await box(fresh, height=12.0, width=40.0, depth=30.0, radii=0.0, wall=1.0, bottom=1.0)

        assert fresh.is_ready
