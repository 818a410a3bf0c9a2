"""Unit tests for the clip grid layout."""

import pytest

from skapa.domain import BoxParameters, ClipGrid, ClipLayoutService, CornerRadii


@pytest.fixture
def service() -> ClipLayoutService:
    return ClipLayoutService()


class TestClipGrid:
    """Tests for ClipLayoutService.grid and ClipGrid."""

    def test_default_box_grid(
        self, service: ClipLayoutService, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        grid = service.grid(default_box, default_radii)

        assert (grid.columns, grid.rows) == (2, 2)
        assert grid.x(0) == pytest.approx(-20.0)
        assert grid.x(1) == pytest.approx(20.0)
        assert grid.z(1) == 40.0

    def test_larger_box_grid(self, service: ClipLayoutService, default_radii: CornerRadii) -> None:
        box = BoxParameters(height=92.0, width=130.0, depth=60.0, wall=2.0, bottom=3.0)
        grid = service.grid(box, default_radii)

        assert (grid.columns, grid.rows) == (3, 3)
        assert [grid.x(c) for c in range(3)] == pytest.approx([-40.0, 0.0, 40.0])

    def test_narrow_box_has_no_columns(self, service: ClipLayoutService) -> None:
        box = BoxParameters(height=52.0, width=20.0, depth=30.0, wall=2.0, bottom=3.0)
        grid = service.grid(box, CornerRadii.uniform(6.0))

        assert grid.columns == 0
        assert grid.placements() == []

    def test_short_box_has_one_row(self, service: ClipLayoutService, default_radii: CornerRadii) -> None:
        box = BoxParameters(height=12.0, width=80.0, depth=60.0, wall=2.0, bottom=3.0)

        assert service.grid(box, default_radii).rows == 1

    def test_asymmetric_back_radii_shift_grid(self, service: ClipLayoutService) -> None:
        """Columns stay centred on the straight part of the back face."""
        box = BoxParameters(height=52.0, width=120.0, depth=60.0, wall=2.0, bottom=3.0)
        radii = CornerRadii(front_left=6.0, front_right=6.0, back_left=20.0, back_right=0.0)
        grid = service.grid(box, radii)

        assert grid.center_x == 10.0
        flat_start, flat_end = -60.0 + 20.0, 60.0
        first, last = grid.x(0), grid.x(grid.columns - 1)
        assert first - flat_start == pytest.approx(flat_end - last)


class TestClipPlacements:
    """Tests for ClipGrid.placements."""

    @pytest.fixture
    def grid(self) -> ClipGrid:
        return ClipGrid(columns=3, rows=3, center_x=0.0)

    def test_full_grid(self, grid: ClipGrid) -> None:
        assert len(grid.placements()) == 9

    def test_corner_clips_only(self, grid: ClipGrid) -> None:
        placements = grid.placements(corner_clips_only=True)

        assert {(p.column, p.row) for p in placements} == {(0, 0), (0, 2), (2, 0), (2, 2)}

    def test_lowest_row_is_not_chamfered(self, grid: ClipGrid) -> None:
        for placement in grid.placements():
            assert placement.chamfer == (placement.row > 0)

    def test_single_column_is_its_own_corner(self) -> None:
        grid = ClipGrid(columns=1, rows=3, center_x=0.0)

        assert [(p.column, p.row) for p in grid.placements(True)] == [(0, 0), (0, 2)]

    def test_corner_only_matches_full_on_two_by_two(self) -> None:
        grid = ClipGrid(columns=2, rows=2, center_x=0.0)

        assert grid.placements(True) == grid.placements(False)


class TestBackFlatAllowance:
    """Tests for ClipLayoutService.back_flat_allowance."""

    def test_default_box(
        self, service: ClipLayoutService, default_box: BoxParameters, default_radii: CornerRadii
    ) -> None:
        grid = service.grid(default_box, default_radii)

        # back flat ends 34 mm from centre, outer clip edge at 23.05 mm
        for side in ("left", "right"):
            assert service.back_flat_allowance(
                default_box, default_radii, grid, side
            ) == pytest.approx(9.95)

    def test_without_clips_reaches_back_centre(self, service: ClipLayoutService) -> None:
        box = BoxParameters(height=52.0, width=20.0, depth=30.0, wall=2.0, bottom=3.0)
        radii = CornerRadii.uniform(6.0)
        grid = service.grid(box, radii)

        assert service.back_flat_allowance(box, radii, grid, "left") == pytest.approx(3.0)

    def test_never_negative(self, service: ClipLayoutService) -> None:
        box = BoxParameters(height=52.0, width=60.0, depth=30.0, wall=2.0, bottom=3.0)
        radii = CornerRadii.uniform(10.0)
        grid = service.grid(box, radii)

        assert service.back_flat_allowance(box, radii, grid, "right") >= 0.0
