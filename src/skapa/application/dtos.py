"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from manifold3d import Manifold

from skapa.domain import (
    BoxParameters,
    ClipPlacement,
    CornerRadii,
    OpenFrontParams,
)

MAX_WIDTH = 204.0
MAX_DEPTH = 204.0
MAX_HEIGHT = 400.0


@dataclass
class OpenFrontInput:
    """Input DTO for the front opening. Openness is a fraction."""

    openness: float = 0.5
    bottom_offset: float = 10.0
    cutout_radius: float = 6.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages.

        Openness outside [0.05, 1] is not an error; generation clamps it.
        """
        errors: list[str] = []
        if self.bottom_offset < 0:
            errors.append("Bottom offset cannot be negative")
        if self.cutout_radius < 0:
            errors.append("Cutout radius cannot be negative")
        return errors


@dataclass
class BoxInput:
    """Input DTO for one box, outer dimensions in millimetres."""

    height: float
    width: float
    depth: float
    radius_front_left: float = 6.0
    radius_front_right: float = 6.0
    radius_back_left: float = 6.0
    radius_back_right: float = 6.0
    wall: float = 2.0
    bottom: float = 3.0
    open_front: OpenFrontInput | None = None
    corner_clips_only: bool = True

    @classmethod
    def with_radius(cls, height: float, width: float, depth: float, radius: float, **kwargs) -> BoxInput:
        """Same corner radius everywhere."""
        return cls(
            height=height,
            width=width,
            depth=depth,
            radius_front_left=radius,
            radius_front_right=radius,
            radius_back_left=radius,
            radius_back_right=radius,
            **kwargs,
        )

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.depth <= 0:
            errors.append("Depth must be positive")
        if self.height > MAX_HEIGHT:
            errors.append(f"Height exceeds maximum ({MAX_HEIGHT:g} mm)")
        if self.width > MAX_WIDTH:
            errors.append(f"Width exceeds maximum ({MAX_WIDTH:g} mm)")
        if self.depth > MAX_DEPTH:
            errors.append(f"Depth exceeds maximum ({MAX_DEPTH:g} mm)")
        if self.wall <= 0:
            errors.append("Wall thickness must be positive")
        if self.bottom <= 0:
            errors.append("Bottom thickness must be positive")
        if self.width > 0 and self.wall * 2 >= self.width:
            errors.append("Walls leave no room inside the box (width)")
        if self.depth > 0 and self.wall * 2 >= self.depth:
            errors.append("Walls leave no room inside the box (depth)")
        if self.height > 0 and self.bottom >= self.height:
            errors.append("Bottom thickness must be less than the height")
        if min(self.corner_radii_tuple) < 0:
            errors.append("Corner radii cannot be negative")
        if self.open_front is not None:
            errors.extend(self.open_front.validate())
        return errors

    @property
    def corner_radii_tuple(self) -> tuple[float, float, float, float]:
        return (
            self.radius_front_left,
            self.radius_front_right,
            self.radius_back_left,
            self.radius_back_right,
        )

    def to_box_parameters(self) -> BoxParameters:
        return BoxParameters(
            height=self.height,
            width=self.width,
            depth=self.depth,
            wall=self.wall,
            bottom=self.bottom,
        )

    def to_corner_radii(self) -> CornerRadii:
        return CornerRadii(*self.corner_radii_tuple)


@dataclass
class BoxOutput:
    """Output DTO containing the generated box.

    Attributes:
        solid: Final solid, None when generation failed.
        box: Box dimensions used for the build.
        radii: Corner radii after clamping.
        open_front: Opening parameters after clamping, None if closed.
        clips: Clip pairs placed on the back face.
        errors: Error messages if generation failed.
    """

    solid: Manifold | None
    box: BoxParameters | None = None
    radii: CornerRadii | None = None
    open_front: OpenFrontParams | None = None
    clips: list[ClipPlacement] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.solid is not None

    @property
    def file_stem(self) -> str:
        """Download name, e.g. "skapa-80-60-52-open"."""
        if self.box is None:
            return "skapa"
        suffix = "-open" if self.open_front is not None else ""
        return f"skapa-{self.box.width:g}-{self.box.depth:g}-{self.box.height:g}{suffix}"

    def summary(self) -> dict:
        """Plain-data description of the build, for JSON output."""
        data: dict = {"valid": self.is_valid, "errors": list(self.errors)}
        if self.box is not None:
            data["box"] = {
                "height": self.box.height,
                "width": self.box.width,
                "depth": self.box.depth,
                "wall": self.box.wall,
                "bottom": self.box.bottom,
            }
        if self.radii is not None:
            data["corner_radii"] = {
                "front_left": self.radii.front_left,
                "front_right": self.radii.front_right,
                "back_left": self.radii.back_left,
                "back_right": self.radii.back_right,
            }
        if self.open_front is not None:
            data["open_front"] = {
                "openness": self.open_front.openness,
                "bottom_offset": self.open_front.bottom_offset,
                "cutout_radius": self.open_front.cutout_radius,
            }
        data["clip_pairs"] = len(self.clips)
        if self.solid is not None:
            bounds = self.solid.bounding_box()
            data["mesh"] = {
                "volume": self.solid.volume(),
                "triangles": self.solid.num_tri(),
                "vertices": self.solid.num_vert(),
                "bounding_box": {"min": list(bounds[:3]), "max": list(bounds[3:])},
            }
        return data


@dataclass
class LimitsOutput:
    """Valid ranges of the tunable values for one box.

    The cutout radius bound depends on the opening, so it is reported for
    the openness and bottom offset actually used (after clamping).
    """

    max_corner_radius: float = 0.0
    max_bottom_offset: float = 0.0
    max_cutout_radius: float = 0.0
    openness: float = 0.0
    bottom_offset: float = 0.0
    clip_columns: int = 0
    clip_rows: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
