"""STL export functionality using numpy-stl."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from manifold3d import Manifold
from stl import Mode, mesh

logger = logging.getLogger(__name__)


class StlMeshBuilder:
    """Builds numpy-stl meshes from kernel solids.

    Single Responsibility: converts the kernel's indexed triangle mesh into
    the flat triangle list numpy-stl stores.

    The box is modelled Z-up, which is what slicers expect. Viewers that
    assume Y-up can be served by setting `y_up`, which swaps the axes
    (x, y, z) -> (x, z, -y) so the part is rotated rather than mirrored.
    """

    def __init__(self, y_up: bool = False) -> None:
        self.y_up = y_up

    def triangles(self, solid: Manifold) -> np.ndarray:
        """(n, 3, 3) array of triangle vertex positions."""
        kernel_mesh = solid.to_mesh()
        positions = np.asarray(kernel_mesh.vert_properties, dtype=np.float64)[:, :3]
        faces = np.asarray(kernel_mesh.tri_verts, dtype=np.int64)
        if self.y_up:
            positions = np.column_stack(
                (positions[:, 0], positions[:, 2], -positions[:, 1])
            )
        return positions[faces]

    def build_mesh(self, solid: Manifold) -> mesh.Mesh:
        """Create an STL mesh for a solid."""
        triangles = self.triangles(solid)
        stl_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        if len(triangles):
            stl_mesh.vectors[:] = triangles
        return stl_mesh


class StlExporter:
    """Exports box solids to binary STL.

    Dependency Inversion: the mesh builder can be swapped, e.g. for a Y-up
    variant, without touching the export logic.
    """

    def __init__(self, mesh_builder: StlMeshBuilder | None = None) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def export(self, solid: Manifold) -> mesh.Mesh:
        return self.mesh_builder.build_mesh(solid)

    def export_to_file(self, solid: Manifold, filepath: Path | str) -> None:
        """Write a solid to a binary STL file."""
        stl_mesh = self.export(solid)
        stl_mesh.save(str(filepath), mode=Mode.BINARY)
        logger.info(f"Wrote {len(stl_mesh.vectors)} triangles to {filepath}")

    def export_bytes(self, solid: Manifold, name: str = "skapa") -> bytes:
        """Binary STL contents of a solid."""
        buffer = io.BytesIO()
        self.export(solid).save(f"{name}.stl", fh=buffer, mode=Mode.BINARY)
        return buffer.getvalue()
