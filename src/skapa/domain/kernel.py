"""Handle over the manifold3d solid-modeling kernel.

The generator never imports manifold3d globals on its own: it receives a
`SolidKernel` at construction. The handle performs the kernel's one-time
setup under a lock, so several generators (or threads) can share it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from manifold3d import CrossSection, Manifold, set_circular_segments

from .value_objects import Point2D

logger = logging.getLogger(__name__)


class SolidKernel:
    """Explicitly initialized entry point to the 2D/3D kernel.

    Attributes:
        circular_segments: Segment count the kernel uses for its own circular
            primitives. The generator tessellates its arcs itself, so this
            only affects kernel-built circles.
    """

    def __init__(self, circular_segments: int = 64) -> None:
        self.circular_segments = circular_segments
        self._ready = False
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    def setup(self) -> SolidKernel:
        """Run the kernel's one-time setup. Safe to call more than once."""
        with self._lock:
            if not self._ready:
                set_circular_segments(self.circular_segments)
                self._ready = True
                logger.debug(
                    f"Solid kernel ready (circular_segments={self.circular_segments})"
                )
        return self

    def _require_ready(self) -> None:
        if not self._ready:
            raise RuntimeError("SolidKernel.setup() must be called before use")

    def cross_section(self, points: Sequence[Point2D]) -> CrossSection:
        """Closed polygon from an ordered (CCW) point list."""
        self._require_ready()
        return CrossSection([[(float(x), float(y)) for x, y in points]])

    def empty(self) -> Manifold:
        self._require_ready()
        return Manifold()


@contextmanager
def open_kernel(kernel: SolidKernel | None = None) -> Iterator[SolidKernel]:
    """Yield a set-up kernel handle, creating one if none is given."""
    handle = kernel or SolidKernel()
    yield handle.setup()
