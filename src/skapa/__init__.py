"""Parametric generator for 3D-printable wall-mount storage boxes.

Quick start:
    >>> import asyncio
    >>> from skapa import CornerRadii, SolidKernel, box
    >>> kernel = SolidKernel().setup()
    >>> solid = asyncio.run(
    ...     box(kernel, height=52, width=80, depth=60,
    ...         radii=CornerRadii.uniform(6), wall=2, bottom=3)
    ... )
"""

from skapa.domain import (
    BoxAssembler,
    BoxParameters,
    CornerRadii,
    GeometricLimitCalculator,
    OpenFrontParams,
    SolidKernel,
    box,
    height_for_levels,
    open_kernel,
)

__version__ = "0.1.0"

__all__ = [
    "BoxAssembler",
    "BoxParameters",
    "CornerRadii",
    "GeometricLimitCalculator",
    "OpenFrontParams",
    "SolidKernel",
    "__version__",
    "box",
    "height_for_levels",
    "open_kernel",
]
