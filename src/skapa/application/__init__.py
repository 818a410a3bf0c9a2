"""Application layer - use cases and DTOs."""

from .commands import (
    BoxGenerationError,
    BoxRegenerator,
    ComputeLimitsCommand,
    GenerateBoxCommand,
)
from .dtos import BoxInput, BoxOutput, LimitsOutput, OpenFrontInput

__all__ = [
    "BoxGenerationError",
    "BoxInput",
    "BoxOutput",
    "BoxRegenerator",
    "ComputeLimitsCommand",
    "GenerateBoxCommand",
    "LimitsOutput",
    "OpenFrontInput",
]
