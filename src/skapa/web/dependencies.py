"""FastAPI dependency injection for box services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from skapa.application import BoxRegenerator, ComputeLimitsCommand, GenerateBoxCommand


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateBoxCommand:
    """Get the shared GenerateBoxCommand; its kernel is set up on first use."""
    return GenerateBoxCommand()


@lru_cache(maxsize=1)
def get_limits_command() -> ComputeLimitsCommand:
    return ComputeLimitsCommand()


@lru_cache(maxsize=1)
def get_regenerator() -> BoxRegenerator:
    """Get the regenerator behind the live preview; it shares the generate command."""
    return BoxRegenerator(get_generate_command())


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateBoxCommand, Depends(get_generate_command)]
LimitsCommandDep = Annotated[ComputeLimitsCommand, Depends(get_limits_command)]
RegeneratorDep = Annotated[BoxRegenerator, Depends(get_regenerator)]
