"""Parameter limit endpoints."""

from fastapi import APIRouter

from skapa.application import BoxGenerationError
from skapa.application.config import config_to_box_input
from skapa.web.dependencies import LimitsCommandDep
from skapa.web.exceptions import error_responses
from skapa.web.schemas.requests import BoxRequest
from skapa.web.schemas.responses import LimitsOutputSchema

router = APIRouter(prefix="/limits", tags=["limits"])


@router.post("", response_model=LimitsOutputSchema, responses=error_responses(422))
async def compute_limits(
    request: BoxRequest,
    command: LimitsCommandDep,
) -> LimitsOutputSchema:
    """Return the valid ranges of corner radius, bottom offset and cutout radius.

    Front ends use these bounds for their sliders. Without an opening in
    the request the cutout bound is given for the default opening.
    """
    result = command.execute(config_to_box_input(request.to_configuration()))
    if not result.is_valid:
        raise BoxGenerationError(result.errors)
    return LimitsOutputSchema(
        max_corner_radius=result.max_corner_radius,
        max_bottom_offset=result.max_bottom_offset,
        max_cutout_radius=result.max_cutout_radius,
        openness=result.openness,
        bottom_offset=result.bottom_offset,
        clip_columns=result.clip_columns,
        clip_rows=result.clip_rows,
    )
