"""Box generation endpoints."""

from fastapi import APIRouter

from skapa.application import BoxGenerationError, BoxOutput
from skapa.application.config import config_to_box_input, load_config_from_dict
from skapa.web.dependencies import GenerateCommandDep, RegeneratorDep
from skapa.web.exceptions import SupersededRequestError, error_responses
from skapa.web.schemas.requests import BoxRequest, GenerateFromConfigRequest
from skapa.web.schemas.responses import BoxOutputSchema

router = APIRouter(prefix="/generate", tags=["generate"])


def box_output_to_schema(output: BoxOutput) -> BoxOutputSchema:
    """Convert BoxOutput to response schema."""
    summary = output.summary()
    return BoxOutputSchema(
        is_valid=summary["valid"],
        errors=summary["errors"],
        box=summary.get("box"),
        corner_radii=summary.get("corner_radii"),
        open_front=summary.get("open_front"),
        clip_pairs=summary["clip_pairs"],
        mesh=summary.get("mesh"),
    )


@router.post("", response_model=BoxOutputSchema, responses=error_responses(422))
async def generate_box(
    request: BoxRequest,
    command: GenerateCommandDep,
) -> BoxOutputSchema:
    """Generate a box and return a summary of the result.

    Out-of-range radii and opening values are clamped; the response holds
    the values actually used.

    Raises:
        BoxGenerationError: If the dimensions are unusable (422).
    """
    box_input = config_to_box_input(request.to_configuration())
    output = await command.execute_async(box_input)
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return box_output_to_schema(output)


@router.post(
    "/preview", response_model=BoxOutputSchema, responses=error_responses(409, 422)
)
async def preview_box(
    request: BoxRequest,
    regenerator: RegeneratorDep,
) -> BoxOutputSchema:
    """Regenerate the live preview; the latest request wins.

    Meant for a designer page that posts on every slider change. Builds run
    one at a time; a request overtaken by a newer one before its build
    finishes is answered with 409 and the page keeps waiting for the newer
    result.

    Raises:
        SupersededRequestError: If a newer preview request replaced this one (409).
        BoxGenerationError: If the dimensions are unusable (422).
    """
    output = await regenerator.request(config_to_box_input(request.to_configuration()))
    if output is None:
        raise SupersededRequestError()
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return box_output_to_schema(output)


@router.post("/from-config", response_model=BoxOutputSchema, responses=error_responses(422))
async def generate_from_config(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> BoxOutputSchema:
    """Generate a box from a full configuration document.

    Raises:
        ConfigError: If the configuration is invalid (422).
        BoxGenerationError: If the dimensions are unusable (422).
    """
    config = load_config_from_dict(request.config)
    output = await command.execute_async(config_to_box_input(config))
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return box_output_to_schema(output)
