"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from skapa.application import BoxGenerationError
from skapa.application.config import config_to_box_input
from skapa.infrastructure.exporters import ExporterRegistry
from skapa.web.dependencies import GenerateCommandDep
from skapa.web.exceptions import UnsupportedFormatError, error_responses
from skapa.web.schemas.requests import BoxRequest
from skapa.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}", responses=error_responses(400, 422))
async def export_box(
    format_name: str,
    request: BoxRequest,
    command: GenerateCommandDep,
) -> Response:
    """Generate a box and return it as a file download.

    `POST /export/stl` returns the binary STL to print.

    Raises:
        UnsupportedFormatError: If no exporter handles the format (400).
        BoxGenerationError: If the dimensions are unusable (422).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = await command.execute_async(config_to_box_input(request.to_configuration()))
    if not output.is_valid:
        raise BoxGenerationError(output.errors)

    exporter = ExporterRegistry.create(format_name)
    filename = f"{output.file_stem}.{exporter.file_extension}"
    return Response(
        content=exporter.export_bytes(output),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
