"""Configuration validation endpoints."""

from fastapi import APIRouter

from floorplan.application.config import ConfigError, load_config_from_dict, validate_config
from floorplan.web.schemas.requests import ConfigValidateRequest
from floorplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a floor plan configuration.

    Schema errors are reported as ``is_valid: false`` rather than an error
    response, so clients can show every failed field at once.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"message": d.get("message", e.message), "path": d.get("path", "")}
            for d in e.details
        ] or [{"message": e.message, "path": ""}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
