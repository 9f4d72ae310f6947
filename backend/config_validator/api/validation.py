"""Validation endpoints — the form-facing side of the rule engine."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends

from config_validator.config import get_settings
from config_validator.models.requests import EvaluateRequest, ValidateFieldRequest, ValidateFormRequest
from config_validator.models.responses import FieldCatalogueResponse
from config_validator.validators import ResultRecord, ValidationEngine, ValidationReport

logger = structlog.get_logger()

router = APIRouter()


@lru_cache
def get_validation_engine() -> ValidationEngine:
    settings = get_settings()
    return ValidationEngine(report_all_warnings=settings.REPORT_ALL_WARNINGS)


@router.get("/fields", response_model=FieldCatalogueResponse)
async def list_fields(engine: ValidationEngine = Depends(get_validation_engine)):
    """List the validated fields and cross-field rules."""
    return FieldCatalogueResponse(
        fields=engine.registry.catalogue(),
        cross_field_rules=[rule.name for rule in engine.cross_field_rules],
    )


@router.post("/validate", response_model=ValidationReport)
async def validate_form(
    request: ValidateFormRequest,
    engine: ValidationEngine = Depends(get_validation_engine),
):
    """Validate the setup form; missing catalogue fields are reported as required."""
    return engine.validate_form(request.fields, request.extra_fields)


@router.post("/evaluate", response_model=ValidationReport)
async def evaluate(
    request: EvaluateRequest,
    engine: ValidationEngine = Depends(get_validation_engine),
):
    """Evaluate exactly the submitted values, in submission order."""
    results = engine.evaluate_all(request.values)
    return ValidationReport.build(results, engine.summarize(results))


@router.post("/fields/{field_id}/validate", response_model=ResultRecord)
async def validate_field(
    field_id: str,
    request: ValidateFieldRequest,
    engine: ValidationEngine = Depends(get_validation_engine),
):
    """Validate a single field, as the form does on every input change."""
    result = engine.validate_field(field_id, request.value)
    logger.debug("field_validated", field=field_id, severity=result.severity)
    return ResultRecord.from_result(field_id, result)
