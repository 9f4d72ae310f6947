"""API response models."""

from pydantic import BaseModel
from typing import Literal

from config_validator.validators.models import RuleDescriptor


class FieldCatalogueResponse(BaseModel):
    """Fields the validator knows about, in form order."""

    fields: list[RuleDescriptor]
    cross_field_rules: list[str]


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    rules_loaded: int
