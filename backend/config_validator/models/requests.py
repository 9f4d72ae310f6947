"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class ValidateFormRequest(BaseModel):
    """Request to validate a complete setup form."""

    fields: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Form values keyed by field identifier; missing catalogue fields count as empty",
        examples=[{
            "controller-host": "acme.saas.appdynamics.com",
            "controller-port": "443",
            "account-name": "acme",
            "access-key": "ABCDEFGHIJ1234567890",
            "app-name": "checkout",
            "tier-name": "web",
            "node-name": "web-01",
        }],
    )
    extra_fields: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Generator-specific fields validated alongside the form",
    )


class EvaluateRequest(BaseModel):
    """Request to evaluate an exact snapshot of field values."""

    values: dict[str, Optional[str]] = Field(default_factory=dict)


class ValidateFieldRequest(BaseModel):
    """Request to validate one field value."""

    value: Optional[str] = None
