"""
Validity models for a single form field.

A field is always in exactly one of three states:
- NotValidated: nothing has been checked yet
- Valid: the last check passed, holding the validator's value
- Invalid: the last check failed, holding the error(s)
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from formcheck.models.outcome import ErrorOrErrors


class NotValidated(BaseModel):
    """Field has not been checked since it was created."""

    kind: Literal["not_validated"] = "not_validated"

    model_config = {"frozen": True}


class Valid(BaseModel):
    """Field passed its last check."""

    kind: Literal["valid"] = "valid"
    value: Any = Field(default=None, description="Value produced by the validator")

    model_config = {"frozen": True}


class Invalid(BaseModel):
    """Field failed its last check."""

    kind: Literal["invalid"] = "invalid"
    error: ErrorOrErrors = Field(..., description="Error message or messages")

    model_config = {"frozen": True}


Validity = NotValidated | Valid | Invalid

NOT_VALIDATED = NotValidated()
