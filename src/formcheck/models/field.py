"""
Form field model.

A FormField pairs the raw input exactly as entered with the
validity computed for it. Fields are immutable; every transition
returns a new FormField.
"""

from typing import Any

from pydantic import BaseModel, Field

from formcheck.models.validity import NOT_VALIDATED, Validity


class FormField(BaseModel):
    """One input control's raw value plus its current validity."""

    raw: Any = Field(..., description="Last raw input exactly as entered")
    validity: Validity = Field(
        default=NOT_VALIDATED,
        discriminator="kind",
        description="Result of the last check",
    )

    model_config = {"frozen": True}


# Type alias for a whole form: field key -> FormField
Model = dict[Any, FormField]
