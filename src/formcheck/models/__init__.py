"""
Data models for formcheck.

This module contains Pydantic models for:
- Validator outcomes (Ok / Err)
- Field validity (NotValidated / Valid / Invalid)
- UI events (OnSubmit / OnBlur / OnRelatedChange / OnChange)
- The form field itself
"""

from formcheck.models.events import (
    Event,
    OnBlur,
    OnChange,
    OnRelatedChange,
    OnSubmit,
)
from formcheck.models.field import (
    FormField,
    Model,
)
from formcheck.models.outcome import (
    Err,
    ErrorOrErrors,
    Ok,
    Outcome,
    error,
    ok,
)
from formcheck.models.validity import (
    Invalid,
    NotValidated,
    Valid,
    Validity,
)

__all__ = [
    # Outcomes
    "Ok",
    "Err",
    "Outcome",
    "ErrorOrErrors",
    "ok",
    "error",
    # Validity
    "NotValidated",
    "Valid",
    "Invalid",
    "Validity",
    # Events
    "OnSubmit",
    "OnBlur",
    "OnRelatedChange",
    "OnChange",
    "Event",
    # Fields
    "FormField",
    "Model",
]
