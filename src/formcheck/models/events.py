"""
UI events that drive field validation.

The caller translates its own widget callbacks into one of these.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class OnSubmit(BaseModel):
    """The form is being submitted."""

    kind: Literal["on_submit"] = "on_submit"

    model_config = {"frozen": True}


class OnBlur(BaseModel):
    """The field lost focus."""

    kind: Literal["on_blur"] = "on_blur"

    model_config = {"frozen": True}


class OnRelatedChange(BaseModel):
    """A field this one depends on has changed."""

    kind: Literal["on_related_change"] = "on_related_change"

    model_config = {"frozen": True}


class OnChange(BaseModel):
    """The field's own input changed."""

    kind: Literal["on_change"] = "on_change"
    raw: Any = Field(..., description="New raw input")

    model_config = {"frozen": True}


Event = OnSubmit | OnBlur | OnRelatedChange | OnChange
