"""
Outcome models for validator results.

A validator is a plain function from a raw input to an Outcome:
either Ok carrying the parsed value, or Err carrying one error
message or a list of them.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


# Single message or an ordered list of messages
ErrorOrErrors = str | list[str]


class Ok(BaseModel):
    """Successful validator outcome."""

    kind: Literal["ok"] = "ok"
    value: Any = Field(default=None, description="Parsed/coerced value")

    model_config = {"frozen": True}

    @property
    def is_ok(self) -> bool:
        return True


class Err(BaseModel):
    """Failed validator outcome."""

    kind: Literal["error"] = "error"
    error: ErrorOrErrors = Field(..., description="Error message or messages")

    model_config = {"frozen": True}

    @property
    def is_ok(self) -> bool:
        return False


Outcome = Ok | Err


def ok(value: Any = None) -> Ok:
    """Wrap a value as a successful outcome."""
    return Ok(value=value)


def error(err: ErrorOrErrors) -> Err:
    """Wrap a message (or list of messages) as a failed outcome."""
    return Err(error=err)
