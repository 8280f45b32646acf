"""
Field validation state machine.

A field starts NotValidated and moves between Valid and Invalid as
UI events arrive. The policy per event:

- OnSubmit / OnBlur: always re-run the validator on the current raw.
- OnRelatedChange: re-run only once the field has been validated before.
- OnChange(raw): adopt the new raw immediately; re-run only once the
  field has been validated before, so a pristine field never flashes
  an error while the user is still typing.

Usage:
    from formcheck import make_field, validate, OnBlur
    from formcheck.validators import is_integer

    age = make_field("")
    age = validate(age, is_integer, OnBlur())
"""

import logging
from typing import Any, Callable

from formcheck.config import get_config
from formcheck.models.events import Event, OnBlur, OnChange, OnRelatedChange, OnSubmit
from formcheck.models.field import FormField
from formcheck.models.outcome import Err, ErrorOrErrors, Ok, Outcome
from formcheck.models.validity import Invalid, NotValidated, Valid, Validity

logger = logging.getLogger("formcheck")

Validator = Callable[[Any], Outcome]


def make_field(raw: Any) -> FormField:
    """Create a field that has not been validated yet."""
    return FormField(raw=raw)


def pre_validated_field(value: Any, to_raw: Callable[[Any], Any] = str) -> FormField:
    """
    Create a field that is already valid.

    Useful for seeding a form with trusted values, e.g. defaults
    loaded from the server.

    Args:
        value: The already-validated value.
        to_raw: Renders the value back into its raw representation.
    """
    return FormField(raw=to_raw(value), validity=Valid(value=value))


def invalidate(field: FormField, err: ErrorOrErrors) -> FormField:
    """Mark a field invalid with the given error(s), keeping its raw input."""
    if isinstance(err, (list, tuple)):
        if not all(isinstance(message, str) for message in err):
            raise TypeError("Error list must contain only strings")
    elif not isinstance(err, str):
        raise TypeError(f"Error must be a string or a list of strings, got {type(err).__name__}")
    return FormField(raw=field.raw, validity=Invalid(error=err))


def raw_value(field: FormField) -> Any:
    return field.raw


def validity(field: FormField) -> Validity:
    return field.validity


def is_valid(field: FormField) -> bool:
    """Check whether the field's last check passed."""
    return isinstance(field.validity, Valid)


def extract_error(field: FormField) -> ErrorOrErrors | None:
    """Get the field's error(s), or None when it is not Invalid."""
    if isinstance(field.validity, Invalid):
        return field.validity.error
    return None


def to_validity(outcome: Outcome) -> Validity:
    """Map a validator outcome onto a field validity."""
    if isinstance(outcome, Ok):
        return Valid(value=outcome.value)
    if isinstance(outcome, Err):
        return Invalid(error=outcome.error)
    raise TypeError(f"Validator must return Ok or Err, got {type(outcome).__name__}")


def validate(field: FormField, validator: Validator, event: Event) -> FormField:
    """
    Apply one UI event to a field.

    Args:
        field: Current field state.
        validator: Function from raw input to Ok/Err.
        event: OnSubmit, OnBlur, OnRelatedChange or OnChange.

    Returns:
        The new field state. The input field is left untouched.

    Raises:
        TypeError: If the validator is not callable or the event is unknown.
    """
    if not callable(validator):
        raise TypeError(f"Validator must be callable, got {type(validator).__name__}")

    if isinstance(event, (OnSubmit, OnBlur)):
        result = _validate_always(field, validator)
    elif isinstance(event, OnRelatedChange):
        result = _validate_if_validated(field, validator)
    elif isinstance(event, OnChange):
        result = _validate_if_validated(
            FormField(raw=event.raw, validity=field.validity), validator
        )
    else:
        raise TypeError(f"Unknown event: {event!r}")

    if get_config().log_transitions:
        logger.debug(
            f"{event.kind}: {field.validity.kind} -> {result.validity.kind} (raw={result.raw!r})"
        )
    return result


def _validate_always(field: FormField, validator: Validator) -> FormField:
    return FormField(raw=field.raw, validity=to_validity(validator(field.raw)))


def _validate_if_validated(field: FormField, validator: Validator) -> FormField:
    if isinstance(field.validity, NotValidated):
        return field
    return _validate_always(field, validator)
