"""
Form model aggregator.

A model is a plain dict of field key -> FormField. Every operation
here returns a new dict with only the affected entry replaced; the
model passed in is never modified.

Usage:
    from formcheck import form, make_field
    from formcheck.validators import is_integer, not_empty

    model = {"name": make_field(""), "age": make_field("")}

    # Wire these to your widget callbacks
    model = form.validate_on_blur(model, "age", is_integer)
    model = form.validate_on_change(model, "age", "42", is_integer)

    # On submit: re-check everything, then combine
    model = form.validate_on_submit(model, "name", not_empty)
    model = form.validate_on_submit(model, "age", is_integer)
    result = form.submit_if_valid(model, ["name", "age"], lambda bag: bag)
"""

import logging
from typing import Any, Callable, Iterable

from formcheck.config import get_config
from formcheck.errors import FieldNotFoundError
from formcheck.models.events import OnBlur, OnChange, OnRelatedChange, OnSubmit
from formcheck.models.field import FormField, Model
from formcheck.models.outcome import Err, Ok, Outcome
from formcheck.models.validity import NotValidated, Valid
from formcheck.validation import Validator, validate

logger = logging.getLogger("formcheck")

ValidatorFactory = Callable[[FormField], Validator]


def get_field(model: Model, key: Any) -> FormField:
    """
    Look up a field by key.

    Raises:
        FieldNotFoundError: If the model has no such key. This is a
            programmer error (typo'd key or missing field), not a
            validation outcome.
    """
    try:
        return model[key]
    except KeyError:
        known_keys = list(model)
        logger.error(f"Field '{key}' not found in model (known keys: {known_keys})")
        raise FieldNotFoundError(key, known_keys) from None


def replace_field(model: Model, key: Any, field: FormField) -> Model:
    """Return a copy of the model with one entry replaced."""
    get_field(model, key)
    return {**model, key: field}


def validate_on_blur(model: Model, key: Any, validator: Validator) -> Model:
    """Validate a field after it loses focus."""
    field = get_field(model, key)
    return replace_field(model, key, validate(field, validator, OnBlur()))


def validate_on_change(model: Model, key: Any, new_raw: Any, validator: Validator) -> Model:
    """Store a field's new input, re-validating it once it has been checked before."""
    field = get_field(model, key)
    return replace_field(model, key, validate(field, validator, OnChange(raw=new_raw)))


def validate_on_related_change(
    model: Model,
    key: Any,
    related_key: Any,
    validator_factory: ValidatorFactory,
) -> Model:
    """
    Re-check a field after a field it depends on changed.

    Args:
        model: Current form model.
        key: The dependent field (e.g. "confirm_password").
        related_key: The field it depends on (e.g. "password").
        validator_factory: Builds the validator from the related field.
            The related field is passed whatever its validity; use
            is_valid() inside the factory if its value must be valid.
    """
    field = get_field(model, key)
    related = get_field(model, related_key)
    validator = validator_factory(related)
    return replace_field(model, key, validate(field, validator, OnRelatedChange()))


def validate_on_submit(model: Model, key: Any, validator: Validator) -> Model:
    """Validate a field as part of form submission."""
    field = get_field(model, key)
    return replace_field(model, key, validate(field, validator, OnSubmit()))


def validate_on_related_submit(
    model: Model,
    key: Any,
    related_key: Any,
    validator_factory: ValidatorFactory,
) -> Model:
    """
    Validate a dependent field on submission.

    Call this right after validate_on_submit() for the same key. It
    does not run the field's own validator; the related-field check
    overwrites the submit result.
    """
    related = get_field(model, related_key)
    return validate_on_submit(model, key, validator_factory(related))


def combine(model: Model, keys: Iterable[Any], combiner: Callable[[dict], Any]) -> Outcome:
    """
    Combine valid field values into one value.

    Fields are checked in order. The first field that is not Valid
    stops the fold and produces a single error naming it; later
    fields are not inspected.

    Returns:
        Ok(combiner(bag)) where bag maps each key to its valid value,
        or Err("<key> field isn't valid.").
    """
    bag, failure = _collect(model, keys)
    if failure is not None:
        key, _ = failure
        return Err(error=get_config().format_invalid_field(key))
    return Ok(value=combiner(bag))


def submit_if_valid(model: Model, keys: Iterable[Any], combiner: Callable[[dict], Any]) -> Outcome:
    """
    Combine fields for submission.

    Like combine(), but a field the user never touched is reported
    as "Not validated" rather than as an invalid field. The combiner
    may itself return Ok/Err (e.g. a final cross-field check); that
    outcome is returned as-is. Any other return value is wrapped in Ok.
    """
    config = get_config()
    bag, failure = _collect(model, keys)
    if failure is not None:
        key, state = failure
        if isinstance(state, NotValidated):
            return Err(error=config.not_validated_message)
        return Err(error=config.format_invalid_field(key))

    result = combiner(bag)
    if isinstance(result, (Ok, Err)):
        return result
    return Ok(value=result)


def _collect(model: Model, keys: Iterable[Any]) -> tuple[dict, tuple | None]:
    """Fold keys into a bag of valid values, stopping at the first non-valid one."""
    bag: dict = {}
    for key in keys:
        state = get_field(model, key).validity
        if not isinstance(state, Valid):
            if get_config().log_transitions:
                logger.debug(f"Combine stopped at '{key}' ({state.kind})")
            return bag, (key, state)
        bag[key] = state.value
    return bag, None
