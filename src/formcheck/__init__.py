"""
formcheck: validation state for live forms.

Track each input's raw value and validity as UI events arrive, then
combine the whole form into one value (or one blocking error) on submit.

Simple Usage:
    from formcheck import OnBlur, make_field, validate
    from formcheck.validators import is_integer

    age = make_field("")
    age = validate(age, is_integer, OnBlur())
    age.validity  # Invalid(error="The value has to be an integer!")

Form Usage:
    from formcheck import form, make_field
    from formcheck.validators import equal_to, not_empty

    model = {"password": make_field(""), "confirm": make_field("")}

    def same_as(password_field):
        return lambda value: equal_to(value, password_field.raw, "Passwords differ!")

    model = form.validate_on_change(model, "password", "secret", not_empty)
    model = form.validate_on_related_change(model, "confirm", "password", same_as)

    result = form.submit_if_valid(model, ["password", "confirm"], lambda bag: bag)

Configuration:
    from formcheck.config import update_config

    update_config(not_validated_message="Please fill in the form")
"""

from formcheck import form
from formcheck.errors import (
    FieldNotFoundError,
    FormCheckError,
)
from formcheck.models import (
    Err,
    Invalid,
    NotValidated,
    Ok,
    OnBlur,
    OnChange,
    OnRelatedChange,
    OnSubmit,
    FormField,
    Valid,
)
from formcheck.validation import (
    extract_error,
    invalidate,
    is_valid,
    make_field,
    pre_validated_field,
    raw_value,
    validate,
    validity,
)
from formcheck.validators import optional

__all__ = [
    # Field state machine
    "FormField",
    "make_field",
    "pre_validated_field",
    "invalidate",
    "raw_value",
    "validity",
    "is_valid",
    "extract_error",
    "validate",
    # Model aggregator
    "form",
    "optional",
    # Models
    "Ok",
    "Err",
    "NotValidated",
    "Valid",
    "Invalid",
    "OnSubmit",
    "OnBlur",
    "OnRelatedChange",
    "OnChange",
    # Errors
    "FormCheckError",
    "FieldNotFoundError",
]

__version__ = "0.1.0"
