"""Tests for formcheck data models."""

import pytest
from pydantic import ValidationError

from formcheck.models.events import OnBlur, OnChange, OnRelatedChange, OnSubmit
from formcheck.models.field import FormField
from formcheck.models.outcome import Err, Ok, error, ok
from formcheck.models.validity import Invalid, NotValidated, Valid


class TestOutcome:
    """Tests for Ok/Err models."""

    def test_ok(self):
        """Test creating a successful outcome."""
        result = ok(42)
        assert isinstance(result, Ok)
        assert result.value == 42
        assert result.is_ok

    def test_error_single_message(self):
        """Test failed outcome with a single message."""
        result = error("Name is required!")
        assert isinstance(result, Err)
        assert result.error == "Name is required!"
        assert not result.is_ok

    def test_error_message_list(self):
        """Test failed outcome with several messages."""
        result = Err(error=["too short", "no digits"])
        assert result.error == ["too short", "no digits"]

    def test_outcome_is_frozen(self):
        """Test outcomes cannot be mutated."""
        result = ok("x")
        with pytest.raises(ValidationError):
            result.value = "y"


class TestValidity:
    """Tests for validity models."""

    def test_kinds(self):
        """Test each state carries its own discriminator."""
        assert NotValidated().kind == "not_validated"
        assert Valid(value=1).kind == "valid"
        assert Invalid(error="bad").kind == "invalid"

    def test_structural_equality(self):
        """Test states compare by content."""
        assert Valid(value=42) == Valid(value=42)
        assert Valid(value=42) != Valid(value=43)
        assert Invalid(error="bad") != Valid(value="bad")
        assert NotValidated() == NotValidated()

    def test_invalid_requires_error(self):
        """Test Invalid cannot be built without an error."""
        with pytest.raises(ValidationError):
            Invalid()


class TestEvents:
    """Tests for event models."""

    def test_event_kinds(self):
        """Test events carry their discriminator."""
        assert OnSubmit().kind == "on_submit"
        assert OnBlur().kind == "on_blur"
        assert OnRelatedChange().kind == "on_related_change"

    def test_on_change_carries_raw(self):
        """Test OnChange keeps the new raw input as given."""
        event = OnChange(raw="42")
        assert event.kind == "on_change"
        assert event.raw == "42"

    def test_on_change_non_string_raw(self):
        """Test OnChange accepts non-text inputs such as checkboxes."""
        assert OnChange(raw=True).raw is True


class TestFormField:
    """Tests for FormField model."""

    def test_defaults_to_not_validated(self):
        """Test a new field starts unchecked."""
        field = FormField(raw="")
        assert field.validity == NotValidated()

    def test_field_with_validity(self):
        """Test building a field with an explicit validity."""
        field = FormField(raw="42", validity=Valid(value=42))
        assert field.raw == "42"
        assert field.validity.value == 42

    def test_field_validity_from_dict(self):
        """Test validity is resolved by its kind discriminator."""
        field = FormField(raw="x", validity={"kind": "invalid", "error": "bad"})
        assert field.validity == Invalid(error="bad")

    def test_field_is_frozen(self):
        """Test fields cannot be mutated in place."""
        field = FormField(raw="a")
        with pytest.raises(ValidationError):
            field.raw = "b"
