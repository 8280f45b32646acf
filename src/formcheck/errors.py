"""Error taxonomy for formcheck.

Validation failures are values (``Invalid`` / ``Err``) and are never raised.
Exceptions here signal caller bugs.
"""


class FormCheckError(Exception):
    """Base class for formcheck programmer errors."""


class FieldNotFoundError(FormCheckError, KeyError):
    """Raised when a model has no field under the requested key."""

    def __init__(self, key: object, known_keys: list[object]):
        self.key = key
        self.known_keys = known_keys
        super().__init__(f"Key '{key}' not found in model with keys {known_keys!r}.")

    def __str__(self) -> str:
        return str(self.args[0])
