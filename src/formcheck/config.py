"""
Configuration module for formcheck.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class FormCheckConfig:
    """Configuration settings for formcheck."""

    # Submission messages
    not_validated_message: str = "Not validated"
    invalid_field_message: str = "{key} field isn't valid."

    # Logging settings
    log_transitions: bool = False

    def format_invalid_field(self, key: object) -> str:
        """Render the short-circuit message for a non-valid field."""
        return self.invalid_field_message.format(key=key)

    @classmethod
    def from_env(cls) -> "FormCheckConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            not_validated_message=os.getenv(
                "FORMCHECK_NOT_VALIDATED_MESSAGE", _defaults.not_validated_message
            ),
            invalid_field_message=os.getenv(
                "FORMCHECK_INVALID_FIELD_MESSAGE", _defaults.invalid_field_message
            ),
            log_transitions=os.getenv(
                "FORMCHECK_LOG_TRANSITIONS", str(_defaults.log_transitions).lower()
            ).lower() == "true",
        )


config = FormCheckConfig.from_env()


def get_config() -> FormCheckConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormCheckConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
