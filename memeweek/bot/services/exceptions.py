"""Service-specific exceptions for the contest bot.

Only conditions the command reports back to the invoker get their own
exception type. Platform and network failures are left as whatever
hikari raises and are handled once at the top of the command.
"""

from __future__ import annotations

from typing import Any


class ServiceError(Exception):
    """Base exception for all service layer errors.

    Carries an error code, context data and a user-facing message
    (in the community's language) alongside the technical message.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        user_message: str | None = None
    ):
        """Initialize service error.

        Args:
            message: Technical error message for logging
            error_code: Unique error code for categorization
            context: Additional context data for debugging
            user_message: User-friendly error message for Discord responses
        """
        super().__init__(message)
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.user_message = user_message or message

    def get_user_message(self) -> str:
        """Get user-friendly error message."""
        return self.user_message


class ValidationError(ServiceError):
    """Exception for invalid model data."""

    def __init__(self, field: str, message: str, **kwargs):
        super().__init__(
            f"Validation error for {field}: {message}",
            error_code="VALIDATION_ERROR",
            context={"field": field},
            user_message=message,
            **kwargs
        )
        self.field = field


class ConfigurationError(ServiceError):
    """Exception for configuration-related errors.

    Raised at command time when a required setting is missing or
    malformed, e.g. the contest channel id.
    """

    def __init__(self, setting: str, user_message: str | None = None, **kwargs):
        """Initialize configuration error.

        Args:
            setting: Configuration setting that caused the error
            user_message: Message shown to the invoker
            **kwargs: Additional arguments passed to parent
        """
        super().__init__(
            f"Configuration error: {setting}",
            error_code="CONFIG_ERROR",
            user_message=user_message or "El ID del canal no está configurado en las variables de entorno.",
            **kwargs
        )
        self.setting = setting


class ChannelNotFoundError(ServiceError):
    """Exception for a configured channel that cannot be resolved."""

    def __init__(self, channel_id: str, **kwargs):
        super().__init__(
            f"Channel not found: {channel_id}",
            error_code="CHANNEL_NOT_FOUND",
            context={"channel_id": channel_id},
            user_message="No se encontró el canal.",
            **kwargs
        )
        self.channel_id = channel_id
