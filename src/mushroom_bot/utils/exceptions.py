from __future__ import annotations


class BotException(Exception):
    """Base exception for the mushroom bot."""

    pass


class DecodeError(BotException):
    """Raised when a webhook body cannot be decoded into an update."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"webhook: cannot decode body: {reason}")


class ValidationError(BotException):
    """Raised when a decoded update carries nothing the bot can answer."""

    pass


class DownstreamError(BotException):
    """Raised when an external service call fails."""

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"{service}: {reason}")


class CredentialsError(DownstreamError):
    """Raised when the cloud project cannot be resolved."""

    def __init__(self, reason: str):
        super().__init__("credentials", reason)


class TelegramAPIError(DownstreamError):
    """Raised when the Telegram Bot API rejects a call."""

    def __init__(self, method: str, description: str):
        self.method = method
        self.description = description
        super().__init__("telegram", f"{method}: {description}")
