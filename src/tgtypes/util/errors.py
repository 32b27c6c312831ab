class ServiceError(Exception):
    """
    Base of every error this package raises.

    ``error_code`` is one of ``util.error_codes``. When Telegram itself refused a call,
    ``telegram_error_code`` keeps the code from its response envelope.
    """

    error_code: int
    emoji: str
    telegram_error_code: int | None

    def __init__(self, message: str, error_code: int, emoji: str = "⚠️", telegram_error_code: int | None = None):
        super().__init__(message)
        self.error_code = error_code
        self.emoji = emoji
        self.telegram_error_code = telegram_error_code

    def __str__(self) -> str:
        return self.to_log_string()

    @property
    def message(self) -> str:
        return super().__str__()

    def to_log_string(self) -> str:
        remote_str = f" (Telegram {self.telegram_error_code})" if self.telegram_error_code else ""
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {self.message}{remote_str}{cause_str}"


class ValidationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "✏️", telegram_error_code: int | None = None):
        super().__init__(message, error_code, emoji = emoji, telegram_error_code = telegram_error_code)


class DecodeError(ValidationError):
    """A payload could not be turned into the expected type (missing fields, bad types, ambiguous variants)."""

    def __init__(self, message: str, error_code: int):
        super().__init__(message, error_code, emoji = "🧩")


class NotFoundError(ServiceError):
    def __init__(self, message: str, error_code: int, telegram_error_code: int | None = None):
        super().__init__(message, error_code, emoji = "🔍", telegram_error_code = telegram_error_code)


class AuthorizationError(ServiceError):
    def __init__(self, message: str, error_code: int, telegram_error_code: int | None = None):
        super().__init__(message, error_code, emoji = "🔒", telegram_error_code = telegram_error_code)


class AuthenticationError(ServiceError):
    def __init__(self, message: str, error_code: int, telegram_error_code: int | None = None):
        super().__init__(message, error_code, emoji = "🔑", telegram_error_code = telegram_error_code)


class ExternalServiceError(ServiceError):
    def __init__(self, message: str, error_code: int, telegram_error_code: int | None = None):
        super().__init__(message, error_code, emoji = "🌐", telegram_error_code = telegram_error_code)


class RateLimitError(ServiceError):
    retry_after_s: int | None

    def __init__(self, message: str, error_code: int, retry_after_s: int | None = None):
        super().__init__(message, error_code, emoji = "⏳", telegram_error_code = 429)
        self.retry_after_s = retry_after_s


class ConfigurationError(ServiceError):
    def __init__(self, message: str, error_code: int):
        super().__init__(message, error_code, emoji = "⚙️")


class InternalError(ServiceError):
    def __init__(self, message: str, error_code: int):
        super().__init__(message, error_code, emoji = "⚠️")
