"""Exception hierarchy for date parsing and duration formatting."""


class DateKitError(Exception):
    """Base exception for pydatekit errors.

    ``str()`` gives a short message that never echoes the rejected input;
    ``internal()`` carries the offending value for logs. Errors raised while
    delegating to a parser keep the parser's exception in ``wrapped``.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ParseError(DateKitError):
    """Raised when a date string does not match the expected grammar."""


class InvalidFormatError(DateKitError):
    """Raised when a duration template is malformed."""


class InvalidDurationError(DateKitError):
    """Raised when a duration magnitude cannot be formatted."""


class InvalidTimestampError(DateKitError):
    """Raised when an instant is not finite or cannot be expressed in UTC."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_RFC2822 = "invalid RFC 2822 date"
ERR_MSG_INVALID_ISO8601 = "invalid ISO 8601 date"
ERR_MSG_UNKNOWN_UNIT = "unrecognized time unit in template"
ERR_MSG_MALFORMED_FIELD = "malformed template field"
ERR_MSG_TEMPLATE_TOO_LONG = "template too long"
ERR_MSG_INVALID_TEMPLATE = "invalid template"
ERR_MSG_NEGATIVE_DURATION = "duration cannot be negative"
ERR_MSG_NON_FINITE_DURATION = "duration must be finite"
ERR_MSG_NON_FINITE_TIMESTAMP = "timestamp must be finite"
ERR_MSG_TIMESTAMP_OUT_OF_RANGE = "timestamp out of range"
