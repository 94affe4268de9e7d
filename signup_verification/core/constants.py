"""Application constants."""


# General
class AppConfig:
    """Application configuration."""

    NAME = "signup-verification"
    REDIS_MAX_CONNECTIONS = 50
    REDIS_SOCKET_CONNECT_TIMEOUT = 5
    REDIS_SOCKET_KEEPALIVE = True
    REDIS_RETRY_ON_TIMEOUT = True
    REDIS_HEALTH_CHECK_INTERVAL = 10
    REDIS_DECODE_RESPONSES = True


class VerificationConfig:
    """One-time code format."""

    CODE_MIN = 100000
    CODE_MAX = 999999


class CacheKeyTemplates:
    """Storage key templates."""

    VERIFICATION_CODE = "verification:code:{recipient}"


class ResponseParams:
    """Response field names."""

    # Top-level response fields
    SUCCESS = "success"
    MESSAGE = "message"
    DATA = "data"
    META = "meta"
    ERROR = "error"
    ERROR_CODE = "error_code"
    FIELDS = "fields"

    # Meta fields
    API_VERSION = "api_version"
    TIMESTAMP = "timestamp"
    REQUEST_ID = "request_id"


class DataKeys:
    """Keys used inside response data payloads."""

    EMAIL = "email"
    CODE = "code"
    MATCHED = "matched"
    RESEND_AFTER_SECONDS = "resend_after_seconds"
    EXPIRES_IN_SECONDS = "expires_in_seconds"
    STORAGE = "storage"


# Custom Messages
class SuccessMessages:
    """Success messages."""

    HEALTH_CHECKUP = "Service is healthy."
    CODE_SENT = "Code sent successfully"
    CODE_VERIFIED = "Code verified successfully"
    USER_REGISTERED = "User registered successfully"


class ErrorCodes:
    """Error codes."""

    GENERAL_ERROR_CODE = "SV00"
    HEALTH_CHECK_FAILED_CODE = "SV01"
    INTERNAL_SERVER_ERROR_CODE = "SV02"
    MISSING_INPUT_CODE = "SV03"
    DATA_VALIDATION_ERROR_CODE = "SV04"
    CACHE_OPERATION_ERROR_CODE = "SV05"
    TRANSPORT_FAILURE_CODE = "SV06"
    CODE_MISMATCH_CODE = "SV07"
    USER_ALREADY_EXISTS_CODE = "SV08"


class ErrorMessages:
    """Error messages."""

    HEALTH_CHECK_FAILED = "Service is unavailable due to failed health check."
    INTERNAL_SERVER_ERROR = "Internal server error"
    FIELD_REQUIRED = "This field is required"
    MISSING_PARAMETERS = "Missing parameters"
    DATA_VALIDATION_ERROR = "Request validation failed"
    CACHE_OPERATION_ERROR = "Verification code storage is unavailable"
    TRANSPORT_FAILURE = "Error sending email"
    CODE_MISMATCH = "Invalid verification code"
    USER_ALREADY_EXISTS = "User already exists"


class ValidationMessages:
    """Field level validation messages for the sign-up form."""

    EMAIL_INVALID = "Please enter a valid email"
    EMAIL_OR_PHONE_INVALID = "Please enter a valid email or phone number"
    PHONE_INVALID = "Please enter a valid phone number"
    PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
    PASSWORD_WEAK = (
        "Password must contain at least one uppercase, one lowercase and one number"
    )
    PASSWORD_TOO_LONG = "Password must be at most 72 bytes"
    PASSWORDS_DONT_MATCH = "Passwords do not match"
    USERNAME_INVALID = "Username must be 3-20 characters (letters, numbers and _)"
    AGE_OUT_OF_RANGE = "You must be at least 13 years old"
    NAME_TOO_SHORT = "{field} must be at least 2 characters"


class ValidationPatterns:
    """Regular expressions shared by the request schemas."""

    EMAIL = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
    PHONE = r"^\+?[\d\s\-()]{10,15}$"
    USERNAME = r"^[a-zA-Z0-9_]{3,20}$"
    PASSWORD_STRENGTH = r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)"
    MIN_AGE = 13
    MAX_AGE = 120
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_BYTES = 72
    MIN_NAME_LENGTH = 2


class Description(str):
    """Field descriptions used in the OpenAPI schema."""

    TO = "Recipient email address for the activation code"
    EMAIL = "Email address the code was sent to"
    CODE = "Verification code as typed by the user"
    EMAIL_OR_PHONE = "Email address or phone number"
    PASSWORD = "User password"
    CONFIRM_PASSWORD = "Password confirmation"
    FIRST_NAME = "First name"
    LAST_NAME = "Last name"
    USERNAME = "Public username"
    PHONE_NUMBER = "Contact phone number"
    BIRTH_DATE = "Birth date (YYYY-MM-DD)"
    PROFILE_PICTURE = "Reference to an already uploaded profile picture"


class LoggerConfigs:
    """Logger setup constants."""

    ROTATION_PERIOD = "1 day"
    RETENTION_PERIOD = "10 days"
    LOG_LEVEL_ERROR = "ERROR"
    LOG_LEVEL_DEBUG = "DEBUG"
