import enum
from pathlib import Path
from tempfile import gettempdir
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from yarl import URL

TEMP_DIR = Path(gettempdir())


class LogLevel(str, enum.Enum):
    """Possible log levels."""

    NOTSET = "NOTSET"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"


class CodeStorageBackend(str, enum.Enum):
    """Where pending verification codes are kept."""

    MEMORY = "memory"
    REDIS = "redis"


class Settings(BaseSettings):
    """
    Application settings.

    These parameters can be configured
    with environment variables.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    # quantity of workers for uvicorn
    workers_count: int = 1
    # Enable uvicorn reloading
    reload: bool = False

    # Enable debug mode
    debug: bool = False

    # Log directory
    log_dir: Path = TEMP_DIR / "logs"

    # Current environment
    environment: str = "dev"

    # Log level
    log_level: LogLevel = LogLevel.INFO

    # api version and mount point
    api_version: str = "v1"
    api_prefix: str = "/api"

    # Verification codes
    code_storage: CodeStorageBackend = CodeStorageBackend.MEMORY
    # 0 disables expiry
    code_ttl_seconds: int = 600
    consume_on_success: bool = False
    resend_cooldown_seconds: int = 60

    # Variables for Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_user: Optional[str] = None
    redis_pass: Optional[str] = None
    redis_base: Optional[int] = None

    # Outbound mail
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_pass: str = ""
    smtp_use_tls: bool = True
    smtp_timeout: int = 15
    email_from: str = "no-reply@localhost"
    email_subject: str = "Activation code"

    @property
    def redis_url(self) -> URL:
        """
        Assemble REDIS URL from settings.

        :return: redis URL.
        """
        path = ""
        if self.redis_base is not None:
            path = f"/{self.redis_base}"
        return URL.build(
            scheme="redis",
            host=self.redis_host,
            port=self.redis_port,
            user=self.redis_user,
            password=self.redis_pass,
            path=path,
        )

    @property
    def code_ttl(self) -> Optional[int]:
        """Code lifetime in seconds, or None when codes never expire."""
        return self.code_ttl_seconds if self.code_ttl_seconds > 0 else None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SIGNUP_",
        env_file_encoding="utf-8",
    )


settings = Settings()
