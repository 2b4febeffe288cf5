from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings


class HttpClientConfig(BaseSettings):
    """
    Transport settings shared by every HttpClient instance
    """

    HTTP_CLIENT_USER_AGENT: str = Field(
        description="User-Agent header sent with every request",
        default="http-tree-client/0.1.0",
    )

    HTTP_CLIENT_TIMEOUT: PositiveFloat = Field(
        description="Transport timeout in seconds for connect, read and write",
        default=30.0,
    )


class LoggingConfig(BaseSettings):
    """
    Configuration for application logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to ERROR for production environments.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(channel)s%(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default="UTC",
    )
