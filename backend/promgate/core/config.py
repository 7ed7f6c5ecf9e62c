"""Application settings.

Read once from the environment (and an optional ``.env`` file) and exposed
as the module-level ``settings`` object.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the instrumented server.

    Attributes:
        HOST (str): Address the HTTP server binds to.
        PORT (int): Port the HTTP server binds to.
        METRICS_NAMESPACE (str): Prefix shared by every exported series.
        METRICS_PATH (str): Path of the in-app exposition endpoint.
        METRICS_SIDECAR_HOST (str): Bind address of the optional sidecar server.
        METRICS_SIDECAR_PORT (Optional[int]): Sidecar port, disabled when unset.
        EXCLUDE_REGEX_STATUS (str): Requests whose status label matches are not recorded.
        EXCLUDE_REGEX_ENDPOINT (str): Requests whose endpoint label matches are not recorded.
        EXCLUDE_REGEX_METHOD (str): Requests whose method label matches are not recorded.
        ENDPOINT_LABEL_MODE (str): ``path`` for the raw path, ``route`` for the route template.
        REQUEST_SIZE_INCLUDE_URL (bool): Count the URL length in request size estimates.
        UPTIME_INTERVAL (float): Seconds between two uptime increments.
        DEMO_MAX_DELAY (float): Upper bound of the simulated demo handler latency.
        LOG_LEVEL (str): Root log level.
        LOCAL_DEVELOPMENT (bool): Emit human-readable logs instead of JSON.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    METRICS_NAMESPACE: str = "service"
    METRICS_PATH: str = "/metrics"
    METRICS_SIDECAR_HOST: str = "0.0.0.0"
    METRICS_SIDECAR_PORT: Optional[int] = None

    EXCLUDE_REGEX_STATUS: str = ""
    EXCLUDE_REGEX_ENDPOINT: str = ""
    EXCLUDE_REGEX_METHOD: str = ""
    ENDPOINT_LABEL_MODE: Literal["path", "route"] = "path"
    REQUEST_SIZE_INCLUDE_URL: bool = False

    UPTIME_INTERVAL: float = Field(default=1.0, gt=0)
    DEMO_MAX_DELAY: float = Field(default=1.0, ge=0)

    LOG_LEVEL: str = "INFO"
    LOCAL_DEVELOPMENT: bool = False

    @field_validator("METRICS_PATH")
    @classmethod
    def _metrics_path_is_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("METRICS_PATH must start with '/'")
        return v.rstrip("/") or "/"


settings = Settings()
