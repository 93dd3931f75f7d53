"""Typed settings for Error Reporting with dotenv support."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when settings cannot be loaded or validated."""


class GoogleCloudSettings(BaseSettings):
    """Settings shared by every Google Cloud integration.

    Environment variable names are the field names prefixed with
    `GOOGLE_CLOUD_`. Example: `keyfile` reads from `GOOGLE_CLOUD_KEYFILE`.

    Attributes:
        project_id: Default Google Cloud project.
        keyfile: Path to a service-account keyfile.
        use_error_reporting: Explicit on/off switch for Error Reporting;
            None leaves the decision to the runtime environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_CLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    project_id: str | None = Field(default=None)
    keyfile: str | None = Field(default=None)
    use_error_reporting: bool | None = Field(default=None)

    @field_validator("project_id", "keyfile", "use_error_reporting", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value


class ErrorReportingSettings(BaseSettings):
    """Error Reporting overrides of the shared Google Cloud settings.

    Environment variable names are the field names prefixed with
    `ERROR_REPORTING_`. Example: `service_name` reads from
    `ERROR_REPORTING_SERVICE_NAME`.

    Attributes:
        project_id: Project errors are reported to.
        keyfile: Service-account keyfile used for reporting.
        service_name: Name of the reporting service.
        service_version: Version of the reporting service.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERROR_REPORTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    project_id: str | None = Field(default=None)
    keyfile: str | None = Field(default=None)
    service_name: str | None = Field(default=None)
    service_version: str | None = Field(default=None)

    @field_validator(
        "project_id", "keyfile", "service_name", "service_version", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value


def load_google_cloud_settings() -> GoogleCloudSettings:
    """Load shared settings from environment and dotenv.

    Raises:
        SettingsLoadError: If a setting is present but invalid.
    """
    try:
        return GoogleCloudSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Google Cloud settings validation failed. Details: {error}"
        ) from error


def load_error_reporting_settings() -> ErrorReportingSettings:
    """Load Error Reporting settings from environment and dotenv.

    Raises:
        SettingsLoadError: If a setting is present but invalid.
    """
    try:
        return ErrorReportingSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Error Reporting settings validation failed. Details: {error}"
        ) from error
