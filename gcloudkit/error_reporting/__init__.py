"""Error Reporting configuration resolution and activation checks."""

from gcloudkit.error_reporting.activation import (
    ErrorReportingConfig,
    load_credentials,
    resolve_config,
    resolve_project_id,
    resolve_service_name,
    resolve_service_version,
    use_error_reporting,
)
from gcloudkit.error_reporting.settings import (
    ErrorReportingSettings,
    GoogleCloudSettings,
    SettingsLoadError,
    load_error_reporting_settings,
    load_google_cloud_settings,
)

__all__ = [
    "ErrorReportingConfig",
    "ErrorReportingSettings",
    "GoogleCloudSettings",
    "SettingsLoadError",
    "load_credentials",
    "load_error_reporting_settings",
    "load_google_cloud_settings",
    "resolve_config",
    "resolve_project_id",
    "resolve_service_name",
    "resolve_service_version",
    "use_error_reporting",
]
