"""Decide whether Error Reporting should run, and with which configuration.

Settings are resolved in layers: Error Reporting specific settings first,
then the shared Google Cloud settings, then well-known environment
variables, and finally whatever application default credentials discover.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import google.auth
from google.auth.credentials import Credentials
from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
from google.oauth2 import service_account

from gcloudkit.error_reporting.settings import (
    ErrorReportingSettings,
    GoogleCloudSettings,
)
from gcloudkit.util import CLOUD_PLATFORM_SCOPE, DEFAULT_SERVICE_NAME, PRODUCTION

logger = logging.getLogger(__name__)

SCOPES = [CLOUD_PLATFORM_SCOPE]

Keyfile = str | Mapping[str, Any]
CredentialsLoader = Callable[[Keyfile | None], Credentials]


@dataclass(frozen=True)
class ErrorReportingConfig:
    """Fully resolved Error Reporting configuration."""

    project_id: str | None
    keyfile: str | None
    service_name: str
    service_version: str | None


def load_credentials(keyfile: Keyfile | None = None) -> Credentials:
    """Load credentials scoped for Error Reporting.

    Args:
        keyfile: Path to a service-account keyfile, the parsed keyfile
            contents, or None for application default credentials

    Raises:
        DefaultCredentialsError: If no default credentials can be found
        OSError: If the keyfile cannot be read
        ValueError: If the keyfile contents are not valid service-account info
    """
    if keyfile is None:
        credentials, _ = google.auth.default(scopes=SCOPES)
        return credentials
    if isinstance(keyfile, Mapping):
        return service_account.Credentials.from_service_account_info(
            dict(keyfile), scopes=SCOPES
        )
    return service_account.Credentials.from_service_account_file(
        keyfile, scopes=SCOPES
    )


def _first(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def _default_project_id() -> str | None:
    try:
        _, project_id = google.auth.default(scopes=SCOPES)
    except DefaultCredentialsError as e:
        logger.debug(f"No project discovered from default credentials: {e}")
        return None
    return project_id


def resolve_project_id(
    gcp: GoogleCloudSettings,
    er: ErrorReportingSettings,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    env = os.environ if environ is None else environ
    candidates = [
        ("error reporting settings", er.project_id),
        ("google cloud settings", gcp.project_id),
        ("$ERROR_REPORTING_PROJECT", env.get("ERROR_REPORTING_PROJECT")),
        ("$GOOGLE_CLOUD_PROJECT", env.get("GOOGLE_CLOUD_PROJECT")),
    ]
    for source, project_id in candidates:
        if project_id:
            logger.debug(f"Using project_id {project_id!r} from {source}")
            return project_id

    project_id = _default_project_id()
    if project_id:
        logger.debug(
            f"Using project_id {project_id!r} from application default credentials"
        )
    return project_id


def resolve_service_name(
    er: ErrorReportingSettings, environ: Mapping[str, str] | None = None
) -> str:
    env = os.environ if environ is None else environ
    return (
        _first(
            er.service_name,
            env.get("ERROR_REPORTING_SERVICE"),
            env.get("GAE_SERVICE"),
        )
        or DEFAULT_SERVICE_NAME
    )


def resolve_service_version(
    er: ErrorReportingSettings, environ: Mapping[str, str] | None = None
) -> str | None:
    env = os.environ if environ is None else environ
    return _first(
        er.service_version,
        env.get("ERROR_REPORTING_VERSION"),
        env.get("GAE_VERSION"),
    )


def resolve_config(
    gcp: GoogleCloudSettings,
    er: ErrorReportingSettings,
    environ: Mapping[str, str] | None = None,
) -> ErrorReportingConfig:
    return ErrorReportingConfig(
        project_id=resolve_project_id(gcp, er, environ),
        keyfile=er.keyfile or gcp.keyfile,
        service_name=resolve_service_name(er, environ),
        service_version=resolve_service_version(er, environ),
    )


def use_error_reporting(
    gcp: GoogleCloudSettings,
    er: ErrorReportingSettings,
    *,
    environment_name: str,
    credentials_loader: CredentialsLoader = load_credentials,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return True if Error Reporting should be activated.

    Activation requires loadable credentials and a non-empty project id.
    With both present, it runs in the production environment or when
    `use_error_reporting` is explicitly enabled. An explicit False always
    wins.

    Args:
        gcp: Shared Google Cloud settings
        er: Error Reporting settings
        environment_name: Name of the runtime environment
        credentials_loader: Loads credentials for a keyfile (or defaults)
        environ: Environment variables (defaults to os.environ)
    """
    if gcp.use_error_reporting is False:
        return False

    keyfile = er.keyfile or gcp.keyfile
    try:
        credentials_loader(keyfile)
    except (GoogleAuthError, OSError, ValueError) as e:
        logger.warning(
            f"Error Reporting is not activated due to authorization error: {e}"
        )
        return False

    project_id = resolve_project_id(gcp, er, environ)
    if not project_id:
        logger.warning("Error Reporting is not activated due to empty project_id")
        return False

    return environment_name == PRODUCTION or gcp.use_error_reporting is True
