"""String constants shared across gcloudkit.

Values match the literals used by the BigQuery REST API and the
environment variables read by the Error Reporting configuration.
"""

# Copy/load/query job create dispositions
CREATE_IF_NEEDED = "CREATE_IF_NEEDED"
CREATE_NEVER = "CREATE_NEVER"

# Job write dispositions
WRITE_TRUNCATE = "WRITE_TRUNCATE"
WRITE_APPEND = "WRITE_APPEND"
WRITE_EMPTY = "WRITE_EMPTY"

# Job states
PENDING = "PENDING"
RUNNING = "RUNNING"
DONE = "DONE"

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

PRODUCTION = "production"
DEFAULT_SERVICE_NAME = "python"
