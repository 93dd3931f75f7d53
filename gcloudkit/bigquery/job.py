"""Read-only accessors over BigQuery job resources.

A job resource is the JSON document returned by the BigQuery REST `jobs`
endpoint, already decoded into plain dicts and lists. Accessors never
raise on missing sections; they return `None` or an empty value instead.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from gcloudkit.util import DONE, PENDING, RUNNING

# Maps a table reference to whatever the caller uses to represent tables
TableLookup = Callable[["TableReference"], Any]


@dataclass(frozen=True)
class TableReference:
    """Fully qualified BigQuery table identifier."""

    project_id: str | None
    dataset_id: str | None
    table_id: str | None

    @classmethod
    def from_resource(
        cls, resource: Mapping[str, Any], default_project_id: str | None = None
    ) -> "TableReference":
        """Build a reference; a table without `projectId` lives in
        `default_project_id`, usually the job's own project."""
        return cls(
            project_id=resource.get("projectId") or default_project_id,
            dataset_id=resource.get("datasetId"),
            table_id=resource.get("tableId"),
        )

    def __str__(self) -> str:
        return f"{self.project_id}.{self.dataset_id}.{self.table_id}"


def _section(resource: Mapping[str, Any] | None, key: str) -> Mapping[str, Any]:
    """Return a nested mapping, or an empty one if it is absent or null."""
    if not resource:
        return {}
    value = resource.get(key)
    return value if value is not None else {}


def _millis_to_datetime(value: str | int | float | None) -> datetime | None:
    """Convert the API's millisecond epoch strings to UTC datetimes."""
    if value is None or value == "":
        return None
    return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)


class Job:
    """A BigQuery job, wrapping its REST resource.

    Use `Job.from_resource` to get the most specific subclass for the
    resource's configuration.
    """

    def __init__(
        self,
        resource: Mapping[str, Any],
        *,
        table_lookup: TableLookup | None = None,
    ) -> None:
        """
        Args:
            resource: Decoded job resource
            table_lookup: Optional callable turning a TableReference into a
                table object; when omitted, table accessors return the
                TableReference itself
        """
        self.resource: Mapping[str, Any] = resource
        self.table_lookup: TableLookup | None = table_lookup

    @classmethod
    def from_resource(
        cls,
        resource: Mapping[str, Any],
        table_lookup: TableLookup | None = None,
    ) -> "Job":
        # Import at runtime to avoid circular dependency
        from gcloudkit.bigquery.copy_job import CopyJob

        if "copy" in _section(resource, "configuration"):
            return CopyJob(resource, table_lookup=table_lookup)
        return Job(resource, table_lookup=table_lookup)

    def __str__(self) -> str:
        return f"{type(self).__name__}(id='{self.job_id}', state={self.state!r})"

    @property
    def job_id(self) -> str | None:
        return _section(self.resource, "jobReference").get("jobId")

    @property
    def project_id(self) -> str | None:
        return _section(self.resource, "jobReference").get("projectId")

    @property
    def location(self) -> str | None:
        return _section(self.resource, "jobReference").get("location")

    @property
    def configuration(self) -> Mapping[str, Any]:
        return _section(self.resource, "configuration")

    @property
    def state(self) -> str | None:
        """Raw job state: `PENDING`, `RUNNING` or `DONE`."""
        return _section(self.resource, "status").get("state")

    def pending(self) -> bool:
        return self.state == PENDING

    def running(self) -> bool:
        return self.state == RUNNING

    def done(self) -> bool:
        return self.state == DONE

    def failed(self) -> bool:
        """True if the job is done and reported a fatal error."""
        return self.done() and self.error is not None

    @property
    def error(self) -> Mapping[str, Any] | None:
        """The fatal `errorResult` of the job, if any."""
        return _section(self.resource, "status").get("errorResult")

    @property
    def errors(self) -> list[Mapping[str, Any]]:
        """All errors encountered while running the job, fatal or not."""
        return list(_section(self.resource, "status").get("errors") or [])

    @property
    def created_at(self) -> datetime | None:
        return _millis_to_datetime(
            _section(self.resource, "statistics").get("creationTime")
        )

    @property
    def started_at(self) -> datetime | None:
        return _millis_to_datetime(
            _section(self.resource, "statistics").get("startTime")
        )

    @property
    def ended_at(self) -> datetime | None:
        return _millis_to_datetime(
            _section(self.resource, "statistics").get("endTime")
        )

    def _retrieve_table(self, resource: Mapping[str, Any] | None) -> Any:
        """Resolve a table resource through the lookup, if one was given."""
        if not resource:
            return None
        reference = TableReference.from_resource(resource, self.project_id)
        if self.table_lookup is None:
            return reference
        return self.table_lookup(reference)
