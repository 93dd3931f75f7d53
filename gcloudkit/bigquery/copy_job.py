"""Copy jobs: a job that copies one BigQuery table onto another."""

from collections.abc import Mapping
from typing import Any

from typing_extensions import override

from gcloudkit.bigquery.job import Job, TableReference
from gcloudkit.util import (
    CREATE_IF_NEEDED,
    CREATE_NEVER,
    WRITE_APPEND,
    WRITE_EMPTY,
    WRITE_TRUNCATE,
)


def _table_name(resource: Mapping[str, Any] | None, project_id: str | None) -> str:
    if not resource:
        return "?"
    return str(TableReference.from_resource(resource, project_id))


class CopyJob(Job):
    """Job whose configuration holds a `copy` section.

    Disposition predicates compare the raw value stored in the resource.
    When the resource carries no disposition every predicate is False;
    the server-side default is not inferred.
    """

    @property
    def _copy(self) -> Mapping[str, Any]:
        return self.configuration.get("copy") or {}

    @override
    def __str__(self) -> str:
        source = _table_name(self._copy.get("sourceTable"), self.project_id)
        destination = _table_name(self._copy.get("destinationTable"), self.project_id)
        return f"CopyJob(id='{self.job_id}', {source}→{destination})"

    def source(self) -> Any:
        """The table data is copied from.

        Returns:
            None if the resource names no source table, otherwise the result
            of the table lookup (or the TableReference without one)
        """
        return self._retrieve_table(self._copy.get("sourceTable"))

    def destination(self) -> Any:
        """The table data is copied to (same return rules as `source`)."""
        return self._retrieve_table(self._copy.get("destinationTable"))

    @property
    def create_disposition(self) -> str | None:
        return self._copy.get("createDisposition")

    @property
    def write_disposition(self) -> str | None:
        return self._copy.get("writeDisposition")

    def create_if_needed(self) -> bool:
        """True when a missing destination table is created by the copy."""
        return self.create_disposition == CREATE_IF_NEEDED

    def create_never(self) -> bool:
        """True when the destination table must already exist."""
        return self.create_disposition == CREATE_NEVER

    def write_truncate(self) -> bool:
        """True when existing destination data is overwritten."""
        return self.write_disposition == WRITE_TRUNCATE

    def write_append(self) -> bool:
        """True when copied rows are appended to existing data."""
        return self.write_disposition == WRITE_APPEND

    def write_empty(self) -> bool:
        """True when the job fails if the destination already holds data."""
        return self.write_disposition == WRITE_EMPTY
