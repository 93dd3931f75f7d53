"""Accessors over BigQuery job resources."""

from gcloudkit.bigquery.copy_job import CopyJob
from gcloudkit.bigquery.job import Job, TableReference

__all__ = ["Job", "CopyJob", "TableReference"]
