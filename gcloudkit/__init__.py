from .bigquery import CopyJob, Job, TableReference
from .range import Range

__all__ = [
    "Range",
    "Job",
    "CopyJob",
    "TableReference",
]
