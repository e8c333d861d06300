"""
Type definitions for the job queue.
Contains the internal job record and the API request/response models.
"""

from jobqueue.types.api import (
    EnqueueJobRequest,
    EnqueueJobResponse,
    HealthResponse,
    JobResponse,
)
from jobqueue.types.job import Job

__all__ = [
    # API types
    "EnqueueJobRequest",
    "EnqueueJobResponse",
    "JobResponse",
    "HealthResponse",
    # Job types
    "Job",
]
