"""
Application constants.
Centralized location for all constant values used across the application.
"""

from enum import StrEnum


class JobType(StrEnum):
    """Job types. The type decides which priority queue holds the job."""

    TIME_CRITICAL = "TIME_CRITICAL"
    NOT_TIME_CRITICAL = "NOT_TIME_CRITICAL"


class JobStatus(StrEnum):
    """
    Job lifecycle states.

    State transitions:
    - QUEUED -> IN_PROGRESS (claimed by a consumer)
    - IN_PROGRESS -> CONCLUDED (owning consumer finished)
    - QUEUED -> CANCELLED
    - IN_PROGRESS -> CANCELLED
    """

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    CONCLUDED = "CONCLUDED"
    CANCELLED = "CANCELLED"


JOB_STATUS_TRANSITIONS: dict[JobStatus, frozenset[JobStatus]] = {
    JobStatus.QUEUED: frozenset({JobStatus.IN_PROGRESS, JobStatus.CANCELLED}),
    JobStatus.IN_PROGRESS: frozenset({JobStatus.CONCLUDED, JobStatus.CANCELLED}),
    JobStatus.CONCLUDED: frozenset(),
    JobStatus.CANCELLED: frozenset(),
}

# API constants
JOBS_PREFIX = "/jobs"
CONSUMER_ID_HEADER = "X-Consumer-ID"
REQUEST_ID_HEADER = "Request-Id"

# Error messages returned to API clients
ERR_INVALID_INPUT = "invalid input"
ERR_NOT_FOUND = "not found"
ERR_QUEUE_EMPTY = "queue empty"
ERR_TRANSITION_NOT_ALLOWED = "transition not allowed"

# Trace span names
SPAN_ENQUEUE_JOB = "enqueue_job"
SPAN_DEQUEUE_JOB = "dequeue_job"
SPAN_CONCLUDE_JOB = "conclude_job"
SPAN_CANCEL_JOB = "cancel_job"
SPAN_FETCH_JOB = "fetch_job"
