"""
API request and response type definitions.

Field names on the wire follow the service's JSON convention (``ID``,
``Type``, ``Status``).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobqueue.constants import JobStatus, JobType
from jobqueue.types.job import Job


class EnqueueJobRequest(BaseModel):
    """Request body for submitting a job."""

    model_config = ConfigDict(populate_by_name=True)

    type: JobType = Field(..., alias="Type", description="Job type")
    status: JobStatus = Field(
        default=JobStatus.QUEUED,
        alias="Status",
        description="Initial status; only QUEUED is accepted",
    )

    @field_validator("status")
    @classmethod
    def status_must_be_queued(cls, value: JobStatus) -> JobStatus:
        if value != JobStatus.QUEUED:
            raise ValueError(f"new jobs must be {JobStatus.QUEUED}, got {value}")
        return value


class EnqueueJobResponse(BaseModel):
    """Response body after submitting a job."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")


class JobResponse(BaseModel):
    """Job details response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")
    type: JobType = Field(..., alias="Type")
    status: JobStatus = Field(..., alias="Status")

    @classmethod
    def from_job(cls, job: Job) -> "JobResponse":
        return cls(id=job.id, type=job.type, status=job.status)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    pending: dict[str, int]
    timestamp: datetime
